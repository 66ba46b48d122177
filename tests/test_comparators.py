"""Tests for the component-specific comparators, scored through the pipeline."""

import pytest

from mpn_mcp import types as t
from mpn_mcp.similarity import ComparisonContext, SimilarityComparator
from mpn_mcp.similarity.analog import opamp_base, regulator_specs, sensor_specs
from mpn_mcp.similarity.connectors import connector_specs
from mpn_mcp.similarity.digital import function_group, logic_part, mcu_specs, memory_specs
from mpn_mcp.similarity.discretes import SCHOTTKY, diode_specs
from mpn_mcp.similarity.passives import PassiveComparator


def score(pipeline, mpn1, mpn2):
    return pipeline.similarity(mpn1, mpn2)


class TestBaseComparator:
    """Tests for the shared compare() guard rails."""

    class Exploding(SimilarityComparator):
        name = "exploding"
        families = (t.LED,)

        def _compare(self, mpn1, mpn2, context):
            raise RuntimeError("boom")

    class Overshooting(SimilarityComparator):
        name = "overshooting"
        families = (t.LED,)

        def _compare(self, mpn1, mpn2, context):
            return 1.7

    def test_exception_scores_zero(self):
        assert self.Exploding().compare("A1", "A2") == 0.0

    def test_score_clamped(self):
        assert self.Overshooting().compare("A1", "A2") == 1.0

    def test_empty_input(self):
        assert self.Overshooting().compare("", "A2") == 0.0
        assert self.Overshooting().compare("A1", None) == 0.0

    def test_cross_family_scores_zero(self):
        context = ComparisonContext(type1=t.LED_STANDARD_KINGBRIGHT, type2=t.RESISTOR)
        assert self.Overshooting().compare("A1", "A2", context) == 0.0

    def test_applicability_follows_lineage(self):
        comparator = self.Overshooting()
        assert comparator.is_applicable(t.LED_SMD_KINGBRIGHT)
        assert not comparator.is_applicable(t.DIODE)
        assert not comparator.is_applicable(None)


class TestVoltageRegulator:
    """Tests for regulator decoding and scoring."""

    def test_decode_78xx(self):
        specs = regulator_specs("L7805CV")
        assert specs["regulatorType"] == "FIXED"
        assert specs["outputVoltage"] == 5.0
        assert specs["polarity"] == "POSITIVE"
        assert specs["currentRating"] == 1.0

    def test_decode_low_current_grade(self):
        assert regulator_specs("MC78L05ACP")["currentRating"] == 0.1

    def test_decode_1117_implied_decimal(self):
        assert regulator_specs("LD1117V33")["outputVoltage"] == pytest.approx(3.3)
        assert regulator_specs("LM1117MP-3.3")["outputVoltage"] == pytest.approx(3.3)

    def test_decode_adjustable(self):
        specs = regulator_specs("LM317T")
        assert specs["regulatorType"] == "ADJUSTABLE"
        assert specs["outputVoltage"] is None

    def test_decode_unknown(self):
        assert regulator_specs("XYZ123") == {}

    def test_second_source(self, pipeline):
        assert score(pipeline, "LM7805", "L7805CV") >= 0.9

    def test_1117_second_source(self, pipeline):
        assert score(pipeline, "LM1117MP-3.3", "LD1117V33") >= 0.9

    @pytest.mark.parametrize("mpn1,mpn2", [
        ("LM7805", "LM7812"),
        ("LM7805", "LM7905"),
        ("LM317T", "LM7805"),
        ("LM1117-3.3", "LM1117-5.0"),
    ])
    def test_mismatch_is_low(self, pipeline, mpn1, mpn2):
        assert score(pipeline, mpn1, mpn2) == pytest.approx(0.3)

    def test_explain_names_comparator(self, pipeline):
        assert pipeline.explain("LM7805", "L7805CV").comparator == "voltage_regulator"


class TestOpAmp:
    """Tests for op-amp equivalence scoring."""

    def test_base(self):
        assert opamp_base("LM358AN") == "LM358"
        assert opamp_base("TL072CP") == "TL072"

    def test_same_base(self, pipeline):
        assert score(pipeline, "LM358N", "LM358D") == pytest.approx(0.9)

    def test_equivalent_group(self, pipeline):
        assert score(pipeline, "LM358N", "TL072CP") == pytest.approx(0.9)

    def test_same_channel_count(self, pipeline):
        assert score(pipeline, "LM358N", "MCP6002") == pytest.approx(0.7)

    def test_baseline(self, pipeline):
        assert score(pipeline, "LM358N", "LM324N") == pytest.approx(0.5)

    def test_different_family(self, pipeline):
        assert score(pipeline, "LM358N", "LM7805") == 0.0


class TestSensor:
    """Tests for sensor scoring."""

    def test_specs(self):
        key, specs = sensor_specs("LM75BIMM")
        assert key == "LM75"
        assert specs["sensorType"] == "TEMPERATURE"
        assert specs["family"] == "LM"

    def test_unknown(self):
        assert sensor_specs("ABC1") == (None, {})

    def test_second_source(self, pipeline):
        assert score(pipeline, "LM75", "TMP75") >= 0.9

    def test_different_measurand(self, pipeline):
        assert score(pipeline, "TMP36", "LIS3DH") == 0.0

    def test_related_family(self, pipeline):
        assert score(pipeline, "BMP280", "BME280") == pytest.approx(1.65 / 2.14)


class TestLogic:
    """Tests for 74-series and CD4000 logic scoring."""

    def test_parse(self):
        part = logic_part("74LVC1G08GW")
        assert (part.technology, part.gates, part.function) == ("LVC", "1G", "08")
        assert logic_part("CD4017BE").technology == "CD4000"
        assert logic_part("NE555") is None

    def test_function_groups(self):
        assert function_group("00") == "NAND"
        assert function_group("10") == "NAND"
        assert function_group("04") == "NOT"
        assert function_group("999") is None

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("SN74HC00N", "74HC00D", 0.9),
        ("SN74LS00N", "74HCT00D", 0.9),
        ("74HC00D", "74LVC00D", 0.7),
        ("74HC00D", "74HC10D", 0.5),
        ("74HC00D", "74HC04D", 0.3),
        ("74LVC1G08GW", "74HC08D", 0.3),
        ("CD4017BE", "CD4017BM96", 0.9),
        ("CD4017BE", "74HC4017D", 0.7),
    ])
    def test_scores(self, pipeline, mpn1, mpn2, expected):
        assert score(pipeline, mpn1, mpn2) == pytest.approx(expected)


class TestMemory:
    """Tests for serial memory scoring."""

    def test_specs(self):
        assert memory_specs("24LC256")["capacity"] == 256
        assert memory_specs("25LC640")["capacity"] == 64
        flash = memory_specs("W25Q64JVSSIQ")
        assert flash["type"] == "FLASH"
        assert flash["capacity"] == 64 * 1024

    def test_second_source(self, pipeline):
        assert score(pipeline, "24LC256", "AT24C256") == pytest.approx(1.0)

    def test_larger_candidate(self, pipeline):
        assert score(pipeline, "24LC256", "24LC512") == pytest.approx(3.48 / 3.53)

    def test_smaller_candidate_capped(self, pipeline):
        assert score(pipeline, "24LC512", "24LC256") == pytest.approx(0.3)

    @pytest.mark.parametrize("mpn2", ["W25Q64JVSSIQ", "25LC256"])
    def test_type_or_bus_mismatch(self, pipeline, mpn2):
        assert score(pipeline, "24LC256", mpn2) == pytest.approx(0.3)


class TestMicrocontroller:
    """Tests for MCU scoring."""

    def test_stm32_specs(self):
        specs = mcu_specs("STM32F103C8T6")
        assert specs["family"] == "STM32"
        assert specs["flashSize"] == 64
        assert specs["ioCount"] == 48

    def test_avr_specs(self):
        specs = mcu_specs("ATMEGA328P-PU")
        assert specs["flashSize"] == 32
        assert specs["ramSize"] == 2

    def test_pic_family(self):
        assert mcu_specs("PIC16F877A")["family"] == "PIC16"

    def test_more_flash(self, pipeline):
        assert score(pipeline, "STM32F103C8T6", "STM32F103CBT6") == pytest.approx(2.2755 / 2.3)

    def test_less_flash(self, pipeline):
        assert score(pipeline, "STM32F103CBT6", "STM32F103C8T6") == pytest.approx(1.81 / 2.3)

    def test_package_change(self, pipeline):
        assert score(pipeline, "ATMEGA328P-PU", "ATMEGA328P-AU") == pytest.approx(2.63 / 2.79)

    def test_cross_architecture(self, pipeline):
        assert score(pipeline, "STM32F103C8T6", "ATMEGA328P-AU") == 0.0


class TestConnector:
    """Tests for Molex connector scoring."""

    def test_specs(self):
        assert connector_specs("22-23-2021") == {
            "family": "KK 254", "series": "2223", "pinCount": 2, "pitch": 2.54,
        }
        assert connector_specs("53047-0210")["family"] == "PicoBlade"
        assert connector_specs("12345") == {}

    def test_pin_count_mismatch(self, pipeline):
        assert score(pipeline, "22-23-2021", "22-23-2031") == pytest.approx(0.3)

    def test_sibling_series(self, pipeline):
        assert score(pipeline, "22-23-2021", "22-27-2021") == pytest.approx(0.8)

    def test_other_family(self, pipeline):
        assert score(pipeline, "22-23-2021", "53047-0210") == 0.0

    def test_hyphenation_is_exact(self, pipeline):
        assert score(pipeline, "22-23-2021", "22232021") == 1.0


class TestPassives:
    """Tests for resistor and capacitor scoring."""

    def test_decoder_required(self):
        with pytest.raises(TypeError):
            PassiveComparator()

    def test_capacitor_cross_vendor(self, pipeline):
        assert score(pipeline, "GRM188R71H104KA93D", "CC0603KRX7R9BB104") == pytest.approx(1.0)

    def test_resistor_cross_vendor(self, pipeline):
        assert score(pipeline, "CRCW060310K0FKEA", "RC0603FR-0710KL") == pytest.approx(1.0)

    def test_tolerance_mismatch(self, pipeline):
        assert score(pipeline, "CRCW060310K0FKEA", "CRCW060310K0JKEA") == pytest.approx(0.3)

    def test_value_mismatch(self, pipeline):
        assert score(pipeline, "CRCW060310K0FKEA", "CRCW06034K70FKEA") <= 0.3


class TestDiode:
    """Tests for diode scoring."""

    def test_higher_voltage_candidate(self, pipeline):
        assert score(pipeline, "1N4001", "1N4007") == pytest.approx(0.98333, abs=1e-4)

    def test_lower_voltage_candidate(self, pipeline):
        assert score(pipeline, "1N4007", "1N4001") == pytest.approx(0.3)

    def test_signal_equivalents(self, pipeline):
        assert score(pipeline, "1N4148", "1N4448") == pytest.approx(0.9)

    def test_signal_vs_rectifier(self, pipeline):
        assert score(pipeline, "1N4148", "1N4007") == pytest.approx(0.3)

    def test_zener_voltage(self, pipeline):
        assert score(pipeline, "1N4733A", "BZX84C5V1") == pytest.approx(0.9)
        assert score(pipeline, "1N4733A", "BZX84C3V3") == pytest.approx(0.3)

    @pytest.mark.parametrize("mpn,voltage,current", [
        ("MBR0520", 20.0, 0.5),
        ("MBRS340", 40.0, 3.0),
        ("MBR2045", 45.0, 20.0),
        ("MBRS3100", 100.0, 3.0),
        ("MBR20100", 100.0, 20.0),
    ])
    def test_mbr_ratings(self, mpn, voltage, current):
        assert diode_specs(mpn) == {"type": SCHOTTKY, "voltageRating": voltage, "currentRating": current}

    def test_mbr_lower_voltage_candidate(self, pipeline):
        assert score(pipeline, "MBR20100", "MBR2045") == pytest.approx(0.3)


class TestMosfetAndTransistor:
    """Tests for MOSFET and BJT scoring."""

    def test_channel_mismatch(self, pipeline):
        assert score(pipeline, "IRF540N", "IRF9540N") == 0.0

    def test_small_signal_mismatch(self, pipeline):
        assert score(pipeline, "2N7002", "BSS138") <= 0.3

    def test_polarity_mismatch(self, pipeline):
        assert score(pipeline, "2N3904", "2N3906") == 0.0

    def test_smd_equivalent(self, pipeline):
        assert score(pipeline, "2N3904", "MMBT3904") == pytest.approx(0.9)


class TestLED:
    """Tests for LED scoring."""

    def test_color_mismatch(self, pipeline):
        assert score(pipeline, "L-7113ID", "L-7113GD") == pytest.approx(0.3)

    def test_same_color_other_chip(self, pipeline):
        assert score(pipeline, "L-7113ID", "L-7113SRD") >= 0.9

    def test_smd_second_source(self, pipeline):
        assert score(pipeline, "APT2012SGC", "KP-2012SGC") >= 0.9

    def test_different_package(self, pipeline):
        assert score(pipeline, "L-934ID", "L-7113ID") == pytest.approx(1 / 1.49)
