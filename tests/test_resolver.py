"""Tests for type specificity resolution and provider-scoped extraction."""

import pytest

from mpn_mcp import types as t
from mpn_mcp.engine import build_engine
from mpn_mcp.providers import ManufacturerProvider
from mpn_mcp.registry import PatternRegistry
from mpn_mcp.resolver import TypeResolver, specificity_score


@pytest.fixture(scope="module")
def resolver():
    return build_engine().resolver


class TestSpecificityScore:
    """Tests for the per-tag score."""

    @pytest.mark.parametrize("component_type,expected", [
        (t.OPAMP_TI, 150),
        (t.OPAMP, 50),
        (t.ANALOG_IC, -40),
        (t.DIGITAL_IC, -40),
        (t.IC, -50),
        (t.MICROCONTROLLER, 50),
        (t.RESISTOR_CHIP_VISHAY, 150),
    ])
    def test_scores(self, component_type, expected):
        assert specificity_score(component_type) == expected

    def test_vendor_tag_never_below_generic_base(self):
        for component_type in t.ALL_TYPES:
            if component_type.is_manufacturer_qualified:
                assert specificity_score(component_type) >= specificity_score(component_type.base_type)


class TestResolve:
    """Tests for picking the most specific type."""

    @pytest.mark.parametrize("mpn,expected", [
        ("LM358N", t.OPAMP_TI),
        ("lm358n", t.OPAMP_TI),
        ("LM2904DR", t.OPAMP_ST),
        ("2N7002", t.MOSFET_NEXPERIA),
        ("1N4148", t.DIODE_ONSEMI),
        ("GRM188R71H104KA93D", t.CAPACITOR_CERAMIC_MURATA),
        ("CRCW060310K0FKEA", t.RESISTOR_CHIP_VISHAY),
        ("STM32F103C8T6", t.MICROCONTROLLER_ST),
        ("ATMEGA328P-PU", t.MICROCONTROLLER_ATMEL),
        ("W25Q64JVSSIQ", t.MEMORY_FLASH_WINBOND),
        ("SN74HC00N", t.LOGIC_IC_TI),
        ("22-23-2021", t.CONNECTOR_MOLEX),
        ("LM7805", t.VOLTAGE_REGULATOR_LINEAR_TI),
        ("L7805CV", t.VOLTAGE_REGULATOR_LINEAR_ST),
        ("APTD1608SGC", t.LED_SMD_KINGBRIGHT),
        ("MBR20100", t.DIODE_ONSEMI),
    ])
    def test_known_parts(self, resolver, mpn, expected):
        assert resolver.resolve(mpn) is expected

    @pytest.mark.parametrize("mpn", [None, "", "   ", "ZZZ999-NOPE"])
    def test_unknown(self, resolver, mpn):
        assert resolver.resolve(mpn) is None

    def test_deterministic(self, resolver):
        results = {resolver.resolve("LM2904DR") for _ in range(5)}
        assert results == {t.OPAMP_ST}
        assert build_engine().resolver.resolve("LM2904DR") is t.OPAMP_ST

    def test_candidates_in_provider_order(self, resolver):
        providers = [c.provider_id for c in resolver.candidates("LM2904DR")]
        assert providers == sorted(providers)
        assert {"st", "ti"} <= set(providers)

    def test_matching_types_include_generic_buckets(self, resolver):
        types = resolver.matching_types("LM358N")
        assert t.OPAMP_TI in types
        assert len(types) == len(set(types))
        assert t.OPAMP in types
        assert t.IC in types


class _FailingProvider(ManufacturerProvider):
    provider_id = "broken"
    name = "Broken"
    PATTERNS = {t.LED: (r'^X',)}

    def matches(self, mpn, component_type, registry):
        raise RuntimeError("boom")


class _GenericOnlyProvider(ManufacturerProvider):
    provider_id = "generic"
    name = "Generic"
    PATTERNS = {t.CRYSTAL: (r'^HC49',)}

    def supported_types(self):
        return frozenset()


class TestResolverEdgeCases:
    """Tests for provider failures and the generic sweep."""

    def _resolver(self, *providers):
        registry = PatternRegistry()
        for provider in providers:
            provider.register_patterns(registry)
        return TypeResolver(registry, list(providers))

    def test_provider_exception_is_no_match(self):
        resolver = self._resolver(_FailingProvider())
        assert resolver.candidates("X1") == []
        assert resolver.resolve("Y1") is None

    def test_generic_sweep_fallback(self):
        resolver = self._resolver(_GenericOnlyProvider())
        assert resolver.candidates("HC49-16MHZ") == []
        assert resolver.resolve("HC49-16MHZ") is t.CRYSTAL


class TestExtraction:
    """Tests for package and series extraction through the owning provider."""

    @pytest.mark.parametrize("mpn,expected", [
        ("LM358N", "DIP"),
        ("LM358DR", "SOIC"),
        ("ATMEGA328P-PU", "DIP"),
        ("ATMEGA328P-AU", "TQFP"),
        ("MCP6002-I/SN", "SOIC"),
        ("STM32F103C8T6", "LQFP"),
        ("L7805CV", "TO-220"),
        ("GRM188R71H104KA93D", "0603"),
        ("W25Q64JVSSIQ", "SOIC"),
        ("ZZZ999-NOPE", ""),
        (None, ""),
    ])
    def test_package(self, resolver, mpn, expected):
        assert resolver.extract_package_code(mpn) == expected

    @pytest.mark.parametrize("mpn,expected", [
        ("LM358N", "LM358"),
        ("SN74HC00N", "SN74HC00"),
        ("STM32F103C8T6", "STM32F103"),
        ("PIC16F877A-I/P", "PIC16F877"),
        ("GRM188R71H104KA93D", "GRM188R71H104"),
        ("LQG15HS10NJ02D", "LQG15HS10N"),
        ("1N4148", "1N4148"),
        ("2N2222A", "2N2222"),
        ("24LC256-I/SN", "24LC256"),
        ("BZX84C5V1", "BZX84C5V1"),
        ("CRCW060310K0FKEA", "CRCW060310K0"),
        ("RC0603FR-0710KL", "RC060310K"),
        ("CC0603KRX7R9BB104", "CC0603X7R9104"),
        ("22-23-2021", "2223"),
        ("ZZZ999-NOPE", ""),
        ("", ""),
    ])
    def test_series(self, resolver, mpn, expected):
        assert resolver.extract_series(mpn) == expected

    def test_official_replacement(self, resolver):
        assert resolver.is_official_replacement("LM358N", "LM358P")
        assert not resolver.is_official_replacement("LM358N", "LM358DR")
        assert not resolver.is_official_replacement("LM358N", "LM2904DR")
        assert not resolver.is_official_replacement("LM358N", None)

    @pytest.mark.parametrize("mpn1,mpn2", [
        ("2N2222", "2N3906"),
        ("1N4148", "1N4007"),
        ("CRCW060310K0FKEA", "CRCW06031K00FKEA"),
        ("24LC256", "24LC02B"),
        ("GRM188R71H104KA93D", "GRM188R71H103KA01D"),
        ("RC0603FR-0710KL", "RC0603FR-071KL"),
    ])
    def test_different_designators_not_replacements(self, resolver, mpn1, mpn2):
        assert not resolver.is_official_replacement(mpn1, mpn2)

    @pytest.mark.parametrize("mpn1,mpn2", [
        ("CRCW060310K0FKEA", "CRCW060310K0JKEA"),
        ("24LC256-I/SN", "24LC256T-I/SN"),
    ])
    def test_same_designator_replacements(self, resolver, mpn1, mpn2):
        assert resolver.is_official_replacement(mpn1, mpn2)

    def test_provider_lookup(self, resolver):
        assert resolver.provider("ti").name == "Texas Instruments"
        assert resolver.provider("nope") is None
        assert resolver.find_provider("GRM188R71H104KA93D").provider_id == "murata"
        assert resolver.find_provider("ZZZ999-NOPE") is None
