"""Voltage regulator, op-amp and sensor comparators."""

import logging
import re
from typing import Any

from .. import types as t
from .base import (
    HIGH_SIMILARITY,
    LOW_SIMILARITY,
    MEDIUM_SIMILARITY,
    ComparisonContext,
    SimilarityComparator,
    in_same_group,
    lookup_prefix,
)
from .values import parse_voltage_code

logger = logging.getLogger(__name__)


# =============================================================================
# VOLTAGE REGULATORS
# =============================================================================

FIXED = "FIXED"
ADJUSTABLE = "ADJUSTABLE"
POSITIVE = "POSITIVE"
NEGATIVE = "NEGATIVE"
LINEAR = "LINEAR"
SWITCHING = "SWITCHING"

# LM7805, L7812CV, MC78M05CDTG, UA78L05
_78XX = re.compile(r"^(?:LM|UA|MC|L)7([89])(M|L)?(\d{2})")
# LM317T, LM337
_ADJUSTABLE_3X7 = re.compile(r"^LM3([13])7")
# LM1117MP-3.3, LD1117V33, NCP1117ST33T3G, TLV1117-33
_1117 = re.compile(r"^(LM|LD|NCP|TLV)1117[A-Z]*-?(\d\.\d|\d{2}|ADJ)?")
# LD39015M33R: 150 mA, 3.3 V
_LD39015 = re.compile(r"^LD39015[A-Z]*(\d{2})?")
# TLV70033DDCR: family 00, 3.3 V
_TLV7 = re.compile(r"^TLV7(\d{2})(\d{2})")
# LM2596S-5.0, LM2576T-ADJ
_SIMPLE_SWITCHER = re.compile(r"^LM25(96|76)[A-Z]*-?(\d{1,2}\.\d|ADJ)?")
_TPS5 = re.compile(r"^(TPS5\d{3,5})")

_78XX_CURRENT = {None: 1.0, "M": 0.5, "L": 0.1}
_1117_CURRENT = {"LM": 0.8, "LD": 0.8, "NCP": 1.0, "TLV": 0.8}
_TLV7_CURRENT = {"00": 0.2, "02": 0.2, "33": 0.3, "55": 0.5, "57": 1.0}
TPS5_CURRENT = {
    "TPS5430": 3.0,
    "TPS5450": 5.0,
    "TPS54302": 3.0,
    "TPS54331": 3.0,
    "TPS54360": 3.5,
}


def _spec(regulator_type: str, voltage: float | None, polarity: str, current: float | None,
          topology: str, family: str) -> dict[str, Any]:
    return {
        "regulatorType": regulator_type,
        "outputVoltage": voltage,
        "polarity": polarity,
        "currentRating": current,
        "topology": topology,
        "family": family,
    }


def regulator_specs(mpn: str) -> dict[str, Any]:
    """Decode a regulator part number: L7805CV -> fixed +5 V, 1 A linear."""
    match = _78XX.match(mpn)
    if match:
        series, grade, voltage = match.groups()
        polarity = POSITIVE if series == "8" else NEGATIVE
        return _spec(FIXED, float(voltage), polarity, _78XX_CURRENT[grade], LINEAR, f"7{series}{grade or ''}XX")
    match = _ADJUSTABLE_3X7.match(mpn)
    if match:
        polarity = POSITIVE if match.group(1) == "1" else NEGATIVE
        return _spec(ADJUSTABLE, None, polarity, 1.5, LINEAR, f"3{match.group(1)}7")
    match = _1117.match(mpn)
    if match:
        vendor, code = match.groups()
        current = _1117_CURRENT[vendor]
        if code is None:
            return {"polarity": POSITIVE, "currentRating": current, "topology": LINEAR, "family": "1117"}
        if code == "ADJ":
            return _spec(ADJUSTABLE, None, POSITIVE, current, LINEAR, "1117")
        voltage = parse_voltage_code(code, implied_decimal="." not in code)
        return _spec(FIXED, voltage, POSITIVE, current, LINEAR, "1117")
    match = _LD39015.match(mpn)
    if match:
        voltage = parse_voltage_code(match.group(1), implied_decimal=True)
        return _spec(FIXED, voltage, POSITIVE, 0.15, LINEAR, "39015")
    match = _TLV7.match(mpn)
    if match:
        family, code = match.groups()
        voltage = parse_voltage_code(code, implied_decimal=True)
        return _spec(FIXED, voltage, POSITIVE, _TLV7_CURRENT.get(family), LINEAR, f"TLV7{family}")
    match = _SIMPLE_SWITCHER.match(mpn)
    if match:
        family, code = match.groups()
        if code is None or code == "ADJ":
            return _spec(ADJUSTABLE, None, POSITIVE, 3.0, SWITCHING, f"25{family}")
        return _spec(FIXED, parse_voltage_code(code), POSITIVE, 3.0, SWITCHING, f"25{family}")
    match = _TPS5.match(mpn)
    if match:
        _key, current = lookup_prefix(match.group(1), TPS5_CURRENT)
        return _spec(ADJUSTABLE, None, POSITIVE, current, SWITCHING, match.group(1))
    return {}


class VoltageRegulatorComparator(SimilarityComparator):
    """Regulators must agree on type, polarity, output voltage and topology.

    Any of those differing scores LOW. Otherwise the ratings are weighed,
    and two parts of the same family at the same voltage (LM7805, L7805CV,
    MC7805CTG) score at least HIGH.
    """

    name = "voltage_regulator"
    families = (t.VOLTAGE_REGULATOR,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        specs1 = regulator_specs(mpn1)
        specs2 = regulator_specs(mpn2)
        logger.debug(f"Regulator specs: {specs1} vs {specs2}")
        if not specs1 or not specs2:
            return self._series_fallback(mpn1, mpn2, context)

        for key in ("regulatorType", "polarity", "topology"):
            value1 = specs1.get(key)
            value2 = specs2.get(key)
            if value1 is not None and value2 is not None and value1 != value2:
                logger.debug(f"Regulator {key} differs: {value1} vs {value2}")
                return LOW_SIMILARITY
        if specs1.get("regulatorType") == FIXED and specs2.get("regulatorType") == FIXED:
            if specs1.get("outputVoltage") != specs2.get("outputVoltage"):
                return LOW_SIMILARITY

        specs1["package"] = context.package(mpn1) or None
        specs2["package"] = context.package(mpn2) or None
        score = self._spec_score(t.VOLTAGE_REGULATOR, context, specs1, specs2)
        if score is None:
            score = LOW_SIMILARITY
        if specs1["family"] == specs2["family"] and specs1.get("outputVoltage") == specs2.get("outputVoltage"):
            score = max(score, HIGH_SIMILARITY)
        return score


# =============================================================================
# OP-AMPS
# =============================================================================

BIPOLAR = "BIPOLAR"
JFET = "JFET"
CMOS = "CMOS"

# Both parts are op-amps, nothing else in common
OPAMP_BASELINE = 0.5

# base part -> (channels, input stage)
OPAMP_CHARACTERISTICS: dict[str, tuple[int, str]] = {
    "LM358": (2, BIPOLAR),
    "LM2904": (2, BIPOLAR),
    "MC1458": (2, BIPOLAR),
    "LM1458": (2, BIPOLAR),
    "RC4558": (2, BIPOLAR),
    "NE5532": (2, BIPOLAR),
    "LM6132": (2, BIPOLAR),
    "LM324": (4, BIPOLAR),
    "LM2902": (4, BIPOLAR),
    "MC3403": (4, BIPOLAR),
    "RC4136": (4, BIPOLAR),
    "LM741": (1, BIPOLAR),
    "UA741": (1, BIPOLAR),
    "TL071": (1, JFET),
    "TL072": (2, JFET),
    "TL074": (4, JFET),
    "TL081": (1, JFET),
    "TL082": (2, JFET),
    "TL084": (4, JFET),
    "MCP6001": (1, CMOS),
    "MCP6002": (2, CMOS),
    "MCP6004": (4, CMOS),
    "TSV911": (1, CMOS),
    "TSV912": (2, CMOS),
    "TSV914": (4, CMOS),
}

# Pin-compatible drop-ins
OPAMP_EQUIVALENTS: tuple[frozenset[str], ...] = (
    frozenset({"LM358", "MC1458", "LM1458", "RC4558", "TL072", "TL082", "NE5532", "LM2904"}),
    frozenset({"LM324", "MC3403", "RC4136", "TL074", "TL084", "LM2902"}),
    frozenset({"LM741", "UA741", "TL071", "TL081"}),
)

_OPAMP_BASE = re.compile(r"^([A-Z]+\d+)")


def opamp_base(mpn: str) -> str:
    """Part without grade and package letters: 'LM358AN' -> 'LM358'"""
    match = _OPAMP_BASE.match(mpn)
    return match.group(1) if match else mpn


class OpAmpComparator(SimilarityComparator):
    name = "opamp"
    families = (t.OPAMP,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        base1 = opamp_base(mpn1)
        base2 = opamp_base(mpn2)
        if base1 == base2 or in_same_group(base1, base2, OPAMP_EQUIVALENTS):
            return HIGH_SIMILARITY
        info1 = OPAMP_CHARACTERISTICS.get(base1)
        info2 = OPAMP_CHARACTERISTICS.get(base2)
        if info1 and info2 and info1[0] == info2[0]:
            return MEDIUM_SIMILARITY
        return OPAMP_BASELINE


# =============================================================================
# SENSORS
# =============================================================================

TEMPERATURE = "TEMPERATURE"
ACCELEROMETER = "ACCELEROMETER"
IMU = "IMU"
ENVIRONMENTAL = "ENVIRONMENTAL"

ANALOG = "ANALOG"
I2C = "I2C"
I2C_SPI = "I2C/SPI"

# base part -> (measurand, interface, accuracy in degC or None)
SENSOR_CHARACTERISTICS: dict[str, tuple[str, str, float | None]] = {
    "LM35": (TEMPERATURE, ANALOG, 0.5),
    "TMP36": (TEMPERATURE, ANALOG, 2.0),
    "MCP9700": (TEMPERATURE, ANALOG, 2.0),
    "MCP9701": (TEMPERATURE, ANALOG, 2.0),
    "LM75": (TEMPERATURE, I2C, 2.0),
    "TMP75": (TEMPERATURE, I2C, 1.0),
    "TMP102": (TEMPERATURE, I2C, 0.5),
    "TMP117": (TEMPERATURE, I2C, 0.1),
    "MCP9800": (TEMPERATURE, I2C, 1.0),
    "MCP9808": (TEMPERATURE, I2C, 0.25),
    "TC74": (TEMPERATURE, I2C, 2.0),
    "LIS3DH": (ACCELEROMETER, I2C_SPI, None),
    "LIS2DH12": (ACCELEROMETER, I2C_SPI, None),
    "LIS2DW12": (ACCELEROMETER, I2C_SPI, None),
    "BMA280": (ACCELEROMETER, I2C_SPI, None),
    "BMA400": (ACCELEROMETER, I2C_SPI, None),
    "LSM6DS3": (IMU, I2C_SPI, None),
    "LSM6DSO": (IMU, I2C_SPI, None),
    "BMI160": (IMU, I2C_SPI, None),
    "BMI270": (IMU, I2C_SPI, None),
    "BME280": (ENVIRONMENTAL, I2C_SPI, None),
    "BMP280": (ENVIRONMENTAL, I2C_SPI, None),
    "BMP388": (ENVIRONMENTAL, I2C_SPI, None),
    "BME680": (ENVIRONMENTAL, I2C_SPI, None),
}

SENSOR_EQUIVALENTS: tuple[frozenset[str], ...] = (
    frozenset({"LM75", "TMP75"}),
    frozenset({"LIS3DH", "LIS2DH12"}),
    frozenset({"TMP36", "MCP9700"}),
)

_SENSOR_FAMILY = re.compile(r"^[A-Z]+")


def sensor_specs(mpn: str) -> tuple[str | None, dict[str, Any]]:
    """Known sensor base and its specs: 'LM75BIMM' -> ('LM75', {...})"""
    key, info = lookup_prefix(mpn, SENSOR_CHARACTERISTICS)
    if info is None:
        return None, {}
    sensor_type, interface, accuracy = info
    return key, {
        "sensorType": sensor_type,
        "family": _SENSOR_FAMILY.match(key).group(0),
        "interface": interface,
        "accuracy": accuracy,
    }


class SensorComparator(SimilarityComparator):
    """Sensors measuring different quantities score 0.0.

    Known second sources (LM75/TMP75) score at least HIGH; everything else
    goes through the metadata.
    """

    name = "sensor"
    families = (t.SENSOR,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        key1, specs1 = sensor_specs(mpn1)
        key2, specs2 = sensor_specs(mpn2)
        if not specs1 or not specs2:
            return self._series_fallback(mpn1, mpn2, context)
        if specs1["sensorType"] != specs2["sensorType"]:
            logger.debug(f"Sensor types differ: {specs1['sensorType']} vs {specs2['sensorType']}")
            return 0.0

        specs1["package"] = context.package(mpn1) or None
        specs2["package"] = context.package(mpn2) or None
        score = self._spec_score(t.SENSOR, context, specs1, specs2)
        if score is None:
            score = LOW_SIMILARITY
        if key1 == key2 or in_same_group(key1, key2, SENSOR_EQUIVALENTS):
            score = max(score, HIGH_SIMILARITY)
        return score
