"""Diode, MOSFET, bipolar transistor and LED comparators.

Discrete part numbers rarely spell out their ratings, so each comparator
keeps a table of well-known parts and a few naming heuristics per vendor.
Specs from both parts are weighed through the type metadata; a polarity or
channel mismatch is never interchangeable and scores 0.0.
"""

import logging
import re
from typing import Any, NamedTuple

from .. import types as t
from .base import (
    HIGH_SIMILARITY,
    LOW_SIMILARITY,
    ComparisonContext,
    SimilarityComparator,
    in_same_group,
    lookup_prefix,
)
from .values import parse_voltage_code

logger = logging.getLogger(__name__)


# =============================================================================
# DIODES
# =============================================================================

SIGNAL = "SIGNAL"
RECTIFIER = "RECTIFIER"
SCHOTTKY = "SCHOTTKY"
ZENER = "ZENER"


class DiodeRating(NamedTuple):
    kind: str
    voltage: float
    current: float


# voltage in volts, current in amps
KNOWN_DIODES: dict[str, DiodeRating] = {
    "1N4148": DiodeRating(SIGNAL, 100, 0.2),
    "1N914": DiodeRating(SIGNAL, 100, 0.2),
    "1N4448": DiodeRating(SIGNAL, 100, 0.2),
    "BAS16": DiodeRating(SIGNAL, 100, 0.2),
    "BAV99": DiodeRating(SIGNAL, 100, 0.2),
    "BAV21": DiodeRating(SIGNAL, 250, 0.2),
    "1N4001": DiodeRating(RECTIFIER, 50, 1.0),
    "1N4002": DiodeRating(RECTIFIER, 100, 1.0),
    "1N4003": DiodeRating(RECTIFIER, 200, 1.0),
    "1N4004": DiodeRating(RECTIFIER, 400, 1.0),
    "1N4005": DiodeRating(RECTIFIER, 600, 1.0),
    "1N4006": DiodeRating(RECTIFIER, 800, 1.0),
    "1N4007": DiodeRating(RECTIFIER, 1000, 1.0),
    "1N5817": DiodeRating(SCHOTTKY, 20, 1.0),
    "1N5818": DiodeRating(SCHOTTKY, 30, 1.0),
    "1N5819": DiodeRating(SCHOTTKY, 40, 1.0),
    "BAT54": DiodeRating(SCHOTTKY, 30, 0.2),
    "BAT42": DiodeRating(SCHOTTKY, 30, 0.2),
    "BAT43": DiodeRating(SCHOTTKY, 30, 0.2),
    "BAT46": DiodeRating(SCHOTTKY, 100, 0.15),
    "BAT48": DiodeRating(SCHOTTKY, 40, 0.35),
    "BAT85": DiodeRating(SCHOTTKY, 30, 0.2),
}

# Interchangeable small-signal diodes
SIGNAL_EQUIVALENTS: tuple[frozenset[str], ...] = (
    frozenset({"1N4148", "1N914", "1N4448"}),
    frozenset({"1N4148", "BAS16"}),
)

# Zener voltage per 1N47xx number
ZENER_1N47_VOLTAGES: dict[int, float] = {
    28: 3.3, 29: 3.6, 30: 3.9, 31: 4.3, 32: 4.7, 33: 5.1, 34: 5.6, 35: 6.2,
    36: 6.8, 37: 7.5, 38: 8.2, 39: 9.1, 40: 10.0, 41: 11.0, 42: 12.0, 43: 13.0,
    44: 15.0, 45: 16.0, 46: 18.0, 47: 20.0, 48: 22.0, 49: 24.0, 50: 27.0, 51: 30.0,
    52: 33.0, 53: 36.0, 54: 39.0, 55: 43.0, 56: 47.0, 57: 51.0, 58: 56.0, 59: 62.0,
    60: 68.0, 61: 75.0,
}

_ZENER_1N47 = re.compile(r"^1N47(\d{2})")
_ZENER_BZX = re.compile(r"^BZX(?:55|79|84)-?[A-C]?(\d+V\d*|\d+)")
# SS14: 1 A, 40 V
_SCHOTTKY_SS = re.compile(r"^SS(\d)(\d)")
# MBR0520: 0.5 A 20 V, MBRS340: 3 A 40 V, MBR20100: 20 A 100 V, MBR1100: 1 A 100 V
_SCHOTTKY_MBR = re.compile(r"^MBR[SA]?(\d{3,5})")
_THREE_DIGIT_VOLTAGES = ("100", "150", "200")
# PMEG2010: 20 V, 1 A
_SCHOTTKY_PMEG = re.compile(r"^PMEG(\d{2})(\d{2})")


def diode_specs(mpn: str) -> dict[str, Any]:
    """Decode diode kind and ratings from the part number."""
    match = _ZENER_1N47.match(mpn)
    if match and int(match.group(1)) in ZENER_1N47_VOLTAGES:
        return {"type": ZENER, "voltageRating": ZENER_1N47_VOLTAGES[int(match.group(1))], "currentRating": 1.0}
    match = _ZENER_BZX.match(mpn)
    if match:
        return {"type": ZENER, "voltageRating": parse_voltage_code(match.group(1))}
    _key, rating = lookup_prefix(mpn, KNOWN_DIODES)
    if rating is not None:
        return {"type": rating.kind, "voltageRating": rating.voltage, "currentRating": rating.current}
    match = _SCHOTTKY_SS.match(mpn)
    if match:
        return {"type": SCHOTTKY, "voltageRating": int(match.group(2)) * 10.0, "currentRating": float(match.group(1))}
    match = _SCHOTTKY_MBR.match(mpn)
    if match:
        code = match.group(1)
        three_digit = len(code) == 4 and code[0] != "0" and code[-3:] in _THREE_DIGIT_VOLTAGES
        split = -3 if len(code) == 5 or three_digit else -2
        amps = code[:split]
        current = float(amps) / 10 if amps.startswith("0") else float(amps)
        return {"type": SCHOTTKY, "voltageRating": float(code[split:]), "currentRating": current}
    match = _SCHOTTKY_PMEG.match(mpn)
    if match:
        return {"type": SCHOTTKY, "voltageRating": float(match.group(1)), "currentRating": int(match.group(2)) / 10}
    return {}


class DiodeComparator(SimilarityComparator):
    """Diodes compare by kind first.

    Zeners must have the same breakdown voltage. Known small-signal
    equivalents (1N4148/1N914) score HIGH. Rectifiers and Schottkys go
    through the metadata, where the candidate must meet the original's
    voltage and current ratings.
    """

    name = "diode"
    families = (t.DIODE,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        specs1 = diode_specs(mpn1)
        specs2 = diode_specs(mpn2)
        logger.debug(f"Diode specs: {specs1} vs {specs2}")
        kind1 = specs1.get("type")
        kind2 = specs2.get("type")
        if kind1 is None or kind2 is None:
            return self._series_fallback(mpn1, mpn2, context)
        if kind1 != kind2:
            return LOW_SIMILARITY

        if kind1 == ZENER:
            same = specs1.get("voltageRating") == specs2.get("voltageRating")
            return HIGH_SIMILARITY if same else LOW_SIMILARITY

        if kind1 == SIGNAL:
            key1, _ = lookup_prefix(mpn1, KNOWN_DIODES)
            key2, _ = lookup_prefix(mpn2, KNOWN_DIODES)
            if key1 == key2 or in_same_group(key1, key2, SIGNAL_EQUIVALENTS):
                return HIGH_SIMILARITY

        specs1["package"] = context.package(mpn1) or None
        specs2["package"] = context.package(mpn2) or None
        score = self._spec_score(t.DIODE, context, specs1, specs2)
        return LOW_SIMILARITY if score is None else score


# =============================================================================
# MOSFETS
# =============================================================================


class MosfetRating(NamedTuple):
    channel: str
    voltage: float
    current: float
    package: str
    rds_on: float


KNOWN_MOSFETS: dict[str, MosfetRating] = {
    "IRF540N": MosfetRating("N", 100, 33, "TO-220", 0.044),
    "IRF9540N": MosfetRating("P", 100, 23, "TO-220", 0.117),
    "IRFZ44N": MosfetRating("N", 55, 49, "TO-220", 0.0175),
    "IRLZ44N": MosfetRating("N", 55, 47, "TO-220", 0.022),
    "IRF3205": MosfetRating("N", 55, 110, "TO-220", 0.008),
    "IRLML2502": MosfetRating("N", 20, 4.2, "SOT-23", 0.045),
    "IRLML6402": MosfetRating("P", 20, 3.7, "SOT-23", 0.065),
    "2N7002": MosfetRating("N", 60, 0.115, "SOT-23", 7.5),
    "BSS138": MosfetRating("N", 50, 0.22, "SOT-23", 3.5),
    "BSS84": MosfetRating("P", 50, 0.13, "SOT-23", 10.0),
    "SI2302": MosfetRating("N", 20, 2.6, "SOT-23", 0.085),
    "SI2301": MosfetRating("P", 20, 2.3, "SOT-23", 0.13),
    "STP55NF06": MosfetRating("N", 60, 50, "TO-220", 0.018),
    "FQP30N06L": MosfetRating("N", 60, 32, "TO-220", 0.035),
}

# STP55NF06: 55 A, N channel, 60 V
_CURRENT_CHANNEL_VOLTAGE = re.compile(r"^(STP|STD|STB|FQP|FQD|SUD)(\d+)([NP])[A-Z]?(\d{2,3})")
# BSC016N06: 1.6 mOhm, N channel, 60 V
_RDS_CHANNEL_VOLTAGE = re.compile(r"^(BSC|IPB|IPD|IPP)(\d{3})([NP])(\d{2})")
# PMV65XP, NTR4003N
_CHANNEL_SUFFIX = re.compile(r"^(?:PMV\d{2,3}[A-Z]|NTR\d{4})([NP])")

MOSFET_PACKAGES: dict[str, str] = {
    "STP": "TO-220",
    "FQP": "TO-220",
    "IPP": "TO-220",
    "STD": "DPAK",
    "FQD": "DPAK",
    "SUD": "DPAK",
    "IPD": "DPAK",
    "STB": "D2PAK",
    "IPB": "D2PAK",
    "BSC": "TDSON-8",
}


def mosfet_specs(mpn: str) -> dict[str, Any]:
    """Channel, ratings and package from the part number."""
    _key, rating = lookup_prefix(mpn, KNOWN_MOSFETS)
    if rating is not None:
        return {
            "channel": rating.channel,
            "voltageRating": rating.voltage,
            "currentRating": rating.current,
            "package": rating.package,
            "rdsOn": rating.rds_on,
        }
    match = _CURRENT_CHANNEL_VOLTAGE.match(mpn)
    if match:
        prefix, current, channel, voltage = match.groups()
        return {
            "channel": channel,
            "voltageRating": int(voltage) * 10.0,
            "currentRating": float(current),
            "package": MOSFET_PACKAGES.get(prefix),
        }
    match = _RDS_CHANNEL_VOLTAGE.match(mpn)
    if match:
        prefix, rds, channel, voltage = match.groups()
        return {
            "channel": channel,
            "voltageRating": int(voltage) * 10.0,
            "package": MOSFET_PACKAGES.get(prefix),
            "rdsOn": int(rds) / 10_000,
        }
    match = _CHANNEL_SUFFIX.match(mpn)
    if match:
        return {"channel": match.group(1), "package": "SOT-23"}
    if mpn.startswith("IRF9"):
        return {"channel": "P"}
    if mpn.startswith(("IRF", "IRL")):
        return {"channel": "N"}
    return {}


class MosfetComparator(SimilarityComparator):
    name = "mosfet"
    families = (t.MOSFET,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        specs1 = mosfet_specs(mpn1)
        specs2 = mosfet_specs(mpn2)
        logger.debug(f"MOSFET specs: {specs1} vs {specs2}")
        channel1 = specs1.get("channel")
        channel2 = specs2.get("channel")
        if channel1 and channel2 and channel1 != channel2:
            logger.debug(f"Different channel: {channel1} vs {channel2} -> 0.0")
            return 0.0
        score = self._spec_score(t.MOSFET, context, specs1, specs2)
        if score is None:
            return self._series_fallback(mpn1, mpn2, context)
        return score


# =============================================================================
# BIPOLAR TRANSISTORS
# =============================================================================


class TransistorRating(NamedTuple):
    polarity: str
    voltage: float
    current: float
    package: str
    hfe: float


# voltage = Vceo in volts, current = Ic in mA
KNOWN_TRANSISTORS: dict[str, TransistorRating] = {
    "2N2222": TransistorRating("NPN", 40, 800, "TO-18", 100),
    "PN2222": TransistorRating("NPN", 40, 800, "TO-92", 100),
    "MMBT2222": TransistorRating("NPN", 40, 600, "SOT-23", 100),
    "PMBT2222": TransistorRating("NPN", 40, 600, "SOT-23", 100),
    "2N3904": TransistorRating("NPN", 40, 200, "TO-92", 100),
    "MMBT3904": TransistorRating("NPN", 40, 200, "SOT-23", 100),
    "PMBT3904": TransistorRating("NPN", 40, 200, "SOT-23", 100),
    "2N4401": TransistorRating("NPN", 40, 600, "TO-92", 100),
    "MMBT4401": TransistorRating("NPN", 40, 600, "SOT-23", 100),
    "2N5551": TransistorRating("NPN", 160, 600, "TO-92", 80),
    "BC546": TransistorRating("NPN", 65, 100, "TO-92", 200),
    "BC547": TransistorRating("NPN", 45, 100, "TO-92", 200),
    "BC548": TransistorRating("NPN", 30, 100, "TO-92", 200),
    "BC337": TransistorRating("NPN", 45, 800, "TO-92", 250),
    "BC817": TransistorRating("NPN", 45, 500, "SOT-23", 250),
    "BC846": TransistorRating("NPN", 65, 100, "SOT-23", 200),
    "BC847": TransistorRating("NPN", 45, 100, "SOT-23", 200),
    "BC848": TransistorRating("NPN", 30, 100, "SOT-23", 200),
    "2N2907": TransistorRating("PNP", 40, 600, "TO-18", 100),
    "MMBT2907": TransistorRating("PNP", 40, 600, "SOT-23", 100),
    "2N3906": TransistorRating("PNP", 40, 200, "TO-92", 100),
    "MMBT3906": TransistorRating("PNP", 40, 200, "SOT-23", 100),
    "PMBT3906": TransistorRating("PNP", 40, 200, "SOT-23", 100),
    "2N4403": TransistorRating("PNP", 40, 600, "TO-92", 100),
    "MMBT4403": TransistorRating("PNP", 40, 600, "SOT-23", 100),
    "BC556": TransistorRating("PNP", 65, 100, "TO-92", 200),
    "BC557": TransistorRating("PNP", 45, 100, "TO-92", 200),
    "BC558": TransistorRating("PNP", 30, 100, "TO-92", 200),
    "BC327": TransistorRating("PNP", 45, 800, "TO-92", 250),
    "BC807": TransistorRating("PNP", 45, 500, "SOT-23", 250),
    "BC856": TransistorRating("PNP", 65, 100, "SOT-23", 200),
    "BC857": TransistorRating("PNP", 45, 100, "SOT-23", 200),
    "BC858": TransistorRating("PNP", 30, 100, "SOT-23", 200),
}

# Same die in different packages
TRANSISTOR_EQUIVALENTS: tuple[frozenset[str], ...] = (
    frozenset({"2N2222", "PN2222", "MMBT2222", "PMBT2222"}),
    frozenset({"2N3904", "MMBT3904", "PMBT3904"}),
    frozenset({"2N4401", "MMBT4401"}),
    frozenset({"2N2907", "MMBT2907"}),
    frozenset({"2N3906", "MMBT3906", "PMBT3906"}),
    frozenset({"2N4403", "MMBT4403"}),
    frozenset({"BC546", "BC846"}),
    frozenset({"BC547", "BC847"}),
    frozenset({"BC548", "BC848"}),
    frozenset({"BC337", "BC817"}),
    frozenset({"BC556", "BC856"}),
    frozenset({"BC557", "BC857"}),
    frozenset({"BC558", "BC858"}),
    frozenset({"BC327", "BC807"}),
)


def transistor_specs(mpn: str) -> tuple[str | None, dict[str, Any]]:
    """Table key and specs for a bipolar transistor."""
    key, rating = lookup_prefix(mpn, KNOWN_TRANSISTORS)
    if rating is None:
        return None, {}
    return key, {
        "polarity": rating.polarity,
        "voltageRating": rating.voltage,
        "currentRating": rating.current,
        "package": rating.package,
        "hfe": rating.hfe,
    }


class TransistorComparator(SimilarityComparator):
    name = "transistor"
    families = (t.TRANSISTOR,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        key1, specs1 = transistor_specs(mpn1)
        key2, specs2 = transistor_specs(mpn2)
        logger.debug(f"Transistor specs: {specs1} vs {specs2}")
        polarity1 = specs1.get("polarity")
        polarity2 = specs2.get("polarity")
        if polarity1 and polarity2 and polarity1 != polarity2:
            logger.debug(f"Different polarity: {polarity1} vs {polarity2} -> 0.0")
            return 0.0
        score = self._spec_score(t.TRANSISTOR, context, specs1, specs2)
        if score is None:
            return self._series_fallback(mpn1, mpn2, context)
        if in_same_group(key1, key2, TRANSISTOR_EQUIVALENTS):
            score = max(score, HIGH_SIMILARITY)
        return score


# =============================================================================
# LEDS
# =============================================================================

RED = "RED"
GREEN = "GREEN"
YELLOW = "YELLOW"
ORANGE = "ORANGE"
BLUE = "BLUE"
WHITE = "WHITE"

# Kingbright color/chip codes that follow the size digits
KINGBRIGHT_COLORS: dict[str, str] = {
    "ID": RED,
    "HD": RED,
    "EC": RED,
    "SRD": RED,
    "SRC": RED,
    "SURC": RED,
    "GD": GREEN,
    "SGD": GREEN,
    "SGC": GREEN,
    "CGCK": GREEN,
    "ZGC": GREEN,
    "YD": YELLOW,
    "YC": YELLOW,
    "SYD": YELLOW,
    "SYC": YELLOW,
    "ND": ORANGE,
    "NC": ORANGE,
    "SED": ORANGE,
    "SEC": ORANGE,
    "BD": BLUE,
    "QBD": BLUE,
    "QBC": BLUE,
    "PBC": BLUE,
    "VBC": BLUE,
    "LVBC": BLUE,
    "WD": WHITE,
    "MWC": WHITE,
    "PWC": WHITE,
}

VISHAY_COLORS: dict[str, str] = {
    "R": RED,
    "K": RED,
    "G": GREEN,
    "Y": YELLOW,
    "O": ORANGE,
    "B": BLUE,
    "W": WHITE,
}

# Kingbright SMD footprint codes
KINGBRIGHT_SMD_SIZES: dict[str, str] = {
    "1608": "0603",
    "2012": "0805",
    "3216": "1206",
    "3528": "PLCC-2",
}

_KINGBRIGHT_THT = re.compile(r"^(?:L-|WP)(\d{1,4})([A-Z]+)")
_KINGBRIGHT_SMD = re.compile(r"^(?:APTD|APT|AP|KP-?)(\d{4})([A-Z]+)")
_VISHAY_LED = re.compile(r"^(TLH|VLM)([A-Z])(\d)(\d{3})")


def _kingbright_color(code: str) -> str | None:
    key, color = lookup_prefix(code, KINGBRIGHT_COLORS)
    return color if key else None


def led_specs(mpn: str) -> tuple[str, dict[str, Any]]:
    """Series base and color/package specs for an LED."""
    match = _KINGBRIGHT_THT.match(mpn)
    if match:
        size, code = match.groups()
        # 3 mm lamps use 3- or 1-digit size codes (L-934, L-3), 5 mm the rest (L-7113, L-53)
        package = "3MM" if len(size) in (1, 3) else "5MM"
        return f"L{size}", {"color": _kingbright_color(code), "package": package}
    match = _KINGBRIGHT_SMD.match(mpn)
    if match:
        size, code = match.groups()
        return f"AP{size}", {"color": _kingbright_color(code), "package": KINGBRIGHT_SMD_SIZES.get(size)}
    match = _VISHAY_LED.match(mpn)
    if match:
        series, color, size, number = match.groups()
        if series == "VLM":
            package = "PLCC-2"
        else:
            package = "5MM" if size == "5" else "3MM"
        return f"{series}{size}{number}", {"color": VISHAY_COLORS.get(color), "package": package}
    return "", {}


class LEDComparator(SimilarityComparator):
    """LEDs must share a color; package is the next concern."""

    name = "led"
    families = (t.LED,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        base1, specs1 = led_specs(mpn1)
        base2, specs2 = led_specs(mpn2)
        logger.debug(f"LED specs: {specs1} vs {specs2}")
        color1 = specs1.get("color")
        color2 = specs2.get("color")
        if color1 and color2 and color1 != color2:
            logger.debug(f"Different colors: {color1} vs {color2}")
            return LOW_SIMILARITY
        score = self._spec_score(t.LED, context, specs1, specs2)
        if score is None:
            return self._series_fallback(mpn1, mpn2, context)
        # Same lamp in another brightness or bin grade
        if base1 and base1 == base2:
            score = max(score, HIGH_SIMILARITY)
        return score
