"""Resistor and capacitor comparators.

Chip passives encode everything that matters in the ordering code: case
size, value, tolerance, and for MLCCs the dielectric and voltage rating.
The comparators decode those fields and weigh them through the type
metadata; failing any critical spec caps the score at LOW.
"""

import logging
import re
from abc import abstractmethod
from typing import Any

from .. import types as t
from .base import ComparisonContext, SimilarityComparator
from .values import parse_capacitance_code, parse_resistance_code, parse_tolerance_code

logger = logging.getLogger(__name__)


# =============================================================================
# RESISTORS
# =============================================================================

_VALUE = r"(\d*[RKM]\d*|\d{3,4})"

# CRCW0603 10K0 F KEA
_VISHAY_CHIP = re.compile(rf"^CRCW(\d{{4}}){_VALUE}([BCDFGJ])")
# CMF55 1002 F HEK
_VISHAY_THT = re.compile(rf"^(CMF|RN)(\d{{2}}){_VALUE}([BCDFGJ])")
# RC0603 F R -07 10K L
_YAGEO_CHIP = re.compile(r"^RC(\d{4})([BCDFGJK])[A-Z]-?\d{2}(\d*[RKM]\d*)L?$")

# Typical thick-film chip ratings (watts)
CHIP_POWER_RATINGS: dict[str, float] = {
    "0201": 0.05,
    "0402": 0.063,
    "0603": 0.1,
    "0805": 0.125,
    "1206": 0.25,
    "1210": 0.5,
    "2010": 0.75,
    "2512": 1.0,
}

THT_POWER_RATINGS: dict[str, float] = {
    "55": 0.5,
    "60": 1.0,
    "65": 1.0,
}


def resistor_specs(mpn: str) -> dict[str, Any]:
    """Decode a resistor ordering code: CRCW060310K0FKEA -> 10 kOhm, 1%, 0603."""
    match = _VISHAY_CHIP.match(mpn)
    if match:
        size, value, tolerance = match.groups()
        return {
            "resistance": parse_resistance_code(value),
            "tolerance": parse_tolerance_code(tolerance),
            "package": size,
            "powerRating": CHIP_POWER_RATINGS.get(size),
            "composition": "THICK_FILM",
        }
    match = _YAGEO_CHIP.match(mpn)
    if match:
        size, tolerance, value = match.groups()
        return {
            "resistance": parse_resistance_code(value),
            "tolerance": parse_tolerance_code(tolerance),
            "package": size,
            "powerRating": CHIP_POWER_RATINGS.get(size),
            "composition": "THICK_FILM",
        }
    match = _VISHAY_THT.match(mpn)
    if match:
        _series, size, value, tolerance = match.groups()
        return {
            "resistance": parse_resistance_code(value),
            "tolerance": parse_tolerance_code(tolerance),
            "package": "AXIAL",
            "powerRating": THT_POWER_RATINGS.get(size),
            "composition": "METAL_FILM",
        }
    return {}


# =============================================================================
# CAPACITORS
# =============================================================================

# GRM 18 8 R7 1H 104 K A93D
_MURATA_MLCC = re.compile(r"^(GRM|GCM|GRT)(\d{2})[0-9A-Z]([0-9A-Z]{2})([0-9A-Z]{2})(\d{3}|\dR\d|R\d{2})([BCDFGJKMZ])")
# CC 0603 K R X7R 9 BB 104
_YAGEO_MLCC = re.compile(r"^CC(\d{4})([BCDFGJKMZ])[A-Z](NPO|NP0|COG|C0G|X7R|X5R|X7S|Y5V)(\d)B[BN](\d{3}|\dR\d)")

MURATA_SIZE_CODES: dict[str, str] = {
    "03": "0201",
    "15": "0402",
    "18": "0603",
    "21": "0805",
    "31": "1206",
    "32": "1210",
}

MURATA_DIELECTRICS: dict[str, str] = {
    "5C": "C0G",
    "R6": "X5R",
    "R7": "X7R",
    "C7": "X7S",
    "C8": "X6S",
    "F5": "Y5V",
}

MURATA_VOLTAGES: dict[str, float] = {
    "0E": 2.5,
    "0G": 4.0,
    "0J": 6.3,
    "1A": 10.0,
    "1C": 16.0,
    "1E": 25.0,
    "YA": 35.0,
    "1V": 35.0,
    "1H": 50.0,
    "2A": 100.0,
    "2D": 200.0,
    "2E": 250.0,
}

YAGEO_VOLTAGES: dict[str, float] = {
    "5": 6.3,
    "6": 10.0,
    "7": 16.0,
    "8": 25.0,
    "9": 50.0,
    "0": 100.0,
}

# Spelling variants of class 1 dielectrics
_DIELECTRIC_ALIASES = {"NPO": "C0G", "NP0": "C0G", "COG": "C0G"}


def capacitor_specs(mpn: str) -> dict[str, Any]:
    """Decode an MLCC ordering code: GRM188R71H104KA93D -> 100 nF, 50 V, X7R, 0603."""
    match = _MURATA_MLCC.match(mpn)
    if match:
        _series, dimension, dielectric, voltage, value, tolerance = match.groups()
        dielectric_name = MURATA_DIELECTRICS.get(dielectric)
        return {
            "capacitance": parse_capacitance_code(value),
            "voltage": MURATA_VOLTAGES.get(voltage),
            "dielectric": dielectric_name,
            "package": MURATA_SIZE_CODES.get(dimension),
            "tolerance": parse_tolerance_code(tolerance),
            "temperatureCharacteristic": dielectric_name,
        }
    match = _YAGEO_MLCC.match(mpn)
    if match:
        size, tolerance, dielectric, voltage, value = match.groups()
        dielectric_name = _DIELECTRIC_ALIASES.get(dielectric, dielectric)
        return {
            "capacitance": parse_capacitance_code(value),
            "voltage": YAGEO_VOLTAGES.get(voltage),
            "dielectric": dielectric_name,
            "package": size,
            "tolerance": parse_tolerance_code(tolerance),
            "temperatureCharacteristic": dielectric_name,
        }
    return {}


# =============================================================================
# COMPARATORS
# =============================================================================


class PassiveComparator(SimilarityComparator):
    """Metadata-weighted comparison of decoded ordering codes.

    Subclasses supply the decoder. An undecodable code falls back to the
    provider series.
    """

    component_type: t.ComponentType

    @abstractmethod
    def decode(self, mpn: str) -> dict[str, Any]:
        """Spec dict for one ordering code; empty when unreadable."""

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        specs1 = self.decode(mpn1)
        specs2 = self.decode(mpn2)
        logger.debug(f"{self.name} specs: {specs1} vs {specs2}")
        score = self._spec_score(self.component_type, context, specs1, specs2)
        if score is None:
            return self._series_fallback(mpn1, mpn2, context)
        return score


class ResistorComparator(PassiveComparator):
    name = "resistor"
    families = (t.RESISTOR,)
    component_type = t.RESISTOR

    def decode(self, mpn: str) -> dict[str, Any]:
        return resistor_specs(mpn)


class CapacitorComparator(PassiveComparator):
    name = "capacitor"
    families = (t.CAPACITOR,)
    component_type = t.CAPACITOR

    def decode(self, mpn: str) -> dict[str, Any]:
        return capacitor_specs(mpn)
