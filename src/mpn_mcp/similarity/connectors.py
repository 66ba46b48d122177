"""Board connector comparator (Molex ordering codes)."""

import logging
import re
from typing import Any, NamedTuple

from .. import types as t
from .base import HIGH_SIMILARITY, LOW_SIMILARITY, ComparisonContext, SimilarityComparator

logger = logging.getLogger(__name__)

# Same family and pin count, different series (straight vs right angle header, housing vs header)
SAME_FAMILY_SIMILARITY = 0.8


class ConnectorFamily(NamedTuple):
    name: str
    pitch: float | None


# Leading two digits of the series -> family, pitch in mm
MOLEX_FAMILIES: dict[str, ConnectorFamily] = {
    "22": ConnectorFamily("KK 254", 2.54),
    "39": ConnectorFamily("Mini-Fit Jr", 4.2),
    "43": ConnectorFamily("Micro-Fit 3.0", 3.0),
    "53": ConnectorFamily("PicoBlade", 1.25),
    "87": ConnectorFamily("C-Grid", 2.54),
    "50": ConnectorFamily("Micro-Lock", None),
}

# 22-23-2021 / 0022232021
_HYPHENATED = re.compile(r"^(?:00)?(\d{2})-?(\d{2})-?(\d{4})$")
# 43650-0200, 502585-0270
_FIVE_OR_SIX = re.compile(r"^(\d{5,6})-?(\d{4})$")


def connector_specs(mpn: str) -> dict[str, Any]:
    """Decode a Molex number: 22-23-2021 -> KK 254, series 2223, 2 pins."""
    match = _HYPHENATED.match(mpn)
    if match:
        prefix, sub, tail = match.groups()
        series = prefix + sub
        pins = int(tail[1:3])
    else:
        match = _FIVE_OR_SIX.match(mpn)
        if not match:
            return {}
        series, tail = match.groups()
        prefix = series[:2]
        pins = int(tail[:2])
    family = MOLEX_FAMILIES.get(prefix)
    if family is None:
        return {}
    return {"family": family.name, "series": series, "pinCount": pins, "pitch": family.pitch}


class ConnectorComparator(SimilarityComparator):
    """Connectors from different families never mate (0.0).

    Within a family the pin count must match; then the same series scores
    HIGH and a sibling series of the family slightly less.
    """

    name = "connector"
    families = (t.CONNECTOR,)

    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        specs1 = connector_specs(mpn1)
        specs2 = connector_specs(mpn2)
        logger.debug(f"Connector specs: {specs1} vs {specs2}")
        if not specs1 or not specs2:
            return self._series_fallback(mpn1, mpn2, context)
        if specs1["family"] != specs2["family"]:
            return 0.0
        if specs1["pinCount"] != specs2["pinCount"]:
            return LOW_SIMILARITY
        if specs1["series"] == specs2["series"]:
            return HIGH_SIMILARITY
        return SAME_FAMILY_SIMILARITY
