"""Generic MPN similarity: prefix / numeric core / suffix decomposition.

Used when no component-specific comparator applies. Operates on normalized
(uppercased, alphanumeric-only) strings.
"""

import logging
import math
import re
from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)

PREFIX_WEIGHT = 0.3
NUMERIC_WEIGHT = 0.5
SUFFIX_WEIGHT = 0.2
# A missing suffix (LM358 vs LM358N) is weak evidence, not a mismatch
MISSING_SUFFIX_SCORE = 0.5
LOG_SCALE_THRESHOLD = 1000

_PREFIX = re.compile(r'^[A-Za-z]+')
_NUMERIC = re.compile(r'\d+')
_SUFFIX = re.compile(r'[A-Za-z]+$')


@dataclass(frozen=True)
class MpnParts:
    prefix: str
    numeric: str
    suffix: str


def decompose(mpn: str) -> MpnParts:
    """Split into leading letters, first digit run, trailing letters."""
    prefix = _PREFIX.search(mpn)
    numeric = _NUMERIC.search(mpn)
    suffix = _SUFFIX.search(mpn)
    return MpnParts(
        prefix.group() if prefix else "",
        numeric.group() if numeric else "",
        suffix.group() if suffix else "",
    )


def levenshtein_similarity(s1: str, s2: str) -> float:
    """1 - edit_distance / longer_length; 1.0 for two empty strings."""
    longest = max(len(s1), len(s2))
    if longest == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(s1, s2) / longest


def prefix_similarity(p1: str, p2: str) -> float:
    if not p1 and not p2:
        return 1.0
    if not p1 or not p2:
        return 0.0
    if p1 == p2:
        return 1.0
    return levenshtein_similarity(p1, p2)


def numeric_similarity(n1: str, n2: str) -> float:
    """Closeness of two digit runs; log-scaled above 1000."""
    if not n1 and not n2:
        return 1.0
    if not n1 or not n2:
        return 0.0
    if n1 == n2:
        return 1.0
    try:
        a = int(n1)
        b = int(n2)
    except ValueError:
        return levenshtein_similarity(n1, n2)
    largest = max(a, b)
    if largest == 0:
        return 1.0
    diff = abs(a - b)
    if largest > LOG_SCALE_THRESHOLD:
        score = 1.0 - math.log10(diff + 1) / math.log10(largest + 1)
    else:
        score = 1.0 - diff / largest
    return max(0.0, score)


def suffix_similarity(s1: str, s2: str) -> float:
    if not s1 and not s2:
        return 1.0
    if not s1 or not s2:
        return MISSING_SUFFIX_SCORE
    if s1 == s2:
        return 1.0
    return levenshtein_similarity(s1, s2)


class DefaultComparator:
    """Weighted prefix/numeric/suffix similarity for any two MPNs."""

    name = "default"

    def compare(self, mpn1: str | None, mpn2: str | None) -> float:
        if not mpn1 or not mpn2:
            return 0.0
        if mpn1 == mpn2:
            return 1.0
        parts1 = decompose(mpn1)
        parts2 = decompose(mpn2)
        prefix = prefix_similarity(parts1.prefix, parts2.prefix)
        numeric = numeric_similarity(parts1.numeric, parts2.numeric)
        suffix = suffix_similarity(parts1.suffix, parts2.suffix)
        score = PREFIX_WEIGHT * prefix + NUMERIC_WEIGHT * numeric + SUFFIX_WEIGHT * suffix
        logger.debug(
            f"Default similarity {mpn1} vs {mpn2}: prefix={prefix:.2f} numeric={numeric:.2f} "
            f"suffix={suffix:.2f} -> {score:.3f}"
        )
        return score
