"""MPN normalization and free-text MPN extraction."""

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .resolver import TypeResolver

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r'[^A-Za-z0-9]')
_WORD_SPLIT = re.compile(r'\s+|[;,|]')

# Labels BOM exports put in front of part numbers
MPN_PREFIXES = ("IC-", "PART-", "MPN-", "MPN:", "PN:", "P/N:", "REF:", "REF-", "ITEM:", "ITEM-")
# Mounting/compliance tags appended after the part number
MPN_SUFFIXES = ("-SMD", "-THT", "-ROHS")


def normalize_mpn(mpn: str | None) -> str:
    """Uppercase and strip everything but letters and digits. None -> ""."""
    if not mpn or not mpn.strip():
        return ""
    return _NON_ALNUM.sub("", mpn.strip().upper())


def clean_word(word: str) -> str:
    """Strip key=value labels, known prefixes and suffixes from one token."""
    word = word.strip().upper()
    if "=" in word:
        word = word.split("=", 1)[1]
    for prefix in MPN_PREFIXES:
        if word.startswith(prefix):
            word = word[len(prefix):]
    for suffix in MPN_SUFFIXES:
        if word.endswith(suffix):
            word = word[:-len(suffix)]
    return word.strip()


def split_words(text: str) -> list[str]:
    return [w for w in (clean_word(raw) for raw in _WORD_SPLIT.split(text.strip())) if w]


def find_mpn_in_text(text: str | None, resolver: "TypeResolver") -> str | None:
    """Return the first token of `text` that looks like a known MPN.

    Each token is first offered to the manufacturer providers, then to the
    generic type sweep. Returns the cleaned, uppercased token or None.
    """
    if not text or not text.strip():
        return None
    for word in split_words(text):
        if resolver.candidates(word):
            logger.debug(f"MPN found via provider match: {word}")
            return word
        if resolver.generic_match(word) is not None:
            logger.debug(f"MPN found via generic pattern: {word}")
            return word
    logger.debug(f"No MPN found in text: {text[:80]!r}")
    return None
