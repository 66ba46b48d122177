"""Base class for manufacturer capability providers."""

import logging
import re
from abc import ABC, abstractmethod

from ..packages import is_known_package, packages_compatible, resolve_package
from ..registry import PatternRegistry
from ..types import ComponentType

logger = logging.getLogger(__name__)

_FIRST_DIGITS = re.compile(r'\d+')
# 1N4148, 24LC256, STM32F103, BZX84C5V1, or plain LM358
_DESIGNATOR = re.compile(r'^([A-Z]*\d+[A-Z]+\d+(?:V\d+)?|[A-Z]+\d+)')
_TRAILING_LETTERS = re.compile(r'\d([A-Z]+)$')


class ManufacturerProvider(ABC):
    """One manufacturer's part-number knowledge.

    Subclasses declare PATTERNS (type -> regex strings, anchored by the
    subclass) and may override the extraction helpers where the vendor's
    ordering-code scheme differs from the defaults below.

    Providers are stateless after construction; the same instance can serve
    concurrent classification calls.
    """

    PATTERNS: dict[ComponentType, tuple[str, ...]] = {}

    @property
    @abstractmethod
    def provider_id(self) -> str:
        """Stable identifier; also the registration sort key."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable manufacturer name."""

    def supported_types(self) -> frozenset[ComponentType]:
        return frozenset(self.PATTERNS)

    def register_patterns(self, registry: PatternRegistry) -> None:
        for component_type, patterns in self.PATTERNS.items():
            for pattern in patterns:
                registry.register(self.provider_id, component_type, pattern)

    def matches(self, mpn: str, component_type: ComponentType, registry: PatternRegistry) -> bool:
        if not mpn:
            return False
        return registry.matches_for_provider(mpn.upper(), component_type, self.provider_id)

    def extract_package_code(self, mpn: str) -> str:
        """Standard package name from the ordering suffix, or "" if unknown.

        Tries the part after the last hyphen (ATMEGA328P-PU -> PU), then the
        letters after the last digit (LM358N -> N).
        """
        if not mpn:
            return ""
        upper = mpn.strip().upper()
        for suffix in (self._suffix_after_hyphen(upper), self._trailing_suffix(upper)):
            if suffix and is_known_package(suffix, self.provider_id):
                return resolve_package(suffix, self.provider_id)
        return ""

    def extract_series(self, mpn: str) -> str:
        """The designator before any grade or package suffix.

        LM358N -> LM358, 1N4148TR -> 1N4148, 24LC256-I/SN -> 24LC256.
        Falls back to everything up to the first digit run.
        """
        if not mpn:
            return ""
        upper = mpn.strip().upper()
        match = _DESIGNATOR.match(upper)
        if match:
            return match.group(1)
        match = _FIRST_DIGITS.search(upper)
        if not match:
            return upper
        return upper[:match.end()]

    def is_official_replacement(self, mpn1: str, mpn2: str) -> bool:
        """Same series, and packages compatible when both are known."""
        if not mpn1 or not mpn2:
            return False
        series1 = self.extract_series(mpn1)
        if not series1 or series1 != self.extract_series(mpn2):
            return False
        pkg1 = self.extract_package_code(mpn1)
        pkg2 = self.extract_package_code(mpn2)
        if pkg1 and pkg2:
            return packages_compatible(pkg1, pkg2)
        return True

    @staticmethod
    def _suffix_after_hyphen(mpn: str) -> str:
        head, sep, tail = mpn.rpartition("-")
        return tail if sep and head else ""

    @staticmethod
    def _trailing_suffix(mpn: str) -> str:
        match = _TRAILING_LETTERS.search(mpn)
        return match.group(1) if match else ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.provider_id})"
