"""Pattern registry: per-provider regex catalogs keyed by component type.

Storage is written once during engine build and read-only afterwards, so
lookups take no lock. The provider whose patterns should be consulted is
always passed in explicitly; the registry keeps no "current provider" state.
"""

import logging
import re
from collections import defaultdict

from .types import ComponentType

logger = logging.getLogger(__name__)


class RegistryFrozenError(RuntimeError):
    """Raised when registering a pattern after the registry was frozen."""


class PatternRegistry:
    """Maps provider id -> component type -> compiled patterns."""

    def __init__(self):
        self._patterns: dict[str, dict[ComponentType, list[re.Pattern[str]]]] = defaultdict(dict)
        self._frozen = False

    def register(self, provider_id: str, component_type: ComponentType, pattern: re.Pattern[str] | str) -> None:
        """Add a pattern for (provider, type). Strings compile case-insensitively.

        No anchors are added: providers anchor their own patterns. Duplicates
        are kept.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register {component_type} for {provider_id}: registry is frozen"
            )
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.IGNORECASE)
        self._patterns[provider_id].setdefault(component_type, []).append(pattern)

    def freeze(self) -> None:
        self._frozen = True
        logger.debug(f"Pattern registry frozen with {len(self)} patterns")

    @property
    def frozen(self) -> bool:
        return self._frozen

    def matches(self, text: str | None, component_type: ComponentType) -> bool:
        """True if any provider's pattern for this type matches the text."""
        if not text:
            return False
        for by_type in self._patterns.values():
            for pattern in by_type.get(component_type, ()):
                if pattern.search(text):
                    return True
        return False

    def matches_for_provider(self, text: str | None, component_type: ComponentType, provider_id: str) -> bool:
        """True if one of provider_id's own patterns for this type matches."""
        if not text:
            return False
        by_type = self._patterns.get(provider_id)
        if not by_type:
            return False
        return any(p.search(text) for p in by_type.get(component_type, ()))

    def patterns_for(self, component_type: ComponentType, provider_id: str | None = None) -> list[re.Pattern[str]]:
        """Registered patterns for a type, for one provider or all of them (registration order)."""
        if provider_id is not None:
            return list(self._patterns.get(provider_id, {}).get(component_type, ()))
        result = []
        for by_type in self._patterns.values():
            result.extend(by_type.get(component_type, ()))
        return result

    def provider_ids(self) -> list[str]:
        return list(self._patterns)

    def types_for_provider(self, provider_id: str) -> list[ComponentType]:
        return list(self._patterns.get(provider_id, {}))

    def __len__(self) -> int:
        return sum(len(pats) for by_type in self._patterns.values() for pats in by_type.values())
