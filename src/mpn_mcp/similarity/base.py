"""Base class for component-specific similarity comparators."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..types import ComponentType
from .metadata import ComponentTypeMetadata, MetadataRegistry, SimilarityProfile, get_metadata_registry

if TYPE_CHECKING:
    from ..resolver import TypeResolver

logger = logging.getLogger(__name__)

HIGH_SIMILARITY = 0.9
MEDIUM_SIMILARITY = 0.7
LOW_SIMILARITY = 0.3


@dataclass(frozen=True)
class ComparisonContext:
    """Per-call inputs shared with a comparator.

    Carries the resolver (for provider-aware package extraction), the
    requested profile and the types the pipeline already resolved. Built
    fresh for every comparison; never stored on a comparator.
    """

    resolver: "TypeResolver | None" = None
    profile: SimilarityProfile | None = None
    metadata: MetadataRegistry = field(default_factory=get_metadata_registry)
    type1: ComponentType | None = None
    type2: ComponentType | None = None

    def package(self, mpn: str) -> str:
        if self.resolver is None:
            return ""
        return self.resolver.extract_package_code(mpn)

    def profile_for(self, metadata: ComponentTypeMetadata | None) -> SimilarityProfile:
        if self.profile is not None:
            return self.profile
        if metadata is not None:
            return metadata.default_profile
        return SimilarityProfile.REPLACEMENT


def weighted_spec_score(
    metadata: ComponentTypeMetadata,
    profile: SimilarityProfile,
    specs1: dict[str, Any],
    specs2: dict[str, Any],
) -> float | None:
    """Weighted average of per-spec tolerance scores.

    Only specs known for both parts and carrying a non-zero weight under the
    profile take part. Returns None when nothing could be compared.
    """
    total = 0.0
    max_possible = 0.0
    for name, config in metadata.specs.items():
        value1 = specs1.get(name)
        value2 = specs2.get(name)
        if value1 is None or value2 is None:
            continue
        weight = profile.effective_weight(config.importance)
        if weight <= 0:
            continue
        score = config.rule.compare(value1, value2)
        logger.debug(f"  {name}: {value1!r} vs {value2!r} -> {score:.2f} (weight {weight:.2f})")
        total += score * weight
        max_possible += weight
    if max_possible == 0:
        return None
    return total / max_possible


def failed_critical_specs(metadata: ComponentTypeMetadata, specs1: dict[str, Any],
                          specs2: dict[str, Any]) -> list[str]:
    """Critical specs known for both parts whose rule rejects the candidate."""
    failed = []
    for name in metadata.critical_specs():
        value1 = specs1.get(name)
        value2 = specs2.get(name)
        if value1 is None or value2 is None:
            continue
        if not metadata.specs[name].rule.is_acceptable(value1, value2):
            failed.append(name)
    return failed


def lookup_prefix(mpn: str, table: dict[str, Any]) -> tuple[str | None, Any]:
    """Longest table key the MPN starts with, and its value: ('BC547', ...) for 'BC547B'."""
    best = None
    for key in table:
        if mpn.startswith(key) and (best is None or len(key) > len(best)):
            best = key
    if best is None:
        return None, None
    return best, table[best]


def in_same_group(key1: str | None, key2: str | None, groups) -> bool:
    if key1 is None or key2 is None:
        return False
    return any(key1 in group and key2 in group for group in groups)


class SimilarityComparator(ABC):
    """Scores two MPNs of one component family.

    `families` lists the taxonomy nodes the comparator understands; it is
    applicable to a type whose lineage contains any of them. Subclasses
    implement `_compare` on stripped, uppercased MPNs. `compare` never
    raises: unexpected errors are logged and scored 0.0.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier reported by explain()."""

    @property
    @abstractmethod
    def families(self) -> tuple[ComponentType, ...]:
        """Taxonomy nodes this comparator handles."""

    def is_applicable(self, component_type: ComponentType | None) -> bool:
        if component_type is None:
            return False
        return any(node in self.families for node in component_type.lineage())

    def compare(self, mpn1: str | None, mpn2: str | None, context: ComparisonContext | None = None) -> float:
        if not mpn1 or not mpn2:
            return 0.0
        if context is None:
            context = ComparisonContext()
        # A resolved part from another family can never stand in for this one
        for component_type in (context.type1, context.type2):
            if component_type is not None and not self.is_applicable(component_type):
                logger.debug(f"{self.name}: {mpn1} vs {mpn2} crosses families -> 0.0")
                return 0.0
        try:
            score = self._compare(mpn1.strip().upper(), mpn2.strip().upper(), context)
        except Exception as e:
            logger.warning(f"{self.name} comparator failed on {mpn1!r} vs {mpn2!r}: {e}")
            return 0.0
        return min(1.0, max(0.0, score))

    @abstractmethod
    def _compare(self, mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        """Score two uppercased MPNs in [0, 1]."""

    def _spec_score(self, component_type: ComponentType, context: ComparisonContext,
                    specs1: dict[str, Any], specs2: dict[str, Any]) -> float | None:
        """Weighted spec score, capped at LOW when a critical spec is unacceptable."""
        metadata = context.metadata.get(component_type)
        if metadata is None:
            return None
        profile = context.profile_for(metadata)
        logger.debug(f"{self.name}: weighing specs under {profile.name}")
        score = weighted_spec_score(metadata, profile, specs1, specs2)
        if score is None:
            return None
        failed = failed_critical_specs(metadata, specs1, specs2)
        if failed:
            logger.debug(f"{self.name}: critical specs not met: {failed}")
            return min(score, LOW_SIMILARITY)
        return score

    @staticmethod
    def _series_fallback(mpn1: str, mpn2: str, context: ComparisonContext) -> float:
        """MEDIUM when the owning provider reports the same series, else LOW."""
        if context.resolver is not None:
            series = context.resolver.extract_series(mpn1)
            if series and series == context.resolver.extract_series(mpn2):
                return MEDIUM_SIMILARITY
        return LOW_SIMILARITY

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
