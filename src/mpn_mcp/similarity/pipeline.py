"""Ordered comparator chain: the first comparator that claims either part decides."""

import logging
from dataclasses import dataclass

from ..text import normalize_mpn
from ..types import ComponentType
from .analog import OpAmpComparator, SensorComparator, VoltageRegulatorComparator
from .base import ComparisonContext, SimilarityComparator
from .connectors import ConnectorComparator
from .default import DefaultComparator
from .digital import LogicICComparator, MemoryComparator, MicrocontrollerComparator
from .discretes import DiodeComparator, LEDComparator, MosfetComparator, TransistorComparator
from .metadata import SimilarityProfile
from .passives import CapacitorComparator, ResistorComparator

logger = logging.getLogger(__name__)

# Order is part of the contract: earlier comparators win when several apply
DEFAULT_COMPARATORS: tuple[SimilarityComparator, ...] = (
    VoltageRegulatorComparator(),
    LEDComparator(),
    OpAmpComparator(),
    LogicICComparator(),
    MemoryComparator(),
    DiodeComparator(),
    SensorComparator(),
    MosfetComparator(),
    TransistorComparator(),
    MicrocontrollerComparator(),
    ResistorComparator(),
    CapacitorComparator(),
    ConnectorComparator(),
)

EXACT = "exact"
UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class SimilarityResult:
    """Score plus how it was reached."""

    score: float
    comparator: str
    mpn1: str
    mpn2: str
    type1: ComponentType | None = None
    type2: ComponentType | None = None
    profile: SimilarityProfile | None = None

    @property
    def meets_threshold(self) -> bool | None:
        if self.profile is None:
            return None
        return self.profile.meets_threshold(self.score)

    def to_dict(self) -> dict:
        return {
            "mpn1": self.mpn1,
            "mpn2": self.mpn2,
            "score": round(self.score, 4),
            "comparator": self.comparator,
            "type1": self.type1.name if self.type1 else "unknown",
            "type2": self.type2.name if self.type2 else "unknown",
            "profile": self.profile.name if self.profile else None,
            "meets_threshold": self.meets_threshold,
        }


def _prepare(mpn: str | None) -> str:
    if not isinstance(mpn, str):
        return ""
    return mpn.strip().upper()


class SimilarityPipeline:
    """Scores whether MPN 2 can stand in for MPN 1.

    Holds the resolver and an immutable comparator tuple; every call builds
    its own ComparisonContext, so one pipeline serves concurrent callers.
    """

    def __init__(self, resolver, comparators: tuple[SimilarityComparator, ...] | list = DEFAULT_COMPARATORS):
        self.resolver = resolver
        self._comparators = tuple(comparators)
        self._default = DefaultComparator()

    @property
    def comparators(self) -> tuple[SimilarityComparator, ...]:
        return self._comparators

    def comparator_for(self, type1: ComponentType | None, type2: ComponentType | None) -> SimilarityComparator | None:
        for comparator in self._comparators:
            if comparator.is_applicable(type1) or comparator.is_applicable(type2):
                return comparator
        return None

    def explain(self, mpn1: str | None, mpn2: str | None, profile: SimilarityProfile | None = None) -> SimilarityResult:
        upper1 = _prepare(mpn1)
        upper2 = _prepare(mpn2)
        norm1 = normalize_mpn(mpn1)
        norm2 = normalize_mpn(mpn2)
        if norm1 and norm1 == norm2:
            return SimilarityResult(1.0, EXACT, upper1, upper2, profile=profile)

        type1 = self.resolver.resolve(upper1)
        type2 = self.resolver.resolve(upper2)
        if type1 is None or type2 is None:
            logger.debug(f"Cannot compare {mpn1!r} and {mpn2!r}: unresolved type")
            return SimilarityResult(0.0, UNRESOLVED, upper1, upper2, type1, type2, profile)

        comparator = self.comparator_for(type1, type2)
        if comparator is None:
            score = self._default.compare(norm1, norm2)
            return SimilarityResult(score, self._default.name, upper1, upper2, type1, type2, profile)

        context = ComparisonContext(resolver=self.resolver, profile=profile, type1=type1, type2=type2)
        score = comparator.compare(upper1, upper2, context)
        logger.debug(f"{comparator.name}: {upper1} ({type1}) vs {upper2} ({type2}) -> {score:.3f}")
        return SimilarityResult(score, comparator.name, upper1, upper2, type1, type2, profile)

    def similarity(self, mpn1: str | None, mpn2: str | None, profile: SimilarityProfile | None = None) -> float:
        return self.explain(mpn1, mpn2, profile).score

    def __repr__(self) -> str:
        return f"SimilarityPipeline({[c.name for c in self._comparators]})"
