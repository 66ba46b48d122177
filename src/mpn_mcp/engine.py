"""Engine assembly: providers, pattern registry, resolver and similarity pipeline.

Everything is built once and is read-only afterwards. `get_engine()` hands
out a process-wide instance built under a lock, so concurrent first callers
never observe a half-registered registry.
"""

import logging
import threading

from .providers import ManufacturerProvider, all_providers
from .registry import PatternRegistry
from .resolver import Candidate, TypeResolver
from .similarity import DEFAULT_COMPARATORS, SimilarityComparator, SimilarityPipeline, SimilarityProfile, SimilarityResult
from .text import find_mpn_in_text
from .types import ComponentType

logger = logging.getLogger(__name__)


class Engine:
    """Facade over the resolver and pipeline."""

    def __init__(self, registry: PatternRegistry, resolver: TypeResolver, pipeline: SimilarityPipeline):
        self.registry = registry
        self.resolver = resolver
        self.pipeline = pipeline

    @property
    def providers(self) -> list[ManufacturerProvider]:
        return self.resolver.providers

    def classify(self, mpn: str | None) -> ComponentType | None:
        return self.resolver.resolve(mpn)

    def candidates(self, mpn: str | None) -> list[Candidate]:
        return self.resolver.candidates(mpn)

    def matching_types(self, mpn: str | None) -> list[ComponentType]:
        return self.resolver.matching_types(mpn)

    def similarity(self, mpn1: str | None, mpn2: str | None, profile: SimilarityProfile | None = None) -> float:
        return self.pipeline.similarity(mpn1, mpn2, profile)

    def explain(self, mpn1: str | None, mpn2: str | None, profile: SimilarityProfile | None = None) -> SimilarityResult:
        return self.pipeline.explain(mpn1, mpn2, profile)

    def extract_package_code(self, mpn: str | None) -> str:
        return self.resolver.extract_package_code(mpn)

    def extract_series(self, mpn: str | None) -> str:
        return self.resolver.extract_series(mpn)

    def find_mpn_in_text(self, text: str | None) -> str | None:
        return find_mpn_in_text(text, self.resolver)

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        return self.resolver.is_official_replacement(mpn1, mpn2)


def build_engine(
    providers: list[ManufacturerProvider] | None = None,
    comparators: tuple[SimilarityComparator, ...] | list[SimilarityComparator] | None = None,
) -> Engine:
    """Register providers in id order, freeze the registry and wire the pipeline."""
    if providers is None:
        providers = all_providers()
    providers = sorted(providers, key=lambda p: p.provider_id)

    registry = PatternRegistry()
    for provider in providers:
        provider.register_patterns(registry)
    registry.freeze()

    resolver = TypeResolver(registry, providers)
    pipeline = SimilarityPipeline(resolver, DEFAULT_COMPARATORS if comparators is None else comparators)
    logger.info(
        f"Engine ready: {len(providers)} providers, {len(registry)} patterns, "
        f"{len(pipeline.comparators)} comparators"
    )
    return Engine(registry, resolver, pipeline)


_engine: Engine | None = None
_engine_lock = threading.Lock()


def get_engine() -> Engine:
    """Get or create the shared engine (thread-safe)."""
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = build_engine()
    return _engine


def reset_engine() -> None:
    """Drop the shared engine; the next get_engine() rebuilds it."""
    global _engine
    with _engine_lock:
        _engine = None
