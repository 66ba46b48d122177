"""MPN similarity scoring.

A pipeline of component-specific comparators backed by per-type spec
metadata and tolerance rules, with a generic string comparator as fallback.
"""

from .base import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, ComparisonContext, SimilarityComparator
from .default import DefaultComparator, decompose, levenshtein_similarity
from .metadata import (
    ComponentTypeMetadata,
    MetadataRegistry,
    SimilarityProfile,
    SpecConfig,
    SpecImportance,
    get_metadata_registry,
    get_profile,
)
from .pipeline import DEFAULT_COMPARATORS, SimilarityPipeline, SimilarityResult
from .tolerance import ToleranceRule

__all__ = [
    "HIGH_SIMILARITY",
    "MEDIUM_SIMILARITY",
    "LOW_SIMILARITY",
    "ComparisonContext",
    "SimilarityComparator",
    "DefaultComparator",
    "decompose",
    "levenshtein_similarity",
    "ComponentTypeMetadata",
    "MetadataRegistry",
    "SimilarityProfile",
    "SpecConfig",
    "SpecImportance",
    "get_metadata_registry",
    "get_profile",
    "DEFAULT_COMPARATORS",
    "SimilarityPipeline",
    "SimilarityResult",
    "ToleranceRule",
]
