"""MPN MCP - classify manufacturer part numbers and score replacements."""

__version__ = "0.1.0"

from .engine import Engine, build_engine, get_engine, reset_engine
from .similarity import SimilarityProfile, SimilarityResult
from .types import ComponentType, get_type


def classify(mpn: str | None) -> ComponentType | None:
    """Most specific component type for an MPN, None when unrecognized."""
    return get_engine().classify(mpn)


def similarity(mpn1: str | None, mpn2: str | None, profile: SimilarityProfile | None = None) -> float:
    """Score in [0, 1] for using mpn2 in place of mpn1."""
    return get_engine().similarity(mpn1, mpn2, profile)


__all__ = [
    "__version__",
    "ComponentType",
    "Engine",
    "SimilarityProfile",
    "SimilarityResult",
    "build_engine",
    "classify",
    "get_engine",
    "get_type",
    "reset_engine",
    "similarity",
]
