"""Tolerance rules for comparing two specification values.

Every rule answers two questions about (original, candidate):
  compare()       -> graded score in [0, 1]
  is_acceptable() -> pass/fail verdict

Rules are immutable and hold no per-call state. Numeric values may be given
as int/float or as numeric strings ("3.3"); anything else falls back to
exact (case-insensitive) equality.
"""

from dataclasses import dataclass
from typing import Any

DEFAULT_ACCEPTANCE = 0.7


def as_number(value: Any) -> float | None:
    """Return value as float when it is numeric (bools excluded), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _equal(original: Any, candidate: Any) -> bool:
    if isinstance(original, str) and isinstance(candidate, str):
        return original.strip().lower() == candidate.strip().lower()
    num1 = as_number(original)
    num2 = as_number(candidate)
    if num1 is not None and num2 is not None:
        return num1 == num2
    return original == candidate


def _exact_score(original: Any, candidate: Any) -> float:
    return 1.0 if _equal(original, candidate) else 0.0


class ToleranceRule:
    """Base rule. Subclasses implement _compare_numbers; non-numbers use equality."""

    acceptance = DEFAULT_ACCEPTANCE

    def compare(self, original: Any, candidate: Any) -> float:
        if original is None or candidate is None:
            return 0.0
        num1 = as_number(original)
        num2 = as_number(candidate)
        if num1 is None or num2 is None:
            return _exact_score(original, candidate)
        return self._compare_numbers(num1, num2)

    def is_acceptable(self, original: Any, candidate: Any) -> bool:
        if original is None or candidate is None:
            return False
        return self.compare(original, candidate) >= self.acceptance

    def _compare_numbers(self, original: float, candidate: float) -> float:
        return 1.0 if original == candidate else 0.0


@dataclass(frozen=True)
class ExactMatch(ToleranceRule):
    """Values must be equal (strings compared case-insensitively)."""

    def compare(self, original: Any, candidate: Any) -> float:
        if original is None or candidate is None:
            return 0.0
        return _exact_score(original, candidate)


@dataclass(frozen=True)
class PercentageTolerance(ToleranceRule):
    """Within ±percent scores 1.0, decaying linearly to 0.0 at twice the band."""

    percent: float

    def _compare_numbers(self, original: float, candidate: float) -> float:
        if original == 0:
            return 1.0 if candidate == 0 else 0.0
        deviation = abs(candidate - original) * 100 / abs(original)
        if deviation <= self.percent:
            return 1.0
        if deviation >= 2 * self.percent:
            return 0.0
        return 1.0 - (deviation - self.percent) / self.percent


@dataclass(frozen=True)
class MinimumRequired(ToleranceRule):
    """Candidate must meet or exceed the original (voltage ratings, current ratings).

    Equal scores 1.0, higher 0.95 (closer matches preferred), up to 10% under
    scores 0.8, anything lower 0.0. Acceptable iff the score reaches 0.8.
    """

    acceptance = 0.8
    margin = 0.9

    def _compare_numbers(self, original: float, candidate: float) -> float:
        if candidate == original:
            return 1.0
        if candidate > original:
            return 0.95
        if original and candidate / original >= self.margin:
            return 0.8
        return 0.0


@dataclass(frozen=True)
class MaximumAllowed(ToleranceRule):
    """Lower is better (ESR, Rds(on)); candidate may exceed original up to factor."""

    factor: float

    def _compare_numbers(self, original: float, candidate: float) -> float:
        if original == 0:
            return 1.0 if candidate == 0 else 0.0
        if candidate == original:
            return 1.0
        if candidate < original:
            return 0.98
        ratio = candidate / original
        if ratio > self.factor:
            return 0.0
        # 1.0 at the original value down to 0.7 at the limit
        return 1.0 - 0.3 * (ratio - 1.0) / (self.factor - 1.0)


@dataclass(frozen=True)
class RangeTolerance(ToleranceRule):
    """Candidate within [original*min_factor, original*max_factor]."""

    min_factor: float
    max_factor: float

    def __post_init__(self):
        if self.min_factor < 0 or self.max_factor < 0:
            raise ValueError(f"Range factors must be non-negative: {self.min_factor}, {self.max_factor}")
        if self.min_factor > self.max_factor:
            raise ValueError(f"min_factor {self.min_factor} exceeds max_factor {self.max_factor}")

    def _compare_numbers(self, original: float, candidate: float) -> float:
        if original == 0:
            return 1.0 if candidate == 0 else 0.0
        if candidate == original:
            return 1.0
        low, high = sorted((original * self.min_factor, original * self.max_factor))
        if low <= candidate <= high:
            return 0.9
        return 0.0


@dataclass(frozen=True)
class CompatibleSet(ToleranceRule):
    """Enumerated values: equal 1.0, same compatibility group 0.8, else 0.0."""

    groups: tuple[frozenset[str], ...] = ()

    def compare(self, original: Any, candidate: Any) -> float:
        if original is None or candidate is None:
            return 0.0
        if _equal(original, candidate):
            return 1.0
        key1 = str(original).strip().upper()
        key2 = str(candidate).strip().upper()
        for group in self.groups:
            if key1 in group and key2 in group:
                return 0.8
        return 0.0


# =============================================================================
# FACTORIES
# =============================================================================


def exact_match() -> ExactMatch:
    return ExactMatch()


def percentage_tolerance(percent: float) -> PercentageTolerance:
    return PercentageTolerance(percent)


def minimum_required() -> MinimumRequired:
    return MinimumRequired()


def maximum_allowed(factor: float) -> MaximumAllowed:
    return MaximumAllowed(factor)


def range_tolerance(min_factor: float, max_factor: float) -> RangeTolerance:
    return RangeTolerance(min_factor, max_factor)


def compatible_set(*groups: set[str] | frozenset[str]) -> CompatibleSet:
    """Groups of interchangeable values, e.g. compatible_set({"X7R", "X5R"})."""
    return CompatibleSet(tuple(frozenset(v.upper() for v in group) for group in groups))
