"""Tests for the generic prefix/numeric/suffix comparator."""

import pytest

from mpn_mcp.similarity.default import (
    DefaultComparator,
    decompose,
    levenshtein_similarity,
    numeric_similarity,
    prefix_similarity,
    suffix_similarity,
)


class TestDecompose:
    """Tests for MPN decomposition."""

    def test_full(self):
        parts = decompose("LM358N")
        assert (parts.prefix, parts.numeric, parts.suffix) == ("LM", "358", "N")

    def test_no_suffix(self):
        assert decompose("LM358").suffix == ""

    def test_digits_only(self):
        parts = decompose("4148")
        assert (parts.prefix, parts.numeric, parts.suffix) == ("", "4148", "")

    def test_first_digit_run_only(self):
        assert decompose("STM32F103").numeric == "32"


class TestPartScores:
    """Tests for the component similarity functions."""

    def test_levenshtein(self):
        assert levenshtein_similarity("", "") == 1.0
        assert levenshtein_similarity("ABC", "ABD") == pytest.approx(2 / 3)

    def test_prefix(self):
        assert prefix_similarity("", "") == 1.0
        assert prefix_similarity("LM", "") == 0.0
        assert prefix_similarity("LM", "LM") == 1.0

    def test_numeric_linear(self):
        assert numeric_similarity("223", "249") == pytest.approx(1 - 26 / 249)

    def test_numeric_log_scaled(self):
        score = numeric_similarity("4001", "4007")
        assert 0.5 < score < 1.0

    def test_numeric_missing(self):
        assert numeric_similarity("", "") == 1.0
        assert numeric_similarity("358", "") == 0.0

    def test_missing_suffix_is_half(self):
        assert suffix_similarity("N", "") == 0.5
        assert suffix_similarity("", "") == 1.0


class TestDefaultComparator:
    """Tests for the weighted combination."""

    def setup_method(self):
        self.comparator = DefaultComparator()

    def test_identical(self):
        assert self.comparator.compare("LM358N", "LM358N") == 1.0

    def test_empty(self):
        assert self.comparator.compare("", "LM358N") == 0.0
        assert self.comparator.compare(None, "LM358N") == 0.0

    def test_missing_suffix(self):
        assert self.comparator.compare("LM358", "LM358N") == pytest.approx(0.9)

    def test_numeric_distance(self):
        expected = 0.3 + 0.5 * (1 - 26 / 249) + 0.2
        assert self.comparator.compare("TOP223Y", "TOP249Y") == pytest.approx(expected)

    def test_unrelated_low(self):
        assert self.comparator.compare("ABC123X", "ZZ9Q") < 0.5


class TestSubScoreSymmetry:
    """Each sub-score gives the same answer with its arguments swapped."""

    @pytest.mark.parametrize("func", [prefix_similarity, numeric_similarity, suffix_similarity])
    @pytest.mark.parametrize("a,b", [
        ("LM", "LMV"),
        ("STM", "ATM"),
        ("358", "2904"),
        ("0005", "5"),
        ("999", "100000"),
        ("DR", "N"),
        ("", ""),
        ("", "TL"),
        ("", "4148"),
        ("CT", ""),
        ("12A", "12"),
    ])
    def test_symmetric(self, func, a, b):
        assert func(a, b) == func(b, a)
