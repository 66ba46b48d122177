"""Tests for the comparator pipeline and its results."""

import pytest

from mpn_mcp import types as t
from mpn_mcp.similarity import DEFAULT_COMPARATORS, SimilarityPipeline, SimilarityProfile
from mpn_mcp.similarity.pipeline import EXACT, UNRESOLVED, SimilarityResult


class TestExactAndUnresolved:
    """Tests for the short-circuit paths."""

    @pytest.mark.parametrize("mpn1,mpn2", [
        ("LM358N", "LM358N"),
        ("lm358n", "LM358N "),
        ("LM-358N", "LM358N"),
        ("ZZZ-999", "zzz999"),
    ])
    def test_exact(self, pipeline, mpn1, mpn2):
        result = pipeline.explain(mpn1, mpn2)
        assert result.score == 1.0
        assert result.comparator == EXACT

    @pytest.mark.parametrize("mpn1,mpn2", [(None, "LM358N"), ("LM358N", None), ("", ""), (None, None)])
    def test_missing_input(self, pipeline, mpn1, mpn2):
        assert pipeline.similarity(mpn1, mpn2) == 0.0

    def test_unresolved(self, pipeline):
        result = pipeline.explain("LM358N", "ZZZ999-NOPE")
        assert result.score == 0.0
        assert result.comparator == UNRESOLVED
        assert result.type1 is t.OPAMP_TI
        assert result.type2 is None


class TestDispatch:
    """Tests for comparator selection."""

    def test_order(self):
        names = [c.name for c in DEFAULT_COMPARATORS]
        assert names == [
            "voltage_regulator", "led", "opamp", "logic", "memory", "diode", "sensor",
            "mosfet", "transistor", "microcontroller", "resistor", "capacitor", "connector",
        ]

    def test_first_applicable_wins(self, pipeline):
        assert pipeline.comparator_for(t.OPAMP_TI, t.RESISTOR).name == "opamp"
        assert pipeline.comparator_for(t.RESISTOR, t.OPAMP_TI).name == "opamp"

    def test_no_comparator(self, pipeline):
        assert pipeline.comparator_for(t.INDUCTOR, t.CRYSTAL) is None

    def test_default_fallback(self, engine):
        bare = SimilarityPipeline(engine.resolver, comparators=())
        result = bare.explain("LM358N", "LM358D")
        assert result.comparator == "default"
        assert result.score == pytest.approx(0.8)

    def test_default_fallback_for_uncovered_types(self, pipeline):
        result = pipeline.explain("LQG15HS10NJ02D", "LQW18AN10NG00D")
        assert result.comparator == "default"
        assert 0.0 < result.score < 1.0

    def test_cross_family(self, pipeline):
        result = pipeline.explain("LM358N", "LM7805")
        assert result.comparator == "voltage_regulator"
        assert result.score == 0.0

    def test_score_in_range(self, pipeline):
        for mpn1, mpn2 in [("LM358N", "GRM188R71H104KA93D"), ("1N4148", "2N3904"), ("BME280", "LIS3DH")]:
            assert 0.0 <= pipeline.similarity(mpn1, mpn2) <= 1.0


class TestProfiles:
    """Tests for profile-aware scoring."""

    def test_profile_changes_weights(self, pipeline):
        replacement = pipeline.similarity("ATMEGA328P-PU", "ATMEGA328P-AU", SimilarityProfile.REPLACEMENT)
        emergency = pipeline.similarity("ATMEGA328P-PU", "ATMEGA328P-AU", SimilarityProfile.EMERGENCY_SOURCING)
        assert emergency != replacement

    def test_threshold(self, pipeline):
        result = pipeline.explain("LM358N", "LM324N", SimilarityProfile.REPLACEMENT)
        assert result.meets_threshold is False
        result = pipeline.explain("LM358N", "LM324N", SimilarityProfile.EMERGENCY_SOURCING)
        assert result.meets_threshold is True

    def test_no_profile_no_verdict(self, pipeline):
        assert pipeline.explain("LM358N", "LM324N").meets_threshold is None


class TestSimilarityResult:

    def test_to_dict(self):
        result = SimilarityResult(0.123456, "opamp", "LM358N", "LM324N", t.OPAMP_TI, None,
                                  SimilarityProfile.DESIGN_PHASE)
        assert result.to_dict() == {
            "mpn1": "LM358N",
            "mpn2": "LM324N",
            "score": 0.1235,
            "comparator": "opamp",
            "type1": "OPAMP_TI",
            "type2": "unknown",
            "profile": "DESIGN_PHASE",
            "meets_threshold": False,
        }

    def test_repr(self, pipeline):
        assert "opamp" in repr(pipeline)
