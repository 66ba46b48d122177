"""Tests for spec metadata and similarity profiles."""

import pytest

from mpn_mcp import types as t
from mpn_mcp.similarity.metadata import (
    ComponentTypeMetadata,
    MetadataRegistry,
    SimilarityProfile,
    SpecImportance,
    get_metadata_registry,
    get_profile,
)


class TestProfiles:
    """Tests for profile lookup and weights."""

    @pytest.mark.parametrize("name", ["replacement", "REPLACEMENT", " Replacement "])
    def test_lookup(self, name):
        assert get_profile(name) is SimilarityProfile.REPLACEMENT

    @pytest.mark.parametrize("name", [None, "", "cheapest"])
    def test_unknown(self, name):
        assert get_profile(name) is None

    def test_effective_weights(self):
        profile = SimilarityProfile.REPLACEMENT
        assert profile.effective_weight(SpecImportance.CRITICAL) == pytest.approx(1.0)
        assert profile.effective_weight(SpecImportance.HIGH) == pytest.approx(0.49)
        assert profile.effective_weight(SpecImportance.MEDIUM) == pytest.approx(0.16)
        assert profile.effective_weight(SpecImportance.LOW) == pytest.approx(0.04)
        assert profile.effective_weight(SpecImportance.OPTIONAL) == 0.0

    def test_emergency_discounts_critical(self):
        assert SimilarityProfile.EMERGENCY_SOURCING.effective_weight(SpecImportance.CRITICAL) == pytest.approx(0.8)

    def test_thresholds(self):
        assert SimilarityProfile.DESIGN_PHASE.meets_threshold(0.85)
        assert not SimilarityProfile.DESIGN_PHASE.meets_threshold(0.84)
        assert SimilarityProfile.EMERGENCY_SOURCING.meets_threshold(0.5)


class TestMetadataRegistry:
    """Tests for metadata lookup through the type lineage."""

    def test_vendor_type_inherits(self):
        registry = get_metadata_registry()
        metadata = registry.get(t.OPAMP_TI)
        assert metadata is not None
        assert metadata.component_type is t.OPAMP

    def test_eeprom_uses_memory(self):
        assert get_metadata_registry().get(t.MEMORY_FLASH_WINBOND).component_type is t.MEMORY

    def test_missing(self):
        registry = get_metadata_registry()
        assert registry.get(t.INDUCTOR) is None
        assert registry.get(None) is None

    def test_critical_specs(self):
        resistor = get_metadata_registry().get(t.RESISTOR)
        assert resistor.critical_specs() == ["resistance", "tolerance"]
        assert resistor.is_critical("resistance")
        assert not resistor.is_critical("package")
        assert resistor.spec("unknown") is None

    def test_register_replaces(self):
        registry = MetadataRegistry()
        registry.register(ComponentTypeMetadata(t.RESISTOR))
        assert registry.get(t.RESISTOR_CHIP_YAGEO).specs == {}

    def test_shared_instance(self):
        assert get_metadata_registry() is get_metadata_registry()

    def test_inspection(self):
        registry = get_metadata_registry()
        assert t.RESISTOR in registry.registered_types()
        assert registry.get(t.LED).spec_names()[0] == "color"
