"""Tests for engine assembly and the shared instance."""

import threading

import pytest

import mpn_mcp
from mpn_mcp import types as t
from mpn_mcp.engine import build_engine, get_engine, reset_engine
from mpn_mcp.providers import PROVIDER_CLASSES, all_providers
from mpn_mcp.providers.ti import TIProvider
from mpn_mcp.providers.vishay import VishayProvider
from mpn_mcp.registry import RegistryFrozenError
from mpn_mcp.similarity.analog import OpAmpComparator


@pytest.fixture
def fresh_engine():
    reset_engine()
    yield
    reset_engine()


class TestBuildEngine:
    """Tests for build_engine()."""

    def test_all_providers_sorted(self, engine):
        ids = [p.provider_id for p in engine.providers]
        assert ids == sorted(ids)
        assert len(ids) == len(PROVIDER_CLASSES)

    def test_registry_frozen(self, engine):
        assert engine.registry.frozen
        with pytest.raises(RegistryFrozenError):
            engine.registry.register("ti", t.OPAMP, r"^X")

    def test_provider_ids_unique(self):
        ids = [p.provider_id for p in all_providers()]
        assert len(ids) == len(set(ids))

    def test_custom_providers(self):
        engine = build_engine(providers=[VishayProvider(), TIProvider()])
        assert [p.provider_id for p in engine.providers] == ["ti", "vishay"]
        assert engine.classify("LM358N") is t.OPAMP_TI
        assert engine.classify("GRM188R71H104KA93D") is None

    def test_custom_comparators(self):
        engine = build_engine(comparators=[OpAmpComparator()])
        assert [c.name for c in engine.pipeline.comparators] == ["opamp"]
        assert engine.explain("LM7805", "LM7812").comparator == "default"

    def test_facade(self, engine):
        assert engine.classify("LM358N") is t.OPAMP_TI
        assert engine.candidates("LM358N")
        assert engine.extract_package_code("LM358DR") == "SOIC"
        assert engine.extract_series("SN74HC00N") == "SN74HC00"
        assert engine.is_official_replacement("LM358N", "LM358P")
        assert engine.similarity("LM358N", "LM358N") == 1.0


class TestSharedEngine:
    """Tests for get_engine() / reset_engine()."""

    def test_singleton(self, fresh_engine):
        assert get_engine() is get_engine()

    def test_reset_rebuilds(self, fresh_engine):
        first = get_engine()
        reset_engine()
        assert get_engine() is not first

    def test_concurrent_first_use(self, fresh_engine):
        seen = []
        threads = [threading.Thread(target=lambda: seen.append(get_engine())) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len({id(e) for e in seen}) == 1


class TestPackageApi:
    """Tests for the top-level helpers."""

    def test_classify(self):
        assert mpn_mcp.classify("LM358N") is t.OPAMP_TI
        assert mpn_mcp.classify("ZZZ999-NOPE") is None

    def test_similarity(self):
        assert mpn_mcp.similarity("LM358N", "TL072CP") == pytest.approx(0.9)

    def test_get_type(self):
        assert mpn_mcp.get_type("opamp_ti") is t.OPAMP_TI
