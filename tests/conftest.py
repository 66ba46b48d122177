import pytest

from mpn_mcp.engine import build_engine


@pytest.fixture(scope="session")
def engine():
    return build_engine()


@pytest.fixture(scope="session")
def pipeline(engine):
    return engine.pipeline
