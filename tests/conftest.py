import pytest

from wktio import config
from wktio.wkt_writer import WKTWriter


@pytest.fixture(autouse=True)
def wktio_env(monkeypatch):
    """Don't let the environment running the tests change how wktio behaves."""
    monkeypatch.delenv(config.STRICT_LINESTRINGS_ENV, raising=False)


@pytest.fixture
def writer():
    return WKTWriter()


@pytest.fixture
def strict_writer():
    return WKTWriter(strict=True)
