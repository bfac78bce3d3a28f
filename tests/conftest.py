"""Pytest configuration and fixtures."""

import logging
from pathlib import Path

import pytest

from saltdigest.config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run every test with default settings and a fresh settings cache."""
    for name in (
        "SALTDIGEST_ORIGIN_TAG",
        "SALTDIGEST_READ_CHUNK_SIZE",
        "SALTDIGEST_LOG_LEVEL",
        "SALTDIGEST_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)

    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_cli_logger():
    """Drop handlers bound to a previous test's streams or log file."""
    yield
    logger = logging.getLogger("saltdigest.cli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def test_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory for tests."""
    data_dir = tmp_path / "test_data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


@pytest.fixture
def sample_bytes() -> bytes:
    """Binary content with non-ASCII and NUL bytes."""
    return b"\x00\x01salted digest\xff\xfe\n" * 100


@pytest.fixture
def sample_file(test_data_dir: Path, sample_bytes: bytes) -> Path:
    """File holding sample_bytes."""
    path = test_data_dir / "sample.bin"
    path.write_bytes(sample_bytes)
    return path
