import pytest
from pathlib import Path

from sct_reader.config import ReaderConfig
from sct_reader.parsers import EseReader, SctReader


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def sample_sct(test_assets_dir) -> Path:
    return test_assets_dir / 'sample.sct'


@pytest.fixture
def sample_ese(test_assets_dir) -> Path:
    return test_assets_dir / 'sample.ese'


@pytest.fixture
def sample_prf(test_assets_dir) -> Path:
    return test_assets_dir / 'sample.prf'


@pytest.fixture
def reader_config() -> ReaderConfig:
    """Configuration independent of the environment running the tests."""
    return ReaderConfig(encoding='latin-1', euroscope_dir=None)


@pytest.fixture
def sector(sample_sct, reader_config):
    """The parsed sample sector file."""
    return SctReader(reader_config).read_path(sample_sct)


@pytest.fixture
def ese(sample_ese, reader_config):
    """The parsed sample ESE file."""
    return EseReader(reader_config).read_path(sample_ese)
