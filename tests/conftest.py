import pytest

from showname.utils import LogLevel, logger


@pytest.fixture(autouse=True)
def reset_log_level():
    """Keep a test that raises the log level from leaking into the next one."""
    yield
    logger.set_log_level(LogLevel.INFO)


@pytest.fixture
def touch():
    """Create an empty file (and its parent folders), returning its path."""

    def _touch(path):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
        return path

    return _touch
