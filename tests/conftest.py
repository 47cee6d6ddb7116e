"""Pytest fixtures and configuration for test suite."""
import os
from contextlib import contextmanager

import pytest

from onerm.logger import setup_logger


ENV_VARS = ("ONERM_LOG_LEVEL", "ONERM_LOG_FILE", "ONERM_PRECISION", "ONERM_TRAINING_MAX_PCT")


@contextmanager
def isolated_onerm_env():
    """Clear the onerm settings, then restore them exactly on exit.

    Also undoes values that load_dotenv writes straight into os.environ.
    """
    saved = {name: os.environ.pop(name, None) for name in ENV_VARS}
    try:
        yield
    finally:
        for name, value in saved.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value


@pytest.fixture(autouse=True)
def clean_env():
    """Run every test without onerm settings from the shell or earlier tests."""
    with isolated_onerm_env():
        yield


@pytest.fixture
def env_snapshot():
    """The isolation context manager, for tests that check it directly."""
    return isolated_onerm_env


@pytest.fixture
def reset_logger():
    """Put the onerm logger back to INFO on stdout after the test."""
    yield
    setup_logger()


@pytest.fixture
def sample_set():
    """A typical submaximal set."""
    return {"weight": 100.0, "reps": 5}


@pytest.fixture
def sample_known_max():
    """A known 1RM and a working weight."""
    return {"rm1": 130.0, "weight": 100.0}


@pytest.fixture
def temp_env_file(tmp_path):
    """Write a .env file with onerm settings and return its path."""
    path = tmp_path / ".env"
    path.write_text(
        "ONERM_LOG_LEVEL=DEBUG\n"
        "ONERM_PRECISION=2\n"
        "ONERM_TRAINING_MAX_PCT=0.85\n"
    )
    return str(path)
