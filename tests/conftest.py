"""Pytest configuration and shared fixtures for the codediff test suite.

This module registers markers and Hypothesis profiles and provides the
fixtures shared across unit, integration and CLI tests.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from codediff.logging_utils import PACKAGE_LOGGER

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo handler changes made by ``configure_logging`` so caplog keeps working."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path_factory) -> None:
    """Keep user configuration files and ``CODEDIFF_*`` variables out of tests."""
    for key in list(os.environ):
        if key.startswith("CODEDIFF_"):
            monkeypatch.delenv(key)
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))


@pytest.fixture
def write_file(tmp_path: Path):
    """Return a helper writing ``content`` to ``tmp_path / name``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture
def sample_pair() -> tuple[str, str]:
    """Provide a small original/modified pair with every hunk kind.

    Returns
    -------
    tuple[str, str]
        Left and right texts.

    """
    left = "alpha\nbeta\ngamma\ndelta\nepsilon"
    right = "alpha\nbeta two\ngamma\nepsilon\nzeta"
    return left, right
