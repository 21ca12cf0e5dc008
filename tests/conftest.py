"""Shared fixtures for the pattern catalog test suite."""
import logging
import os
from logging.handlers import RotatingFileHandler

import pytest

from pattern_catalog.infrastructure.patterns.singleton_access import reset_singletons
from pattern_catalog.infrastructure.registry import discover_patterns, get_pattern_registry
from pattern_catalog.patterns import PATTERN_MODULES

CATALOG_ENV_PREFIX = "PATTERN_CATALOG_"


@pytest.fixture(autouse=True)
def clean_catalog_env(monkeypatch):
    """Remove PATTERN_CATALOG_* variables so tests see the defaults."""
    for name in list(os.environ):
        if name.startswith(CATALOG_ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop handlers installed by setup_logging() and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture(autouse=True)
def fresh_catalog_state():
    """Every test starts from a fully discovered registry and no shared instances."""
    reset_singletons()
    registry = get_pattern_registry()
    registry.clear_registrations()
    discover_patterns(registry)
    yield
    reset_singletons()
    registry.clear_registrations()
    discover_patterns(registry)


@pytest.fixture
def pattern_registry():
    return get_pattern_registry()


@pytest.fixture
def expected_keys():
    return list(PATTERN_MODULES)


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration file and return its path."""

    def _write(content: str, name: str = "config.yml") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
