"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

import pytest

from pattern_catalog.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


@pytest.mark.unit
class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_default_used_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LOG_DIR:logs}/app.log") == "logs/app.log"

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"LOG_DIR": "/var/log"}):
            assert expand_env_vars("${LOG_DIR:logs}/app.log") == "/var/log/app.log"

    def test_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("[${MISSING:}]") == "[]"

    def test_nonexistent_env_var_left_unchanged(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"
            assert expand_env_vars("${NONEXISTENT_VAR}") == "${NONEXISTENT_VAR}"

    def test_expand_nested_dict_and_list_values(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/app.log"},
                "paths": ["$TEST_VAR/a", "plain"],
            }
            assert expand_config_env_vars(config) == {
                "logging": {"file_path": "/test/path/app.log"},
                "paths": ["/test/path/a", "plain"],
            }

    def test_non_string_values_unchanged(self):
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config
