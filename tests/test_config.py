"""Tests for geoabbrev.config - environment-backed runtime settings."""

from __future__ import annotations

import importlib
import os
from unittest.mock import patch

import pytest


@pytest.fixture
def reload_config_after():
    """Restore config module to default state after test.

    Use this fixture explicitly in tests that reload config with GA_* vars set.
    """
    yield
    for var in ("GA_BUILD_WORKERS", "GA_LOG_DIR", "GA_LOG_CONSOLE"):
        os.environ.pop(var, None)

    from geoabbrev import config

    importlib.reload(config)


class TestSettings:
    """Test Settings dataclass and environment variable overrides."""

    def test_default_settings_values(self):
        from geoabbrev.config import settings

        assert settings.build_workers == 1
        assert settings.log_dir is None
        assert settings.log_console is False

    def test_settings_is_frozen(self):
        from geoabbrev.config import settings

        with pytest.raises(Exception):
            settings.build_workers = 4  # type: ignore[misc]

    def test_env_overrides(self, monkeypatch, tmp_path, reload_config_after):
        monkeypatch.setenv("GA_BUILD_WORKERS", "4")
        monkeypatch.setenv("GA_LOG_DIR", str(tmp_path))
        monkeypatch.setenv("GA_LOG_CONSOLE", "yes")

        from geoabbrev import config

        importlib.reload(config)
        assert config.settings.build_workers == 4
        assert config.settings.log_dir == str(tmp_path)
        assert config.settings.log_console is True

    def test_invalid_int_falls_back(self, monkeypatch, reload_config_after):
        monkeypatch.setenv("GA_BUILD_WORKERS", "many")

        from geoabbrev import config

        importlib.reload(config)
        assert config.settings.build_workers == 1

    def test_workers_floor(self, monkeypatch, reload_config_after):
        """Test non-positive worker counts are raised to one."""
        monkeypatch.setenv("GA_BUILD_WORKERS", "0")

        from geoabbrev import config

        importlib.reload(config)
        assert config.settings.build_workers == 1

    def test_catalog_sees_reloaded_settings(self, monkeypatch, reload_config_after):
        """Test the builder reads settings at call time, not import time."""
        monkeypatch.setenv("GA_BUILD_WORKERS", "2")

        from geoabbrev import catalog, config

        importlib.reload(config)
        assert catalog._config.settings.build_workers == 2


class TestEnvHelpers:
    """Test GA_* env helpers."""

    def test_prefix_enforced(self):
        from geoabbrev.config import _env

        with pytest.raises(ValueError, match="Only GA_"):
            _env("LX_BUILD_WORKERS", "1")

    @pytest.mark.parametrize("raw,expected", [("1", True), ("true", True), ("ON", True), ("0", False), ("off", False), ("", False)])
    def test_env_bool(self, raw, expected):
        from geoabbrev.config import _env_bool

        with patch.dict(os.environ, {"GA_TEST_FLAG": raw}):
            assert _env_bool("GA_TEST_FLAG", False) is expected

    def test_env_int(self):
        from geoabbrev.config import _env_int

        with patch.dict(os.environ, {"GA_TEST_INT": "12"}):
            assert _env_int("GA_TEST_INT", 3) == 12
        with patch.dict(os.environ, {"GA_TEST_INT": "1.5"}):
            assert _env_int("GA_TEST_INT", 3) == 3
        assert _env_int("GA_TEST_UNSET", 3) == 3
