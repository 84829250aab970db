"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from vidtrim.config import TrimmerConfig, load_config


class TestTrimmerConfig:
    def test_defaults(self):
        cfg = TrimmerConfig()
        assert cfg.log_level == "WARNING"
        assert cfg.pause_on_exit is False
        assert cfg.tool_timeout is None
        assert cfg.asset_dir is None


class TestLoadConfig:
    def test_empty_environment(self):
        assert load_config({}) == TrimmerConfig()

    def test_all_values(self):
        cfg = load_config({
            "VIDTRIM_LOG_LEVEL": "debug",
            "VIDTRIM_PAUSE_ON_EXIT": "yes",
            "VIDTRIM_TOOL_TIMEOUT": "90",
            "VIDTRIM_ASSET_DIR": "/opt/vidtrim/assets",
        })
        assert cfg.log_level == "DEBUG"
        assert cfg.pause_on_exit is True
        assert cfg.tool_timeout == 90.0
        assert cfg.asset_dir == Path("/opt/vidtrim/assets")

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_pause_disabled(self, value):
        assert load_config({"VIDTRIM_PAUSE_ON_EXIT": value}).pause_on_exit is False

    def test_bad_boolean(self):
        with pytest.raises(ValueError, match="VIDTRIM_PAUSE_ON_EXIT"):
            load_config({"VIDTRIM_PAUSE_ON_EXIT": "sometimes"})

    def test_bad_level(self):
        with pytest.raises(ValueError, match="VIDTRIM_LOG_LEVEL"):
            load_config({"VIDTRIM_LOG_LEVEL": "LOUD"})

    @pytest.mark.parametrize("value", ["soon", "0", "-5"])
    def test_bad_timeout(self, value):
        with pytest.raises(ValueError, match="VIDTRIM_TOOL_TIMEOUT"):
            load_config({"VIDTRIM_TOOL_TIMEOUT": value})

    def test_blank_values_ignored(self):
        cfg = load_config({"VIDTRIM_TOOL_TIMEOUT": " ", "VIDTRIM_ASSET_DIR": ""})
        assert cfg.tool_timeout is None
        assert cfg.asset_dir is None

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("VIDTRIM_TOOL_TIMEOUT", "3")
        assert load_config().tool_timeout == 3.0
