"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from homepanel.config import LightConfig, PanelConfig, Settings
from homepanel.protocols import DuplicateLabelPolicy


class TestSettings:
    """Settings load defaults and honour HOMEPANEL_* variables."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        config = Settings()
        assert config.log_level == "WARNING"
        assert (config.light.min_intensity, config.light.max_intensity) == (0, 100)
        assert config.panel.duplicate_label_policy is DuplicateLabelPolicy.REJECT
        assert config.demo.step == 20

    def test_section_env_prefix(self, monkeypatch):
        monkeypatch.setenv("HOMEPANEL_LIGHT_MAX_INTENSITY", "255")
        monkeypatch.setenv("HOMEPANEL_PANEL_DUPLICATE_LABEL_POLICY", "replace")
        assert LightConfig().max_intensity == 255
        assert PanelConfig().duplicate_label_policy is DuplicateLabelPolicy.REPLACE

    def test_log_level_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOMEPANEL_LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValidationError):
            LightConfig(min_intensity=100, max_intensity=0)

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValidationError):
            PanelConfig(duplicate_label_policy="ignore")
