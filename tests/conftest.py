"""Shared fixtures for control panel tests."""

import pytest

from homepanel.config import LightConfig, PanelConfig, Settings
from homepanel.devices import Light
from homepanel.protocols import DuplicateLabelPolicy
from homepanel.registry import ControlRegistry


@pytest.fixture
def config():
    """Default settings, independent of the process environment."""
    return Settings(
        light=LightConfig(min_intensity=0, max_intensity=100),
        panel=PanelConfig(duplicate_label_policy=DuplicateLabelPolicy.REJECT),
    )


@pytest.fixture
def registry(config):
    return ControlRegistry(config)


@pytest.fixture
def light():
    return Light(0, "Blue")
