"""
Home control panel simulation.

This package provides:
- Devices (lights with bounded intensity)
- Pre-bound actions and the buttons that invoke them
- A labeled button panel and the registry that owns everything
"""

from .actions import Action
from .button import Button
from .config import Settings, settings
from .devices import Device, Light
from .exceptions import (
    ButtonNotFoundError,
    DeviceNotFoundError,
    DuplicateLabelError,
    NotFoundError,
    PanelError,
)
from .panel import Panel
from .protocols import ActionKind, DeviceState, DeviceType, DuplicateLabelPolicy
from .registry import ControlRegistry, get_control_registry

__all__ = [
    # Types
    "ActionKind",
    "DeviceState",
    "DeviceType",
    "DuplicateLabelPolicy",
    # Components
    "Device",
    "Light",
    "Action",
    "Button",
    "Panel",
    "ControlRegistry",
    "get_control_registry",
    # Config
    "Settings",
    "settings",
    # Errors
    "PanelError",
    "NotFoundError",
    "DeviceNotFoundError",
    "ButtonNotFoundError",
    "DuplicateLabelError",
]
