"""
Shared enums for the control panel.

Devices expose a two-valued on/off state; actions are tagged by kind
rather than modelled as a class hierarchy.
"""

from enum import Enum


class DeviceType(str, Enum):
    """Classification of device types."""
    DEVICE = "device"
    LIGHT = "light"


class DeviceState(str, Enum):
    """On/off state of a device."""
    OFF = "off"
    ON = "on"

    def flipped(self) -> "DeviceState":
        return DeviceState.ON if self is DeviceState.OFF else DeviceState.OFF


class ActionKind(str, Enum):
    """Operations a button can be bound to."""
    TOGGLE = "toggle"
    INCREASE = "increase"
    DECREASE = "decrease"


class DuplicateLabelPolicy(str, Enum):
    """What the panel does when a label is registered twice."""
    REJECT = "reject"
    REPLACE = "replace"
