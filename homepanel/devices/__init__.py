"""
Device implementations for the control panel.
"""

from .base import Device
from .lights import DEFAULT_MAX_INTENSITY, DEFAULT_MIN_INTENSITY, Light

__all__ = [
    "Device",
    "Light",
    "DEFAULT_MIN_INTENSITY",
    "DEFAULT_MAX_INTENSITY",
]
