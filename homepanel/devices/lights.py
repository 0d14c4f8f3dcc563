"""
Dimmable light device.

Intensity is clamped to the light's bounds on every change, and crossing
the bounds drives the on/off state:
- raising intensity above the minimum turns an off light on
- lowering intensity to the minimum turns an on light off
"""

import logging
from typing import Any

from ..protocols import DeviceState, DeviceType
from .base import Device

logger = logging.getLogger("homepanel.devices.lights")

DEFAULT_MIN_INTENSITY = 0
DEFAULT_MAX_INTENSITY = 100


class Light(Device):
    """A colored light with a bounded intensity."""

    def __init__(
        self,
        device_id: int,
        color: str,
        min_intensity: int = DEFAULT_MIN_INTENSITY,
        max_intensity: int = DEFAULT_MAX_INTENSITY,
    ):
        super().__init__(device_id)
        self._color = color
        self._min_intensity = min_intensity
        self._max_intensity = max_intensity
        self._intensity = min_intensity

    @property
    def device_type(self) -> DeviceType:
        return DeviceType.LIGHT

    @property
    def color(self) -> str:
        return self._color

    @property
    def intensity(self) -> int:
        return self._intensity

    @property
    def min_intensity(self) -> int:
        return self._min_intensity

    @property
    def max_intensity(self) -> int:
        return self._max_intensity

    def _clamp(self, value: int) -> int:
        return max(self._min_intensity, min(value, self._max_intensity))

    def increase_intensity(self, amount: int) -> bool:
        """Raise intensity by amount, saturating at the maximum."""
        self._intensity = self._clamp(self._intensity + amount)
        if self._intensity > self._min_intensity and self._state is DeviceState.OFF:
            self._state = DeviceState.ON
        logger.debug(
            "Light %d intensity +%d -> %d (%s)",
            self._id, amount, self._intensity, self._state.value,
        )
        return True

    def decrease_intensity(self, amount: int) -> bool:
        """Lower intensity by amount, saturating at the minimum."""
        self._intensity = self._clamp(self._intensity - amount)
        if self._intensity == self._min_intensity and self._state is DeviceState.ON:
            self._state = DeviceState.OFF
        logger.debug(
            "Light %d intensity -%d -> %d (%s)",
            self._id, amount, self._intensity, self._state.value,
        )
        return True

    def intensity_line(self) -> str:
        return f"Device Intensity: {self._intensity}"

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "color": self._color,
            "intensity": self._intensity,
        })
        return data
