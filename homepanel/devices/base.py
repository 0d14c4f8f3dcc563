"""
Base device with an on/off state and a registry-assigned id.
"""

import logging
from typing import Any

from ..protocols import DeviceState, DeviceType

logger = logging.getLogger("homepanel.devices.base")


class Device:
    """
    A controllable device.

    The id is assigned by the registry at creation and never changes.
    """

    def __init__(self, device_id: int):
        self._id = device_id
        self._state = DeviceState.OFF

    @property
    def id(self) -> int:
        return self._id

    @property
    def device_type(self) -> DeviceType:
        return DeviceType.DEVICE

    @property
    def state(self) -> DeviceState:
        return self._state

    @property
    def is_on(self) -> bool:
        return self._state is DeviceState.ON

    def get_state(self) -> DeviceState:
        """Return the current on/off state."""
        return self._state

    def toggle(self) -> DeviceState:
        """Flip the device on/off and return the new state."""
        self._state = self._state.flipped()
        logger.debug("Device %d toggled %s", self._id, self._state.value)
        return self._state

    def state_line(self) -> str:
        return f"Device State: {self._state.value}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.device_type.value,
            "state": self._state.value,
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self._id} state={self._state.value}>"
