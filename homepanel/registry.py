"""
Registry owning every device and button of a control panel.

Creates lights, builds actions bound to them and registers buttons on
the panel. Each ControlRegistry is an independent handle; the entry point
builds one and passes it around, and get_control_registry() provides a
lazily-created process-wide default.
"""

import logging
import threading
from typing import Any, Optional

from .actions import Action, decrease_action, increase_action, toggle_action
from .button import Button
from .config import Settings, settings
from .devices import Device, Light
from .exceptions import DeviceNotFoundError
from .panel import Panel

logger = logging.getLogger("homepanel.registry")


class ControlRegistry:
    """
    Owner and factory for devices, actions and buttons.

    Device ids are allocated sequentially from 0 and are never reused.
    Devices and buttons live as long as the registry; there is no
    removal API.
    """

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or settings
        self.panel = Panel(self.config.panel.duplicate_label_policy)
        self._devices: dict[int, Device] = {}
        self._next_id = 0
        self._lock = threading.Lock()

    # ------------------------------------------------------------------ #
    # Devices
    # ------------------------------------------------------------------ #

    def create_light(self, color: str) -> int:
        """Create a light and return its id."""
        with self._lock:
            device_id = self._next_id
            self._next_id += 1
            light = Light(
                device_id,
                color,
                min_intensity=self.config.light.min_intensity,
                max_intensity=self.config.light.max_intensity,
            )
            self._devices[device_id] = light
        logger.info("Created light %d (%s)", device_id, color)
        return device_id

    def get_device(self, device_id: int) -> Device:
        """Return the device registered under device_id."""
        device = self._devices.get(device_id)
        if device is None:
            logger.warning("Device not found: %s", device_id)
            raise DeviceNotFoundError(device_id)
        return device

    def get_light(self, device_id: int) -> Light:
        """Return the light registered under device_id."""
        device = self._devices.get(device_id)
        if not isinstance(device, Light):
            logger.warning("Light not found: %s", device_id)
            raise DeviceNotFoundError(device_id, expected="light")
        return device

    def list_devices(self) -> list[Device]:
        """Return all devices in id order."""
        return [self._devices[i] for i in sorted(self._devices)]

    # ------------------------------------------------------------------ #
    # Actions
    # ------------------------------------------------------------------ #

    def new_toggle_action(self, device: Device) -> Action:
        return toggle_action(device)

    def new_increase_action(self, light: Light, amount: int) -> Action:
        return increase_action(light, amount)

    def new_decrease_action(self, light: Light, amount: int) -> Action:
        return decrease_action(light, amount)

    # ------------------------------------------------------------------ #
    # Buttons
    # ------------------------------------------------------------------ #

    def create_button(self, label: str, action: Action) -> str:
        """
        Wrap action in a button and register it under label.

        Raises DuplicateLabelError if the label is taken and the panel
        policy is REJECT.
        """
        return self.panel.add_button(label, Button(label, action))

    def get_button(self, label: str) -> Button:
        return self.panel.get_button(label)

    def get_labels(self) -> list[str]:
        return self.panel.get_labels()

    def press(self, label: str) -> bool:
        """Press the button registered under label."""
        return self.get_button(label).press()

    def to_dict(self) -> dict[str, Any]:
        return {
            "devices": [d.to_dict() for d in self.list_devices()],
            "buttons": self.get_labels(),
        }


# Global registry instance
_control_registry: Optional[ControlRegistry] = None


def get_control_registry() -> ControlRegistry:
    """Get or create the global control registry."""
    global _control_registry
    if _control_registry is None:
        _control_registry = ControlRegistry()
    return _control_registry
