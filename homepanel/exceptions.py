"""
Custom exceptions for the control panel.

Lookups raise explicit error types instead of returning empty defaults.
"""


class PanelError(Exception):
    """Base exception for all control panel errors."""

    pass


class NotFoundError(PanelError):
    """Raised when a lookup finds nothing."""

    pass


class DeviceNotFoundError(NotFoundError):
    """Raised when no device is registered under an id."""

    def __init__(self, device_id, expected: str = "device"):
        self.device_id = device_id
        self.expected = expected
        super().__init__(f"{expected.capitalize()} not found: {device_id}")


class ButtonNotFoundError(NotFoundError):
    """Raised when no button is registered under a label."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Button not found: {label!r}")


class DuplicateLabelError(PanelError):
    """Raised when a button label is already in use on the panel."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Button label already registered: {label!r}")
