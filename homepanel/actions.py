"""
Pre-bound units of work for panel buttons.

An Action fixes its operation, target device and amount at construction
and runs with no arguments.
"""

import logging
from dataclasses import dataclass
from typing import Union

from .devices import Device, Light
from .protocols import ActionKind

logger = logging.getLogger("homepanel.actions")


@dataclass(frozen=True)
class Action:
    """
    Immutable binding of an operation to one device.

    TOGGLE works on any device; INCREASE and DECREASE need a Light,
    checked at construction.
    """
    kind: ActionKind
    target: Union[Device, Light]
    amount: int = 0

    def __post_init__(self) -> None:
        if self.kind is not ActionKind.TOGGLE and not isinstance(self.target, Light):
            raise TypeError(
                f"{self.kind.value} action needs a Light, got {type(self.target).__name__}"
            )

    def execute(self) -> bool:
        """Run the bound operation and report success."""
        logger.debug("Executing %s", self.describe())
        if self.kind is ActionKind.TOGGLE:
            self.target.toggle()
            return True
        elif self.kind is ActionKind.INCREASE:
            return self.target.increase_intensity(self.amount)
        else:
            return self.target.decrease_intensity(self.amount)

    def describe(self) -> str:
        if self.kind is ActionKind.TOGGLE:
            return f"toggle device {self.target.id}"
        return f"{self.kind.value} device {self.target.id} by {self.amount}"


def toggle_action(device: Device) -> Action:
    return Action(ActionKind.TOGGLE, device)


def increase_action(light: Light, amount: int) -> Action:
    return Action(ActionKind.INCREASE, light, amount)


def decrease_action(light: Light, amount: int) -> Action:
    return Action(ActionKind.DECREASE, light, amount)
