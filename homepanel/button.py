"""
Panel button invoking a single bound action.
"""

import logging
from dataclasses import dataclass

from .actions import Action

logger = logging.getLogger("homepanel.button")


@dataclass(frozen=True)
class Button:
    """A labeled invoker holding exactly one Action for its lifetime."""
    label: str
    action: Action

    def press(self) -> bool:
        """Execute the bound action and return its success flag."""
        success = self.action.execute()
        logger.debug("Pressed %r: %s (success=%s)", self.label, self.action.describe(), success)
        return success
