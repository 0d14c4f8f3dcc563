"""
Ordered registry of labeled buttons.

Labels are unique: the label map and the insertion-order list always
hold the same set of labels.
"""

import logging
import threading
from typing import Iterator

from .button import Button
from .exceptions import ButtonNotFoundError, DuplicateLabelError
from .protocols import DuplicateLabelPolicy

logger = logging.getLogger("homepanel.panel")


class Panel:
    """
    Maps labels to buttons and remembers the order labels were added.

    Re-registering a label either raises DuplicateLabelError (REJECT) or
    rebinds the label and moves it to the end of the order (REPLACE).
    """

    def __init__(self, policy: DuplicateLabelPolicy = DuplicateLabelPolicy.REJECT):
        self.policy = DuplicateLabelPolicy(policy)
        self._buttons: dict[str, Button] = {}
        self._labels: list[str] = []
        self._lock = threading.Lock()

    def add_button(self, label: str, button: Button) -> str:
        """Register a button under label and return the label."""
        with self._lock:
            if label in self._buttons:
                if self.policy is DuplicateLabelPolicy.REJECT:
                    logger.warning("Rejected duplicate button label: %r", label)
                    raise DuplicateLabelError(label)
                logger.warning("Replacing button: %r", label)
                self._labels.remove(label)
            self._buttons[label] = button
            self._labels.append(label)
        logger.info("Registered button: %r", label)
        return label

    def get_labels(self) -> list[str]:
        """Return labels in registration order."""
        return list(self._labels)

    def get_button(self, label: str) -> Button:
        """Return the button registered under label."""
        button = self._buttons.get(label)
        if button is None:
            logger.warning("Button not found: %r", label)
            raise ButtonNotFoundError(label)
        return button

    def __contains__(self, label: object) -> bool:
        return label in self._buttons

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[tuple[str, Button]]:
        for label in self.get_labels():
            yield label, self._buttons[label]
