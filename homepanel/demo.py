"""
Scripted demonstration of the control panel.

Wires three lights and five buttons, then presses them in sequence and
prints the Blue light's state and intensity after each step.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from dotenv import load_dotenv

from .config import Settings
from .registry import ControlRegistry

logger = logging.getLogger("homepanel.demo")

BLUE_TOGGLE = "Blue Light Toggle"
RED_TOGGLE = "Red Light Toggle"
GREEN_TOGGLE = "Green Light Toggle"

# Presses after the first two that drive intensity past either bound
SATURATING_PRESSES = 11


def build_panel(registry: ControlRegistry, step: int) -> tuple[int, str, str]:
    """
    Create the demo lights and buttons.

    Returns the Blue light's id and the labels of its increase and
    decrease buttons.
    """
    blue_id = registry.create_light("Blue")
    red_id = registry.create_light("Red")

    registry.create_button(BLUE_TOGGLE, registry.new_toggle_action(registry.get_light(blue_id)))
    registry.create_button(RED_TOGGLE, registry.new_toggle_action(registry.get_light(red_id)))
    registry.create_button(
        GREEN_TOGGLE,
        registry.new_toggle_action(registry.get_light(registry.create_light("Green"))),
    )

    increase_label = registry.create_button(
        f"Blue Light Increase Intensity by {step}%",
        registry.new_increase_action(registry.get_light(blue_id), step),
    )
    decrease_label = registry.create_button(
        f"Blue Light Decrease Intensity by {step}%",
        registry.new_decrease_action(registry.get_light(blue_id), step),
    )
    return blue_id, increase_label, decrease_label


def run_demo(registry: ControlRegistry, out: Optional[TextIO] = None) -> None:
    """Run the scripted press sequence, writing state lines to out (stdout by default)."""
    if out is None:
        out = sys.stdout
    blue_id, increase_label, decrease_label = build_panel(registry, registry.config.demo.step)
    blue = registry.get_light(blue_id)

    def show_state() -> None:
        print(blue.state_line(), file=out)

    def show_light() -> None:
        print(blue.state_line(), file=out)
        print(blue.intensity_line(), file=out)

    print("\n turning blue light on and off\n", end="", file=out)
    show_state()
    print(file=out)
    for _ in range(2):
        registry.press(BLUE_TOGGLE)
        show_state()
        print(file=out)

    print("\n increasing light intensity\n", end="", file=out)
    show_light()
    print(file=out)
    for _ in range(2):
        registry.press(increase_label)
        show_light()
        print(file=out)
    for _ in range(SATURATING_PRESSES):
        registry.press(increase_label)
    show_light()
    print(file=out)

    print("\n decreasing light intensity\n", end="", file=out)
    for _ in range(2):
        registry.press(decrease_label)
        show_light()
        print(file=out)
    for _ in range(SATURATING_PRESSES):
        registry.press(decrease_label)
    show_light()
    print(file=out)

    logger.info("Demo finished: %s", registry.to_dict())


def main() -> int:
    """Console entry point."""
    load_dotenv(Path.cwd() / ".env")
    # Re-read settings so values from .env apply
    config = Settings()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    run_demo(ControlRegistry(config))
    return 0
