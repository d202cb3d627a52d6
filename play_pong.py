#!/usr/bin/env python3
"""
Main script to launch Classic Pong with PyGame graphical interface
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from classic_pong.gui.game_app import PongApp
from classic_pong.gui.human_player import InputManager
from classic_pong.utils.config import KEYBOARD_LAYOUTS
from classic_pong.utils.config import display_config
from classic_pong.utils.config import load_display_config

logger = logging.getLogger("classic_pong")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player Pong")
    parser.add_argument(
        "--layout",
        choices=sorted(KEYBOARD_LAYOUTS),
        default=None,
        help="Keyboard layout for the left player",
    )
    parser.add_argument("--fps", type=int, default=None, help="Target frames per second")
    parser.add_argument("--config", type=str, default=None, help="Display settings JSON file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.config and not load_display_config(args.config):
        logger.error("Could not load display settings from %s", args.config)
        return 2
    try:
        if args.layout:
            display_config.KEYBOARD_LAYOUT = args.layout
        if args.fps is not None:
            display_config.FPS = args.fps
    except ValidationError as e:
        logger.error("Invalid settings: %s", e)
        return 2

    input_manager = InputManager()
    controls = input_manager.get_control_info()
    print("=== PONG ===")
    print()
    print("CONTROLS:")
    print(f"  Left player:  {controls['left_up']} up, {controls['left_down']} down")
    print(f"  Right player: {controls['right_up']} up, {controls['right_down']} down")
    print("  ESC or close the window to quit")
    print()

    try:
        score = PongApp(input_manager=input_manager).run()
    except Exception:
        logger.exception("Pong crashed")
        return 1

    print(f"Final score: {score[0]} - {score[1]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
