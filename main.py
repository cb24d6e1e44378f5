from __future__ import annotations

import argparse
import logging

import pygame

from core.game import Game
from core.options import RuleOptions
from ui.pygame_gui import CheckersGUI


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play checkers in a pygame window.")
	parser.add_argument("--square-size", type=int, default=80, help="Edge length of a board square in pixels.")
	parser.add_argument(
		"--mandatory-capture",
		action="store_true",
		help="Forbid simple moves while the side to move has a capture.",
	)
	parser.add_argument("--log-level", default="WARNING", help="Logging level for the engine.")
	return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
	args = parse_args(argv)
	logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
	pygame.init()
	try:
		game = Game(RuleOptions(mandatory_capture=args.mandatory_capture))
		gui = CheckersGUI(game, square_size=args.square_size)
		gui.run()
	finally:
		pygame.quit()


if __name__ == "__main__":
	main()
