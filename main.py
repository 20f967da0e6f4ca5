from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from pydantic import ValidationError

from checkers_console.schemas import ConsoleConfig
from checkers_console.session import ConsoleSession
from checkers_core.game import Game


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play two-player checkers in the terminal.")
	parser.add_argument("--player-a", default=None, help="Symbol for the player moving first (default X).")
	parser.add_argument("--player-b", default=None, help="Symbol for the second player (default O).")
	parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns.")
	parser.add_argument(
		"--log-level",
		default="warning",
		choices=["debug", "info", "warning", "error", "critical"],
		help="Logging level written to stderr.",
	)
	args = parser.parse_args(argv)
	try:
		args.config = build_config(args)
	except ValidationError as exc:
		parser.error(str(exc))
	return args


def build_config(args: argparse.Namespace) -> ConsoleConfig:
	return ConsoleConfig().with_overrides(
		player_a_symbol=args.player_a,
		player_b_symbol=args.player_b,
		clear_screen=False if args.no_clear else None,
	)


def main(argv: Optional[Sequence[str]] = None) -> None:
	args = parse_args(argv)
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(name)s %(levelname)s %(message)s",
	)
	session = ConsoleSession(Game(), args.config)
	session.run()


if __name__ == "__main__":
	main()
