from __future__ import annotations

import argparse
import logging
import os

import uvicorn

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run the Checkers FastAPI backend.")
	parser.add_argument("--host", default="127.0.0.1", help="Bind host for the API server.")
	parser.add_argument("--port", type=int, default=8000, help="Port for the API server.")
	parser.add_argument("--reload", action="store_true", help="Enable autoreload (development only).")
	parser.add_argument("--log-level", default="info", choices=LOG_LEVELS, help="Log level for uvicorn and the engine.")
	parser.add_argument(
		"--mandatory-capture",
		action="store_true",
		help="Forbid simple moves while the side to move has a capture.",
	)
	return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
	args = parse_args(argv)
	logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
	if args.mandatory_capture:
		# uvicorn imports the app by string; the rule reaches it through the environment.
		os.environ["CHECKERS_MANDATORY_CAPTURE"] = "1"
	uvicorn.run(
		"server.app:app",
		host=args.host,
		port=args.port,
		reload=args.reload,
		log_level=args.log_level,
	)


if __name__ == "__main__":
	main()
