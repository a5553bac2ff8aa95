"""CLI launcher for the window and terminal games."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dual-snake",
        description="Play Snake in a window or in the terminal.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file instead of stderr.",
    )
    sub = parser.add_subparsers(dest="command", help="Available front-ends.")

    window_p = sub.add_parser("window", help="Play in a graphical window.")
    window_p.add_argument(
        "--seed", type=int, default=None,
        help="Seed for reproducible food placement.",
    )

    terminal_p = sub.add_parser("terminal", help="Play in the terminal.")
    terminal_p.add_argument(
        "--seed", type=int, default=None,
        help="Seed for reproducible food placement.",
    )

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = getattr(logging, args.log_level)
    if args.log_file:
        logging.basicConfig(level=level, format=_LOG_FORMAT, filename=args.log_file)
        return
    # stderr shares the terminal with curses; keep it quiet while playing.
    if args.command == "terminal":
        level = max(level, logging.WARNING)
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def _run_window(args: argparse.Namespace) -> int:
    from dual_snake.config import GameConfig
    from dual_snake.engine import GameEngine
    from dual_snake.loop import GameLoop
    from dual_snake.ui.base import FrontendError
    from dual_snake.ui.pixel import WindowFrontend

    config = GameConfig()
    try:
        frontend = WindowFrontend(config)
    except FrontendError as exc:
        logger.error("%s", exc)
        return 1

    with frontend:
        engine = GameEngine(config=config, seed=args.seed)
        state = GameLoop(engine, frontend).run()
    print(f"Final score: {state.score}")  # noqa: T201
    return 0


def _run_terminal(args: argparse.Namespace) -> int:
    import curses

    from dual_snake.config import GameConfig
    from dual_snake.engine import GameEngine
    from dual_snake.loop import GameLoop
    from dual_snake.ui.base import FrontendError
    from dual_snake.ui.text import TerminalFrontend

    config = GameConfig()

    def play(stdscr):
        frontend = TerminalFrontend.open(stdscr, config)
        engine = GameEngine(grid=frontend.grid, config=config, seed=args.seed)
        return GameLoop(engine, frontend).run()

    try:
        state = curses.wrapper(play)
    except (FrontendError, curses.error) as exc:
        logger.error("Terminal game failed: %s", exc)
        return 1
    print(f"Final score: {state.score}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``dual-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    _configure_logging(args)
    handlers = {
        "window": _run_window,
        "terminal": _run_terminal,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
