from __future__ import annotations

import argparse
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .commands import match as cmd_match
from .commands import play as cmd_play
from .config import load_settings
from .reference_data import ReferenceDataError, load_countries
from .sessions import QuizMode

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}

logger = logging.getLogger(__name__)


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


def configure_logging(level_name: str) -> None:
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fuzzy answer matching for geography quizzes")
    parser.add_argument("--config", type=Path, help="Path to quiz-match.yaml")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)
    match_parser = subparsers.add_parser("match", help="Match one answer against the reference data")
    match_parser.add_argument("text", help="Free-text answer to match")
    match_parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="CODE",
        help="Country code already answered (repeatable)",
    )
    match_parser.add_argument(
        "--capitals",
        action="store_true",
        help="Match against capital cities instead of country names",
    )

    play_parser = subparsers.add_parser("play", help="Play a quiz in the terminal")
    play_parser.add_argument("game", choices=["naming", "flags", "capitals"])
    play_parser.add_argument(
        "--daily",
        action="store_true",
        help="Use today's fixed selection (flags/capitals only)",
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Shuffle seed")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "play" and args.game == "naming" and args.daily:
        parser.error("--daily applies to the flags and capitals games only")
    configure_logging(args.log_level)

    try:
        settings = load_settings(args.config)
        records = load_countries(settings.data.countries_path, settings.data.extra_aliases)
    except (FileNotFoundError, yaml.YAMLError, ValidationError, ReferenceDataError) as exc:
        logger.error("%s", exc)
        raise SystemExit(2) from exc

    match args.command:
        case "match":
            report = cmd_match.run(
                records,
                args.text,
                excluded=args.exclude,
                capitals=args.capitals,
            )
            print(report.line)
            if not report.ok:
                raise SystemExit(1)
        case "play":
            if args.game == "naming":
                cmd_play.run_naming(settings, records)
            else:
                cmd_play.run_quiz(
                    settings,
                    records,
                    QuizMode(args.game),
                    daily=args.daily,
                    seed=args.seed,
                )
        case _:
            parser.error("Unknown command")


if __name__ == "__main__":
    main()
