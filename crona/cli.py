"""Command-line entry point: load the task file and run the scheduler."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from crona.file_driver import ConfigError, FileDriver
from crona.scheduler import Cron
from crona.tasks import get_task_manager

logger = logging.getLogger(__name__)

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_version = "0.1.0"


def set_version(version: str) -> None:
    """Set the version reported by the ``version`` command."""
    global _version
    _version = version


def log_level(name: str | None) -> int:
    """Map a level name to a logging level; unknown names mean INFO."""
    if name is None:
        raise ValueError("flag accessed but not defined: log-level")
    return _LEVELS.get(name, logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``crona`` command."""
    parser = argparse.ArgumentParser(
        prog="crona",
        description="Crona is an experimental job scheduler",
    )
    parser.add_argument("-c", "--config", default=None, help="Path to the config file")
    parser.add_argument(
        "-l",
        "--log-level",
        default="error",
        help="Log level (debug, info, warn, error)",
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("version", help="Print the version number")
    return parser


def _serve(config: str | None) -> int:
    driver = FileDriver()
    try:
        driver.init(config)
    except ConfigError as exc:
        logger.error("error initializing file driver: %s", exc)
        return 1

    try:
        tasks = driver.parse()
    except ConfigError as exc:
        logger.error("error parsing config: %s", exc)
        return 1

    manager = get_task_manager()
    for task in tasks:
        manager.add_task(task)

    try:
        Cron().start()
    except KeyboardInterrupt:
        return 130
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)

    if args.command == "version":
        print(_version)
        return 0

    try:
        level = log_level(args.log_level)
    except ValueError as exc:
        logger.error("error getting log level: %s", exc)
        return 1

    logging.basicConfig(format="%(asctime)s %(levelname)s %(message)s")
    root = logging.getLogger()
    previous = root.level
    root.setLevel(level)
    try:
        return _serve(args.config)
    finally:
        root.setLevel(previous)


if __name__ == "__main__":
    sys.exit(main())