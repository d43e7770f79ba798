"""Reading task definitions from a configuration file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from crona.job import Job
from crona.options import (
    DOM_BOUND,
    DOW_BOUND,
    HOUR_BOUND,
    MINUTE_BOUND,
    MONTH_BOUND,
    SECOND_BOUND,
    ParseOptions,
)
from crona.tasks import Task

logger = logging.getLogger(__name__)

_FIELD_BOUNDS = (SECOND_BOUND, MINUTE_BOUND, HOUR_BOUND, DOM_BOUND, MONTH_BOUND, DOW_BOUND)
_DEFAULT_FILE_NAME = ".crona"


class ConfigError(Exception):
    """The configuration file cannot be located or read."""


class InvalidTaskError(ValueError):
    """A configuration line does not describe a valid task."""


@dataclass
class FileDriver:
    """Loads tasks from a plain text file, one task per line."""

    file_path: str = ""

    def init(self, config: str | None = None) -> None:
        """Settle the file to read: the given path, or ``.crona`` in the working directory."""
        if config is not None:
            self.file_path = config

        if self.file_path:
            return

        try:
            directory = os.getcwd()
        except OSError as exc:
            raise ConfigError("unable to get current working directory") from exc

        self.file_path = os.path.join(directory, _DEFAULT_FILE_NAME)
        if not os.path.exists(self.file_path):
            raise ConfigError("file does not exist")

    def parse(self) -> list[Task]:
        """Read the file and return its valid tasks; invalid lines are logged and skipped."""
        logger.info("current config file=%s", self.file_path)
        try:
            with open(self.file_path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise ConfigError("file does not exist") from exc

        tasks = []
        for line in self.split(text):
            try:
                tasks.append(self.as_task(line))
            except InvalidTaskError as exc:
                logger.warning("invalid string str=%s", exc)
        return tasks

    def is_comment(self, line: str) -> bool:
        """Whether the line is a single-line comment."""
        return line.startswith("//")

    def split(self, text: str) -> list[str]:
        """Return the lines that look like task definitions."""
        lines = []
        for raw in text.split("\n"):
            line = raw.strip(" ")
            if self.is_comment(line) or not line.strip():
                continue
            lines.append(line)
        return lines

    def as_task(self, line: str) -> Task:
        """Turn one line into a task, raising InvalidTaskError when it is malformed."""
        chunk = line.split(" ")
        if len(chunk) < 7:
            raise InvalidTaskError("invalid task")

        fields = chunk[:6]
        for value, bound in zip(fields, _FIELD_BOUNDS):
            try:
                bound.validate(value)
            except ValueError as exc:
                raise InvalidTaskError(str(exc)) from exc

        command = " ".join(chunk[6:]).strip()
        if not command:
            raise InvalidTaskError("command is empty")
        if command.startswith("*"):
            raise InvalidTaskError("command is invalid")

        return Task(ParseOptions(*fields), Job(chunk[6], chunk[7:]))