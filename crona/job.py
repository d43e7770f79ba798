"""A command with its arguments, ready to be run."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from crona.executor import create_executor


@dataclass
class Job:
    """A command line to execute."""

    command: str
    args: list[str] = field(default_factory=list)

    def run(self) -> None:
        """Run the command, sending output to this process's streams."""
        create_executor(self.command, self.args, sys.stdout, sys.stderr).run()

    def compare(self, other: Job) -> bool:
        """Whether both jobs run the same command with the same arguments."""
        return (
            self.command == other.command
            and len(self.args) == len(other.args)
            and (not self.args or " ".join(self.args) == " ".join(other.args))
        )