"""Tasks and the process-wide registry that decides which are due."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime

from crona.job import Job
from crona.options import ParseOptions


@dataclass
class Task:
    """A schedule paired with the job it triggers."""

    options: ParseOptions
    job: Job

    def match_time(self, moment: datetime) -> bool:
        """Whether the schedule selects the given moment."""
        return self.options.match_time(moment)


@dataclass
class TaskManager:
    """Holds the registered tasks."""

    tasks: list[Task] = field(default_factory=list)

    def add_task(self, task: Task) -> None:
        """Register a task."""
        self.tasks.append(task)

    def next(self, now: datetime) -> list[Task]:
        """Return the tasks due at ``now``, in registration order."""
        return [task for task in self.tasks if task.match_time(now)]


_lock = threading.Lock()
_instance: TaskManager | None = None


def get_task_manager() -> TaskManager:
    """Return the shared task manager, creating it on first use."""
    global _instance
    with _lock:
        if _instance is None:
            _instance = TaskManager()
        return _instance


def reset_task_manager() -> None:
    """Replace the shared task manager with an empty one."""
    global _instance
    with _lock:
        _instance = TaskManager()