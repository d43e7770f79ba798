"""The loop that wakes every second and starts the jobs that are due."""

from __future__ import annotations

import logging
import threading
from datetime import datetime

from crona.job import Job
from crona.tasks import TaskManager, get_task_manager

logger = logging.getLogger(__name__)


def _run_job(job: Job) -> None:
    try:
        job.run()
    except Exception as exc:  # a failing job must not stop the scheduler
        logger.error("running job: %s:", exc)


class Cron:
    """Runs the tasks of a task manager on their schedules."""

    def __init__(self, manager: TaskManager | None = None) -> None:
        self.manager = manager
        self.running = False
        self._stop = threading.Event()

    def run_due(self, now: datetime) -> list[threading.Thread]:
        """Start every task due at ``now`` in its own thread and return the threads."""
        manager = self.manager if self.manager is not None else get_task_manager()
        tasks = manager.next(now)
        if not tasks:
            return []

        logger.info("running")
        threads = []
        for task in tasks:
            thread = threading.Thread(target=_run_job, args=(task.job,), daemon=True)
            thread.start()
            threads.append(thread)
        return threads

    def start(self) -> None:
        """Tick once a second until stopped; returns at once if already running."""
        if self.running:
            return
        self.running = True
        try:
            while True:
                logger.debug("tick")
                if self._stop.wait(1.0):
                    break
                self.run_due(datetime.now())
        finally:
            self.running = False
            self._stop.clear()

    def stop(self) -> None:
        """Ask a running loop to finish after its current tick."""
        self._stop.set()