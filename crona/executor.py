"""Running external commands, with a switchable stand-in for tests."""

from __future__ import annotations

import io
import subprocess
from dataclasses import dataclass, field
from typing import IO, Any, Sequence, Union


@dataclass
class RuntimeFlags:
    """Process-wide switches that replace real execution in tests."""

    test_mode: bool = False
    test_executor_error: bool = False


runtime_flags = RuntimeFlags()


@dataclass
class ExecutorOptions:
    """What to run and where its output goes."""

    name: str = ""
    args: list[str] = field(default_factory=list)
    stdout: IO[Any] | None = None
    stderr: IO[Any] | None = None


_Target = Union[int, IO[Any]]


def _target_for(stream: IO[Any] | None) -> tuple[_Target, IO[Any] | None]:
    """Pick a subprocess target; the second item is a stream to copy piped output into."""
    if stream is None:
        return subprocess.DEVNULL, None
    try:
        stream.fileno()
    except (AttributeError, OSError, io.UnsupportedOperation, ValueError):
        return subprocess.PIPE, stream
    stream.flush()
    return stream, None


def _copy_output(data: bytes | None, sink: IO[Any] | None) -> None:
    if sink is None or not data:
        return
    if isinstance(sink, io.TextIOBase):
        sink.write(data.decode(errors="replace"))
    else:
        sink.write(data)
    sink.flush()


@dataclass
class RealExecutor:
    """Starts the command as a child process and waits for it."""

    options: ExecutorOptions

    def run(self) -> None:
        """Run the command; raise if it cannot start or exits non-zero."""
        opts = self.options
        stdout_target, stdout_sink = _target_for(opts.stdout)
        stderr_target, stderr_sink = _target_for(opts.stderr)
        completed = subprocess.run(
            [opts.name, *opts.args],
            stdout=stdout_target,
            stderr=stderr_target,
            check=False,
        )
        _copy_output(completed.stdout, stdout_sink)
        _copy_output(completed.stderr, stderr_sink)
        completed.check_returncode()


@dataclass
class MockExecutor:
    """Does nothing, or fails when the runtime flags ask it to."""

    options: ExecutorOptions

    def run(self) -> None:
        """Pretend to run; raise if a failure is requested."""
        if runtime_flags.test_executor_error:
            raise RuntimeError("error")


def create_executor(
    name: str = "",
    args: Sequence[str] = (),
    stdout: IO[Any] | None = None,
    stderr: IO[Any] | None = None,
) -> RealExecutor | MockExecutor:
    """Build the executor suited to the current runtime mode."""
    options = ExecutorOptions(name=name, args=list(args), stdout=stdout, stderr=stderr)
    if runtime_flags.test_mode:
        return MockExecutor(options)
    return RealExecutor(options)