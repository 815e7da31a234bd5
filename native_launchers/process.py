"""Running external tools (compilers, EditBin) with a timeout."""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

from .errors import ProcessLaunchFailure, ProcessNonZeroExit, ProcessTimeout


@dataclass(frozen=True)
class Success:
    pass


@dataclass(frozen=True)
class NonZeroExit:
    code: int


@dataclass(frozen=True)
class TimedOut:
    timeout: float


@dataclass(frozen=True)
class LaunchFailed:
    cause: BaseException


ProcessOutcome = Union[Success, NonZeroExit, TimedOut, LaunchFailed]


@dataclass(frozen=True)
class CommandInvocation:
    """One external process launch"""
    working_directory: Path
    argv: List[str]

    @property
    def command_line(self) -> str:
        return " ".join(self.argv)


def run_process(working_directory: Union[str, Path], argv: Sequence[str], timeout: float) -> ProcessOutcome:
    """Run argv in working_directory and classify how it ended.

    The child shares our stdin/stdout/stderr, so compiler output shows up live.
    A child still running after `timeout` seconds is killed before TimedOut
    is returned.
    """
    if not argv:
        raise ValueError("argv must not be empty")

    try:
        process = subprocess.Popen(list(argv), cwd=str(working_directory))
    except OSError as e:
        return LaunchFailed(e)

    try:
        returncode = process.wait(timeout=timeout)
    except subprocess.TimeoutExpired:
        process.kill()
        process.wait()
        return TimedOut(timeout)

    if returncode != 0:
        return NonZeroExit(returncode)
    return Success()


def check_outcome(outcome: ProcessOutcome, invocation: CommandInvocation) -> None:
    """Raise the matching LauncherBuildError for anything but Success."""
    command = invocation.command_line
    if isinstance(outcome, Success):
        return
    if isinstance(outcome, NonZeroExit):
        raise ProcessNonZeroExit(command, outcome.code)
    if isinstance(outcome, TimedOut):
        raise ProcessTimeout(command, outcome.timeout)
    if isinstance(outcome, LaunchFailed):
        raise ProcessLaunchFailure(command, outcome.cause) from outcome.cause
    raise TypeError(f"Unknown process outcome: {outcome!r}")


def run_invocation(invocation: CommandInvocation, timeout: float, runner=run_process) -> None:
    print("$ ", invocation.command_line)
    outcome = runner(invocation.working_directory, invocation.argv, timeout)
    check_outcome(outcome, invocation)
