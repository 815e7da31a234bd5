#!/usr/bin/env python3
"""
Tests for running external processes
"""

import sys
import time
from pathlib import Path

import pytest

from native_launchers.errors import ProcessLaunchFailure, ProcessNonZeroExit, ProcessTimeout
from native_launchers.process import (
    CommandInvocation,
    LaunchFailed,
    NonZeroExit,
    Success,
    TimedOut,
    check_outcome,
    run_invocation,
    run_process,
)


def python(code):
    return [sys.executable, "-c", code]


def test_success(tmp_path):
    print("[TEST] Testing successful process...")
    assert run_process(tmp_path, python("pass"), timeout=30) == Success()
    print("✓ Exit status 0 is Success")


def test_non_zero_exit(tmp_path):
    assert run_process(tmp_path, python("import sys; sys.exit(3)"), timeout=30) == NonZeroExit(3)


def test_timeout(tmp_path):
    print("[TEST] Testing slow process...")
    outcome = run_process(tmp_path, python("import time; time.sleep(30)"), timeout=0.5)
    assert outcome == TimedOut(0.5)
    print("✓ Slow process times out")


def test_timed_out_process_is_killed(tmp_path):
    print("[TEST] Testing that a timed out process is killed...")

    code = "import time; time.sleep(2); open('alive', 'w').close()"
    assert run_process(tmp_path, python(code), timeout=0.5) == TimedOut(0.5)

    # past the point where a surviving child would have written its marker
    time.sleep(3)
    assert not (tmp_path / "alive").exists()

    print("✓ Timed out process never finishes its work")


def test_missing_executable(tmp_path):
    outcome = run_process(tmp_path, ["no-such-compiler-on-this-host"], timeout=5)
    assert isinstance(outcome, LaunchFailed)
    assert isinstance(outcome.cause, OSError)


def test_runs_in_working_directory(tmp_path):
    assert run_process(tmp_path, python("open('marker', 'w').close()"), timeout=30) == Success()
    assert (tmp_path / "marker").exists()


def test_empty_argv(tmp_path):
    with pytest.raises(ValueError):
        run_process(tmp_path, [], timeout=5)


def test_check_outcome_raises_matching_errors():
    invocation = CommandInvocation(Path("."), ["cc", "-o", "App1", "App1.c"])

    check_outcome(Success(), invocation)

    with pytest.raises(ProcessNonZeroExit) as excinfo:
        check_outcome(NonZeroExit(1), invocation)
    assert excinfo.value.code == 1
    assert "cc -o App1 App1.c" in str(excinfo.value)

    with pytest.raises(ProcessTimeout) as excinfo:
        check_outcome(TimedOut(10), invocation)
    assert "timed out" in str(excinfo.value)

    cause = FileNotFoundError("cc")
    with pytest.raises(ProcessLaunchFailure) as excinfo:
        check_outcome(LaunchFailed(cause), invocation)
    assert excinfo.value.cause is cause


def test_run_invocation_prints_command(tmp_path, capsys):
    run_invocation(CommandInvocation(tmp_path, python("pass")), timeout=30)
    assert "-c pass" in capsys.readouterr().out
