import os
import stat
from pathlib import Path

import pytest

from native_launchers.config import BuildSettings, LaunchersConfig, LauncherSpec
from native_launchers.process import Success


def make_executable(directory: Path, name: str) -> Path:
    """Create an empty file with the execute bit set"""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


class RecordingRunner:
    """Stands in for run_process and remembers every call"""

    def __init__(self, outcomes=None):
        self.calls = []
        self.outcomes = list(outcomes or [])

    def __call__(self, working_directory, argv, timeout):
        self.calls.append((Path(working_directory), list(argv), timeout))
        if self.outcomes:
            return self.outcomes.pop(0)
        return Success()

    @property
    def argvs(self):
        return [argv for _, argv, _ in self.calls]


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def app_config(tmp_path):
    return LaunchersConfig(
        build=BuildSettings(image_dir="target", image_name="app-image", timeout=30),
        launchers=[LauncherSpec(name="App1", console=False)],
        base_dir=tmp_path,
    )


@pytest.fixture
def path_env(tmp_path):
    """PATH-like string built from directories under tmp_path"""
    def build(*dirs, separator=os.pathsep):
        return separator.join(str(tmp_path / d) for d in dirs)
    return build
