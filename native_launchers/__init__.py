"""
native_launchers - Native launcher executables for shared runtime images

This package renders a small C launcher per configured entry point, finds a
C compiler on the host, compiles the launcher and, on Windows, hides the
console window of GUI launchers.
"""

__version__ = "0.1.0"

from .cli import main
from .build_launchers import build_launchers, build_launcher
from .compiler import build_compile_args, find_executable, resolve_compiler
from .config import load_config, create_example_config, validate_config, LaunchersConfig, LauncherSpec, BuildSettings
from .host import PlatformProfile, detect_platform
from .process import run_process, Success, NonZeroExit, TimedOut, LaunchFailed

__all__ = [
    "main",
    "build_launchers",
    "build_launcher",
    "build_compile_args",
    "find_executable",
    "resolve_compiler",
    "load_config",
    "create_example_config",
    "validate_config",
    "LaunchersConfig",
    "LauncherSpec",
    "BuildSettings",
    "PlatformProfile",
    "detect_platform",
    "run_process",
    "Success",
    "NonZeroExit",
    "TimedOut",
    "LaunchFailed",
]
