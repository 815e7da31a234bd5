"""Errors raised while building launchers.

Every error here is fatal for the whole run; the CLI reports it and exits 1.
"""

from typing import Sequence


class LauncherBuildError(RuntimeError):
    """Base class for launcher build failures"""


class TemplateLoadFailure(LauncherBuildError):
    """The C source template could not be read"""


class FileSystemFailure(LauncherBuildError):
    """A directory could not be created or a source file could not be written"""


class CompilerNotFound(LauncherBuildError):
    def __init__(self, candidates: Sequence[str]):
        self.candidates = list(candidates)
        super().__init__(
            f"None of the supported compilers were found on your system: {self.candidates}"
        )


class ProcessLaunchFailure(LauncherBuildError):
    def __init__(self, command: str, cause: BaseException):
        self.command = command
        self.cause = cause
        super().__init__(f"Execution failed [{command}]: {cause}")


class ProcessTimeout(LauncherBuildError):
    def __init__(self, command: str, timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"Execution timed out after {timeout}s [{command}]")


class ProcessNonZeroExit(LauncherBuildError):
    def __init__(self, command: str, code: int):
        self.command = command
        self.code = code
        super().__init__(f"Execution failed with exit code {code} [{command}]")


class ConfigError(ValueError):
    """Invalid or missing launchers.toml"""
