"""Host platform facts used by compiler discovery and command assembly."""

import platform as _platform
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PlatformProfile:
    """Platform facts, derived once and passed to whoever needs them"""
    is_windows: bool = False
    is_unix: bool = False

    @property
    def path_separator(self) -> str:
        return ";" if self.is_windows else ":"

    @property
    def executable_suffix(self) -> str:
        return ".exe" if self.is_windows else ""

    @classmethod
    def from_os_name(cls, os_name: str) -> "PlatformProfile":
        """Classify an OS name such as "Windows", "Linux" or "Darwin".

        Anything that is neither Windows nor a recognised Unix (macOS included)
        gets no extra linker flags and a ':' separated PATH.
        """
        name = os_name.lower()
        return cls(
            is_windows=name.startswith("win"),
            is_unix=any(tag in name for tag in ("nix", "nux", "aix")),
        )


WINDOWS = PlatformProfile(is_windows=True)
LINUX = PlatformProfile(is_unix=True)


def detect_platform(os_name: Optional[str] = None) -> PlatformProfile:
    """Return the profile of the running host (or of os_name if given)."""
    if os_name is None:
        os_name = _platform.system()
    return PlatformProfile.from_os_name(os_name)
