#!/usr/bin/env python3
"""
Configuration management for launchers.toml files

This module handles parsing and validation of launchers.toml configuration
files that define the launchers to build and the shared build settings.
"""

try:
    import tomllib
except ImportError:
    # For Python < 3.11
    import tomli as tomllib
from pathlib import Path
from typing import Dict, List, Optional, Any, Union
from dataclasses import dataclass, field, replace

from .errors import ConfigError
from .template import conventional_name

CONFIG_FILE_NAME = "launchers.toml"


@dataclass(frozen=True)
class LauncherSpec:
    """A single launcher to build"""
    name: str
    image_dir: Optional[str] = None
    image_name: Optional[str] = None
    console: bool = True

    @property
    def conventional_name(self) -> str:
        return conventional_name(self.name)

    @property
    def c_file_name(self) -> str:
        return self.name + ".c"


@dataclass
class BuildSettings:
    """Build configuration section, shared by all launchers"""
    image_dir: str = "target"
    image_name: str = "main"
    compiler: Optional[List[str]] = None
    compiler_args: Optional[List[str]] = None
    linker_args: Optional[List[str]] = None
    debug: bool = False
    timeout: int = 60  # per external process, in seconds


@dataclass
class LaunchersConfig:
    """Complete launchers configuration"""
    build: BuildSettings = field(default_factory=BuildSettings)
    launchers: List[LauncherSpec] = field(default_factory=list)
    base_dir: Path = field(default_factory=Path.cwd)

    def image_dir_for(self, launcher: LauncherSpec) -> Path:
        """Effective image directory, relative paths resolved against base_dir"""
        image_dir = Path(launcher.image_dir or self.build.image_dir)
        if not image_dir.is_absolute():
            image_dir = self.base_dir / image_dir
        return image_dir

    def image_name_for(self, launcher: LauncherSpec) -> str:
        return launcher.image_name or self.build.image_name

    def select(self, names: List[str]) -> "LaunchersConfig":
        """Copy of this configuration restricted to the named launchers"""
        known = {launcher.name for launcher in self.launchers}
        unknown = [name for name in names if name not in known]
        if unknown:
            raise ConfigError(f"Unknown launcher(s): {', '.join(unknown)}")
        return replace(self, launchers=[launcher for launcher in self.launchers if launcher.name in names])


def _string_list(data: Dict[str, Any], key: str) -> Optional[List[str]]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value.split()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return list(value)


def _optional_str(data: Dict[str, Any], key: str, context: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{context}'{key}' must be a string")
    return value


def _bool(data: Dict[str, Any], key: str, default: bool, context: str) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{context}'{key}' must be true or false")
    return value


def parse_launcher(data: Dict[str, Any]) -> LauncherSpec:
    """Parse one [[launchers]] entry from TOML data"""
    if "name" not in data:
        raise ConfigError("Launcher name is required in every [[launchers]] entry")
    context = f"Launcher '{data['name']}': "
    return LauncherSpec(
        name=str(data["name"]),
        image_dir=_optional_str(data, "image_dir", context),
        image_name=_optional_str(data, "image_name", context),
        console=_bool(data, "console", True, context),
    )


def parse_build(data: Dict[str, Any]) -> BuildSettings:
    """Parse the [build] section from TOML data"""
    defaults = BuildSettings()
    timeout = data.get("timeout", defaults.timeout)
    if not isinstance(timeout, int) or isinstance(timeout, bool):
        raise ConfigError("'timeout' must be an integer number of seconds")
    return BuildSettings(
        image_dir=_optional_str(data, "image_dir", "[build] ") or defaults.image_dir,
        image_name=_optional_str(data, "image_name", "[build] ") or defaults.image_name,
        compiler=_string_list(data, "compiler"),
        compiler_args=_string_list(data, "compiler_args"),
        linker_args=_string_list(data, "linker_args"),
        debug=_bool(data, "debug", defaults.debug, "[build] "),
        timeout=timeout,
    )


def find_project_root(start_path: Optional[Path] = None) -> Path:
    """Find the project root directory containing launchers.toml"""
    if start_path is None:
        start_path = Path.cwd()

    current = start_path if start_path.is_dir() else start_path.parent
    for path in [current] + list(current.parents):
        config_file = path / CONFIG_FILE_NAME
        if config_file.exists():
            return path

    # If no launchers.toml found, return current working directory as fallback
    return Path.cwd()


def load_config(config_path: Optional[Union[str, Path]] = None) -> LaunchersConfig:
    """Load launchers configuration from a TOML file"""
    if config_path is None:
        project_root = find_project_root()
        config_path = project_root / CONFIG_FILE_NAME

        if not config_path.exists():
            raise ConfigError(f"No {CONFIG_FILE_NAME} found in current directory or parent directories")

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    launchers_data = data.get("launchers", [])
    if not isinstance(launchers_data, list) or not all(isinstance(entry, dict) for entry in launchers_data):
        raise ConfigError("'launchers' must be an array of tables ([[launchers]])")
    build_data = data.get("build", {})
    if not isinstance(build_data, dict):
        raise ConfigError("'build' must be a table ([build])")

    return LaunchersConfig(
        build=parse_build(build_data),
        launchers=[parse_launcher(entry) for entry in launchers_data],
        base_dir=config_path.resolve().parent,
    )


def create_example_config(path: Optional[Union[str, Path]] = None) -> Path:
    """Create an example launchers.toml configuration file"""
    if path is None:
        path = Path.cwd() / CONFIG_FILE_NAME
    else:
        path = Path(path)

    launcher_name = Path.cwd().name
    example_config = f'''# launchers.toml - native launchers for a shared runtime image

[build]
image_dir = "target"
image_name = "main"
debug = false
timeout = 60

# Optional: skip compiler discovery and use this command
# compiler = ["gcc"]
# compiler_args = ["-O2"]
# linker_args = []

[[launchers]]
name = "{launcher_name}"
console = true
'''

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(example_config)

    return path


def validate_config(config: LaunchersConfig) -> List[str]:
    """Validate a launchers configuration and return list of warnings"""
    warnings = []

    if not config.launchers:
        warnings.append("No launchers configured")

    seen = set()
    for launcher in config.launchers:
        if not launcher.name:
            warnings.append("Launcher name cannot be empty")
            continue
        if "/" in launcher.name or "\\" in launcher.name:
            warnings.append(f"Launcher name should not contain path separators: {launcher.name}")
        if launcher.name in seen:
            warnings.append(f"Duplicate launcher name: {launcher.name}")
        seen.add(launcher.name)

    if config.build.timeout < 1:
        warnings.append("timeout must be >= 1")

    return warnings
