#!/usr/bin/env python3
"""
Build native launchers

For every launcher in launchers.toml this will:
- render the C template with the launcher's image name and entry point
- write <name>.c into the image directory
- compile it with the configured compiler or the first one found on PATH
- on Windows, turn non-console launchers into GUI subsystem executables
"""
import argparse
import os
import sys
from pathlib import Path
from typing import List, Mapping, Optional

from .compiler import build_compile_args, resolve_compiler
from .config import LaunchersConfig, LauncherSpec, find_project_root, load_config, validate_config, CONFIG_FILE_NAME
from .errors import ConfigError, FileSystemFailure, LauncherBuildError
from .host import PlatformProfile, detect_platform
from .process import CommandInvocation, run_invocation, run_process
from .template import load_template, render


def write_source(image_dir: Path, file_name: str, content: str) -> Path:
    """Write a generated source file, creating image_dir and overwriting old files"""
    try:
        image_dir.mkdir(parents=True, exist_ok=True)
        c_file = image_dir / file_name
        c_file.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileSystemFailure(f"Could not write {image_dir / file_name}: {e}") from e
    return c_file


def build_launcher(
    launcher: LauncherSpec,
    config: LaunchersConfig,
    template: str,
    platform: PlatformProfile,
    env: Optional[Mapping[str, str]] = None,
    runner=run_process,
) -> Path:
    """Generate, compile and (on Windows) patch a single launcher"""
    settings = config.build
    image_dir = config.image_dir_for(launcher)
    image_name = config.image_name_for(launcher)
    output_name = launcher.name + platform.executable_suffix

    content = render(template, image_name, launcher.conventional_name)
    c_file = write_source(image_dir, launcher.c_file_name, content)
    print(f"[GEN] Generated C source file: {c_file.absolute()}")

    # The template has no dependencies besides the dynamic loader,
    # so no include dirs or libraries are needed.
    compiler = None if settings.compiler else resolve_compiler(platform, env)
    args = build_compile_args(
        compiler,
        output_name,
        launcher.c_file_name,
        platform,
        explicit_override=settings.compiler,
        compiler_args=settings.compiler_args,
        linker_args=settings.linker_args,
        debug=settings.debug,
    )
    run_invocation(CommandInvocation(image_dir, args), settings.timeout, runner)

    if not launcher.console and platform.is_windows:
        # /Subsystem:windows at link time would need a WinMain, so patch the binary instead
        print(f"[BUILD] Changing {output_name} to a non-console app")
        editbin = CommandInvocation(image_dir, ["EditBin.exe", "/Subsystem:windows", output_name])
        run_invocation(editbin, settings.timeout, runner)

    return image_dir / output_name


def build_launchers(
    config: LaunchersConfig,
    platform: Optional[PlatformProfile] = None,
    env: Optional[Mapping[str, str]] = None,
    runner=run_process,
    template: Optional[str] = None,
) -> List[Path]:
    """Build every configured launcher in order, stopping at the first failure"""
    if platform is None:
        platform = detect_platform()
    if template is None:
        template = load_template()

    outputs = []
    for launcher in config.launchers:
        print(f"[BUILD] Building launcher: {launcher.name}")
        outputs.append(build_launcher(launcher, config, template, platform, env, runner))
    return outputs


def main(argv=None):
    parser = argparse.ArgumentParser(prog="native-launchers build")
    parser.add_argument("--config", default=None, help=f"path to {CONFIG_FILE_NAME} (defaults to the nearest one in the current or a parent directory)")
    parser.add_argument("--image-dir", default=None, help="default image directory (overrides config)")
    parser.add_argument("--image-name", default=None, help="default image name (overrides config)")
    parser.add_argument("--debug", action="store_true", help="compile launchers with -DDEBUG tracing")
    parser.add_argument("--timeout", type=int, default=None, help="timeout in seconds for each compiler/EditBin run (overrides config)")
    parser.add_argument("--launcher", action="append", default=None, metavar="NAME", help="only build the named launcher (repeatable)")
    args = parser.parse_args(argv)

    try:
        config_path = Path(args.config) if args.config else find_project_root() / CONFIG_FILE_NAME
        config = load_config(config_path)
        print(f"[CONFIG] Loaded configuration: {config_path}")

        if args.image_dir:
            config.build.image_dir = args.image_dir
        if args.image_name:
            config.build.image_name = args.image_name
        if args.debug:
            config.build.debug = True
        if args.timeout is not None:
            config.build.timeout = args.timeout
        if args.launcher:
            config = config.select(args.launcher)
    except ConfigError as e:
        print(f"[ERROR] {e}")
        return 1

    for warning in validate_config(config):
        print(f"[WARN] {warning}")

    try:
        outputs = build_launchers(config, env=os.environ)
    except LauncherBuildError as e:
        print(f"[ERROR] Launcher build failed: {e}")
        return 1

    for output in outputs:
        print(f"[OK] built: {output}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nBuild interrupted by user")
        sys.exit(1)
