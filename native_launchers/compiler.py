"""C compiler discovery and compile command assembly."""

import os
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Tuple

from .errors import CompilerNotFound
from .host import PlatformProfile


WINDOWS_CANDIDATES = ["cl.exe", "zig.exe", "gcc.exe", "clang.exe"]
UNIX_CANDIDATES = ["cc", "gcc", "clang", "zig"]


def builtin_clang(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Path of the clang shipped with GraalVM's llvm-toolchain, if GRAALVM_HOME is set.

    Install it with: $GRAALVM_HOME/bin/gu install llvm-toolchain
    """
    if env is None:
        env = os.environ
    graal_home = env.get("GRAALVM_HOME")
    if not graal_home:
        return None
    return str(Path(graal_home, "languages", "llvm", "native", "bin", "clang").absolute())


def default_candidates(platform: PlatformProfile, env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Compiler names to look for, most preferred first."""
    if platform.is_windows:
        return list(WINDOWS_CANDIDATES)
    candidates = list(UNIX_CANDIDATES)
    clang = builtin_clang(env)
    if clang:
        candidates.append(clang)
    return candidates


def _is_executable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def locate_executable(candidates: Sequence[str], path_env: str, separator: str) -> Optional[Tuple[Path, str]]:
    """Return (full path, candidate name) of the first executable found, or None.

    Directories are searched in PATH order and every candidate is tried in a
    directory before moving on, so PATH order beats candidate order. Empty PATH
    entries are ignored.
    """
    for directory in path_env.split(separator):
        if not directory:
            continue
        for name in candidates:
            cmd = Path(directory) / name
            if _is_executable_file(cmd):
                return cmd, name
    return None


def find_executable(candidates: Sequence[str], path_env: str, separator: str) -> str:
    found = locate_executable(candidates, path_env, separator)
    if found is None:
        raise CompilerNotFound(candidates)
    return found[1]


def is_zig(name: str) -> bool:
    return Path(name).name.lower() in ("zig", "zig.exe")


def resolve_compiler(platform: PlatformProfile, env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Find a C compiler on PATH and return the leading command tokens.

    zig is a multi-tool and only acts as a C compiler through its `cc`
    subcommand. zig cc works for the host target, but cross-compiling with
    it breaks dynamic loading.
    """
    if env is None:
        env = os.environ
    candidates = default_candidates(platform, env)
    found = locate_executable(candidates, env.get("PATH", ""), platform.path_separator)
    if found is None:
        raise CompilerNotFound(candidates)

    path, name = found
    print(f"[INFO] Found executable: {path}")
    command = [name]
    if is_zig(name):
        command.append("cc")
    return command


def build_compile_args(
    compiler: Optional[Sequence[str]],
    output_name: str,
    source_file: str,
    platform: PlatformProfile,
    explicit_override: Optional[Sequence[str]] = None,
    compiler_args: Optional[Sequence[str]] = None,
    linker_args: Optional[Sequence[str]] = None,
    debug: bool = False,
) -> List[str]:
    """Assemble the compile command line.

    Compiler flags go before `-o <output> <source>` so every front-end accepts
    them; linker flags go after the source for traditional Unix link order.
    """
    if explicit_override:
        args = list(explicit_override)
    elif compiler:
        args = list(compiler)
    else:
        raise ValueError("either a resolved compiler or an explicit compiler command is required")

    if compiler_args:
        args.extend(compiler_args)
    args += ["-o", output_name, source_file]

    if debug:
        args.append("-DDEBUG")

    if platform.is_unix:
        # needed for dlopen
        args.append("-ldl")
    if linker_args:
        args.extend(linker_args)
    return args
