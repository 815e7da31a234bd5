"""
native-launchers CLI
Builds small native executables that start a shared runtime image

Usage: native-launchers <command> [options]

The build command will:
- render one C source file per launcher configured in launchers.toml
- compile it with the first C compiler found on PATH (or the configured one)
- on Windows, switch non-console launchers to the GUI subsystem via EditBin
"""
import sys
from pathlib import Path

from .config import CONFIG_FILE_NAME, create_example_config


def build(args=None):
    """Build all launchers configured in launchers.toml"""
    from .build_launchers import main as build_main

    args = list(sys.argv[1:]) if args is None else list(args)
    # `uv run <cmd> -- --arg ...` may forward a leading '--'
    if args and args[0] == "--":
        args = args[1:]
    return build_main(args)


def main():
    """Main entry point for native-launchers command with subcommands"""
    if len(sys.argv) < 2:
        print_help()
        return 0

    subcommand = sys.argv[1]

    if subcommand in ["build", "b"]:
        return build(sys.argv[2:])
    elif subcommand in ["init", "new"]:
        return init_config(sys.argv[2:])
    elif subcommand in ["help", "-h", "--help"]:
        print_help()
        return 0
    else:
        print(f"Unknown subcommand: {subcommand}")
        print_help()
        return 1


def init_config(args):
    """Initialize a new launchers.toml configuration file"""
    output_path = None
    force = False

    i = 0
    while i < len(args):
        if args[i] in ["-o", "--output"]:
            if i + 1 < len(args):
                output_path = args[i + 1]
                i += 2
            else:
                print("Error: --output requires a path")
                return 1
        elif args[i] in ["-f", "--force"]:
            force = True
            i += 1
        elif args[i] in ["-h", "--help"]:
            print(f"""
native-launchers init - Create a new {CONFIG_FILE_NAME} configuration file

Usage: native-launchers init [options]

Options:
  -o, --output PATH    Output path for the configuration file (default: {CONFIG_FILE_NAME})
  -f, --force         Overwrite existing file
  -h, --help          Show this help message
""")
            return 0
        else:
            print(f"Unknown option: {args[i]}")
            print("Use 'native-launchers init --help' for usage information")
            return 1

    if output_path is None:
        output_path = Path.cwd() / CONFIG_FILE_NAME
    else:
        output_path = Path(output_path)

    if output_path.exists() and not force:
        print(f"Configuration file already exists: {output_path}")
        print("Use --force to overwrite or specify a different path with --output")
        return 1

    try:
        created_path = create_example_config(output_path)
    except OSError as e:
        print(f"[ERROR] Error creating configuration file: {e}")
        return 1

    print(f"[OK] Created configuration file: {created_path}")
    print("\nNext steps:")
    print("1. Point image_dir/image_name at your shared image")
    print("2. Add one [[launchers]] entry per executable")
    print("3. Build with: native-launchers build")
    return 0


def print_help():
    """Print help information for native-launchers command"""
    help_text = f"""
native-launchers - Native launcher executables for shared runtime images

Usage: native-launchers <command> [options]

Commands:
  init, new      Create a new {CONFIG_FILE_NAME} configuration file
  build, b       Generate and compile all configured launchers
  help           Show this help message

Examples:
  native-launchers init
  native-launchers build
  native-launchers build --config app/{CONFIG_FILE_NAME} --debug
  native-launchers build --launcher App1 --timeout 120

Configuration:
  native-launchers looks for {CONFIG_FILE_NAME} in the current directory or its
  parents. [build] holds the shared settings (image_dir, image_name, compiler,
  compiler_args, linker_args, debug, timeout) and every [[launchers]] entry
  names one executable (name, console, and optional image_dir/image_name).

Compilers:
  Without an explicit `compiler`, the first of cc, gcc, clang, zig (or
  cl.exe, zig.exe, gcc.exe, clang.exe on Windows) found on PATH is used.
  With GRAALVM_HOME set, GraalVM's bundled clang is tried last.
"""
    print(help_text)


if __name__ == "__main__":
    sys.exit(main())
