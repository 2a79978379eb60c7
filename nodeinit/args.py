"""Command-line argument handling.

Two optional positionals decide where the project goes::

    nodeinit                  -> ./node-app/
    nodeinit .                -> current directory, named after it
    nodeinit my-api           -> ./my-api/
    nodeinit my-api .         -> current directory, named "my-api"
    nodeinit my-api ../work   -> ../work/my-api/
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import NamedTuple, Sequence

DEFAULT_PROJECT_NAME = "node-app"
CURRENT_DIR = "."

__version__ = "1.0.0"


class TargetSpec(NamedTuple):
    """Where to generate, and the project name to offer by default."""

    default_project_name: str
    base_dir: Path
    use_current_dir: bool


def resolve_target(
    positionals: Sequence[str],
    cwd: Path,
    init_cwd: Path,
    default_name: str = DEFAULT_PROJECT_NAME,
) -> TargetSpec:
    """Derive the default name and base directory from positional arguments.

    Args:
        positionals: At most two user arguments (name and/or path).
        cwd: The process working directory.
        init_cwd: Directory relative paths are resolved against; differs
            from *cwd* when launched through ``npm init``.
        default_name: Name used when none can be derived.
    """
    first = positionals[0] if len(positionals) > 0 else None
    second = positionals[1] if len(positionals) > 1 else None

    if first == CURRENT_DIR:
        return TargetSpec(second or cwd.name or default_name, cwd, True)

    if first:
        if second == CURRENT_DIR:
            return TargetSpec(first, cwd, True)
        if second:
            return TargetSpec(first, (init_cwd / second).resolve(), False)
        return TargetSpec(first, init_cwd, False)

    return TargetSpec(default_name, init_cwd, False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nodeinit",
        description="Scaffold an Express/Node.js application",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  nodeinit                 create ./node-app\n"
            "  nodeinit my-api          create ./my-api\n"
            "  nodeinit .               generate into the current directory\n"
            "  nodeinit my-api ../work  create ../work/my-api\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name, or '.' to use the current directory",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Base directory for the project ('.' for the current directory)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Accept all defaults without prompting",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print warnings and the final summary",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse *argv* (defaults to ``sys.argv[1:]``)."""
    return build_parser().parse_args(argv)


def positionals_of(args: argparse.Namespace) -> list[str]:
    """The user-supplied positional arguments, in order."""
    return [value for value in (args.name, args.path) if value]
