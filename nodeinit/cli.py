"""nodeinit CLI entry point.

Resolves the target directory from the positional arguments, collects the
project details interactively (or from defaults with ``--yes``), and runs the
generator.

Usage::

    nodeinit
    nodeinit my-api
    nodeinit . --yes --quiet
"""

from __future__ import annotations

import asyncio
import sys
import traceback
from pathlib import Path
from typing import Sequence

from nodeinit.args import parse_args, positionals_of, resolve_target
from nodeinit.config import Config
from nodeinit.prompts import default_project_config, prompt_project_config
from nodeinit.scaffolder import ProjectGenerator
from nodeinit.utils import console, err_console, print_banner, print_error, print_warning

BANNER_TEXT = "Initializing Node Application 🚀"


def run(argv: Sequence[str] | None = None) -> None:
    """Parse arguments, collect answers, and generate the project.

    Errors propagate to the caller.
    """
    args = parse_args(argv)

    config = Config.from_env()
    if args.quiet:
        config = config.model_copy(update={"verbose": False})

    print_banner(BANNER_TEXT)
    console.print()

    target = resolve_target(
        positionals_of(args),
        cwd=Path.cwd(),
        init_cwd=config.init_cwd,
        default_name=config.default_project_name,
    )

    if args.yes:
        project = default_project_config(target.default_project_name, config)
    else:
        project = prompt_project_config(target.default_project_name, config)

    generator = ProjectGenerator(
        project,
        target.base_dir,
        use_current_dir=target.use_current_dir,
        verbose=config.verbose,
    )
    asyncio.run(generator.generate())


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for the ``nodeinit`` console script."""
    try:
        run(argv)
    except KeyboardInterrupt:
        print_warning("\nAborted.")
        sys.exit(130)
    except Exception as exc:
        print_error(f"Error initializing project: {exc}")
        err_console.print(
            f"Stack trace:\n{traceback.format_exc()}", style="dim", markup=False
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
