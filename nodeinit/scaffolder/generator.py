"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and writes a complete Express project: directory
skeleton, every template from the template table, ``package.json``, and
optionally installs dependencies with the selected package manager.

All file-system work is sequential: each directory or file is created and
awaited before the next one starts.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel, Field
from rich.markup import escape

from nodeinit.utils import (
    console,
    print_banner,
    print_created,
    print_error,
    print_next_steps,
    print_step,
    print_success,
    run_command,
    write_text,
)

from . import template_table
from .models import PackageManager, ProjectConfig
from .package_json import render_package_json


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

PROJECT_DIRS: list[str] = [
    "configs",
    "controllers",
    "middlewares",
    "models",
    "routes",
    "scripts",
    "utils",
    "uploads",
]


# ---------------------------------------------------------------------------
# Errors / results
# ---------------------------------------------------------------------------


class GenerationError(Exception):
    """Raised when a directory or file cannot be written.

    Files written before the failure are left on disk.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Failed to create {path}: {message}")


class GenerationResult(BaseModel):
    """Outcome of a generation run."""

    project_dir: Path
    files_written: list[str] = Field(default_factory=list)
    install_attempted: bool = False
    install_succeeded: bool = False
    next_steps: list[tuple[str, str]] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# File plan
# ---------------------------------------------------------------------------


def plan_files(config: ProjectConfig) -> list[tuple[str, str]]:
    """Return ``(relative_path, content)`` for every file, in write order."""
    db = config.database
    files: list[tuple[str, str]] = [
        ("package.json", render_package_json(config)),
        ("index.js", template_table.get_index_js(db)),
        ("configs/database.js", template_table.get_database_config(db)),
        ("controllers/auth.controller.js", template_table.get_auth_controller()),
        ("middlewares/auth.middleware.js", template_table.get_auth_middleware()),
        ("models/user.model.js", template_table.get_user_model(db)),
        ("routes/auth.route.js", template_table.get_auth_route()),
        ("utils/jwt.js", template_table.get_jwt_util()),
    ]
    if config.has_database:
        files.append(("scripts/seed-user.js", template_table.get_seed_user_script(db)))
    files += [
        (".env.example", template_table.get_env_example(db, config.name)),
        (".gitignore", template_table.get_gitignore()),
    ]
    if config.package_manager is PackageManager.PNPM:
        files.append((".npmrc", template_table.get_npmrc()))
    files += [
        (
            "README.md",
            template_table.get_readme(
                config.name, config.description, config.package_manager, db
            ),
        ),
        ("uploads/.gitkeep", ""),
    ]
    return files


def build_next_steps(
    config: ProjectConfig,
    use_current_dir: bool,
    dependencies_installed: bool,
) -> list[tuple[str, str]]:
    """Return the ``(command, label)`` pairs shown after generation."""
    pm = config.package_manager
    steps: list[tuple[str, str]] = []
    if not use_current_dir:
        steps.append((f"cd {config.slug}", "Navigate to project"))
    if not dependencies_installed:
        steps.append((" ".join(pm.install_command), "Install dependencies"))
    steps.append((pm.run_command("start"), "Start application"))
    steps.append((pm.run_command("dev"), "Start in development mode"))
    if config.has_database:
        steps.append((pm.run_command("seed:user"), "Seed a test user"))
    return steps


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes a project for a ``ProjectConfig`` under *base_dir*.

    Args:
        config: The user's choices.
        base_dir: Directory the project is created in.
        use_current_dir: Write straight into *base_dir* instead of creating
            a ``<slug>/`` child directory.
        verbose: Print a line for every directory and file created.  When
            ``False`` only install output, warnings and the summary appear.
    """

    def __init__(
        self,
        config: ProjectConfig,
        base_dir: str | Path,
        use_current_dir: bool = False,
        verbose: bool = True,
    ) -> None:
        self.config = config
        self.base_dir = Path(base_dir)
        self.use_current_dir = use_current_dir
        self.verbose = verbose

    @property
    def project_dir(self) -> Path:
        if self.use_current_dir:
            return self.base_dir
        return self.base_dir / self.config.slug

    # -- Public API --------------------------------------------------------

    async def generate(self) -> GenerationResult:
        """Generate the project.

        Returns:
            A ``GenerationResult`` describing what was written.

        Raises:
            GenerationError: A directory or file could not be written.
        """
        root = self.project_dir
        await self._mkdir(root, str(root))

        # 1. Directory skeleton
        await self._create_directory_structure(root)

        # 2. Files
        if self.verbose:
            print_step("Generating files")
        written: list[str] = []
        for rel_path, content in plan_files(self.config):
            await self._write(root, rel_path, content)
            written.append(rel_path)

        # 3. Dependencies
        installed = False
        if self.config.install_dependencies:
            installed = await self._install_dependencies(root)

        # 4. Summary
        steps = build_next_steps(self.config, self.use_current_dir, installed)
        self._print_summary(root, steps)

        return GenerationResult(
            project_dir=root,
            files_written=written,
            install_attempted=self.config.install_dependencies,
            install_succeeded=installed,
            next_steps=steps,
        )

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the fixed project subdirectories."""
        if self.verbose:
            print_step("Creating directory structure")
        for d in PROJECT_DIRS:
            await self._mkdir(root / d, d)
            if self.verbose:
                print_created(d, directory=True)

    # -- File-system primitives --------------------------------------------

    async def _mkdir(self, path: Path, label: str) -> None:
        try:
            await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise GenerationError(label, exc.strerror or str(exc)) from exc

    async def _write(self, root: Path, rel_path: str, content: str) -> None:
        try:
            await asyncio.to_thread(write_text, root / rel_path, content)
        except OSError as exc:
            raise GenerationError(rel_path, exc.strerror or str(exc)) from exc
        if self.verbose:
            print_created(rel_path)

    # -- Dependency installation -------------------------------------------

    async def _install_dependencies(self, root: Path) -> bool:
        """Run the package manager's install command in *root*.

        Failures are reported as warnings and never raised: the generated
        files are already on disk and the user can install manually.
        """
        pm = self.config.package_manager
        cmd = pm.install_command
        print_step("Installing dependencies")
        try:
            returncode = await run_command(cmd, cwd=root)
        except OSError as exc:
            self._report_install_failure(f"could not run '{' '.join(cmd)}': {exc}")
            return False

        if returncode != 0:
            self._report_install_failure(
                f"'{' '.join(cmd)}' exited with code {returncode}"
            )
            return False

        if pm is PackageManager.PNPM:
            await self._rebuild_native_modules(root)

        print_success("✓ Dependencies installed successfully!")
        return True

    async def _rebuild_native_modules(self, root: Path) -> None:
        """``pnpm rebuild``; a failure here only prints a note."""
        if self.verbose:
            console.print("\nRebuilding native modules...\n")
        try:
            returncode = await run_command(["pnpm", "rebuild"], cwd=root)
        except OSError:
            returncode = -1
        if returncode != 0:
            console.print(
                '\nNote: Some native modules may need to be rebuilt. '
                'Run "pnpm rebuild" if needed.\n'
            )

    def _report_install_failure(self, reason: str) -> None:
        print_error(f"✗ Error installing dependencies: {reason}")
        console.print("You can install them manually later.\n")

    # -- Summary -----------------------------------------------------------

    def _print_summary(self, root: Path, steps: list[tuple[str, str]]) -> None:
        console.print()
        print_banner("Project initialized successfully!")
        console.print(f"\n[bold]Project location:[/bold] [cyan]{escape(str(root))}[/cyan]\n")
        print_success("Your Node.js application is ready!\n")
        print_next_steps(steps)
