"""Interactive questions that produce a ``ProjectConfig``."""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt

from nodeinit.config import Config
from nodeinit.scaffolder.models import Database, PackageManager, ProjectConfig
from nodeinit.utils import console as default_console
from nodeinit.utils import print_error

_DATABASES_BY_LABEL: dict[str, Database] = {db.label.lower(): db for db in Database}


def ask_project_name(default_name: str, console: Console | None = None) -> str:
    """Ask for the project name until a non-blank answer is given."""
    console = console or default_console
    while True:
        answer = Prompt.ask("Project name", default=default_name, console=console)
        if answer and answer.strip():
            return answer.strip()
        print_error("Project name cannot be empty")


def prompt_project_config(
    default_name: str,
    config: Config | None = None,
    console: Console | None = None,
) -> ProjectConfig:
    """Ask every question in order and return the answers as a ``ProjectConfig``.

    Args:
        default_name: Project name offered by default.
        config: Supplies the remaining defaults.
        console: Console to prompt on; defaults to the shared one.
    """
    defaults = (config or Config()).prompt_defaults
    console = console or default_console

    name = ask_project_name(default_name, console)
    description = Prompt.ask("Description", default=defaults.description, console=console)
    version = Prompt.ask("Version", default=defaults.version, console=console)
    author = Prompt.ask(
        "Author",
        default=defaults.author,
        show_default=bool(defaults.author),
        console=console,
    )
    license_id = Prompt.ask("License", default=defaults.license, console=console)
    database_label = Prompt.ask(
        "Database",
        choices=[db.label for db in Database],
        default=defaults.database.label,
        case_sensitive=False,
        console=console,
    )
    database = _DATABASES_BY_LABEL[database_label.strip().lower()]
    package_manager = Prompt.ask(
        "Package manager",
        choices=[pm.value for pm in PackageManager],
        default=defaults.package_manager.value,
        console=console,
    )
    install = Confirm.ask(
        "Install dependencies?",
        default=defaults.install_dependencies,
        console=console,
    )

    return ProjectConfig(
        name=name,
        description=description,
        version=version,
        author=author,
        license=license_id,
        database=database,
        package_manager=package_manager,
        install_dependencies=install,
    )


def default_project_config(default_name: str, config: Config | None = None) -> ProjectConfig:
    """Build the ``ProjectConfig`` every prompt would produce if accepted as-is."""
    defaults = (config or Config()).prompt_defaults
    return ProjectConfig(
        name=default_name,
        description=defaults.description,
        version=defaults.version,
        author=defaults.author,
        license=defaults.license,
        database=defaults.database,
        package_manager=defaults.package_manager,
        install_dependencies=defaults.install_dependencies,
    )
