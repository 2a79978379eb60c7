"""Template table: database selection (and project strings) -> file content.

Every function here is pure: the same arguments always produce the same
text, and nothing touches the file system beyond reading the packaged
``.j2`` templates.  Database-aware templates have exactly one rendering per
``Database`` member, including a stub for ``Database.NONE``.

Passing a database value that is not a ``Database`` member raises
``ValueError`` straight away; callers are expected to have validated input
through ``ProjectConfig`` first.
"""

from __future__ import annotations

from functools import lru_cache

from .models import Database, PackageManager
from .templates import TemplateRenderer


# Environment variable read by the generated index.js to connect on startup.
DATABASE_ENV_VARS: dict[Database, str | None] = {
    Database.NONE: None,
    Database.MONGODB: "MONGODB_URI",
    Database.POSTGRESQL: "DATABASE_URL",
    Database.MYSQL: "DB_CONNECTION_STRING",
    Database.SQLITE: "DB_PATH",
}

# Template kind -> database -> template path.
DATABASE_TEMPLATES: dict[str, dict[Database, str]] = {
    kind: {db: pattern.format(db=db.value) for db in Database}
    for kind, pattern in {
        "database_config": "configs/database.{db}.js.j2",
        "user_model": "models/user.model.{db}.js.j2",
        "seed_user": "scripts/seed-user.{db}.js.j2",
    }.items()
}


@lru_cache(maxsize=1)
def _renderer() -> TemplateRenderer:
    return TemplateRenderer()


def _as_database(database: Database | str) -> Database:
    """Coerce *database* to a ``Database`` member or raise ``ValueError``."""
    try:
        return Database(database)
    except ValueError:
        valid = ", ".join(db.value for db in Database)
        raise ValueError(
            f"Unknown database: {database!r}. Expected one of: {valid}"
        ) from None


def _as_package_manager(package_manager: PackageManager | str) -> PackageManager:
    try:
        return PackageManager(package_manager)
    except ValueError:
        valid = ", ".join(pm.value for pm in PackageManager)
        raise ValueError(
            f"Unknown package manager: {package_manager!r}. Expected one of: {valid}"
        ) from None


def _render_for(kind: str, database: Database | str) -> str:
    db = _as_database(database)
    return _renderer().render(DATABASE_TEMPLATES[kind][db])


# ---------------------------------------------------------------------------
# Database-aware templates
# ---------------------------------------------------------------------------


def get_index_js(database: Database | str) -> str:
    """Entry point; connects to the database on startup when one is selected."""
    db = _as_database(database)
    return _renderer().render("index.js.j2", {"db_env_var": DATABASE_ENV_VARS[db]})


def get_database_config(database: Database | str) -> str:
    """``configs/database.js``; the ``none`` variant only logs a notice."""
    return _render_for("database_config", database)


def get_user_model(database: Database | str) -> str:
    """``models/user.model.js`` for the selected database."""
    return _render_for("user_model", database)


def get_seed_user_script(database: Database | str) -> str:
    """``scripts/seed-user.js``; the ``none`` variant connects to nothing."""
    return _render_for("seed_user", database)


# ---------------------------------------------------------------------------
# Selection-independent templates
# ---------------------------------------------------------------------------


def get_auth_controller() -> str:
    return _renderer().render("controllers/auth.controller.js.j2")


def get_auth_middleware() -> str:
    return _renderer().render("middlewares/auth.middleware.js.j2")


def get_auth_route() -> str:
    return _renderer().render("routes/auth.route.js.j2")


def get_jwt_util() -> str:
    return _renderer().render("utils/jwt.js.j2")


def get_gitignore() -> str:
    return _renderer().render("gitignore.j2")


def get_npmrc() -> str:
    """``.npmrc`` enabling pre/post scripts, needed by pnpm for native modules."""
    return _renderer().render("npmrc.j2")


# ---------------------------------------------------------------------------
# Templates with interpolated strings
# ---------------------------------------------------------------------------


def get_env_example(database: Database | str, name: str) -> str:
    """``.env.example``; default connection strings embed the project slug."""
    db = _as_database(database)
    return _renderer().render(
        "env.example.j2", {"database": db.value, "name": name}
    )


def get_readme(
    name: str,
    description: str,
    package_manager: PackageManager | str,
    database: Database | str,
) -> str:
    """``README.md`` with install/run commands for the chosen package manager."""
    pm = _as_package_manager(package_manager)
    _as_database(database)
    return _renderer().render(
        "README.md.j2",
        {
            "name": name,
            "description": description,
            "install_command": " ".join(pm.install_command),
            "start_command": pm.run_command("start"),
            "dev_command": pm.run_command("dev"),
            "seed_command": pm.run_command("seed:user"),
        },
    )
