"""nodeinit configuration.

Typed defaults for the CLI and the interactive prompts.  All settings use
Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from nodeinit.scaffolder.models import Database, PackageManager

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


class PromptDefaults(BaseModel):
    """Default answers offered by the interactive prompts."""

    description: str = Field(default="A Node.js application")
    version: str = Field(default="1.0.0")
    author: str = Field(default="")
    license: str = Field(default="ISC")
    database: Database = Field(default=Database.NONE)
    package_manager: PackageManager = Field(default=PackageManager.NPM)
    install_dependencies: bool = Field(default=True)


class Config(BaseModel):
    """Global nodeinit configuration.

    Instances are typically created once by the CLI entry point (usually via
    :meth:`from_env`) and then passed to the prompts and the generator.
    """

    default_project_name: str = Field(default="node-app", min_length=1)
    init_cwd: Path = Field(
        default_factory=Path.cwd,
        description="Directory relative paths are resolved against (npm's INIT_CWD)",
    )
    verbose: bool = Field(default=True, description="Print every created file")
    prompt_defaults: PromptDefaults = Field(default_factory=PromptDefaults)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            INIT_CWD (set by ``npm init``), NODEINIT_QUIET,
            NODEINIT_DATABASE, NODEINIT_PACKAGE_MANAGER, NODEINIT_NO_INSTALL.

        Raises:
            pydantic.ValidationError: If a database or package manager value
                is not recognised.
        """
        prompt_kwargs: dict[str, Any] = {}
        if os.environ.get("NODEINIT_DATABASE"):
            prompt_kwargs["database"] = os.environ["NODEINIT_DATABASE"].strip().lower()
        if os.environ.get("NODEINIT_PACKAGE_MANAGER"):
            prompt_kwargs["package_manager"] = (
                os.environ["NODEINIT_PACKAGE_MANAGER"].strip().lower()
            )
        if _env_flag("NODEINIT_NO_INSTALL"):
            prompt_kwargs["install_dependencies"] = False

        init_cwd = os.environ.get("INIT_CWD") or os.getcwd()

        return cls(
            init_cwd=Path(init_cwd),
            verbose=not _env_flag("NODEINIT_QUIET"),
            prompt_defaults=PromptDefaults(**prompt_kwargs),
        )
