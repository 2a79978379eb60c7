"""Pydantic v2 models describing the project to scaffold.

A single ``ProjectConfig`` record is created from user input (or defaults),
passed to every template function, and discarded after the run.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nodeinit.utils import slugify


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Database(str, Enum):
    """Database the generated application connects to."""
    NONE = "none"
    MONGODB = "mongodb"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLITE = "sqlite"

    @property
    def label(self) -> str:
        return _DATABASE_LABELS[self]


_DATABASE_LABELS: dict[Database, str] = {
    Database.NONE: "None",
    Database.MONGODB: "MongoDB",
    Database.POSTGRESQL: "PostgreSQL",
    Database.MYSQL: "MySQL",
    Database.SQLITE: "SQLite",
}


class PackageManager(str, Enum):
    """Node.js package manager used to install and run the project."""
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def install_command(self) -> list[str]:
        """Argument list for installing dependencies."""
        return [self.value, "install"]

    def run_command(self, script: str) -> str:
        """Command line shown to users for running a ``package.json`` script."""
        if script == "start":
            return f"{self.value} start"
        return f"{self.value} run {script}"


# ---------------------------------------------------------------------------
# Project record
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """Everything the user chose for the project being scaffolded."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name as typed by the user")
    description: str = Field(default="A Node.js application")
    version: str = Field(default="1.0.0")
    author: str = Field(default="")
    license: str = Field(default="ISC")
    database: Database = Field(default=Database.NONE)
    package_manager: PackageManager = Field(default=PackageManager.NPM)
    install_dependencies: bool = Field(default=True)

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Project name cannot be empty")
        return value

    @property
    def slug(self) -> str:
        """Lowercase, hyphenated project name (e.g. ``"My App"`` -> ``"my-app"``)."""
        return slugify(self.name)

    @property
    def has_database(self) -> bool:
        return self.database is not Database.NONE
