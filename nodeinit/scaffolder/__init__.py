"""nodeinit scaffolder -- generates Express project structures.

This package takes a ``ProjectConfig`` and renders an Express/Node.js project
(entry point, database config, auth controller/middleware/route, user model,
JWT utility, seed script, env example, ignore file and README) for the
selected database.

Quick usage::

    from nodeinit.scaffolder import Database, ProjectConfig, ProjectGenerator

    config = ProjectConfig(name="My App", database=Database.MONGODB)
    generator = ProjectGenerator(config, "/tmp/output")
    result = await generator.generate()
"""

from nodeinit.scaffolder.generator import (
    GenerationError,
    GenerationResult,
    ProjectGenerator,
)
from nodeinit.scaffolder.models import Database, PackageManager, ProjectConfig
from nodeinit.scaffolder.templates import TemplateRenderer

__all__ = [
    "Database",
    "GenerationError",
    "GenerationResult",
    "PackageManager",
    "ProjectConfig",
    "ProjectGenerator",
    "TemplateRenderer",
]
