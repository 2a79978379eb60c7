"""Integration tests for end-to-end project generation.

These tests run the real generator against a temporary directory for every
database / package-manager combination and verify that the generated project
is internally consistent: valid JSON, relative imports that resolve to
generated files, and env variables that the entry point actually reads.

No Node.js toolchain is required; dependency installation is disabled.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from nodeinit.scaffolder import Database, PackageManager, ProjectConfig, ProjectGenerator
from nodeinit.scaffolder.template_table import DATABASE_ENV_VARS


_RELATIVE_IMPORT = re.compile(r"""from\s+['"](\.{1,2}/[^'"]+)['"]""")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _scaffold(output_dir: Path, database: Database, pm: PackageManager) -> Path:
    config = ProjectConfig(
        name="E2E Shop",
        description="End-to-end check",
        author="QA",
        database=database,
        package_manager=pm,
        install_dependencies=False,
    )
    result = await ProjectGenerator(config, output_dir, verbose=False).generate()
    return result.project_dir


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestScaffoldValidation:
    """Generated projects are self-consistent."""

    @pytest.mark.parametrize("pm", list(PackageManager), ids=lambda pm: pm.value)
    async def test_package_json_valid(self, tmp_path: Path, any_database, pm, quiet_console):
        root = await _scaffold(tmp_path, any_database, pm)
        manifest = json.loads((root / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "e2e-shop"
        assert manifest["main"] == "index.js"
        assert (root / manifest["main"]).is_file()
        seed_script = manifest["scripts"]["seed:user"].split()[-1]
        assert (root / seed_script).is_file() is (any_database is not Database.NONE)

    async def test_relative_imports_resolve(self, tmp_path: Path, any_database, quiet_console):
        root = await _scaffold(tmp_path, any_database, PackageManager.NPM)
        for js_file in root.rglob("*.js"):
            source = js_file.read_text(encoding="utf-8")
            for target in _RELATIVE_IMPORT.findall(source):
                resolved = (js_file.parent / target).resolve()
                assert resolved.is_file(), f"{js_file.relative_to(root)} imports missing {target}"

    async def test_env_example_documents_connection_variable(
        self, tmp_path: Path, any_database, quiet_console
    ):
        root = await _scaffold(tmp_path, any_database, PackageManager.NPM)
        env_var = DATABASE_ENV_VARS[any_database]
        index_js = (root / "index.js").read_text(encoding="utf-8")
        env_example = (root / ".env.example").read_text(encoding="utf-8")
        if env_var is None:
            assert "connectToDatabase" not in index_js
        else:
            assert f"process.env.{env_var}" in index_js
            assert f"{env_var}=" in env_example

    async def test_regenerating_is_idempotent(self, tmp_path: Path, quiet_console):
        root = await _scaffold(tmp_path, Database.POSTGRESQL, PackageManager.YARN)
        first = {p: p.read_bytes() for p in root.rglob("*") if p.is_file()}
        await _scaffold(tmp_path, Database.POSTGRESQL, PackageManager.YARN)
        second = {p: p.read_bytes() for p in root.rglob("*") if p.is_file()}
        assert first == second

    async def test_readme_matches_package_manager(self, tmp_path: Path, quiet_console):
        root = await _scaffold(tmp_path, Database.MONGODB, PackageManager.PNPM)
        readme = (root / "README.md").read_text(encoding="utf-8")
        assert readme.startswith("# E2E Shop\n")
        assert "pnpm install" in readme
        assert "pnpm run seed:user" in readme
        assert (root / ".npmrc").is_file()
