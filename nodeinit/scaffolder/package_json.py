"""``package.json`` generation for the scaffolded project.

The manifest pulls in the Express stack every project uses plus the driver
for the selected database.
"""

from __future__ import annotations

import json
from typing import Any

from .models import Database, ProjectConfig


BASE_DEPENDENCIES: dict[str, str] = {
    "dotenv": "^16.0.0",
    "express": "^4.18.0",
    "cors": "^2.8.5",
    "bcrypt": "^5.1.0",
    "jsonwebtoken": "^9.0.0",
    "cookie-parser": "^1.4.6",
    "@vuedapt/logger": "^1.0.0",
}

DATABASE_DEPENDENCIES: dict[Database, dict[str, str]] = {
    Database.NONE: {},
    Database.MONGODB: {"mongoose": "^8.0.0"},
    Database.POSTGRESQL: {"pg": "^8.11.0"},
    Database.MYSQL: {"mysql2": "^3.6.0"},
    Database.SQLITE: {"better-sqlite3": "^9.0.0"},
}

DEV_DEPENDENCIES: dict[str, str] = {
    "nodemon": "^2.0.0",
}


def build_package_json(config: ProjectConfig) -> dict[str, Any]:
    """Return the ``package.json`` document for *config* as a dict."""
    return {
        "name": config.slug,
        "version": config.version,
        "description": config.description,
        "main": "index.js",
        "type": "module",
        "scripts": {
            "start": "node index.js",
            "dev": "nodemon index.js",
            "seed:user": "node scripts/seed-user.js",
            "test": 'echo "Error: no test specified" && exit 1',
        },
        "keywords": [],
        "author": config.author or "",
        "license": config.license,
        "dependencies": {
            **BASE_DEPENDENCIES,
            **DATABASE_DEPENDENCIES[config.database],
        },
        "devDependencies": dict(DEV_DEPENDENCIES),
    }


def render_package_json(config: ProjectConfig) -> str:
    """Serialise the manifest with two-space indentation and a trailing newline."""
    return json.dumps(build_package_json(config), indent=2, ensure_ascii=False) + "\n"
