from __future__ import annotations

import json
from pathlib import Path

import pytest

from gradlesync.core.models import Library, VersionDescriptor


@pytest.fixture
def version() -> VersionDescriptor:
    return VersionDescriptor(
        id="1.20.4",
        java_version=17,
        libraries=(
            Library(name="org.example:foo:1.0"),
            Library(name="org.example:bar:2.0", is_allowed=False),
        ),
    )


@pytest.fixture
def version_json(tmp_path: Path) -> Path:
    data = {
        "id": "1.20.4",
        "javaVersion": {"component": "java-runtime-gamma", "majorVersion": 17},
        "libraries": [
            {"name": "org.example:foo:1.0"},
            {
                "name": "org.example:mac-only:1.0",
                "rules": [{"action": "allow", "os": {"name": "osx"}}],
            },
            {
                "name": "org.example:not-mac:1.0",
                "rules": [
                    {"action": "allow"},
                    {"action": "disallow", "os": {"name": "osx"}},
                ],
            },
        ],
    }
    path = tmp_path / "1.20.4.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
