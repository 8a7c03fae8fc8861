"""Shared fixtures for pub-license-audit tests."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import pytest
import yaml
from click.testing import CliRunner

from pub_license_audit.resolvers.classifier import LICENSE_TEMPLATES


class PubProject:
    """Builds a pub project with resolved dependencies on disk."""

    def __init__(self, root: Path, name: str = "my_app") -> None:
        self.root = root
        self.name = name
        self.cache_dir = root / "pub-cache"
        self._entries: list[dict[str, Any]] = []
        self._direct: list[str] = []

    def add_package(
        self,
        name: str,
        license_text: Optional[str] = None,
        license_file: str = "LICENSE",
        repository: Optional[str] = None,
        homepage: Optional[str] = None,
        direct: bool = False,
        manifest: bool = True,
    ) -> Path:
        """Create a package directory and register it in the graph."""
        package_root = self.cache_dir / name
        package_root.mkdir(parents=True)
        if manifest:
            pubspec: dict[str, Any] = {"name": name, "version": "1.0.0"}
            if repository is not None:
                pubspec["repository"] = repository
            if homepage is not None:
                pubspec["homepage"] = homepage
            (package_root / "pubspec.yaml").write_text(yaml.safe_dump(pubspec))
        if license_text is not None:
            (package_root / license_file).write_text(license_text)
        self._entries.append({"name": name, "rootUri": package_root.as_uri()})
        if direct:
            self._direct.append(name)
        return package_root

    def write(self) -> Path:
        """Write pubspec.yaml and .dart_tool/package_config.json."""
        pubspec = {
            "name": self.name,
            "dependencies": {dep: "^1.0.0" for dep in self._direct},
        }
        (self.root / "pubspec.yaml").write_text(yaml.safe_dump(pubspec))

        tool_dir = self.root / ".dart_tool"
        tool_dir.mkdir(exist_ok=True)
        graph = {
            "configVersion": 2,
            "packages": [
                *self._entries,
                {"name": self.name, "rootUri": "../", "packageUri": "lib/"},
            ],
        }
        (tool_dir / "package_config.json").write_text(json.dumps(graph))
        return self.root


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def pub_project(tmp_path: Path) -> PubProject:
    """Provide an empty pub project builder rooted in tmp_path."""
    project_dir = tmp_path / "my_app"
    project_dir.mkdir()
    return PubProject(project_dir)


@pytest.fixture
def mit_license_text() -> str:
    """Full MIT license text with a copyright line."""
    return (
        "MIT License\n\nCopyright (c) 2020 Example Corp\n\n"
        f"{LICENSE_TEMPLATES['MIT']}\n"
    )


@pytest.fixture
def gpl3_license_text() -> str:
    """Beginning of the GPL-3.0 license text."""
    template = LICENSE_TEMPLATES["GPL-3.0"]
    header, rest = template.split("\n\n", 1)
    return (
        f"{header}\n\n"
        "Copyright (C) 2007 Free Software Foundation, Inc. <https://fsf.org/>\n"
        f"{rest}\n"
    )


@pytest.fixture
def bsd3_license_text() -> str:
    """BSD-3-Clause license text with a copyright line."""
    return (
        "Copyright 2014, the Dart project authors.\n\n"
        f"{LICENSE_TEMPLATES['BSD-3-Clause']}\n"
    )


@pytest.fixture
def bsd2_license_text() -> str:
    """BSD-2-Clause license text with a copyright line."""
    return (
        "Copyright (c) 2018 Jane Doe\nAll rights reserved.\n\n"
        f"{LICENSE_TEMPLATES['BSD-2-Clause']}\n"
    )
