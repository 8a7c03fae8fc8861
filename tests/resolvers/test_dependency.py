"""Tests for dependency enumeration."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from pub_license_audit.exceptions import (
    DependencyGraphFormatError,
    DependencyGraphNotFoundError,
    ManifestFormatError,
    ManifestNotFoundError,
)
from pub_license_audit.models.package import Manifest
from pub_license_audit.resolvers.dependency import (
    load_packages,
    parse_dependency_graph,
    strip_file_uri,
)


class TestStripFileUri:
    """Tests for strip_file_uri function."""

    def test_posix_uri(self) -> None:
        """Test that POSIX URIs keep the leading slash."""
        assert (
            strip_file_uri("file:///home/dev/.pub-cache/path-1.8.3", windows=False)
            == "/home/dev/.pub-cache/path-1.8.3"
        )

    def test_windows_uri(self) -> None:
        """Test that Windows URIs start at the drive letter."""
        assert (
            strip_file_uri("file:///C:/Users/dev/pub-cache/path-1.8.3", windows=True)
            == "C:/Users/dev/pub-cache/path-1.8.3"
        )

    def test_platform_invariant(self) -> None:
        """Test that URIs differing only in prefix length give the same path."""
        path = "C:/Users/dev/pub-cache/path-1.8.3"

        assert strip_file_uri(f"file:///{path}", windows=True) == strip_file_uri(
            f"file://{path}", windows=False
        )

    def test_decodes_percent_escapes(self) -> None:
        """Test that escaped characters are decoded."""
        assert (
            strip_file_uri("file:///home/my%20dev/pkg", windows=False)
            == "/home/my dev/pkg"
        )

    def test_relative_uri_unchanged(self) -> None:
        """Test that non-file URIs are returned as-is."""
        assert strip_file_uri("../", windows=False) == "../"

    def test_defaults_to_running_platform(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the platform is detected when not given."""
        monkeypatch.setattr("pub_license_audit.resolvers.dependency.IS_WINDOWS", True)

        assert strip_file_uri("file:///C:/pkg") == "C:/pkg"


class TestParseDependencyGraph:
    """Tests for parse_dependency_graph function."""

    @pytest.fixture
    def manifest(self) -> Manifest:
        return Manifest(name="my_app", dependencies=frozenset({"http"}))

    def test_builds_packages(self, manifest: Manifest, tmp_path: Path) -> None:
        """Test that entries become packages in graph order."""
        data = {
            "packages": [
                {"name": "path", "rootUri": "file:///cache/path-1.8.3"},
                {"name": "http", "rootUri": "file:///cache/http-1.2.0"},
            ]
        }

        packages = parse_dependency_graph(data, manifest, tmp_path, windows=False)

        assert [p.name for p in packages] == ["path", "http"]
        assert packages[0].root_path == Path("/cache/path-1.8.3")
        assert packages[0].is_direct is False
        assert packages[1].is_direct is True

    def test_excludes_self(self, manifest: Manifest, tmp_path: Path) -> None:
        """Test that the project itself is never returned."""
        data = {
            "packages": [
                {"name": "my_app", "rootUri": "../"},
                {"name": "path", "rootUri": "file:///cache/path-1.8.3"},
            ]
        }

        packages = parse_dependency_graph(data, manifest, tmp_path, windows=False)

        assert [p.name for p in packages] == ["path"]

    def test_relative_root_resolved_against_graph_dir(
        self, manifest: Manifest, tmp_path: Path
    ) -> None:
        """Test that relative root URIs are resolved against the graph directory."""
        data = {"packages": [{"name": "local", "rootUri": "../../local"}]}

        packages = parse_dependency_graph(data, manifest, tmp_path, windows=False)

        assert packages[0].root_path == tmp_path / "../../local"

    def test_relative_root_percent_decoded(
        self, manifest: Manifest, tmp_path: Path
    ) -> None:
        """Test that escapes in relative root URIs are decoded."""
        data = {"packages": [{"name": "local", "rootUri": "../../my%20dep/"}]}

        packages = parse_dependency_graph(data, manifest, tmp_path, windows=False)

        assert packages[0].root_path == tmp_path / "../../my dep"

    def test_missing_packages_key(self, manifest: Manifest, tmp_path: Path) -> None:
        """Test that a graph without packages yields nothing."""
        assert parse_dependency_graph({"configVersion": 2}, manifest, tmp_path) == []

    def test_null_packages(self, manifest: Manifest, tmp_path: Path) -> None:
        """Test that a null packages value is treated as empty."""
        assert parse_dependency_graph({"packages": None}, manifest, tmp_path) == []

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "packages",
            None,
            {"packages": {"path": "file:///cache/path"}},
            {"packages": ["path"]},
            {"packages": [{"rootUri": "file:///cache/path"}]},
            {"packages": [{"name": "path"}]},
        ],
    )
    def test_malformed_graph(
        self, data: object, manifest: Manifest, tmp_path: Path
    ) -> None:
        """Test that unexpected shapes raise DependencyGraphFormatError."""
        with pytest.raises(DependencyGraphFormatError):
            parse_dependency_graph(data, manifest, tmp_path)


class TestLoadPackages:
    """Tests for load_packages function."""

    def _write_project(self, root: Path, graph: object) -> tuple[Path, Path]:
        manifest_path = root / "pubspec.yaml"
        manifest_path.write_text("name: my_app\ndependencies:\n  http: ^1.0.0\n")
        graph_path = root / ".dart_tool" / "package_config.json"
        graph_path.parent.mkdir()
        graph_path.write_text(json.dumps(graph))
        return manifest_path, graph_path

    def test_loads_packages(self, tmp_path: Path) -> None:
        """Test loading packages from files on disk."""
        http_root = tmp_path / "cache" / "http"
        manifest_path, graph_path = self._write_project(
            tmp_path,
            {
                "configVersion": 2,
                "packages": [
                    {"name": "http", "rootUri": http_root.as_uri()},
                    {"name": "my_app", "rootUri": "../"},
                ],
            },
        )

        packages = load_packages(manifest_path, graph_path)

        assert len(packages) == 1
        assert packages[0].name == "http"
        assert packages[0].root_path == http_root
        assert packages[0].is_direct is True

    def test_path_dependency_with_space(self, tmp_path: Path) -> None:
        """Test that an escaped relative root points at the real directory."""
        app_dir = tmp_path / "app"
        app_dir.mkdir()
        dep_root = tmp_path / "my dep"
        dep_root.mkdir()
        manifest_path, graph_path = self._write_project(
            app_dir,
            {"packages": [{"name": "my_dep", "rootUri": "../../my%20dep/"}]},
        )

        packages = load_packages(manifest_path, graph_path)

        assert packages[0].root_path.resolve() == dep_root.resolve()

    def test_missing_manifest(self, tmp_path: Path) -> None:
        """Test that a missing pubspec.yaml raises ManifestNotFoundError."""
        with pytest.raises(ManifestNotFoundError, match="pubspec.yaml"):
            load_packages(
                tmp_path / "pubspec.yaml",
                tmp_path / ".dart_tool" / "package_config.json",
            )

    def test_missing_graph_suggests_pub_get(self, tmp_path: Path) -> None:
        """Test that a missing graph raises an error suggesting pub get."""
        (tmp_path / "pubspec.yaml").write_text("name: my_app\n")

        with pytest.raises(DependencyGraphNotFoundError, match="pub get"):
            load_packages(
                tmp_path / "pubspec.yaml",
                tmp_path / ".dart_tool" / "package_config.json",
            )

    def test_missing_manifest_checked_first(self, tmp_path: Path) -> None:
        """Test that the manifest error wins when both files are missing."""
        with pytest.raises(ManifestNotFoundError):
            load_packages(tmp_path / "pubspec.yaml", tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test that an undecodable graph raises DependencyGraphFormatError."""
        manifest_path, graph_path = self._write_project(tmp_path, {})
        graph_path.write_text("{not json")

        with pytest.raises(DependencyGraphFormatError, match="Invalid JSON"):
            load_packages(manifest_path, graph_path)

    def test_graph_with_list_root(self, tmp_path: Path) -> None:
        """Test that a list at the top level raises DependencyGraphFormatError."""
        manifest_path, graph_path = self._write_project(tmp_path, [])

        with pytest.raises(DependencyGraphFormatError):
            load_packages(manifest_path, graph_path)

    def test_malformed_manifest(self, tmp_path: Path) -> None:
        """Test that a pubspec.yaml without a name raises ManifestFormatError."""
        manifest_path, graph_path = self._write_project(tmp_path, {"packages": []})
        manifest_path.write_text("version: 1.0.0\n")

        with pytest.raises(ManifestFormatError):
            load_packages(manifest_path, graph_path)
