"""Unit tests for host-project validation (pagegen.project).

Tests cover:
- has_framework_marker (flutter key, sdk dependency, absent)
- extract_package_name (first name line, trimming, missing, empty)
- ProjectValidator (missing manifest, non-Flutter manifest, success)
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pagegen.config import ScaffoldConfig
from pagegen.errors import FilesystemError, MissingPackageName, NotAProjectRoot
from pagegen.fs import LocalFileSystem, MemoryFileSystem
from pagegen.project import (
    ProjectValidator,
    extract_package_name,
    has_framework_marker,
)


class TestHasFrameworkMarker:
    @pytest.mark.unit
    def test_pubspec(self, pubspec_text):
        assert has_framework_marker(pubspec_text)

    @pytest.mark.unit
    def test_sdk_dependency_only(self):
        assert has_framework_marker("name: app\ndependencies:\n  x:\n    sdk:   flutter\n")

    @pytest.mark.unit
    def test_absent(self):
        assert not has_framework_marker("name: app\ndependencies:\n  http: ^1.0.0\n")

    @pytest.mark.unit
    def test_custom_framework(self):
        assert has_framework_marker("jaspr:\n  mode: static\n", framework="jaspr")


class TestExtractPackageName:
    @pytest.mark.unit
    def test_first_name_line(self, pubspec_text):
        assert extract_package_name(pubspec_text) == "travel_app"

    @pytest.mark.unit
    def test_value_trimmed(self):
        assert extract_package_name("  name:   my_app   \n") == "my_app"

    @pytest.mark.unit
    def test_first_match_wins(self):
        assert extract_package_name("description: x\nname: first\nname: second\n") == "first"

    @pytest.mark.unit
    def test_missing(self):
        with pytest.raises(MissingPackageName):
            extract_package_name("description: no name here\n")

    @pytest.mark.unit
    def test_empty_value(self):
        with pytest.raises(MissingPackageName):
            extract_package_name("name:\nflutter:\n")


class TestProjectValidator:
    @pytest.mark.unit
    def test_missing_manifest(self, config):
        with pytest.raises(NotAProjectRoot):
            ProjectValidator(config, MemoryFileSystem()).read_manifest()

    @pytest.mark.unit
    def test_not_a_flutter_manifest(self, config):
        fs = MemoryFileSystem({"pubspec.yaml": "name: pure_dart\n"})
        with pytest.raises(NotAProjectRoot):
            ProjectValidator(config, fs).read_manifest()

    @pytest.mark.unit
    def test_load_project(self, memory_project):
        config = ScaffoldConfig(project_dir=Path("/work/travel_app"))
        project = ProjectValidator(config, memory_project).load_project()
        assert project.package_name == "travel_app"
        assert project.project_dir == Path("/work/travel_app")

    @pytest.mark.unit
    def test_missing_name(self, config):
        fs = MemoryFileSystem({"pubspec.yaml": "flutter:\n  uses-material-design: true\n"})
        with pytest.raises(MissingPackageName):
            ProjectValidator(config, fs).load_project()

    @pytest.mark.unit
    def test_custom_manifest_file(self, pubspec_text):
        config = ScaffoldConfig(manifest_file="app/pubspec.yaml")
        fs = MemoryFileSystem({"app/pubspec.yaml": pubspec_text})
        assert ProjectValidator(config, fs).load_project().package_name == "travel_app"

    @pytest.mark.unit
    def test_read_only(self, memory_project, config):
        ProjectValidator(config, memory_project).load_project()
        assert memory_project.written == []

    @pytest.mark.unit
    def test_undecodable_manifest(self, tmp_path: Path):
        (tmp_path / "pubspec.yaml").write_bytes(b"name: travel_app\nflutter:\n\xff\xfe")
        config = ScaffoldConfig(project_dir=tmp_path)
        with pytest.raises(FilesystemError):
            ProjectValidator(config, LocalFileSystem(tmp_path)).load_project()
