"""Tests for the pre-flight conflict gate (pagegen.scaffolder.conflicts)."""

from __future__ import annotations

from pathlib import Path

import pytest

from pagegen.errors import ArtifactConflict, RouteAlreadyRegistered
from pagegen.fs import MemoryFileSystem
from pagegen.scaffolder.conflicts import ConflictDetector, ConflictReport

pytestmark = pytest.mark.unit

CONTROLLER = Path("lib/controllers/booking/flight_controller.dart")
BINDING = Path("lib/bindings/booking/flight_binding.dart")


@pytest.fixture
def fs() -> MemoryFileSystem:
    return MemoryFileSystem({str(CONTROLLER): "// existing\n"})


class TestConflictDetector:
    def test_no_conflicts(self):
        report = ConflictDetector(MemoryFileSystem()).detect([CONTROLLER, BINDING])
        assert not report.has_conflicts
        report.raise_for_conflicts()

    def test_existing_path(self, fs):
        report = ConflictDetector(fs).detect([CONTROLLER, BINDING])
        assert report.existing_paths == [CONTROLLER]
        assert report.has_conflicts

    def test_route_signature_present(self, typed_registry):
        report = ConflictDetector(MemoryFileSystem()).detect(
            [BINDING], "name: '/home'", typed_registry, route_name="/home"
        )
        assert report.route_registered
        assert report.existing_paths == []

    def test_route_prefix_does_not_match(self, typed_registry):
        report = ConflictDetector(MemoryFileSystem()).detect(
            [], "name: '/hom'", typed_registry
        )
        assert not report.route_registered

    def test_no_registry_text(self):
        report = ConflictDetector(MemoryFileSystem()).detect([], "name: '/home'", None)
        assert not report.route_registered


class TestConflictReport:
    def test_paths_raise_artifact_conflict(self):
        report = ConflictReport(existing_paths=[CONTROLLER])
        with pytest.raises(ArtifactConflict) as exc_info:
            report.raise_for_conflicts()
        assert exc_info.value.paths == [CONTROLLER]
        assert exc_info.value.route_name is None

    def test_route_only(self):
        report = ConflictReport(route_registered=True, route_name="/home")
        with pytest.raises(RouteAlreadyRegistered) as exc_info:
            report.raise_for_conflicts()
        assert exc_info.value.route_name == "/home"

    def test_both_reported_together(self):
        report = ConflictReport(
            existing_paths=[CONTROLLER, BINDING], route_registered=True, route_name="/home"
        )
        with pytest.raises(ArtifactConflict) as exc_info:
            report.raise_for_conflicts()
        assert exc_info.value.paths == [CONTROLLER, BINDING]
        assert exc_info.value.route_name == "/home"
        assert "/home" in str(exc_info.value)
