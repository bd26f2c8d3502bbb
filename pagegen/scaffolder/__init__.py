"""pagegen scaffolder -- generates GetX controllers, bindings and screens.

This package turns a resource path such as ``Booking/Flight`` into rendered
Dart sources and registers a route for them in ``lib/routes/app_pages.dart``.

Quick usage::

    from pagegen.scaffolder import ArtifactKind, ResourceName, TemplateRenderer

    resource = ResourceName.parse("Booking/Flight")
    renderer = TemplateRenderer()
    source = renderer.render_artifact(ArtifactKind.SCREEN, resource, project)
"""

from pagegen.scaffolder.artifacts import Artifact, ArtifactKind, artifact_path, import_path
from pagegen.scaffolder.conflicts import ConflictDetector, ConflictReport
from pagegen.scaffolder.naming import ResourceName, to_pascal_case, to_snake_case
from pagegen.scaffolder.registry import (
    RouteEntry,
    RouteList,
    RouteRegistryPatcher,
    parse_route_list,
)
from pagegen.scaffolder.templates import TemplateRenderer
from pagegen.scaffolder.writer import ArtifactWriter

__all__ = [
    "Artifact",
    "ArtifactKind",
    "ArtifactWriter",
    "ConflictDetector",
    "ConflictReport",
    "ResourceName",
    "RouteEntry",
    "RouteList",
    "RouteRegistryPatcher",
    "TemplateRenderer",
    "artifact_path",
    "import_path",
    "parse_route_list",
    "to_pascal_case",
    "to_snake_case",
]
