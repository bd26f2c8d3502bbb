"""Artifact kinds and the paths derived for them.

Each kind lives under its own root (``lib/controllers``, ``lib/bindings``,
``lib/screens``), mirrors the resource's folder segments, and is named
``<snake_name>_<kind><extension>``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath

from pagegen.config import ScaffoldConfig

from .naming import ResourceName


class ArtifactKind(str, Enum):
    """Generated file kinds, in generation order."""

    CONTROLLER = "controller"
    BINDING = "binding"
    SCREEN = "screen"

    @property
    def template(self) -> str:
        return f"{self.value}.dart.j2"

    def type_name(self, resource: ResourceName) -> str:
        """Class name of the artifact, e.g. ``FlightController``."""
        return resource.pascal_name + self.value.capitalize()

    def file_name(self, resource: ResourceName, extension: str) -> str:
        return f"{resource.snake_name}_{self.value}{extension}"


@dataclass(frozen=True)
class Artifact:
    """One generated source file; transient, no identity beyond the run."""

    kind: ArtifactKind
    target_path: Path
    rendered_content: str


def artifact_path(
    kind: ArtifactKind, resource: ResourceName, config: ScaffoldConfig
) -> Path:
    """Target path of *kind* for *resource*, relative to the project directory."""
    directory = config.root_for(kind.value).joinpath(*resource.folder_segments)
    return directory / kind.file_name(resource, config.extension)


def import_path(
    kind: ArtifactKind,
    resource: ResourceName,
    package_name: str,
    config: ScaffoldConfig,
) -> str:
    """Package import URI of *kind*, e.g. ``package:app/bindings/booking/flight_binding.dart``.

    The source directory (``lib``) is implied by the ``package:`` scheme.
    """
    relative = PurePosixPath(*artifact_path(kind, resource, config).parts)
    relative = relative.relative_to(PurePosixPath(*Path(config.source_dir).parts))
    return f"package:{package_name}/{relative}"
