"""Pre-flight conflict detection.

The gate is all-or-nothing: if any prospective file exists or the route is
already registered, the whole operation is refused before anything is
written.  It is a check-then-act gate, not a lock; concurrent runs against the
same project are not guarded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pagegen.errors import ArtifactConflict, RouteAlreadyRegistered
from pagegen.fs import FileSystem

logger = logging.getLogger(__name__)


@dataclass
class ConflictReport:
    """Everything the pre-flight pass found in the way."""

    existing_paths: list[Path] = field(default_factory=list)
    route_registered: bool = False
    route_name: str | None = None

    @property
    def has_conflicts(self) -> bool:
        return bool(self.existing_paths) or self.route_registered

    def raise_for_conflicts(self) -> None:
        """Raise the matching ``ScaffoldError`` if anything conflicts.

        Raises:
            ArtifactConflict: At least one path exists (the route conflict, if
                any, is carried along).
            RouteAlreadyRegistered: Only the route conflicts.
        """
        route = self.route_name if self.route_registered else None
        if self.existing_paths:
            raise ArtifactConflict(self.existing_paths, route_name=route)
        if route is not None:
            raise RouteAlreadyRegistered(route)


class ConflictDetector:
    def __init__(self, fs: FileSystem) -> None:
        self.fs = fs

    def detect(
        self,
        paths: list[Path],
        route_signature: str | None = None,
        registry_text: str | None = None,
        route_name: str | None = None,
    ) -> ConflictReport:
        """Check every candidate path and, optionally, the route signature.

        Args:
            paths: Prospective artifact paths.
            route_signature: Literal opening fragment of a route entry,
                e.g. ``name: '/booking/flight'``.
            registry_text: Raw registry text searched for *route_signature*.
            route_name: Route name reported back on a route conflict.
        """
        existing = [path for path in paths if self.fs.exists(path)]
        registered = bool(
            route_signature and registry_text and route_signature in registry_text
        )
        for path in existing:
            logger.info("Conflict: %s already exists", path)
        if registered:
            logger.info("Conflict: route signature %r already present", route_signature)
        return ConflictReport(
            existing_paths=existing,
            route_registered=registered,
            route_name=route_name,
        )
