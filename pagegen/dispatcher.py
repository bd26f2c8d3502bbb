"""Command orchestration.

Maps a command name to the engine components and sequences them:

    Idle -> Validated -> NamesComputed -> ConflictChecked -> Generating
         -> Registering -> Done

or ``Aborted`` at any gate.  Components raise ``ScaffoldError``; this module
is the only place those are turned into a ``CommandOutcome``.  Turning an
outcome into an exit code is left to the CLI.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from pagegen.config import ScaffoldConfig
from pagegen.errors import (
    ArtifactConflict,
    FilesystemError,
    MissingPathArgument,
    RegistryFileMissing,
    RouteAlreadyRegistered,
    ScaffoldError,
    UnknownCommand,
)
from pagegen.fs import FileSystem
from pagegen.project import ProjectContext, ProjectValidator
from pagegen.scaffolder import (
    Artifact,
    ArtifactKind,
    ArtifactWriter,
    ConflictDetector,
    ResourceName,
    RouteEntry,
    RouteRegistryPatcher,
    TemplateRenderer,
    artifact_path,
)
from pagegen.utils import format_path

logger = logging.getLogger(__name__)

INIT = "init"
MAKE_PAGE = "make:page"

SINGLE_ARTIFACT_COMMANDS: dict[str, ArtifactKind] = {
    "make:controller": ArtifactKind.CONTROLLER,
    "make:binding": ArtifactKind.BINDING,
    "make:screen": ArtifactKind.SCREEN,
}

COMMANDS: tuple[str, ...] = (INIT, *SINGLE_ARTIFACT_COMMANDS, MAKE_PAGE)


class DispatchState(str, Enum):
    IDLE = "idle"
    VALIDATED = "validated"
    NAMES_COMPUTED = "names_computed"
    CONFLICT_CHECKED = "conflict_checked"
    GENERATING = "generating"
    REGISTERING = "registering"
    DONE = "done"
    ABORTED = "aborted"


class CommandOutcome(BaseModel):
    """Result of one invocation, rendered by the CLI."""

    command: str
    resource: str | None = None
    success: bool = False
    dry_run: bool = False
    created: list[str] = Field(default_factory=list)
    updated: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    conflicts: list[str] = Field(default_factory=list)
    route_name: str | None = None
    route_conflict: bool = False
    error_code: str | None = None
    message: str = ""

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1


class CommandDispatcher:
    """Runs one command against one project.

    Attributes:
        config: Path conventions of the host project.
        fs: File access; every read and write goes through it.
        state: Last state reached by :meth:`run`.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        fs: FileSystem,
        renderer: TemplateRenderer | None = None,
        dry_run: bool = False,
    ) -> None:
        self.config = config
        self.fs = fs
        self.dry_run = dry_run
        self.renderer = renderer or TemplateRenderer(config)
        self.validator = ProjectValidator(config, fs)
        self.detector = ConflictDetector(fs)
        self.writer = ArtifactWriter(fs)
        self.patcher = RouteRegistryPatcher()
        self.state = DispatchState.IDLE

    # -- Public API --------------------------------------------------------

    def run(self, command: str, raw_path: str | None = None) -> CommandOutcome:
        """Execute *command* and report what happened.

        Never raises ``ScaffoldError``; any such failure ends in an
        unsuccessful outcome carrying the error code and message.
        """
        self.state = DispatchState.IDLE
        outcome = CommandOutcome(command=command, resource=raw_path, dry_run=self.dry_run)

        try:
            self._dispatch(command, raw_path, outcome)
        except ScaffoldError as exc:
            self.state = DispatchState.ABORTED
            outcome.success = False
            outcome.error_code = exc.code
            outcome.message = exc.message
            if isinstance(exc, ArtifactConflict):
                outcome.conflicts = [format_path(p) for p in exc.paths]
                outcome.route_conflict = exc.route_name is not None
            elif isinstance(exc, RouteAlreadyRegistered):
                outcome.route_conflict = True
            logger.debug("Aborted %s: %s", command, exc.code)
            return outcome

        self.state = DispatchState.DONE
        outcome.success = True
        return outcome

    # -- Internal ----------------------------------------------------------

    def _dispatch(self, command: str, raw_path: str | None, outcome: CommandOutcome) -> None:
        if command not in COMMANDS:
            raise UnknownCommand(command)
        if command != INIT and not (raw_path and raw_path.strip()):
            raise MissingPathArgument(f"'{command}' requires a resource path, e.g. Booking/Flight")

        project = self.validator.load_project()
        self.state = DispatchState.VALIDATED

        if command == INIT:
            self._init(project, outcome)
            return

        resource = ResourceName.parse(raw_path or "")
        if resource.is_empty:
            raise MissingPathArgument(f"{raw_path!r} does not name a resource")
        self.state = DispatchState.NAMES_COMPUTED
        logger.debug("Resolved %r to %s", raw_path, resource)

        if command == MAKE_PAGE:
            self._make_page(resource, project, outcome)
        else:
            self._make_single(SINGLE_ARTIFACT_COMMANDS[command], resource, project, outcome)

    def _init(self, project: ProjectContext, outcome: CommandOutcome) -> None:
        for kind in ArtifactKind:
            root = self.config.root_for(kind.value)
            if self.fs.exists(root):
                continue
            self.writer.mkdir(root)
            outcome.created.append(format_path(root) + "/")

        registry_path = self.config.registry_path
        if self.fs.exists(registry_path):
            logger.info("Route registry %s already exists", registry_path)
            outcome.skipped.append(format_path(registry_path))
            return
        self.writer.write(registry_path, self.renderer.render_registry(project))
        outcome.created.append(format_path(registry_path))

    def _make_single(
        self,
        kind: ArtifactKind,
        resource: ResourceName,
        project: ProjectContext,
        outcome: CommandOutcome,
    ) -> None:
        path = artifact_path(kind, resource, self.config)
        self.detector.detect([path]).raise_for_conflicts()
        self.state = DispatchState.CONFLICT_CHECKED

        content = self.renderer.render_artifact(kind, resource, project)
        self.state = DispatchState.GENERATING
        self.writer.write(path, content)
        outcome.created.append(format_path(path))

    def _make_page(
        self,
        resource: ResourceName,
        project: ProjectContext,
        outcome: CommandOutcome,
    ) -> None:
        registry_path = self.config.registry_path
        if not self.fs.exists(registry_path):
            raise RegistryFileMissing(
                f"Route registry {format_path(registry_path)} not found; run 'pagegen init' first"
            )
        registry_text = self._read(registry_path)

        entry = RouteEntry.for_resource(resource, project.package_name, self.config)
        outcome.route_name = entry.route_name

        kinds = list(ArtifactKind)
        paths = [artifact_path(kind, resource, self.config) for kind in kinds]
        report = self.detector.detect(
            paths,
            route_signature=entry.signature,
            registry_text=registry_text,
            route_name=entry.route_name,
        )
        report.raise_for_conflicts()
        self.state = DispatchState.CONFLICT_CHECKED

        # Computed before the first write so a registry shape mismatch aborts
        # with nothing written.
        patched_registry = self.patcher.patch(registry_text, entry)
        artifacts = [
            Artifact(kind, path, self.renderer.render_artifact(kind, resource, project))
            for kind, path in zip(kinds, paths)
        ]

        self.state = DispatchState.GENERATING
        written: list[Path] = []
        try:
            self.writer.write_all(artifacts, written)
        finally:
            outcome.created.extend(format_path(path) for path in written)

        self.state = DispatchState.REGISTERING
        self.writer.write(registry_path, patched_registry)
        outcome.updated.append(format_path(registry_path))

    def _read(self, path: Path) -> str:
        try:
            return self.fs.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise FilesystemError(f"Cannot read {path}: {exc}", path=path) from exc
