"""Error taxonomy for the scaffolder.

Every failure the engine can report is a ``ScaffoldError`` subclass with a
stable ``code``.  Components raise them; only the command dispatcher turns
them into a ``CommandOutcome``, and only the CLI turns that into an exit code.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all unrecoverable scaffolding failures."""

    code = "ScaffoldError"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotAProjectRoot(ScaffoldError):
    """The working directory has no manifest, or the manifest lacks the framework marker."""

    code = "NotAProjectRoot"


class MissingPackageName(ScaffoldError):
    """The manifest has no usable ``name:`` line."""

    code = "MissingPackageName"


class MissingPathArgument(ScaffoldError):
    """A generation command was invoked without a resource path."""

    code = "MissingPathArgument"


class UnknownCommand(ScaffoldError):
    code = "UnknownCommand"

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Unknown command: {command!r}")


class ArtifactConflict(ScaffoldError):
    """One or more target files already exist.

    ``route_name`` is set when the same pre-flight pass also found the route
    already registered, so both are reported together.
    """

    code = "ArtifactConflict"

    def __init__(self, paths: list[Path], route_name: str | None = None) -> None:
        self.paths = list(paths)
        self.route_name = route_name
        listed = ", ".join(str(p) for p in self.paths)
        message = f"Refusing to overwrite existing file(s): {listed}"
        if route_name:
            message += f"; route {route_name!r} is already registered"
        super().__init__(message)


class RouteAlreadyRegistered(ScaffoldError):
    code = "RouteAlreadyRegistered"

    def __init__(self, route_name: str) -> None:
        self.route_name = route_name
        super().__init__(f"Route {route_name!r} is already registered")


class RegistryFileMissing(ScaffoldError):
    code = "RegistryFileMissing"


class RouteAssignmentNotFound(ScaffoldError):
    """The registry has no recognised ``routes = [...]`` assignment."""

    code = "RouteAssignmentNotFound"


class FilesystemError(ScaffoldError):
    """Wraps an ``OSError`` raised while reading or writing project files."""

    code = "FilesystemError"

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)
