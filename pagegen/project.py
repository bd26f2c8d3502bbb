"""Host-project validation.

Confirms the working directory is a Flutter project and extracts the package
name used to build ``package:`` import paths.  The manifest is scanned line by
line for a few literal keys; its YAML grammar is never parsed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from pagegen.config import ScaffoldConfig
from pagegen.errors import FilesystemError, MissingPackageName, NotAProjectRoot
from pagegen.fs import FileSystem

logger = logging.getLogger(__name__)

_NAME_KEY = "name:"


class ProjectContext(BaseModel):
    """Read-only facts about the host project, threaded into every component."""

    project_dir: Path = Field(default=Path("."))
    package_name: str


def has_framework_marker(manifest_text: str, framework: str = "flutter") -> bool:
    """Return ``True`` if the manifest declares the framework.

    Accepts either a ``flutter:`` key or an ``sdk: flutter`` dependency line.
    """
    for line in manifest_text.splitlines():
        stripped = line.strip()
        if stripped.startswith(f"{framework}:"):
            return True
        if stripped.replace(" ", "") == f"sdk:{framework}":
            return True
    return False


def extract_package_name(manifest_text: str) -> str:
    """Return the value of the first line whose trimmed form starts with ``name:``.

    Raises:
        MissingPackageName: No such line, or its value is empty.
    """
    for line in manifest_text.splitlines():
        stripped = line.strip()
        if stripped.startswith(_NAME_KEY):
            value = stripped[len(_NAME_KEY):].strip()
            if not value:
                raise MissingPackageName("The manifest's 'name:' entry is empty")
            return value
    raise MissingPackageName("The manifest has no 'name:' entry")


class ProjectValidator:
    """Reads the manifest and produces a ``ProjectContext``."""

    def __init__(self, config: ScaffoldConfig, fs: FileSystem) -> None:
        self.config = config
        self.fs = fs

    def read_manifest(self) -> str:
        """Return the manifest text, validating the framework marker.

        Raises:
            NotAProjectRoot: Manifest missing or not a Flutter manifest.
            FilesystemError: The manifest exists but cannot be read.
        """
        path = self.config.manifest_path
        if not self.fs.exists(path):
            raise NotAProjectRoot(
                f"No {path} found; run pagegen from the root of a Flutter project"
            )
        try:
            text = self.fs.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise FilesystemError(f"Cannot read {path}: {exc}", path=path) from exc

        if not has_framework_marker(text, self.config.framework_marker):
            raise NotAProjectRoot(
                f"{path} does not declare a {self.config.framework_marker} dependency"
            )
        return text

    def load_project(self) -> ProjectContext:
        """Validate the project and extract its package name."""
        package_name = extract_package_name(self.read_manifest())
        logger.debug("Detected package %r", package_name)
        return ProjectContext(
            project_dir=self.config.project_dir, package_name=package_name
        )
