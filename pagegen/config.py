"""pagegen configuration.

Centralised, typed configuration for the scaffolder. Settings use Pydantic v2
models so they are validated at construction time and can be loaded from JSON
or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class ScaffoldConfig(BaseModel):
    """Path conventions of the host project.

    Instances are created once by the CLI entry point and then passed through
    the rest of the system. Every path except ``project_dir`` is relative to
    the project directory.
    """

    project_dir: Path = Field(default=Path("."))
    manifest_file: str = Field(default="pubspec.yaml")
    framework_marker: str = Field(
        default="flutter", description="Framework name expected in the manifest"
    )
    source_dir: str = Field(default="lib")
    registry_file: str = Field(
        default="routes/app_pages.dart",
        description="Route registry, relative to source_dir",
    )
    extension: str = Field(default=".dart")
    controllers_dir: str = Field(default="controllers")
    bindings_dir: str = Field(default="bindings")
    screens_dir: str = Field(default="screens")
    log_level: str = Field(default="WARNING")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def manifest_path(self) -> Path:
        """Project manifest, relative to the project directory."""
        return Path(self.manifest_file)

    @property
    def registry_path(self) -> Path:
        """Shared route registry, relative to the project directory."""
        return Path(self.source_dir) / self.registry_file

    def root_for(self, kind: str) -> Path:
        """Root directory for one artifact kind (``controller``, ``binding``, ``screen``)."""
        roots = {
            "controller": self.controllers_dir,
            "binding": self.bindings_dir,
            "screen": self.screens_dir,
        }
        return Path(self.source_dir) / roots[kind]

    # ------------------------------------------------------------------
    # Loading helpers
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a configuration from JSON.

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``ScaffoldConfig`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            PAGEGEN_PROJECT_DIR, PAGEGEN_MANIFEST_FILE, PAGEGEN_SOURCE_DIR,
            PAGEGEN_REGISTRY_FILE, PAGEGEN_LOG_LEVEL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("PAGEGEN_PROJECT_DIR"):
            kwargs["project_dir"] = Path(os.environ["PAGEGEN_PROJECT_DIR"])
        if os.environ.get("PAGEGEN_MANIFEST_FILE"):
            kwargs["manifest_file"] = os.environ["PAGEGEN_MANIFEST_FILE"]
        if os.environ.get("PAGEGEN_SOURCE_DIR"):
            kwargs["source_dir"] = os.environ["PAGEGEN_SOURCE_DIR"]
        if os.environ.get("PAGEGEN_REGISTRY_FILE"):
            kwargs["registry_file"] = os.environ["PAGEGEN_REGISTRY_FILE"]
        if os.environ.get("PAGEGEN_LOG_LEVEL"):
            kwargs["log_level"] = os.environ["PAGEGEN_LOG_LEVEL"].upper()
        return cls(**kwargs)
