"""Writes rendered artifacts to the project."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pagegen.errors import FilesystemError
from pagegen.fs import FileSystem

from .artifacts import Artifact

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Creates parent directories and writes content, with no retry.

    Only reached for paths the conflict gate has already certified as
    non-existent, so a write here never overwrites existing work.
    """

    def __init__(self, fs: FileSystem) -> None:
        self.fs = fs

    def write(self, path: Path, content: str) -> Path:
        try:
            self.fs.write_text(path, content)
        except OSError as exc:
            raise FilesystemError(f"Cannot write {path}: {exc}", path=path) from exc
        logger.info("Created %s", path)
        return path

    def write_all(
        self, artifacts: Iterable[Artifact], written: list[Path] | None = None
    ) -> list[Path]:
        """Write *artifacts* in order and return their paths.

        *written*, when given, is extended as each file lands, so a caller
        still knows what was created if a later write fails.
        """
        written = [] if written is None else written
        for artifact in artifacts:
            written.append(self.write(artifact.target_path, artifact.rendered_content))
        return written

    def mkdir(self, path: Path) -> None:
        try:
            self.fs.mkdir(path)
        except OSError as exc:
            raise FilesystemError(f"Cannot create {path}: {exc}", path=path) from exc
