"""File access for the scaffolder.

All project reads and writes go through a ``FileSystem`` so that components
never touch the real disk implicitly.  ``LocalFileSystem`` resolves relative
paths against the project directory; ``MemoryFileSystem`` keeps writes in
memory, optionally reading through to another file system (used for
``--dry-run`` and in tests).
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Protocol

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Minimal file access used by the scaffolding engine."""

    def exists(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def mkdir(self, path: Path) -> None: ...


class LocalFileSystem:
    """Real disk access rooted at a project directory."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)

    def resolve(self, path: Path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.root / path

    def exists(self, path: Path) -> bool:
        return self.resolve(path).exists()

    def read_text(self, path: Path) -> str:
        return self.resolve(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        """Write *content*, creating parent directories first."""
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s (%d bytes)", target, len(content))

    def mkdir(self, path: Path) -> None:
        self.resolve(path).mkdir(parents=True, exist_ok=True)


class MemoryFileSystem:
    """In-memory file system, optionally layered over a *base* file system.

    Reads fall through to *base* for paths that have not been written here;
    writes never reach *base*.  ``written`` records every path written, in
    order.
    """

    def __init__(
        self,
        files: dict[str, str] | None = None,
        base: FileSystem | None = None,
    ) -> None:
        self.files: dict[str, str] = {
            self._key(Path(name)): content for name, content in (files or {}).items()
        }
        self.dirs: set[str] = set()
        self.base = base
        self.written: list[Path] = []

    @staticmethod
    def _key(path: Path) -> str:
        return str(PurePosixPath(*Path(path).parts))

    def exists(self, path: Path) -> bool:
        key = self._key(path)
        if key in self.files or key in self.dirs:
            return True
        if any(name.startswith(key + "/") for name in self.files):
            return True
        return self.base.exists(path) if self.base is not None else False

    def read_text(self, path: Path) -> str:
        key = self._key(path)
        if key in self.files:
            return self.files[key]
        if self.base is not None:
            return self.base.read_text(path)
        raise FileNotFoundError(key)

    def write_text(self, path: Path, content: str) -> None:
        key = self._key(path)
        self.files[key] = content
        self.written.append(Path(path))
        logger.debug("Buffered %s (%d bytes)", key, len(content))

    def mkdir(self, path: Path) -> None:
        self.dirs.add(self._key(path))
