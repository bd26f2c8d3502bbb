"""Shared pytest fixtures for the pagegen test suite.

Provides reusable fixtures for:
- Manifest and route-registry source texts
- In-memory Flutter projects (``MemoryFileSystem``)
- On-disk Flutter projects under ``tmp_path``
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from pagegen.config import ScaffoldConfig
from pagegen.fs import MemoryFileSystem
from pagegen.project import ProjectContext


# ---------------------------------------------------------------------------
# Source texts
# ---------------------------------------------------------------------------

PUBSPEC = textwrap.dedent("""\
    name: travel_app
    description: A Flutter application.
    publish_to: 'none'
    version: 1.0.0+1

    environment:
      sdk: '>=3.0.0 <4.0.0'

    dependencies:
      flutter:
        sdk: flutter
      get: ^4.6.6

    flutter:
      uses-material-design: true
""")

UNTYPED_REGISTRY = textwrap.dedent("""\
    import 'package:get/get.dart';

    class AppPages {
      AppPages._();

      static final routes = [];
    }
""")

TYPED_REGISTRY = textwrap.dedent("""\
    import 'package:get/get.dart';

    import 'package:travel_app/bindings/home_binding.dart';
    import 'package:travel_app/screens/home_screen.dart';

    class AppPages {
      AppPages._();

      static final routes = <GetPage>[
        GetPage(
          name: '/home',
          page: () => const HomeScreen(),
          binding: HomeBinding(),
        ),
      ];
    }
""")


@pytest.fixture
def pubspec_text() -> str:
    return PUBSPEC


@pytest.fixture
def untyped_registry() -> str:
    """Registry whose route list is ``routes = [];``."""
    return UNTYPED_REGISTRY


@pytest.fixture
def typed_registry() -> str:
    """Registry whose route list is ``routes = <GetPage>[...];`` with one entry."""
    return TYPED_REGISTRY


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> ScaffoldConfig:
    return ScaffoldConfig()


@pytest.fixture
def project() -> ProjectContext:
    return ProjectContext(package_name="travel_app")


@pytest.fixture
def memory_project(pubspec_text: str, typed_registry: str) -> MemoryFileSystem:
    """In-memory Flutter project with a manifest and a typed registry."""
    return MemoryFileSystem(
        {
            "pubspec.yaml": pubspec_text,
            "lib/routes/app_pages.dart": typed_registry,
        }
    )


@pytest.fixture
def flutter_project(tmp_path: Path, pubspec_text: str, untyped_registry: str) -> Path:
    """On-disk Flutter project with a manifest and an untyped registry."""
    project_dir = tmp_path / "travel_app"
    (project_dir / "lib" / "routes").mkdir(parents=True)
    (project_dir / "pubspec.yaml").write_text(pubspec_text, encoding="utf-8")
    (project_dir / "lib" / "routes" / "app_pages.dart").write_text(
        untyped_registry, encoding="utf-8"
    )
    yield project_dir


def snapshot(root: Path) -> dict[str, str]:
    """Map every file under *root* to its content."""
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def take_snapshot():
    return snapshot
