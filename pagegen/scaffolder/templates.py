"""Jinja2 template rendering for generated artifacts.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``pagegen/scaffolder/templates/`` directory and renders them with names
derived from a resource path.  Every artifact of a given kind shares one
fixed skeleton; the only substitution points are the type-name stem, the
controller import path and the on-screen display text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from pagegen.config import ScaffoldConfig
from pagegen.project import ProjectContext

from .artifacts import ArtifactKind, import_path
from .naming import ResourceName, to_display_name, to_pascal_case, to_snake_case


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

REGISTRY_TEMPLATE = "app_pages.dart.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for controllers, bindings and screens.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Missing context variables raise instead of rendering
    as empty strings.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        template_dir: str | Path | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.config = config or ScaffoldConfig()
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["pascal_case"] = to_pascal_case
        self.env.filters["snake_case"] = to_snake_case
        self.env.filters["display_name"] = to_display_name

    # -- Generic rendering -------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"screen.dart.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of ``.j2`` template paths under *prefix*.

        Paths are relative to the template directory.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )

    # -- Artifact rendering ------------------------------------------------

    def artifact_context(
        self, resource: ResourceName, project: ProjectContext
    ) -> dict[str, Any]:
        """Variables shared by every artifact template."""
        return {
            "package_name": project.package_name,
            "pascal_name": resource.pascal_name,
            "snake_name": resource.snake_name,
            "route_name": resource.route_name,
            "controller_type": ArtifactKind.CONTROLLER.type_name(resource),
            "binding_type": ArtifactKind.BINDING.type_name(resource),
            "screen_type": ArtifactKind.SCREEN.type_name(resource),
            "controller_import": import_path(
                ArtifactKind.CONTROLLER, resource, project.package_name, self.config
            ),
        }

    def render_artifact(
        self,
        kind: ArtifactKind,
        resource: ResourceName,
        project: ProjectContext,
    ) -> str:
        """Render the fixed skeleton for *kind*."""
        return self.render(kind.template, self.artifact_context(resource, project))

    def render_registry(self, project: ProjectContext) -> str:
        """Render an empty route registry for ``init``."""
        return self.render(REGISTRY_TEMPLATE, {"package_name": project.package_name})
