"""Route registration in the shared ``app_pages.dart`` registry.

The registry is treated as two addressable regions recognised by pattern:

* the import block: every top-level ``import '...';`` line;
* the route list: ``routes = [ ... ];`` or the element-typed
  ``routes = <GetPage>[ ... ];``.

Anything else in the file is opaque text and is carried over untouched.
Patching is a pure ``text -> text`` transform; the caller writes the result
once, so a shape mismatch can never leave a half-edited registry behind.
"""

from __future__ import annotations

import logging
import re
import textwrap
from dataclasses import dataclass

from pagegen.config import ScaffoldConfig
from pagegen.errors import RouteAssignmentNotFound

from .artifacts import ArtifactKind, import_path
from .naming import ResourceName

logger = logging.getLogger(__name__)

_IMPORT_STATEMENT = re.compile(
    r"^[ \t]*import\s+['\"][^'\"\n]+['\"][^;\n]*;[ \t]*$", re.MULTILINE
)

_ROUTE_LIST = re.compile(
    r"(?P<head>\broutes\s*=\s*)"
    r"(?P<element_type><[\w<>,\s?]+>)?"
    r"\s*\[(?P<body>.*?)\]\s*;",
    re.DOTALL,
)

_LEADING_BLANK_LINES = re.compile(r"\A\s*\n")

_INDENT_STEP = "  "


# ---------------------------------------------------------------------------
# Route entry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RouteEntry:
    """The literal registration fragment and imports for one resource."""

    route_name: str
    screen_type_name: str
    binding_type_name: str
    controller_import_path: str
    binding_import_path: str
    screen_import_path: str

    @classmethod
    def for_resource(
        cls, resource: ResourceName, package_name: str, config: ScaffoldConfig
    ) -> "RouteEntry":
        return cls(
            route_name=resource.route_name,
            screen_type_name=ArtifactKind.SCREEN.type_name(resource),
            binding_type_name=ArtifactKind.BINDING.type_name(resource),
            controller_import_path=import_path(
                ArtifactKind.CONTROLLER, resource, package_name, config
            ),
            binding_import_path=import_path(
                ArtifactKind.BINDING, resource, package_name, config
            ),
            screen_import_path=import_path(
                ArtifactKind.SCREEN, resource, package_name, config
            ),
        )

    @property
    def signature(self) -> str:
        """Opening fragment used for duplicate detection."""
        return f"name: '{self.route_name}'"

    @property
    def import_lines(self) -> list[str]:
        """Binding import first, then screen."""
        return [
            f"import '{self.binding_import_path}';",
            f"import '{self.screen_import_path}';",
        ]

    def render(self) -> str:
        """The ``GetPage(...)`` element, unindented, with a trailing comma."""
        return (
            "GetPage(\n"
            f"  {self.signature},\n"
            f"  page: () => const {self.screen_type_name}(),\n"
            f"  binding: {self.binding_type_name}(),\n"
            "),"
        )


# ---------------------------------------------------------------------------
# Route list
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RouteList:
    """The parsed ``routes = ...;`` assignment.

    ``start``/``end`` delimit the matched span in the source text;
    ``indent`` is the leading whitespace of the line the assignment starts on.
    """

    start: int
    end: int
    head: str
    element_type: str | None
    body: str
    indent: str

    @property
    def is_typed(self) -> bool:
        return self.element_type is not None

    @property
    def is_empty(self) -> bool:
        return not self.body.strip()

    def with_entry(self, entry: str) -> str:
        """Reassemble the assignment with *entry* appended, keeping its shape."""
        element_indent = self.indent + _INDENT_STEP
        new_entry = textwrap.indent(entry, element_indent)

        if self.is_empty:
            body = new_entry
        else:
            existing = _with_separator(
                _LEADING_BLANK_LINES.sub("", self.body.rstrip())
            )
            body = f"{existing}\n{new_entry}"

        return f"{self.head}{self.element_type or ''}[\n{body}\n{self.indent}];"


def _comment_start(line: str) -> int:
    """Index of a ``//`` comment outside string literals, else ``len(line)``."""
    quote = None
    index = 0
    while index < len(line):
        char = line[index]
        if quote:
            if char == "\\":
                index += 2
                continue
            if char == quote:
                quote = None
        elif char in "'\"":
            quote = char
        elif line.startswith("//", index):
            return index
        index += 1
    return len(line)


def _with_separator(body: str) -> str:
    """Ensure the last element in *body* ends with a comma.

    The comma goes after the last code token, ahead of any trailing ``//``
    comment; comment-only lines are skipped.

    Raises:
        RouteAssignmentNotFound: The body ends in a ``/* */`` comment, so the
            end of the last element cannot be located.
    """
    lines = body.split("\n")
    for index in range(len(lines) - 1, -1, -1):
        line = lines[index]
        code = line[: _comment_start(line)].rstrip()
        if not code:
            continue
        if code.endswith("*/"):
            raise RouteAssignmentNotFound(
                "Cannot place a separator after a block comment in the route list"
            )
        if not code.endswith(","):
            lines[index] = code + "," + line[len(code):]
        break
    return "\n".join(lines)


def parse_route_list(text: str) -> RouteList:
    """Locate the route-list assignment in *text*.

    Raises:
        RouteAssignmentNotFound: Neither the untyped nor the typed shape matches.
    """
    match = _ROUTE_LIST.search(text)
    if match is None:
        raise RouteAssignmentNotFound(
            "No 'routes = ...;' list assignment found in the route registry"
        )

    line_start = text.rfind("\n", 0, match.start()) + 1
    prefix = text[line_start:match.start()]
    indent = prefix[: len(prefix) - len(prefix.lstrip())]

    return RouteList(
        start=match.start(),
        end=match.end(),
        head=match.group("head"),
        element_type=match.group("element_type"),
        body=match.group("body"),
        indent=indent,
    )


# ---------------------------------------------------------------------------
# Patcher
# ---------------------------------------------------------------------------


class RouteRegistryPatcher:
    """Inserts imports and appends route entries to registry text."""

    def add_import(self, text: str, import_line: str) -> str:
        """Insert *import_line* after the last import, unless already present.

        With no import in the file the line is prepended.
        """
        if import_line in text:
            logger.debug("Import already present: %s", import_line)
            return text

        imports = list(_IMPORT_STATEMENT.finditer(text))
        if not imports:
            return f"{import_line}\n{text}"
        cut = imports[-1].end()
        return f"{text[:cut]}\n{import_line}{text[cut:]}"

    def append_route(self, text: str, entry: str) -> str:
        """Append the rendered *entry* to the route list.

        Raises:
            RouteAssignmentNotFound: The registry has no recognised route list.
        """
        routes = parse_route_list(text)
        return text[: routes.start] + routes.with_entry(entry) + text[routes.end:]

    def patch(self, text: str, entry: RouteEntry) -> str:
        """Register *entry*: imports first, then the route list."""
        for line in entry.import_lines:
            text = self.add_import(text, line)
        patched = self.append_route(text, entry.render())
        logger.info("Registered route %s", entry.route_name)
        return patched
