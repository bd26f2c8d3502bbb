"""Naming-convention transforms for resource paths.

``to_snake_case`` and ``to_pascal_case`` are independent of each other: each
works on the raw segment and neither assumes the other has run.  Note the
asymmetry: snake case lowers the whole string, while Pascal case only forces
the first character of each ``_``/``-``/space separated part, so internal
casing such as ``flightBooking`` survives as ``FlightBooking``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pagegen.errors import MissingPathArgument

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_WORD_SEPARATORS = re.compile(r"[_\-\s]+")
_DISPLAY_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_RELATIVE_SEGMENTS = {".", ".."}


def to_snake_case(value: str) -> str:
    """Convert ``FlightBooking`` to ``flight_booking``.

    Examples::

        to_snake_case("FlightBooking")   -> "flight_booking"
        to_snake_case("flight_booking")  -> "flight_booking"
        to_snake_case("flightV2Booking") -> "flight_v2_booking"
    """
    return _CAMEL_BOUNDARY.sub(r"\1_\2", value).lower()


def to_pascal_case(value: str) -> str:
    """Convert ``flight-booking`` or ``flight_booking`` to ``FlightBooking``.

    Only the first character of each part is upper-cased; the rest is kept.
    """
    parts = _WORD_SEPARATORS.split(value)
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def to_display_name(value: str) -> str:
    """Insert spaces before internal capitals: ``FlightBooking`` -> ``Flight Booking``."""
    return _DISPLAY_BOUNDARY.sub(" ", value)


@dataclass(frozen=True)
class ResourceName:
    """Canonical names derived from a ``/``-delimited resource path.

    Attributes:
        folder_segments: snake_case directory names (every segment but the last).
        snake_name: snake_case form of the last segment.
        pascal_name: PascalCase form of the last segment, the type-name stem.
    """

    folder_segments: tuple[str, ...]
    snake_name: str
    pascal_name: str

    @classmethod
    def parse(cls, raw_path: str) -> "ResourceName":
        """Derive names from *raw_path* (e.g. ``"Booking/Flight"``).

        Blank segments are dropped, so ``"/Booking//Flight/"`` is equivalent
        to ``"Booking/Flight"``.  An empty path yields empty names; rejecting
        that is the caller's job (see :attr:`is_empty`).

        Raises:
            MissingPathArgument: A segment is ``.`` or ``..``, or contains a
                backslash.
        """
        segments = [seg.strip() for seg in raw_path.split("/")]
        segments = [seg for seg in segments if seg]
        for seg in segments:
            if seg in _RELATIVE_SEGMENTS or "\\" in seg:
                raise MissingPathArgument(
                    f"{raw_path!r} is not a valid resource path: bad segment {seg!r}"
                )
        if not segments:
            return cls(folder_segments=(), snake_name="", pascal_name="")

        *folders, last = segments
        return cls(
            folder_segments=tuple(to_snake_case(folder) for folder in folders),
            snake_name=to_snake_case(last),
            pascal_name=to_pascal_case(last),
        )

    @property
    def is_empty(self) -> bool:
        return not self.snake_name or not self.pascal_name

    @property
    def display_name(self) -> str:
        """Human label for on-screen text, e.g. ``Flight Booking``."""
        return to_display_name(self.pascal_name)

    @property
    def route_name(self) -> str:
        """Route path: segments joined by ``/`` with underscores removed.

        ``Booking/FlightDetails`` -> ``/booking/flightdetails``.
        """
        joined = "/".join((*self.folder_segments, self.snake_name))
        return "/" + joined.replace("_", "")
