"""CLI argument parsers and validators."""

from __future__ import annotations

import re

import typer

from ..core.models import COORDINATE_PATTERN
from ..version.loader import OS_NAMES

_COORDINATE_RE = re.compile(COORDINATE_PATTERN)


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def parse_coordinate(value: str) -> str:
    """Validate a group:artifact:version coordinate."""
    if not _COORDINATE_RE.match(value):
        raise typer.BadParameter(
            f"Must be GROUP:ARTIFACT:VERSION, got: {value!r}"
        )
    return value


def parse_os_name(value: str | None) -> str | None:
    if value is None:
        return None
    name = value.strip().lower()
    if name not in OS_NAMES:
        raise typer.BadParameter(
            f"Must be one of {', '.join(OS_NAMES)}, got: {value!r}"
        )
    return name
