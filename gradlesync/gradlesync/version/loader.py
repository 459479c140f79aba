"""Load version descriptors from launcher version JSON documents."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from ..core.errors import DescriptorValidationError
from ..core.models import Library, VersionDescriptor

logger = logging.getLogger(__name__)

OS_NAMES = ("windows", "osx", "linux")


def current_os_name() -> str:
    """Return the launcher OS name of the running host."""
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform == "darwin":
        return "osx"
    return "linux"


def _rule_applies(rule: Mapping[str, Any], os_name: str, arch: str | None) -> bool:
    # Feature-gated rules only concern launch arguments
    if rule.get("features"):
        return False
    constraint = rule.get("os")
    if not constraint:
        return True
    if "name" in constraint and constraint["name"] != os_name:
        return False
    if "arch" in constraint and constraint["arch"] != arch:
        return False
    return True


def is_library_allowed(
    rules: list[Mapping[str, Any]] | None, os_name: str, arch: str | None = None
) -> bool:
    """Evaluate a library's rules for a platform.

    Without rules a library is allowed. Otherwise it starts disallowed and
    every matching rule sets the outcome to its action, so the last match wins.

    Args:
        rules: Rule list from the version JSON
        os_name: Launcher OS name (windows, osx, linux)
        arch: Optional architecture name for ``os.arch`` constraints

    Returns:
        True if the library applies on the platform
    """
    if not rules:
        return True

    allowed = False
    for rule in rules:
        if _rule_applies(rule, os_name, arch):
            allowed = rule.get("action") == "allow"
    return allowed


def parse_version(
    data: Mapping[str, Any], *, os_name: str | None = None, arch: str | None = None
) -> VersionDescriptor:
    """Build a version descriptor from parsed version JSON.

    Args:
        data: Decoded version JSON document
        os_name: Platform to evaluate rules for (default: this host)
        arch: Architecture to evaluate rules for

    Returns:
        Version descriptor

    Raises:
        DescriptorValidationError: If the document is malformed
    """
    os_name = os_name or current_os_name()
    if os_name not in OS_NAMES:
        raise DescriptorValidationError(f"Unknown OS name: {os_name!r}")

    raw_libraries = data.get("libraries") or []
    if not isinstance(raw_libraries, list):
        raise DescriptorValidationError("'libraries' must be a list")

    java = data.get("javaVersion")
    if java is not None and not isinstance(java, Mapping):
        raise DescriptorValidationError("'javaVersion' must be an object")

    try:
        libraries = tuple(
            Library(
                name=entry["name"],
                is_allowed=is_library_allowed(entry.get("rules"), os_name, arch),
            )
            for entry in raw_libraries
        )
        version = VersionDescriptor(
            id=data.get("id"),
            libraries=libraries,
            java_version=java.get("majorVersion") if java else None,
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise DescriptorValidationError(f"Malformed library entry: {e!r}") from e
    except ValidationError as e:
        raise DescriptorValidationError(f"Invalid version descriptor: {e}") from e

    logger.debug(
        f"Loaded version {version.id}: {len(libraries)} libraries, "
        f"{sum(lib.is_allowed for lib in libraries)} allowed on {os_name}"
    )
    return version


def load_version(
    path: Path, *, os_name: str | None = None, arch: str | None = None
) -> VersionDescriptor:
    """Read and parse a version JSON file.

    Raises:
        DescriptorValidationError: If the file is not valid version JSON
        OSError: If the file cannot be read
    """
    raw = path.read_bytes()
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DescriptorValidationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise DescriptorValidationError(f"Version JSON in {path} must be an object")

    return parse_version(data, os_name=os_name, arch=arch)
