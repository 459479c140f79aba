"""Domain models for version descriptors and rendered projects."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

# group:artifact:version with an optional classifier (natives-*, @ext)
COORDINATE_PATTERN = r"^[A-Za-z0-9_.\-]+(?::[A-Za-z0-9_.\-@]+){2,3}$"


class Library(BaseModel):
    """A library reference from a version descriptor."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=COORDINATE_PATTERN, description="Coordinate")
    is_allowed: bool = Field(
        default=True, description="Whether the library applies on this platform"
    )


class VersionDescriptor(BaseModel):
    """Read-only view of one release's metadata."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, description="Release identifier")
    libraries: tuple[Library, ...] = Field(
        default=(), description="Library references in upstream order"
    )
    java_version: int | None = Field(
        default=None, ge=1, description="Java toolchain major version"
    )


class ManifestTemplates(BaseModel):
    """Template sources for the generated Gradle files."""

    model_config = ConfigDict(frozen=True)

    build_gradle: str = Field(..., description="Jinja2 source for build.gradle")
    settings_gradle: str = Field(..., description="Verbatim settings.gradle")


class RenderedProject(NamedTuple):
    build_gradle: bytes
    settings_gradle: bytes
