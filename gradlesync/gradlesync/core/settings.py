"""Process configuration from GRADLESYNC_* environment variables."""

from __future__ import annotations

import hashlib
import re

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import COORDINATE_PATTERN

# Compile-only dependencies stripped from upstream metadata, or guarded by OS
# rules although every platform needs them to compile.
DEFAULT_EXTRA_DEPENDENCIES: tuple[str, ...] = (
    "org.jetbrains:annotations:24.1.0",
    "com.google.code.findbugs:jsr305:3.0.2",
    "ca.weblite:java-objc-bridge:1.1",
)

_COORDINATE_RE = re.compile(COORDINATE_PATTERN)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GRADLESYNC_", case_sensitive=False)

    extra_dependencies: tuple[str, ...] = DEFAULT_EXTRA_DEPENDENCIES
    digest_algorithm: str = "md5"
    file_mode: int = 0o644

    @field_validator("extra_dependencies")
    @classmethod
    def check_coordinates(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for coordinate in value:
            if not _COORDINATE_RE.match(coordinate):
                raise ValueError(f"Invalid dependency coordinate: {coordinate!r}")
        return value

    @field_validator("digest_algorithm")
    @classmethod
    def check_algorithm(cls, value: str) -> str:
        name = value.lower()
        if name not in hashlib.algorithms_available or name.startswith("shake_"):
            raise ValueError(f"Unsupported digest algorithm: {value!r}")
        return name
