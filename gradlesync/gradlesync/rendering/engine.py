"""Manifest rendering engine."""

from __future__ import annotations

import logging
from importlib import resources
from typing import Sequence

from jinja2 import Environment, StrictUndefined, Template

from ..core.errors import DescriptorValidationError
from ..core.models import ManifestTemplates, RenderedProject, VersionDescriptor
from ..core.settings import DEFAULT_EXTRA_DEPENDENCIES

logger = logging.getLogger(__name__)

BUILD_TEMPLATE_NAME = "build.gradle.j2"
SETTINGS_TEMPLATE_NAME = "settings.gradle.j2"

DEPENDENCY_LINE = "    implementation '{coordinate}'"


def load_default_templates() -> ManifestTemplates:
    """Load the template files bundled with the package.

    Returns:
        Templates for build.gradle and settings.gradle
    """
    folder = resources.files(__package__) / "templates"
    return ManifestTemplates(
        build_gradle=(folder / BUILD_TEMPLATE_NAME).read_text(encoding="utf-8"),
        settings_gradle=(folder / SETTINGS_TEMPLATE_NAME).read_text(encoding="utf-8"),
    )


def compile_template(source: str) -> Template:
    """Compile template source without escaping.

    Args:
        source: Jinja2 template text

    Returns:
        Compiled Jinja2 template
    """
    env = Environment(
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )
    return env.from_string(source)


class ManifestRenderer:
    """Renders build.gradle and settings.gradle for a version descriptor."""

    def __init__(
        self,
        templates: ManifestTemplates | None = None,
        extra_dependencies: Sequence[str] = DEFAULT_EXTRA_DEPENDENCIES,
    ) -> None:
        self.templates = templates or load_default_templates()
        self.extra_dependencies = tuple(extra_dependencies)
        self._build_template = compile_template(self.templates.build_gradle)

    def dependency_coordinates(self, version: VersionDescriptor) -> list[str]:
        """Allowed library names plus the extra dependencies, sorted."""
        allowed = [lib.name for lib in version.libraries if lib.is_allowed]
        return sorted(allowed + list(self.extra_dependencies))

    def render(self, version: VersionDescriptor) -> RenderedProject:
        """Render both project files.

        Args:
            version: Version descriptor to render

        Returns:
            UTF-8 bytes of build.gradle and settings.gradle

        Raises:
            DescriptorValidationError: If the descriptor has no Java version
        """
        if version.java_version is None:
            raise DescriptorValidationError(
                f"Version {version.id or '<unknown>'} does not declare a Java major version"
            )

        coordinates = self.dependency_coordinates(version)
        logger.debug(f"Rendering {len(coordinates)} dependencies for {version.id}")

        dependencies = "\n".join(
            DEPENDENCY_LINE.format(coordinate=coordinate) for coordinate in coordinates
        )
        build_text = self._build_template.render(
            java_version=version.java_version, dependencies=dependencies
        )

        return RenderedProject(
            build_gradle=build_text.encode("utf-8"),
            settings_gradle=self.templates.settings_gradle.encode("utf-8"),
        )
