"""Generate a Gradle project for a version and sync it into a directory."""

from __future__ import annotations

import logging
from pathlib import Path

from .core.models import RenderedProject, VersionDescriptor
from .core.settings import Settings
from .rendering.engine import ManifestRenderer
from .sync.writer import CachedFileWriter

logger = logging.getLogger(__name__)

BUILD_FILE_NAME = "build.gradle"
SETTINGS_FILE_NAME = "settings.gradle"


def build_renderer(settings: Settings) -> ManifestRenderer:
    return ManifestRenderer(extra_dependencies=settings.extra_dependencies)


def build_writer(settings: Settings) -> CachedFileWriter:
    return CachedFileWriter(
        digest_algorithm=settings.digest_algorithm, file_mode=settings.file_mode
    )


def target_pairs(output_dir: Path, rendered: RenderedProject) -> list[tuple[bytes, Path]]:
    """Pair each rendered file with its destination, build.gradle first."""
    return [
        (rendered.build_gradle, output_dir / BUILD_FILE_NAME),
        (rendered.settings_gradle, output_dir / SETTINGS_FILE_NAME),
    ]


def enhance(
    output_dir: Path,
    version: VersionDescriptor,
    *,
    renderer: ManifestRenderer | None = None,
    writer: CachedFileWriter | None = None,
) -> list[Path]:
    """Render the project files for ``version`` and write the changed ones.

    Args:
        output_dir: Existing directory receiving the files
        version: Version descriptor to render
        renderer: Renderer to use (default templates and extras if omitted)
        writer: Writer to use (md5 digests, mode 0644 if omitted)

    Returns:
        Paths that were created or overwritten, in order
    """
    renderer = renderer or ManifestRenderer()
    writer = writer or CachedFileWriter()

    rendered = renderer.render(version)
    changed = writer.sync_all(target_pairs(output_dir, rendered))

    logger.debug(f"{len(changed)} file(s) changed in {output_dir}")
    return changed
