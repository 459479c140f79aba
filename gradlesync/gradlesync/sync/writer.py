"""Digest-gated writer for generated files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from ..core.errors import FileSyncError
from .digest import content_digest, digests_match, file_digest
from .io import atomic_write_bytes

logger = logging.getLogger(__name__)


class CachedFileWriter:
    """Writes content only when it differs from what is already on disk."""

    def __init__(self, digest_algorithm: str = "md5", file_mode: int = 0o644) -> None:
        self.digest_algorithm = digest_algorithm
        self.file_mode = file_mode

    def is_stale(self, content: bytes, path: Path) -> bool:
        """Return True when ``path`` is missing or holds different content."""
        try:
            existing = file_digest(path, self.digest_algorithm)
        except OSError as e:
            raise FileSyncError(path, f"Cannot read {path}: {e}") from e
        return not digests_match(existing, content_digest(content, self.digest_algorithm))

    def write_if_changed(self, content: bytes, path: Path) -> bool:
        """Write ``content`` to ``path`` unless the file already matches.

        Args:
            content: Full new file content
            path: Target file path

        Returns:
            True if the file was created or overwritten
        """
        if not self.is_stale(content, path):
            logger.debug(f"Unchanged: {path}")
            return False

        try:
            atomic_write_bytes(path, content, mode=self.file_mode)
        except OSError as e:
            raise FileSyncError(path, f"Cannot write {path}: {e}") from e

        logger.info(f"Wrote {path}")
        return True

    def sync_all(self, pairs: Iterable[tuple[bytes, Path]]) -> list[Path]:
        """Write each (content, path) pair in order.

        Returns:
            Paths that were actually written, in order
        """
        changed: list[Path] = []
        for content, path in pairs:
            if self.write_if_changed(content, path):
                changed.append(path)
        return changed

    def pending(self, pairs: Iterable[tuple[bytes, Path]]) -> list[Path]:
        """Return the paths ``sync_all`` would write, without writing."""
        return [path for content, path in pairs if self.is_stale(content, path)]
