"""Content digests used to detect unchanged files."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Final

# Digest of a file that does not exist. Never equal to a real digest.
MISSING: Final = None


def content_digest(data: bytes, algorithm: str = "md5") -> str:
    """Return the hex digest of ``data``.

    Args:
        data: Bytes to fingerprint
        algorithm: Any fixed-length ``hashlib`` algorithm name

    Returns:
        Hex digest string
    """
    return hashlib.new(algorithm, data, usedforsecurity=False).hexdigest()


def file_digest(path: Path, algorithm: str = "md5") -> str | None:
    """Return the digest of the file at ``path``, or ``MISSING`` if absent.

    The whole file is read into memory; targets are small text files.
    """
    if not path.exists():
        return MISSING
    return content_digest(path.read_bytes(), algorithm)


def digests_match(existing: str | None, new: str) -> bool:
    """Compare an on-disk digest with a freshly computed one."""
    if existing is MISSING:
        return False
    return existing == new
