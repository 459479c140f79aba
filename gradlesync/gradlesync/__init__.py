"""Gradlesync - Gradle project descriptors for game release metadata.

Renders a minimal ``build.gradle``/``settings.gradle`` pair from a version
descriptor and writes each file only when its content changed.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .enhance import enhance

# Re-export main CLI entry point
from .cli import main

__all__ = ["enhance", "main"]
