"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError
from typing_extensions import Annotated

from ..core.errors import DescriptorValidationError, FileSyncError
from ..core.models import VersionDescriptor
from ..core.settings import Settings
from ..enhance import build_renderer, build_writer, target_pairs
from ..version.loader import load_version
from .parsers import parse_coordinate, parse_file_mode, parse_os_name

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="gradlesync",
    help="Generate a minimal Gradle project for a release's version JSON.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _settings(**overrides: object) -> Settings:
    try:
        return Settings(**overrides)
    except (ValidationError, SettingsError) as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1) from e


def _load(version_json: Path, os_name: str) -> VersionDescriptor:
    try:
        return load_version(version_json, os_name=parse_os_name(os_name or None))
    except DescriptorValidationError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e
    except OSError as e:
        logger.error(f"Cannot read {version_json}: {e}")
        raise typer.Exit(code=1) from e


@app.command()
def sync(
    version_json: Annotated[
        Path,
        typer.Argument(help="Version JSON describing the release.", metavar="VERSION_JSON"),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Directory receiving build.gradle and settings.gradle.",
            metavar="DIR",
        ),
    ],
    extra_dependencies: Annotated[
        list[str],
        typer.Option(
            "--extra-dependency",
            help="Coordinate always added to the dependencies (replaces the defaults). Repeatable.",
            metavar="GROUP:ARTIFACT:VERSION",
        ),
    ] = [],
    os_name: Annotated[
        str,
        typer.Option(
            "--os",
            help="Platform to evaluate library rules for (default: this host).",
            metavar="NAME",
        ),
    ] = "",
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "",
    check: Annotated[
        bool,
        typer.Option(
            "--check",
            help="Only report out-of-date files; exit 1 if any.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Write build.gradle and settings.gradle when their content changed."""
    _configure_logging(verbose)

    overrides: dict[str, object] = {}
    if extra_dependencies:
        overrides["extra_dependencies"] = tuple(map(parse_coordinate, extra_dependencies))
    if file_mode:
        overrides["file_mode"] = parse_file_mode(file_mode)
    settings = _settings(**overrides)

    version = _load(version_json, os_name)
    renderer = build_renderer(settings)
    writer = build_writer(settings)

    try:
        pairs = target_pairs(output, renderer.render(version))
        if check:
            stale = writer.pending(pairs)
            for path in stale:
                typer.echo(str(path))
            if stale:
                logger.info(f"{len(stale)} file(s) out of date")
                raise typer.Exit(code=1)
            logger.info("Up to date")
            return

        output.mkdir(parents=True, exist_ok=True)
        changed = writer.sync_all(pairs)
    except DescriptorValidationError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e
    except FileSyncError as e:
        logger.error(f"{e.path}: {e}")
        raise typer.Exit(code=1) from e
    except OSError as e:
        logger.error(f"Cannot create {output}: {e}")
        raise typer.Exit(code=1) from e

    for path in changed:
        typer.echo(str(path))
    logger.debug(f"Completed: {len(changed)} file(s) written")


@app.command()
def render(
    version_json: Annotated[
        Path,
        typer.Argument(help="Version JSON describing the release.", metavar="VERSION_JSON"),
    ],
    file: Annotated[
        str,
        typer.Option(
            "--file",
            help="Which file to print: build or settings.",
            metavar="NAME",
        ),
    ] = "build",
    os_name: Annotated[
        str,
        typer.Option(
            "--os",
            help="Platform to evaluate library rules for (default: this host).",
            metavar="NAME",
        ),
    ] = "",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Print a rendered file to stdout without touching the filesystem."""
    _configure_logging(verbose)

    if file not in ("build", "settings"):
        raise typer.BadParameter(f"Must be build or settings, got: {file!r}")

    version = _load(version_json, os_name)
    renderer = build_renderer(_settings())
    try:
        rendered = renderer.render(version)
    except DescriptorValidationError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    content = rendered.build_gradle if file == "build" else rendered.settings_gradle
    typer.echo(content.decode("utf-8"), nl=False)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
