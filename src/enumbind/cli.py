"""
enumbind CLI.

Commands:
- generate: one enum spec to one output file
- batch: every enum in a spec file, laid out under an output directory
- validate: check spec files without rendering
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from pathlib import Path

import typer

from . import __version__
from .core.config import EnumBindConfig, TargetLanguage, find_config, load_config
from .core.errors import EnumBindError
from .core.models import EnumSpec
from .core.spec_loader import load_single_spec, read_records
from .generators import create_generator
from .pipeline import generate_all, generate_enum
from .targets import get_target

LOG_LEVEL_ENV = "ENUMBIND_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_version() -> str:
    """Get enumbind version from package metadata or fallback to __version__."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("enumbind")
    except PackageNotFoundError:
        # Fallback if not installed as package
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"enumbind version {get_version()}")
        typer.echo(
            f"  Python:        {platform.python_implementation()} {platform.python_version()}"
        )
        typer.echo(f"  Targets:       {', '.join(t.value for t in TargetLanguage)}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from --verbose or ENUMBIND_LOG_LEVEL."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


app = typer.Typer(
    help="""enumbind - typed enum bindings for native integer constants

Commands:
  • generate: render one enum spec to one file
  • batch:    render every enum in a spec file under a directory
  • validate: check spec files without rendering
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """enumbind CLI main callback for global options."""
    configure_logging(verbose)


def _resolve_config(
    config_path: Path | None,
    language: TargetLanguage | None,
    no_merge: bool,
) -> EnumBindConfig:
    config = load_config(config_path) if config_path else find_config(Path.cwd())
    updates: dict[str, object] = {}
    if language is not None:
        updates["language"] = language
    if no_merge:
        updates["merge_existing"] = False
    return config.model_copy(update=updates) if updates else config


def _fail(error: EnumBindError) -> typer.Exit:
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(code=1)


LANGUAGE_OPTION = typer.Option(
    None, "--language", "-l", help="Target language (default from config: java)"
)
CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Path to enumbind.toml or pyproject.toml"
)
NO_MERGE_OPTION = typer.Option(
    False, "--no-merge", help="Ignore an existing output file and render from the skeleton"
)


@app.command()
def generate(
    spec_path: Path = typer.Argument(..., help="Spec file describing exactly one enum"),
    output_path: Path = typer.Argument(..., help="File to write"),
    language: TargetLanguage | None = LANGUAGE_OPTION,
    config_path: Path | None = CONFIG_OPTION,
    no_merge: bool = NO_MERGE_OPTION,
) -> None:
    """
    Generate the binding for a single enum.

    Exits 1 with a one-line diagnostic if the spec is invalid or the
    output cannot be rendered or written; nothing is written in that case.
    """
    try:
        config = _resolve_config(config_path, language, no_merge)
        spec = load_single_spec(spec_path)
        result = generate_enum(spec, output_path, config=config)
    except EnumBindError as e:
        raise _fail(e) from e

    typer.echo(f"✓ {result.enum_name} -> {result.destination}")


@app.command()
def batch(
    spec_path: Path = typer.Argument(..., help="Spec file with one or more enums"),
    output_dir: Path | None = typer.Argument(
        None, help="Output root; package directories are created (default from config)"
    ),
    language: TargetLanguage | None = LANGUAGE_OPTION,
    config_path: Path | None = CONFIG_OPTION,
    no_merge: bool = NO_MERGE_OPTION,
    workers: int = typer.Option(4, "--workers", "-w", min=1, help="Concurrent generations"),
) -> None:
    """
    Generate bindings for every enum in a spec file.

    Enums are generated independently; one failure does not stop the rest,
    but the command exits 1 if any enum failed.
    """
    try:
        config = _resolve_config(config_path, language, no_merge)
        records = read_records(spec_path)
        output_root = output_dir or config.get_output_path(Path.cwd())
        results = generate_all(records, output_root, config=config, max_workers=workers)
    except EnumBindError as e:
        raise _fail(e) from e

    failed = 0
    for result in results:
        if result.success:
            typer.echo(f"✓ {result.enum_name} -> {result.destination}")
        else:
            failed += 1
            typer.echo(f"Error: {result.error}", err=True)

    typer.echo(f"\n{len(results) - failed} generated, {failed} failed")
    if failed:
        raise typer.Exit(code=1)


@app.command()
def validate(
    spec_paths: list[Path] = typer.Argument(..., help="Spec files to check"),
    language: TargetLanguage | None = LANGUAGE_OPTION,
    config_path: Path | None = CONFIG_OPTION,
) -> None:
    """
    Validate enum specs against the data model and the target's naming rules.
    """
    try:
        config = _resolve_config(config_path, language, no_merge=False)
    except EnumBindError as e:
        raise _fail(e) from e
    target = get_target(config.language)

    failed = 0
    for spec_path in spec_paths:
        try:
            records = read_records(spec_path)
        except EnumBindError as e:
            failed += 1
            typer.echo(f"Error: {e}", err=True)
            continue
        for record in records:
            try:
                spec = EnumSpec.from_record(record)
                create_generator(spec, target).validate()
            except EnumBindError as e:
                failed += 1
                typer.echo(f"Error: {e}", err=True)
                continue
            ignored = spec.ignored_constants()
            suffix = f", {len(ignored)} ignored" if ignored else ""
            typer.echo(f"✓ {spec.qualified_name} ({len(spec.variants())} constants{suffix})")

    if failed:
        raise typer.Exit(code=1)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
