"""CLI entry point for the docset stub generator."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from rb_docset.config import load_config
from rb_docset.domain.exceptions import DocsetException


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group()
def cli() -> None:
    """Build a Ruby API docset from Objective-C HTML reference pages."""


@cli.command()
@click.argument("output", type=click.Path(path_type=Path))
@click.argument("inputs", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option(
    "--config", "-c",
    default=None,
    help="Path to YAML config file",
)
@click.option(
    "--scratch-dir",
    default=None,
    help="Directory for the intermediate Ruby stubs (overrides config/env)",
)
@click.option(
    "--renderer",
    default=None,
    help="Renderer executable, 'yard' by default (overrides config/env)",
)
@click.option(
    "--render/--no-render",
    default=None,
    help="Run the renderer after generating stubs (overrides config/env)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=None,
    help="Enable debug logging (overrides config/env)",
)
def generate(
    output: Path,
    inputs: tuple[Path, ...],
    config: str | None,
    scratch_dir: str | None,
    renderer: str | None,
    render: bool | None,
    verbose: bool | None,
) -> None:
    """Generate stubs from INPUTS (files or directories) and render them into OUTPUT.

    Configuration priority: YAML config < env vars (RB_DOCSET_*) < CLI arguments.
    """
    from rb_docset.generator import DocsetGenerator

    app_config = load_config(
        config_path=config,
        cli_overrides={
            "output.scratch_dir": scratch_dir,
            "renderer.command": renderer,
            "renderer.enabled": render,
            "logging.verbose": verbose,
        },
    )
    _configure_logging(app_config.logging.verbose)

    try:
        DocsetGenerator(output, inputs, app_config).run()
    except DocsetException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.argument("title")
def retitle(path: Path, title: str) -> None:
    """Replace the 'Module:' label in a rendered page with TITLE."""
    from rb_docset.infrastructure.renderer.yard import retitle_document

    _configure_logging(False)
    if not retitle_document(path, title):
        click.echo(f"Warning: {path} not found, nothing changed", err=True)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
