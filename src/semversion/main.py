# SPDX-License-Identifier: MIT
"""CLI entry point for the semversion command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .commands import check, compare, parse, render
from .config import ConfigError
from .context import Context, echo_error, pass_context

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _enable_debug_logging() -> None:
    """Route DEBUG records from the semversion loggers to stderr."""
    logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger("semversion").setLevel(logging.DEBUG)


@click.group()
@click.version_option(package_name="semversion")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show debug logging and extra detail.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read pyproject.toml from this directory instead of searching from cwd.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version parsing and comparison tool.

    \b
    Examples:
        semversion parse 1.2.3-rc+build.7
        semversion format 1 2 3 --pre rc
        semversion compare 1.10.0 1.9.9
        semversion check
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        _enable_debug_logging()


cli.add_command(parse.parse)
cli.add_command(render.render)
cli.add_command(compare.compare)
cli.add_command(check.check)


def main() -> None:
    """Run the CLI, turning configuration problems into exit status 1."""
    try:
        cli()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
