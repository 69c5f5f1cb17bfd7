# SPDX-License-Identifier: MIT
"""Check the project version declared in pyproject.toml."""

from __future__ import annotations

import click

from ..config import ConfigError
from ..context import Context, echo_error, echo_info, echo_success, pass_context
from ..semver import BadFormatError, SemVersion


@click.command()
@click.option(
    "--strict",
    is_flag=True,
    help="Reject non-numeric fields regardless of [tool.semversion] strict.",
)
@click.option(
    "--lenient",
    is_flag=True,
    help="Read non-numeric fields as 0 regardless of [tool.semversion] strict.",
)
@pass_context
def check(ctx: Context, strict: bool, lenient: bool) -> None:
    """Check that [project].version in pyproject.toml is a valid version.

    \b
    Examples:
        semversion check                 # Check project in current tree
        semversion -C ../other check     # Check another project
        semversion check --strict        # Reject non-numeric fields
    """
    if strict and lenient:
        echo_error("--strict and --lenient are mutually exclusive")
        raise SystemExit(1)

    try:
        cli_config = ctx.load_config()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if strict or lenient:
        source = "command line"
    else:
        strict = cli_config.strict
        source = "pyproject.toml"
    ctx.detail(f"Strict mode: {'on' if strict else 'off'} (from {source})")

    if not cli_config.version:
        echo_error("Missing required field: [project].version")
        raise SystemExit(1)

    echo_info(f"Checking: {cli_config.project_dir / 'pyproject.toml'}")

    try:
        version = SemVersion.parse(cli_config.version, strict=strict)
    except BadFormatError as e:
        reason = f" {e.reason}" if e.reason else ""
        echo_error(f"Version '{e.version}': {e}{reason}")
        raise SystemExit(1)

    echo_success(f"Version {version} is valid")
