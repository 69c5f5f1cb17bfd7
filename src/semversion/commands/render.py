# SPDX-License-Identifier: MIT
"""Render a version from its fields."""

from __future__ import annotations

import click

from ..context import Context, echo_info, pass_context
from ..semver import UINT16_MAX, SemVersion

_FIELD = click.IntRange(0, UINT16_MAX)


@click.command("format")
@click.argument("major", type=_FIELD)
@click.argument("minor", type=_FIELD)
@click.argument("patch", type=_FIELD)
@click.option("--pre", "pre_release", default="", help="Pre-release label.")
@click.option("--build", default="", help="Build label.")
@pass_context
def render(
    ctx: Context,
    major: int,
    minor: int,
    patch: int,
    pre_release: str,
    build: str,
) -> None:
    """Print the canonical version string for MAJOR MINOR PATCH.

    \b
    Examples:
        semversion format 1 2 3                  # 1.2.3
        semversion format 1 2 3 --pre rc.1       # 1.2.3-rc.1
        semversion format 1 2 3 --build 20240101 # 1.2.3+20240101
    """
    echo_info(str(SemVersion(major, minor, patch, pre_release, build)))
