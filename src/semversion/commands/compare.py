# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import click

from ..compare import compare_versions
from ..context import Context, echo_error, echo_info, pass_context
from ..semver import BadFormatError, SemVersion


@click.command()
@click.argument("first")
@click.argument("second")
@pass_context
def compare(ctx: Context, first: str, second: str) -> None:
    """Compare FIRST and SECOND by major, minor and patch.

    Prints ``>`` or ``<`` when the numbers differ, ``==`` when the versions
    are identical, and ``~`` when only the labels differ.

    \b
    Examples:
        semversion compare 2.0.0 1.9.9        # 2.0.0 > 1.9.9
        semversion compare 1.0.0-rc 1.0.0     # 1.0.0-rc ~ 1.0.0
    """
    try:
        v1 = SemVersion.parse(first)
        v2 = SemVersion.parse(second)
    except BadFormatError as e:
        echo_error(f"{e} '{e.version}'")
        raise SystemExit(1)

    ctx.detail(f"Comparing {v1.base_version} with {v2.base_version}")
    result = compare_versions(v1, v2)
    if result > 0:
        operator = ">"
    elif result < 0:
        operator = "<"
    elif v1 == v2:
        operator = "=="
    else:
        operator = "~"

    echo_info(f"{v1} {operator} {v2}")
