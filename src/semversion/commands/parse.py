# SPDX-License-Identifier: MIT
"""Parse a version string and show its fields."""

from __future__ import annotations

import json

import click

from ..context import Context, echo_error, echo_info, pass_context
from ..semver import BadFormatError, SemVersion


def _describe_error(error: BadFormatError) -> str:
    if error.reason:
        return f"{error} {error.reason}: '{error.version}'"
    return f"{error} '{error.version}'"


@click.command()
@click.argument("version")
@click.option(
    "--strict",
    is_flag=True,
    help="Reject numeric fields that are not plain 16-bit numbers.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the fields as a JSON object.",
)
@pass_context
def parse(ctx: Context, version: str, strict: bool, as_json: bool) -> None:
    """Parse VERSION and print its fields.

    \b
    Examples:
        semversion parse 1.2.3
        semversion parse 2.30.401-pre+build --json
        semversion parse 1.x.3 --strict
    """
    try:
        parsed = SemVersion.parse(version, strict=strict)
    except BadFormatError as e:
        echo_error(_describe_error(e))
        raise SystemExit(1)

    if as_json:
        echo_info(
            json.dumps(
                {
                    "major": parsed.major,
                    "minor": parsed.minor,
                    "patch": parsed.patch,
                    "pre_release": parsed.pre_release,
                    "build": parsed.build,
                    "version": str(parsed),
                },
                indent=2,
            )
        )
        return

    echo_info(f"version:     {parsed}")
    echo_info(f"major:       {parsed.major}")
    echo_info(f"minor:       {parsed.minor}")
    echo_info(f"patch:       {parsed.patch}")
    echo_info(f"pre-release: {parsed.pre_release}")
    echo_info(f"build:       {parsed.build}")
