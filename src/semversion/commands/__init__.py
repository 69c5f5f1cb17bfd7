# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import check, compare, parse, render

__all__ = ["check", "compare", "parse", "render"]
