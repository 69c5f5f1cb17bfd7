# SPDX-License-Identifier: MIT
"""Semantic version value type with parsing, rendering and comparison.

Versions follow a simplified ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``
grammar with 16-bit numeric fields. Two versions are equal when they render
to the same string; ``>`` compares only the numeric fields.

Example:
    >>> from semversion import SemVersion, compare_versions
    >>>
    >>> version = SemVersion.parse("2.30.401-pre+build")
    >>> version.minor
    30
    >>> version.pre_release
    'pre'
    >>>
    >>> SemVersion(2, 3, 4) > SemVersion(1, 2, 3)
    True
    >>>
    >>> compare_versions("1.0.0-rc", "1.0.0")
    0
"""

__version__ = "0.1.0"

from .semver import (
    SemVersion,
    BadFormatError,
    parse_version,
    is_valid_version,
    UINT16_MAX,
)
from .compare import (
    compare_versions,
    version_key,
    max_version,
)

__all__ = [
    # Version value type
    "SemVersion",
    "BadFormatError",
    "parse_version",
    "is_valid_version",
    "UINT16_MAX",
    # Version comparison
    "compare_versions",
    "version_key",
    "max_version",
]
