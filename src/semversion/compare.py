# SPDX-License-Identifier: MIT
"""Version comparison over the numeric fields only.

Pre-release and build labels are never consulted, so ``1.0.0-alpha`` and
``1.0.0+build`` compare as neither greater nor smaller than ``1.0.0``.
"""

from __future__ import annotations

from typing import Iterable, Union

from .semver import SemVersion, parse_version

VersionLike = Union[str, SemVersion]


def _coerce(version: VersionLike) -> SemVersion:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions by major, minor and patch.

    Args:
        version1: First version (string or SemVersion)
        version2: Second version (string or SemVersion)

    Returns:
        -1 if version1 < version2
        0 if neither is greater
        1 if version1 > version2

    Raises:
        BadFormatError: If either version string is invalid

    Note:
        A result of 0 does not imply equality: ``1.0.0-rc`` and ``1.0.0``
        compare as 0 but are not ``==``.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("2.0.0", "1.9.9")
        1
        >>> compare_versions("1.0.0-alpha", "1.0.0+build")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1 > v2:
        return 1
    if v2 > v1:
        return -1
    return 0


def version_key(version: VersionLike) -> tuple[int, int, int]:
    """Return a sort key for a version.

    Examples:
        >>> sorted(["1.10.0", "1.2.0", "1.2.0-rc"], key=version_key)
        ['1.2.0', '1.2.0-rc', '1.10.0']
    """
    v = _coerce(version)
    return (v.major, v.minor, v.patch)


def max_version(versions: Iterable[VersionLike]) -> SemVersion:
    """Return the greatest version; on ties the first one seen wins.

    Raises:
        ValueError: If ``versions`` is empty
        BadFormatError: If any version string is invalid
    """
    best: SemVersion | None = None
    for candidate in map(_coerce, versions):
        if best is None or candidate > best:
            best = candidate
    if best is None:
        raise ValueError("max_version() arg is an empty iterable")
    return best
