# SPDX-License-Identifier: MIT
"""Semantic version value type.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build labels:
- Pre-release: text after the first ``-`` that follows the patch separator
- Build: text after the first ``+`` that follows the patch separator

Numeric fields are unsigned 16-bit integers. Equality compares the rendered
strings, while ``>`` only looks at the numeric fields.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF


class BadFormatError(ValueError):
    """Raised when a version string does not follow the version format.

    The message is always ``"Bad version format."``; the offending input is
    kept on ``version`` and a short explanation on ``reason``.
    """

    message = "Bad version format."

    def __init__(self, version: str, reason: str = ""):
        self.version = version
        self.reason = reason
        super().__init__(self.message)


def _check_number(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= UINT16_MAX:
        raise ValueError(f"{name} must be between 0 and {UINT16_MAX}, got {value}")
    return value


def _convert_field(text: str, name: str, source: str, strict: bool) -> int:
    """Convert a numeric substring of ``source`` to a 16-bit value.

    Lenient mode mirrors a forgiving unsigned conversion: whitespace is
    ignored, unparseable text and values wider than 32 bits become 0, and
    everything else is truncated to the low 16 bits.
    """
    if strict:
        if not (text.isascii() and text.isdigit()):
            raise BadFormatError(source, f"{name} version '{text}' is not a number")
        if len(text.lstrip("0")) > 5 or int(text) > UINT16_MAX:
            raise BadFormatError(source, f"{name} version {text} exceeds {UINT16_MAX}")
        return int(text)

    digits = text.strip()
    if not (digits.isascii() and digits.isdigit()):
        logger.debug("Non-numeric %s version %r in %r read as 0", name, text, source)
        return 0

    # Anything wider than 32 bits reads as 0
    if len(digits.lstrip("0")) > 10 or int(digits) > _UINT32_MAX:
        logger.debug("%s version %s in %r overflows, read as 0", name, digits, source)
        return 0

    value = int(digits)
    if value > UINT16_MAX:
        logger.debug("%s version %d in %r truncated to 16 bits", name, value, source)
    return value & UINT16_MAX


@dataclass(frozen=True, slots=True, eq=False)
class SemVersion:
    """Represents a semantic version.

    Two versions are equal when ``str()`` renders them identically, so an
    empty label and a missing one are the same, while labels differing only
    in case are not. ``>`` and ``<`` look at major, minor and patch only.

    Attributes:
        major: Major version number, 0-65535
        minor: Minor version number, 0-65535
        patch: Patch version number, 0-65535
        pre_release: Pre-release label, empty when absent
        build: Build label, empty when absent
    """

    major: int
    minor: int
    patch: int
    pre_release: str = ""
    build: str = ""

    def __post_init__(self) -> None:
        _check_number("major", self.major)
        _check_number("minor", self.minor)
        _check_number("patch", self.patch)
        for name in ("pre_release", "build"):
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, "")
            elif not isinstance(value, str):
                raise TypeError(f"{name} must be a str, got {type(value).__name__}")

    @classmethod
    def parse(cls, version_string: str, strict: bool = False) -> SemVersion:
        """Parse a version string into a SemVersion.

        Args:
            version_string: A string in MAJOR.MINOR.PATCH[-pre][+build] form
            strict: Reject numeric fields that are not plain digits or that
                do not fit in 16 bits instead of reading them leniently

        Returns:
            A new SemVersion

        Raises:
            BadFormatError: If the second dot is missing, or a ``+`` comes
                before a ``-`` in the part after it

        Examples:
            >>> SemVersion.parse("2.30.401-pre+build")
            SemVersion(major=2, minor=30, patch=401, pre_release='pre', build='build')
        """
        if not isinstance(version_string, str):
            raise BadFormatError(
                str(version_string), f"Version must be a string, got {type(version_string).__name__}"
            )

        first_dot = version_string.find(".")
        second_dot = version_string.find(".", first_dot + 1)
        if second_dot == -1:
            raise BadFormatError(version_string, "Missing separator between minor and patch")

        dash = version_string.find("-", second_dot + 1)
        plus = version_string.find("+", second_dot + 1)

        pre_release = ""
        build = ""
        if dash == -1 and plus == -1:
            patch_text = version_string[second_dot + 1 :]
        elif plus == -1:
            patch_text = version_string[second_dot + 1 : dash]
            pre_release = version_string[dash + 1 :]
        elif dash == -1:
            patch_text = version_string[second_dot + 1 : plus]
            build = version_string[plus + 1 :]
        else:
            if plus < dash:
                raise BadFormatError(version_string, "Build label precedes pre-release label")
            patch_text = version_string[second_dot + 1 : dash]
            pre_release = version_string[dash + 1 : plus]
            build = version_string[plus + 1 :]

        return cls(
            major=_convert_field(version_string[:first_dot], "major", version_string, strict),
            minor=_convert_field(
                version_string[first_dot + 1 : second_dot], "minor", version_string, strict
            ),
            patch=_convert_field(patch_text, "patch", version_string, strict),
            pre_release=pre_release,
            build=build,
        )

    def set(
        self,
        major: Any,
        minor: Optional[int] = None,
        patch: Optional[int] = None,
        pre_release: str = "",
        build: str = "",
        *,
        strict: bool = False,
    ) -> SemVersion:
        """Return a new version with every field replaced.

        Accepts the same forms as construction, positionally or by keyword:
        ``set(major, minor, patch)``, ``set(major, minor, patch, pre_release,
        build)`` or ``set(text)``. Labels not given are cleared. The current
        instance is left untouched.
        """
        if minor is None and patch is None:
            if pre_release or build:
                raise TypeError("set() with a version string takes no labels")
            return type(self).parse(major, strict=strict)
        if minor is None or patch is None:
            raise TypeError("set() needs major, minor and patch together")
        return type(self)(major, minor, patch, pre_release, build)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            version += f"-{self.pre_release}"
        if self.build:
            version += f"+{self.build}"
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVersion):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemVersion):
            return NotImplemented
        return (self.major, self.minor, self.patch) > (other.major, other.minor, other.patch)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVersion):
            return NotImplemented
        return other > self

    @property
    def is_prerelease(self) -> bool:
        """Return True if a pre-release label is present."""
        return bool(self.pre_release)

    @property
    def has_build(self) -> bool:
        return bool(self.build)

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build labels."""
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(version_string: str, strict: bool = False) -> SemVersion:
    """Parse a version string into a SemVersion.

    Examples:
        >>> str(parse_version("1.2.3"))
        '1.2.3'
        >>> parse_version("2.3.4+test").build
        'test'
    """
    return SemVersion.parse(version_string, strict=strict)


def is_valid_version(version_string: Optional[str], strict: bool = False) -> bool:
    """Check if a string can be parsed as a version.

    Examples:
        >>> is_valid_version("1.0.0")
        True
        >>> is_valid_version("1.0")
        False
        >>> is_valid_version("a.b.c")
        True
        >>> is_valid_version("a.b.c", strict=True)
        False
    """
    try:
        SemVersion.parse(version_string, strict=strict)  # type: ignore[arg-type]
    except BadFormatError:
        return False
    return True
