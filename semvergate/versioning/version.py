"""
Version utility module for version string operations.

This module provides the version algebra used by the gate: parsing dotted
``major.minor.patch`` strings, comparing them, classifying the bump between
two versions and computing the next version for a given classification.

SemVer style strings (``1.2.3``, ``1.2``, ``1.1.0-SNAPSHOT``) are parsed
directly. Anything else is handed to ``packaging.version`` so that PEP 440
strings such as ``1.2.0rc1`` or ``v1.2.3`` are understood as well, and
finally split the way Maven does (``5.4.0.Final``, ``1.2.3.4-SNAPSHOT``):
leading integer components form the version, the rest is the qualifier.
"""

import re
from enum import Enum
from typing import Optional, Tuple, Union

from packaging.version import InvalidVersion
from packaging.version import Version as PackagingVersion

from .exceptions import UnknownClassificationError, VersionFormatError

_SEMVER_PATTERN = re.compile(
    r"^(?P<major>\d+)"
    r"(?:\.(?P<minor>\d+))?"
    r"(?:\.(?P<patch>\d+))?"
    r"(?:-(?P<qualifier>[0-9A-Za-z][0-9A-Za-z.\-]*))?"
    r"(?:\+[0-9A-Za-z.\-]+)?$"
)

_MAVEN_SEPARATORS = re.compile(r"[.\-]")
_NUMERIC_COMPONENT = re.compile(r"[0-9]+")

# Qualifiers Maven treats as equal to a plain release
_RELEASE_QUALIFIERS = frozenset({"final", "ga", "release"})


def _release_qualifier(qualifier: str) -> str:
    return "" if qualifier.lower() in _RELEASE_QUALIFIERS else qualifier


class Classification(Enum):
    """
    Magnitude of change between two versions of an artifact.

    Classifications are totally ordered by severity:
    NONE < PATCH < MINOR < MAJOR. The order comes from an explicit severity
    table, not from the declaration order of the members.
    """

    NONE = "none"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"

    @property
    def severity(self) -> int:
        """Position of this classification in the severity order."""
        return _SEVERITY[self]

    @classmethod
    def parse(cls, name: str) -> "Classification":
        """
        Parse a classification name, case-insensitively.

        Raises:
            UnknownClassificationError: If the name is not a known classification
        """
        try:
            return cls(str(name).strip().lower())
        except ValueError as e:
            raise UnknownClassificationError(str(name)) from e

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self.severity >= other.severity


_SEVERITY = {
    Classification.NONE: 0,
    Classification.PATCH: 1,
    Classification.MINOR: 2,
    Classification.MAJOR: 3,
}


class Version:
    """
    An immutable ``major.minor.patch`` version with an optional qualifier.

    A qualifier (``SNAPSHOT``, ``rc.1``, ``beta2``...) marks a pre-release,
    except the Maven release markers ``Final``, ``GA`` and ``RELEASE``.
    Sorting puts a pre-release before the release with the same numeric
    triple (``1.1.0-SNAPSHOT < 1.1.0``); pre-releases of the same triple are
    ordered by their dot-separated identifiers, numeric identifiers first.
    ``compare_versions`` ignores the qualifier altogether.
    """

    __slots__ = ("_major", "_minor", "_patch", "_qualifier", "_text")

    def __init__(
        self,
        major: int,
        minor: int = 0,
        patch: int = 0,
        qualifier: str = "",
        text: Optional[str] = None,
    ):
        for component in (major, minor, patch):
            if not isinstance(component, int) or component < 0:
                raise ValueError(
                    f"Version components must be non-negative integers, got {component!r}"
                )
        self._major = major
        self._minor = minor
        self._patch = patch
        self._qualifier = qualifier or ""
        self._text = text

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """
        Parse a version string.

        Missing minor and patch components default to 0.

        Raises:
            VersionFormatError: If the major component is not a non-negative integer
        """
        text = str(version_string).strip()

        match = _SEMVER_PATTERN.match(text)
        if match:
            return cls(
                int(match.group("major")),
                int(match.group("minor") or 0),
                int(match.group("patch") or 0),
                _release_qualifier(match.group("qualifier") or ""),
                text=text,
            )

        try:
            parsed = PackagingVersion(text)
        except InvalidVersion:
            return cls._parse_maven(text)

        release = tuple(parsed.release) + (0, 0)
        qualifier = ""
        if parsed.is_prerelease:
            parts = []
            if parsed.pre is not None:
                parts.append(f"{parsed.pre[0]}{parsed.pre[1]}")
            if parsed.dev is not None:
                parts.append(f"dev{parsed.dev}")
            qualifier = ".".join(parts)
        return cls(release[0], release[1], release[2], qualifier, text=text)

    @classmethod
    def _parse_maven(cls, text: str) -> "Version":
        parts = _MAVEN_SEPARATORS.split(text)
        numbers = []
        for part in parts:
            if not _NUMERIC_COMPONENT.fullmatch(part):
                break
            numbers.append(int(part))

        if not numbers:
            raise VersionFormatError(text, "x.y.z[-qualifier]")

        # Numeric components beyond the third are dropped
        qualifier = ".".join(p for p in parts[len(numbers):] if p)
        major, minor, patch = (numbers + [0, 0])[:3]
        return cls(major, minor, patch, _release_qualifier(qualifier), text=text)

    @property
    def major(self) -> int:
        """Major version component."""
        return self._major

    @property
    def minor(self) -> int:
        """Minor version component."""
        return self._minor

    @property
    def patch(self) -> int:
        """Patch version component."""
        return self._patch

    @property
    def qualifier(self) -> str:
        """Pre-release qualifier, empty for a release."""
        return self._qualifier

    @property
    def release(self) -> Tuple[int, int, int]:
        """The numeric (major, minor, patch) triple."""
        return (self._major, self._minor, self._patch)

    @property
    def is_prerelease(self) -> bool:
        return bool(self._qualifier)

    def _precedence(self) -> tuple:
        identifiers = []
        for part in re.split(r"[.\-]", self._qualifier) if self._qualifier else []:
            if part.isdigit():
                identifiers.append((0, int(part), ""))
            else:
                identifiers.append((1, 0, part))
        return self.release + (0 if self._qualifier else 1, tuple(identifiers))

    def __str__(self) -> str:
        """Return the string the version was parsed from, or its canonical form."""
        if self._text:
            return self._text
        base = f"{self._major}.{self._minor}.{self._patch}"
        return f"{base}-{self._qualifier}" if self._qualifier else base

    def __repr__(self) -> str:
        return f"Version('{self}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Version):
            return False
        return (self.release, self._qualifier) == (other.release, other._qualifier)

    def __hash__(self) -> int:
        return hash((self.release, self._qualifier))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __le__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() <= other._precedence()

    def __gt__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() > other._precedence()

    def __ge__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() >= other._precedence()


VersionLike = Union[str, Version]


def parse_version(version_string: str) -> Version:
    """
    Parse a version string into a Version object.

    Args:
        version_string: Version string to parse

    Returns:
        Version object

    Raises:
        VersionFormatError: If version string is invalid
    """
    return Version.parse(version_string)


def _coerce(version: VersionLike) -> Version:
    return version if isinstance(version, Version) else Version.parse(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """
    Compare two versions on their numeric (major, minor, patch) triple.

    Qualifiers are ignored: ``1.1.0-SNAPSHOT`` and ``1.1.0`` compare equal.

    Returns:
        -1 if version1 < version2
         0 if version1 == version2
         1 if version1 > version2
    """
    v1 = _coerce(version1).release
    v2 = _coerce(version2).release

    if v1 < v2:
        return -1
    elif v1 > v2:
        return 1
    else:
        return 0


def classify_bump(old: VersionLike, new: VersionLike) -> Classification:
    """
    Classify the bump from ``old`` to ``new``.

    The most significant differing component decides: MAJOR if the major
    component went up, otherwise MINOR if the minor went up, otherwise PATCH
    if the patch went up. A downgrade in the deciding component is not a bump
    and yields NONE, as do equal triples.
    """
    old_release = _coerce(old).release
    new_release = _coerce(new).release

    kinds = (Classification.MAJOR, Classification.MINOR, Classification.PATCH)
    for before, after, kind in zip(old_release, new_release, kinds):
        if before != after:
            return kind if after > before else Classification.NONE
    return Classification.NONE


def next_version(base: VersionLike, classification: Classification) -> Version:
    """
    Compute the version that follows ``base`` for the given classification.

    The bumped component is incremented by one and every less significant
    component is reset to zero. NONE keeps the numeric triple unchanged. The
    result never carries a qualifier.
    """
    v = _coerce(base)

    if classification is Classification.MAJOR:
        return Version(v.major + 1, 0, 0)
    elif classification is Classification.MINOR:
        return Version(v.major, v.minor + 1, 0)
    elif classification is Classification.PATCH:
        return Version(v.major, v.minor, v.patch + 1)
    elif classification is Classification.NONE:
        return Version(v.major, v.minor, v.patch)
    else:
        raise ValueError(f"Unknown classification: {classification}")
