"""Platform version parsing and ordering.

Accepted shapes: ``MAJOR.MINOR.PATCH`` optionally followed by a qualifier
introduced with ``.`` or ``-`` (``2.1.0.RELEASE``, ``2.2.0.M1``,
``3.0.0-RC2``, ``3.1.0-SNAPSHOT``, ``2.0.0.BUILD-SNAPSHOT``).

Qualifier ordering, lowest first:
unknown < milestone (M) < release candidate (RC) < snapshot < release.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

_VERSION_PATTERN = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:(?P<separator>[.-])(?P<qualifier>[A-Za-z][A-Za-z-]*?)(?P<qualifier_version>\d+)?)?$"
)

RELEASE_QUALIFIERS = frozenset({"RELEASE", "GA", "FINAL"})
SNAPSHOT_QUALIFIERS = frozenset({"SNAPSHOT", "BUILD-SNAPSHOT"})

# Rank per known qualifier id; unknown ids rank 0.
_QUALIFIER_RANKS: dict[str, int] = {
    "M": 1,
    "RC": 2,
    **dict.fromkeys(SNAPSHOT_QUALIFIERS, 3),
    **dict.fromkeys(RELEASE_QUALIFIERS, 4),
}
_RELEASE_RANK = 4


class InvalidVersionError(ValueError):
    """Raised when a version string cannot be parsed."""


@dataclass(frozen=True)
class Qualifier:
    """Version qualifier such as ``RELEASE``, ``M1`` or ``RC2``."""

    id: str
    version: int | None = None
    separator: str = "."

    @property
    def rank(self) -> int:
        return _QUALIFIER_RANKS.get(self.id.upper(), 0)

    def __str__(self) -> str:
        suffix = "" if self.version is None else str(self.version)
        return f"{self.id}{suffix}"


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A parsed platform version."""

    major: int
    minor: int
    patch: int
    qualifier: Qualifier | None = None

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse *text* into a Version.

        Raises:
            InvalidVersionError: If *text* does not match the version format.
        """
        if not isinstance(text, str):
            msg = f"Version must be a string, got {type(text).__name__}"
            raise InvalidVersionError(msg)
        match = _VERSION_PATTERN.match(text.strip())
        if match is None:
            msg = f"Invalid version {text!r}, expected MAJOR.MINOR.PATCH[.QUALIFIER]"
            raise InvalidVersionError(msg)

        qualifier: Qualifier | None = None
        if match.group("qualifier"):
            raw_version = match.group("qualifier_version")
            qualifier = Qualifier(
                id=match.group("qualifier"),
                version=int(raw_version) if raw_version is not None else None,
                separator=match.group("separator"),
            )
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            qualifier=qualifier,
        )

    @classmethod
    def safely_parse(cls, text: str | None) -> Version | None:
        """Parse *text*, returning None instead of raising."""
        if text is None:
            return None
        try:
            return cls.parse(text)
        except InvalidVersionError:
            return None

    @property
    def is_release(self) -> bool:
        return self.qualifier is None or self.qualifier.rank == _RELEASE_RANK

    @property
    def is_snapshot(self) -> bool:
        return self.qualifier is not None and self.qualifier.id.upper() in SNAPSHOT_QUALIFIERS

    def _sort_key(self) -> tuple[int, int, int, int, str, int]:
        if self.qualifier is None:
            return (self.major, self.minor, self.patch, _RELEASE_RANK, "", 0)
        q = self.qualifier
        # Release spellings (RELEASE, GA, FINAL) compare equal to a bare version.
        name = "" if q.rank == _RELEASE_RANK else q.id.upper()
        return (self.major, self.minor, self.patch, q.rank, name, q.version or 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.qualifier is None:
            return base
        return f"{base}{self.qualifier.separator}{self.qualifier}"
