"""Tool versions: what a build configuration was written against.

Versions look like `0.6.0` or `1.2.3-dev`. A qualified version is a
pre-release of the plain one, so `0.6.0-alpha01` sorts before `0.6.0`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

from bundleopt.errors import InvalidConfigurationState


_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)(?:-([0-9A-Za-z.\-]+))?$")


@total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """A MAJOR.MINOR.REVISION version with an optional qualifier."""

    major: int
    minor: int
    revision: int
    qualifier: str | None = None

    @classmethod
    def of(cls, text: str) -> "Version":
        """Parse a version string, raising InvalidConfigurationState if malformed."""
        match = _PATTERN.match(str(text).strip())
        if match is None:
            raise InvalidConfigurationState(f"Invalid version: {text!r}")
        major, minor, revision, qualifier = match.groups()
        return cls(int(major), int(minor), int(revision), qualifier)

    def _key(self) -> tuple[int, int, int, int, str]:
        # A missing qualifier ranks after any qualifier of the same release.
        if self.qualifier is None:
            return (self.major, self.minor, self.revision, 1, "")
        return (self.major, self.minor, self.revision, 0, self.qualifier)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.revision}"
        return f"{base}-{self.qualifier}" if self.qualifier else base


CURRENT_VERSION = Version.of("0.6.0")
