"""Default policy: what the tool did by default at each version.

The policy is a sorted list of (threshold version, defaults) entries. The
entry that applies to a version is the one with the highest threshold not
above it, so changing a default in a future release means appending an
entry rather than adding a branch.
"""
from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from bundleopt.config.dimension import OptimizationDimension
from bundleopt.errors import InvalidConfigurationState
from bundleopt.optimization.apk import ApkOptimizations
from bundleopt.version import Version


@dataclass(frozen=True, slots=True)
class PolicyEntry:
    """Defaults that apply from `threshold` until the next entry."""

    threshold: Version
    defaults: ApkOptimizations


class DefaultPolicyTable:
    """Read-only, ascending table of version thresholds to defaults.

    Built once at import time and never mutated, so concurrent lookups
    need no locking.
    """

    def __init__(self, entries: Iterable[PolicyEntry]) -> None:
        self._entries: tuple[PolicyEntry, ...] = tuple(entries)
        if not self._entries:
            raise InvalidConfigurationState("Default policy table is empty.")
        thresholds = [e.threshold for e in self._entries]
        for prev, cur in zip(thresholds, thresholds[1:]):
            if not prev < cur:
                raise InvalidConfigurationState(
                    f"Default policy thresholds must be strictly ascending: "
                    f"{prev} is not before {cur}"
                )
        self._thresholds: tuple[Version, ...] = tuple(thresholds)

    def __iter__(self) -> Iterator[PolicyEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def lowest(self) -> Version:
        return self._thresholds[0]

    def lookup(self, version: Version) -> ApkOptimizations:
        """Return the defaults for `version`.

        Raises:
            InvalidConfigurationState: If `version` predates every threshold.
        """
        index = bisect.bisect_right(self._thresholds, version) - 1
        if index < 0:
            raise InvalidConfigurationState(
                f"No default optimizations known for version {version} "
                f"(lowest supported is {self.lowest})"
            )
        return self._entries[index].defaults


_DEFAULT_SPLIT_DIMENSIONS = frozenset(
    {
        OptimizationDimension.ABI,
        OptimizationDimension.SCREEN_DENSITY,
        OptimizationDimension.LANGUAGE,
    }
)

DEFAULT_POLICY: tuple[PolicyEntry, ...] = (
    PolicyEntry(
        threshold=Version.of("0.0.0"),
        defaults=ApkOptimizations(
            split_dimensions=_DEFAULT_SPLIT_DIMENSIONS,
            uncompress_native_libraries=False,
        ),
    ),
    # Native libraries are stored uncompressed by default from 0.6.0.
    PolicyEntry(
        threshold=Version.of("0.6.0"),
        defaults=ApkOptimizations(
            split_dimensions=_DEFAULT_SPLIT_DIMENSIONS,
            uncompress_native_libraries=True,
        ),
    ),
)

DEFAULT_POLICY_TABLE = DefaultPolicyTable(DEFAULT_POLICY)


def default_optimizations_for_version(version: Version) -> ApkOptimizations:
    """Baseline optimizations for `version` under the built-in policy."""
    return DEFAULT_POLICY_TABLE.lookup(version)
