"""ApkOptimizations: the resolved optimization decision for one build."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from bundleopt.config.dimension import OptimizationDimension, sort_dimensions


@dataclass(frozen=True, slots=True)
class ApkOptimizations:
    """Which split dimensions are active, and whether native libs stay uncompressed.

    Immutable once built; a fresh instance is returned for every resolution.
    """

    split_dimensions: frozenset[OptimizationDimension] = field(default_factory=frozenset)
    uncompress_native_libraries: bool = False

    @classmethod
    def of(
        cls,
        split_dimensions: Iterable[OptimizationDimension],
        uncompress_native_libraries: bool,
    ) -> "ApkOptimizations":
        return cls(
            split_dimensions=frozenset(split_dimensions),
            uncompress_native_libraries=bool(uncompress_native_libraries),
        )

    def sorted_dimensions(self) -> list[OptimizationDimension]:
        """Dimensions in declaration order, for stable output."""
        return sort_dimensions(self.split_dimensions)

    def to_dict(self) -> dict[str, object]:
        return {
            "split_dimensions": [d.value for d in self.sorted_dimensions()],
            "uncompress_native_libraries": self.uncompress_native_libraries,
        }
