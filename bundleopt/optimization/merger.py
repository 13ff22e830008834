"""Optimization resolver: layers defaults, config directives and overrides.

Precedence for split dimensions, highest first:
1. The caller's override set, which replaces everything below it
2. The build config's add/remove directives, applied in order
3. The default policy for the config's version

The uncompress-native-libraries flag only has two layers: an explicit
config value, else the version default. The override set never touches it.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from bundleopt.config.bundle import BundleConfig, SplitDimensionDirective
from bundleopt.config.dimension import OptimizationDimension
from bundleopt.optimization.apk import ApkOptimizations
from bundleopt.optimization.defaults import DEFAULT_POLICY_TABLE, DefaultPolicyTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Resolution:
    """How each layer contributed to a resolved ApkOptimizations."""

    baseline: ApkOptimizations
    configured: frozenset[OptimizationDimension]
    override: frozenset[OptimizationDimension] | None
    result: ApkOptimizations
    uncompress_source: Literal["config", "default"]


def apply_directives(
    dimensions: Iterable[OptimizationDimension],
    directives: Iterable[SplitDimensionDirective],
) -> frozenset[OptimizationDimension]:
    """Apply add/remove directives in order to a dimension set."""
    working = set(dimensions)
    for directive in directives:
        if directive.negate:
            working.discard(directive.value)
        else:
            working.add(directive.value)
    return frozenset(working)


class OptimizationsMerger:
    """Merges a build config (and optional override set) with the default policy."""

    def __init__(self, policy: DefaultPolicyTable = DEFAULT_POLICY_TABLE) -> None:
        self.policy = policy

    def merge_with_defaults(
        self,
        config: BundleConfig,
        override: Iterable[OptimizationDimension] | None = None,
    ) -> ApkOptimizations:
        """Resolve the final optimizations for one build."""
        return self.explain(config, override).result

    def explain(
        self,
        config: BundleConfig,
        override: Iterable[OptimizationDimension] | None = None,
    ) -> Resolution:
        """Resolve and keep the intermediate layers."""
        baseline = self.policy.lookup(config.version)
        configured = apply_directives(baseline.split_dimensions, config.split_dimensions)

        override_set = frozenset(override) if override is not None else None
        dimensions = override_set if override_set is not None else configured

        flag = config.uncompress_native_libraries
        uncompress = flag.resolve(baseline.uncompress_native_libraries)

        result = ApkOptimizations(
            split_dimensions=dimensions,
            uncompress_native_libraries=uncompress,
        )
        logger.debug(
            "Resolved optimizations for version %s: dimensions=%s uncompress=%s "
            "(override=%s, flag=%s)",
            config.version,
            sorted(d.value for d in dimensions),
            uncompress,
            override_set is not None,
            flag.value,
        )
        return Resolution(
            baseline=baseline,
            configured=configured,
            override=override_set,
            result=result,
            uncompress_source="config" if flag.is_set else "default",
        )


_merger = OptimizationsMerger()


def resolve(
    config: BundleConfig,
    override: Iterable[OptimizationDimension] | None = None,
) -> ApkOptimizations:
    """Resolve optimizations with the built-in default policy."""
    return _merger.merge_with_defaults(config, override)
