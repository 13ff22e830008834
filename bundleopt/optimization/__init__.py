"""Optimization resolution: defaults per version, merged with build config."""
from __future__ import annotations

from bundleopt.optimization.apk import ApkOptimizations
from bundleopt.optimization.defaults import (
    DEFAULT_POLICY,
    DEFAULT_POLICY_TABLE,
    DefaultPolicyTable,
    PolicyEntry,
    default_optimizations_for_version,
)
from bundleopt.optimization.merger import (
    OptimizationsMerger,
    Resolution,
    apply_directives,
    resolve,
)

__all__ = [
    "ApkOptimizations",
    "DEFAULT_POLICY",
    "DEFAULT_POLICY_TABLE",
    "DefaultPolicyTable",
    "OptimizationsMerger",
    "PolicyEntry",
    "Resolution",
    "apply_directives",
    "default_optimizations_for_version",
    "resolve",
]
