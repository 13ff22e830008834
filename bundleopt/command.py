"""Typed CLI command payloads.

The CLI parses arguments into these typed objects, which are then
dispatched to the appropriate handler.
"""
from __future__ import annotations

from dataclasses import dataclass

from bundleopt.config.bundle import BundleConfig
from bundleopt.config.dimension import OptimizationDimension
from bundleopt.version import Version


@dataclass(frozen=True, slots=True)
class ResolveCommand:
    """Request to resolve the optimizations for one build config."""

    config: BundleConfig
    override: frozenset[OptimizationDimension] | None
    explain: bool = False
    as_json: bool = False


@dataclass(frozen=True, slots=True)
class DefaultsCommand:
    """Request to print the default policy, for one version or all of them."""

    version: Version | None
    as_json: bool = False


Command = ResolveCommand | DefaultsCommand
