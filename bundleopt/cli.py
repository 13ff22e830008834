"""Command-line interface for bundleopt.

Commands:
- resolve: Resolve a build config (plus optional --optimize-for overrides)
- defaults: Show the default policy table, or the baseline for one version
"""
from __future__ import annotations

import argparse
from pathlib import Path

from bundleopt.command import Command, DefaultsCommand, ResolveCommand
from bundleopt.config.bundle import BundleConfig
from bundleopt.config.dimension import (
    OptimizationDimension,
    parse_dimension,
    sort_dimensions,
)
from bundleopt.console import logger
from bundleopt.optimization import DEFAULT_POLICY_TABLE, OptimizationsMerger
from bundleopt.version import CURRENT_VERSION, Version


class _Args(argparse.Namespace):
    """Typed namespace for CLI arguments."""

    command: str | None = None
    config: Path | None = None
    optimize_for: list[str] | None = None
    explain: bool = False
    as_json: bool = False
    tool_version: str | None = None


class CLI(argparse.ArgumentParser):
    """Command-line interface with `resolve` and `defaults` subcommands."""

    def __init__(self) -> None:
        super().__init__(
            prog="bundleopt",
            description="Resolve packaging optimizations for split application builds.",
        )

        _ = self.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {CURRENT_VERSION}",
            help="Show the version and exit.",
        )

        subparsers = self.add_subparsers(
            dest="command",
            parser_class=argparse.ArgumentParser,
        )

        resolve_parser = subparsers.add_parser(
            "resolve",
            help="Resolve the optimizations for a build config.",
        )
        _ = resolve_parser.add_argument(
            "config",
            type=Path,
            metavar="config",
            help="Build config path (.json, .yml, or .yaml).",
        )
        _ = resolve_parser.add_argument(
            "--optimize-for",
            action="append",
            default=None,
            dest="optimize_for",
            metavar="DIMENSION",
            help=" ".join(
                [
                    "Only split along these dimensions, ignoring defaults and config.",
                    "Repeatable; also accepts a comma-separated list.",
                ]
            ),
        )
        _ = resolve_parser.add_argument(
            "--explain",
            action="store_true",
            default=False,
            help="Show the default, config and override layers.",
        )
        _ = resolve_parser.add_argument(
            "--json",
            action="store_true",
            default=False,
            dest="as_json",
            help="Print the result as JSON.",
        )

        defaults_parser = subparsers.add_parser(
            "defaults",
            help="Show the default optimization policy.",
        )
        _ = defaults_parser.add_argument(
            "--tool-version",
            type=str,
            default=None,
            dest="tool_version",
            help="Only show the defaults that apply at this version.",
        )
        _ = defaults_parser.add_argument(
            "--json",
            action="store_true",
            default=False,
            dest="as_json",
            help="Print the result as JSON.",
        )

    def _parse_override(
        self, values: list[str] | None
    ) -> frozenset[OptimizationDimension] | None:
        """Parse repeated/comma-separated --optimize-for values."""
        if values is None:
            return None
        names = [n for v in values for n in v.split(",") if n.strip()]
        return frozenset(parse_dimension(n) for n in names)

    def parse_command(self, argv: list[str] | None = None) -> Command:
        """Parse CLI arguments into a typed command payload."""
        args = self.parse_args(argv, namespace=_Args())

        match args.command:
            case "resolve":
                return ResolveCommand(
                    config=BundleConfig.from_path(args.config),
                    override=self._parse_override(args.optimize_for),
                    explain=bool(args.explain),
                    as_json=bool(args.as_json),
                )
            case "defaults":
                version = (
                    Version.of(args.tool_version) if args.tool_version else None
                )
                return DefaultsCommand(version=version, as_json=bool(args.as_json))
            case None:
                raise ValueError("No command given; use `resolve` or `defaults`.")
            case _:
                raise ValueError(f"Invalid command: {args.command}")


def run_resolve(command: ResolveCommand, merger: OptimizationsMerger | None = None) -> None:
    """Resolve one config and print the result."""
    merger = merger or OptimizationsMerger()
    resolution = merger.explain(command.config, command.override)

    if command.as_json:
        logger.json(resolution.result.to_dict())
        return

    if command.explain:
        logger.header("Resolution", f"version {command.config.version}")
        logger.optimizations(resolution.baseline, title="Defaults")
        configured = [d.value for d in sort_dimensions(resolution.configured)]
        logger.key_value(
            {"split_dimensions": ", ".join(configured) or "(none)"},
            title="After config directives",
        )
        if resolution.override is not None:
            override = [d.value for d in sort_dimensions(resolution.override)]
            logger.key_value(
                {"split_dimensions": ", ".join(override) or "(none)"},
                title="Override",
            )
        logger.key_value(
            {"uncompress_native_libraries": resolution.uncompress_source},
            title="Flag source",
        )

    logger.optimizations(resolution.result, title="Resolved")


def run_defaults(command: DefaultsCommand) -> None:
    """Print the default policy table, or the baseline for one version."""
    if command.version is not None:
        apk = DEFAULT_POLICY_TABLE.lookup(command.version)
        if command.as_json:
            logger.json(apk.to_dict())
        else:
            logger.optimizations(apk, title=f"Defaults at {command.version}")
        return

    if command.as_json:
        logger.json(
            [
                {"threshold": str(e.threshold), **e.defaults.to_dict()}
                for e in DEFAULT_POLICY_TABLE
            ]
        )
        return

    logger.table(
        title="Default policy",
        columns=["From version", "Split dimensions", "Uncompress native libs"],
        rows=[
            [
                str(e.threshold),
                ", ".join(d.value for d in e.defaults.sorted_dimensions()),
                str(e.defaults.uncompress_native_libraries),
            ]
            for e in DEFAULT_POLICY_TABLE
        ],
    )


def run(command: Command) -> int:
    """Dispatch a parsed command. Returns the exit code."""
    match command:
        case ResolveCommand() as c:
            run_resolve(c)
        case DefaultsCommand() as c:
            run_defaults(c)
        case _:
            raise ValueError(f"Invalid command payload: {type(command)!r}")
    return 0
