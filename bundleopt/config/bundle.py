"""Build configuration: the per-build optimization directives.

A build config is loaded from YAML or JSON:

    version: 0.6.0
    split_dimensions:
      - value: abi
        negate: true
      - texture
    uncompress_native_libraries: false

Each split dimension entry either adds a dimension to the default set or,
with `negate: true`, removes it. Directives are kept in file order.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import Field, PlainSerializer, PlainValidator, field_validator

from bundleopt.config import Config
from bundleopt.config.dimension import OptimizationDimension, normalize_directives
from bundleopt.config.tristate import Tristate
from bundleopt.version import CURRENT_VERSION, Version


def _coerce_version(value: Any) -> Version:
    if isinstance(value, Version):
        return value
    if isinstance(value, str | int | float):
        return Version.of(str(value))
    raise ValueError(f"Invalid version: {value!r}")


# Accepts "0.6.0" (or a Version) and serializes back to the string form
VersionField = Annotated[
    Version,
    PlainValidator(_coerce_version),
    PlainSerializer(str, return_type=str),
]


class SplitDimensionDirective(Config):
    """Add (or, negated, remove) one split dimension."""

    value: OptimizationDimension
    negate: bool = False


class BundleConfig(Config):
    """The optimization-relevant part of a build configuration.

    `version` is the tool version the config was written against and
    selects the default policy. `uncompress_native_libraries` stays UNSET
    unless the file says true or false.
    """

    version: VersionField = Field(default_factory=lambda: CURRENT_VERSION)
    split_dimensions: tuple[SplitDimensionDirective, ...] = ()
    uncompress_native_libraries: Tristate = Tristate.UNSET

    @field_validator("split_dimensions", mode="before")
    @classmethod
    def _normalize_split_dimensions(cls, value: Any) -> Any:
        return normalize_directives(value)

    @field_validator("uncompress_native_libraries", mode="before")
    @classmethod
    def _parse_tristate(cls, value: Any) -> Any:
        if value is None or isinstance(value, bool):
            return Tristate.of(value)
        if isinstance(value, str):
            text = value.strip().lower()
            match text:
                case "true":
                    return Tristate.ENABLED
                case "false":
                    return Tristate.DISABLED
            return text
        return value

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "BundleConfig":
        """Validate an already-parsed config mapping."""
        if not isinstance(payload, Mapping):
            raise ValueError(
                f"Build config payload must be a dict, got {type(payload)!r}"
            )
        return cls.model_validate(dict(payload))

    @classmethod
    def from_path(cls, path: Path) -> "BundleConfig":
        """Load and validate a build config from a JSON or YAML file."""
        text = path.read_text(encoding="utf-8")
        match path.suffix.lower():
            case ".json":
                payload = json.loads(text)
            case ".yml" | ".yaml":
                payload = yaml.safe_load(text)
            case s:
                raise ValueError(f"Unsupported format '{s}'")

        if payload is None:
            raise ValueError("Build config payload is empty.")
        return cls.from_payload(payload)

    # Builder helpers. Each returns a new config; instances are frozen.

    def with_version(self, version: Version | str) -> "BundleConfig":
        if isinstance(version, str):
            version = Version.of(version)
        return self.model_copy(update={"version": version})

    def clear_optimizations(self) -> "BundleConfig":
        """Drop all directives and reset the uncompress setting."""
        return self.model_copy(
            update={
                "split_dimensions": (),
                "uncompress_native_libraries": Tristate.UNSET,
            }
        )

    def add_split_dimension(
        self, value: OptimizationDimension, negate: bool = False
    ) -> "BundleConfig":
        directive = SplitDimensionDirective(value=value, negate=negate)
        return self.model_copy(
            update={"split_dimensions": (*self.split_dimensions, directive)}
        )

    def with_uncompress_native_libraries(self, enabled: bool | None) -> "BundleConfig":
        return self.model_copy(
            update={"uncompress_native_libraries": Tristate.of(enabled)}
        )
