"""Split dimensions: the axes a package can be divided along.

Only set membership matters. Config files may use lower case or a short
alias for each dimension; aliases are normalized before validation.
"""
from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping


class OptimizationDimension(str, enum.Enum):
    """An axis along which packages may be split.

    ABI: processor architecture of native libraries
    SCREEN_DENSITY: density-specific resources
    LANGUAGE: language resources
    TEXTURE_COMPRESSION_FORMAT: texture assets per compression format
    DEVICE_TIER: assets per device performance tier
    """

    ABI = "ABI"
    SCREEN_DENSITY = "SCREEN_DENSITY"
    LANGUAGE = "LANGUAGE"
    TEXTURE_COMPRESSION_FORMAT = "TEXTURE_COMPRESSION_FORMAT"
    DEVICE_TIER = "DEVICE_TIER"


# Maps shorthand names to canonical dimension values
DIMENSION_ALIASES: dict[str, str] = {
    "abi": "ABI",
    "density": "SCREEN_DENSITY",
    "screen_density": "SCREEN_DENSITY",
    "language": "LANGUAGE",
    "lang": "LANGUAGE",
    "texture": "TEXTURE_COMPRESSION_FORMAT",
    "tcf": "TEXTURE_COMPRESSION_FORMAT",
    "texture_compression_format": "TEXTURE_COMPRESSION_FORMAT",
    "device_tier": "DEVICE_TIER",
    "tier": "DEVICE_TIER",
}


def normalize_dimension_name(name: str) -> str:
    """Map an alias or lower-case name to the canonical dimension value.

    Unknown names are returned unchanged so validation can reject them with
    a proper error message.
    """
    key = name.strip()
    return DIMENSION_ALIASES.get(key.lower(), key)


def parse_dimension(name: str) -> OptimizationDimension:
    """Parse a dimension name or alias, raising ValueError if unknown."""
    canonical = normalize_dimension_name(name)
    try:
        return OptimizationDimension(canonical)
    except ValueError:
        known = ", ".join(d.value for d in OptimizationDimension)
        raise ValueError(
            f"Unknown split dimension {name!r} (expected one of: {known})"
        ) from None


def normalize_directives(payload: object) -> object:
    """Normalize a `split_dimensions` payload before validation.

    Accepts bare names as shorthand for an add directive, and rewrites the
    `value` of each directive mapping to its canonical name.
    """
    if not isinstance(payload, list | tuple):
        return payload
    result: list[object] = []
    for item in payload:
        if isinstance(item, str):
            result.append({"value": normalize_dimension_name(item)})
        elif isinstance(item, Mapping):
            entry = dict(item)
            value = entry.get("value")
            if isinstance(value, str):
                entry["value"] = normalize_dimension_name(value)
            result.append(entry)
        else:
            result.append(item)
    return result


def sort_dimensions(
    dimensions: Iterable[OptimizationDimension],
) -> list[OptimizationDimension]:
    """Dimensions in declaration order, for stable output."""
    order = list(OptimizationDimension)
    return sorted(dimensions, key=order.index)
