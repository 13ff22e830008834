"""Tri-state settings: unset, explicitly on, or explicitly off.

A nullable bool makes "explicitly false" easy to confuse with "not
specified". Keeping three named variants makes the fallback explicit.
"""
from __future__ import annotations

import enum


class Tristate(str, enum.Enum):
    """A setting that may be left to the default policy.

    UNSET: not specified, use the version default
    ENABLED: explicitly true
    DISABLED: explicitly false
    """

    UNSET = "unset"
    ENABLED = "enabled"
    DISABLED = "disabled"

    @classmethod
    def of(cls, value: bool | None) -> "Tristate":
        """Convert an optional bool into a Tristate."""
        match value:
            case None:
                return cls.UNSET
            case True:
                return cls.ENABLED
            case False:
                return cls.DISABLED
            case _:
                raise ValueError(f"Invalid tri-state value: {value!r}")

    @property
    def is_set(self) -> bool:
        return self is not Tristate.UNSET

    def resolve(self, default: bool) -> bool:
        """Return the explicit value, or `default` when unset."""
        match self:
            case Tristate.ENABLED:
                return True
            case Tristate.DISABLED:
                return False
            case _:
                return default
