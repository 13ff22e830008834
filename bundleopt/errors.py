"""Errors raised by bundleopt."""
from __future__ import annotations


class InvalidConfigurationState(ValueError):
    """An upstream precondition was violated.

    Raised for unparsable versions, versions older than any known default
    policy, and malformed policy tables. Resolution is deterministic, so
    retrying with the same input fails the same way.
    """
