"""Configuration system: turning build config files into validated objects.

A build configuration says which tool version it was written against, which
split dimensions to add or remove, and whether native libraries should be
stored uncompressed. It is loaded from YAML or JSON and validated into
frozen Pydantic models so a resolved config can be shared freely.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    """Base class for all configuration objects.

    Frozen and strict about unknown keys: a typo in a config file should be
    a validation error, not a silently ignored setting.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
