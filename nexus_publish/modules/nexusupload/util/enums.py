"""Enumerations for the Nexus upload module."""

from __future__ import annotations

from enum import Enum

from .exceptions import ConfigError


class UploadMode(str, Enum):
    SINGLE_FILE = "single-file"
    MULTI_FILE = "multi-file"


class NexusVersion(str, Enum):
    NEXUS2 = "nexus2"
    NEXUS3 = "nexus3"

    @classmethod
    def parse(cls, value: str) -> "NexusVersion":
        """Accept ``2``/``3`` as well as ``nexus2``/``nexus3`` in any case."""
        normalized = (value or "").strip().lower()
        if not normalized.startswith("nexus"):
            normalized = f"nexus{normalized}"
        try:
            return cls(normalized)
        except ValueError:
            raise ConfigError(f"unsupported nexusVersion {value!r}, expected 2 or 3") from None
