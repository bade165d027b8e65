"""Exceptions raised by the Nexus upload module."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from nexus_publish.modules.nexusupload.domain import FailedArtifact


class NexusPublishError(RuntimeError):
    """Base class for plugin errors."""


class ConfigError(NexusPublishError):
    """Raised when the plugin inputs are missing, malformed or ambiguous."""


class UnsupportedFormatError(NexusPublishError):
    """Raised when no request template exists for a repository format."""


class ArtifactValidationError(NexusPublishError):
    """Raised when an artifact lacks coordinates its upload needs."""


class RunError(NexusPublishError):
    """Raised after a full pass when at least one artifact failed."""

    def __init__(self, message: str, failed: Sequence["FailedArtifact"] = ()) -> None:
        super().__init__(message)
        self.failed = list(failed)


class OutputWriteError(NexusPublishError):
    """Raised when the output variables cannot be persisted."""
