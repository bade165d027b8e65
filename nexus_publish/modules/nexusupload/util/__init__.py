"""Utility modules for the Nexus upload module."""

from .constants import NexusUploadConstant
from .enums import NexusVersion, UploadMode
from .exceptions import (
    ArtifactValidationError,
    ConfigError,
    NexusPublishError,
    OutputWriteError,
    RunError,
    UnsupportedFormatError,
)

__all__ = [
    "NexusUploadConstant",
    "NexusVersion",
    "UploadMode",
    "ArtifactValidationError",
    "ConfigError",
    "NexusPublishError",
    "OutputWriteError",
    "RunError",
    "UnsupportedFormatError",
]
