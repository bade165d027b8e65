"""Service exports."""

from .args import (
    decode_artifacts,
    parse_attributes,
    process_multi_file_args,
    process_single_file_args,
    validate_and_process_args,
)
from .mode import resolve_upload_mode
from .reporter import ResultReporter, render_failures
from .uploader import NexusUploader

__all__ = [
    "decode_artifacts",
    "parse_attributes",
    "process_multi_file_args",
    "process_single_file_args",
    "validate_and_process_args",
    "resolve_upload_mode",
    "ResultReporter",
    "render_failures",
    "NexusUploader",
]
