from .strategies import (
    Nexus2DirectUpload,
    Nexus3ComponentUpload,
    UnsupportedFormatUpload,
    UploadStrategy,
    select_strategy,
)

__all__ = [
    "Nexus2DirectUpload",
    "Nexus3ComponentUpload",
    "UnsupportedFormatUpload",
    "UploadStrategy",
    "select_strategy",
]
