"""Select the upload mode from the two mutually exclusive inputs."""

from __future__ import annotations

from typing import Optional

from nexus_publish.modules.nexusupload.util import ConfigError, UploadMode


def resolve_upload_mode(attributes: Optional[str], artifacts: Optional[str]) -> UploadMode:
    has_attributes = bool((attributes or "").strip())
    has_artifacts = bool((artifacts or "").strip())

    if has_attributes and not has_artifacts:
        return UploadMode.SINGLE_FILE
    if has_artifacts and not has_attributes:
        return UploadMode.MULTI_FILE
    if not has_attributes and not has_artifacts:
        raise ConfigError("both 'attributes' and 'artifacts' cannot be empty")
    raise ConfigError("both 'attributes' and 'artifacts' provided, which is ambiguous")
