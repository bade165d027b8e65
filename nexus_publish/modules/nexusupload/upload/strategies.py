"""Request builders for each Nexus generation and repository format."""

from __future__ import annotations

import logging
import os
from typing import BinaryIO, Callable, Dict, Protocol, Tuple

import httpx

from nexus_publish.modules.nexusupload.domain import Artifact, ProcessingContext
from nexus_publish.modules.nexusupload.util import (
    ArtifactValidationError,
    NexusUploadConstant,
    NexusVersion,
    UnsupportedFormatError,
)

log = logging.getLogger(__name__)


class UploadStrategy(Protocol):
    """Turns one artifact and its open file into an HTTP request."""

    name: str

    def build_request(
        self,
        client: httpx.Client,
        context: ProcessingContext,
        artifact: Artifact,
        content: BinaryIO,
    ) -> httpx.Request:  # pragma: no cover - interface
        ...


def _maven2_path(artifact: Artifact) -> str:
    if not artifact.version:
        raise ArtifactValidationError("version is required for maven2 direct upload")
    return "/".join(
        [artifact.group_id, artifact.artifact_id, artifact.version, artifact.maven_filename]
    )


def _raw_path(artifact: Artifact) -> str:
    return f"{artifact.group_id}/{artifact.raw_filename}"


def _yum_path(artifact: Artifact) -> str:
    return f"{artifact.artifact_id}/{artifact.version}"


NEXUS2_PATHS: Dict[str, Callable[[Artifact], str]] = {
    NexusUploadConstant.FORMAT_MAVEN2: _maven2_path,
    NexusUploadConstant.FORMAT_RAW: _raw_path,
    NexusUploadConstant.FORMAT_YUM: _yum_path,
}


class Nexus2DirectUpload:
    """PUT the raw file bytes to a path templated from the coordinates."""

    def __init__(self, fmt: str, path_builder: Callable[[Artifact], str]) -> None:
        self.name = f"nexus2/{fmt}"
        self.format = fmt
        self.path_builder = path_builder

    def build_url(self, context: ProcessingContext, artifact: Artifact) -> str:
        return f"{context.server_url}/repository/{context.repository}/{self.path_builder(artifact)}"

    def build_request(
        self,
        client: httpx.Client,
        context: ProcessingContext,
        artifact: Artifact,
        content: BinaryIO,
    ) -> httpx.Request:
        return client.build_request(
            "PUT",
            self.build_url(context, artifact),
            content=content,
            headers={"Content-Type": NexusUploadConstant.OCTET_STREAM},
        )


class Nexus3ComponentUpload:
    """POST a multipart form to the Nexus 3 components API."""

    def __init__(self, fmt: str) -> None:
        self.name = f"nexus3/{fmt}"
        self.format = fmt

    def build_url(self, context: ProcessingContext) -> str:
        return f"{context.server_url}{NexusUploadConstant.COMPONENTS_API_PATH}"

    def form_fields(self, artifact: Artifact) -> Tuple[str, Dict[str, str]]:
        """Return the asset field name and the plain form fields."""
        fmt = self.format
        if fmt == NexusUploadConstant.FORMAT_MAVEN2:
            fields = {
                "maven2.groupId": artifact.group_id,
                "maven2.artifactId": artifact.artifact_id,
                "maven2.version": artifact.version,
                "maven2.asset1.extension": artifact.type,
            }
            if artifact.classifier:
                fields["maven2.asset1.classifier"] = artifact.classifier
            return "maven2.asset1", fields
        if fmt == NexusUploadConstant.FORMAT_RAW:
            return "raw.asset1", {
                "raw.directory": artifact.group_id,
                "raw.asset1.filename": artifact.raw_filename,
            }
        return f"{fmt}.asset", {}

    def build_request(
        self,
        client: httpx.Client,
        context: ProcessingContext,
        artifact: Artifact,
        content: BinaryIO,
    ) -> httpx.Request:
        asset_field, fields = self.form_fields(artifact)
        filename = os.path.basename(artifact.file)
        return client.build_request(
            "POST",
            self.build_url(context),
            params={"repository": context.repository},
            data=fields,
            files={asset_field: (filename, content, NexusUploadConstant.OCTET_STREAM)},
        )


class UnsupportedFormatUpload:
    """Placeholder selected when no template exists; fails every attempt."""

    def __init__(self, version: NexusVersion, fmt: str) -> None:
        self.name = f"{version.value}/{fmt}"
        self.version = version
        self.format = fmt

    def build_request(
        self,
        client: httpx.Client,
        context: ProcessingContext,
        artifact: Artifact,
        content: BinaryIO,
    ) -> httpx.Request:
        raise UnsupportedFormatError(
            f"unsupported format for {self.version.value} direct upload: {self.format!r}"
        )


def select_strategy(version: NexusVersion, fmt: str) -> UploadStrategy:
    """Pick the request builder for a (Nexus version, format) pair."""
    normalized = (fmt or "").strip().lower()
    if version is NexusVersion.NEXUS3 and normalized:
        return Nexus3ComponentUpload(normalized)
    path_builder = NEXUS2_PATHS.get(normalized) if version is NexusVersion.NEXUS2 else None
    if path_builder is None:
        log.warning("No upload template for %s format=%r", version.value, fmt)
        return UnsupportedFormatUpload(version, normalized)
    return Nexus2DirectUpload(normalized, path_builder)
