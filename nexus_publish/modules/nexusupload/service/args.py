"""Validate plugin inputs and normalize them into a ProcessingContext."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import yaml

from nexus_publish.modules.nexusupload.domain import Artifact, FailedArtifact, ProcessingContext
from nexus_publish.modules.nexusupload.upload import select_strategy
from nexus_publish.modules.nexusupload.util import (
    ConfigError,
    NexusUploadConstant,
    NexusVersion,
    UploadMode,
)
from nexus_publish.settings import Settings
from .mode import resolve_upload_mode

log = logging.getLogger(__name__)

_ATTRIBUTE_RE = re.compile(NexusUploadConstant.ATTRIBUTE_PATTERN)


def _require(fields: Sequence[Tuple[str, str]]) -> None:
    for name, value in fields:
        if not (value or "").strip():
            raise ConfigError(f"{name} cannot be empty")


def parse_attributes(attributes: str) -> Dict[str, str]:
    """Extract ``-KEY=VALUE`` pairs from the legacy attribute string."""
    return {key: value for key, value in _ATTRIBUTE_RE.findall(attributes or "")}


def decode_artifacts(document: str) -> List[Dict[str, Any]]:
    try:
        payload = yaml.load(document, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ConfigError(f"error decoding artifacts YAML: {exc}") from exc
    if not isinstance(payload, list):
        raise ConfigError("artifacts must be a YAML list of artifact descriptors")
    entries: List[Dict[str, Any]] = []
    for index, entry in enumerate(payload):
        # a bare "-" item is an empty record, rejected later for its missing fields
        if entry is None or entry == "":
            entry = {}
        if not isinstance(entry, dict):
            raise ConfigError(f"artifacts[{index}] must be a mapping, got {type(entry).__name__}")
        entries.append(entry)
    return entries


def _filter_artifacts(
    entries: Iterable[Dict[str, Any]],
    *,
    group_id: str,
    version: str,
) -> Tuple[List[Artifact], List[FailedArtifact]]:
    accepted: List[Artifact] = []
    rejected: List[FailedArtifact] = []
    for entry in entries:
        artifact = Artifact.from_dict(entry).with_defaults(group_id=group_id, version=version)
        missing = artifact.missing_fields()
        if missing:
            message = f"Missing fields: {', '.join(missing)}"
            log.warning("Skipping artifact file=%r artifactId=%r: %s", artifact.file, artifact.artifact_id, message)
            rejected.append(FailedArtifact.of(artifact, message))
            continue
        accepted.append(artifact)
    return accepted, rejected


def process_multi_file_args(settings: Settings) -> ProcessingContext:
    password = settings.resolved_password
    _require(
        [
            ("username", settings.username),
            ("password", password),
            ("protocol", settings.protocol),
            ("nexusUrl", settings.nexus_url),
            ("nexusVersion", settings.nexus_version),
            ("repository", settings.repository),
            ("groupId", settings.group_id),
        ]
    )
    version = NexusVersion.parse(settings.nexus_version)
    fmt = (settings.format or NexusUploadConstant.DEFAULT_MULTI_FILE_FORMAT).strip().lower()
    server_url = f"{settings.protocol.strip()}://{settings.nexus_url.strip()}".rstrip("/")

    entries = decode_artifacts(settings.artifacts)
    artifacts, rejected = _filter_artifacts(
        entries,
        group_id=settings.group_id.strip(),
        version=settings.artifact_version.strip(),
    )
    log.info(
        "Multi-file upload: %d artifact(s) accepted, %d rejected, target=%s repository=%s format=%s",
        len(artifacts),
        len(rejected),
        version.value,
        settings.repository,
        fmt,
    )
    return ProcessingContext(
        mode=UploadMode.MULTI_FILE,
        username=settings.username,
        password=password,
        server_url=server_url,
        repository=settings.repository.strip(),
        group_id=settings.group_id.strip(),
        nexus_version=version,
        format=fmt,
        strategy=select_strategy(version, fmt),
        artifacts=tuple(artifacts),
        rejected=tuple(rejected),
    )


def process_single_file_args(settings: Settings) -> ProcessingContext:
    password = settings.resolved_password
    _require(
        [
            ("username", settings.username),
            ("password", password),
            ("serverUrl", settings.server_url),
            ("filename", settings.filename),
            ("format", settings.format),
            ("repository", settings.repository),
        ]
    )
    values = parse_attributes(settings.attributes)
    for key in NexusUploadConstant.REQUIRED_ATTRIBUTES:
        if not values.get(key):
            raise ConfigError(f"{key} cannot be empty")

    version = (
        NexusVersion.parse(settings.nexus_version)
        if settings.nexus_version.strip()
        else NexusVersion.NEXUS3
    )
    fmt = settings.format.strip().lower()
    group_id = values[NexusUploadConstant.ATTRIBUTE_GROUP_ID]
    artifact = Artifact(
        file=settings.filename,
        classifier=values[NexusUploadConstant.ATTRIBUTE_CLASSIFIER],
        artifact_id=values.get(NexusUploadConstant.ATTRIBUTE_ARTIFACT_ID, ""),
        type=values[NexusUploadConstant.ATTRIBUTE_EXTENSION],
        version=values[NexusUploadConstant.ATTRIBUTE_VERSION],
        group_id=group_id,
    )
    log.info(
        "Single-file upload: file=%s artifactId=%s version=%s target=%s format=%s",
        artifact.file,
        artifact.artifact_id or "-",
        artifact.version,
        version.value,
        fmt,
    )
    return ProcessingContext(
        mode=UploadMode.SINGLE_FILE,
        username=settings.username,
        password=password,
        server_url=settings.server_url.strip().rstrip("/"),
        repository=settings.repository.strip(),
        group_id=group_id,
        nexus_version=version,
        format=fmt,
        strategy=select_strategy(version, fmt),
        artifacts=(artifact,),
    )


def validate_and_process_args(settings: Settings) -> ProcessingContext:
    """Resolve the upload mode and build the context for it."""
    mode = resolve_upload_mode(settings.attributes, settings.artifacts)
    if mode is UploadMode.MULTI_FILE:
        return process_multi_file_args(settings)
    return process_single_file_args(settings)
