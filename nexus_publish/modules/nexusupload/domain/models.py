"""Dataclasses describing a single plugin run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Tuple

from nexus_publish.modules.nexusupload.util import NexusVersion, UploadMode
from .artifact import Artifact

if TYPE_CHECKING:
    from nexus_publish.modules.nexusupload.upload.strategies import UploadStrategy


@dataclass(frozen=True)
class FailedArtifact:
    file: str
    artifact_id: str
    err: str

    @classmethod
    def of(cls, artifact: Artifact, err: str) -> "FailedArtifact":
        return cls(file=artifact.file, artifact_id=artifact.artifact_id, err=err)

    def as_dict(self) -> Dict[str, str]:
        return {"file": self.file, "artifactId": self.artifact_id, "err": self.err}


@dataclass(frozen=True)
class ProcessingContext:
    """Resolved inputs of a run, read-only once validation has finished."""

    mode: UploadMode
    username: str
    password: str
    server_url: str
    repository: str
    group_id: str
    nexus_version: NexusVersion
    format: str
    strategy: "UploadStrategy"
    artifacts: Tuple[Artifact, ...] = ()
    rejected: Tuple[FailedArtifact, ...] = ()

    @property
    def auth(self) -> Tuple[str, str]:
        return (self.username, self.password)


@dataclass
class RunResult:
    failed: List[FailedArtifact] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed

    def add_failed(self, artifact: Artifact, err: str) -> None:
        self.failed.append(FailedArtifact.of(artifact, err))
