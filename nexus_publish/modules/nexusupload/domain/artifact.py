"""Artifact descriptors accepted by the plugin."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, List, Mapping


def _first_value(payload: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = payload.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return ""


@dataclass(frozen=True)
class Artifact:
    """One upload unit: a local file plus its repository coordinates."""

    file: str = ""
    classifier: str = ""
    artifact_id: str = ""
    type: str = ""
    version: str = ""
    group_id: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Artifact":
        return cls(
            file=_first_value(payload, "file"),
            classifier=_first_value(payload, "classifier"),
            artifact_id=_first_value(payload, "artifactId", "artifact_id", "artifactid"),
            type=_first_value(payload, "type", "extension"),
            version=_first_value(payload, "version"),
            group_id=_first_value(payload, "groupId", "group_id", "groupid"),
        )

    def missing_fields(self) -> List[str]:
        """Names of the fields an upload cannot do without, in checked order."""
        checks = (
            ("artifactId", self.artifact_id),
            ("file", self.file),
            ("type", self.type),
        )
        return [name for name, value in checks if not value]

    def with_defaults(self, *, group_id: str = "", version: str = "") -> "Artifact":
        return replace(
            self,
            group_id=self.group_id or group_id,
            version=self.version or version,
        )

    @property
    def maven_filename(self) -> str:
        return f"{self.artifact_id}-{self.version}.{self.type}"

    @property
    def raw_filename(self) -> str:
        return f"{self.artifact_id}.{self.type}"

