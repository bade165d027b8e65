"""Render the run outcome into the pipeline's output variables."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Sequence

from nexus_publish.modules.nexusupload.domain import FailedArtifact
from nexus_publish.modules.nexusupload.util import NexusUploadConstant, OutputWriteError
from nexus_publish.settings import Settings


def render_failures(failed: Sequence[FailedArtifact]) -> str:
    return json.dumps([item.as_dict() for item in failed], ensure_ascii=False)


class ResultReporter:
    """Append ``KEY=VALUE`` lines to the file named by ``DRONE_OUTPUT``."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.log = logging.getLogger(self.__class__.__name__)

    @property
    def output_path(self) -> Optional[Path]:
        if self.settings.dev_testing:
            return Path(NexusUploadConstant.DEV_TESTING_OUTPUT_FILE)
        if self.settings.output_file:
            return Path(self.settings.output_file)
        return None

    def write_output_variables(self, failed: Sequence[FailedArtifact]) -> None:
        self.write_variables({NexusUploadConstant.OUTPUT_KEY_UPLOAD_STATUS: render_failures(failed)})

    def write_variables(self, variables: Dict[str, str]) -> None:
        target = self.output_path
        if target is None:
            self.log.warning("Output file path is empty, check env var DRONE_OUTPUT")
            return
        try:
            with open(target, "a", encoding="utf-8") as fh:
                for key, value in variables.items():
                    fh.write(f"{key}={value}\n")
        except OSError as exc:
            raise OutputWriteError(f"failed to write output variables to {target}: {exc}") from exc
        self.log.info("Wrote %s to %s", ", ".join(variables), target)
