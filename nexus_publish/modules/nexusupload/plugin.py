"""The Nexus publish plugin and its lifecycle hooks."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from nexus_publish.modules.nexusupload.domain import ProcessingContext, RunResult
from nexus_publish.modules.nexusupload.service import (
    NexusUploader,
    ResultReporter,
    validate_and_process_args,
)
from nexus_publish.modules.nexusupload.util import ConfigError, RunError
from nexus_publish.settings import Settings


class NexusPlugin:
    """Holds the state of one run: settings in, failure list out."""

    def __init__(self, client: Optional[httpx.Client] = None) -> None:
        self.client = client
        self._owns_client = False
        self.settings: Optional[Settings] = None
        self.context: Optional[ProcessingContext] = None
        self.result = RunResult()
        self.log = logging.getLogger(self.__class__.__name__)

    def init(self, settings: Settings) -> None:
        self.settings = settings

    def deinit(self) -> None:
        if self.client is not None and self._owns_client:
            self.client.close()

    def is_quiet(self) -> bool:
        return False

    def validate_and_process_args(self, settings: Settings) -> ProcessingContext:
        try:
            self.context = validate_and_process_args(settings)
        except ConfigError as exc:
            self.log.error("Invalid plugin arguments: %s", exc)
            raise
        self.result = RunResult(failed=list(self.context.rejected))
        return self.context

    def do_post_args_validation_setup(self, settings: Settings) -> None:
        return None

    def run(self) -> RunResult:
        if self.context is None:
            raise ConfigError("arguments must be validated before run")
        uploader = NexusUploader(self.context, client=self._get_client())
        self.result = uploader.run()
        if not self.result.success:
            raise RunError("some artifacts failed to upload", failed=self.result.failed)
        return self.result

    def persist_results(self) -> None:
        return None

    def write_output_variables(self) -> None:
        ResultReporter(self._require_settings()).write_output_variables(self.result.failed)

    def _get_client(self) -> httpx.Client:
        if self.client is None:
            self.client = httpx.Client(timeout=self._require_settings().timeout, verify=True)
            self._owns_client = True
        return self.client

    def _require_settings(self) -> Settings:
        if self.settings is None:
            raise ConfigError("plugin used before init")
        return self.settings
