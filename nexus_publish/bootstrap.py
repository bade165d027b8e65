"""Drive the plugin through its lifecycle for one pipeline step."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from nexus_publish.modules.nexusupload import NexusPlugin
from nexus_publish.modules.nexusupload.util import OutputWriteError, RunError
from .settings import Settings

log = logging.getLogger(__name__)


def execute(settings: Settings, client: Optional[httpx.Client] = None) -> NexusPlugin:
    """Validate, upload and report.

    ``ConfigError`` propagates before any upload is attempted. Otherwise the
    output variables are written even when uploads failed; an output failure
    is logged and only raised when every upload succeeded.
    """

    plugin = NexusPlugin(client=client)
    plugin.init(settings)
    try:
        log.info("...................NEXUS-PUBLISH-BEGIN...................")
        plugin.validate_and_process_args(settings)
        plugin.do_post_args_validation_setup(settings)

        run_error: Optional[RunError] = None
        try:
            plugin.run()
        except RunError as exc:
            log.error("%s: %d failure(s)", exc, len(plugin.result.failed))
            run_error = exc

        plugin.persist_results()
        try:
            plugin.write_output_variables()
        except OutputWriteError as exc:
            log.error("Error writing output variables: %s", exc)
            if run_error is None:
                raise
        if run_error is not None:
            raise run_error
        log.info("...................NEXUS-PUBLISH-END...................")
        return plugin
    finally:
        plugin.deinit()
