"""Console entrypoint used by the pipeline step."""

from __future__ import annotations

import logging
import sys

from nexus_publish.modules.nexusupload.util import NexusPublishError
from .bootstrap import execute
from .logging_config import configure_logging
from .settings import get_settings

log = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level, settings.dev_testing)
    try:
        execute(settings)
    except NexusPublishError as exc:
        log.error("Nexus publish failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
