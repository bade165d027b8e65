"""Sequential upload of the normalized artifact list."""

from __future__ import annotations

import logging
import time

import httpx

from nexus_publish.modules.nexusupload.domain import Artifact, ProcessingContext, RunResult
from nexus_publish.modules.nexusupload.util import NexusPublishError


class NexusUploader:
    """Upload every artifact of a context, collecting failures instead of stopping."""

    def __init__(self, context: ProcessingContext, client: httpx.Client) -> None:
        self.context = context
        self.log = logging.getLogger(self.__class__.__name__)
        self._client = client

    def run(self) -> RunResult:
        result = RunResult(failed=list(self.context.rejected))
        self.log.info(
            "Uploading %d artifact(s) to %s repository=%s via %s",
            len(self.context.artifacts),
            self.context.server_url,
            self.context.repository,
            self.context.strategy.name,
        )
        for artifact in self.context.artifacts:
            self._upload_one(artifact, result)
        return result

    def _upload_one(self, artifact: Artifact, result: RunResult) -> None:
        try:
            fh = open(artifact.file, "rb")
        except OSError as exc:
            self.log.error("Could not open %s: %s", artifact.file, exc)
            result.add_failed(artifact, f"could not open file: {exc}")
            return

        start_time = time.time()
        with fh:
            try:
                request = self.context.strategy.build_request(self._client, self.context, artifact, fh)
                response = self._client.send(request, auth=self.context.auth)
                if response.status_code >= 400:
                    raise httpx.HTTPStatusError(
                        f"server responded with status {response.status_code}",
                        request=request,
                        response=response,
                    )
            except (NexusPublishError, httpx.HTTPError) as exc:
                self.log.error("Upload failed file=%s artifactId=%s: %s", artifact.file, artifact.artifact_id, exc)
                result.add_failed(artifact, f"upload failed: {exc}")
                return

        self.log.info(
            "Uploaded artifact file=%s artifactId=%s -> %s %s (%d, %.2fs)",
            artifact.file,
            artifact.artifact_id,
            request.method,
            request.url,
            response.status_code,
            time.time() - start_time,
        )
