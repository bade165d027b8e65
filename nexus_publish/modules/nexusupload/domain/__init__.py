from .artifact import Artifact
from .models import FailedArtifact, ProcessingContext, RunResult

__all__ = [
    "Artifact",
    "FailedArtifact",
    "ProcessingContext",
    "RunResult",
]
