"""Upload build artifacts to Nexus 2/3 repositories from a CI pipeline step."""

__version__ = "1.0.0"
