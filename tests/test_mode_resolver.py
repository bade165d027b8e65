import pytest

from nexus_publish.modules.nexusupload.service import resolve_upload_mode
from nexus_publish.modules.nexusupload.util import ConfigError, NexusVersion, UploadMode


def test_attributes_only_selects_single_file():
    assert resolve_upload_mode("-CgroupId=g", "") is UploadMode.SINGLE_FILE


def test_artifacts_only_selects_multi_file():
    assert resolve_upload_mode("", "[{artifactId: a}]") is UploadMode.MULTI_FILE


@pytest.mark.parametrize("attributes, artifacts", [("", ""), (None, None), ("   ", "")])
def test_both_empty_is_rejected(attributes, artifacts):
    with pytest.raises(ConfigError, match="cannot be empty"):
        resolve_upload_mode(attributes, artifacts)


def test_both_provided_is_ambiguous():
    with pytest.raises(ConfigError, match="ambiguous"):
        resolve_upload_mode("-CgroupId=g", "[{artifactId: a}]")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2", NexusVersion.NEXUS2),
        ("nexus2", NexusVersion.NEXUS2),
        ("3", NexusVersion.NEXUS3),
        (" Nexus3 ", NexusVersion.NEXUS3),
    ],
)
def test_nexus_version_parse(value, expected):
    assert NexusVersion.parse(value) is expected


def test_nexus_version_parse_rejects_unknown():
    with pytest.raises(ConfigError, match="nexusVersion"):
        NexusVersion.parse("4")
