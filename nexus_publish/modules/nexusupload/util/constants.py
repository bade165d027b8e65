"""Constants shared by the Nexus upload module."""

from __future__ import annotations


class NexusUploadConstant:
    OUTPUT_KEY_UPLOAD_STATUS = "UPLOAD_STATUS"
    DEV_TESTING_OUTPUT_FILE = "/tmp/drone-output"

    FORMAT_MAVEN2 = "maven2"
    FORMAT_RAW = "raw"
    FORMAT_YUM = "yum"
    DEFAULT_MULTI_FILE_FORMAT = FORMAT_MAVEN2

    COMPONENTS_API_PATH = "/service/rest/v1/components"
    OCTET_STREAM = "application/octet-stream"

    ATTRIBUTE_PATTERN = r"-(CgroupId|CartifactId|Cversion|Aextension|Aclassifier)=(\S+)"
    ATTRIBUTE_GROUP_ID = "CgroupId"
    ATTRIBUTE_ARTIFACT_ID = "CartifactId"
    ATTRIBUTE_VERSION = "Cversion"
    ATTRIBUTE_EXTENSION = "Aextension"
    ATTRIBUTE_CLASSIFIER = "Aclassifier"
    REQUIRED_ATTRIBUTES = (
        ATTRIBUTE_GROUP_ID,
        ATTRIBUTE_VERSION,
        ATTRIBUTE_EXTENSION,
        ATTRIBUTE_CLASSIFIER,
    )
