import json

import httpx
import pytest

from nexus_publish import main as main_module
from nexus_publish.bootstrap import execute
from nexus_publish.modules.nexusupload import NexusPlugin
from nexus_publish.modules.nexusupload.util import ConfigError, OutputWriteError, RunError
from nexus_publish.settings import Settings, get_settings


def build_settings(tmp_path, artifacts: str, **overrides) -> Settings:
    defaults = {
        "username": "testUser",
        "password": "testPass",
        "protocol": "https",
        "nexus_url": "nexus.example.com/",
        "nexus_version": "3",
        "repository": "repo",
        "group_id": "group",
        "format": "raw",
        "artifacts": artifacts,
        "DRONE_OUTPUT": str(tmp_path / "drone-output"),
    }
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


def read_status(tmp_path):
    line = (tmp_path / "drone-output").read_text().strip()
    key, value = line.split("=", 1)
    assert key == "UPLOAD_STATUS"
    return json.loads(value)


def write_files(tmp_path, *names):
    paths = []
    for name in names:
        path = tmp_path / name
        path.write_bytes(name.encode())
        paths.append(path)
    return paths


def test_execute_multi_file_success(tmp_path):
    (f,) = write_files(tmp_path, "f.zip")
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    plugin = execute(build_settings(tmp_path, f"[{{artifactId: a1, file: '{f}', type: zip}}]"), client=client)

    assert plugin.result.success
    assert len(seen) == 1
    assert str(seen[0].url) == "https://nexus.example.com/service/rest/v1/components?repository=repo"
    assert b'name="raw.directory"' in seen[0].content
    assert read_status(tmp_path) == []


def test_execute_reports_failures_and_still_writes_output(tmp_path):
    a, b = write_files(tmp_path, "a.zip", "b.zip")
    artifacts = f"""
- {{artifactId: a, file: '{a}', type: zip}}
- {{file: orphan.zip}}
- {{artifactId: b, file: '{b}', type: zip}}
"""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500 if b"b.zip" in request.content else 200)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    with pytest.raises(RunError, match="some artifacts failed to upload") as excinfo:
        execute(build_settings(tmp_path, artifacts), client=client)

    status = read_status(tmp_path)
    assert [item["err"] for item in status] == [
        "Missing fields: artifactId, type",
        "upload failed: server responded with status 500",
    ]
    assert [f.artifact_id for f in excinfo.value.failed] == ["", "b"]


def test_execute_config_error_skips_upload_and_output(tmp_path):
    client = httpx.Client(transport=httpx.MockTransport(lambda request: pytest.fail("no upload expected")))

    with pytest.raises(ConfigError, match="groupId cannot be empty"):
        execute(build_settings(tmp_path, "[{artifactId: a, file: a.zip, type: zip}]", group_id=""), client=client)

    assert not (tmp_path / "drone-output").exists()


def test_output_error_does_not_mask_upload_failure(tmp_path):
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    settings = build_settings(
        tmp_path,
        f"[{{artifactId: a, file: '{tmp_path / 'missing.zip'}', type: zip}}]",
        DRONE_OUTPUT=str(tmp_path),
    )

    with pytest.raises(RunError):
        execute(settings, client=client)


def test_output_error_is_raised_when_uploads_succeed(tmp_path):
    (f,) = write_files(tmp_path, "f.zip")
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    settings = build_settings(tmp_path, f"[{{artifactId: a, file: '{f}', type: zip}}]", DRONE_OUTPUT=str(tmp_path))

    with pytest.raises(OutputWriteError):
        execute(settings, client=client)


def test_main_exit_codes(tmp_path, monkeypatch):
    monkeypatch.setattr(main_module, "configure_logging", lambda *args, **kwargs: None)
    monkeypatch.chdir(tmp_path)
    for name in ("PLUGIN_ATTRIBUTES", "PLUGIN_ARTIFACTS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    assert main_module.main() == 1

    (f,) = write_files(tmp_path, "f.zip")
    monkeypatch.setenv("PLUGIN_ARTIFACTS", f"[{{artifactId: a, file: '{f}', type: zip}}]")
    for name, value in {
        "PLUGIN_USERNAME": "u",
        "PLUGIN_PASSWORD": "p",
        "PLUGIN_PROTOCOL": "https",
        "PLUGIN_NEXUS_URL": "nexus.example.com",
        "PLUGIN_NEXUS_VERSION": "3",
        "PLUGIN_REPOSITORY": "repo",
        "PLUGIN_GROUP_ID": "g",
        "DRONE_OUTPUT": str(tmp_path / "drone-output"),
    }.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setattr(
        main_module,
        "execute",
        lambda settings: execute(settings, client=httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(201)))),
    )
    get_settings.cache_clear()

    assert main_module.main() == 0
    assert read_status(tmp_path) == []
    get_settings.cache_clear()


def test_deinit_closes_only_the_client_the_plugin_created(tmp_path):
    settings = build_settings(tmp_path, "[]")

    plugin = NexusPlugin()
    plugin.init(settings)
    owned = plugin._get_client()
    plugin.deinit()
    assert owned.is_closed

    injected = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    plugin = NexusPlugin(client=injected)
    plugin.init(settings)
    assert plugin._get_client() is injected
    plugin.deinit()
    assert not injected.is_closed
    injected.close()
