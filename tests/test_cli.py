import json

import pytest
from click.testing import CliRunner
from unittest.mock import patch

from wdsession.command.wdsession_start import run
from wdsession.session.exceptions import TransportError
from wdsession.session.types import TransportResponse


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "remote.yaml"
    path.write_text(
        "hostname: 127.0.0.1\n"
        "port: 9515\n"
        "capabilities:\n"
        "  browserName: chrome\n"
    )
    return str(path)


def test_dry_run(runner, config_file):
    result = runner.invoke(run, ["--config", config_file, "--dry-run"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["url"] == "http://127.0.0.1:9515/session"
    assert payload["body"]["capabilities"]["alwaysMatch"] == {"browserName": "chrome", "webSocketUrl": True}


def test_overrides(runner, config_file):
    result = runner.invoke(run, ["--config", config_file, "--dry-run", "--hostname", "grid", "--path", "/wd/hub"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["url"] == "http://grid:9515/wd/hub/session"


def test_start_session(runner, config_file):
    body = {
        "value": {
            "sessionId": "abc-123",
            "capabilities": {
                "browserName": "chrome",
                "browserVersion": "120",
                "platformName": "linux",
                "setWindowRect": True,
            },
        }
    }
    with patch("wdsession.command.wdsession_start.RequestsTransport.send",
               return_value=TransportResponse(status=200, body=body)) as send:
        result = runner.invoke(run, ["--config", config_file])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["sessionId"] == "abc-123"
    assert payload["profile"]["isW3C"] is True
    assert payload["profile"]["isChromium"] is True
    assert "sendCommand" in payload["commands"]
    assert send.call_count == 1


def test_session_error_exits_non_zero(runner, config_file):
    error = TransportError("ECONNREFUSED 127.0.0.1:9515", code="ECONNREFUSED")
    with patch("wdsession.command.wdsession_start.RequestsTransport.send", side_effect=error):
        result = runner.invoke(run, ["--config", config_file])
    assert result.exit_code == 1
    assert 'Unable to connect to "http://127.0.0.1:9515/"' in result.output


def test_invalid_capabilities_exit_non_zero(runner, tmp_path):
    path = tmp_path / "remote.json"
    path.write_text(json.dumps({"capabilities": {"platform": "Windows"}}))
    result = runner.invoke(run, ["--config", str(path), "--dry-run"])
    assert result.exit_code == 1
    assert '("platform")' in result.output


def test_invalid_config(runner, tmp_path):
    path = tmp_path / "remote.json"
    path.write_text(json.dumps({"protocol": "ftp"}))
    result = runner.invoke(run, ["--config", str(path)])
    assert result.exit_code == 2
    assert "invalid configuration" in result.output
