import json

import pytest

from slack_client import cli
from slack_client.services import build_service

from .conftest import BOT_TOKEN, USER_TOKEN


@pytest.fixture
def cli_env(monkeypatch, tmp_path, session):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SLACK_ENV_FILE", str(tmp_path / "missing.env"))
    monkeypatch.setenv("SLACK_BOT_TOKEN", BOT_TOKEN)
    monkeypatch.setenv("SLACK_USER_TOKEN", USER_TOKEN)
    monkeypatch.setenv("SLACK_PAGE_LIMIT", "0")
    monkeypatch.setattr(cli, "build_service", lambda settings: build_service(settings, session=session))
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    return session


def test_channels_prints_aggregated_list(cli_env, capsys):
    cli_env.enqueue({"ok": True, "channels": [{"id": "C1"}]})

    exit_code = cli.main(["channels"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == [{"id": "C1"}]


def test_post_without_markdown(cli_env, capsys):
    cli_env.enqueue({"ok": True, "ts": "1.2"})

    exit_code = cli.main(["post", "C1", "hello", "--no-mrkdwn"])

    assert exit_code == 0
    assert cli_env.calls[0]["json"]["mrkdwn"] is False
    assert json.loads(capsys.readouterr().out)["ts"] == "1.2"


def test_share_file_uses_user_token(cli_env):
    cli_env.enqueue({"ok": True, "file": {"id": "F1"}})

    assert cli.main(["share-file", "F1"]) == 0
    assert cli_env.calls[0]["headers"]["Authorization"] == f"Bearer {USER_TOKEN}"


def test_slack_error_exits_with_status_1(cli_env, capsys):
    cli_env.enqueue({"ok": False, "error": "user_not_found"})

    exit_code = cli.main(["user-info", "U404"])

    assert exit_code == 1
    output = json.loads(capsys.readouterr().out)
    assert output == {"error": "user_not_found", "type": "SlackApiError"}


def test_missing_configuration_exits_with_status_2(cli_env, monkeypatch, capsys):
    monkeypatch.delenv("SLACK_BOT_TOKEN")

    exit_code = cli.main(["channels"])

    assert exit_code == 2
    assert "SLACK_BOT_TOKEN" in capsys.readouterr().err
    assert cli_env.calls == []
