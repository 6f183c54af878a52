"""Tests for the process entry point."""

from unittest.mock import Mock, patch

import pytest

import main as entry


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.delenv("GMAIL_USER", raising=False)
    monkeypatch.delenv("GMAIL_APP_PASSWORD", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(entry, "load_dotenv", Mock())


def test_missing_credentials_exit_before_bind(capsys):
    with patch.object(entry, "make_server") as make_server:
        code = entry.main([])

    assert code == 1
    assert "FATAL ERROR" in capsys.readouterr().err
    make_server.assert_not_called()


def test_environment_credentials_start_server(monkeypatch):
    monkeypatch.setenv("GMAIL_USER", "env@example.com")
    monkeypatch.setenv("GMAIL_APP_PASSWORD", "env-pass")
    server = Mock()
    server.serve_forever.side_effect = KeyboardInterrupt

    with patch.object(entry, "make_server", return_value=server) as make_server:
        code = entry.main(["--port", "8081"])

    assert code == 0
    args, kwargs = make_server.call_args
    assert args[:2] == ("0.0.0.0", 8081)
    assert kwargs == {"threaded": True}
    server.server_close.assert_called_once()


def test_config_flag(tmp_path):
    path = tmp_path / "relay.properties"
    path.write_text("GMAIL_USER=file@example.com\nGMAIL_APP_PASSWORD=p\nPORT=9000\n", encoding="utf-8")
    server = Mock()
    server.serve_forever.side_effect = KeyboardInterrupt

    with patch.object(entry, "make_server", return_value=server) as make_server:
        code = entry.main(["--config", str(path)])

    assert code == 0
    assert make_server.call_args.args[1] == 9000


def test_bind_failure_returns_1(monkeypatch, capsys):
    monkeypatch.setenv("GMAIL_USER", "env@example.com")
    monkeypatch.setenv("GMAIL_APP_PASSWORD", "env-pass")

    with patch.object(entry, "make_server", side_effect=OSError(98, "Address already in use")):
        code = entry.main([])

    assert code == 1
    assert "could not bind" in capsys.readouterr().err
