"""Tests for the command-line entry point."""

import uvicorn

from vnest_console.__main__ import build_parser, main
from vnest_console.core.config import ConfigLoader


def _clear_env(monkeypatch, tmp_path):
    for var in ConfigLoader.ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv('VNEST_CONFIG_FILE', str(tmp_path / 'absent.json'))


def test_parser_defaults_are_none():
    """Unset flags leave the loaded configuration alone"""
    args = build_parser().parse_args([])
    assert args.host is None
    assert args.api_base is None


def test_invalid_port_exits_with_error(monkeypatch, tmp_path, capsys):
    """A bad port is reported and exits with status 2"""
    _clear_env(monkeypatch, tmp_path)
    assert main(['--port', '70000']) == 2
    assert 'Invalid configuration' in capsys.readouterr().err


def test_overrides_reach_uvicorn(monkeypatch, tmp_path):
    """Command-line values reach the server and the app config"""
    _clear_env(monkeypatch, tmp_path)
    seen = {}

    def fake_run(app, host, port, log_level):
        seen.update(app=app, host=host, port=port, log_level=log_level)

    monkeypatch.setattr(uvicorn, 'run', fake_run)

    assert main(['--host', '0.0.0.0', '--port', '9001', '--api-base', 'http://backend/api']) == 0
    assert seen['host'] == '0.0.0.0'
    assert seen['port'] == 9001
    assert seen['app'].state.config.api_base == 'http://backend/api'
