import runpy
import sys

import pytest


def test_cli_main_calls_app(monkeypatch):
    import waymark.cli as cli

    called = {"ok": False}

    def _fake_app():
        called["ok"] = True

    monkeypatch.setattr(cli, "app", _fake_app)
    cli.main()
    assert called["ok"] is True


def test_python_m_waymark_invokes_cli_main(monkeypatch):
    import waymark.cli as cli

    called = {"ok": False}

    def _fake_main():
        called["ok"] = True

    monkeypatch.setattr(cli, "main", _fake_main)

    # Ensure we re-execute the module body.
    sys.modules.pop("waymark.__main__", None)
    runpy.run_module("waymark.__main__", run_name="__main__")
    assert called["ok"] is True


def test_waymark_cli_module_guard_runs(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["waymark", "--help"])
    sys.modules.pop("waymark.cli", None)
    with pytest.raises(SystemExit) as e:
        runpy.run_module("waymark.cli", run_name="__main__")
    assert e.value.code == 0
