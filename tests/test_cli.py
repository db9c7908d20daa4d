from __future__ import annotations

import os

import pytest

from appinit import cli
from appinit.errors import ModuleCommandError


class _Recorder:
    def __init__(self, exc: Exception | None = None):
        self.exc = exc
        self.calls = []

    def __call__(self, options, config, **_kw):
        self.calls.append((options, config))
        if self.exc is not None:
            raise self.exc


def test_init_passes_arguments(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    rec = _Recorder()
    monkeypatch.setattr(cli, "init_project", rec)

    rc = cli.main(["init", "com.example/myapp", "--id", "com.example.x", "--name", "X"])

    assert rc == 0
    (options, config), = rec.calls
    assert options.module_path == "com.example/myapp"
    assert options.app_id == "com.example.x"
    assert options.app_name == "X"
    assert config.work_dir == os.getcwd()
    assert capsys.readouterr().out == ""


def test_appid_long_flag_and_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APPINIT_GO_BIN", "/usr/local/go/bin/go")
    rec = _Recorder()
    monkeypatch.setattr(cli, "init_project", rec)

    assert cli.main(["init", "--appID", "io.example.app"]) == 0
    (options, config), = rec.calls
    assert options.module_path is None
    assert options.app_id == "io.example.app"
    assert options.app_name is None
    assert config.go_bin == "/usr/local/go/bin/go"


def test_failure_prints_error_and_exits_nonzero(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    err = ModuleCommandError("failed to run command 'go mod tidy': exit status 1", command=["go", "mod", "tidy"])
    monkeypatch.setattr(cli, "init_project", _Recorder(err))

    assert cli.main(["init"]) == 1
    captured = capsys.readouterr()
    assert "failed to run command 'go mod tidy'" in captured.err
    assert captured.out == ""


def test_extra_positional_is_rejected(capsys):
    with pytest.raises(SystemExit) as ei:
        cli.main(["init", "a", "b"])
    assert ei.value.code == 2


def test_subcommand_is_required():
    with pytest.raises(SystemExit) as ei:
        cli.main([])
    assert ei.value.code == 2


def test_missing_go_binary_end_to_end(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APPINIT_GO_BIN", str(tmp_path / "no-go-here"))

    assert cli.main(["init", "example"]) == 1
    assert "failed to run command" in capsys.readouterr().err
    # main.go was written before the failing step and is kept.
    assert (tmp_path / "main.go").exists()
    assert not (tmp_path / "FyneApp.toml").exists()


def test_undecodable_module_path_fails_cleanly(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APPINIT_GO_BIN", str(tmp_path / "no-go-here"))
    modpath = os.fsdecode(b"caf\xe9")

    assert cli.main(["init", modpath]) == 1
    assert "failed to run command" in capsys.readouterr().err
    assert 'app.NewWithID("caf\\xe9")' in (tmp_path / "main.go").read_text(encoding="utf-8")
