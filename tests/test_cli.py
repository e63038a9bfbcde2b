"""Tests for the command line interface."""

import pytest

from plantemplates import app, cli, library

from conftest import RECORDING_BYTES


def test_list_templates(home_dir, capsys):
    assert cli.main(["--home", str(home_dir), "--list"]) == 0

    out = capsys.readouterr().out
    assert "Recording (plan)" in out
    assert "Assertions (fragment)" in out


def test_show_template(home_dir, capsys):
    assert cli.main(["--home", str(home_dir), "--show", "Assertions"]) == 0

    assert "<p>Assertion fragment</p>" in capsys.readouterr().out


def test_apply_template(home_dir, work_dir, capsys):
    code = cli.main(["--home", str(home_dir), "--apply", "Recording", "--into", str(work_dir)])

    assert code == 0
    assert (work_dir / "recording.jmx").read_bytes() == RECORDING_BYTES
    assert "Created" in capsys.readouterr().out


def test_unknown_template_fails(home_dir, capsys):
    assert cli.main(["--home", str(home_dir), "--show", "Nope"]) == 1

    assert "Nope" in capsys.readouterr().err


def test_copy_failure_fails(home_dir, tmp_path, capsys):
    code = cli.main([
        "--home", str(home_dir), "--apply", "Recording", "--into", str(tmp_path / "missing"),
    ])

    assert code == 1
    assert "Could not copy" in capsys.readouterr().err


def test_missing_index_fails(tmp_path, capsys):
    assert cli.main(["--home", str(tmp_path), "--list"]) == 1

    assert "template index" in capsys.readouterr().err


def test_home_defaults_to_library(capsys):
    assert cli.main(["--list"]) == 0

    assert "Recording" in capsys.readouterr().out


def test_actions_are_exclusive(home_dir):
    with pytest.raises(SystemExit):
        cli.main(["--home", str(home_dir), "--list", "--show", "Recording"])


def test_no_action_launches_gui(home_dir, monkeypatch):
    launched = []
    monkeypatch.setattr(app, "run", launched.append)

    assert cli.main(["--home", str(home_dir)]) == 0
    assert launched == [home_dir]


def test_set_home_is_remembered(home_dir, capsys):
    assert cli.main(["--set-home", str(home_dir)]) == 0
    assert library.get_home_dir() == home_dir.resolve()
    capsys.readouterr()

    assert cli.main(["--list"]) == 0

    out = capsys.readouterr().out
    assert "Assertions (fragment)" in out
    assert "Simple HTTP" not in out


def test_clear_home_restores_bundled(home_dir):
    cli.main(["--set-home", str(home_dir)])

    assert cli.main(["--clear-home"]) == 0
    assert library.get_home_dir() == library.get_bundled_home()


def test_into_requires_apply(home_dir, work_dir):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--home", str(home_dir), "--list", "--into", str(work_dir)])

    assert excinfo.value.code == 2


def test_gui_with_broken_index_fails(tmp_path, capsys):
    assert cli.main(["--home", str(tmp_path)]) == 1

    assert "template index" in capsys.readouterr().err
