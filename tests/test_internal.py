import os

import pytest

from minishell.internal import ShellExit, execute_cd, execute_exit, execute_pwd


def test_cd_to_argument(tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    target = tmp_path / "sub"
    target.mkdir()
    assert execute_cd(["cd", str(target)]) is True
    assert os.path.samefile(os.getcwd(), target)


def test_cd_without_argument_goes_home(tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    monkeypatch.setenv("HOME", str(tmp_path))
    assert execute_cd(["cd"]) is True
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_cd_without_home(monkeypatch, capsys):
    monkeypatch.delenv("HOME", raising=False)
    before = os.getcwd()
    assert execute_cd(["cd"]) is False
    assert "cd: HOME not set" in capsys.readouterr().err
    assert os.getcwd() == before


def test_cd_missing_directory(tmp_path, capsys):
    before = os.getcwd()
    assert execute_cd(["cd", str(tmp_path / "missing")]) is False
    assert capsys.readouterr().err.startswith("cd: ")
    assert os.getcwd() == before


def test_pwd_prints_cwd(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert execute_pwd() is True
    assert capsys.readouterr().out == os.getcwd() + "\n"


def test_exit_raises():
    with pytest.raises(ShellExit) as info:
        execute_exit()
    assert info.value.code == 0