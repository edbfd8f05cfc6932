import io
import os
import socket

from minishell.parser import ChunkType
from minishell.shell import (
    UserInfo,
    chunk_type_name,
    format_prompt,
    login,
    main,
    read_line,
)


def test_login_uses_host_name():
    assert login().device_name == socket.gethostname()


def test_read_line_strips_newline_and_signals_eof():
    stream = io.StringIO("abc\ndef")
    assert read_line(stream) == "abc"
    assert read_line(stream) == "def"
    assert read_line(stream) is None


def test_read_line_empty_line():
    stream = io.StringIO("\nx\n")
    assert read_line(stream) == ""
    assert read_line(stream) == "x"


def test_prompt_under_home():
    user = UserInfo("alice", "box")
    assert format_prompt(user, "/home/alice/src", "/home/alice") == "alice@box:~/src$ "


def test_prompt_outside_home():
    user = UserInfo("alice", "box")
    assert format_prompt(user, "/tmp", "/home/alice") == "alice@box:/tmp$ "


def test_prompt_without_home():
    user = UserInfo("alice", "box")
    assert format_prompt(user, "/tmp", None).endswith(":/tmp$ ")


def test_chunk_type_name():
    assert chunk_type_name(ChunkType.CHUNK) == "CHUNK"
    assert chunk_type_name(ChunkType.AND) == "AND"
    assert chunk_type_name("bogus") == "UNKNOWN"


def test_main_runs_commands_and_exits(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("pwd\nexit\npwd\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert os.getcwd() + "\n" in out
    assert "Parsed Array:" in out
    assert "  [0]: pwd - CHUNK" in out
    assert out.count("Parsed Array:") == 1


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("$ \n")