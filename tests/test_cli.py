"""Tests for the simple-ui command line."""

from __future__ import annotations

import pytest

from simple_ui import cli, config
from simple_ui.terminal import set_terminal
from simple_ui.themes import current_palette


def test_parser_commands():
    parser = cli.build_parser()
    args = parser.parse_args(["demo", "--quick", "--palette", "ocean"])
    assert args.func is cli.cmd_demo
    assert args.quick is True
    assert args.palette == "ocean"


def test_parser_rejects_unknown_palette():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["demo", "--palette", "neon"])


def test_palettes_lists_every_palette(scripted_terminal):
    terminal = scripted_terminal()
    set_terminal(terminal)
    cli.main(["palettes"])
    for name in ("classic", "ocean", "ember", "mono"):
        assert name in terminal.output


def test_demo_walkthrough(scripted_terminal):
    terminal = scripted_terminal(lines=["1", "alice", "3", "2", "0", "2", "0"])
    set_terminal(terminal)
    cli.main(["demo"])

    assert "Hello, alice!" in terminal.output
    assert "Last name: alice" in terminal.output
    assert "Last choice in this menu: 2" in terminal.output
    assert "0. Back" in terminal.output
    assert current_palette().name == "ocean"


def test_demo_quick_mode(scripted_terminal):
    terminal = scripted_terminal(keys="30")
    set_terminal(terminal)
    cli.main(["demo", "--quick", "--palette", "mono"])
    # "0" leaves the submenu; the root then reaches end of input
    assert "Palettes" in terminal.output
    assert current_palette().name == "mono"


def test_demo_prompt_rejects_long_name(scripted_terminal):
    terminal = scripted_terminal(lines=["1", "abcdefghijklmnopq", "bob", "0"])
    set_terminal(terminal)
    cli.main(["demo"])
    assert terminal.output.count("Invalid input.") == 1
    assert "Hello, bob!" in terminal.output


def test_end_of_input_exits_cleanly(scripted_terminal):
    set_terminal(scripted_terminal())
    cli.main(["demo"])


def test_keyboard_interrupt_exits_130(scripted_terminal):
    set_terminal(scripted_terminal(keys="\x03"))
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["demo", "--quick"])
    assert exc_info.value.code == 130


def test_bad_config_exits_1():
    path = config.get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text("palette: [oops\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["palettes"])
    assert exc_info.value.code == 1


def test_config_palette_applies(scripted_terminal, monkeypatch):
    monkeypatch.setenv("SIMPLE_UI_PALETTE", "ember")
    set_terminal(scripted_terminal())
    cli.main(["palettes"])
    assert current_palette().name == "ember"


def test_no_command_prints_help(capsys):
    cli.main([])
    assert "usage: simple-ui" in capsys.readouterr().out


def test_quoted_debug_off_in_config_writes_no_log(scripted_terminal):
    path = config.get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text('debug: "no"\n')
    set_terminal(scripted_terminal())
    cli.main(["palettes"])
    assert not config.get_log_path().exists()
