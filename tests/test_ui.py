import re

from drillrunner import ui

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_styles_are_plain_without_terminal(monkeypatch):
    _plain(monkeypatch)
    assert ui.bold("hello") == "hello"
    assert ui.blue(12) == "12"


def test_styles_wrap_text_when_forced(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    styled = ui.bold("hello")
    assert styled != "hello"
    assert ANSI.sub("", styled) == "hello"
    assert ANSI.sub("", ui.blue(7)) == "7"


def test_forced_zero_disables_colors(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "0")
    assert ui.bold("x") == "x"


def test_warn_without_emoji(monkeypatch, capsys):
    _plain(monkeypatch)
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran x with errors")
    assert capsys.readouterr().out == "! Ran x with errors\n"


def test_warn_with_emoji(monkeypatch, capsys):
    _plain(monkeypatch)
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("boom")
    assert capsys.readouterr().out == "⚠️  boom\n"


def test_success_without_emoji(monkeypatch, capsys):
    _plain(monkeypatch)
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran x")
    assert capsys.readouterr().out == "✓ Successfully ran x\n"


def test_success_with_emoji(monkeypatch, capsys):
    _plain(monkeypatch)
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("done")
    assert capsys.readouterr().out == "✅ done\n"


def test_warn_colored_keeps_message(monkeypatch, capsys):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("careful")
    out = capsys.readouterr().out
    assert ANSI.sub("", out) == "! careful\n"
    assert out != "! careful\n"