"""Unit tests for :mod:`clibkit.entrypoints.cli.helpers.messages`.

1) Emoji/ASCII glyph selection follows the *current* stderr encoding reported
   by ``click.get_text_stream("stderr")``, re-queried on every call.
2) ``warn``/``success``/``error`` emit styled lines to **stderr** only.
"""

import io
import sys

import click
import pytest

from clibkit.entrypoints.cli.helpers.messages import (
    Glyph,
    _supports_character,
    error,
    glyph,
    success,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A text stream that mimics a TTY with a controllable encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding."""
        return self._encoding

    def isatty(self) -> bool:
        """Report a TTY so Click keeps ANSI styling."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("ascii", {Glyph.CAUTION: "[!]", Glyph.SUCCESS: "[OK]", Glyph.ERROR: "[X]"}),
        ("utf-8", {Glyph.CAUTION: "⚠️", Glyph.SUCCESS: "✅", Glyph.ERROR: "❌"}),
    ],
)
def test_glyphs_respect_stream_encoding(monkeypatch, encoding, expected):
    """Glyphs fall back to ASCII when stderr cannot encode the emoji."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    for kind, text in expected.items():
        assert glyph(kind) == text


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """The stream is fetched on every call, never cached."""
    calls: list[str] = []

    def stream_factory(name: str):  # pylint: disable=unused-argument
        enc = "ascii" if not calls else "utf-8"
        calls.append(enc)
        return FakeTTY(enc)

    monkeypatch.setattr(click, "get_text_stream", stream_factory)

    assert _supports_character("⚠️") is False
    assert _supports_character("⚠️") is True
    assert calls == ["ascii", "utf-8"]


@pytest.mark.parametrize(
    ("encoding", "mark", "color_code", "func"),
    [
        ("ascii", "[!]", SET_YELLOW, warn),
        ("utf-8", "⚠️", SET_YELLOW, warn),
        ("ascii", "[OK]", SET_GREEN, success),
        ("utf-8", "✅", SET_GREEN, success),
        ("ascii", "[X]", SET_RED, error),
        ("utf-8", "❌", SET_RED, error),
    ],
)
def test_messages_emit_styled_stderr(monkeypatch, encoding, mark, color_code, func):
    """Messages are bold, colored, and carry the right glyph."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    func("danger!")

    out = stream.getvalue()
    assert f"{mark}  danger!" in out
    assert SET_BOLD in out
    assert color_code in out
    assert RESET in out


def test_warn_writes_to_stderr_only(monkeypatch, capsys):
    """warn leaves stdout untouched."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("utf-8"))
    warn("danger!")
    captured = capsys.readouterr()
    assert "danger!" in captured.err
    assert captured.out == ""
