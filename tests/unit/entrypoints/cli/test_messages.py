"""Unit tests for the stderr message helpers and glyph fallbacks."""

import io

import click
import pytest

from hexcalc.entrypoints.cli.helpers.messages import (
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)


class FakeStderr(io.StringIO):
    """Text stream with a controllable encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:  # type: ignore[override]
        """Declared character encoding."""
        return self._encoding


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("ascii", ("[!]", "[OK]", "[X]")),
        ("utf-8", ("⚠️", "✅", "❌")),
    ],
)
def test_glyphs_follow_stderr_encoding(monkeypatch, encoding, expected):
    """Emoji are used only when stderr can encode them."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeStderr(encoding))
    assert (caution_glyph(), success_glyph(), error_glyph()) == expected


@pytest.mark.parametrize("func", [warn, success, error])
def test_messages_go_to_stderr_only(func, capsys):
    """Notices never touch stdout, which is reserved for results."""
    func("Upgrade complete!")
    captured = capsys.readouterr()
    assert "Upgrade complete!" in captured.err
    assert captured.out == ""
