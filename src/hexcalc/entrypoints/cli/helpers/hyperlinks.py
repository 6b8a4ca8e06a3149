"""OSC-8 hyperlink utilities for the HEXCALC CLI.

Renders a URL as a clickable terminal link when the stream looks like it
supports OSC-8, and as plain text otherwise.
"""

import os
import sys
from typing import TextIO

OSC8_TERMINALS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Returns False when the stream is not a TTY. Otherwise relies on a
    conservative allowlist of terminal identifiers (``TERM_PROGRAM``, Windows
    Terminal, VTE-based terminals, alacritty, konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in OSC8_TERMINALS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str) -> str:
    """Return `url` wrapped in a BEL-terminated OSC-8 sequence when supported."""
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"
