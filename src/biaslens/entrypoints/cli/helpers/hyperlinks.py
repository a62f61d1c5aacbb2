"""OSC-8 hyperlink utilities for the BIASLENS CLI.

Resource listings carry URLs; on terminals known to understand OSC-8 they
are rendered as clickable links, elsewhere as plain text.
"""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort check whether ``stream`` (default stdout) renders OSC-8 links.

    Non-TTY streams never do. For TTYs a small allowlist of terminal
    identifiers is consulted.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in OSC8_TERMINAL_PROGRAMS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Render ``url`` as a clickable link showing ``label`` (default: the URL).

    Falls back to ``"label (url)"`` (or just the URL) when OSC-8 is unsupported.
    """
    text = label or url
    if not supports_osc8():
        return url if text == url else f"{text} ({url})"
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
