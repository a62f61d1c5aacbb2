"""CLI helpers for BIASLENS.

Utilities used by the command-line interface: URL sanitization for safe display,
OSC-8 terminal hyperlinks when supported, logger-level option parsing, and
message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .db_url import sanitize_url
from .hyperlinks import hyperlink
from .messages import error, success, warn

__all__ = ["sanitize_url", "hyperlink", "error", "success", "warn"]
