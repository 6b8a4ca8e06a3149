"""CLI helpers for HEXCALC.

Utilities used by the command-line interface: the exact-decimal Click
parameter type, logger-level option parsing, URL sanitization for safe
display, OSC-8 terminal hyperlinks when supported, and message emitters that
write to stderr with emoji→ASCII fallbacks.
"""

from .db_url import sanitize_url
from .decimal_param import DECIMAL, DecimalParamType
from .hyperlinks import hyperlink
from .messages import error, success, warn

__all__ = [
    "DECIMAL",
    "DecimalParamType",
    "error",
    "hyperlink",
    "sanitize_url",
    "success",
    "warn",
]
