from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from models import ParsedLogLine

# -----------------------------
# Colors
# -----------------------------

ESC = "\x1b["

@dataclass(frozen=True)
class Palette:
    """SGR parameters per status class, without the ESC[ prefix and m suffix."""
    ok: str = "92"       # bright green
    warn: str = "93"     # bright yellow
    error: str = "91"    # bright red
    reset: str = "0"

    def escape(self, status_class: str) -> str:
        return f"{ESC}{getattr(self, status_class)}m"


DEFAULT_PALETTE = Palette()

STATUS_CLASSES = ("ok", "warn", "error")

def classify_status(status: int) -> str:
    if 400 <= status <= 499:
        return "warn"
    if 500 <= status <= 599:
        return "error"
    return "ok"

def colorize(text: str, status: int, palette: Palette = DEFAULT_PALETTE) -> str:
    return f"{palette.escape(classify_status(status))}{text}{palette.escape('reset')}"


# -----------------------------
# Line rendering
# -----------------------------

def _col(value, width: int) -> str:
    return str(value).ljust(width)

def render_line(rec: ParsedLogLine, widths: Sequence[int]) -> str:
    """Re-serialize a parsed line, left-justifying columns to `widths`.

    `widths` is index-aligned with FIELD_NAMES. REFERRER (9) and AGENT (10)
    are written as-is.
    """
    w = widths
    return (
        f'{_col(rec.host, w[0])} {_col(rec.client_identity, w[1])} {_col(rec.user_id, w[2])} '
        f'[{_col(rec.date_time, w[3])}] '
        f'"{_col(rec.http_method, w[4])} {_col(rec.requested_url, w[5])} {_col(rec.http_protocol_version, w[6])}" '
        f'{_col(rec.http_status_code, w[7])} {_col(rec.response_body_size, w[8])} '
        f'"{rec.referrer_url}" "{rec.agent}" '
        f'{_col(rec.code, w[11])}'
    )
