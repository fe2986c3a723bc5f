from __future__ import annotations
from typing import Iterable, Iterator, Optional

from parsers import parse_combined_line
from render import DEFAULT_PALETTE, Palette, colorize, render_line
from widths import ColumnWidthTracker


def prettify_line(line: str, tracker: ColumnWidthTracker, palette: Optional[Palette] = DEFAULT_PALETTE) -> str:
    """Format one input line. palette=None renders the aligned line uncolored."""
    rec = parse_combined_line(line)
    if rec is None:
        return line.strip()
    widths = tracker.update(rec.field_lengths)
    out = render_line(rec, widths)
    if palette is None:
        return out
    return colorize(out, rec.http_status_code, palette)


def prettify_stream(
    lines: Iterable[str],
    tracker: Optional[ColumnWidthTracker] = None,
    palette: Optional[Palette] = DEFAULT_PALETTE,
) -> Iterator[str]:
    """Yield one output line per input line, in order."""
    if tracker is None:
        tracker = ColumnWidthTracker()
    for line in lines:
        yield prettify_line(line, tracker, palette)
