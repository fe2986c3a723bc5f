from __future__ import annotations
from typing import List, Sequence, Tuple

from models import FIELD_COUNT


class ColumnWidthTracker:
    """Running per-column maximum of the field lengths seen in one stream.

    Owned by the stream driver and handed to every line it processes.
    Widths never shrink; a longer lengths vector is merged in by appending
    its extra entries, the existing maxima are kept.
    """

    def __init__(self, size: int = FIELD_COUNT):
        self._widths: List[int] = [0] * size

    def update(self, current_lengths: Sequence[int]) -> Tuple[int, ...]:
        for i, length in enumerate(current_lengths):
            if i < len(self._widths):
                if length > self._widths[i]:
                    self._widths[i] = length
            else:
                self._widths.append(length)
        return self.widths

    @property
    def widths(self) -> Tuple[int, ...]:
        return tuple(self._widths)

    def __len__(self) -> int:
        return len(self._widths)

    def __repr__(self) -> str:
        return f"ColumnWidthTracker({self._widths!r})"
