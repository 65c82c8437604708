"""
Offset <-> line/column conversion over a source text.

Lines and characters are zero-based, offsets are indexes into the Python
string (code points), matching what the source model records.
"""
from bisect import bisect_right
from typing import List

from jaxrs_lens.models.domain_models import Position, Range


class TextDocument:

    def __init__(self, text: str):
        self.text = text
        self._line_starts = self._compute_line_starts(text)

    @staticmethod
    def _compute_line_starts(text: str) -> List[int]:
        starts = [0]
        i = 0
        length = len(text)
        while i < length:
            ch = text[i]
            if ch == '\r':
                if i + 1 < length and text[i + 1] == '\n':
                    i += 1
                starts.append(i + 1)
            elif ch == '\n':
                starts.append(i + 1)
            i += 1
        return starts

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self.text)))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line, offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        if position.line < 0:
            return 0
        if position.line >= len(self._line_starts):
            return len(self.text)
        line_start = self._line_starts[position.line]
        if position.line + 1 < len(self._line_starts):
            line_end = self._line_starts[position.line + 1]
        else:
            line_end = len(self.text)
        return min(line_start + max(position.character, 0), line_end)

    def to_range(self, offset: int, length: int) -> Range:
        return Range(self.position_at(offset), self.position_at(offset + length))
