"""Position utilities for source documents.

Converts character offsets into the zero-based line/character positions
that editors expect for diagnostic ranges. Characters are counted in
UTF-16 code units, as the Language Server Protocol requires.

Python 3.13+. Zero external dependencies.
"""

from bisect import bisect_right

from importcheck.diagnostics.codes import Position, Range

__all__ = ["LineOffsetCache"]


def _utf16_length(text: str) -> int:
    """Number of UTF-16 code units needed to encode text."""
    return len(text) + sum(1 for char in text if ord(char) > 0xFFFF)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in a single O(n) pass, then answers
    each lookup in O(log n) with binary search. A document with many
    module references converts every reference through one cache.

    Columns count UTF-16 code units, so characters outside the Basic
    Multilingual Plane (emoji, for instance) occupy two columns.

    Example:
        >>> cache = LineOffsetCache("abc\\ndef\\nghi")
        >>> cache.position(0)
        Position(line=0, character=0)
        >>> cache.position(5)   # 'e' in "def"
        Position(line=1, character=1)
        >>> LineOffsetCache("\\U0001f600x").position(1)
        Position(line=0, character=2)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_ascii", "_offsets", "_source")

    def __init__(self, source: str) -> None:
        """Build line offset cache from source.

        Args:
            source: Source text to index
        """
        # Line 0 starts at offset 0; each newline starts the next line
        offsets = [0]
        start = source.find("\n")
        while start != -1:
            offsets.append(start + 1)
            start = source.find("\n", start + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source = source
        self._ascii = source.isascii()

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get 0-based line and UTF-16 column for a character offset.

        Offsets outside the source are clamped to its bounds.

        Args:
            pos: Character position in source

        Returns:
            (line, column) tuple, both 0-indexed
        """
        pos = max(0, min(pos, len(self._source)))
        line = bisect_right(self._offsets, pos) - 1
        line_start = self._offsets[line]
        if self._ascii:
            return line, pos - line_start
        return line, _utf16_length(self._source[line_start:pos])

    def position(self, pos: int) -> Position:
        """Get the editor Position for a character offset."""
        line, column = self.get_line_col(pos)
        return Position(line=line, character=column)

    def range(self, start: int, end: int) -> Range:
        """Get the editor Range for a half-open character span."""
        return Range(start=self.position(start), end=self.position(end))
