#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import Iterator, List, Tuple

CURSOR_HOME = "\033[H"


class FrameBuffer:
    """
    Fixed-size character grid, row-major.

    Allocated once, cleared at the start of every frame and written in place
    by the rasterizer. Cells only ever hold `blank` or `mark`.
    """
    __slots__ = ['w', 'h', 'mark', 'blank', 'cells']

    def __init__(self, w: int, h: int, mark: str = '.', blank: str = ' '):
        if w <= 0 or h <= 0:
            raise ValueError(f"frame buffer needs positive dimensions, got {w}x{h}")
        if len(mark) != 1 or len(blank) != 1:
            raise ValueError("mark and blank must be single characters")
        self.w, self.h = w, h
        self.mark = mark
        self.blank = blank
        self.cells = [blank] * (w * h)

    def clear(self):
        self.cells[:] = [self.blank] * (self.w * self.h)

    def plot(self, x: int, y: int) -> bool:
        """Mark cell (x, y). Out-of-range writes are dropped and return False."""
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return False
        self.cells[y * self.w + x] = self.mark
        return True

    def get(self, x: int, y: int) -> str:
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            raise IndexError(f"cell ({x}, {y}) outside {self.w}x{self.h} buffer")
        return self.cells[y * self.w + x]

    def is_marked(self, x: int, y: int) -> bool:
        return self.get(x, y) == self.mark

    def marked_cells(self) -> List[Tuple[int, int]]:
        """All marked (x, y) cells in row-major order."""
        w = self.w
        return [(i % w, i // w) for i, c in enumerate(self.cells) if c == self.mark]

    def rows(self) -> Iterator[str]:
        w = self.w
        for y in range(self.h):
            yield ''.join(self.cells[y * w:(y + 1) * w])

    def to_text(self, home: bool = False) -> str:
        """Serialize as newline-terminated rows, optionally prefixed with cursor-home."""
        body = ''.join(row + '\n' for row in self.rows())
        return CURSOR_HOME + body if home else body

    def __eq__(self, other):
        if isinstance(other, FrameBuffer):
            return (self.w, self.h, self.cells) == (other.w, other.h, other.cells)
        return NotImplemented

    __hash__ = None
