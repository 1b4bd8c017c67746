"""
Two-directional growable tape.

Addresses >= 0 live in `right`, addresses < 0 in `left` (stored
reversed, so address -1 is left[0]). Each side grows by one blank cell
whenever the head steps just past its end.
"""

from typing import List

from turing_algebra.core.types import BLANK_SYMBOL, Symbol


class Tape:
    """Tape contents of a single execution session."""

    def __init__(self, text: str = "", blank: Symbol = BLANK_SYMBOL):
        self.blank = blank
        self.left: List[Symbol] = []
        self.right: List[Symbol] = list(text) if text else [blank]

    def _locate(self, index: int):
        if index >= 0:
            return self.right, index
        return self.left, -index - 1

    def read(self, index: int) -> Symbol:
        cells, offset = self._locate(index)
        return cells[offset]

    def write(self, index: int, symbol: Symbol) -> None:
        cells, offset = self._locate(index)
        cells[offset] = symbol

    def extend_to(self, index: int) -> None:
        """Grow the side holding `index` by one blank if `index` is just past its end."""
        cells, offset = self._locate(index)
        if offset == len(cells):
            cells.append(self.blank)

    @property
    def lowest_index(self) -> int:
        return -len(self.left)

    def render(self) -> str:
        return "".join(reversed(self.left)) + "".join(self.right)

    def __len__(self) -> int:
        return len(self.left) + len(self.right)

    def __str__(self) -> str:
        return self.render()
