#  Copyright 2023 Google LLC
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      https://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""A grid of glyph cells that operators draw into."""
from typing import Iterable, Optional

import numpy as np
from numpy.typing import NDArray

from qdraw._infra.trace import WireOutOfRangeError

from .glyphs import BLANK, Cell, Glyph, merge_cells, render_cells


class Canvas:
    """A fixed-height grid of cells for `num_wires` wires.

    Wire `w` is drawn on row `2 * w + 1`; the even rows in between (and above the
    first and below the last wire) are free for box edges and control lines.
    Wire rows start out filled with `Glyph.WIRE_LINE`, every other cell is blank.

    Args:
        num_wires: The number of wires (qudits).
        width: The number of columns.
    """

    def __init__(self, num_wires: int, width: int):
        if width < 0:
            raise ValueError(f"Canvas width must be non-negative, found {width}")
        self.num_wires = num_wires
        self.height = 2 * num_wires + 1
        self.width = width
        self._cells: NDArray = np.full((self.height, width), BLANK, dtype=object)
        for w in range(num_wires):
            self._cells[self.row_of(w), :] = Glyph.WIRE_LINE

    def row_of(self, wire: int) -> int:
        """The row on which `wire` is drawn."""
        if not 0 <= wire < self.num_wires:
            raise WireOutOfRangeError(
                f"Wire {wire} is out of range for a canvas with {self.num_wires} wire(s)."
            )
        return 2 * wire + 1

    def _check(self, row: int, col: int):
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.height}x{self.width} canvas.")

    def get(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return self._cells[row, col]

    def set(self, row: int, col: int, cell: Cell) -> None:
        """Overwrite a cell."""
        self._check(row, col)
        self._cells[row, col] = cell

    def merge(self, row: int, col: int, cell: Cell) -> None:
        """Combine `cell` with the current contents using `merge_cells`."""
        self._cells[row, col] = merge_cells(self.get(row, col), cell)

    def fill(self, row: int, start: int, stop: int, cell: Cell) -> None:
        """Overwrite columns `start` (inclusive) to `stop` (exclusive) of `row`."""
        if start >= stop:
            return
        self._check(row, start)
        self._check(row, stop - 1)
        self._cells[row, start:stop] = cell

    def write_text(self, row: int, col: int, text: str) -> None:
        """Overwrite cells with the characters of `text`, starting at `col`."""
        for i, ch in enumerate(text):
            self.set(row, col + i, ch)

    def row(self, row: int) -> NDArray:
        """A read-only view of one row of cells."""
        view = self._cells[row, :]
        view.flags.writeable = False
        return view

    def render_row(self, row: int, start: int = 0, stop: Optional[int] = None) -> str:
        if stop is None:
            stop = self.width
        return render_cells(self.row(row)[start:stop])

    def render_rows(self, start: int = 0, stop: Optional[int] = None) -> Iterable[str]:
        for row in range(self.height):
            yield self.render_row(row, start, stop)

    def __str__(self) -> str:
        return '\n'.join(self.render_rows())
