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

"""The box-drawing glyph alphabet and the rules for combining two glyphs in one cell.

A cell of a text diagram holds either a `Glyph` or a raw one-character string
(label text, the blank `' '`, or the `'>'` target marker). When two drawing
operations touch the same cell, `merge_cells` decides what is left behind.
"""
import enum
from typing import Dict, Tuple, Union

BLANK = ' '


class Glyph(enum.IntEnum):
    """The 13 box-drawing symbols used in a text diagram.

    The integer value is the glyph's rank, which orders the operands of
    `merge_cells`. Raw characters rank after every glyph.
    """

    WIRE_LINE = 0
    CONTROL_LINE = 1
    WIRE_CONTROL_CROSS = 2
    CONTROL = 3
    BOX_LEFT_WIRE = 4
    BOX_RIGHT_WIRE = 5
    BOX_TOP_CONTROL = 6
    BOX_BOTTOM_CONTROL = 7
    BOX_TOP_LEFT_CORNER = 8
    BOX_TOP_RIGHT_CORNER = 9
    BOX_BOTTOM_LEFT_CORNER = 10
    BOX_BOTTOM_RIGHT_CORNER = 11
    SWAP_X = 12

    def __str__(self) -> str:
        return _GLYPH_CHARS[self]


Cell = Union[Glyph, str]

_GLYPH_CHARS: Dict[Glyph, str] = {
    Glyph.WIRE_LINE: '─',
    Glyph.CONTROL_LINE: '│',
    Glyph.WIRE_CONTROL_CROSS: '┼',
    Glyph.CONTROL: '●',
    Glyph.BOX_LEFT_WIRE: '┤',
    Glyph.BOX_RIGHT_WIRE: '├',
    Glyph.BOX_TOP_CONTROL: '┴',
    Glyph.BOX_BOTTOM_CONTROL: '┬',
    Glyph.BOX_TOP_LEFT_CORNER: '╭',
    Glyph.BOX_TOP_RIGHT_CORNER: '╮',
    Glyph.BOX_BOTTOM_LEFT_CORNER: '╰',
    Glyph.BOX_BOTTOM_RIGHT_CORNER: '╯',
    Glyph.SWAP_X: '╳',
}

_TOP_CORNERS = (Glyph.BOX_TOP_LEFT_CORNER, Glyph.BOX_TOP_RIGHT_CORNER)
_BOTTOM_CORNERS = (Glyph.BOX_BOTTOM_LEFT_CORNER, Glyph.BOX_BOTTOM_RIGHT_CORNER)


def render_cell(cell: Cell) -> str:
    """The display character of a cell."""
    if isinstance(cell, Glyph):
        return _GLYPH_CHARS[cell]
    return cell


def render_cells(cells) -> str:
    return ''.join(render_cell(c) for c in cells)


def cell_rank(cell: Cell) -> int:
    if isinstance(cell, Glyph):
        return int(cell)
    return ord(cell)


def _is_blank(cell: Cell) -> bool:
    return not isinstance(cell, Glyph) and cell == BLANK


def _ordered(a: Cell, b: Cell) -> Tuple[Cell, Cell]:
    if cell_rank(a) > cell_rank(b):
        return b, a
    return a, b


def merge_cells(existing: Cell, incoming: Cell) -> Cell:
    """Combine the contents of a cell with a newly drawn value.

    The rules, in order of precedence:

     1. Equal values are left unchanged.
     2. A blank operand yields the other operand.
     3. An incoming vertical control line leaves a control dot or a cross untouched,
        turns a horizontal wire into a cross and replaces anything else.
     4. A horizontal wire meeting a top box corner becomes `┬`; meeting a bottom
        box corner it becomes `┴`.
     5. A top and a bottom corner on the same side (a box of zero height) collapse
        into a side wall: `├` on the left, `┤` on the right.
     6. Otherwise, the value with the larger rank wins. This is an approximation
        that does not always produce the geometrically correct junction; it is
        kept so that diagrams render as they always have.
    """
    if existing == incoming and type(existing) is type(incoming):
        return existing
    if _is_blank(existing):
        return incoming
    if _is_blank(incoming):
        return existing

    if incoming is Glyph.CONTROL_LINE:
        if existing in (Glyph.CONTROL, Glyph.WIRE_CONTROL_CROSS):
            return existing
        if existing is Glyph.WIRE_LINE:
            return Glyph.WIRE_CONTROL_CROSS
        return Glyph.CONTROL_LINE

    base, other = _ordered(existing, incoming)
    if base is Glyph.WIRE_LINE:
        if other in _TOP_CORNERS:
            return Glyph.BOX_BOTTOM_CONTROL
        if other in _BOTTOM_CORNERS:
            return Glyph.BOX_TOP_CONTROL

    if base is Glyph.BOX_TOP_LEFT_CORNER and other is Glyph.BOX_BOTTOM_LEFT_CORNER:
        return Glyph.BOX_RIGHT_WIRE
    if base is Glyph.BOX_TOP_RIGHT_CORNER and other is Glyph.BOX_BOTTOM_RIGHT_CORNER:
        return Glyph.BOX_LEFT_WIRE

    return other
