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

"""Drawable shapes for the instructions of a trace.

Every instruction is drawn as exactly one of three operators:

 - `PlainBox`: a single box enclosing all target and control wires. Used when a
   control wire lies between two target wires.
 - `ControlledBox`: a box around the target wires with control dots connected to it
   by vertical lines.
 - `Swap`: two `╳` symbols joined by a vertical line.
"""
import abc
from typing import List, Optional, Sequence, Tuple

from attrs import field, mutable

from qdraw._infra.trace import Instruction, Trace

from .canvas import Canvas
from .glyphs import BLANK, Glyph

TARGET_MARKER = '>'


def format_label(name: str, params: Sequence[float] = ()) -> str:
    """The text drawn inside an operator's box.

    Parameters are printed with 4 significant digits and the result is padded with
    one blank column on each side.

    >>> format_label('rx', [1.5708])
    ' rx(1.571) '
    """
    if params:
        name = f'{name}({",".join(f"{p:.4g}" for p in params)})'
    return f' {name} '


@mutable
class Operator(metaclass=abc.ABCMeta):
    """Base class for the drawable representation of one instruction.

    Attributes:
        wires: The target wires (sorted) followed by the control wires.
        num_targets: How many of `wires` are targets.
        num_controls: How many of `wires` are controls.
    """

    wires: Tuple[int, ...] = field(converter=tuple)
    num_targets: int
    num_controls: int
    _left_col: Optional[int] = field(default=None, init=False)

    @property
    def targets(self) -> Tuple[int, ...]:
        return self.wires[: self.num_targets]

    @property
    def controls(self) -> Tuple[int, ...]:
        return self.wires[self.num_targets : self.num_targets + self.num_controls]

    @property
    def min_wire(self) -> int:
        return min(self.wires)

    @property
    def max_wire(self) -> int:
        return max(self.wires)

    @property
    @abc.abstractmethod
    def width(self) -> int:
        """The number of canvas columns this operator occupies."""

    def set_cols(self, left_col: int) -> None:
        """Place this operator so that its leftmost column is `left_col`.

        An operator can only be placed once.
        """
        if self.is_placed:
            raise ValueError(f"{self} has already been placed at column {self._left_col}.")
        self._left_col = left_col

    @property
    def is_placed(self) -> bool:
        return self._left_col is not None

    @property
    def left_col(self) -> int:
        if not self.is_placed:
            raise ValueError(f"{self} has not been placed on the canvas.")
        return self._left_col

    @property
    def right_col(self) -> int:
        return self.left_col + self.width - 1

    @property
    def mid_col(self) -> int:
        return (self.left_col + self.right_col) // 2

    @abc.abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Draw this operator onto `canvas` in its assigned columns."""

    def _draw_control_line(self, canvas: Canvas, col: int, row: int, top: int, bot: int) -> None:
        """Draw a control dot on `row` and connect it to whichever of `top`, `bot` is nearer."""
        canvas.set(row, col, Glyph.CONTROL)
        if row < top:
            for i in range(row + 1, top):
                canvas.merge(i, col, Glyph.CONTROL_LINE)
        else:
            for i in range(bot + 1, row):
                canvas.merge(i, col, Glyph.CONTROL_LINE)


@mutable
class _Box(Operator):
    label: str

    def _box_rows(self, canvas: Canvas, wires: Sequence[int]) -> Tuple[int, int, int]:
        top = canvas.row_of(min(wires)) - 1
        bot = canvas.row_of(max(wires)) + 1
        return top, (top + bot) // 2, bot

    def _draw_frame(self, canvas: Canvas, top: int, bot: int) -> None:
        left, right = self.left_col, self.right_col
        for col in range(left + 1, right):
            canvas.merge(top, col, Glyph.WIRE_LINE)
            canvas.merge(bot, col, Glyph.WIRE_LINE)
        for row in range(top + 1, bot):
            canvas.set(row, left, Glyph.CONTROL_LINE)
            canvas.set(row, right, Glyph.CONTROL_LINE)
            canvas.fill(row, left + 1, right, BLANK)
        canvas.merge(top, left, Glyph.BOX_TOP_LEFT_CORNER)
        canvas.merge(bot, left, Glyph.BOX_BOTTOM_LEFT_CORNER)
        canvas.merge(top, right, Glyph.BOX_TOP_RIGHT_CORNER)
        canvas.merge(bot, right, Glyph.BOX_BOTTOM_RIGHT_CORNER)

    def _draw_targets(self, canvas: Canvas) -> None:
        for wire in self.targets:
            row = canvas.row_of(wire)
            canvas.set(row, self.left_col, Glyph.BOX_LEFT_WIRE)
            canvas.set(row, self.right_col, Glyph.BOX_RIGHT_WIRE)
            if self.num_controls > 0:
                canvas.set(row, self.left_col + 1, TARGET_MARKER)


@mutable
class PlainBox(_Box):
    """One box around every wire the instruction touches.

    Inside the box, target wires are marked with `>` and control wires with a dot.
    """

    @property
    def width(self) -> int:
        return len(self.label) + 2 + (1 if self.num_controls > 0 else 0)

    def draw(self, canvas: Canvas) -> None:
        top, mid, bot = self._box_rows(canvas, self.wires)
        self._draw_frame(canvas, top, bot)
        self._draw_targets(canvas)
        for wire in self.controls:
            row = canvas.row_of(wire)
            canvas.set(row, self.left_col, Glyph.BOX_LEFT_WIRE)
            canvas.set(row, self.left_col + 1, Glyph.CONTROL)
            canvas.set(row, self.right_col, Glyph.BOX_RIGHT_WIRE)
        offset = 1 if self.num_controls > 0 else 0
        canvas.write_text(mid, self.left_col + 1 + offset, self.label)


@mutable
class ControlledBox(_Box):
    """A box around the target wires, with controls drawn outside of it."""

    @property
    def width(self) -> int:
        return len(self.label) + 2

    def draw(self, canvas: Canvas) -> None:
        top, mid, bot = self._box_rows(canvas, self.targets)
        self._draw_frame(canvas, top, bot)
        self._draw_targets(canvas)
        col = self.mid_col
        for wire in self.controls:
            row = canvas.row_of(wire)
            self._draw_control_line(canvas, col, row, top, bot)
            if row < top:
                canvas.set(top, col, Glyph.BOX_TOP_CONTROL)
            else:
                canvas.set(bot, col, Glyph.BOX_BOTTOM_CONTROL)
        canvas.write_text(mid, self.left_col + 1, self.label)


@mutable
class Swap(Operator):
    """A swap of two target wires, possibly controlled."""

    @property
    def width(self) -> int:
        return 3

    def draw(self, canvas: Canvas) -> None:
        col = self.left_col + 1
        row0 = canvas.row_of(self.wires[0])
        row1 = canvas.row_of(self.wires[1])
        canvas.set(row0, col, Glyph.SWAP_X)
        for row in range(row0 + 1, row1):
            canvas.merge(row, col, Glyph.CONTROL_LINE)
        canvas.set(row1, col, Glyph.SWAP_X)
        for wire in self.controls:
            self._draw_control_line(canvas, col, canvas.row_of(wire), row0, row1)


def _is_swap(inst: Instruction) -> bool:
    return inst.name == 'swap' and not inst.params and len(inst.targets) == 2


def select_operator(inst: Instruction) -> Operator:
    """Choose how to draw `inst` based on the layout of its target and control wires."""
    targets = sorted(inst.targets)
    wires = tuple(targets) + inst.controls
    n_t, n_c = len(inst.targets), len(inst.controls)

    overlap = any(targets[0] < c < targets[-1] for c in inst.controls)
    if overlap:
        return PlainBox(wires, n_t, n_c, label=format_label(inst.name, inst.params))
    if _is_swap(inst):
        return Swap(wires, n_t, n_c)
    return ControlledBox(wires, n_t, n_c, label=format_label(inst.name, inst.params))


def get_operators(trace: Trace) -> List[Operator]:
    """One freshly-constructed, unplaced operator per instruction, in trace order."""
    return [select_operator(inst) for inst in trace]
