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

"""Render a trace as a text diagram.

Time proceeds from left to right and each qudit is a horizontal wire labeled
`q0`, `q1`, ... Diagrams wider than `max_columns` are split into pages which are
printed one after the other, separated by a banner line.

>>> from qdraw import TraceBuilder
>>> tb = TraceBuilder()
>>> _ = tb.add_instruction('h', targets=[0])
>>> print(draw_trace(tb.finalize()), end='')
     ╭───╮
q0 : ┤ h ├
     ╰───╯
"""
import logging
import numbers
from typing import List, Sequence

from attrs import field, frozen, mutable

from qdraw._infra.trace import Trace

from .canvas import Canvas
from .layering import assign_layers, Layer, place_operators
from .operators import get_operators, Operator

logger = logging.getLogger(__name__)

DEFAULT_MAX_COLUMNS = 80
EMPTY_TRACE = '<empty trace>'
CONTINUATION_MARKER = '»'
PAGE_BANNER_CHAR = '-'


def wire_label(wire: int) -> str:
    return f'q{wire} : '


@mutable
class TextDiagramData:
    """All the data required to print a text diagram.

    This can be passed to `Paginator.render` to get the final text.

    Attributes:
        canvas: The fully drawn canvas.
        layers: The layers, left to right.
        operators: One placed operator per instruction, in trace order.
        row_labels: A label for every canvas row; empty for rows that are not wires.
    """

    canvas: Canvas
    layers: List[Layer]
    operators: List[Operator]
    row_labels: List[str]

    @property
    def prefix_width(self) -> int:
        return max((len(label) for label in self.row_labels), default=0)

    @property
    def layer_widths(self) -> List[int]:
        return [layer.width for layer in self.layers]


def _row_labels(canvas: Canvas) -> List[str]:
    labels = [''] * canvas.height
    for w in range(canvas.num_wires):
        labels[canvas.row_of(w)] = wire_label(w)
    return labels


def get_text_diagram_data(trace: Trace) -> TextDiagramData:
    """Lay out and draw every instruction of `trace` onto a canvas.

    Operators are drawn in trace order; later operators are merged on top of
    earlier ones.
    """
    operators = get_operators(trace)
    layers = assign_layers(operators, trace.num_qudits)
    width = place_operators(layers, operators)
    logger.info(
        "Drawing %d instruction(s) on %d wire(s): %d layer(s), %d column(s)",
        len(operators),
        trace.num_qudits,
        len(layers),
        width,
    )

    canvas = Canvas(trace.num_qudits, width)
    for op in operators:
        op.draw(canvas)
    return TextDiagramData(
        canvas=canvas, layers=layers, operators=operators, row_labels=_row_labels(canvas)
    )


def _check_max_columns(inst, attribute, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise ValueError(f"{attribute.name} must be a positive integer, found {value!r}")


@frozen
class Paginator:
    """Split a text diagram into pages of bounded width.

    Pages are cut between layers, never through one. The wire labels printed at the
    start of the first page count towards that page's width.

    Args:
        max_columns: The display width budget of a page.
    """

    max_columns: int = field(default=DEFAULT_MAX_COLUMNS, validator=_check_max_columns)

    def page_cuts(self, layer_widths: Sequence[int], prefix_width: int = 0) -> List[int]:
        """The absolute canvas column at which each page ends.

        The last entry is always the total width of the canvas.
        """
        cuts = []
        col = 0
        acc_width = prefix_width
        for width in layer_widths:
            if acc_width + width >= self.max_columns - 1:
                logger.debug("Cutting page at column %d", col)
                cuts.append(col)
                acc_width = 0
            col += width
            acc_width += width
        cuts.append(col)
        return cuts

    def pages(self, data: TextDiagramData) -> List[str]:
        """The text of every page, each row terminated by a newline."""
        canvas = data.canvas
        prefix_width = data.prefix_width
        cuts = self.page_cuts(data.layer_widths, prefix_width)

        pages = []
        start = 0
        for i, stop in enumerate(cuts):
            last = i + 1 == len(cuts)
            lines = []
            for row, text in enumerate(canvas.render_rows(start, stop)):
                if i == 0:
                    text = f'{data.row_labels[row]:>{prefix_width}}' + text
                if not last:
                    text += CONTINUATION_MARKER
                lines.append(text + '\n')
            pages.append(''.join(lines))
            start = stop
        return pages

    def render(self, data: TextDiagramData) -> str:
        banner = PAGE_BANNER_CHAR * self.max_columns
        return f'\n{banner}\n\n'.join(self.pages(data))


def draw_trace(trace: Trace, max_columns: int = DEFAULT_MAX_COLUMNS) -> str:
    """Draw `trace` as a text diagram.

    Args:
        trace: The instructions to draw.
        max_columns: The maximum width of a page of the diagram. Wider diagrams are
            split into several pages.

    Returns:
        The diagram, or the string `'<empty trace>'` if `trace` has no instructions.
    """
    paginator = Paginator(max_columns=max_columns)
    if len(trace) == 0:
        return EMPTY_TRACE
    return paginator.render(get_text_diagram_data(trace))
