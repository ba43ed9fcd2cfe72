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

"""Functions for checking the consistency of text diagrams."""
import itertools
from typing import Optional

import numpy as np

from qdraw import Instruction, Trace
from qdraw.drawing.text_diagram import (
    CONTINUATION_MARKER,
    DEFAULT_MAX_COLUMNS,
    draw_trace,
    get_text_diagram_data,
    PAGE_BANNER_CHAR,
    Paginator,
    TextDiagramData,
    wire_label,
)


def assert_layers_disjoint(data: TextDiagramData):
    """Check that operators sharing a layer cover disjoint ranges of wires.

    Each operator must also be a member of exactly one layer.
    """
    seen = set()
    for layer in data.layers:
        for a, b in itertools.combinations(layer.members, 2):
            op_a, op_b = data.operators[a], data.operators[b]
            if op_a.min_wire <= op_b.max_wire and op_b.min_wire <= op_a.max_wire:
                raise AssertionError(
                    f"Layer {layer.index} holds overlapping operators {op_a} and {op_b}."
                )
        for ref in layer.members:
            if ref in seen:
                raise AssertionError(f"Operator {ref} is a member of more than one layer.")
            seen.add(ref)
        widths = [data.operators[ref].width for ref in layer.members]
        if layer.width != max(widths, default=0):
            raise AssertionError(f"Layer {layer.index} has width {layer.width}, want {widths}.")

    if seen != set(range(len(data.operators))):
        raise AssertionError(f"Operators {set(range(len(data.operators))) - seen} have no layer.")


def assert_pages_fit(text: str, num_wires: int, max_columns: int = DEFAULT_MAX_COLUMNS):
    """Check that every page of a rendered diagram fits within `max_columns`.

    This only holds when no single layer is wider than the budget.
    """
    height = 2 * num_wires + 1
    banner = '\n' + PAGE_BANNER_CHAR * max_columns + '\n\n'
    prefix_width = max(len(wire_label(w)) for w in range(num_wires))
    pages = text.split(banner)
    for i, page in enumerate(pages):
        rows = page.split('\n')
        if rows[-1] != '':
            raise AssertionError(f"Page {i} does not end with a newline.")
        rows = rows[:-1]
        if len(rows) != height:
            raise AssertionError(f"Page {i} has {len(rows)} rows; want {height}.")
        for row in rows:
            content = row[prefix_width:] if i == 0 else row
            if i + 1 < len(pages):
                if not content.endswith(CONTINUATION_MARKER):
                    raise AssertionError(f"Row {row!r} of page {i} lacks a continuation marker.")
                content = content[: -len(CONTINUATION_MARKER)]
            if len(content) > max_columns:
                raise AssertionError(
                    f"Row {row!r} of page {i} is {len(content)} columns wide; max is {max_columns}."
                )


def assert_valid_text_diagram(trace: Trace, max_columns: int = DEFAULT_MAX_COLUMNS):
    """Check the layout invariants of the text diagram of `trace`."""
    data = get_text_diagram_data(trace)
    if data.canvas.height != 2 * trace.num_qudits + 1:
        raise AssertionError(f"Canvas height {data.canvas.height} for {trace.num_qudits} qudits.")
    if data.canvas.width != sum(data.layer_widths):
        raise AssertionError("Canvas width is not the sum of the layer widths.")
    assert_layers_disjoint(data)

    text = draw_trace(trace, max_columns=max_columns)
    if text != draw_trace(trace, max_columns=max_columns):
        raise AssertionError("Drawing the same trace twice gave different results.")
    if max(data.layer_widths) + data.prefix_width < max_columns - 1:
        assert_pages_fit(text, trace.num_qudits, max_columns)
    cuts = Paginator(max_columns).page_cuts(data.layer_widths, data.prefix_width)
    if text.count(CONTINUATION_MARKER) != (len(cuts) - 1) * data.canvas.height:
        raise AssertionError("Number of continued rows does not match the number of pages.")


def random_trace(
    num_qudits: int,
    num_instructions: int,
    rng: Optional[np.random.Generator] = None,
    max_controls: int = 2,
) -> Trace:
    """A trace of random one- and two-target instructions, possibly controlled."""
    if rng is None:
        rng = np.random.default_rng()
    names = ['h', 'x', 'rx', 'swap', 'u3', 'toffoli']
    instructions = []
    for _ in range(num_instructions):
        n_targets = int(rng.integers(1, min(2, num_qudits) + 1))
        n_controls = int(rng.integers(0, min(max_controls, num_qudits - n_targets) + 1))
        wires = [
            int(w) for w in rng.choice(num_qudits, size=n_targets + n_controls, replace=False)
        ]
        name = str(rng.choice(names))
        params = [float(p) for p in rng.uniform(-np.pi, np.pi, size=int(rng.integers(0, 3)))]
        if name == 'swap':
            params = []
        instructions.append(
            Instruction(
                name=name, targets=wires[:n_targets], controls=wires[n_targets:], params=params
            )
        )
    return Trace(num_qudits=num_qudits, instructions=instructions)
