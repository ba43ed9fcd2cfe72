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

import numpy as np
import pytest

from qdraw import Instruction, Trace
from qdraw.drawing import draw_trace, get_text_diagram_data, Layer
from qdraw.testing import (
    assert_layers_disjoint,
    assert_pages_fit,
    assert_valid_text_diagram,
    random_trace,
)


def test_assert_layers_disjoint():
    trace = Trace(3, [Instruction('x', [2], controls=[0]), Instruction('h', [1])])
    data = get_text_diagram_data(trace)
    assert_layers_disjoint(data)

    data.layers = [Layer(index=0, members=[0, 1], width=5)]
    with pytest.raises(AssertionError, match='overlapping'):
        assert_layers_disjoint(data)

    data.layers = [Layer(index=0, members=[0], width=5)]
    with pytest.raises(AssertionError, match='no layer'):
        assert_layers_disjoint(data)

    data.layers = [Layer(index=0, members=[0], width=5), Layer(index=1, members=[0, 1], width=5)]
    with pytest.raises(AssertionError):
        assert_layers_disjoint(data)

    data.layers = [Layer(index=0, members=[0], width=7), Layer(index=1, members=[1], width=5)]
    with pytest.raises(AssertionError, match='has width 7'):
        assert_layers_disjoint(data)


def test_assert_pages_fit():
    trace = Trace(1, [Instruction('h', [0])] * 30)
    assert_pages_fit(draw_trace(trace, max_columns=40), num_wires=1, max_columns=40)

    one_page = draw_trace(Trace(1, [Instruction('h', [0])] * 10))
    with pytest.raises(AssertionError, match='columns wide'):
        assert_pages_fit(one_page, num_wires=1, max_columns=40)
    with pytest.raises(AssertionError, match='rows'):
        assert_pages_fit(draw_trace(trace), num_wires=2)


def test_assert_valid_text_diagram():
    trace = Trace(2, [Instruction('rx', [1], controls=[0], params=[0.25])] * 12)
    assert_valid_text_diagram(trace, max_columns=40)


def test_random_trace():
    trace = random_trace(5, 40, rng=np.random.default_rng(52))
    assert trace.num_qudits == 5
    assert len(trace) == 40
    assert trace == random_trace(5, 40, rng=np.random.default_rng(52))
    assert all(len(inst.targets) <= 2 and len(inst.controls) <= 2 for inst in trace)
    assert all(not inst.params for inst in trace if inst.name == 'swap')
