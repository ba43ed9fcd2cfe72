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

from qdraw import Instruction, Trace
from qdraw.drawing import assign_layers, get_operators, Layer, place_operators


def _layers(trace: Trace):
    ops = get_operators(trace)
    return ops, assign_layers(ops, trace.num_qudits)


def test_layer():
    layer = Layer(index=0)
    assert layer.members == []
    assert layer.width == 0
    layer.add(3, width=5)
    layer.add(4, width=3)
    assert layer.members == [3, 4]
    assert layer.width == 5


def test_disjoint_wires_share_a_layer():
    trace = Trace(2, [Instruction('h', [0]), Instruction('h', [1])])
    _, layers = _layers(trace)
    assert layers == [Layer(index=0, members=[0, 1], width=5)]


def test_same_wire_gets_new_layer():
    trace = Trace(1, [Instruction('h', [0]), Instruction('rx', [0], params=[0.1])])
    _, layers = _layers(trace)
    assert [layer.members for layer in layers] == [[0], [1]]
    assert [layer.width for layer in layers] == [5, 11]


def test_span_is_reserved():
    # The controlled gate covers wire 1 even though it does not act on it.
    trace = Trace(
        3, [Instruction('x', [2], controls=[0]), Instruction('h', [1]), Instruction('h', [0])]
    )
    _, layers = _layers(trace)
    assert [layer.members for layer in layers] == [[0], [1, 2]]


def test_earliest_free_layer():
    trace = Trace(
        3,
        [
            Instruction('h', [0]),
            Instruction('h', [0]),
            Instruction('h', [0]),
            Instruction('x', [2]),
            Instruction('x', [2], controls=[1]),
        ],
    )
    _, layers = _layers(trace)
    assert [layer.members for layer in layers] == [[0, 3], [1, 4], [2]]


def test_place_operators():
    trace = Trace(
        2,
        [
            Instruction('rx', [0], params=[1.5708]),
            Instruction('h', [1]),
            Instruction('swap', [0, 1]),
        ],
    )
    ops, layers = _layers(trace)
    assert [layer.width for layer in layers] == [13, 3]
    assert place_operators(layers, ops) == 16
    assert [(op.left_col, op.right_col) for op in ops] == [(0, 12), (4, 8), (13, 15)]
