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

"""Packing operators into columns ("layers") of a text diagram.

Operators are assigned greedily, in order, to the earliest layer in which the whole
span of wires they cover (from their lowest to their highest wire, including wires
in between that they do not act on) is free. Reserving the whole span keeps vertical
control lines of one operator from crossing the box of another in the same column.
"""
from typing import List, Sequence

from attrs import field, mutable

from .operators import Operator


@mutable
class Layer:
    """A column of operators whose wire spans are pairwise disjoint.

    Attributes:
        index: The position of this layer, from left to right.
        members: Indices (into the operator list) of the operators in this layer.
        width: The width of the widest member.
    """

    index: int
    members: List[int] = field(factory=list)
    width: int = 0

    def add(self, ref: int, width: int) -> None:
        self.members.append(ref)
        self.width = max(self.width, width)


def assign_layers(operators: Sequence[Operator], num_wires: int) -> List[Layer]:
    """Assign each operator to a layer.

    Args:
        operators: The operators, in the order their instructions appear in the trace.
        num_wires: The number of wires in the diagram.

    Returns:
        The layers, ordered from left to right. Every operator is a member of exactly
        one layer, and members of a layer are listed in trace order.
    """
    layers: List[Layer] = []
    last_layer = [-1] * num_wires
    for ref, op in enumerate(operators):
        span = range(op.min_wire, op.max_wire + 1)
        i = 1 + max(last_layer[w] for w in span)
        if i == len(layers):
            layers.append(Layer(index=i))
        layers[i].add(ref, op.width)
        for w in span:
            last_layer[w] = i
    return layers


def place_operators(layers: Sequence[Layer], operators: Sequence[Operator]) -> int:
    """Set the columns of every operator, centering each one within its layer.

    Returns:
        The total width of all layers.
    """
    offset = 0
    for layer in layers:
        for ref in layer.members:
            op = operators[ref]
            op.set_cols(offset + (layer.width - op.width) // 2)
        offset += layer.width
    return offset
