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

import attrs
import numpy as np
import pytest

import qdraw.exception
from qdraw import Instruction, Trace, TraceBuilder, TraceError, WireOutOfRangeError


def test_instruction():
    inst = Instruction('rx', targets=[1], controls=[0], params=[1.5708])
    assert inst.name == 'rx'
    assert inst.targets == (1,)
    assert inst.controls == (0,)
    assert inst.params == (1.5708,)
    assert inst.wires == (1, 0)
    assert inst.min_wire == 0
    assert inst.max_wire == 1
    assert str(inst) == 'rx[0](1)'

    with pytest.raises(attrs.exceptions.FrozenInstanceError):
        inst.name = 'ry'  # type: ignore[misc]


def test_instruction_converters():
    inst = Instruction('h', targets=3)
    assert inst.targets == (3,)
    assert inst.controls == ()
    assert inst.params == ()
    assert str(inst) == 'h(3)'

    inst = Instruction('u3', targets=np.array([2, 0]), params=(1, 2, 3))
    assert inst.targets == (2, 0)
    assert inst.params == (1.0, 2.0, 3.0)
    assert all(isinstance(p, float) for p in inst.params)


def test_instruction_validation():
    with pytest.raises(TraceError, match='no target'):
        _ = Instruction('x', targets=[])
    with pytest.raises(TraceError, match='both target and control'):
        _ = Instruction('cx', targets=[0, 1], controls=[1])
    with pytest.raises(TraceError, match='integer wire ids'):
        _ = Instruction('x', targets=[1.5])
    with pytest.raises(TraceError, match='integer wire ids'):
        _ = Instruction('x', targets=[True])
    with pytest.raises(WireOutOfRangeError, match='Negative'):
        _ = Instruction('x', targets=[0], controls=[-1])
    with pytest.raises(TraceError, match='repeat a wire id'):
        _ = Instruction('swap', targets=[1, 1])
    with pytest.raises(TraceError, match='repeat a wire id'):
        _ = Instruction('ccx', targets=[2], controls=[0, 0])


def test_trace():
    insts = [Instruction('h', [0]), Instruction('x', [1], controls=[0])]
    trace = Trace(num_qudits=2, instructions=insts)
    assert len(trace) == 2
    assert trace[1] == insts[1]
    assert list(trace) == insts
    assert trace == Trace(2, tuple(insts))

    assert len(Trace(num_qudits=0)) == 0
    assert Trace(num_qudits=np.int64(2), instructions=insts).num_qudits == 2


def test_trace_wire_out_of_range():
    with pytest.raises(WireOutOfRangeError, match='uses wire 2'):
        _ = Trace(num_qudits=2, instructions=[Instruction('x', [0], controls=[2])])

    # Usable as both a value error and an index error.
    with pytest.raises(ValueError):
        _ = Trace(num_qudits=1, instructions=[Instruction('x', [1])])
    with pytest.raises(IndexError):
        _ = Trace(num_qudits=1, instructions=[Instruction('x', [1])])


def test_trace_validation():
    with pytest.raises(TraceError, match='non-negative'):
        _ = Trace(num_qudits=-1)
    with pytest.raises(TraceError, match='non-negative'):
        _ = Trace(num_qudits=True)
    with pytest.raises(TraceError, match='not an Instruction'):
        _ = Trace(num_qudits=1, instructions=[('h', [0])])


def test_trace_builder():
    tb = TraceBuilder()
    assert tb.num_qudits == 0
    h = tb.add_instruction('h', targets=[0])
    assert h == Instruction('h', (0,))
    tb.add_instruction('x', targets=[3], controls=[0])
    tb.add(Instruction('swap', targets=[1, 2]))
    assert tb.num_qudits == 4

    trace = tb.finalize()
    assert trace.num_qudits == 4
    assert [inst.name for inst in trace] == ['h', 'x', 'swap']

    assert tb.finalize(num_qudits=6).num_qudits == 6
    with pytest.raises(WireOutOfRangeError):
        _ = tb.finalize(num_qudits=3)


def test_trace_builder_min_qudits():
    tb = TraceBuilder(num_qudits=5)
    tb.add_instruction('h', targets=[0])
    assert tb.finalize().num_qudits == 5

    with pytest.raises(TraceError):
        tb.add('h')  # type: ignore[arg-type]


def test_exception_module():
    assert qdraw.exception.TraceError is TraceError
    assert qdraw.exception.WireOutOfRangeError is WireOutOfRangeError
    assert issubclass(WireOutOfRangeError, TraceError)
