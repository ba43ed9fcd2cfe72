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

"""Data structures for a recorded sequence of quantum instructions (a "trace")."""
import numbers
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import attrs
from attrs import field, frozen


class TraceError(ValueError):
    """A value error raised when a trace or one of its instructions is malformed."""


class WireOutOfRangeError(TraceError, IndexError):
    """A wire id does not index one of the trace's qudits."""


def _to_wire_tuple(v: Iterable[int]) -> Tuple[int, ...]:
    if isinstance(v, numbers.Integral):
        return (int(v),)
    return tuple(v)


def _to_param_tuple(v: Iterable[float]) -> Tuple[float, ...]:
    if isinstance(v, numbers.Real):
        return (float(v),)
    return tuple(float(p) for p in v)


def _check_wire_ids(attribute: 'attrs.Attribute', wires: Tuple[int, ...]):
    for w in wires:
        if isinstance(w, bool) or not isinstance(w, numbers.Integral):
            raise TraceError(f"{attribute.name} must be integer wire ids, found {w!r}.")
        if w < 0:
            raise WireOutOfRangeError(f"Negative wire id {w} in {attribute.name}.")
    if len(set(wires)) != len(wires):
        raise TraceError(f"{attribute.name} must not repeat a wire id, found {wires}.")


@frozen
class Instruction:
    """A single recorded quantum operation.

    Args:
        name: The gate name, used as the label of the drawn operation.
        targets: The wires the gate acts upon. Must be non-empty.
        controls: The wires conditioning the gate. Must not share any wire with `targets`.
        params: Real-valued gate parameters, e.g. rotation angles.
    """

    name: str
    targets: Tuple[int, ...] = field(converter=_to_wire_tuple)
    controls: Tuple[int, ...] = field(converter=_to_wire_tuple, default=tuple())
    params: Tuple[float, ...] = field(converter=_to_param_tuple, default=tuple())

    @targets.validator
    def _check_targets(self, attribute, value):
        if len(value) == 0:
            raise TraceError(f"Instruction {self.name!r} has no target wires.")
        _check_wire_ids(attribute, value)

    @controls.validator
    def _check_controls(self, attribute, value):
        _check_wire_ids(attribute, value)
        both = set(self.targets) & set(value)
        if both:
            raise TraceError(
                f"Instruction {self.name!r} uses wires {sorted(both)} as both target and control."
            )

    @property
    def wires(self) -> Tuple[int, ...]:
        """Targets followed by controls."""
        return self.targets + self.controls

    @property
    def min_wire(self) -> int:
        return min(self.wires)

    @property
    def max_wire(self) -> int:
        return max(self.wires)

    def __str__(self) -> str:
        args = ', '.join(str(w) for w in self.targets)
        if self.controls:
            ctrls = ', '.join(str(w) for w in self.controls)
            return f'{self.name}[{ctrls}]({args})'
        return f'{self.name}({args})'


@frozen
class Trace:
    """An immutable, ordered sequence of instructions acting on `num_qudits` wires.

    Every wire id used by an instruction must lie in `[0, num_qudits)`; otherwise
    a `WireOutOfRangeError` is raised on construction.

    Iterating over and indexing into this object behaves analogously to a tuple of
    `Instruction`s.
    """

    num_qudits: int = field()
    instructions: Tuple[Instruction, ...] = field(converter=tuple, default=tuple())

    @num_qudits.validator
    def _check_num_qudits(self, attribute, value):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
            raise TraceError(f"num_qudits must be a non-negative integer, found {value!r}.")

    @instructions.validator
    def _check_instructions(self, attribute, value):
        for i, inst in enumerate(value):
            if not isinstance(inst, Instruction):
                raise TraceError(f"Trace entry {i} is not an Instruction: {inst!r}")
            for w in inst.wires:
                if w >= self.num_qudits:
                    raise WireOutOfRangeError(
                        f"Instruction {i} ({inst}) uses wire {w}, "
                        f"but the trace has {self.num_qudits} qudit(s)."
                    )

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __getitem__(self, i: int) -> Instruction:
        return self.instructions[i]


class TraceBuilder:
    """A builder class for recording a `Trace` one instruction at a time.

    The number of qudits does not need to be declared up front: `finalize()`
    sizes the trace to cover the largest wire id that was used.

    Args:
        num_qudits: An optional minimum number of qudits. Wires that are never
            used by an instruction still appear in the drawing.
    """

    def __init__(self, num_qudits: int = 0):
        self._instructions: List[Instruction] = []
        self._num_qudits = num_qudits

    @property
    def num_qudits(self) -> int:
        return self._num_qudits

    def add_instruction(
        self,
        name: str,
        targets: Sequence[int],
        controls: Sequence[int] = (),
        params: Sequence[float] = (),
    ) -> Instruction:
        """Record a new instruction and return it."""
        inst = Instruction(name=name, targets=targets, controls=controls, params=params)
        self._instructions.append(inst)
        self._num_qudits = max(self._num_qudits, inst.max_wire + 1)
        return inst

    def add(self, inst: Instruction) -> Instruction:
        """Record an already-constructed instruction."""
        if not isinstance(inst, Instruction):
            raise TraceError(f"Expected an Instruction, found {inst!r}")
        self._instructions.append(inst)
        self._num_qudits = max(self._num_qudits, inst.max_wire + 1)
        return inst

    def finalize(self, num_qudits: Optional[int] = None) -> Trace:
        """Build the `Trace`.

        Args:
            num_qudits: If provided, the exact number of qudits of the resulting
                trace. A `WireOutOfRangeError` is raised if a recorded instruction
                uses a wire beyond it.
        """
        if num_qudits is None:
            num_qudits = self._num_qudits
        return Trace(num_qudits=num_qudits, instructions=self._instructions)
