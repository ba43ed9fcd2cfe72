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
# isort:skip_file

"""The top-level qdraw module.

The data structures describing a recorded sequence of quantum instructions can be
imported from this top-level namespace like `qdraw.Instruction` and `qdraw.Trace`.

Text rendering lives in the `qdraw.drawing` submodule; see `qdraw.drawing.draw_trace`.
"""

# --------------------------------------------------------------------------------------------------
# Tier 1: Trace data structures.
#
# Allowed external dependencies: attrs
# Allowed internal dependencies: none
from ._infra.trace import Instruction, Trace, TraceBuilder, TraceError, WireOutOfRangeError

from ._version import __version__
