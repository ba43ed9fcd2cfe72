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

"""Draw and visualize traces

isort:skip_file
"""

from .glyphs import Glyph, Cell, BLANK, render_cell, merge_cells

from .canvas import Canvas

from .operators import (
    Operator,
    PlainBox,
    ControlledBox,
    Swap,
    format_label,
    select_operator,
    get_operators,
)

from .layering import Layer, assign_layers, place_operators

from .text_diagram import (
    DEFAULT_MAX_COLUMNS,
    EMPTY_TRACE,
    TextDiagramData,
    Paginator,
    get_text_diagram_data,
    draw_trace,
)
