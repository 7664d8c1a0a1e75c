"""
rain-table: Render records as fixed-width box-drawing tables.

Tables look like database client output and stay aligned with East-Asian
wide characters, which count as two terminal cells:

- Lists of records render as rows under shared column headers
- A single record renders vertically, one row per field
- Columns are discovered automatically or selected explicitly, with
  labels, truncation sizes, alignment and padding per column

Example:
    from rain_table import generate

    rows = [
        {"id": 1, "name": "alice"},
        {"id": 2, "name": "bob"},
    ]
    print(generate(rows, sort_by="id", reverse=True), end="")
    +----+-------+
    | id | name  |
    +----+-------+
    |  2 | bob   |
    |  1 | alice |
    +----+-------+
"""

from .adapters import RecordSource, Renderable, echo, render, render_all, to_record
from .exceptions import ConfigurationError, RainTableError, SortKeyError, ValidationError
from .generator import Generator, generate
from .models import Align, ColumnSpec, TableOptions, resolve_padding
from .naming import titleize
from .table import TableRenderer, column_widths
from .width import display_width, truncate_to_width

__version__ = "0.1.0"

__all__ = [
    # Rendering
    "generate",
    "Generator",
    "TableRenderer",
    "column_widths",
    # Models
    "Align",
    "ColumnSpec",
    "TableOptions",
    "resolve_padding",
    # Adapters
    "Renderable",
    "RecordSource",
    "to_record",
    "render",
    "render_all",
    "echo",
    # Text helpers
    "display_width",
    "truncate_to_width",
    "titleize",
    # Exceptions
    "RainTableError",
    "ConfigurationError",
    "ValidationError",
    "SortKeyError",
]
