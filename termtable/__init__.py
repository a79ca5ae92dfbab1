__version__ = '0.3.0'

from .cell import Cell
from .content import CellContent, CellLines, display_width
from .errors import CellNotFound, PrintError, RowNotFound, TableError
from .row import Row
from .table import Table, TableSlice
from .tablefmt import Align, ColumnPosition, FormatBuilder, LinePosition, LineSeparator, TableFormat
from .term import Attr, Color, Terminal
