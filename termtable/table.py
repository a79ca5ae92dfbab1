import io
import sys

from . import term
from .cell import Cell
from .content import CellContent, display_width, split_lines
from .errors import PrintError, RowNotFound
from .row import Row
from .tablefmt import FORMAT_DEFAULT, LinePosition, TableFormat


class TableSlice:
    """Read-only view over a contiguous range of rows of a `Table`.

    The view shares rows, titles and format with its table and copies nothing, so it reflects the table
    as it is when printed. Take a new slice after removing rows from the table.
    """

    def __init__(self, table: 'Table', start: int, stop: int):
        self._table = table
        self._start = start
        self._stop = stop

    @property
    def format(self) -> TableFormat:
        return self._table.get_format()

    @property
    def titles(self) -> Row:
        return self._table.titles

    def _indices(self):
        return range(self._start, self._stop)

    def __len__(self):
        return self._stop - self._start

    def is_empty(self):
        return len(self) == 0

    def row_iter(self):
        rows = self._table.rows
        for i in self._indices():
            yield rows[i]

    def __iter__(self):
        return self.row_iter()

    def get_row(self, row: int) -> Row:
        if 0 <= row < len(self):
            return self._table.rows[self._start + row]
        return None

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            if idx.step not in (None, 1):
                raise ValueError('Table slices do not support steps')
            return self.slice(idx.start, idx.stop)
        return self._table.rows[self._indices()[idx]]

    def slice(self, start: int = None, stop: int = None) -> 'TableSlice':
        """Sub-range `start:stop` of this view. Unlike list slicing, out of bounds ranges raise IndexError."""
        start = 0 if start is None else start
        stop = len(self) if stop is None else stop
        if not 0 <= start <= stop <= len(self):
            raise IndexError('Row range {}:{} out of bounds for a table of {} rows'.format(start, stop, len(self)))
        return TableSlice(self._table, self._start + start, self._start + stop)

    def column_count(self) -> int:
        rows = list(self.row_iter())
        if self.titles is not None:
            rows.append(self.titles)
        return max((len(r) for r in rows), default=0)

    def column_width(self, column: int) -> int:
        width = self.titles.column_width(column) if self.titles is not None else 0
        return max([width] + [r.column_width(column) for r in self.row_iter()])

    def all_column_widths(self) -> [int]:
        return [self.column_width(i) for i in range(self.column_count())]

    def column_iter(self, column: int):
        """Cells of `column`, skipping rows too short to have one."""
        for row in self.row_iter():
            cell = row.get_cell(column)
            if cell is not None:
                yield cell

    def _print(self, out, print_row):
        col_width = self.all_column_widths()
        fmt = self.format
        fmt.print_line_separator(out, col_width, LinePosition.TOP)
        if self.titles is not None:
            print_row(self.titles, out, fmt, col_width)
            fmt.print_line_separator(out, col_width, LinePosition.TITLE)
        for i, row in enumerate(self.row_iter()):
            if i > 0:
                fmt.print_line_separator(out, col_width, LinePosition.INTERN)
            print_row(row, out, fmt, col_width)
        fmt.print_line_separator(out, col_width, LinePosition.BOTTOM)
        out.flush()

    def print(self, file=None):
        self._print(file if file is not None else sys.stdout, Row.print)

    def print_term(self, terminal: term.Terminal):
        self._print(terminal, Row.print_term)

    def print_tty(self, force_colorize: bool = False):
        """Print to standard output, with styles if it is a terminal or `force_colorize` is set."""
        try:
            if force_colorize or term.is_tty():
                self.print_term(term.stdout())
            else:
                self.print(sys.stdout)
        except OSError as e:
            raise PrintError('Cannot print table to standard output : {}'.format(e)) from e

    def printstd(self):
        self.print_tty(False)

    def to_csv(self, out, **fmtparams):
        from . import csvio
        return csvio.to_csv(self, out, **fmtparams)

    def __str__(self):
        out = io.StringIO()
        self.print(out)
        return out.getvalue()


class Table(CellContent):
    """An owned table: optional titles, rows and a format."""

    def __init__(self, rows: [Row] = None):
        self.rows = list(rows) if rows is not None else []
        self.titles = None
        self._format = FORMAT_DEFAULT.copy()

    @classmethod
    def from_values(cls, rows):
        return cls([r if isinstance(r, Row) else Row.from_values(r) for r in rows])

    @classmethod
    def from_csv_string(cls, csv_s: str, has_headers: bool = False, **fmtparams):
        from . import csvio
        return csvio.from_csv_string(csv_s, has_headers, **fmtparams)

    @classmethod
    def from_csv_file(cls, file_name: str, has_headers: bool = False, **fmtparams):
        from . import csvio
        return csvio.from_csv_file(file_name, has_headers, **fmtparams)

    def as_slice(self) -> TableSlice:
        return TableSlice(self, 0, len(self.rows))

    def slice(self, start: int = None, stop: int = None) -> TableSlice:
        return self.as_slice().slice(start, stop)

    def set_format(self, format: TableFormat):
        self._format = format.copy()

    def get_format(self) -> TableFormat:
        return self._format

    def set_titles(self, titles: Row):
        self.titles = titles

    def unset_titles(self):
        self.titles = None

    def column_count(self) -> int:
        return self.as_slice().column_count()

    def column_width(self, column: int) -> int:
        return self.as_slice().column_width(column)

    def all_column_widths(self) -> [int]:
        return self.as_slice().all_column_widths()

    def __len__(self):
        return len(self.rows)

    def is_empty(self):
        return not self.rows

    def get_row(self, row: int) -> Row:
        return self.as_slice().get_row(row)

    def add_row(self, row: Row) -> Row:
        self.rows.append(row)
        return row

    def add_empty_row(self) -> Row:
        return self.add_row(Row.empty())

    def insert_row(self, index: int, row: Row) -> Row:
        """Insert `row` before `index`, or append it if `index` is past the last row.

        Negative indexes raise RowNotFound.
        """
        if index < 0:
            raise RowNotFound(index)
        if index < len(self.rows):
            self.rows.insert(index, row)
            return row
        return self.add_row(row)

    def set_element(self, element, column: int, row: int):
        rowline = self.get_row(row)
        if rowline is None:
            raise RowNotFound(row)
        rowline.set_cell(Cell(element), column)

    def remove_row(self, index: int):
        if 0 <= index < len(self.rows):
            del self.rows[index]

    def column_iter(self, column: int):
        return self.as_slice().column_iter(column)

    def row_iter(self):
        return iter(self.rows)

    def __iter__(self):
        return self.row_iter()

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return self.as_slice()[idx]
        return self.rows[idx]

    def __setitem__(self, idx: int, row: Row):
        self.rows[idx] = row

    def print(self, file=None):
        self.as_slice().print(file)

    def print_term(self, terminal: term.Terminal):
        self.as_slice().print_term(terminal)

    def print_tty(self, force_colorize: bool = False):
        self.as_slice().print_tty(force_colorize)

    def printstd(self):
        self.as_slice().printstd()

    def to_csv(self, out, **fmtparams):
        return self.as_slice().to_csv(out, **fmtparams)

    def __str__(self):
        return str(self.as_slice())

    def width(self):
        return max((display_width(line) for line in self.lines()), default=0)

    def height(self):
        return len(self.lines())

    def lines(self):
        return split_lines(str(self))
