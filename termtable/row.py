from .cell import Cell
from .errors import CellNotFound
from .tablefmt import NEWLINE, ColumnPosition, TableFormat


class Row:
    """An ordered sequence of cells. Rows of the same table do not need to have the same length."""

    def __init__(self, cells: [Cell] = None):
        self.cells = list(cells) if cells is not None else []

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def from_values(cls, values):
        return cls([v if isinstance(v, Cell) else Cell(v) for v in values])

    def __len__(self):
        return len(self.cells)

    def is_empty(self):
        return not self.cells

    def height(self) -> int:
        # Empty rows still take one line
        return max([1] + [cell.height() for cell in self.cells])

    def column_width(self, column: int) -> int:
        cell = self.get_cell(column)
        return cell.width() if cell is not None else 0

    def get_cell(self, idx: int) -> Cell:
        if 0 <= idx < len(self.cells):
            return self.cells[idx]
        return None

    def set_cell(self, cell: Cell, column: int):
        if not 0 <= column < len(self.cells):
            raise CellNotFound(column)
        self.cells[column] = cell

    def add_cell(self, cell: Cell):
        self.cells.append(cell)

    def insert_cell(self, index: int, cell: Cell):
        """Insert `cell` before `index`, or append it if `index` is past the end of the row.

        Negative indexes raise CellNotFound.
        """
        if index < 0:
            raise CellNotFound(index)
        if index < len(self.cells):
            self.cells.insert(index, cell)
        else:
            self.add_cell(cell)

    def remove_cell(self, index: int):
        if 0 <= index < len(self.cells):
            del self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, idx: int) -> Cell:
        return self.cells[idx]

    def __setitem__(self, idx: int, cell: Cell):
        self.cells[idx] = cell

    def __repr__(self):
        return 'Row({})'.format(repr(self.cells))

    def _print(self, out, format: TableFormat, col_width: [int], print_cell):
        lp, rp = format.get_padding()
        skip_r_fill = format.get_column_separator(ColumnPosition.RIGHT) is None
        for i in range(self.height()):
            out.write(' ' * format.get_indent())
            format.print_column_separator(out, ColumnPosition.LEFT)
            for j, width in enumerate(col_width):
                last = j == len(col_width) - 1
                out.write(' ' * lp)
                cell = self.get_cell(j)
                print_cell(cell if cell is not None else Cell.default(), out, i, width, last and skip_r_fill)
                out.write(' ' * rp)
                if not last:
                    format.print_column_separator(out, ColumnPosition.INTERN)
            format.print_column_separator(out, ColumnPosition.RIGHT)
            out.write(NEWLINE)

    def print(self, out, format: TableFormat, col_width: [int]):
        self._print(out, format, col_width, Cell.print)

    def print_term(self, terminal, format: TableFormat, col_width: [int]):
        self._print(terminal, format, col_width, Cell.print_term)
