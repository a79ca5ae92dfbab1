"""Compact construction of cells, rows and tables.

Each builder can be called directly, or subscripted with a style spec first::

    t = table(
        ['Name', 'Value'],
        row['Fgb']('ok', 42),
        [cell['Frc']('failed'), 7],
    )
"""

from .cell import Cell
from .row import Row
from .table import Table


class _Stylable:
    def __init__(self, factory):
        self._factory = factory

    def __getitem__(self, spec: str):
        def make_styled(*args):
            return self._factory(*args, spec=spec)
        return make_styled

    def __call__(self, *args):
        return self._factory(*args)


def _as_cell(value, spec: str = None) -> Cell:
    c = value if isinstance(value, Cell) else Cell(value)
    if spec is not None:
        c.style_from_spec(spec)
    return c


def _make_cell(value='', spec: str = None) -> Cell:
    return _as_cell(value, spec)


def _make_row(*values, spec: str = None) -> Row:
    return Row([v if isinstance(v, Cell) else _as_cell(v, spec) for v in values])


def _make_table(*rows, spec: str = None) -> Table:
    return Table([r if isinstance(r, Row) else _make_row(*r, spec=spec) for r in rows])


cell = _Stylable(_make_cell)
row = _Stylable(_make_row)
table = _Stylable(_make_table)


def ptable(*rows) -> Table:
    """Build a table like `table`, print it to standard output and return it."""
    t = _make_table(*rows)
    t.printstd()
    return t
