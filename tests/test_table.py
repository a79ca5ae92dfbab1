"""Tests for termtable.table."""

import io
import sys

import pytest

from termtable import tablefmt
from termtable.cell import Cell
from termtable.errors import CellNotFound, PrintError, RowNotFound
from termtable.row import Row
from termtable.table import Table, TableSlice
from termtable.tablefmt import (
    FORMAT_CLEAN, FORMAT_DEFAULT, FORMAT_NO_COLSEP, FORMAT_NO_LINESEP, Align, FormatBuilder, LinePosition,
    LineSeparator,
)


@pytest.fixture
def table():
    t = Table()
    t.add_row(Row([Cell('a'), Cell('bc'), Cell('def')]))
    t.add_row(Row([Cell('def'), Cell('bc'), Cell('a')]))
    t.set_titles(Row([Cell('t1'), Cell('t2'), Cell('t3')]))
    return t


@pytest.fixture
def numbered():
    t = Table()
    t.set_titles(Row.from_values(['t1', 't2', 't3']))
    for i in range(6):
        t.add_row(Row.from_values([i, i, i]))
    return t


class TestRender:
    def test_default(self, table):
        assert str(table) == (
            '+-----+----+-----+\n'
            '| t1  | t2 | t3  |\n'
            '+=====+====+=====+\n'
            '| a   | bc | def |\n'
            '+-----+----+-----+\n'
            '| def | bc | a   |\n'
            '+-----+----+-----+\n'
        )
        table.unset_titles()
        assert str(table) == (
            '+-----+----+-----+\n'
            '| a   | bc | def |\n'
            '+-----+----+-----+\n'
            '| def | bc | a   |\n'
            '+-----+----+-----+\n'
        )

    def test_print_writes_same_text(self, table):
        out = io.StringIO()
        table.print(out)
        assert out.getvalue() == str(table)

    def test_replaced_cell_widens_column(self, table):
        assert table[1][1].get_content() == 'bc'
        table[1][1] = Cell('newval')
        assert table[1][1].get_content() == 'newval'
        assert str(table) == (
            '+-----+--------+-----+\n'
            '| t1  | t2     | t3  |\n'
            '+=====+========+=====+\n'
            '| a   | bc     | def |\n'
            '+-----+--------+-----+\n'
            '| def | newval | a   |\n'
            '+-----+--------+-----+\n'
        )

    def test_no_linesep(self, table):
        table.set_format(FORMAT_NO_LINESEP)
        table[1][1] = Cell('newval')
        assert str(table) == (
            '+-----+--------+-----+\n'
            '| t1  | t2     | t3  |\n'
            '| a   | bc     | def |\n'
            '| def | newval | a   |\n'
            '+-----+--------+-----+\n'
        )

    def test_no_colsep(self, table):
        table.set_format(FORMAT_NO_COLSEP)
        table[1][1] = Cell('newval')
        assert str(table) == (
            '------------------\n'
            ' t1   t2      t3 \n'
            '==================\n'
            ' a    bc      def \n'
            '------------------\n'
            ' def  newval  a \n'
            '------------------\n'
        )

    def test_clean(self, table):
        table.set_format(FORMAT_CLEAN)
        table[1][1] = Cell('newval')
        assert str(table) == (
            ' t1   t2      t3 \n'
            ' a    bc      def \n'
            ' def  newval  a \n'
        )

    @pytest.mark.parametrize('name, expected', [
        ('default', (
            '+-----+----+-----+\n'
            '| t1  | t2 | t3  |\n'
            '+=====+====+=====+\n'
            '| a   | bc | def |\n'
            '+-----+----+-----+\n'
            '| def | bc | a   |\n'
            '+-----+----+-----+\n'
        )),
        ('no-title', (
            '+-----+----+-----+\n'
            '| t1  | t2 | t3  |\n'
            '+-----+----+-----+\n'
            '| a   | bc | def |\n'
            '+-----+----+-----+\n'
            '| def | bc | a   |\n'
            '+-----+----+-----+\n'
        )),
        ('no-linesep-with-title', (
            '+-----+----+-----+\n'
            '| t1  | t2 | t3  |\n'
            '+-----+----+-----+\n'
            '| a   | bc | def |\n'
            '| def | bc | a   |\n'
            '+-----+----+-----+\n'
        )),
        ('no-linesep', (
            '+-----+----+-----+\n'
            '| t1  | t2 | t3  |\n'
            '| a   | bc | def |\n'
            '| def | bc | a   |\n'
            '+-----+----+-----+\n'
        )),
        ('no-colsep', (
            '--------------\n'
            ' t1   t2  t3 \n'
            '==============\n'
            ' a    bc  def \n'
            '--------------\n'
            ' def  bc  a \n'
            '--------------\n'
        )),
        ('clean', (
            ' t1   t2  t3 \n'
            ' a    bc  def \n'
            ' def  bc  a \n'
        )),
        ('borders-only', (
            '+--------------+\n'
            '| t1   t2  t3  |\n'
            '+--------------+\n'
            '| a    bc  def |\n'
            '| def  bc  a   |\n'
            '+--------------+\n'
        )),
        ('no-border', (
            ' t1  | t2 | t3 \n'
            '=====+====+=====\n'
            ' a   | bc | def \n'
            '-----+----+-----\n'
            ' def | bc | a \n'
        )),
        ('no-border-line-separator', (
            ' t1  | t2 | t3 \n'
            '-----+----+-----\n'
            ' a   | bc | def \n'
            ' def | bc | a \n'
        )),
        ('box-chars', (
            '┌─────┬────┬─────┐\n'
            '│ t1  │ t2 │ t3  │\n'
            '├─────┼────┼─────┤\n'
            '│ a   │ bc │ def │\n'
            '├─────┼────┼─────┤\n'
            '│ def │ bc │ a   │\n'
            '└─────┴────┴─────┘\n'
        )),
    ])
    def test_presets(self, table, name, expected):
        table.set_format(tablefmt.preset(name))
        assert str(table) == expected

    def test_padding(self, table):
        fmt = FORMAT_DEFAULT.copy()
        fmt.padding(2, 2)
        table.set_format(fmt)
        table[1][1] = Cell('newval')
        assert str(table) == (
            '+-------+----------+-------+\n'
            '|  t1   |  t2      |  t3   |\n'
            '+=======+==========+=======+\n'
            '|  a    |  bc      |  def  |\n'
            '+-------+----------+-------+\n'
            '|  def  |  newval  |  a    |\n'
            '+-------+----------+-------+\n'
        )

    def test_indent(self, table):
        table.get_format().indent(8)
        assert str(table) == (
            '        +-----+----+-----+\n'
            '        | t1  | t2 | t3  |\n'
            '        +=====+====+=====+\n'
            '        | a   | bc | def |\n'
            '        +-----+----+-----+\n'
            '        | def | bc | a   |\n'
            '        +-----+----+-----+\n'
        )

    def test_set_format_copies(self, table):
        table.set_format(FORMAT_DEFAULT)
        table.get_format().indent(2)
        assert FORMAT_DEFAULT.get_indent() == 0

    def test_unicode_separators(self):
        t = Table()
        t.set_format(FormatBuilder()
                     .column_separator('│')
                     .borders('│')
                     .separators([LinePosition.TOP], LineSeparator('─', '┬', '┌', '┐'))
                     .separators([LinePosition.INTERN], LineSeparator('─', '┼', '├', '┤'))
                     .separators([LinePosition.BOTTOM], LineSeparator('─', '┴', '└', '┘'))
                     .padding(1, 1)
                     .build())
        t.add_row(Row.from_values(['1', '1', '1']))
        t.add_row(Row.from_values(['2', '2', '2']))
        t.set_titles(Row.from_values(['t1', 't2', 't3']))
        assert str(t) == (
            '┌────┬────┬────┐\n'
            '│ t1 │ t2 │ t3 │\n'
            '├────┼────┼────┤\n'
            '│ 1  │ 1  │ 1  │\n'
            '├────┼────┼────┤\n'
            '│ 2  │ 2  │ 2  │\n'
            '└────┴────┴────┘\n'
        )

    def test_short_rows_and_multi_line_cells(self):
        t = Table.from_values([['a', 'b\nbb'], ['long']])
        assert str(t) == (
            '+------+----+\n'
            '| a    | b  |\n'
            '|      | bb |\n'
            '+------+----+\n'
            '| long |    |\n'
            '+------+----+\n'
        )

    def test_cjk_and_alignment(self):
        t = Table([Row([Cell('由系统', Align.RIGHT)]), Row([Cell('x', Align.CENTER)]), Row([Cell('abcdefgh')])])
        t.set_format(FORMAT_CLEAN)
        assert str(t) == (
            '   由系统 \n'
            '    x \n'
            ' abcdefgh \n'
        )

    def test_empty_table(self):
        assert str(Table()) == '++\n++\n'
        t = Table()
        t.set_format(FORMAT_CLEAN)
        assert str(t) == ''

    def test_nested_table(self):
        inner = Table.from_values([['x']])
        outer = Table([Row([Cell(inner), Cell('y')])])
        assert inner.width() == 5
        assert inner.height() == 3
        assert str(outer) == (
            '+-------+---+\n'
            '| +---+ | y |\n'
            '| | x | |   |\n'
            '| +---+ |   |\n'
            '+-------+---+\n'
        )


class TestSize:
    def test_table_size(self):
        t = Table()
        assert t.is_empty()
        assert t.as_slice().is_empty()
        assert len(t) == 0
        assert len(t.as_slice()) == 0
        assert t.column_count() == 0
        t.add_empty_row()
        assert not t.is_empty()
        assert len(t) == 1
        assert len(t.as_slice()) == 1
        assert t.column_count() == 0
        t[0].add_cell(Cell.default())
        assert t.column_count() == 1
        assert t.as_slice().column_count() == 1

    def test_column_count_includes_titles(self, table):
        table.set_titles(Row.from_values(['t1', 't2', 't3', 't4']))
        assert table.column_count() == 4
        assert table.all_column_widths() == [3, 2, 3, 2]

    def test_column_width_of_short_rows(self):
        t = Table.from_values([['aaa'], ['b', 'cc']])
        assert t.column_width(0) == 3
        assert t.column_width(1) == 2
        assert t.column_width(7) == 0


class TestRows:
    def test_get_row(self, table):
        assert table.get_row(12) is None
        assert table.get_row(1)[0].get_content() == 'def'
        table.get_row(1).add_cell(Cell('z'))
        assert table.get_row(1)[3].get_content() == 'z'

    def test_add_empty_row(self):
        t = Table()
        row = t.add_empty_row()
        assert len(t) == 1
        assert t[0] is row
        assert len(t[0]) == 0

    def test_remove_row(self, table):
        table.remove_row(12)
        assert len(table) == 2
        table.remove_row(0)
        assert len(table) == 1
        assert table[0][0].get_content() == 'def'

    def test_insert_row(self, table):
        table.insert_row(12, Row.from_values(['1', '2', '3']))
        assert len(table) == 3
        assert table[2][1].get_content() == '2'
        table.insert_row(1, Row.from_values(['3', '4', '5']))
        assert len(table) == 4
        assert table[1][1].get_content() == '4'
        assert table[2][1].get_content() == 'bc'

    def test_insert_row_negative_index(self, table):
        with pytest.raises(RowNotFound):
            table.insert_row(-5, Row.from_values(['1', '2', '3']))
        assert len(table) == 2
        assert table[0][0].get_content() == 'a'

    def test_set_element(self, table):
        with pytest.raises(RowNotFound):
            table.set_element('foo', 12, 12)
        with pytest.raises(CellNotFound):
            table.set_element('foo', 12, 1)
        table.set_element('foo', 1, 1)
        assert table[1][1].get_content() == 'foo'

    def test_replace_row(self, table):
        table[0] = Row.from_values(['x'])
        assert [r[0].get_content() for r in table] == ['x', 'def']

    def test_column_iter(self):
        t = Table.from_values([['a', 'b'], ['c'], ['d', 'e']])
        assert [c.get_content() for c in t.column_iter(1)] == ['b', 'e']
        for c in t.column_iter(0):
            c.align(Align.RIGHT)
        assert all(r[0].alignment == Align.RIGHT for r in t)


class TestSlices:
    EXPECTED = (
        '+----+----+----+\n'
        '| t1 | t2 | t3 |\n'
        '+====+====+====+\n'
        '| 1  | 1  | 1  |\n'
        '+----+----+----+\n'
        '| 2  | 2  | 2  |\n'
        '+----+----+----+\n'
        '| 3  | 3  | 3  |\n'
        '+----+----+----+\n'
    )

    def test_slices_compose(self, numbered):
        s = numbered.slice().slice(1).slice(None, 3)
        assert isinstance(s, TableSlice)
        assert str(s) == self.EXPECTED
        assert str(numbered.slice(1, 4)) == self.EXPECTED
        assert str(numbered[1:4]) == self.EXPECTED
        assert str(numbered[:][1:][:3]) == self.EXPECTED

    def test_slice_shares_rows(self, numbered):
        s = numbered[2:4]
        assert s[0] is numbered[2]
        assert s[-1] is numbered[3]
        assert s.get_row(1) is numbered[3]
        assert s.get_row(2) is None
        assert list(s) == numbered.rows[2:4]

    def test_slice_sees_cell_changes(self, numbered):
        s = numbered[1:2]
        numbered[1][0] = Cell('wide')
        assert s.all_column_widths() == [4, 2, 2]

    @pytest.mark.parametrize('start, stop', [(0, 7), (5, 3), (-1, 2), (7, None)])
    def test_out_of_bounds(self, numbered, start, stop):
        with pytest.raises(IndexError):
            numbered.slice(start, stop)

    def test_out_of_bounds_relative_to_slice(self, numbered):
        s = numbered[1:4]
        assert len(s[1:3]) == 2
        with pytest.raises(IndexError):
            s[1:4]
        with pytest.raises(IndexError):
            s[3]

    def test_step_is_rejected(self, numbered):
        with pytest.raises(ValueError):
            numbered[::2]

    def test_empty_slice(self, numbered):
        s = numbered[3:3]
        assert s.is_empty()
        assert str(s) == (
            '+----+----+----+\n'
            '| t1 | t2 | t3 |\n'
            '+====+====+====+\n'
            '+----+----+----+\n'
        )

    def test_column_iter(self, numbered):
        assert [c.get_content() for c in numbered[4:].column_iter(2)] == ['4', '5']


class BrokenStream:
    def write(self, s):
        raise OSError('broken pipe')

    def flush(self):
        pass

    def isatty(self):
        return False


class TestStdout:
    def test_printstd_without_tty_is_plain(self, table, capsys):
        table[0][0].style_from_spec('Fr')
        table.printstd()
        assert capsys.readouterr().out == str(table)

    def test_force_colorize(self, table, capsys):
        table[0][0].style_from_spec('Fr')
        table.print_tty(True)
        out = capsys.readouterr().out
        assert '\x1b[31ma  \x1b[0m' in out
        assert out.replace('\x1b[31m', '').replace('\x1b[0m', '') == str(table)

    def test_sink_failure_is_fatal(self, table, monkeypatch):
        monkeypatch.setattr(sys, 'stdout', BrokenStream())
        with pytest.raises(PrintError):
            table.printstd()

    def test_sink_failure_propagates(self, table):
        with pytest.raises(OSError):
            table.print(BrokenStream())
