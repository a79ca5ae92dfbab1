import csv
import io

from .cell import Cell
from .row import Row
from .table import Table


def from_csv(records, has_headers: bool = False) -> Table:
    """Build a table with one row per record. With `has_headers`, the first record becomes the titles."""
    table = Table()
    records = iter(records)
    if has_headers:
        header = next(records, None)
        if header is not None:
            table.set_titles(Row([Cell(value) for value in header]))
    for record in records:
        table.add_row(Row([Cell(value) for value in record]))
    return table


def from_csv_string(csv_s: str, has_headers: bool = False, **fmtparams) -> Table:
    return from_csv(csv.reader(io.StringIO(csv_s), **fmtparams), has_headers)


def from_csv_file(file_name: str, has_headers: bool = False, **fmtparams) -> Table:
    with open(file_name, 'r', newline='') as file:
        return from_csv(csv.reader(file, **fmtparams), has_headers)


def to_csv(table, out, **fmtparams):
    """Write the titles (if any) and then every row of `table` to `out`. Returns the csv writer."""
    fmtparams.setdefault('lineterminator', '\n')
    writer = csv.writer(out, **fmtparams)
    if table.titles is not None:
        writer.writerow(cell.get_content() for cell in table.titles)
    for row in table.row_iter():
        writer.writerow(cell.get_content() for cell in row)
    out.flush()
    return writer
