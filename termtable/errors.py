class TableError(Exception):
    pass


class RowNotFound(TableError, LookupError):
    def __init__(self, row: int):
        super().__init__('Cannot find row {}'.format(row))
        self.row = row


class CellNotFound(TableError, LookupError):
    def __init__(self, column: int):
        super().__init__('Cannot find cell {}'.format(column))
        self.column = column


class PrintError(TableError):
    pass


class TerminalError(TableError):
    pass


class NotSupported(TerminalError):
    pass


class ColorOutOfRange(TerminalError):
    pass
