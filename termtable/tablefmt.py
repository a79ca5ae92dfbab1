from enum import IntEnum, unique

from .content import display_width


NEWLINE = '\n'


@unique
class Align(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


def print_align(out, align: Align, text: str, width: int, skip_right_fill: bool = False, fill: str = ' '):
    """Write `text` to `out`, filled up to `width` columns according to `align`.

    When centering, the smaller half of the padding goes to the left.
    """
    padding = max(width - display_width(text), 0)
    if align == Align.RIGHT:
        left_pad = padding
    elif align == Align.CENTER:
        left_pad = padding // 2
    else:
        left_pad = 0
    right_pad = padding - left_pad

    if left_pad > 0:
        out.write(fill * left_pad)
    out.write(text)
    if right_pad > 0 and not skip_right_fill:
        out.write(fill * right_pad)


@unique
class LinePosition(IntEnum):
    TOP = 0
    TITLE = 1
    INTERN = 2
    BOTTOM = 3

    def __str__(self):
        return self.name.lower()

    @classmethod
    def from_str(cls, s: str):
        return cls[s.upper()]


@unique
class ColumnPosition(IntEnum):
    LEFT = 0
    INTERN = 1
    RIGHT = 2


class LineSeparator:
    def __init__(self, line: str = '-', junc: str = '+', ljunc: str = '+', rjunc: str = '+'):
        self.line = line
        self.junc = junc
        self.ljunc = ljunc
        self.rjunc = rjunc

    @classmethod
    def from_str(cls, s: str):
        if len(s) != 4:
            raise ValueError('Line separator "{}" must be exactly 4 characters (line, junction, left, right)'
                             .format(s))
        return cls(*s)

    def __str__(self):
        return self.line + self.junc + self.ljunc + self.rjunc

    def __eq__(self, other):
        return isinstance(other, LineSeparator) and str(self) == str(other)

    def __repr__(self):
        return 'LineSeparator({})'.format(', '.join(map(repr, str(self))))

    def print(self, out, col_width: [int], padding: (int, int), colsep: bool, lborder: bool, rborder: bool):
        if lborder:
            out.write(self.ljunc)
        for i, width in enumerate(col_width):
            out.write(self.line * (width + padding[0] + padding[1]))
            if colsep and i < len(col_width) - 1:
                out.write(self.junc)
        if rborder:
            out.write(self.rjunc)
        out.write(NEWLINE)


class TableFormat:
    """Borders, separators, padding and indentation of a table."""

    def __init__(self):
        self.csep = None
        self.lborder = None
        self.rborder = None
        self.lsep = None
        self.tsep = None
        self.top_sep = None
        self.bottom_sep = None
        self.pad_left = 0
        self.pad_right = 0
        self._indent = 0

    def copy(self):
        other = TableFormat()
        other.__dict__.update(self.__dict__)
        return other

    def __eq__(self, other):
        return isinstance(other, TableFormat) and self.__dict__ == other.__dict__

    def get_padding(self) -> (int, int):
        return self.pad_left, self.pad_right

    def padding(self, left: int, right: int):
        self.pad_left = left
        self.pad_right = right

    def column_separator(self, separator: str):
        self.csep = separator

    def borders(self, border: str):
        self.lborder = border
        self.rborder = border

    def left_border(self, border: str):
        self.lborder = border

    def right_border(self, border: str):
        self.rborder = border

    def separator(self, what: LinePosition, separator: LineSeparator):
        if what == LinePosition.TOP:
            self.top_sep = separator
        elif what == LinePosition.BOTTOM:
            self.bottom_sep = separator
        elif what == LinePosition.TITLE:
            self.tsep = separator
        else:
            self.lsep = separator

    def separators(self, what: [LinePosition], separator: LineSeparator):
        for pos in what:
            self.separator(pos, separator)

    def get_indent(self) -> int:
        return self._indent

    def indent(self, spaces: int):
        self._indent = spaces

    def get_sep_for_line(self, pos: LinePosition):
        if pos == LinePosition.TOP:
            return self.top_sep
        elif pos == LinePosition.BOTTOM:
            return self.bottom_sep
        elif pos == LinePosition.TITLE:
            return self.tsep if self.tsep is not None else self.lsep
        return self.lsep

    def get_column_separator(self, pos: ColumnPosition):
        if pos == ColumnPosition.LEFT:
            return self.lborder
        elif pos == ColumnPosition.RIGHT:
            return self.rborder
        return self.csep

    def print_line_separator(self, out, col_width: [int], pos: LinePosition):
        sep = self.get_sep_for_line(pos)
        if sep is None:
            return
        out.write(' ' * self._indent)
        sep.print(out, col_width, self.get_padding(), self.csep is not None, self.lborder is not None,
                  self.rborder is not None)

    def print_column_separator(self, out, pos: ColumnPosition):
        sep = self.get_column_separator(pos)
        if sep is not None:
            out.write(sep)

    @classmethod
    def from_dict(cls, style: dict):
        """Build a format from a mapping shaped like the `*_STYLE` dictionaries below."""
        if not isinstance(style, dict):
            raise ValueError('Table style must be a table of options, got {}'.format(repr(style)))
        separators = style.get('separators', {})
        if not isinstance(separators, dict):
            raise ValueError('Separators must be a table of line positions, got {}'.format(repr(separators)))
        builder = FormatBuilder()
        try:
            if 'column-separator' in style:
                builder.column_separator(_single_char(style['column-separator']))
            if 'borders' in style:
                builder.borders(_single_char(style['borders']))
            if 'left-border' in style:
                builder.left_border(_single_char(style['left-border']))
            if 'right-border' in style:
                builder.right_border(_single_char(style['right-border']))
            if 'padding' in style:
                left, right = style['padding']
                builder.padding(int(left), int(right))
            if 'indent' in style:
                builder.indent(int(style['indent']))
            for pos, sep in separators.items():
                builder.separator(LinePosition.from_str(pos), LineSeparator.from_str(sep))
        except KeyError as e:
            raise ValueError('Unknown line position {}'.format(e)) from e
        except TypeError as e:
            raise ValueError('Invalid table style: {}'.format(e)) from e
        return builder.build()


def _single_char(s: str):
    if not isinstance(s, str) or len(s) != 1:
        raise ValueError('Expected a single character, got {}'.format(repr(s)))
    return s


class FormatBuilder:
    def __init__(self):
        self._format = TableFormat()

    def padding(self, left: int, right: int):
        self._format.padding(left, right)
        return self

    def column_separator(self, separator: str):
        self._format.column_separator(separator)
        return self

    def borders(self, border: str):
        self._format.borders(border)
        return self

    def left_border(self, border: str):
        self._format.left_border(border)
        return self

    def right_border(self, border: str):
        self._format.right_border(border)
        return self

    def separator(self, what: LinePosition, separator: LineSeparator):
        self._format.separator(what, separator)
        return self

    def separators(self, what: [LinePosition], separator: LineSeparator):
        self._format.separators(what, separator)
        return self

    def indent(self, spaces: int):
        self._format.indent(spaces)
        return self

    def build(self) -> TableFormat:
        return self._format.copy()


DEFAULT_STYLE = {
    'column-separator': '|',
    'borders': '|',
    'separators': {'top': '-+++', 'title': '=+++', 'intern': '-+++', 'bottom': '-+++'},
    'padding': [1, 1],
}


NO_TITLE_STYLE = {
    'column-separator': '|',
    'borders': '|',
    'separators': {'top': '-+++', 'title': '-+++', 'intern': '-+++', 'bottom': '-+++'},
    'padding': [1, 1],
}


NO_LINESEP_WITH_TITLE_STYLE = {
    'column-separator': '|',
    'borders': '|',
    'separators': {'top': '-+++', 'title': '-+++', 'bottom': '-+++'},
    'padding': [1, 1],
}


NO_LINESEP_STYLE = {
    'column-separator': '|',
    'borders': '|',
    'separators': {'top': '-+++', 'bottom': '-+++'},
    'padding': [1, 1],
}


NO_COLSEP_STYLE = {
    'separators': {'top': '-+++', 'title': '=+++', 'intern': '-+++', 'bottom': '-+++'},
    'padding': [1, 1],
}


CLEAN_STYLE = {
    'padding': [1, 1],
}


BORDERS_ONLY_STYLE = {
    'borders': '|',
    'separators': {'top': '-+++', 'title': '-+++', 'bottom': '-+++'},
    'padding': [1, 1],
}


NO_BORDER_STYLE = {
    'column-separator': '|',
    'separators': {'title': '=+++', 'intern': '-+++'},
    'padding': [1, 1],
}


NO_BORDER_LINE_SEPARATOR_STYLE = {
    'column-separator': '|',
    'separators': {'title': '-+++'},
    'padding': [1, 1],
}


BOX_STYLE = {
    'column-separator': '│',
    'borders': '│',
    'separators': {
        'top': '─┬┌┐',
        'intern': '─┼├┤',
        'bottom': '─┴└┘',
    },
    'padding': [1, 1],
}


FORMAT_DEFAULT = TableFormat.from_dict(DEFAULT_STYLE)
FORMAT_NO_TITLE = TableFormat.from_dict(NO_TITLE_STYLE)
FORMAT_NO_LINESEP_WITH_TITLE = TableFormat.from_dict(NO_LINESEP_WITH_TITLE_STYLE)
FORMAT_NO_LINESEP = TableFormat.from_dict(NO_LINESEP_STYLE)
FORMAT_NO_COLSEP = TableFormat.from_dict(NO_COLSEP_STYLE)
FORMAT_CLEAN = TableFormat.from_dict(CLEAN_STYLE)
FORMAT_BORDERS_ONLY = TableFormat.from_dict(BORDERS_ONLY_STYLE)
FORMAT_NO_BORDER = TableFormat.from_dict(NO_BORDER_STYLE)
FORMAT_NO_BORDER_LINE_SEPARATOR = TableFormat.from_dict(NO_BORDER_LINE_SEPARATOR_STYLE)
FORMAT_BOX_CHARS = TableFormat.from_dict(BOX_STYLE)


PRESETS = {
    'default': FORMAT_DEFAULT,
    'no-title': FORMAT_NO_TITLE,
    'no-linesep-with-title': FORMAT_NO_LINESEP_WITH_TITLE,
    'no-linesep': FORMAT_NO_LINESEP,
    'no-colsep': FORMAT_NO_COLSEP,
    'clean': FORMAT_CLEAN,
    'borders-only': FORMAT_BORDERS_ONLY,
    'no-border': FORMAT_NO_BORDER,
    'no-border-line-separator': FORMAT_NO_BORDER_LINE_SEPARATOR,
    'box-chars': FORMAT_BOX_CHARS,
}


def preset(name: str) -> TableFormat:
    return PRESETS[name].copy()
