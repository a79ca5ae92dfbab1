from .content import CellContent, CellLines
from .errors import ColorOutOfRange, NotSupported
from .tablefmt import Align, print_align
from .term import Attr, Color


_COLOR_FROM_SPEC = {
    'd': Color.BLACK,
    'r': Color.RED,
    'g': Color.GREEN,
    'y': Color.YELLOW,
    'b': Color.BLUE,
    'm': Color.MAGENTA,
    'c': Color.CYAN,
    'w': Color.WHITE,
    'D': Color.BRIGHT_BLACK,
    'R': Color.BRIGHT_RED,
    'G': Color.BRIGHT_GREEN,
    'Y': Color.BRIGHT_YELLOW,
    'B': Color.BRIGHT_BLUE,
    'M': Color.BRIGHT_MAGENTA,
    'C': Color.BRIGHT_CYAN,
    'W': Color.BRIGHT_WHITE,
}


class Cell:
    """A table cell: some content, its alignment and the style it is printed with on a terminal.

    The content of a cell cannot be changed once it is created; replace the cell instead.
    """

    def __init__(self, content='', align: Align = Align.LEFT):
        if not isinstance(content, CellContent):
            content = CellLines(content)
        self.content = content
        self.alignment = align
        self.styles = []

    @classmethod
    def default(cls):
        return cls()

    def align(self, align: Align):
        self.alignment = align

    def add_style(self, attr: Attr):
        self.styles.append(attr)

    def with_style(self, attr: Attr):
        self.add_style(attr)
        return self

    def reset_style(self):
        self.styles.clear()
        self.align(Align.LEFT)

    def style_from_spec(self, spec: str):
        """Replace style and alignment by the ones described by `spec`.

        `spec` is read one character at a time:

        * `F` / `B`: foreground / background, the next character is the color
        * `b`, `i`, `u`: bold, italic, underline
        * `l`, `c`, `r`: align left, center, right

        Colors are `d`ark (black), `r`ed, `g`reen, `y`ellow, `b`lue, `m`agenta, `c`yan and `w`hite,
        the upper case letter selects the bright variant. Anything else is ignored, including a color
        letter that is not in that list.
        """
        self.reset_style()
        foreground = False
        background = False
        for c in spec:
            if foreground or background:
                color = _COLOR_FROM_SPEC.get(c)
                if color is not None:
                    self.add_style(Attr.foreground(color) if foreground else Attr.background(color))
                foreground = False
                background = False
            elif c == 'F':
                foreground = True
            elif c == 'B':
                background = True
            elif c == 'b':
                self.add_style(Attr.BOLD)
            elif c == 'i':
                self.add_style(Attr.ITALIC)
            elif c == 'u':
                self.add_style(Attr.UNDERLINE)
            elif c == 'c':
                self.align(Align.CENTER)
            elif c == 'l':
                self.align(Align.LEFT)
            elif c == 'r':
                self.align(Align.RIGHT)
        return self

    def height(self) -> int:
        return self.content.height()

    def width(self) -> int:
        return self.content.width()

    def get_content(self) -> str:
        return '\n'.join(self.content.lines())

    def print(self, out, idx: int, col_width: int, skip_right_fill: bool = False):
        """Print line `idx` of this cell, or a blank line if the cell is not that tall."""
        lines = self.content.lines()
        text = lines[idx] if idx < len(lines) else ''
        print_align(out, self.alignment, text, col_width, skip_right_fill)

    def print_term(self, terminal, idx: int, col_width: int, skip_right_fill: bool = False):
        for attr in self.styles:
            try:
                terminal.attr(attr)
            except (NotSupported, ColorOutOfRange):
                pass
        self.print(terminal, idx, col_width, skip_right_fill)
        try:
            terminal.reset()
        except (NotSupported, ColorOutOfRange):
            pass

    def __str__(self):
        return self.get_content()

    def __repr__(self):
        return 'Cell({}, {})'.format(repr(self.content), self.alignment.name)
