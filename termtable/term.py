"""Minimal ANSI terminal backend used to print styled tables.

A `Terminal` wraps a text stream and knows how to turn `Attr` values into escape sequences. Attributes
it cannot render raise `NotSupported` or `ColorOutOfRange`, which callers are free to ignore.
"""

import os
import sys
from collections import namedtuple
from enum import Enum, IntEnum, unique

from .errors import ColorOutOfRange, NotSupported


@unique
class Color(IntEnum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15

    def __str__(self):
        return self.name.lower()

    @classmethod
    def from_str(cls, s: str):
        return cls[s.replace('-', '_').upper()]


@unique
class AttrKind(Enum):
    FOREGROUND = 'foreground'
    BACKGROUND = 'background'
    BOLD = 'bold'
    ITALIC = 'italic'
    UNDERLINE = 'underline'


class Attr(namedtuple('Attr', ['kind', 'color'])):
    __slots__ = ()

    @classmethod
    def foreground(cls, color: Color):
        return cls(AttrKind.FOREGROUND, color)

    @classmethod
    def background(cls, color: Color):
        return cls(AttrKind.BACKGROUND, color)

    def __str__(self):
        if self.color is None:
            return self.kind.value
        return '{}:{}'.format(self.kind.value, self.color)


Attr.BOLD = Attr(AttrKind.BOLD, None)
Attr.ITALIC = Attr(AttrKind.ITALIC, None)
Attr.UNDERLINE = Attr(AttrKind.UNDERLINE, None)


_CODE_FROM_KIND = {
    AttrKind.BOLD: '1',
    AttrKind.ITALIC: '3',
    AttrKind.UNDERLINE: '4',
}


def _color_code(kind: AttrKind, color: Color) -> str:
    base = 30 if kind == AttrKind.FOREGROUND else 40
    if color >= 8:
        return str(base + 60 + color - 8)
    return str(base + color)


class Terminal:
    """A text stream able to render style attributes."""

    RESET = '\033[0m'

    def __init__(self, out, num_colors: int = 16, attrs=frozenset(AttrKind)):
        self.out = out
        self.num_colors = num_colors
        self.attrs = frozenset(attrs)

    def attr(self, attr: Attr):
        if attr.kind not in self.attrs:
            raise NotSupported('Attribute {} is not supported by this terminal'.format(attr.kind.value))
        if attr.kind in (AttrKind.FOREGROUND, AttrKind.BACKGROUND):
            if attr.color >= self.num_colors:
                raise ColorOutOfRange('Color {} is out of range for a {}-color terminal'
                                      .format(attr.color, self.num_colors))
            code = _color_code(attr.kind, attr.color)
        else:
            code = _CODE_FROM_KIND[attr.kind]
        self.out.write('\033[' + code + 'm')

    def reset(self):
        self.out.write(self.RESET)

    def write(self, s: str):
        return self.out.write(s)

    def flush(self):
        self.out.flush()


def is_tty(stream=None) -> bool:
    stream = stream if stream is not None else sys.stdout
    return stream.isatty() and os.environ.get('TERM') not in (None, 'dumb')


def stdout() -> Terminal:
    if sys.platform == 'win32':
        import colorama
        colorama.just_fix_windows_console()
    return Terminal(sys.stdout)
