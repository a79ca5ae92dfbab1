import abc
import re

from wcwidth import wcswidth, wcwidth


_ANSI_CODES = re.compile(r'\x1b\[[0-9;]*m')


def display_width(text: str) -> int:
    """Number of terminal columns `text` occupies.

    Double-width characters count twice, escape sequences and other non-printable characters
    do not count at all.
    """
    text = _ANSI_CODES.sub('', text)
    width = wcswidth(text)
    if width < 0:
        width = sum(max(wcwidth(c), 0) for c in text)
    return width


def split_lines(text: str) -> [str]:
    lines = text.split('\n')
    if len(lines) > 1 and lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


class CellContent(abc.ABC):
    """Anything that can be displayed inside a cell as a fixed block of lines."""

    @abc.abstractmethod
    def width(self) -> int: ...

    @abc.abstractmethod
    def height(self) -> int: ...

    @abc.abstractmethod
    def lines(self) -> [str]: ...


class CellLines(CellContent):
    def __init__(self, value=''):
        self._lines = split_lines(str(value))

    def width(self):
        return max((display_width(line) for line in self._lines), default=0)

    def height(self):
        return len(self._lines)

    def lines(self):
        return list(self._lines)

    def __eq__(self, other):
        return isinstance(other, CellLines) and self._lines == other._lines

    def __repr__(self):
        return 'CellLines({})'.format(repr('\n'.join(self._lines)))
