import argparse
from sys import stdin


class ArgumentParser(argparse.ArgumentParser):
    def _parse_row_range(self, rows: str):
        try:
            start, stop = rows.split(':')
            return (int(start) if start else None), (int(stop) if stop else None)
        except ValueError:
            self.error('Invalid row range "{}". Try something like "1:4", "2:" or ":3"'.format(rows))

    def _parse_indent(self, indent: str):
        try:
            value = int(indent)
        except ValueError:
            value = -1
        if value < 0:
            self.error('Invalid indent "{}", expected a non-negative number of spaces'.format(indent))
        return value


def with_file(file_name: str, func):
    if file_name == '-':
        return func(stdin)
    else:
        with open(file_name, newline='') as file:
            return func(file)
