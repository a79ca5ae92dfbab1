import csv
import sys

from termtable import config, csvio, utils


class ArgumentParser(utils.ArgumentParser):
    def __init__(self):
        super().__init__(description='Print CSV data as a formatted table')
        self.add_argument('file', metavar='file', type=str, nargs='?', default='-',
                          help='CSV file name (defaults to stdin)')
        self.add_argument('-c', '--config', metavar='config', type=str, default=config.DEFAULT_CONFIG_FILE)
        self.add_argument('-f', '--format', metavar='format', type=str, default=None,
                          help='Table format, see --list-formats (default from config)')
        self.add_argument('-t', '--titles', default=False, action='store_true',
                          help='Use the first record as title row')
        self.add_argument('-r', '--rows', metavar='start:stop', type=self._parse_row_range, default=None,
                          help='Only print this range of rows')
        self.add_argument('-i', '--indent', type=self._parse_indent, default=None,
                          help='Indent the table by this many spaces')
        self.add_argument('--force-color', default=False, action='store_true',
                          help='Print styles even if standard output is not a terminal')
        self.add_argument('--list-formats', default=False, action='store_true',
                          help='List available table formats and exit')


def main(argv=None):
    parser = ArgumentParser()
    args = parser.parse_args(argv)
    cfg = config.load(args.config)

    if args.list_formats:
        for name in config.format_names(cfg):
            print(name)
        return 0

    name = args.format if args.format is not None else cfg['table']['format']
    if name not in config.format_names(cfg):
        parser.error('Unknown format "{}". Allowed values are {}'.format(
            name, ' '.join('"{}"'.format(n) for n in config.format_names(cfg))))
    try:
        fmt = config.resolve_format(cfg, name)
    except ValueError as e:
        print('Invalid format "{}" in {}: {}'.format(name, args.config, e), file=sys.stderr)
        return 1
    if args.indent is not None:
        fmt.indent(args.indent)

    try:
        table = utils.with_file(args.file, lambda f: csvio.from_csv(csv.reader(f), args.titles))
    except FileNotFoundError:
        print('No such file: {}'.format(args.file), file=sys.stderr)
        return 1
    except csv.Error as e:
        print('Invalid CSV data in {}: {}'.format(args.file, e), file=sys.stderr)
        return 1
    table.set_format(fmt)

    view = table.as_slice()
    if args.rows is not None:
        try:
            view = table.slice(*args.rows)
        except IndexError as e:
            print(e, file=sys.stderr)
            return 1

    view.print_tty(args.force_color or cfg['table']['force-colorize'])
    return 0


if __name__ == '__main__':
    sys.exit(main())
