import os
from os import path

import appdirs
import toml

from . import tablefmt
from .tablefmt import TableFormat


DEFAULT_CONFIG_FILE = path.join(appdirs.user_config_dir('termtable', roaming=True), 'config.toml')


DEFAULT_CONFIG = {
    'table': {
        'format': 'default',
        'force-colorize': False,
        'indent': 0,
    },
    'formats': {},
}


def load(file_name: str):
    cfg = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    try:
        for section, values in toml.load(file_name).items():
            if isinstance(values, dict):
                cfg.setdefault(section, {}).update(values)
            else:
                cfg[section] = values
    except FileNotFoundError:
        directory = path.dirname(file_name)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(file_name, 'w') as f:
            toml.dump(cfg, f)

    return cfg


def format_names(cfg: dict):
    return sorted(set(tablefmt.PRESETS) | set(cfg['formats']))


def resolve_format(cfg: dict, name: str = None) -> TableFormat:
    """Format called `name` (or the configured default): a `[formats.<name>]` entry, otherwise a preset."""
    name = name if name is not None else cfg['table']['format']
    user_formats = cfg['formats']
    if name in user_formats:
        style = user_formats[name]
        fmt = TableFormat.from_dict(style)
        if 'indent' not in style:
            fmt.indent(int(cfg['table']['indent']))
    else:
        fmt = tablefmt.preset(name)
        fmt.indent(int(cfg['table']['indent']))
    return fmt
