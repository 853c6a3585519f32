# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 14:00:06

import logging

from .model import Value, OptionProperties
from .parser import (
    ConfigReadError,
    ConfigParser,
    parse_line,
    split_value,
    parse_lines,
    parse_string,
    parse_file
)

__version__ = '0.1.0'

__all__ = [
    'Value', 'OptionProperties',
    'ConfigReadError', 'ConfigParser',
    'parse_line', 'split_value',
    'parse_lines', 'parse_string', 'parse_file',
    'get_ver'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')


def get_ver() -> str:
    """Returns the library version."""
    return __version__
