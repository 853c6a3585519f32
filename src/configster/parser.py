# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 14:11:52

"""Reader of the plain `option = value` configuration format.

    ```text
    # comment lines and blank lines are skipped.
    option = Blue, light, shiny   ; primary "Blue", attributes [light, shiny]
    max_users = 30
    DelayOff                      ; a flag, i.e. no value at all.
    ```

Everything is text. A line that yields no option name (`= value`) is dropped
rather than failing the whole file; only I/O problems are raised.
"""

import codecs
import logging
from collections.abc import Iterable
from io import StringIO, TextIOBase
from os import PathLike

import chardet

from .abstract import FileHandler
from .model import OptionProperties, Value

__all__ = [
    'ConfigReadError', 'ConfigParser',
    'parse_line', 'split_value',
    'parse_lines', 'parse_string', 'parse_file'
]

COMMENT_MARK = '#'
INVALID_OPTION = 'InvalidOption_on_Line%d'


class ConfigReadError(OSError):
    """The configuration file could not be opened, read or decoded."""
    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(reason)
        self.filename = filename

    def __str__(self) -> str:
        return f'{self.filename}: {self.args[0]}'


def _check_delimiter(delimiter: str) -> str:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(
            f'attribute delimiter must be one character, got {delimiter!r}')
    return delimiter


def _check_encoding(encoding: str) -> str:
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ValueError(f'unknown encoding {encoding!r}') from e
    return encoding


def split_value(text: str, delimiter: str = ',') -> Value:
    """Split the text after `=` into primary value and attributes.

    Empty tokens are kept, so `a,,b,` gives `a` with `['', 'b', '']`.
    """
    _check_delimiter(delimiter)
    text = text.strip()
    if not text:
        return Value()
    primary, *attributes = (i.strip() for i in text.split(delimiter))
    return Value(primary, tuple(attributes))


def parse_line(
    line: str,
    delimiter: str = ',',
    lineno: int = 0,
    *,
    strict: bool = False
) -> OptionProperties | None:
    """Returns the option a single line stands for,
    or `None` for blank, commented out and malformed lines.

    With `strict`, an option name holding whitespace (mostly a missing `=`)
    turns into an `InvalidOption_on_Line<lineno>` placeholder,
    so callers get to see where the file went wrong.
    """
    line = line.strip()
    if not line or line[0] == COMMENT_MARK:
        return None

    option, _, value = line.partition('=')
    option = option.strip()
    if not option:
        logging.debug(f'Line {lineno} has no option name, skipped: {line!r}')
        return None

    if strict and any(c.isspace() for c in option):
        logging.warning(f'Line {lineno}: whitespace in option {option!r}.')
        return OptionProperties(INVALID_OPTION % lineno, line=lineno)

    return OptionProperties(option, split_value(value, delimiter), lineno)


def parse_lines(
    lines: Iterable[str],
    delimiter: str = ',',
    *,
    strict: bool = False
) -> list[OptionProperties]:
    """Parse decoded lines (a list, or an opened text stream) in order.

    Line numbers count from 1. Duplicated options are all kept.
    """
    _check_delimiter(delimiter)
    ret: list[OptionProperties] = []
    for lineno, i in enumerate(lines, 1):
        opt = parse_line(i, delimiter, lineno, strict=strict)
        if opt is not None:
            ret.append(opt)
    return ret


def parse_string(
    text: str,
    delimiter: str = ',',
    *,
    strict: bool = False
) -> list[OptionProperties]:
    # universal newlines, same as reading a file.
    return parse_lines(StringIO(text, newline=None), delimiter, strict=strict)


class ConfigParser(FileHandler[list[OptionProperties]]):
    def __init__(
        self,
        filename: str | PathLike[str],
        delimiter: str = ',',
        encoding: str | None = None,
        *,
        guess_codec: bool = True,
        strict: bool = False
    ) -> None:
        super().__init__(filename)
        self._delimiter = _check_delimiter(delimiter)
        # utf-8-sig also reads plain utf-8, and drops a leading BOM.
        self._codec = _check_encoding(encoding or 'utf-8-sig')
        self._guess = guess_codec
        self._strict = strict

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def readstream(
        self, buf: TextIOBase | Iterable[str]
    ) -> list[OptionProperties]:
        """Parse a decoded text stream.

        No need to call this directly unless the text is not in a file.
        """
        return parse_lines(buf, self._delimiter, strict=self._strict)

    def _decode_file(self) -> StringIO:
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise ConfigReadError(self._fn, e.strerror or str(e)) from e

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            raise ConfigReadError(
                self._fn, f'not valid {self._codec} text, '
                'and its encoding could not be guessed.')
        logging.info(
            f'{self._fn} is not {self._codec}, read as {codec["encoding"]} '
            f'(confidence {codec["confidence"]:.2f}).')
        try:
            # newline=None to keep universal newlines as open() does.
            return StringIO(raw.decode(codec['encoding']), newline=None)
        except (UnicodeDecodeError, LookupError) as e:
            raise ConfigReadError(self._fn, str(e)) from e

    def read(self) -> list[OptionProperties]:
        """Read and parse the whole file the instance points to.

        Raises `ConfigReadError` if the file is missing, unreadable
        or not decodable. Nothing is returned in that case.
        """
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError as e:
            if not self._guess:
                raise ConfigReadError(self._fn, str(e)) from e
        except OSError as e:
            raise ConfigReadError(self._fn, e.strerror or str(e)) from e
        # not the expected codec, let chardet have a guess.
        return self.readstream(self._decode_file())

    def __str__(self) -> str:
        return f'{super().__str__()} ({self._codec}, {self._delimiter!r})'


def parse_file(
    path: str | PathLike[str],
    delimiter: str = ',',
    encoding: str | None = None
) -> list[OptionProperties]:
    """Parses a configuration file, splitting values by `delimiter`.

    ```python
    for i in parse_file('./config_test.conf', ','):
        print(f"Option:'{i.option}' | value '{i.value.primary}'")
        for j in i.value.attributes:
            print(f"attr:'{j}'")
    ```
    """
    return ConfigParser(path, delimiter, encoding).read()
