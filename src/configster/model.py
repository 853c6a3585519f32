# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 14:05:37

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Value:
    """The part after `=`, already split by the attribute delimiter.

        ```text
        directory = /home/foo, removable, test
                    ^primary   ^attributes...
        ```
    """
    primary: str = ''
    attributes: tuple[str, ...] = ()


@dataclass(frozen=True)
class OptionProperties:
    """One option line of a configuration file."""
    option: str
    value: Value = field(default_factory=Value)
    # where it came from; not part of the record's identity.
    line: int = field(default=0, compare=False)

    @classmethod
    def new(
        cls,
        option: str,
        primary: str = '',
        attributes: Iterable[str] = (),
        line: int = 0
    ) -> 'OptionProperties':
        return cls(option, Value(primary, tuple(attributes)), line)

    @property
    def is_flag(self) -> bool:
        """`True` for an option without any value, like `DelayOff`."""
        return not self.value.primary and not self.value.attributes
