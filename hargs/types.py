"""
Argument types used to convert raw command-line tokens into typed values.

New types can be added by subclassing `ArgType`.
"""

from __future__ import annotations
from typing import Generic
from typing import Iterable
from typing import Mapping
from typing import Sequence
from typing import TypeVar

from abc import ABC, abstractmethod
from collections import Counter
import enum
import re

from hargs import errors

__all__ = (
    "ArgType",
    "Boolean",
    "String",
    "Int",
    "Double",
    "Choice",
    "EnumChoice",
    "BOOLEAN",
    "STRING",
    "INT",
    "DOUBLE",
)

Ty = TypeVar("Ty")
EnumTy = TypeVar("EnumTy", bound=enum.Enum)

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def format_values(values: Iterable[str]) -> str:
    return "[" + ", ".join(values) + "]"


class ArgType(ABC, Generic[Ty]):
    """
    Type of an argument value.

    `has_parameter` tells whether an option of this type consumes the
    following token or is just set by its presence.
    """

    has_parameter: bool = True

    @property
    @abstractmethod
    def description(self) -> str:
        """Text shown next to the option in help message."""

    @abstractmethod
    def convert(self, value: str, name: str) -> Ty:
        """
        Converts `value` given for option `name`.

        Raises `errors.ParsingError` when `value` can't be converted.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Boolean(ArgType[bool]):
    """Flag that can only be set or unset."""

    has_parameter = False

    @property
    def description(self) -> str:
        return ""

    def convert(self, value: str, name: str) -> bool:
        # NOTE: Only the exact "false" literal unsets the flag
        return value != "false"


class String(ArgType[str]):
    @property
    def description(self) -> str:
        return "{ String }"

    def convert(self, value: str, name: str) -> str:
        return value


class Int(ArgType[int]):
    @property
    def description(self) -> str:
        return "{ Int }"

    def convert(self, value: str, name: str) -> int:
        if _INT_PATTERN.fullmatch(value) is None:
            raise errors.ParsingError(name, "integer number", value)

        result = int(value, 10)
        if not INT_MIN <= result <= INT_MAX:
            raise errors.ParsingError(name, "integer number", value)
        return result


class Double(ArgType[float]):
    @property
    def description(self) -> str:
        return "{ Double }"

    def convert(self, value: str, name: str) -> float:
        # float() is more permissive than a command line should be
        if value != value.strip() or "_" in value:
            raise errors.ParsingError(name, "double number", value)

        try:
            return float(value)
        except ValueError:
            raise errors.ParsingError(name, "double number", value) from None


class Choice(ArgType[str]):
    """Argument limited to a fixed list of strings."""

    _values: tuple[str, ...]

    def __init__(self, values: Sequence[str]):
        self._values = tuple(values)
        self._lookup = frozenset(self._values)

    @property
    def values(self) -> tuple[str, ...]:
        return self._values

    @property
    def description(self) -> str:
        return f"{{ Value should be one of {format_values(self._values)} }}"

    def convert(self, value: str, name: str) -> str:
        if value not in self._lookup:
            raise errors.ParsingError(
                name, f"one of {format_values(self._values)}", value
            )
        return value

    def __repr__(self) -> str:
        return f"Choice(values={list(self._values)!r})"


class EnumChoice(ArgType[Ty]):
    """
    Argument limited to a fixed set of named constants.

    Constructed from ordered `(name, value)` pairs. Names are the command
    line representation of the constants and must be distinct.

    >>> direction = EnumChoice([("NORTH", 0), ("SOUTH", 180)])
    >>> direction.convert("SOUTH", "--direction")
    180
    """

    _choices: Mapping[str, Ty]

    def __init__(self, choices: Iterable[tuple[str, Ty]]):
        pairs = [(str(name), value) for name, value in choices]

        name_counter = Counter(name for name, _ in pairs)
        duplicated = [name for name, count in name_counter.items() if count > 1]

        if len(duplicated) > 0:
            raise errors.ChoicesAreNotDistinct(duplicated, pairs)

        self._choices = dict(pairs)

    @classmethod
    def from_enum(cls, enum_type: type[EnumTy]) -> EnumChoice[EnumTy]:
        return cls((member.name, member) for member in enum_type)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._choices.keys())

    @property
    def description(self) -> str:
        return f"{{ Value should be one of {format_values(self._choices)} }}"

    def convert(self, value: str, name: str) -> Ty:
        if value not in self._choices:
            raise errors.ParsingError(
                name, f"one of {format_values(self._choices)}", value
            )
        return self._choices[value]

    def __repr__(self) -> str:
        return f"EnumChoice(names={list(self._choices)!r})"


BOOLEAN = Boolean()
STRING = String()
INT = Int()
DOUBLE = Double()
