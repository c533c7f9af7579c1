from __future__ import annotations
from typing import Any
from typing import Sequence

from dataclasses import dataclass

__all__ = (
    "ArgumentsError",
    "ParsingError",
    "UnknownArgument",
    "MissingArgumentValue",
    "ArgumentAlreadyDefined",
    "ChoicesAreNotDistinct",
)


class ArgumentsError(Exception): ...


@dataclass
class ParsingError(ArgumentsError):
    option: str
    expected: str
    value: str

    def __post_init__(self):
        super().__init__(
            f"Option {self.option} is expected to be {self.expected}. {self.value} is provided."
        )


@dataclass
class UnknownArgument(ArgumentsError):
    argument: str
    known: Sequence[str]

    def __post_init__(self):
        super().__init__(
            f"Unrecognized argument: {self.argument!r}. Known={list(self.known)!r}"
        )


@dataclass
class MissingArgumentValue(ArgumentsError):
    option: str

    def __post_init__(self):
        super().__init__(f"Option {self.option} requires a value.")


@dataclass
class ArgumentAlreadyDefined(Exception):
    dest: str
    switch: str | None = None

    def __post_init__(self):
        if self.switch is None:
            super().__init__(f"Already have option with same 'dest': {self.dest!r}")
        else:
            super().__init__(
                f"Switch {self.switch!r} of {self.dest!r} is already taken"
            )


@dataclass
class ChoicesAreNotDistinct(Exception):
    duplicated: Sequence[str]
    choices: Sequence[tuple[str, Any]]

    def __post_init__(self):
        super().__init__(
            f"Command line representations of enum choices are not distinct: {list(self.duplicated)!r}"
        )
