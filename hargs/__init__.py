from __future__ import annotations

from hargs.types import ArgType
from hargs.types import Boolean
from hargs.types import String
from hargs.types import Int
from hargs.types import Double
from hargs.types import Choice
from hargs.types import EnumChoice
from hargs.types import BOOLEAN, STRING, INT, DOUBLE
from hargs.errors import ArgumentsError
from hargs.errors import ParsingError
from hargs.errors import ChoicesAreNotDistinct
from hargs.parser import ArgumentParser
from hargs.parser import ArgumentDescription
from hargs.parser import ParserConfig

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
    "ArgumentsError",
    "ParsingError",
    "ChoicesAreNotDistinct",
    "ArgumentParser",
    "ArgumentDescription",
    "ParserConfig",
)
