from __future__ import annotations
from typing import Any
from typing import Generic
from typing import TypeVar

from dataclasses import dataclass, field
from logging import getLogger

from hargs import errors
from hargs.types import ArgType
from hargs.types import STRING

__all__ = ("ArgumentDescription", "ArgumentParser", "ParserConfig")

SWITCHES_END = "--"
FLAG_PRESENT = "true"

Ty = TypeVar("Ty")

logger = getLogger("hargs")


@dataclass
class ParserConfig:
    switch_prefix: str = field(default="-")
    ignore_unknown: bool = field(default=False)
    positionals_dest: str = field(default="positionals")


@dataclass
class ArgumentDescription(Generic[Ty]):
    dest: str
    switches: list[str]
    type: ArgType[Ty] = field(default=STRING)
    default: Ty | None = field(default=None)
    help: str = field(default="")


class ArgumentParser:
    arguments: list[ArgumentDescription[Any]]
    config: ParserConfig

    parse_arguments: list[str]
    parse_index: int
    parse_current: str

    def __init__(self, config: ParserConfig | None = None):
        self.arguments = []
        self.config = config if config is not None else ParserConfig()

        self.parse_arguments = []
        self.parse_index = -1
        self.parse_current = ""

    def parse_advance(self) -> str | None:
        if self.parse_index < len(self.parse_arguments):
            self.parse_index += 1

        if self.should_stop():
            return None

        self.parse_current = self.parse_arguments[self.parse_index]
        return self.parse_current

    def should_stop(self) -> bool:
        return self.parse_index >= len(self.parse_arguments)

    def is_switch(self, token: str) -> bool:
        return token.startswith(self.config.switch_prefix) and len(token) > len(
            self.config.switch_prefix
        )

    def known_switches(self) -> list[str]:
        return [switch for argument in self.arguments for switch in argument.switches]

    def find_argument(self, switch: str) -> ArgumentDescription[Any] | None:
        for argument in self.arguments:
            if switch in argument.switches:
                return argument
        return None

    def add_argument(
        self,
        *switches: str,
        dest: str,
        type: ArgType[Ty] = STRING,
        default: Ty | None = None,
        help: str = "",
    ) -> ArgumentDescription[Ty]:
        new_argument: ArgumentDescription[Ty] = ArgumentDescription(
            dest=dest,
            switches=list(switches),
            type=type,
            default=default,
            help=help,
        )

        if dest == self.config.positionals_dest:
            raise errors.ArgumentAlreadyDefined(dest)

        known_switches = self.known_switches()

        for argument in self.arguments:
            if dest == argument.dest:
                raise errors.ArgumentAlreadyDefined(dest)

        for switch in new_argument.switches:
            if switch in known_switches:
                raise errors.ArgumentAlreadyDefined(dest, switch)

        self.arguments.append(new_argument)
        return new_argument

    def parse_args(self, arguments: list[str]) -> dict[str, Any]:
        self.parse_arguments = list(arguments)
        self.parse_index = -1
        self.parse_current = ""

        result: dict[str, Any] = {
            argument.dest: argument.default for argument in self.arguments
        }
        positionals: list[str] = []
        switches_ended = False

        while self.parse_advance() is not None:
            token = self.parse_current

            if switches_ended or not self.is_switch(token):
                positionals.append(token)
                continue

            if token == SWITCHES_END:
                switches_ended = True
                continue

            switch, separator, inline_value = token.partition("=")
            argument = self.find_argument(switch)

            if argument is None:
                if self.config.ignore_unknown:
                    logger.warning(f"Ignoring unrecognized argument: {token!r}")
                    continue
                raise errors.UnknownArgument(switch, self.known_switches())

            if separator:
                value = inline_value
            elif argument.type.has_parameter:
                next_token = self.parse_advance()
                if next_token is None:
                    raise errors.MissingArgumentValue(switch)
                value = next_token
            else:
                value = FLAG_PRESENT

            result[argument.dest] = argument.type.convert(value, switch)
            logger.debug(f"{switch}: {value!r} -> {result[argument.dest]!r}")

        result[self.config.positionals_dest] = positionals
        return result

    def format_help(self) -> str:
        lines = ["Options:"]

        for argument in self.arguments:
            parts = [", ".join(argument.switches)]

            if argument.help:
                parts.append(f"-> {argument.help}")
            if argument.default is not None:
                parts.append(f"[{argument.default}]")
            if argument.type.description:
                parts.append(argument.type.description)

            lines.append("    " + " ".join(parts))

        return "\n".join(lines)
