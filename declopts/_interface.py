#!/usr/bin/env python3
"""
Shared constants, enums and protocols of declopts.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from importlib.metadata import version
# ##-- end stdlib imports

# ##-- types
# isort: off
import abc
import collections.abc
from typing import TYPE_CHECKING, cast, assert_type, assert_never
from typing import Generic, NewType
# Protocols:
from typing import Protocol, runtime_checkable
# Typing Decorators:
from typing import no_type_check, final, overload

if TYPE_CHECKING:
    from jgdv import Maybe
    from typing import Final
    from typing import ClassVar, Any, LiteralString
    from typing import Never, Self, Literal
    from collections.abc import Iterable, Iterator, Callable, Generator
    from collections.abc import Sequence, Mapping, MutableMapping, Hashable

    from declopts._structs.scan_spec import ScanSpec

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
__version__ : Final[str] = version("declopts")

PRINTER_NAME    : Final[str]              = "declopts._printer"
FATAL_NAME      : Final[str]              = "declopts._fatal"

HELP_NAME       : Final[str]              = "help"
HELP_SHORT      : Final[str]              = "h"
HELP_DESC       : Final[str]              = "show this help message and exit"
HELP_FLAGS      : Final[tuple[str, ...]]  = ("--help", "-h")

USAGE_PREFIX    : Final[str]              = "Usage:"
OPTIONS_HEADER  : Final[str]              = "Options:"
MULTI_SUFFIX    : Final[str]              = "..."

LONG_PREFIX     : Final[str]              = "--"
SHORT_PREFIX    : Final[str]              = "-"
ASSIGN_SEP      : Final[str]              = "="
END_OF_OPTS     : Final[str]              = "--"

TRUE_STR        : Final[str]              = "true"
FALSE_STR       : Final[str]              = "false"

DESC_COLUMN     : Final[int]              = 24
LINE_WIDTH      : Final[int]              = 78
ROW_INDENT      : Final[str]              = "    "

##--|

class OptAction(enum.Enum):
    """ The boolean shapes a value-less option can resolve to """
    SET_TRUE  = enum.auto()
    SET_FALSE = enum.auto()

    @property
    def literal(self) -> str:
        match self:
            case OptAction.SET_TRUE:
                return TRUE_STR
            case OptAction.SET_FALSE:
                return FALSE_STR
            case x:
                assert_never(x)

class HasArg(enum.Enum):
    NO  = enum.auto()
    YES = enum.auto()

class Occur(enum.Enum):
    OPTIONAL = enum.auto()
    REQUIRED = enum.auto()
    MULTI    = enum.auto()

class OutcomeStatus(enum.Enum):
    SUCCESS                 = enum.auto()
    HELP                    = enum.auto()
    SYNTAX_ERROR            = enum.auto()
    CONFLICTING_DECLARATION = enum.auto()
    MISSING_VALUE           = enum.auto()
    REQUIRED_MISSING        = enum.auto()

class ExitCodes(enum.IntEnum):
    SUCCESS           = 0
    HELP              = 0
    UNKNOWN_FAIL      = -1
    SYNTAX_FAIL       = -2
    CONFLICT_FAIL     = -3
    MISSING_VALUE     = -4
    REQUIRED_MISSING  = -5

##--|

@runtime_checkable
class Matches_p(Protocol):
    """ What a scanner reports back after a successful scan """
    free : list[str]

    def opt_present(self, name:str) -> bool:
        pass

    def opt_str(self, name:str) -> Maybe[str]:
        pass

    def opt_strs(self, name:str) -> list[str]:
        pass

@runtime_checkable
class Scanner_p(Protocol):
    """ The token level collaborator the resolver is built on """

    def add_spec(self, spec:ScanSpec) -> None:
        pass

    def extended(self, *specs:ScanSpec) -> Scanner_p:
        pass

    def scan(self, args:Sequence[str]) -> Matches_p:
        pass

    def render_usage(self, brief:str) -> str:
        pass
