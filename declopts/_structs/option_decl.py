#!/usr/bin/env python3
"""


"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

# ##-- 3rd party imports
from jgdv.structs.chainguard import ChainGuard
from pydantic import BaseModel, field_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
from declopts._interface import (LONG_PREFIX, MULTI_SUFFIX, HasArg, Occur,
                                 OptAction)
from declopts._structs.scan_spec import ScanSpec

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

ACTION_ALIASES : Final[dict[str, OptAction]] = {
    "set_true"    : OptAction.SET_TRUE,
    "store_true"  : OptAction.SET_TRUE,
    "true"        : OptAction.SET_TRUE,
    "set_false"   : OptAction.SET_FALSE,
    "store_false" : OptAction.SET_FALSE,
    "false"       : OptAction.SET_FALSE,
}

class OptionDeclaration(BaseModel, frozen=True):
    """ Describes a single option a program accepts on the command line.

      `action` makes the option a value-less flag, resolving to "true" or "false".
      `multiple` lets the option repeat, collecting every value given.
      The two don't combine, but that is only reported once the option is
      actually used, by the resolver.

      The scanner never sees this directly,
      only the ScanSpec built from it by `to_scan_spec`.
    """

    name      : str
    short     : str                = ""
    required  : bool               = False
    multiple  : bool               = False
    default   : None|str           = None
    action    : None|OptAction     = None
    help      : str                = ""

    @classmethod
    def build(cls, data:OptionDeclaration|ChainGuard|dict) -> OptionDeclaration:
        match data:
            case OptionDeclaration():
                return data
            case ChainGuard() | dict():
                return cls.model_validate(dict(data))
            case _:
                raise TypeError("Can't build an OptionDeclaration from", data)

    @field_validator("name")
    def _validate_name(cls, val):
        match val:
            case "":
                raise ValueError("Options need a name")
            case str() if val.startswith("-"):
                raise ValueError("Option names are given without their prefix", val)
            case str() if any(x.isspace() or x == "=" for x in val):
                raise ValueError("Option names can't contain whitespace or '='", val)
            case _:
                return val

    @field_validator("short", mode="before")
    def _validate_short(cls, val):
        match val:
            case None | "":
                return ""
            case str() if len(val) == 1 and val not in "-= \t":
                return val
            case _:
                raise ValueError("Short aliases are a single character, other than '-' and '='", val)

    @field_validator("required", "multiple", mode="before")
    def _validate_bools(cls, val):
        match val:
            case None:
                return False
            case _:
                return val

    @field_validator("help", mode="before")
    def _validate_help(cls, val):
        match val:
            case None:
                return ""
            case _:
                return val

    @field_validator("action", mode="before")
    def _validate_action(cls, val):
        match val:
            case str() if val.lower() in ACTION_ALIASES:
                return ACTION_ALIASES[val.lower()]
            case str():
                raise ValueError("Unknown option action", val)
            case _:
                return val

    @property
    def placeholder(self) -> str:
        return self.name.upper()

    @property
    def is_flag(self) -> bool:
        return self.action is not None

    @property
    def hasarg(self) -> HasArg:
        if self.is_flag:
            return HasArg.NO

        return HasArg.YES

    @property
    def occur(self) -> Occur:
        # a combination of required and multiple is checked on resolution
        if self.required:
            return Occur.REQUIRED
        if self.multiple:
            return Occur.MULTI

        return Occur.OPTIONAL

    def to_scan_spec(self) -> ScanSpec:
        return ScanSpec(short=self.short,
                        long=self.name,
                        help=self.help,
                        hint=self.placeholder,
                        hasarg=self.hasarg,
                        occur=self.occur)

    def usage_token(self) -> str:
        """ The brief form of this option, as it appears after 'Usage: prog' """
        token = f"{LONG_PREFIX}{self.name}"
        if not self.is_flag:
            token = f"{token} {self.placeholder}"
        if self.multiple:
            token = f"{token} {token}{MULTI_SUFFIX}"
        if not self.required:
            token = f"[{token}]"

        return token

    def __repr__(self):
        return f"<OptionDeclaration: {LONG_PREFIX}{self.name}>"
