#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, field_validator, model_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
from declopts._interface import HasArg, Occur

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ScanSpec(BaseModel, frozen=True):
    """ A single option as the scanner sees it:
      its short and long names, the hint and help shown in the options table,
      whether it takes a value, and how often it may occur.
    """

    short   : str    = ""
    long    : str    = ""
    help    : str    = ""
    hint    : str    = ""
    hasarg  : HasArg = HasArg.YES
    occur   : Occur  = Occur.OPTIONAL

    @field_validator("short")
    def _validate_short(cls, val):
        if len(val) > 1:
            raise ValueError("Short option names are a single character", val)
        return val

    @model_validator(mode="after")
    def _validate_names(self):
        if not (self.short or self.long):
            raise ValueError("A scan spec needs a short or a long name")
        return self

    @property
    def display_name(self) -> str:
        return self.long or self.short

    def matches(self, name:str) -> bool:
        return bool(name) and name in (self.short, self.long)

    def __repr__(self):
        return f"<ScanSpec: {self.short or '_'}/{self.long or '_'} : {self.hasarg.name} : {self.occur.name}>"
