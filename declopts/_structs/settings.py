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
from jgdv.structs.chainguard import ChainGuard
from pydantic import BaseModel, field_validator, model_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
from declopts._interface import DESC_COLUMN, HELP_DESC, LINE_WIDTH

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

MIN_DESC_WIDTH : Final[int] = 10

class ParserSettings(BaseModel):
    """
      Settings for a single OptionParser.
      Can be built from a plain dict, or a toml table via ChainGuard, eg:

      [declopts]
      prog_name   = "mytool"
      line_width  = 100
      colour      = true
    """

    prog_name    : None|str  = None
    help_desc    : str       = HELP_DESC
    desc_column  : int       = DESC_COLUMN
    line_width   : int       = LINE_WIDTH
    colour       : bool      = False

    @classmethod
    def build(cls, data:None|ParserSettings|ChainGuard|dict=None) -> ParserSettings:
        match data:
            case None:
                return cls()
            case ParserSettings():
                return data
            case ChainGuard() | dict():
                return cls.model_validate(dict(data))
            case _:
                raise TypeError("Can't build ParserSettings from", data)

    @field_validator("desc_column")
    def _validate_desc_column(cls, val):
        if val < 1:
            raise ValueError("The description column must be positive", val)
        return val

    @model_validator(mode="after")
    def _validate_width(self):
        if self.line_width - self.desc_column < MIN_DESC_WIDTH:
            raise ValueError("Line width leaves no room for option descriptions",
                             self.line_width, self.desc_column)
        return self
