#!/usr/bin/env python3
"""

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import sys
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
from declopts.utils.log_colour import ColourFormatter, ColourStripFormatter

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

TARGETS : Final[list[str]] = ["stdout", "stderr", "pass"]

class HandlerBuilder_m:
    """
    Loggerspec Mixin for building handlers.
    Streams are looked up when the handler is built,
    so a replaced sys.stdout/sys.stderr is respected.
    """

    def _build_streamhandler(self) -> logmod.Handler:
        return logmod.StreamHandler(sys.stdout)

    def _build_errorhandler(self) -> logmod.Handler:
        return logmod.StreamHandler(sys.stderr)

    def _discriminate_handler(self, target:None|str) -> tuple[None|logmod.Handler, None|logmod.Formatter]:
        handler, formatter = None, None

        match target:
            case "pass" | None:
                return None, None
            case "stdout":
                handler   = self._build_streamhandler()
            case "stderr":
                handler   = self._build_errorhandler()
            case _:
                raise ValueError("Unknown logger spec target", target)

        match self.colour:
            case True:
                formatter = ColourFormatter(fmt=self.format)
            case False:
                formatter = ColourStripFormatter(fmt=self.format)

        return handler, formatter

class LoggerSpec(BaseModel, HandlerBuilder_m):
    """
      A Spec for controlling one of the user facing loggers.
      Names a logger, sets its level, format, colour and target stream.

      When 'apply' is called, it gets the logger,
      replaces its handlers, and sets any relevant settings on it.
    """

    name                       : str
    level                      : str|int                     = logmod.WARNING
    format                     : str                         = "{levelname:<8} : {message}"
    colour                     : bool                        = False
    target                     : str                         = "stdout"
    propagate                  : bool                        = False

    @staticmethod
    def build(data:ChainGuard|dict, **kwargs) -> LoggerSpec:
        match data:
            case ChainGuard() | dict():
                as_dict = dict(data)
                as_dict.update(kwargs)
                return LoggerSpec.model_validate(as_dict)
            case _:
                raise TypeError("Can't build a LoggerSpec from", data)

    @field_validator("level")
    def _validate_level(cls, val):
        match val:
            case str():
                return logmod.getLevelNamesMapping().get(val.upper(), logmod.NOTSET)
            case int():
                return val

    @field_validator("target")
    def _validate_target(cls, val):
        match val:
            case str() if val in TARGETS:
                return val
            case _:
                raise ValueError("Unknown target value for LoggerSpec", val)

    def get(self) -> logmod.Logger:
        return logmod.getLogger(self.name)

    def clear(self) -> None:
        """ Clear the handlers for the logger referenced """
        logger = self.get()
        for h in logger.handlers[:]:
            logger.removeHandler(h)

    def apply(self) -> logmod.Logger:
        """ Apply this spec to the relevant logger """
        logger            = self.get()
        logger.propagate  = self.propagate
        logger.setLevel(self.level)
        self.clear()

        match self._discriminate_handler(self.target):
            case None, _:
                pass
            case hand, None:
                hand.setLevel(self.level)
                logger.addHandler(hand)
            case hand, fmt:
                hand.setLevel(self.level)
                hand.setFormatter(fmt)
                logger.addHandler(hand)

        return logger
