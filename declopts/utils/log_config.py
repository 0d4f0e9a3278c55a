#!/usr/bin/env python3
"""
printing areas:

[usage]  : printer -> stdout
[fatal]  : fatal   -> stderr

Nothing is printed on a successful parse.
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

# ##-- 1st party imports
from declopts._interface import FATAL_NAME, PRINTER_NAME
from declopts._structs.logger_spec import LoggerSpec

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class DeclOptsLogConfig:
    """ Utility class to setup the two user facing loggers.

      The 'printer' replaces `print(x)` for usage text,
      the 'fatal' logger reports the reason a parse was aborted.
      Neither propagates, so they don't leak into an application's own logging.
    """

    def __init__(self, *, colour:bool=False):
        self.printer_spec = LoggerSpec.build({
            "name"      : PRINTER_NAME,
            "level"     : "INFO",
            "target"    : "stdout",
            "format"    : "{message}",
            "propagate" : False,
            })
        self.fatal_spec = LoggerSpec.build({
            "name"      : FATAL_NAME,
            "level"     : "ERROR",
            "target"    : "stderr",
            "format"    : "{levelname:<8} : {message}",
            "colour"    : colour,
            "propagate" : False,
            })

    def setup(self) -> tuple[logmod.Logger, logmod.Logger]:
        """ Apply both specs, returning (printer, fatal) """
        printer = self.printer_spec.apply()
        fatal   = self.fatal_spec.apply()
        logging.debug("Post Log Setup")
        return printer, fatal

    def clear(self) -> None:
        self.printer_spec.clear()
        self.fatal_spec.clear()
