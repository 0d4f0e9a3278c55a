#!/usr/bin/env python3
"""



"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class DeclOptsError(Exception):
    """
      The base class for all declopts Errors
      will try to % format the first argument with remaining args in str()

      `usage` is filled in by the parser when the error ends a parse,
      so adapters can show it before aborting.
    """
    general_msg : ClassVar[str] = "Non-Specific declopts Error:"
    usage       : None|str      = None

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)
        except IndexError:
            return self.general_msg

