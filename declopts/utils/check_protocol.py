#!/usr/bin/env python3
"""

"""
##-- builtin imports
from __future__ import annotations

import logging as logmod
import types
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable, Generator)

##-- end builtin imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def _protocol_methods(cls) -> set[str]:
    """ The methods named by any Protocol cls explicitly subclasses """
    names = set()
    for base in cls.__mro__[1:]:
        if not getattr(base, "_is_protocol", False) or base is Protocol:
            continue
        names.update(x for x, y in vars(base).items() if isinstance(y, types.FunctionType) and not x.startswith("__"))

    return names

def _implemented_by(cls, name:str) -> bool:
    """ True if something other than a Protocol provides the method """
    for base in cls.__mro__:
        if name not in vars(base):
            continue
        return not getattr(base, "_is_protocol", False)

    return False

def check_protocol(cls):
    """ Decorator. Check the class implements all its methods / has no abstractmethods.
      Methods of Protocol bases have to be overridden,
      as inheriting their stub bodies would silently return None.
    """
    abstracts = [x for x in dir(cls) if getattr(getattr(cls, x, None), "__isabstractmethod__", False)]
    if bool(abstracts):
        raise NotImplementedError(f"Class has Abstract Methods: {cls.__module__} : {cls.__name__} : {abstracts}")

    missing = sorted(x for x in _protocol_methods(cls) if not _implemented_by(cls, x))
    if bool(missing):
        raise NotImplementedError(f"Class doesn't implement its Protocol: {cls.__module__} : {cls.__name__} : {missing}")

    logging.debug("Protocol Checked: %s", cls.__name__)
    return cls
