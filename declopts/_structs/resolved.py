#!/usr/bin/env python3
"""
The result of a parse.

Only options that were given, or have a default, get a value.
Everything declared is still known, so a missing option can be told apart
from one that was never declared.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import collections.abc
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

# ##-- 3rd party imports
from jgdv.structs.chainguard import ChainGuard

# ##-- end 3rd party imports

if TYPE_CHECKING:
    from jgdv import Maybe

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

OptValue : TypeAlias = str|list[str]

class ResolvedOptions(collections.abc.Mapping):
    """ A read-only mapping of option name -> resolved value.

      Single valued options map to a str,
      multiple valued options map to a list[str], in the order given.
      Declared options with no value and no default are absent.
    """

    def __init__(self, declared:Iterable[str], values:Maybe[Mapping[str, OptValue]]=None, *, prog:str="", free:Maybe[Iterable[str]]=None):
        self._declared : tuple[str, ...]     = tuple(declared)
        self._values   : dict[str, OptValue] = {}
        self.prog      : str                 = prog
        self.free      : list[str]           = list(free or [])

        for key, val in (values or {}).items():
            if key not in self._declared:
                raise KeyError("Resolved a value for an undeclared option", key)
            match val:
                case list():
                    self._values[key] = list(val)
                case _:
                    self._values[key] = val

    def __getitem__(self, key:str) -> OptValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        return f"<ResolvedOptions declared={list(self._declared)} resolved={self._values}>"

    @property
    def declared(self) -> tuple[str, ...]:
        return self._declared

    @property
    def defined_len(self) -> int:
        return len(self._declared)

    @property
    def parsed_len(self) -> int:
        return len(self._values)

    def is_declared(self, name:str) -> bool:
        return name in self._declared

    def values_of(self, name:str) -> list[str]:
        """ Every value of an option as a list, whatever its shape. [] when absent """
        match self._values.get(name, None):
            case None:
                return []
            case list() as xs:
                return list(xs)
            case x:
                return [x]

    def value_of(self, name:str) -> Maybe[str]:
        match self.values_of(name):
            case []:
                return None
            case [x, *_]:
                return x

    def to_guard(self) -> ChainGuard:
        """ A ChainGuard of the resolved values, for `on_fail` style access """
        return ChainGuard({x:y for x,y in self._values.items()})
