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
import more_itertools as mitz

# ##-- end 3rd party imports

# ##-- 1st party imports
from declopts._interface import Matches_p
from declopts.utils.check_protocol import check_protocol

# ##-- end 1st party imports

if TYPE_CHECKING:
    from jgdv import Maybe
    from declopts._structs.scan_spec import ScanSpec

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@check_protocol
class ScanMatches(Matches_p):
    """ The occurrences of each spec found by a scan, plus the free args.

      Each occurrence is the value given, or None for a value-less option.
      Options are looked up by either their short or long name.
    """

    def __init__(self, specs:Sequence[ScanSpec], vals:Sequence[list[Maybe[str]]], free:Maybe[Iterable[str]]=None):
        if len(specs) != len(vals):
            raise ValueError("Each spec needs a list of occurrences", len(specs), len(vals))

        self._specs : tuple[ScanSpec, ...]            = tuple(specs)
        self._vals  : tuple[list[Maybe[str]], ...]     = tuple(list(x) for x in vals)
        self.free   : list[str]                       = list(free or [])

    def _occurrences(self, name:str) -> list[Maybe[str]]:
        match mitz.first_true(range(len(self._specs)), default=None, pred=lambda i: self._specs[i].matches(name)):
            case None:
                raise KeyError("No option defined with this name", name)
            case int() as idx:
                return self._vals[idx]

    def opt_present(self, name:str) -> bool:
        return bool(self._occurrences(name))

    def opt_count(self, name:str) -> int:
        return len(self._occurrences(name))

    def opt_str(self, name:str) -> Maybe[str]:
        """ The value of the first occurrence, None if absent or given without a value """
        return mitz.first(self._occurrences(name), None)

    def opt_strs(self, name:str) -> list[str]:
        return [x for x in self._occurrences(name) if x is not None]

    def __repr__(self):
        found = {x.display_name : y for x,y in zip(self._specs, self._vals) if bool(y)}
        return f"<ScanMatches: {found} free={self.free}>"
