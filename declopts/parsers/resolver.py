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

# ##-- 1st party imports
from declopts import errors as derrs
from declopts._structs.resolved import ResolvedOptions

# ##-- end 1st party imports

if TYPE_CHECKING:
    from jgdv import Maybe
    from declopts._interface import Matches_p
    from declopts._structs.option_decl import OptionDeclaration
    from declopts._structs.resolved import OptValue

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class OptionResolver:
    """
      Turns scanner matches into option values.
      Each declaration is resolved on its own, in declaration order:

      given, multiple     -> every value, in order
      given, single       -> the value, or the boolean literal of its action
      not given           -> the default, or nothing

      The first failure ends the resolution.
    """

    def resolve(self, declarations:Iterable[OptionDeclaration], matches:Matches_p, *, prog:str="") -> ResolvedOptions:
        decls   = list(declarations)
        values  = {}
        for decl in decls:
            match self._resolve_one(decl, matches):
                case None:
                    logging.debug("Not Given: %s", decl.name)
                case val:
                    logging.debug("Resolved: %s = %s", decl.name, val)
                    values[decl.name] = val

        return ResolvedOptions([x.name for x in decls],
                               values,
                               prog=prog,
                               free=getattr(matches, "free", None))

    def _resolve_one(self, decl:OptionDeclaration, matches:Matches_p) -> Maybe[OptValue]:
        match matches.opt_present(decl.name):
            case True if decl.multiple:
                return self._resolve_multiple(decl, matches)
            case True:
                return self._resolve_single(decl, matches)
            case False if decl.default is None:
                return None
            case False if decl.multiple:
                return [decl.default]
            case False:
                return decl.default

    def _resolve_multiple(self, decl:OptionDeclaration, matches:Matches_p) -> list[str]:
        if decl.is_flag:
            raise derrs.ConflictingDeclaration(decl.name)

        match matches.opt_strs(decl.name):
            case [] if decl.required:
                raise derrs.RequiredMissing(decl.name)
            case []:
                # named without a value, despite taking one
                raise derrs.MissingValue(decl.name)
            case [*xs]:
                return list(xs)

    def _resolve_single(self, decl:OptionDeclaration, matches:Matches_p) -> str:
        match matches.opt_str(decl.name), decl.action:
            case str() as val, _:
                return val
            case None, None:
                raise derrs.MissingValue(decl.name)
            case None, action:
                return action.literal
