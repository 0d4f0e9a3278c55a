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
from pydantic import ValidationError

# ##-- end 3rd party imports

# ##-- 1st party imports
from declopts import errors as derrs
from declopts._interface import HELP_NAME, HELP_SHORT
from declopts._structs.option_decl import OptionDeclaration
from declopts.scanner import OptionScanner

# ##-- end 1st party imports

if TYPE_CHECKING:
    from jgdv import Maybe
    from declopts._interface import OptAction, Scanner_p
    from declopts._structs.scan_spec import ScanSpec

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class OptionRegistry:
    """
      The ordered declarations of one parser.
      Each declaration is forwarded to the scanner as a ScanSpec when it is made.

      Declaration order is kept, as it drives both resolution and usage text.
      Not thread safe.
    """

    def __init__(self, scanner:Maybe[Scanner_p]=None):
        self._declarations : list[OptionDeclaration] = []
        self._scanner      : Scanner_p               = scanner or OptionScanner()

    def __contains__(self, name:str) -> bool:
        return any(x.name == name for x in self._declarations)

    def __iter__(self) -> Iterator[OptionDeclaration]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self):
        return f"<OptionRegistry: {self.names}>"

    @property
    def scanner(self) -> Scanner_p:
        return self._scanner

    @property
    def names(self) -> list[str]:
        return [x.name for x in self._declarations]

    @property
    def declares_help(self) -> bool:
        return HELP_NAME in self

    def _build(self, data:OptionDeclaration|dict) -> OptionDeclaration:
        try:
            return OptionDeclaration.build(data)
        except ValidationError as err:
            name = data.get("name", None) if isinstance(data, dict) else data
            raise derrs.InvalidDeclaration("Invalid Declaration for option: %s : %s", name, err.errors()) from err

    def declare(self, name:str, short:str="", required:Maybe[bool]=None, multiple:Maybe[bool]=None, default:Maybe[str]=None, action:Maybe[OptAction|str]=None, help:Maybe[str]=None) -> None:  # noqa: A002
        """ Build and register a declaration from its parts """
        self.add(self._build({"name"     : name,
                              "short"    : short,
                              "required" : required,
                              "multiple" : multiple,
                              "default"  : default,
                              "action"   : action,
                              "help"     : help}))

    def _check_addable(self, decl:OptionDeclaration, existing:list[OptionDeclaration]) -> None:
        """ Names and short aliases are unique.
          The help alias is reserved, unless 'help' itself is declared.
        """
        if any(x.name == decl.name for x in existing):
            raise derrs.DuplicateDeclaration(decl.name)

        keys = self._short_keys(decl)
        match mitz.first((x for x in existing if bool(keys & self._short_keys(x))), None):
            case OptionDeclaration() as holder:
                raise derrs.DuplicateAlias(min(keys & self._short_keys(holder)), decl.name, holder.name)
            case None:
                pass

        reserved = HELP_SHORT in keys and decl.name != HELP_NAME
        if reserved and not any(x.name == HELP_NAME for x in existing):
            raise derrs.InvalidDeclaration("Short alias -%s is reserved for --%s, declare '%s' first to reuse it: %s",
                                           HELP_SHORT, HELP_NAME, HELP_NAME, decl.name)

    @staticmethod
    def _short_keys(decl:OptionDeclaration) -> set[str]:
        """ What a decl answers to as '-x'. A single character name does too """
        keys = {decl.short} if bool(decl.short) else set()
        if len(decl.name) == 1:
            keys.add(decl.name)
        return keys

    def add(self, decl:OptionDeclaration) -> None:
        self._check_addable(decl, self._declarations)
        logging.debug("Declaring Option: %s", decl)
        self._declarations.append(decl)
        self._scanner.add_spec(decl.to_scan_spec())

    def add_all(self, decls:Iterable[OptionDeclaration|dict]) -> None:
        """ Register several declarations, checking all of them before adding any """
        built   = [self._build(x) for x in decls]
        pending = list(self._declarations)
        for decl in built:
            self._check_addable(decl, pending)
            pending.append(decl)

        for decl in built:
            self.add(decl)

    def get(self, name:str) -> Maybe[OptionDeclaration]:
        return mitz.first((x for x in self._declarations if x.name == name), None)

    def scan_specs(self) -> list[ScanSpec]:
        return [x.to_scan_spec() for x in self._declarations]
