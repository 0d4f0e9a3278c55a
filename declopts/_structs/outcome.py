#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generator,
                    Generic, Iterable, Iterator, Mapping, Match,
                    MutableMapping, Protocol, Sequence, Tuple, TypeAlias,
                    TypeGuard, TypeVar, cast, final, overload,
                    runtime_checkable)

# ##-- end stdlib imports

# ##-- 1st party imports
from declopts import errors as derrs
from declopts._interface import ExitCodes, OutcomeStatus

# ##-- end 1st party imports

if TYPE_CHECKING:
    from jgdv import Maybe
    from declopts._structs.resolved import ResolvedOptions

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class ParseOutcome:
    """ The tagged result of one parse attempt.

      Exactly one of `options` (on SUCCESS) or `error` (on a failure) is set.
      HELP carries neither, just the usage text.
    """

    status   : OutcomeStatus
    usage    : str                      = ""
    options  : Maybe[ResolvedOptions]   = None
    error    : Maybe[derrs.DeclOptsError] = None

    @classmethod
    def failed(cls, err:derrs.DeclOptsError, usage:str) -> ParseOutcome:
        err.usage = usage
        return cls(status=cls.status_for(err), usage=usage, error=err)

    @staticmethod
    def status_for(err:derrs.DeclOptsError) -> OutcomeStatus:
        match err:
            case derrs.ScanError():
                return OutcomeStatus.SYNTAX_ERROR
            case derrs.ConflictingDeclaration():
                return OutcomeStatus.CONFLICTING_DECLARATION
            case derrs.RequiredMissing():
                return OutcomeStatus.REQUIRED_MISSING
            case derrs.MissingValue():
                return OutcomeStatus.MISSING_VALUE
            case _:
                raise TypeError("No outcome status for error", err)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @property
    def exit_code(self) -> ExitCodes:
        match self.status:
            case OutcomeStatus.SUCCESS:
                return ExitCodes.SUCCESS
            case OutcomeStatus.HELP:
                return ExitCodes.HELP
            case OutcomeStatus.SYNTAX_ERROR:
                return ExitCodes.SYNTAX_FAIL
            case OutcomeStatus.CONFLICTING_DECLARATION:
                return ExitCodes.CONFLICT_FAIL
            case OutcomeStatus.MISSING_VALUE:
                return ExitCodes.MISSING_VALUE
            case OutcomeStatus.REQUIRED_MISSING:
                return ExitCodes.REQUIRED_MISSING
            case _:
                return ExitCodes.UNKNOWN_FAIL

    def unwrap(self) -> ResolvedOptions:
        """ Return the options, or raise what stopped the parse """
        match self:
            case ParseOutcome(status=OutcomeStatus.SUCCESS, options=options) if options is not None:
                return options
            case ParseOutcome(status=OutcomeStatus.HELP):
                raise derrs.HelpRequested(self.usage)
            case ParseOutcome(error=derrs.DeclOptsError() as err):
                raise err
            case _:
                raise ValueError("Malformed parse outcome", self.status)
