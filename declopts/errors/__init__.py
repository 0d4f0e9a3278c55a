#!/usr/bin/env python3
"""
These are the declopts specific errors that can occur
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
from ._base import DeclOptsError
from .declare import (DeclarationError, DuplicateDeclaration, DuplicateAlias,
                      InvalidDeclaration)
from .scan import (ScanError, UnrecognizedOption, ArgumentMissing,
                   UnexpectedArgument, OptionMissing, OptionDuplicated)
from .resolve import (ResolutionError, ConflictingDeclaration,
                      MissingValue, RequiredMissing)

# ##-- end 1st party imports

class HelpRequested(Exception):
    """ The user asked for help, so parsing stopped before resolving anything """

    def __init__(self, usage:str):
        super().__init__(usage)
        self.usage = usage
