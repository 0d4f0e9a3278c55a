#!/usr/bin/env python3
"""
These are the scanner errors, all of which mean the raw args
couldn't be tokenized against the declared specs
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

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import DeclOptsError

class ScanError(DeclOptsError):
    """ In the course of tokenizing CLI input, a failure occurred. """
    general_msg : ClassVar[str] = "CLI Syntax Failure:"
    _fmt        : ClassVar[str] = "Malformed option: '%s'"

    def __init__(self, option:str):
        super().__init__(self._fmt, option)
        self.option = option

class UnrecognizedOption(ScanError):
    _fmt = "Unrecognized option: '%s'"

class ArgumentMissing(ScanError):
    _fmt = "Argument to option '%s' missing"

class UnexpectedArgument(ScanError):
    _fmt = "Option '%s' does not take an argument"

class OptionMissing(ScanError):
    _fmt = "Required option '%s' missing"

class OptionDuplicated(ScanError):
    _fmt = "Option '%s' given more than once"
