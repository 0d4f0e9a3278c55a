#!/usr/bin/env python3
"""
Errors found while turning scanned matches into values
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

class ResolutionError(DeclOptsError):
    """ The args scanned fine, but an option couldn't be given a value """
    general_msg = "Option Resolution Failure:"

    def __init__(self, msg:str, name:str, *args):
        super().__init__(msg, name, *args)
        self.name = name

class ConflictingDeclaration(ResolutionError):
    """ A multiple valued option was also declared as a boolean action """

    def __init__(self, name:str):
        super().__init__("%s must not be a flag option.", name)

class MissingValue(ResolutionError):
    """ The option was given, but neither a value nor a boolean action applies """

    def __init__(self, name:str):
        super().__init__("%s must have a value, but only key like --%s", name, name)

class RequiredMissing(ResolutionError):
    """ A required multiple valued option was given with no values """

    def __init__(self, name:str):
        super().__init__("%s is required option.", name)
