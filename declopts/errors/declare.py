#!/usr/bin/env python3
"""
Errors raised while options are being declared, before any parsing happens
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

class DeclarationError(DeclOptsError):
    """ The caller described an option that can't be registered """
    general_msg = "Option Declaration Failure:"
    pass

class DuplicateDeclaration(DeclarationError):
    """ An option name was declared twice in one registry """
    general_msg = "Duplicate Option Declaration:"

    def __init__(self, name:str):
        super().__init__("Option already declared: %s", name)
        self.name = name

class InvalidDeclaration(DeclarationError):
    """ The name, short alias or other field of a declaration failed validation """
    general_msg = "Invalid Option Declaration:"
    pass

class DuplicateAlias(DuplicateDeclaration):
    """ A short alias was declared by two options in one registry """
    general_msg = "Duplicate Short Alias:"

    def __init__(self, short:str, name:str, holder:str):
        DeclarationError.__init__(self, "Short alias -%s of %s already declared by: %s", short, name, holder)
        self.name   = name
        self.short  = short
        self.holder = holder
