#!/usr/bin/env python3
"""
Usage text synthesis.

The brief line is built here from the declarations,
the options table underneath it is left to the scanner.
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
from declopts._interface import USAGE_PREFIX

# ##-- end 1st party imports

if TYPE_CHECKING:
    from declopts._interface import Scanner_p
    from declopts._structs.option_decl import OptionDeclaration

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def usage_brief(prog:str, declarations:Iterable[OptionDeclaration]) -> str:
    """ eg: Usage: prog --input INPUT [--verbose] [--tag TAG --tag TAG...] """
    tokens = [x.usage_token() for x in declarations]
    return " ".join([USAGE_PREFIX, prog, *tokens])

def render_usage(prog:str, declarations:Iterable[OptionDeclaration], scanner:Scanner_p) -> str:
    return scanner.render_usage(usage_brief(prog, declarations))
