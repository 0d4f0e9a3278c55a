#!/usr/bin/env python3
"""
The token level scanner.

Follows the getopts conventions:
  --long value | --long=value
  -s value | -svalue | -abc (grouped value-less shorts)
  -- ends option processing, a lone - is a free arg.

A value taking option consumes the next arg even if it looks like an option.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import textwrap
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
from declopts import errors as derrs
from declopts._interface import (ASSIGN_SEP, DESC_COLUMN, END_OF_OPTS,
                                 LINE_WIDTH, LONG_PREFIX, OPTIONS_HEADER,
                                 ROW_INDENT, SHORT_PREFIX, HasArg, Occur,
                                 Scanner_p)
from declopts.scanner.matches import ScanMatches
from declopts.utils.check_protocol import check_protocol

# ##-- end 1st party imports

if TYPE_CHECKING:
    from jgdv import Maybe
    from declopts._structs.scan_spec import ScanSpec

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@check_protocol
class OptionScanner(Scanner_p):
    """
      Holds an ordered list of ScanSpecs,
      scans args against them,
      and renders the options table for usage text.
    """

    def __init__(self, specs:Maybe[Iterable[ScanSpec]]=None, *, desc_column:int=DESC_COLUMN, line_width:int=LINE_WIDTH):
        self._specs      : list[ScanSpec] = list(specs or [])
        self.desc_column : int            = desc_column
        self.line_width  : int            = line_width

    @property
    def specs(self) -> tuple[ScanSpec, ...]:
        return tuple(self._specs)

    def add_spec(self, spec:ScanSpec) -> None:
        logging.debug("Adding Scan Spec: %s", spec)
        self._specs.append(spec)

    def extended(self, *specs:ScanSpec) -> OptionScanner:
        """ A copy of this scanner with extra specs, leaving this one untouched """
        return OptionScanner([*self._specs, *specs],
                             desc_column=self.desc_column,
                             line_width=self.line_width)

    def _find(self, name:str) -> Maybe[int]:
        return mitz.first_true(range(len(self._specs)), default=None, pred=lambda i: self._specs[i].matches(name))

    def scan(self, args:Sequence[str]) -> ScanMatches:
        logging.debug("Scanning args: %s", args)
        vals       : list[list[Maybe[str]]]  = [[] for _ in self._specs]
        free       : list[str]               = []
        remaining  : list[str]               = list(args)

        while bool(remaining):
            current = remaining.pop(0)
            match current:
                case x if x == END_OF_OPTS:
                    free += remaining
                    remaining = []
                case x if x == SHORT_PREFIX or not x.startswith(SHORT_PREFIX):
                    free.append(x)
                case x if x.startswith(LONG_PREFIX):
                    self._scan_long(x.removeprefix(LONG_PREFIX), remaining, vals)
                case x:
                    self._scan_shorts(x.removeprefix(SHORT_PREFIX), remaining, vals)

        self._check_occurrences(vals)
        return ScanMatches(self._specs, vals, free)

    def _scan_long(self, current:str, remaining:list[str], vals:list[list[Maybe[str]]]) -> None:
        name, sep, inline = current.partition(ASSIGN_SEP)
        match self._find(name):
            case None:
                raise derrs.UnrecognizedOption(name)
            case int() as idx:
                spec = self._specs[idx]

        match spec.hasarg:
            case HasArg.NO if bool(sep):
                raise derrs.UnexpectedArgument(name)
            case HasArg.NO:
                vals[idx].append(None)
            case HasArg.YES if bool(sep):
                vals[idx].append(inline)
            case HasArg.YES if bool(remaining):
                vals[idx].append(remaining.pop(0))
            case HasArg.YES:
                raise derrs.ArgumentMissing(name)

    def _scan_shorts(self, current:str, remaining:list[str], vals:list[list[Maybe[str]]]) -> None:
        """ Handle a group of short options, where the first value taking option
          consumes the rest of the group, or the next arg
        """
        for pos, char in enumerate(current):
            match self._find(char):
                case None:
                    raise derrs.UnrecognizedOption(char)
                case int() as idx:
                    spec = self._specs[idx]

            rest = current[pos+1:]
            match spec.hasarg:
                case HasArg.NO:
                    vals[idx].append(None)
                    continue
                case HasArg.YES if bool(rest):
                    vals[idx].append(rest)
                case HasArg.YES if bool(remaining):
                    vals[idx].append(remaining.pop(0))
                case HasArg.YES:
                    raise derrs.ArgumentMissing(char)

            break

    def _check_occurrences(self, vals:list[list[Maybe[str]]]) -> None:
        for spec, given in zip(self._specs, vals):
            match spec.occur:
                case Occur.REQUIRED if not bool(given):
                    raise derrs.OptionMissing(spec.display_name)
                case Occur.REQUIRED | Occur.OPTIONAL if 1 < len(given):
                    raise derrs.OptionDuplicated(spec.display_name)
                case _:
                    pass

    def render_usage(self, brief:str) -> str:
        """ The brief, followed by a table of every spec:

          Usage: prog [--input INPUT]

          Options:
              -i, --input INPUT   the file to read
              -h, --help          show this help message and exit

        """
        any_short = any(bool(x.short) for x in self._specs)
        rows      = [self._render_row(x, any_short=any_short) for x in self._specs]
        return "\n".join([brief, "", OPTIONS_HEADER, *rows]) + "\n"

    def _render_row(self, spec:ScanSpec, *, any_short:bool) -> str:
        desc_sep  = "\n" + " " * self.desc_column
        row       = ROW_INDENT
        match spec.short, spec.long:
            case "", _ if any_short:
                row += " " * len(f"{SHORT_PREFIX}x, ")
            case "", _:
                pass
            case str() as short, "":
                row += f"{SHORT_PREFIX}{short} "
            case str() as short, _:
                row += f"{SHORT_PREFIX}{short}, "

        if bool(spec.long):
            row += f"{LONG_PREFIX}{spec.long} "

        if spec.hasarg is HasArg.YES:
            row += spec.hint

        match len(row):
            case x if x < self.desc_column:
                row = row.ljust(self.desc_column)
            case _:
                row += desc_sep

        desc = textwrap.wrap(spec.help, width=self.line_width - self.desc_column) or [""]
        return (row + desc_sep.join(desc)).rstrip()
