#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
import sys
from typing import (TYPE_CHECKING, Any, Callable, ClassVar, Final, Generic,
                    Iterable, Iterator, Mapping, Match, MutableMapping,
                    Protocol, Sequence, Tuple, TypeAlias, TypeGuard, TypeVar,
                    cast, final, overload, runtime_checkable)

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from declopts import errors as derrs
from declopts._interface import (HELP_FLAGS, HELP_NAME, HELP_SHORT,
                                 ExitCodes, HasArg, Occur, OutcomeStatus)
from declopts._structs.outcome import ParseOutcome
from declopts._structs.scan_spec import ScanSpec
from declopts._structs.settings import ParserSettings
from declopts.parsers.registry import OptionRegistry
from declopts.parsers.resolver import OptionResolver
from declopts.parsers.usage import render_usage
from declopts.scanner import OptionScanner
from declopts.utils.log_config import DeclOptsLogConfig

if TYPE_CHECKING:
    from typing import Never
    from jgdv import Maybe
    from jgdv.structs.chainguard import ChainGuard
    from declopts._interface import OptAction, Scanner_p
    from declopts._structs.resolved import ResolvedOptions

class ExitHandlers_m:
    """ Mixin for turning a failed or help outcome into process termination """

    settings : ParserSettings

    def _exit_with(self, outcome:ParseOutcome) -> Never:
        printer, fatal = DeclOptsLogConfig(colour=self.settings.colour).setup()
        printer.info(outcome.usage.rstrip())
        match outcome:
            case ParseOutcome(status=OutcomeStatus.HELP):
                sys.exit(outcome.exit_code)
            case ParseOutcome(error=derrs.DeclOptsError() as err):
                fatal.error("[%s] : %s", type(err).__name__, err)
                sys.exit(outcome.exit_code)
            case _:
                fatal.error("[%s] : Unknown parse failure", outcome.status.name)
                sys.exit(ExitCodes.UNKNOWN_FAIL)

class OptionParser(ExitHandlers_m):
    """
      Declare options, then parse args against them.

      parser = OptionParser()
      parser.add_option("input", "i", required=True, help="the file to read")
      parser.add_option("verbose", "v", action=OptAction.SET_TRUE)
      options = parser.parse()

      `try_parse` gives a tagged ParseOutcome and never raises for bad input,
      `parse_from` raises instead,
      `parse` reads sys.argv, and prints + exits on help or failure.
    """

    def __init__(self, settings:Maybe[ParserSettings|ChainGuard|dict]=None, *, scanner:Maybe[Scanner_p]=None):
        self.settings   : ParserSettings = ParserSettings.build(settings)
        self._registry  : OptionRegistry = OptionRegistry(scanner or OptionScanner(desc_column=self.settings.desc_column,
                                                                                   line_width=self.settings.line_width))
        self._resolver  : OptionResolver = OptionResolver()

    @property
    def registry(self) -> OptionRegistry:
        return self._registry

    def add_option(self, name:str, short:str="", required:Maybe[bool]=None, multiple:Maybe[bool]=None, default:Maybe[str]=None, action:Maybe[OptAction|str]=None, help:Maybe[str]=None) -> None:  # noqa: A002
        self._registry.declare(name, short,
                               required=required,
                               multiple=multiple,
                               default=default,
                               action=action,
                               help=help)

    declare = add_option

    def _prog_name(self, args:Sequence[str]) -> str:
        match self.settings.prog_name, args:
            case str() as x, _:
                return x
            case None, [x, *_]:
                return x
            case None, _:
                return sys.argv[0] if bool(sys.argv) else ""

    def _help_spec(self) -> ScanSpec:
        return ScanSpec(short=HELP_SHORT,
                        long=HELP_NAME,
                        help=self.settings.help_desc,
                        hasarg=HasArg.NO,
                        occur=Occur.OPTIONAL)

    def _build_scanner(self) -> Scanner_p:
        """ The scanner for one parse.
          Adds the implicit help spec, unless 'help' has been declared.
        """
        if self._registry.declares_help:
            return self._registry.scanner.extended()

        return self._registry.scanner.extended(self._help_spec())

    def try_parse(self, args:Sequence[str]) -> ParseOutcome:
        """
          Parse args, where args[0] is the program name.
          Returns a ParseOutcome for success, help, and every parse failure.
        """
        logging.debug("Parsing args: %s", args)
        args     = list(args)
        prog     = self._prog_name(args)
        scanner  = self._build_scanner()
        usage    = render_usage(prog, self._registry, scanner)

        try:
            matches = scanner.scan(args[1:])
        except derrs.ScanError as err:
            if any(x in HELP_FLAGS for x in args[1:]):
                # help overrides any other malformed input
                logging.info("Help requested, ignoring: %s", err)
                return ParseOutcome(status=OutcomeStatus.HELP, usage=usage)

            logging.info("Scan Failed: %s", err)
            return ParseOutcome.failed(err, usage)

        if not self._registry.declares_help and matches.opt_present(HELP_NAME):
            logging.info("Help requested")
            return ParseOutcome(status=OutcomeStatus.HELP, usage=usage)

        try:
            options = self._resolver.resolve(self._registry, matches, prog=prog)
        except derrs.ResolutionError as err:
            logging.info("Resolution Failed: %s", err)
            return ParseOutcome.failed(err, usage)

        return ParseOutcome(status=OutcomeStatus.SUCCESS, usage=usage, options=options)

    def parse_from(self, args:Sequence[str]) -> ResolvedOptions:
        """ Parse an explicit list of args.
          Raises HelpRequested, or the error that stopped the parse.
          Never exits the process.
        """
        return self.try_parse(args).unwrap()

    def parse(self) -> ResolvedOptions:
        """ Parse sys.argv. On help, prints usage and exits 0.
          On failure, prints usage, reports the error, and exits nonzero.
        """
        outcome = self.try_parse(sys.argv)
        if outcome.ok:
            return outcome.unwrap()

        self._exit_with(outcome)
