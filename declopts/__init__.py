#!/usr/bin/env python3
"""
Declopts : declare command line options, then parse args against them.

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__, OptAction, ExitCodes, OutcomeStatus
from . import errors
from .structs import ParserSettings, ParseOutcome, ResolvedOptions, OptionDeclaration
from .parsers import OptionParser

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging
