#!/usr/bin/env python3
"""
Public Access point for declopts Structures
"""
from __future__ import annotations

from declopts._structs.option_decl import OptionDeclaration
from declopts._structs.scan_spec import ScanSpec
from declopts._structs.resolved import ResolvedOptions
from declopts._structs.settings import ParserSettings
from declopts._structs.outcome import ParseOutcome
from declopts._structs.logger_spec import LoggerSpec
