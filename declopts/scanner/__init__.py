#!/usr/bin/env python3
"""
A getopts style scanner: tokenizes raw args against ScanSpecs.
The resolver in declopts.parsers only relies on its protocol, Scanner_p.
"""
from __future__ import annotations

from .matches import ScanMatches
from .scanner import OptionScanner
