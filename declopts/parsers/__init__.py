#!/usr/bin/env python3
"""
Declaration, resolution and usage synthesis, built over a Scanner_p.
"""
from __future__ import annotations

from .registry import OptionRegistry
from .resolver import OptionResolver
from .usage import render_usage, usage_brief
from .parser import OptionParser
