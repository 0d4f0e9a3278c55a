#!/usr/bin/env python3
"""
A small demonstration cli, parsing sys.argv and printing what it resolved.

  python -m declopts --input file.txt -t a -t b -v
"""
# Imports:
from __future__ import annotations

import logging as logmod

##-- logging
logging         = logmod.root
logging.setLevel(logmod.WARNING)
##-- end logging

def main():
    from declopts import OptAction, OptionParser
    from declopts.utils.log_config import DeclOptsLogConfig

    parser = OptionParser({"prog_name": "declopts"})
    parser.add_option("input", "i", required=True, help="the file to read")
    parser.add_option("tag", "t", multiple=True, help="a tag to apply, can repeat")
    parser.add_option("verbose", "v", action=OptAction.SET_TRUE, help="print more")
    parser.add_option("mode", "m", default="fast", help="how to process the input")
    options = parser.parse()

    printer, _ = DeclOptsLogConfig().setup()
    for key, val in options.items():
        printer.info("%s : %s", key, val)

    if bool(options.free):
        printer.info("free : %s", options.free)

if __name__ == "__main__":
    main()
