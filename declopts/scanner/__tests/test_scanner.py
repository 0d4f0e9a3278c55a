#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import (Any, Callable, ClassVar, Generic, Iterable, Iterator,
                    Mapping, Match, MutableMapping, Sequence, Tuple, TypeAlias,
                    TypeVar, cast)
##-- end imports
logging = logmod.root

import pytest

from declopts import errors as derrs
from declopts._interface import HasArg, Matches_p, Occur, Scanner_p
from declopts._structs.scan_spec import ScanSpec
from declopts.scanner import OptionScanner, ScanMatches

@pytest.fixture
def scanner():
    return OptionScanner([
        ScanSpec(short="i", long="input", hint="INPUT", help="the file to read"),
        ScanSpec(short="t", long="tag", hint="TAG", occur=Occur.MULTI),
        ScanSpec(short="v", long="verbose", hasarg=HasArg.NO),
        ScanSpec(short="q", long="quiet", hasarg=HasArg.NO),
        ScanSpec(long="mode", hint="MODE"),
        ])

class TestOptionScanner:

    def test_initial(self):
        obj = OptionScanner()
        assert(isinstance(obj, Scanner_p))
        assert(obj.specs == ())

    def test_add_spec(self):
        obj = OptionScanner()
        obj.add_spec(ScanSpec(long="input"))
        assert(len(obj.specs) == 1)

    def test_extended_is_a_copy(self, scanner):
        extra = scanner.extended(ScanSpec(short="h", long="help", hasarg=HasArg.NO))
        assert(len(extra.specs) == len(scanner.specs) + 1)
        assert(extra is not scanner)
        assert(not any(x.long == "help" for x in scanner.specs))

    def test_empty_args(self, scanner):
        result = scanner.scan([])
        assert(isinstance(result, Matches_p))
        assert(not result.opt_present("input"))
        assert(result.free == [])

class TestScannerLongOptions:

    def test_separate_value(self, scanner):
        result = scanner.scan(["--input", "a.txt"])
        assert(result.opt_present("input"))
        assert(result.opt_present("i"))
        assert(result.opt_str("input") == "a.txt")

    def test_assigned_value(self, scanner):
        result = scanner.scan(["--input=a.txt"])
        assert(result.opt_str("input") == "a.txt")

    def test_assigned_empty_value(self, scanner):
        result = scanner.scan(["--input="])
        assert(result.opt_present("input"))
        assert(result.opt_str("input") == "")

    def test_value_may_look_like_an_option(self, scanner):
        result = scanner.scan(["--input", "--verbose"])
        assert(result.opt_str("input") == "--verbose")
        assert(not result.opt_present("verbose"))

    def test_flag(self, scanner):
        result = scanner.scan(["--verbose", "blah"])
        assert(result.opt_present("verbose"))
        assert(result.opt_str("verbose") is None)
        assert(result.free == ["blah"])

    def test_unrecognized(self, scanner):
        with pytest.raises(derrs.UnrecognizedOption):
            scanner.scan(["--bloo"])

    def test_missing_argument(self, scanner):
        with pytest.raises(derrs.ArgumentMissing):
            scanner.scan(["--input"])

    def test_unexpected_argument(self, scanner):
        with pytest.raises(derrs.UnexpectedArgument):
            scanner.scan(["--verbose=yes"])

class TestScannerShortOptions:

    def test_separate_value(self, scanner):
        result = scanner.scan(["-i", "a.txt"])
        assert(result.opt_str("input") == "a.txt")

    def test_attached_value(self, scanner):
        result = scanner.scan(["-ia.txt"])
        assert(result.opt_str("input") == "a.txt")

    def test_grouped_flags(self, scanner):
        result = scanner.scan(["-vq"])
        assert(result.opt_present("verbose"))
        assert(result.opt_present("quiet"))

    def test_group_ending_in_value(self, scanner):
        result = scanner.scan(["-vi", "a.txt"])
        assert(result.opt_present("verbose"))
        assert(result.opt_str("input") == "a.txt")

    def test_group_value_consumes_rest(self, scanner):
        result = scanner.scan(["-viq"])
        assert(result.opt_str("input") == "q")
        assert(not result.opt_present("quiet"))

    def test_unrecognized(self, scanner):
        with pytest.raises(derrs.UnrecognizedOption):
            scanner.scan(["-x"])

    def test_missing_argument(self, scanner):
        with pytest.raises(derrs.ArgumentMissing):
            scanner.scan(["-vi"])

class TestScannerFreeArgs:

    def test_free(self, scanner):
        result = scanner.scan(["a", "--verbose", "b"])
        assert(result.free == ["a", "b"])

    def test_lone_dash(self, scanner):
        result = scanner.scan(["-"])
        assert(result.free == ["-"])

    def test_end_of_options(self, scanner):
        result = scanner.scan(["--verbose", "--", "--input", "-q"])
        assert(result.opt_present("verbose"))
        assert(not result.opt_present("input"))
        assert(result.free == ["--input", "-q"])

class TestScannerOccurrences:

    def test_multi(self, scanner):
        result = scanner.scan(["-t", "a", "--tag", "b", "--tag=c"])
        assert(result.opt_strs("tag") == ["a", "b", "c"])
        assert(result.opt_count("tag") == 3)
        assert(result.opt_str("tag") == "a")

    def test_duplicated(self, scanner):
        with pytest.raises(derrs.OptionDuplicated):
            scanner.scan(["--input", "a", "-i", "b"])

    def test_duplicated_flag(self, scanner):
        with pytest.raises(derrs.OptionDuplicated):
            scanner.scan(["-vv"])

    def test_required_missing(self):
        obj = OptionScanner([ScanSpec(long="input", occur=Occur.REQUIRED)])
        with pytest.raises(derrs.OptionMissing) as ctx:
            obj.scan([])

        assert(ctx.value.option == "input")

    def test_required_given(self):
        obj    = OptionScanner([ScanSpec(long="input", occur=Occur.REQUIRED)])
        result = obj.scan(["--input", "a"])
        assert(result.opt_str("input") == "a")

class TestScanMatches:

    def test_unknown_name(self, scanner):
        result = scanner.scan([])
        with pytest.raises(KeyError):
            result.opt_present("bloo")

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError):
            ScanMatches([ScanSpec(long="input")], [])

    def test_opt_strs_skips_valueless(self):
        obj = ScanMatches([ScanSpec(long="verbose", hasarg=HasArg.NO)], [[None, None]])
        assert(obj.opt_present("verbose"))
        assert(obj.opt_strs("verbose") == [])

class TestScannerUsage:

    def test_table(self, scanner):
        result = scanner.render_usage("Usage: prog")
        lines  = result.splitlines()
        assert(result.endswith("\n"))
        assert(lines[0] == "Usage: prog")
        assert(lines[1] == "")
        assert(lines[2] == "Options:")
        assert(lines[3] == "    -i, --input INPUT   the file to read")
        assert(lines[4] == "    -t, --tag TAG")
        assert(lines[5] == "    -v, --verbose")
        assert(lines[7] == "        --mode MODE")

    def test_no_shorts(self):
        obj    = OptionScanner([ScanSpec(long="input", hint="INPUT", help="blah")])
        lines  = obj.render_usage("Usage: prog").splitlines()
        assert(lines[3] == "    --input INPUT       blah")

    def test_long_row_wraps_to_next_line(self):
        obj    = OptionScanner([ScanSpec(long="a-very-long-option-name", hint="VALUE", help="blah")])
        lines  = obj.render_usage("Usage: prog").splitlines()
        assert(lines[3] == "    --a-very-long-option-name VALUE")
        assert(lines[4] == (" " * 24) + "blah")

    def test_wrapped_help(self):
        obj    = OptionScanner([ScanSpec(long="input", hint="INPUT", help="word " * 20)],
                               line_width=44)
        lines  = obj.render_usage("Usage: prog").splitlines()[3:]
        assert(len(lines) > 1)
        assert(all(len(x) <= 44 for x in lines))
        assert(all(x.startswith(" " * 24) for x in lines[1:]))
