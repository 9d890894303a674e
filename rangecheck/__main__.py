"""
Check that UTF-8 text on standard input stays within the given ranges of code points.

Usage: py -m rangecheck [RANGE ...]

Each RANGE looks like U+0000-007F (hexadecimal, inclusive), at most 32 of them.
Every code point found outside all of the ranges is listed on standard error,
followed by a count. With no ranges at all, every code point is out of range.

The exit status is zero only if the input decodes and every code point is in range.

There are no options. Every argument is a range, including `--` and `-h`,
which just fail to parse as one.
"""

import sys

from rangecheck.scanning.ranges import build_range_set
from rangecheck.scanning.recognition import RangeScanner
from rangecheck.support.failureprone import Reporter
from rangecheck.support.interfaces import RangeCheckError, ExitCode

def parse_arguments(argv=None) -> list:
	return list(sys.argv[1:] if argv is None else argv)

def main(expressions, stdin=None, stderr=None) -> ExitCode:
	source = sys.stdin.buffer if stdin is None else stdin
	reporter = Reporter(stderr)
	try:
		ranges = build_range_set(expressions)
		violations = RangeScanner(source, ranges).run(reporter)
	except RangeCheckError as ex:
		reporter.fatal(ex)
		return ExitCode.FAILURE
	return ExitCode.FAILURE if violations else ExitCode.SUCCESS

if __name__ == '__main__': sys.exit(main(parse_arguments()))
