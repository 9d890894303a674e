"""
Audit files for characters that won't survive a trip through Latin-1.

Usage: py example/latin1_audit.py FILE...

For each file, list the line and column of every code point beyond U+00FF.
This shows off using the scanner as an iterator, rather than through the CLI.
"""

import sys

from rangecheck.scanning.ranges import build_range_set
from rangecheck.scanning.recognition import RangeScanner
from rangecheck.support.failureprone import format_codepoint
from rangecheck.support.interfaces import RangeCheckError

LATIN_1 = build_range_set(['U+0000-00FF'])

def audit(source):
	""" Yield (line, column, codepoint) for each offending code point. Lines and columns count from 1. """
	line, column = 1, 0
	for codepoint, in_range, offset in RangeScanner(source, LATIN_1):
		column += 1
		if not in_range: yield line, column, codepoint
		if codepoint == 10: line, column = line + 1, 0

def main(paths):
	clean = True
	for path in paths:
		with open(path, 'rb') as fh:
			try:
				for line, column, codepoint in audit(fh):
					clean = False
					print("%s:%d:%d: %s"%(path, line, column, format_codepoint(codepoint)))
			except RangeCheckError as ex:
				clean = False
				print("%s: %s"%(path, ex), file=sys.stderr)
	return 0 if clean else 1

if __name__ == '__main__': sys.exit(main(sys.argv[1:]))
