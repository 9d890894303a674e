"""
Turn range expressions such as `U+0000-007F` into a RangeSet.

The expression syntax follows what C's `scanf("U+%lX-%lX")` would accept: each
number may be preceded by (ASCII) whitespace, a sign, and a `0x` prefix, any count
of hex digits is allowed, and reading stops at the first character which cannot
continue the number. Whatever follows the second number is ignored.

A minus sign does what `strtoul` does with it: the value wraps around modulo 2**64.
So `U+-1-7F` is accepted, but its first bound is far beyond any code point.

Bounds are taken at face value. In particular nobody checks that `first <= last`;
a backwards range is accepted and simply matches nothing.
"""
import re
from typing import NamedTuple, Iterable, Optional

from ..support.interfaces import CodePoint, RangeSyntaxError, TooManyRanges
from . import charset

MAX_RANGES = 32

_HEX = r'[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9A-Fa-f]))?([0-9A-Fa-f]+)'
ULONG_MODULUS = 1 << 64
RANGE_PATTERN = re.compile(r'U\+' + _HEX + '-' + _HEX)

class Range(NamedTuple):
	first: CodePoint
	last: CodePoint
	
	def __str__(self): return 'U+%04X-%04X'%self

def parse_range(expression:str) -> Range:
	match = RANGE_PATTERN.match(expression)
	if match is None: raise RangeSyntaxError(expression)
	sign_1, digits_1, sign_2, digits_2 = match.groups()
	return Range(_unsigned(sign_1, digits_1), _unsigned(sign_2, digits_2))

def _unsigned(sign:str, digits:str) -> int:
	value = int(digits, 16)
	return (-value) % ULONG_MODULUS if sign == '-' else value


class RangeSet:
	"""
	An immutable collection of ranges, queried as the union of its members.
	The ranges keep the order they were given in, which matters to nobody.
	"""
	def __init__(self, ranges:Iterable[Range]=()):
		self.ranges = tuple(ranges)
		self.__cls = charset.union_of_ranges(self.ranges)
	
	def __contains__(self, codepoint:CodePoint) -> bool: return charset.in_class(self.__cls, codepoint)
	def __len__(self): return len(self.ranges)
	def __iter__(self): return iter(self.ranges)
	def __repr__(self): return 'RangeSet(%s)'%', '.join(map(str, self.ranges))

def build_range_set(expressions:Iterable[str], *, limit:Optional[int]=MAX_RANGES) -> RangeSet:
	"""
	Parse every expression, in order. Too many expressions is an error on its own,
	reported before looking at any of them. Pass `limit=None` to accept any number.
	"""
	expressions = list(expressions)
	if limit is not None and len(expressions) > limit: raise TooManyRanges(len(expressions), limit)
	return RangeSet(map(parse_range, expressions))
