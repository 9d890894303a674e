"""
A set of acceptable code points is, in practice, a handful of intervals scattered over
a space of more than a million values. It's nonsense to work with that in uncompressed form.

So a character class is represented as a sorted list of lower bounds with implied
exclusion below the first listed bound. That is: a code point is a member of the
class exactly when an odd number of lower-bounds in the class are less-than-or-equal-to
that code point's value. (See the `in_class(...)` function.) Membership is then a
binary search no matter how many ranges went into the class.

Intervals which overlap or touch simply merge when combined, so a code point covered
by several of the caller's ranges is a member exactly once.

One deliberate quirk: an interval given backwards (first > last) is empty, not swapped.
No value is simultaneously at-or-above the first bound and at-or-below the last.
"""
import bisect, operator

# How to tell if a code point is a member of the class:
def in_class(cls:list, codepoint:int) -> bool: return bool(bisect.bisect_right(cls, codepoint) % 2)


# Character class construction and set-operations:
EMPTY = []

def range_class(first:int, last:int) -> list: return [first, last+1] if first <= last else EMPTY
def combine(op, x:list, y:list) -> list:
	""" Arbitrary boolean combination of character classes controlled by 'op :: (bool, bool) -> bool'  """
	result = []
	for b in sorted({0}.union(x, y)): # The zero is included in case op(False, False) == True.
		if len(result) % 2 != bool(op(in_class(x, b), in_class(y, b))):
			result.append(b)
	return result
def union(a:list, b:list) -> list: return combine(operator.or_, a, b)

def union_of_ranges(pairs) -> list:
	""" Build the class covering every (first, last) pair given. Backwards pairs contribute nothing. """
	cls = EMPTY
	for first, last in pairs: cls = union(cls, range_class(first, last))
	return cls
