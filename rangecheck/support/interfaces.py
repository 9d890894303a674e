"""
This file aggregates the abstract classes, constants, and exception types which RangeCheck deals in.

Every fatal condition has a short symbolic error code. The codes are part of the
external interface: they appear verbatim on the diagnostic channel, so scripts
may grep for them. The exception classes below each carry one of these codes,
plus whatever structured detail the detecting code happened to know about.

Nothing in here terminates the process. Leaf code raises; the command-line driver
(in `rangecheck.__main__`) is the one place which decides what an exception means
for the exit status.
"""

from enum import IntEnum
from typing import NamedTuple

CodePoint = int

ERR_EOF_ON_READING_NEXT_BYTE = 'ERR_EOF_ON_READING_NEXT_BYTE'
ERR_NEXT_BYTE_WRONG_PREFIX = 'ERR_NEXT_BYTE_WRONG_PREFIX'
ERR_NO_SUCH_CODE_POINT_EXISTS = 'ERR_NO_SUCH_CODE_POINT_EXISTS'
ERR_FAILED_TO_READ_RANGE = 'ERR_FAILED_TO_READ_RANGE'
ERR_TOO_MANY_RANGES = 'ERR_TOO_MANY_RANGES'
ERR_INPUT_READ_ERROR = 'ERR_INPUT_READ_ERROR'

class ExitCode(IntEnum):
	SUCCESS = 0
	FAILURE = 1

class RangeCheckError(ValueError):
	""" Base class of all fatal conditions. The `code` attribute is one of the ERR_* constants. """
	code = None
	def __str__(self): return self.code

class ConfigurationError(RangeCheckError):
	""" Something is wrong with the range expressions. Raised before any input is consumed. """

class RangeSyntaxError(ConfigurationError):
	code = ERR_FAILED_TO_READ_RANGE
	def __init__(self, expression:str):
		super().__init__(expression)
		self.expression = expression

class TooManyRanges(ConfigurationError):
	code = ERR_TOO_MANY_RANGES
	def __init__(self, count:int, limit:int):
		super().__init__(count, limit)
		self.count, self.limit = count, limit

class DecodeError(RangeCheckError):
	"""
	Raised when the byte stream stops making sense as UTF-8.
	Parameters are:
		the error code.
		the byte offset where the problem was detected.
	"""
	def __init__(self, code:str, position:int):
		super().__init__(code, position)
		self.code, self.position = code, position

class InputReadError(RangeCheckError):
	""" The byte source failed. The underlying OSError should be chained as __cause__. """
	code = ERR_INPUT_READ_ERROR


class Observation(NamedTuple):
	""" One decoded code point, whether it was acceptable, and the offset of its leading byte. """
	codepoint: CodePoint
	in_range: bool
	offset: int


class ViolationListener:
	"""
	Implement this interface to hear about code points which fall outside every range.
	In-range code points are not reported individually.
	"""
	def on_violation(self, observation:Observation):
		""" Called once per out-of-range code point, in stream order. """
	
	def on_finish(self, violations:int):
		""" Called once the whole stream was scanned without a fatal error. """
