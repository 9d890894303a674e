"""
This module implements the essential algorithm: pull bytes from a source, assemble them
into code points by the UTF-8 rules, and classify each code point against a RangeSet.

Decoding is deliberately simple-minded. The leading byte's high bits announce how many
bytes make up the code point; each continuation byte must look like `10xxxxxx` and
contributes its low six bits. That's the whole state machine. Overlong forms, surrogates,
and values beyond U+10FFFF are decoded like anything else and left to the range test.

Three things stop a scan early, each with its own error code:
	* a leading byte which no template matches (a stray continuation byte, or 0xF8 and above),
	* a continuation byte without the `10` prefix,
	* the end of input partway through an announced sequence.

Running out of input at a code point boundary is simply the end of the scan.
"""
from typing import Iterator, Optional

from ..support import interfaces
from ..support.interfaces import CodePoint, DecodeError, InputReadError, Observation
from .ranges import RangeSet

END_OF_INPUT = -1 # Used in place of a byte value.

CHUNK_SIZE = 1 << 16

NEXT_BYTE_MASK = 0xC0   # 0b11000000
NEXT_BYTE_PREFIX = 0x80 # 0b10000000
PAYLOAD_MASK = 0x3F     # 0b00111111

# Templates for the leading byte, tried in order of increasing sequence length.
# Each entry is (marker mask, expected prefix):
TEMPLATES = (
	(0x80, 0x00), # 0xxxxxxx
	(0xE0, 0xC0), # 110xxxxx
	(0xF0, 0xE0), # 1110xxxx
	(0xF8, 0xF0), # 11110xxx
)


class CursorBase:
	"""
	Serves a byte source one byte at a time and keeps track of the offset.
	The decoder neither knows nor cares whether the bytes are already in memory.
	"""

	position: int

	def __init__(self):
		self.position = 0
	def next_byte(self) -> int:
		""" Return the next byte value, or END_OF_INPUT once the source has nothing more to give. """
		raise NotImplementedError(type(self))
	def read_error(self) -> Optional[OSError]:
		""" Return the failure (if any) which cut the source short. """
		return None

class BytesCursor(CursorBase):
	def __init__(self, subject):
		super().__init__()
		self._subject = memoryview(subject).cast('B')
	def next_byte(self) -> int:
		try: byte = self._subject[self.position]
		except IndexError: return END_OF_INPUT
		self.position += 1
		return byte

class StreamCursor(CursorBase):
	"""
	Reads a binary file-like object in chunks. `read1` is preferred where available,
	so that a pipe gets processed as data arrives rather than when a full chunk has.

	An OSError from the stream ends the input just as a clean end-of-file would.
	The failure is remembered, and it's up to the caller to ask about it afterward.
	"""
	def __init__(self, stream, chunk_size=CHUNK_SIZE):
		super().__init__()
		self._read = getattr(stream, 'read1', stream.read)
		self._chunk_size = chunk_size
		self._chunk = b''
		self._index = 0
		self._exhausted = False
		self._error = None
	def next_byte(self) -> int:
		if self._index >= len(self._chunk):
			if self._exhausted or not self._refill(): return END_OF_INPUT
		byte = self._chunk[self._index]
		self._index += 1
		self.position += 1
		return byte
	def _refill(self) -> bool:
		try: chunk = self._read(self._chunk_size)
		except OSError as ex:
			self._error = ex
			chunk = b''
		if not chunk:
			self._exhausted = True
			return False
		self._chunk, self._index = chunk, 0
		return True
	def read_error(self) -> Optional[OSError]: return self._error

def make_cursor(source) -> CursorBase:
	if isinstance(source, CursorBase): return source
	if isinstance(source, (bytes, bytearray, memoryview)): return BytesCursor(source)
	if hasattr(source, 'read'): return StreamCursor(source)
	raise TypeError(type(source))


def sequence_length(leading_byte:int, position:int=0) -> int:
	""" How many bytes (1 to 4) does this leading byte announce? """
	for count, (mask, prefix) in enumerate(TEMPLATES, 1):
		if leading_byte & mask == prefix: return count
	raise DecodeError(interfaces.ERR_NO_SUCH_CODE_POINT_EXISTS, position)

def decode_one(cursor:CursorBase) -> Optional[CodePoint]:
	"""
	Decode the next code point from the cursor, or return None at a clean end of input.
	"""
	start = cursor.position
	leading_byte = cursor.next_byte()
	if leading_byte == END_OF_INPUT: return None
	count = sequence_length(leading_byte, start)
	codepoint = leading_byte & ~TEMPLATES[count - 1][0] & 0xFF
	for _ in range(count - 1):
		position = cursor.position
		byte = cursor.next_byte()
		if byte == END_OF_INPUT: raise DecodeError(interfaces.ERR_EOF_ON_READING_NEXT_BYTE, position)
		if byte & NEXT_BYTE_MASK != NEXT_BYTE_PREFIX: raise DecodeError(interfaces.ERR_NEXT_BYTE_WRONG_PREFIX, position)
		codepoint = codepoint << 6 | byte & PAYLOAD_MASK
	return codepoint


class RangeScanner:
	"""
	Iterating over the scanner decodes the source and yields an Observation for
	every code point, lazily. It also keeps count of the ones found out of range.

	A decoding problem propagates out of the iteration as a DecodeError. If the
	source failed to read, that comes out as an InputReadError, but only once the
	iteration has otherwise run its course: at the moment of failure, the scanner
	cannot tell a broken source from one which ended normally.

	If you only care about the violations, `run(...)` drives the whole scan
	and passes each violation to a ViolationListener.
	"""
	def __init__(self, source, ranges:RangeSet):
		self.cursor = make_cursor(source)
		self.ranges = ranges
		self.violations = 0

	def __iter__(self) -> Iterator[Observation]:
		cursor, ranges = self.cursor, self.ranges
		while True:
			offset = cursor.position
			codepoint = decode_one(cursor)
			if codepoint is None: break
			in_range = codepoint in ranges
			if not in_range: self.violations += 1
			yield Observation(codepoint, in_range, offset)
		failure = cursor.read_error()
		if failure is not None: raise InputReadError() from failure

	def run(self, listener:interfaces.ViolationListener) -> int:
		""" Scan to the end, telling the listener about each violation. Returns the final count. """
		for observation in self:
			if not observation.in_range: listener.on_violation(observation)
		listener.on_finish(self.violations)
		return self.violations
