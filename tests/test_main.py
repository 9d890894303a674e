import io
import unittest

from rangecheck.__main__ import main, parse_arguments
from rangecheck.support.interfaces import ExitCode


class UntouchableStream:
	""" Any attempt to read means the configuration was not checked first. """
	def read(self, size=-1): raise AssertionError('input should not have been read')


class TestCommandLine(unittest.TestCase):
	def run_tool(self, argv, data):
		stdin = data if hasattr(data, 'read') else io.BytesIO(data)
		stderr = io.StringIO()
		status = main(parse_arguments(argv), stdin=stdin, stderr=stderr)
		return status, stderr.getvalue().splitlines()
	
	def test_00_empty_input_no_ranges(self):
		self.assertEqual((ExitCode.SUCCESS, []), self.run_tool([], b''))
	
	def test_01_ascii_within_ascii(self):
		self.assertEqual((ExitCode.SUCCESS, []), self.run_tool(['U+0000-007F'], b'plain old text\n'))
	
	def test_02_euro_sign(self):
		status, lines = self.run_tool(['U+0000-007F'], 'A€'.encode('utf-8'))
		self.assertEqual(ExitCode.FAILURE, status)
		self.assertEqual(['U+20AC', 'total code points outside of specified ranges: 1'], lines)
	
	def test_03_one_line_per_occurrence(self):
		status, lines = self.run_tool(['U+0041-005A', 'U+0061-007A'], 'aé\nZ\U0001F600é'.encode('utf-8'))
		self.assertEqual(ExitCode.FAILURE, status)
		self.assertEqual(['U+00E9', 'U+000A', 'U+1F600', 'U+00E9', 'total code points outside of specified ranges: 4'], lines)
	
	def test_04_no_ranges_means_nothing_fits(self):
		status, lines = self.run_tool([], b'\x00')
		self.assertEqual(ExitCode.FAILURE, status)
		self.assertEqual(['U+0000', 'total code points outside of specified ranges: 1'], lines)
	
	def test_05_bounds_are_inclusive(self):
		self.assertEqual((ExitCode.SUCCESS, []), self.run_tool(['U+00E9-20AC'], 'é€'.encode('utf-8')))
	
	def test_06_decode_errors(self):
		for data, code in [
			(b'\x80', 'ERR_NO_SUCH_CODE_POINT_EXISTS'),
			(b'\xE2', 'ERR_EOF_ON_READING_NEXT_BYTE'),
			(b'\xE2\x82A', 'ERR_NEXT_BYTE_WRONG_PREFIX'),
		]:
			with self.subTest(code=code):
				self.assertEqual((ExitCode.FAILURE, ['Error: '+code]), self.run_tool(['U+0000-FFFF'], data))
	
	def test_07_findings_before_an_error_stand(self):
		status, lines = self.run_tool(['U+0000-007F'], 'é'.encode('utf-8') + b'\xFF')
		self.assertEqual(ExitCode.FAILURE, status)
		self.assertEqual(['U+00E9', 'Error: ERR_NO_SUCH_CODE_POINT_EXISTS'], lines)
	
	def test_08_too_many_ranges(self):
		thirty_two = ['U+%04X-%04X'%(i, i) for i in range(32)]
		for argv in (thirty_two + ['U+0100-0100'], ['--'] + thirty_two):
			with self.subTest(argv=argv[:2]):
				self.assertEqual((ExitCode.FAILURE, ['Error: ERR_TOO_MANY_RANGES']), self.run_tool(argv, UntouchableStream()))
	
	def test_09_bad_range(self):
		for argv in (['U+0000'], ['U+0000-007F', 'latin'], ['-x'], ['U+0-7F', '--nonsense'], ['--'], ['U+0-7F', '--', 'U+80-FF'], ['-h'], ['--help']):
			with self.subTest(argv=argv):
				self.assertEqual((ExitCode.FAILURE, ['Error: ERR_FAILED_TO_READ_RANGE']), self.run_tool(argv, UntouchableStream()))
	
	def test_10_read_error(self):
		class Failing:
			def read(self, size=-1): raise OSError(5, 'Input/output error')
		self.assertEqual((ExitCode.FAILURE, ['Error: ERR_INPUT_READ_ERROR', '\tInput/output error']), self.run_tool([], Failing()))
	
	def test_11_backwards_range_is_silently_empty(self):
		status, lines = self.run_tool(['U+007F-0000'], b'A')
		self.assertEqual(ExitCode.FAILURE, status)
		self.assertEqual(['U+0041', 'total code points outside of specified ranges: 1'], lines)
	
	def test_12_arguments_pass_through_verbatim(self):
		argv = ['U+0-7F', '--', '-h', '']
		self.assertEqual(argv, parse_arguments(argv))


if __name__ == '__main__':
	unittest.main()
