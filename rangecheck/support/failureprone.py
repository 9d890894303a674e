"""
This module is all about showing what went wrong, and where it shows up is standard error.

Two kinds of news go there. Findings are code points outside the accepted ranges: one
line apiece, as they turn up, and a total at the end. Fatal errors are one line saying
"Error:" and the error code. The line formats are meant for grepping, so they don't change.

The Reporter takes the stream to write to as a parameter, which keeps it honest in tests.
"""

import sys

from . import interfaces

ERROR_FORMAT = "Error: %s"
SUMMARY_FORMAT = "total code points outside of specified ranges: %d"

def format_codepoint(codepoint:interfaces.CodePoint) -> str:
	""" At least four uppercase hex digits, more as needed. """
	return "U+%04X" % codepoint

def describe(ex:interfaces.RangeCheckError) -> str:
	lines = [ERROR_FORMAT % ex.code]
	cause = ex.__cause__
	if isinstance(ex, interfaces.InputReadError) and cause is not None:
		lines.append("\t" + (cause.strerror or str(cause)))
	return "\n".join(lines)

class Reporter(interfaces.ViolationListener):
	def __init__(self, stream=None):
		self.stream = sys.stderr if stream is None else stream
	
	def emit(self, text:str):
		print(text, file=self.stream, flush=True)
	
	def on_violation(self, observation:interfaces.Observation):
		self.emit(format_codepoint(observation.codepoint))
	
	def on_finish(self, violations:int):
		if violations: self.emit(SUMMARY_FORMAT % violations)
	
	def fatal(self, ex:interfaces.RangeCheckError):
		self.emit(describe(ex))
