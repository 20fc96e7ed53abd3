"""
# Exception taxonomy for the time package.

# Conversions report invalid or overflowed input with &None results; the classes
# here are raised by the text codec and by operations that cannot return &None.

# [ Elements ]
# /Error/
	# Base class of all exceptions raised by the package.
# /InvalidDateTime/
	# A &.types.DateTime failed a field range or leap second constraint.
# /RangeOverflow/
	# An instant does not fit in the representable &.types.TimeStamp range.
# /FormatError/
	# Base class of codec failures; carries the source text and a reason.
"""

class Error(Exception):
	pass

class InvalidDateTime(Error, ValueError):
	"""
	# Raised when an operation requires a valid datetime and was given one that is not.
	"""

	def __init__(self, datetime, reason='invalid datetime'):
		self.datetime = datetime
		self.reason = reason

	def __str__(self):
		return "%s: %r" %(self.reason, self.datetime)

class RangeOverflow(Error, OverflowError):
	"""
	# Raised when an instant falls outside of the representable range.
	"""

	def __init__(self, value, minimum, maximum):
		self.value = value
		self.minimum = minimum
		self.maximum = maximum

	def __str__(self):
		return "%r not within [%r, %r]" %(self.value, self.minimum, self.maximum)

class FormatError(Error, ValueError):
	"""
	# Base class for formatting and parsing errors.

	# [ Properties ]
	# /source/
		# The text, or object, that could not be processed.
	# /format/
		# Identifier of the format that was being used.
	# /reason/
		# Short description of the failure.
	"""

	def __init__(self, source, *args, format=None, reason=None):
		self.source = source
		self.structure = args
		self.format = format
		self.reason = reason

	def __str__(self):
		s = "%s: %r" %(self.format or 'unknown', self.source)
		if self.reason:
			s += ' (' + self.reason + ')'
		return s

class ParseError(FormatError):
	"""
	# The source text did not match the grammar of the format.
	"""

class StructureError(ParseError):
	"""
	# The matched fields could not be converted into a datetime structure.
	"""

class IntegrityError(ParseError):
	"""
	# The structured fields do not identify a valid datetime of the calendar.
	"""
