"""
# Format and parse datetime strings.

# Primarily this module exposes two functions: &parser and &render.
# The only supported format is the ISO-8601 profile:

#!text
	YYYY-MM-DDTHH:MM:SS.fffffffZ

# Years outside of `1..9999` carry a sign and years before 1 CE use the civil
# numbering where `-0001` is 1 BCE. The fraction is rendered and parsed by a
# caller supplied &TickFormat; &decimal is the default.

# While formatting datetimes can usually occur without error, parsing them from strings
# can result in a variety of errors. The parsers raise subclasses of &.core.ParseError.
"""
import re
import functools
import collections

from . import core
from . import earth
from .types import DateTime

identifier = 'iso8601'

iso8601 = "{0}-{1:02}-{2:02}T{3:02}:{4:02}:{5:02}.{6}Z"
grammar = re.compile(
	r'([+-]?)([0-9]{4,})-([0-9]{2})-([0-9]{2})'
	r'T([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?Z'
)

#: Rendering and parsing functions for the tick field.
TickFormat = collections.namedtuple('TickFormat', ('format', 'parse'))

#: Number of decimal digits representing a tick.
tick_digits = len(str(earth.ticks_in_second)) - 1

def format_decimal_ticks(tick:int) -> str:
	return str(tick).rjust(tick_digits, '0')

def parse_decimal_ticks(digits:str) -> int:
	if len(digits) > tick_digits:
		raise ValueError("fraction exceeds tick precision: " + digits)
	return int(digits.ljust(tick_digits, '0'))

#: &int ticks as seven decimal digits.
decimal = TickFormat(format_decimal_ticks, parse_decimal_ticks)

def format_year(year):
	if 0 < year < 10000:
		return '%04d' % (year,)
	elif year < 0:
		return '-%04d' % (-year,)
	else:
		return '+%04d' % (year,)

def render(datetime, tick_format=decimal, _fmt=iso8601.format, int=int):
	"""
	# Render the fields of &datetime without validation.
	"""
	y, m, d, h, mi, s, t = datetime
	return _fmt(format_year(y), int(m), d, h, mi, s, tick_format.format(t))

def parse_iso8601(s, match=grammar.fullmatch):
	m = match(s)
	if m is None:
		raise core.ParseError(s, format=identifier, reason="does not match the grammar")

	return zip(
		('sign', 'year', 'month', 'day', 'hour', 'minute', 'second', 'subsecond'),
		m.groups(),
	)

def transform_iso8601(state, tick_parse, int=int):
	source, struct = state
	year = int(struct['year'])
	if struct['sign'] == '-':
		year = -year

	return DateTime(
		year,
		int(struct['month']),
		int(struct['day']),
		int(struct['hour']),
		int(struct['minute']),
		int(struct['second']),
		tick_parse(struct['subsecond'] or '0'),
	)

def _parse(fun, format):
	def EXCEPTION(src, fun=fun, format=format):
		try:
			return (src, dict(fun(src)))
		except core.ParseError:
			raise
		except Exception as e:
			parse_error = core.ParseError(src, format=format, reason=str(e))
			parse_error.__cause__ = e
			raise parse_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _structure(fun, format):
	def EXCEPTION(state, *args):
		try:
			return (state[0], fun(state, *args))
		except core.StructureError:
			raise
		except Exception as e:
			struct_error = core.StructureError(*state, format=format, reason=str(e))
			struct_error.__cause__ = e
			raise struct_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _integrity(fun, format):
	def EXCEPTION(state):
		try:
			return fun(state[1])
		except core.IntegrityError:
			raise
		except Exception as e:
			integ_error = core.IntegrityError(*state, format=format, reason=str(e))
			integ_error.__cause__ = e
			raise integ_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _identity(datetime):
	return datetime

def parser(tick_format=decimal, validate=_identity):
	"""
	# Construct a function parsing text into a &.types.DateTime.

	# [ Parameters ]
	# /tick_format/
		# The &TickFormat whose `parse` converts the fraction digits.
	# /validate/
		# Called with the structured &.types.DateTime. Exceptions raised by it
		# are reported as &.core.IntegrityError. Its result is returned by the
		# parser.
	"""
	def parser_composition(
		x,
		integ = _integrity(validate, identifier),
		struct = _structure(transform_iso8601, identifier),
		parse = _parse(parse_iso8601, identifier),
		tick_parse = tick_format.parse,
	):
		return integ(struct(parse(x), tick_parse))
	return parser_composition

def parse(text, tick_format=decimal):
	"""
	# Parse &text into the unvalidated fields of a &.types.DateTime.
	"""
	return parser(tick_format)(text)
