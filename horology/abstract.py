"""
# Abstract base classes for calendars.

# Primarily, this module exists to document the interface of &Calendar.

# A calendar maps the linear clock, &.types.TimeStamp, onto calendar fields,
# &.types.DateTime. The Gregorian and UTC implementation is &.std.Calendar;
# other calendar systems are added as further implementations of the same
# interface.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Calendar(typing.Protocol):
	"""
	# The mapping between &.types.TimeStamp and a calendar's &.types.DateTime fields.

	# [ Invariants ]
	#!python
		if calendar.valid(d):
			assert calendar.to_datetime(calendar.from_datetime(d)) == d
	"""

	@abstractmethod
	def to_datetime(self, stamp):
		"""
		# The calendar fields of the &stamp.

		# Total over the representable stamps and injective for a calendar
		# whose mapping is a bijection; the image is exactly the set of
		# datetimes for which &valid is &True.
		"""

	@abstractmethod
	def from_datetime(self, datetime):
		"""
		# The &.types.TimeStamp identified by &datetime.

		# &None when &datetime is not valid or when the instant is not
		# representable by the calendar's scalar range.
		"""

	@abstractmethod
	def valid(self, datetime) -> bool:
		"""
		# Whether &datetime is in the image of &to_datetime.
		"""

	@abstractmethod
	def plus(self, interval, datetime):
		"""
		# Apply the &.types.DateTimeInterval to &datetime field by field.

		# The result is not required to be valid; &normalize applies the
		# calendar's policy for fields outside of their range.
		"""

	@abstractmethod
	def diff(self, former, latter):
		"""
		# The field-wise &.types.DateTimeInterval from &latter to &former.

		#!python
			assert calendar.plus(calendar.diff(a, b), b) == a
		"""

	@abstractmethod
	def normalize(self, datetime):
		"""
		# Convert &datetime into a valid datetime according to the calendar's policy.

		# Idempotent on valid input.
		"""

	@abstractmethod
	def to_text(self, datetime, tick_format):
		"""
		# Serialize &datetime using &tick_format for the sub-second field.
		"""

	@abstractmethod
	def from_text(self, text, tick_format):
		"""
		# Parse &text produced by &to_text with the same &tick_format.
		"""
