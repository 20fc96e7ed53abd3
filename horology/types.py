"""
# Value types for points in time, measures of time, and calendar fields.

#!python
	from horology import types, algebra, scalar
	y2k = types.TimeStamp(0)
	two_hours = types.TimeInterval(2 * 60 * 60 * 10_000_000)

	ts = algebra.plus(scalar.integers, two_hours, y2k)
	assert algebra.diff(scalar.integers, ts, y2k) == two_hours

# [ Elements ]

# /TimeInterval/
	# Signed count of ticks; the measure type.
# /TimeStamp/
	# Ticks since the epoch; the point type.
# /DateTime/
	# Calendar fields identifying a point in a calendar.
# /DateTimeInterval/
	# Calendar fields identifying a calendar dependent quantity of time.
# /LeapSecondRecord/
	# An announced leap second and its direction.
"""
import collections

class TimeInterval(tuple):
	"""
	# A quantity of time in ticks, 100 nanoseconds.

	# Arithmetic is performed by &.algebra using an explicit &.scalar.Group.
	"""
	__slots__ = ()

	def __new__(Class, ticks):
		return super().__new__(Class, (ticks,))

	@property
	def ticks(self):
		return self[0]

	def __repr__(self):
		return "(time.interval@%r)" %(self[0],)

class TimeStamp(tuple):
	"""
	# A point on the linear clock; ticks since the epoch, 2000-01-01T00:00:00 UTC.

	# Instances are not calendar aware; fields are extracted by a calendar.
	"""
	__slots__ = ()

	def __new__(Class, ticks):
		return super().__new__(Class, (ticks,))

	@property
	def ticks(self):
		return self[0]

	def __repr__(self):
		return "(time.stamp@%r)" %(self[0],)

_datetime_fields = ('year', 'month', 'day', 'hour', 'minute', 'second', 'tick')

class DateTime(collections.namedtuple('DateTime', _datetime_fields, defaults=(1, 1, 0, 0, 0, 0))):
	"""
	# Calendar fields of a point in time.

	# Instances are not required to be valid; &.abstract.Calendar.valid
	# identifies whether a calendar can map the fields onto its clock.
	"""
	__slots__ = ()

	@property
	def minutes(self):
		"""
		# The fields identifying the minute containing the point.
		"""
		return self[:5]

	def __repr__(self):
		y, m, d, h, mi, s, t = self
		return "(time.datetime@'%d-%02d-%02dT%02d:%02d:%02d+%r')" %(y, m, d, h, mi, s, t)

_interval_fields = ('years', 'months', 'days', 'hours', 'minutes', 'seconds', 'ticks')

class DateTimeInterval(collections.namedtuple('DateTimeInterval', _interval_fields, defaults=(0,)*7)):
	"""
	# Field-wise quantity of calendar time.

	# Adding a month has no fixed length in ticks, so instances only have
	# meaning in combination with a calendar's &.abstract.Calendar.plus.
	"""
	__slots__ = ()

class LeapSecondRecord(collections.namedtuple('LeapSecondRecord', ('datetime', 'sign'))):
	"""
	# An announced leap second.

	# [ Properties ]
	# /datetime/
		# The UTC &DateTime of the affected second. The second field is `60` for
		# an insertion and `59` for a deletion.
	# /sign/
		# `1` for an inserted second, `-1` for a deleted second.
	"""
	__slots__ = ()

	@classmethod
	def insertion(Class, year, month, day, hour=23, minute=59):
		return Class(DateTime(year, month, day, hour, minute, 60, 0), 1)

	@classmethod
	def deletion(Class, year, month, day, hour=23, minute=59):
		return Class(DateTime(year, month, day, hour, minute, 59, 0), -1)

	@property
	def minute(self):
		return self.datetime.minutes
