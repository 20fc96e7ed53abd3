"""
# Proleptic Gregorian calendar with UTC leap seconds.

# &Calendar maps &.types.TimeStamp, ticks since 2000-01-01T00:00:00 UTC, onto
# local &.types.DateTime fields. The configuration, a fixed offset and a leap
# second table, is set at construction and never changes; instances are safe for
# concurrent use.

#!python
	from horology import std, types, gregorian
	d = types.DateTime(2016, gregorian.Month.december, 31, 23, 59, 60, 0)
	assert std.utc.valid(d)
	ts = std.utc.from_datetime(d)
	assert std.utc.to_datetime(ts) == d

# [ Conversion ]

# The stamp counts every elapsed tick including leap seconds. Converting a UTC
# datetime adds the leap seconds of the minutes preceding it to its uniform count,
# the count of ticks that presumes every minute has sixty seconds. The local fields
# are the UTC fields shifted by the offset; the offset is required to be a whole
# number of minutes so that leap seconds remain at the end of a local minute.

# [ Normalization ]

# &Calendar.normalize truncates days that exceed the month: 31 May plus one month
# is 30 June, not 1 July. Days below one are raised to the first of the month.
# Time of day fields roll over into whole days and those days are applied after
# the truncation. Seconds past the end of a leap minute count its true length: one
# second after 23:59:60 is midnight.

# [ Elements ]
# /utc/
	# &Calendar with no offset and the built-in leap second table.
"""
import bisect
import logging

from . import abstract
from . import core
from . import earth
from . import format
from . import gregorian
from . import leapseconds
from . import scalar
from .types import TimeStamp, TimeInterval, DateTime, DateTimeInterval

log = logging.getLogger(__name__)

#: Day number of the epoch, 2000-01-01.
epoch_days = gregorian.days_from_date((2000, 1, 1))

#: Uniform ticks from 0000-01-01 to the epoch.
epoch_ticks = epoch_days * earth.ticks_in_day

#: Minute number of the epoch.
epoch_minute = epoch_days * earth.hours_in_day * earth.minutes_in_hour

class Calendar(abstract.Calendar):
	"""
	# Gregorian and UTC calendar.

	# [ Properties ]
	# /offset/
		# &.types.TimeInterval added to UTC to get local time.
	# /leaps/
		# The &.leapseconds.LeapSecondTable used for conversion.
	# /group/
		# The &.scalar.Group used for tick arithmetic.
	# /range/
		# The &.scalar.Range limiting the representable stamps.
	# /universal/
		# The calendar sharing the configuration without an offset.
	"""

	def __init__(self,
			offset=TimeInterval(0),
			leaps=None,
			group=scalar.integers,
			range=scalar.int64,
		):
		if leaps is None:
			leaps = leapseconds.LeapSecondTable()
		elif not isinstance(leaps, leapseconds.LeapSecondTable):
			leaps = leapseconds.LeapSecondTable(leaps)

		offset_ticks = range.integer(offset[0])
		offset_minutes, remainder = divmod(offset_ticks, earth.ticks_in_minute)
		if remainder:
			raise ValueError("offset must be a whole number of minutes: %r" %(offset,))

		self.offset = TimeInterval(offset[0])
		self.leaps = leaps
		self.group = group
		self.range = range

		self._offset_ticks = offset_ticks
		self._offset_minutes = offset_minutes

		# Stamp positions, relative to 0000-01-01, where each leap second takes effect.
		tps = earth.ticks_in_second
		self._positions = tuple([
			(minute * earth.ticks_in_minute) + ((60 if sign > 0 else 59) * tps) + (before * tps)
			for minute, sign, before in zip(leaps.minutes, leaps.signs, leaps.cumulative)
		])
		self._base = epoch_ticks + (leaps.count(epoch_minute) * tps)

		if offset_ticks == 0:
			self.universal = self
		else:
			self.universal = self.__class__(TimeInterval(group.zero()), leaps, group, range)

		log.debug("calendar offset %d minutes, %d leap seconds", offset_minutes, len(leaps))

	@classmethod
	def from_minutes(Class, minutes:int, leaps=None, group=scalar.integers, range=scalar.int64):
		"""
		# Construct the calendar from an offset in minutes.
		"""
		offset = range.construct(minutes * earth.ticks_in_minute)
		if offset is None:
			raise core.RangeOverflow(minutes, range.minimum, range.maximum)
		return Class(TimeInterval(offset), leaps, group, range)

	def __repr__(self):
		return '<%s offset=%dm leaps=%d>' %(
			self.__class__.__name__, self._offset_minutes, len(self.leaps)
		)

	@property
	def epoch(self):
		"""
		# The local &.types.DateTime of stamp zero.
		"""
		return self.to_datetime(TimeStamp(self.range.construct(0)))

	def days_in_month(self, year, month):
		return gregorian.days_in_month(gregorian.to_astronomical(year), month)

	def valid_fields(self, datetime):
		"""
		# Whether the fields of &datetime are within range, disregarding the scalar range.
		"""
		y, m, d, h, mi, s, t = datetime

		if y == 0 or not 1 <= m <= gregorian.months_in_year:
			return False
		if not 1 <= d <= gregorian.days_in_month(gregorian.to_astronomical(y), m):
			return False
		if not 0 <= h < earth.hours_in_day or not 0 <= mi < earth.minutes_in_hour:
			return False
		if not 0 <= self.range.integer(t) < earth.ticks_in_second:
			return False
		if not 0 <= s <= 60:
			return False

		if s >= 59:
			# Leap second window of the UTC minute.
			sign = self.leaps.find(leapseconds.minute_number(datetime) - self._offset_minutes)
			if s == 60:
				return sign > 0
			return sign >= 0

		return True

	def valid(self, datetime):
		return self.from_datetime(datetime) is not None

	def to_datetime(self, stamp):
		tps = earth.ticks_in_second
		v = self.range.integer(stamp[0]) + self._base

		k = bisect.bisect_right(self._positions, v)
		leap = (
			k > 0 and self.leaps.signs[k-1] > 0 and
			v < self._positions[k-1] + tps
		)

		if leap:
			# Within an inserted second; decompose as second 59 and substitute.
			u = v - (self.leaps.cumulative[k-1] * tps) - tps
		else:
			u = v - (self.leaps.cumulative[k] * tps)

		days, tod = divmod(u + self._offset_ticks, earth.ticks_in_day)
		y, m, d = gregorian.date_from_days(days)
		h, mi, s, t = earth.timeofday(tod)
		if leap:
			s = 60

		return DateTime(
			gregorian.from_astronomical(y), gregorian.Month(m), d,
			h, mi, s, self.range.construct(t),
		)

	def from_datetime(self, datetime):
		if not self.valid_fields(datetime):
			return None

		y, m, d, h, mi, s, t = datetime
		days = gregorian.days_from_date((gregorian.to_astronomical(y), m, d))
		u = (days * earth.ticks_in_day) + earth.ticks_from_timeofday(h, mi, s, self.range.integer(t))
		u -= self._offset_ticks

		utc_minute = leapseconds.minute_number(datetime) - self._offset_minutes
		v = u + (self.leaps.count(utc_minute) * earth.ticks_in_second)

		r = self.range.construct(v - self._base)
		if r is None:
			return None
		return TimeStamp(r)

	def plus(self, interval, datetime):
		"""
		# Add the fields of &interval to &datetime.

		# Months carry into years and years skip zero; the remaining fields are
		# added without carrying. &None when the group reports a tick overflow.
		"""
		years, months, days, hours, minutes, seconds, ticks = interval
		y, m, d, h, mi, s, t = datetime

		tick = self.group.add(t, ticks)
		if tick is None:
			return None

		ay, m = gregorian.cascade_months(gregorian.to_astronomical(y) + years, m + months)
		return DateTime(
			gregorian.from_astronomical(ay), gregorian.Month(m), d + days,
			h + hours, mi + minutes, s + seconds, tick,
		)

	def diff(self, former, latter):
		group = self.group
		n = group.negate(latter.tick)
		ticks = None if n is None else group.add(former.tick, n)
		if ticks is None:
			return None

		return DateTimeInterval(
			gregorian.to_astronomical(former.year) - gregorian.to_astronomical(latter.year),
			former.month - latter.month,
			former.day - latter.day,
			former.hour - latter.hour,
			former.minute - latter.minute,
			former.second - latter.second,
			ticks,
		)

	def normalize(self, datetime):
		if self.valid(datetime):
			return datetime

		y, m, d, h, mi, s, t = datetime

		# Seconds beyond the last second of a leap minute count from the following minute.
		sign = self.leaps.find(leapseconds.minute_number(datetime) - self._offset_minutes)
		if sign:
			excess = s + (self.range.integer(t) // earth.ticks_in_second)
			if excess > (60 if sign > 0 else 58):
				s -= sign

		# Time of day into whole days.
		carry, tod = divmod(
			earth.ticks_from_timeofday(h, mi, s, self.range.integer(t)),
			earth.ticks_in_day
		)

		# Month into year, then truncate the day into the month.
		ay, m = gregorian.cascade_months(gregorian.to_astronomical(y or 1), m)
		d = min(max(d, 1), gregorian.days_in_month(ay, m))

		days = gregorian.days_from_date((ay, m, d)) + carry
		h, mi, s, t = earth.timeofday(tod)

		if s == 59:
			minute = ((days * earth.hours_in_day) + h) * earth.minutes_in_hour + mi
			if self.leaps.find(minute - self._offset_minutes) < 0:
				# Deleted second; move to the start of the next minute.
				carry, tod = divmod(earth.ticks_from_timeofday(h, mi + 1, 0, t), earth.ticks_in_day)
				days += carry
				h, mi, s, t = earth.timeofday(tod)

		ay, m, d = gregorian.date_from_days(days)
		result = DateTime(
			gregorian.from_astronomical(ay), gregorian.Month(m), d,
			h, mi, s, self.range.construct(t),
		)

		if self.from_datetime(result) is None:
			# Saturate at the representable bounds.
			if days >= epoch_days:
				limit = self.range.maximum
			else:
				limit = self.range.minimum
			return self.to_datetime(TimeStamp(self.range.construct(limit)))

		return result

	def _integrity(self, fields):
		stamp = self.universal.from_datetime(fields)
		if stamp is None:
			if self.universal.valid_fields(fields):
				raise core.RangeOverflow(fields, self.range.minimum, self.range.maximum)
			raise core.InvalidDateTime(fields)
		return stamp

	def to_text(self, datetime, tick_format=format.decimal):
		"""
		# Render &datetime as UTC text.

		# The local fields are converted through the offset, so the text always
		# carries the `Z` designator.
		"""
		stamp = self.from_datetime(datetime)
		if stamp is None:
			raise core.InvalidDateTime(datetime)
		return format.render(self.universal.to_datetime(stamp), tick_format)

	def from_text(self, text, tick_format=format.decimal):
		"""
		# Parse UTC text into the calendar's local &.types.DateTime.

		# Raises &.core.ParseError, or one of its subclasses, on failure.
		"""
		stamp = format.parser(tick_format, self._integrity)(text)
		return self.to_datetime(stamp)

utc = Calendar()
