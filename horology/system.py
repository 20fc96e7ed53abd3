"""
# System clock and time zone access.

# The system's real clock is read through &time.time_ns and counts POSIX
# seconds, so the fields are derived from it first and then mapped onto a
# calendar's stamp with &utc. The local offset comes from the C library's view of
# the configured zone with &offset.
"""
import time as source

from . import earth
from . import gregorian
from . import std
from .types import DateTime, TimeStamp

#: Day number of the unix epoch, 1970-01-01.
unix_epoch_days = gregorian.days_from_date((1970, 1, 1))

def _real_clock_read(time_ns=source.time_ns):
	return time_ns() // 100

def datetime_from_unix(ticks) -> DateTime:
	"""
	# The UTC fields of &ticks elapsed since the unix epoch ignoring leap seconds.
	"""
	days, tod = divmod(ticks, earth.ticks_in_day)
	y, m, d = gregorian.date_from_days(days + unix_epoch_days)
	h, mi, s, t = earth.timeofday(tod)
	return DateTime(gregorian.from_astronomical(y), gregorian.Month(m), d, h, mi, s, t)

def utc(calendar=std.utc) -> TimeStamp:
	"""
	# Get the current time according to the system's real clock.
	"""
	return calendar.universal.from_datetime(datetime_from_unix(_real_clock_read()))

def offset() -> int:
	"""
	# The offset of the system's local time zone from UTC in minutes.
	"""
	return source.localtime().tm_gmtoff // 60

def local(leaps=None) -> std.Calendar:
	"""
	# Construct a &std.Calendar using the current &offset of the system's zone.

	# The offset is fixed when the calendar is constructed; daylight saving
	# transitions require constructing a new calendar.
	"""
	return std.Calendar.from_minutes(offset(), leaps)
