"""
# Leap second tables.

# A &LeapSecondTable is an immutable, ascending sequence of &.types.LeapSecondRecord
# instances. Calendars consult the table during conversion; refreshing the
# knowledge of announced leap seconds means constructing a new table and calendar.

# [ Elements ]
# /records/
	# The leap seconds inserted into UTC from 1972 through 2016.
# /listfile/
	# Default location of the IETF `leap-seconds.list` file.
# /environ/
	# Environment variable overriding &listfile.
"""
import os
import bisect
import logging

from . import gregorian
from . import earth
from .types import DateTime, LeapSecondRecord

log = logging.getLogger(__name__)

listfile = '/usr/share/zoneinfo/leap-seconds.list'
environ = 'LEAPSECONDS'

#: NTP epoch, 1900-01-01, as a day number.
ntp_epoch_days = gregorian.days_from_date((1900, 1, 1))

records = tuple([
	LeapSecondRecord.insertion(y, m, d) for (y, m, d) in [
		(1972, 6, 30), (1972, 12, 31), (1973, 12, 31), (1974, 12, 31),
		(1975, 12, 31), (1976, 12, 31), (1977, 12, 31), (1978, 12, 31),
		(1979, 12, 31), (1981, 6, 30), (1982, 6, 30), (1983, 6, 30),
		(1985, 6, 30), (1987, 12, 31), (1989, 12, 31), (1990, 12, 31),
		(1992, 6, 30), (1993, 6, 30), (1994, 6, 30), (1995, 12, 31),
		(1997, 6, 30), (1998, 12, 31), (2005, 12, 31), (2008, 12, 31),
		(2012, 6, 30), (2015, 6, 30), (2016, 12, 31),
	]
])

def minute_number(datetime):
	"""
	# The number of minutes from 0000-01-01T00:00 to the minute of the UTC &datetime.
	"""
	y, m, d, h, mi = datetime[:5]
	days = gregorian.days_from_date((gregorian.to_astronomical(y), m, d))
	return ((days * earth.hours_in_day) + h) * earth.minutes_in_hour + mi

def check(record):
	"""
	# Raise &ValueError if the &record does not describe a leap second.
	"""
	dt, sign = record
	y, m, d, h, mi, s, t = dt

	if sign not in (1, -1):
		raise ValueError("leap second sign must be 1 or -1: %r" %(record,))
	if y == 0 or not 1 <= m <= gregorian.months_in_year:
		raise ValueError("leap second date is invalid: %r" %(record,))
	if not 1 <= d <= gregorian.days_in_month(gregorian.to_astronomical(y), m):
		raise ValueError("leap second day is invalid: %r" %(record,))
	if not 0 <= h < earth.hours_in_day or not 0 <= mi < earth.minutes_in_hour:
		raise ValueError("leap second time is invalid: %r" %(record,))
	if s != (60 if sign > 0 else 59) or t != 0:
		raise ValueError("leap second must identify second 60 or 59 of the minute: %r" %(record,))

class LeapSecondTable(object):
	"""
	# Sorted leap second records supporting binary search by UTC minute.

	# [ Properties ]
	# /records/
		# The &.types.LeapSecondRecord instances in ascending order.
	# /minutes/
		# The &minute_number of each record.
	# /cumulative/
		# The sum of the record signs preceding each index. One longer than &records.
	"""
	__slots__ = ('records', 'minutes', 'signs', 'cumulative',)

	def __init__(self, records=records):
		records = tuple(LeapSecondRecord(DateTime(*r[0]), r[1]) for r in records)
		for r in records:
			check(r)

		minutes = tuple(map(minute_number, (r.datetime for r in records)))
		for former, latter in zip(minutes, minutes[1:]):
			if not former < latter:
				raise ValueError("leap second records must be strictly ascending")

		total = 0
		cumulative = [0]
		for r in records:
			total += r.sign
			cumulative.append(total)

		self.records = records
		self.minutes = minutes
		self.signs = tuple(r.sign for r in records)
		self.cumulative = tuple(cumulative)

	def __repr__(self):
		return '<%s[%d]>' %(self.__class__.__name__, len(self.records))

	def __len__(self):
		return len(self.records)

	def __iter__(self):
		return iter(self.records)

	def __getitem__(self, index):
		return self.records[index]

	def __eq__(self, ob):
		return isinstance(ob, LeapSecondTable) and self.records == ob.records

	def __hash__(self):
		return hash(self.records)

	def find(self, minute, bisect=bisect.bisect_left):
		"""
		# The sign of the leap second occurring in the UTC &minute; zero if none.
		"""
		i = bisect(self.minutes, minute)
		if i < len(self.minutes) and self.minutes[i] == minute:
			return self.signs[i]
		return 0

	def count(self, minute, bisect=bisect.bisect_left):
		"""
		# The total of leap seconds in the minutes preceding &minute.
		"""
		return self.cumulative[bisect(self.minutes, minute)]

def parse_list(lines):
	"""
	# Construct a &LeapSecondTable from the lines of an IETF `leap-seconds.list` file.

	# Data lines hold NTP seconds and the TAI-UTC difference effective from that
	# time. The leap second is in the last minute of the preceding UTC day and its
	# sign is the change in the difference.
	"""
	found = []
	previous = None

	for line in lines:
		data = line.split('#', 1)[0].strip()
		if not data:
			continue

		fields = data.split()
		if len(fields) < 2:
			raise ValueError("leap second entry requires two fields: %r" %(line,))
		ntp, difference = int(fields[0]), int(fields[1])

		if previous is not None:
			sign = difference - previous
			if sign not in (1, -1):
				raise ValueError("TAI-UTC must change by one second: %r" %(line,))
			days = ntp_epoch_days + (ntp // (earth.ticks_in_day // earth.ticks_in_second))
			y, m, d = gregorian.date_from_days(days - 1)
			y = gregorian.from_astronomical(y)
			if sign > 0:
				found.append(LeapSecondRecord.insertion(y, m, d))
			else:
				found.append(LeapSecondRecord.deletion(y, m, d))
		previous = difference

	return LeapSecondTable(found)

def load(path=None):
	"""
	# Load the leap second table from a `leap-seconds.list` file.

	# When &path is not given, the file named by the &environ variable or the
	# &listfile is used, and the built-in &records when neither exists.
	"""
	if path is None:
		path = os.environ.get(environ) or listfile
		if not os.path.exists(path):
			log.info("leap second list %r not found; using built-in table", path)
			return LeapSecondTable(records)

	with open(path, 'r', encoding='ascii') as f:
		table = parse_list(f)

	log.debug("loaded %d leap seconds from %r", len(table), path)
	return table
