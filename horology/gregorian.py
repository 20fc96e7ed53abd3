"""
# Proleptic Gregorian calendar rules.

# The functions of this module work with astronomical years: year zero exists and
# precedes year one. &to_astronomical and &from_astronomical convert to and from the
# civil numbering of &.types.DateTime, where `-1` is 1 BCE and there is no year zero.

# Day numbers count days from 0000-01-01. The conversions resolve them against the
# 400 year cycle described by &cycle, so no iteration over years is necessary.
"""
import enum
from . import calendar as callib

#: Lowercase English month names, January first.
month_names = (
	"january", "february", "march", "april",
	"may", "june", "july", "august",
	"september", "october", "november", "december",
)

months_in_year = len(month_names)

#: One-based months of the year.
Month = enum.IntEnum('Month', month_names, module=__name__)

#: Days in each month of a common year.
common_year = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

#: Days in each month of a leap year.
leap_year = common_year[:1] + (29,) + common_year[2:]

## Cycle Tree
# Four years beginning with a leap year.
olympiad = (
	('leap', 1, leap_year),
	('common', 3, common_year),
)

# Four hundred years starting at a year divisible by 400. The first century has
# every fourth year leap; the following three begin with a common year in place of
# the leap year.
cycle = (
	'gregorian', 1, (
		('leading-century', 25, olympiad),
		('trailing-centuries', 3, (
			('century-start', 4, common_year),
			('century-rest', 24, olympiad),
		)),
	)
)

#: &cycle annotated by &.calendar.aggregate.
tree = callib.aggregate(cycle)

months_in_cycle, days_in_cycle = tree.totals
years_in_cycle = months_in_cycle // months_in_year

def year_is_leap(year):
	"""
	# Whether the astronomical &year has a February 29.
	"""
	return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def days_in_month(year, month):
	"""
	# Number of days in the one-based &month of the astronomical &year.
	"""
	return (leap_year if year_is_leap(year) else common_year)[month-1]

def to_astronomical(year):
	return year + 1 if year < 0 else year

def from_astronomical(year):
	return year - 1 if year <= 0 else year

def cascade_months(year, month, divmod=divmod):
	"""
	# Carry a &month outside of `1..12` into the astronomical &year.
	"""
	carry, m = divmod(month - 1, months_in_year)
	return (year + carry, m + 1)

def date_from_days(days, resolve=callib.resolve, selectors=callib.by_days):
	"""
	# The astronomical `(year, month, day)` of the day number &days.
	"""
	r = resolve(selectors, days, tree)
	year, month = divmod(r.address, months_in_year)
	return ((r.cycles * years_in_cycle) + year, month + 1, r.remainder + 1)

def days_from_date(date, resolve=callib.resolve, selectors=callib.by_months):
	"""
	# The day number of the astronomical `(year, month, day)` &date.

	# The day is not required to be within the month; days beyond the month
	# continue into the following ones and days below one precede it.
	"""
	year, month, day = date
	r = resolve(selectors, (year * months_in_year) + (month - 1), tree)
	return (r.cycles * days_in_cycle) + r.address + (day - 1)
