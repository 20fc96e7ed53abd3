"""
[ About ]
---------

horology is a time package built around a linear clock measured in ticks,
100 nanosecond units, and calendars that map the clock onto civil fields.
The clock does not know about calendars: &.types.TimeStamp is a count of ticks
since 2000-01-01T00:00:00 UTC and &.types.TimeInterval is a signed count of ticks.
Arithmetic on them is performed by &.algebra with an explicit &.scalar.Group.

Calendar Support:

	- Proleptic Gregorian with UTC leap seconds, &.std

horology's APIs are *not* compatible with the standard library's datetime module.

[ Linear Time ]
---------------

#!/pl/python
	from horology import types, algebra, scalar
	hour = types.TimeInterval(60 * 60 * 10_000_000)
	ts = algebra.plus(scalar.integers, hour, types.TimeStamp(0))
	assert algebra.diff(scalar.integers, ts, types.TimeStamp(0)) == hour

Checked arithmetic is selected by the group:

#!/pl/python
	g = scalar.Checked(64)
	assert algebra.plus(g, types.TimeInterval(1), types.TimeStamp(2**63 - 1)) is None

[ Calendar Representation ]
---------------------------

A calendar converts stamps into &.types.DateTime fields and back.

#!/pl/python
	from horology import std, gregorian
	d = std.utc.to_datetime(types.TimeStamp(0))
	assert d == types.DateTime(2000, gregorian.Month.january, 1, 0, 0, 0, 0)

Conversion validates the fields; invalid fields produce &None.

#!/pl/python
	assert std.utc.from_datetime(types.DateTime(2023, 2, 29)) is None
	assert std.utc.valid(types.DateTime(2016, 12, 31, 23, 59, 60, 0))

Calendars with a fixed offset present local fields:

#!/pl/python
	tokyo = std.Calendar.from_minutes(9 * 60)
	assert tokyo.to_datetime(types.TimeStamp(0)).hour == 9

[ Datetime Math ]
-----------------

Calendar intervals are added field by field and may produce fields that are out of
range. &.std.Calendar.normalize truncates the day to the end of the month:

#!/pl/python
	may31 = types.DateTime(2023, 5, 31)
	d = std.utc.plus(types.DateTimeInterval(months=1), may31)
	assert d.day == 31
	assert std.utc.normalize(d) == types.DateTime(2023, 6, 30)

[ Text ]
--------

#!/pl/python
	text = std.utc.to_text(may31)
	assert text == '2023-05-31T00:00:00.0000000Z'
	assert std.utc.from_text(text) == may31
"""
