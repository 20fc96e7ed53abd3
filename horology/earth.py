"""
Data regarding Earth-based units of time. (The earth day)
"""
#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of ticks, 100 nanoseconds, contained in a `second`.
ticks_in_second = 10_000_000

#: Number of ticks in a minute without leap seconds.
ticks_in_minute = ticks_in_second * seconds_in_minute

#: Number of ticks in an hour without leap seconds.
ticks_in_hour = ticks_in_minute * minutes_in_hour

#: Number of ticks in a day without leap seconds.
ticks_in_day = ticks_in_hour * hours_in_day

def timeofday(ticks, divmod=divmod):
	"""
	# Split a tick offset within a day into `(hour, minute, second, tick)`.
	"""
	s, t = divmod(ticks, ticks_in_second)
	m, s = divmod(s, seconds_in_minute)
	h, m = divmod(m, minutes_in_hour)
	return (h, m, s, t)

def ticks_from_timeofday(hour, minute, second, tick):
	"""
	# Combine time of day fields into ticks. Fields are not required to be in range.
	"""
	return (((hour * minutes_in_hour) + minute) * seconds_in_minute + second) * ticks_in_second + tick
