"""
# Group action of &.types.TimeInterval on &.types.TimeStamp.

# Every function takes the &.scalar.Group as its first parameter so that callers
# select the arithmetic: unbounded, checked, or saturating. When the group
# reports an overflow with &None, the function returns &None.

# [ Invariants ]
#!python
	assert diff(group, plus(group, i, s), s) == i
	assert plus(group, zero(group), s) == s
	assert plus(group, diff(group, a, b), b) == a
"""
from .types import TimeInterval, TimeStamp

def zero(group) -> TimeInterval:
	return TimeInterval(group.zero())

def negate(group, interval):
	n = group.negate(interval[0])
	if n is None:
		return None
	return TimeInterval(n)

def add(group, former, latter):
	"""
	# Sum of two intervals.
	"""
	r = group.add(former[0], latter[0])
	if r is None:
		return None
	return TimeInterval(r)

def scale(group, interval, factor:int):
	"""
	# Multiply the interval by an integer. The product of two intervals is not defined.
	"""
	r = group.scale(interval[0], factor)
	if r is None:
		return None
	return TimeInterval(r)

def plus(group, interval, stamp):
	"""
	# The stamp reached after &interval elapses from &stamp.
	"""
	r = group.add(stamp[0], interval[0])
	if r is None:
		return None
	return TimeStamp(r)

def rollback(group, interval, stamp):
	"""
	# The stamp that occurred &interval before &stamp.
	"""
	n = group.negate(interval[0])
	if n is None:
		return None
	return plus(group, TimeInterval(n), stamp)

def diff(group, former, latter):
	"""
	# The interval that elapses from &latter to &former.
	"""
	n = group.negate(latter[0])
	if n is None:
		return None
	r = group.add(former[0], n)
	if r is None:
		return None
	return TimeInterval(r)

def compare(group, former, latter) -> int:
	return group.compare(former[0], latter[0])

def leads(group, former, latter) -> bool:
	"""
	# Whether &former comes before &latter.
	"""
	return group.compare(former[0], latter[0]) < 0

def follows(group, former, latter) -> bool:
	"""
	# Whether &former comes after &latter.
	"""
	return group.compare(former[0], latter[0]) > 0
