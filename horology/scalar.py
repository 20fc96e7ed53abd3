"""
# Arithmetic and range capabilities for the scalar that counts ticks.

# Nothing in the package applies operators to tick scalars directly. Arithmetic is
# performed through a &Group and the conversion between scalars and &int
# through a &Range, allowing callers to select checked, saturating, or unbounded
# behavior by choosing the capability instances.

#!python
	from horology import scalar
	assert scalar.integers.add(2, 3) == 5
	assert scalar.int64.construct(2**63) is None

# [ Elements ]
# /integers/
	# &Integers instance; unbounded &int arithmetic.
# /int64/
	# &Bounded range for signed 64-bit scalars.
# /unbounded/
	# &Unbounded range accepting any &int.
"""
import typing
from abc import abstractmethod

class Group(typing.Protocol):
	"""
	# Abelian group operations over a scalar type.
	"""

	@abstractmethod
	def zero(self):
		"""
		# The identity element.
		"""

	@abstractmethod
	def add(self, former, latter):
		"""
		# Sum of &former and &latter, or &None when the capability detects overflow.
		"""

	@abstractmethod
	def negate(self, element):
		"""
		# The inverse of &element, or &None when it has no representable inverse.
		"""

	@abstractmethod
	def scale(self, element, factor:int):
		"""
		# &element added to itself &factor times.
		"""

	@abstractmethod
	def compare(self, former, latter) -> int:
		"""
		# Negative, zero, or positive depending on whether &former is less than,
		# equal to, or greater than &latter.
		"""

class Range(typing.Protocol):
	"""
	# Overflow-checked conversion between &int and the scalar type.
	"""

	@abstractmethod
	def construct(self, integer:int):
		"""
		# Build a scalar from &integer; &None when it is not representable.
		"""

	@abstractmethod
	def integer(self, scalar) -> int:
		"""
		# The exact &int value of &scalar.
		"""

class Integers(object):
	"""
	# Unbounded &int group.
	"""
	__slots__ = ()

	def zero(self):
		return 0

	def add(self, former, latter):
		return former + latter

	def negate(self, element):
		return -element

	def scale(self, element, factor):
		return element * factor

	def compare(self, former, latter):
		return (former > latter) - (former < latter)

	def __repr__(self):
		return self.__class__.__name__ + '()'

class Checked(Integers):
	"""
	# Fixed width &int group reporting overflow with &None.
	"""
	__slots__ = ('minimum', 'maximum',)

	def __init__(self, bits=64):
		self.minimum = -(1 << (bits - 1))
		self.maximum = (1 << (bits - 1)) - 1

	def _check(self, value):
		if value < self.minimum or value > self.maximum:
			return None
		return value

	def add(self, former, latter):
		return self._check(former + latter)

	def negate(self, element):
		return self._check(-element)

	def scale(self, element, factor):
		return self._check(element * factor)

	def __repr__(self):
		return '%s(%d)' %(self.__class__.__name__, self.maximum.bit_length() + 1)

class Saturating(Checked):
	"""
	# Fixed width &int group clamping results to the bounds.
	"""
	__slots__ = ()

	def _check(self, value):
		if value < self.minimum:
			return self.minimum
		elif value > self.maximum:
			return self.maximum
		return value

class Unbounded(object):
	"""
	# Range accepting every &int.
	"""
	__slots__ = ()

	minimum = None
	maximum = None

	def construct(self, integer):
		return int(integer)

	def integer(self, scalar):
		return int(scalar)

	def __repr__(self):
		return self.__class__.__name__ + '()'

class Bounded(object):
	"""
	# Range of signed, two's complement integers of the given width.
	"""
	__slots__ = ('minimum', 'maximum',)

	def __init__(self, bits=64):
		self.minimum = -(1 << (bits - 1))
		self.maximum = (1 << (bits - 1)) - 1

	def construct(self, integer, int=int):
		if integer < self.minimum or integer > self.maximum:
			return None
		return int(integer)

	def integer(self, scalar):
		return int(scalar)

	def __repr__(self):
		return '%s(%d)' %(self.__class__.__name__, self.maximum.bit_length() + 1)

integers = Integers()
unbounded = Unbounded()
int64 = Bounded(64)
