"""
# Contention harness for the test modules.

# Test functions take a `test` parameter and make assertions with the true division
# operator:

#!syntax/python
	def test_feature(test):
		test/featurelib.functionality() == expectation
		test/ValueError ^ (lambda: featurelib.fail())
"""
import builtins
import operator
import functools
import pytest

class Absurdity(AssertionError):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# Assertion object produced by `test/object`.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	def _check(self, ob, opname, operator):
		x, y = self.object, ob
		if bool(operator(x, y)) is bool(self.inverse):
			raise self.test.Absurdity(opname, x, y, inverse=self.inverse)

	for _name in ('__eq__', '__ne__', '__lt__', '__gt__', '__le__', '__ge__'):
		locals()[_name] = functools.partialmethod(_check, opname=_name, operator=getattr(operator, _name))
	del _name

	def __mod__(self, ob):
		self._check(ob, '__mod__', operator.is_)

	__hash__ = None

	##
	# Special cases for context manager exception traps.

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		x = self.object
		y = self.storage = val
		if not isinstance(y, x): raise self.test.Absurdity("isinstance", x, y)
		return True # !!! Inhibiting raise.

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called::

		#!syntax/python
			test/Exception ^ (lambda: subject())
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

	def __lshift__(self, subject):
		"""
		# Contend that the parameter is contained by the object.
		"""
		if (subject in self.object) is bool(self.inverse):
			raise self.test.Absurdity("contains", self.object, subject, inverse=self.inverse)
	__rlshift__ = __lshift__

class Test(object):
	"""
	# Provides the contention syntax to a single test function.
	"""
	__slots__ = ('identifier',)

	Absurdity = Absurdity
	Contention = Contention

	def __init__(self, identifier):
		self.identifier = identifier

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def __rfloordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))

@pytest.fixture
def test(request):
	return Test(request.node.name)
