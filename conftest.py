"""
# Contention based assertions for the civil tests.

# Test functions take a single `test` parameter and use true division to form
# assertions that report both operands on failure:

#!python
	def test_feature(test):
		test/libcivil.Day(2016, 2, 30) == libcivil.Day(2016, 3, 1)
		test/TypeError ^ (lambda: libcivil.Day(2016) - libcivil.Month(2016))
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
	# Assertion interface created by the true division of a &Test instance.
	# The comparison operators are passed on to the object being examined.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	_override = {
		'__mod__': ('is', lambda x,y: x is y)
	}

	for k in ('__eq__', '__ne__', '__lt__', '__gt__', '__le__', '__ge__', '__mod__'):
		if k in _override:
			opname, v = _override[k]
		else:
			opname, v = k, getattr(operator, k)

		def check(self, ob, opname=opname, operator=v):
			x, y = self.object, ob
			if self.inverse:
				if operator(x, y): raise Absurdity(opname, x, y, inverse=True)
			else:
				if not operator(x, y): raise Absurdity(opname, x, y, inverse=False)
		locals()[k] = check
	del k, opname, v, check
	__hash__ = None

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		x = self.object
		y = self.storage = val
		if not isinstance(y, x): raise Absurdity("isinstance", x, y)
		return True # Inhibit the raise.

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called::

		#!python
			test/Exception ^ (lambda: subject())
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

class Test(object):
	"""
	# The object passed to test functions as `test`.
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

	def issubclass(self, *args):
		if not builtins.issubclass(*args):
			raise self.Absurdity("issubclass", *args, inverse=True)

@pytest.fixture
def test(request):
	return Test(request.node.nodeid)
