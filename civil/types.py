"""
# Unit-aligned civil time types.

# Each type is a six-tuple of canonical fields whose fields finer than the
# type's &Civil.unit are always at their first instant.

#!python
	d = types.Day(2016, 2, 30)
	assert d == types.Day(2016, 3, 1)
	assert d - types.Day(2016, 1, 1) == 60

	# Widening is implicit in &Civil.of, narrowing is explicit.
	s = types.Second.of(d)
	assert s.truncate('month') == types.Month(2016, 3)

# Comparisons consider all six fields regardless of the unit:

#!python
	assert types.Year(2016) == types.Second(2016)
	assert types.Month(2016, 2) < types.Day(2016, 2, 2)

# [ Elements ]

# /select/
	# Retrieve the type designated by a unit identifier.

	#!python
		assert types.select('hour') is types.Hour
"""
import operator
from . import core
from . import format

_index = operator.index

class Civil(tuple):
	"""
	# The base class of the civil time types.

	# Instances are created by calling the type with the fields. Omitted fields
	# default to their first instant and out of range fields are normalized.
	"""
	__slots__ = ()

	#: The identifier of the coarsest field that is meaningful to the type.
	unit = None

	year = property(operator.itemgetter(0))
	month = property(operator.itemgetter(1))
	day = property(operator.itemgetter(2))
	hour = property(operator.itemgetter(3))
	minute = property(operator.itemgetter(4))
	second = property(operator.itemgetter(5))

	def __new__(Class, year, month=1, day=1, hour=0, minute=0, second=0):
		fields = core.normalize(
			_index(year), _index(month), _index(day),
			_index(hour), _index(minute), _index(second),
		)
		return Class.from_fields(fields)

	def __getnewargs__(self):
		return tuple(self)

	@classmethod
	def from_fields(Class, fields):
		"""
		# Create an instance from normalized &fields aligning them to the type's unit.
		"""
		return tuple.__new__(Class, core.align(Class.unit, fields))

	@classmethod
	def of(Class, pit):
		"""
		# Convert &pit into an instance of &Class without losing information.

		# Only instances of the same or coarser units are accepted; &truncate
		# must be used to drop fields.
		"""
		if not isinstance(pit, Civil):
			raise TypeError("{0} cannot be converted from {1!r}".format(Class.__name__, pit))
		if core.precision[pit.unit] < core.precision[Class.unit]:
			raise TypeError(
				"{0} would truncate {1}; use truncate({2!r})".format(
					Class.__name__, pit.__class__.__name__, Class.unit
				)
			)
		return tuple.__new__(Class, pit)

	@classmethod
	def minimum(Class):
		"""
		# The earliest instance with a 64-bit year.
		"""
		return Class(core.year_minimum, 1, 1, 0, 0, 0)

	@classmethod
	def maximum(Class):
		"""
		# The latest instance with a 64-bit year.
		"""
		return Class(core.year_maximum, 12, 31, 23, 59, 59)

	@classmethod
	def parse(Class, text, lenient=False):
		"""
		# Construct an instance from its canonical text.

		# If &lenient is &True, the text may be in the canonical form of any
		# unit and is converted with &truncate. Otherwise it must be in the form
		# produced by &Class.

		#!python
			assert types.Day.parse('2016-03-01') == types.Day(2016, 3, 1)
			assert types.Day.parse('2016-03-01T04:05', lenient=True) == types.Day(2016, 3, 1)
		"""
		if lenient:
			unit, fields = format.parse(text)
		else:
			fields = format.parser(Class.unit)(text)
		return Class.from_fields(fields)

	@property
	def fields(self):
		"""
		# The six fields as a plain &tuple.
		"""
		return tuple(self)

	@property
	def date(self):
		return tuple(self[:3])

	def truncate(self, unit):
		"""
		# Convert to the type of &unit dropping the finer fields.

		# [ Parameters ]
		# /unit/
			# A unit identifier or a &Civil subclass.
		"""
		Class = unit if isinstance(unit, type) else select(unit)
		return Class.from_fields(self)

	def elapse(self, n=1):
		"""
		# Advance by &n units of the instance's own unit.
		"""
		return self.from_fields(core.steppers[self.unit](self, _index(n)))

	def rollback(self, n=1):
		"""
		# Retreat by &n units of the instance's own unit.
		"""
		return self.from_fields(core.steppers[self.unit](self, -_index(n)))

	def __add__(self, n):
		try:
			n = _index(n)
		except TypeError:
			return NotImplemented
		return self.from_fields(core.steppers[self.unit](self, n))
	__radd__ = __add__

	def __sub__(self, operand):
		if isinstance(operand, Civil):
			if operand.unit != self.unit:
				raise TypeError(
					"difference of {0} and {1} is ambiguous; convert one of them".format(
						self.__class__.__name__, operand.__class__.__name__
					)
				)
			return core.differences[self.unit](self, operand)

		try:
			n = _index(operand)
		except TypeError:
			return NotImplemented
		return self.from_fields(core.steppers[self.unit](self, -n))

	def __mul__(self, operand):
		return NotImplemented
	__rmul__ = __mul__

	def __str__(self):
		return format.formatter(self.unit)(self)

	def __repr__(self):
		return "(civil.{0}@'{1}')".format(self.unit, format.formatter(self.unit)(self))

class Year(Civil):
	__slots__ = ()
	unit = 'year'

class Month(Civil):
	__slots__ = ()
	unit = 'month'

class Day(Civil):
	__slots__ = ()
	unit = 'day'

class Hour(Civil):
	__slots__ = ()
	unit = 'hour'

class Minute(Civil):
	__slots__ = ()
	unit = 'minute'

class Second(Civil):
	__slots__ = ()
	unit = 'second'

#: The civil types ordered from the finest to the coarsest; parallel to &core.units.
CivilTypes = (Second, Minute, Hour, Day, Month, Year)

_types = dict(zip(core.units, CivilTypes))

def select(unit):
	"""
	# Retrieve the civil type designated by &unit.
	"""
	core.identify(unit)
	return _types[unit]
