"""
# Civil field normalization, stepping, alignment and differencing.

# Fields are handled as plain six-tuples: `(year, month, day, hour, minute, second)`.
# The functions in this module accept fields of any magnitude and return
# canonical fields: `1-12` months, days within the month, `0-23` hours, and
# `0-59` minutes and seconds.

# Each level of the cascade resolves the overflow of its own field into a carry
# for the next coarser level. Only the day level iterates, and it does so in
# bounded tiers of centuries, four-year blocks, years and months after whole
# Gregorian cycles have been factored out.

# ! NOTE:
	# Years are &int and never wrap. The 64-bit range, &year_minimum and
	# &year_maximum, is only used to identify the extreme values; arithmetic
	# beyond it remains exact.

# [ Elements ]

# /units/
	# The unit identifiers ordered from the finest to the coarsest.
# /precision/
	# Mapping of unit identifiers to their position in &units.
"""
from . import gregorian

units = ('second', 'minute', 'hour', 'day', 'month', 'year')
precision = {u: i for i, u in enumerate(units)}

#: The minimum year reported by the extreme values; signed 64-bit.
year_minimum = -(2**63)

#: The maximum year reported by the extreme values; signed 64-bit.
year_maximum = (2**63) - 1

class Error(Exception):
	"""
	# Base class for civil time errors.
	"""

class UnitError(Error, ValueError):
	"""
	# The given identifier is not one of the civil &units.
	"""

	def __init__(self, unit):
		self.unit = unit

	def __str__(self):
		return "unknown civil unit {0!r}; expecting one of {1}".format(self.unit, ', '.join(units))

class FormatError(Error, ValueError):
	"""
	# Base class for errors raised when text does not describe a canonical civil time.

	# [ Properties ]
	# /source/
		# The object that was given to the parser.
	# /format/
		# The unit identifier of the format that was expected; &None when any
		# unit was permitted.
	"""
	condition = 'does not describe'

	def __init__(self, source, format=None):
		self.source = source
		self.format = format

	def __str__(self):
		fmt = 'civil' if self.format is None else 'civil ' + self.format
		return "{0!r} {1} a canonical {2} time".format(self.source, self.condition, fmt)

class ParseError(FormatError):
	"""
	# The source is not text in one of the canonical forms.
	"""
	condition = 'is not'

class StructureError(FormatError):
	"""
	# The source has the canonical form, but its fields are out of range.
	"""
	condition = 'has fields out of range for'

def identify(unit):
	"""
	# Return the precision of the &unit; raise &UnitError when it is not known.
	"""
	try:
		return precision[unit]
	except (KeyError, TypeError):
		raise UnitError(unit) from None

##
# Normalization cascade.
# The functions are named after the finest field that may still be out of range.
# Carries are passed as explicit arguments beside the field they will join.

def _days(y, m, d, cd, hh, mm, ss,
		cycle=gregorian.days_in_cycle,
		days_in_year=gregorian.days_in_year,
		days_in_month=gregorian.days_in_month,
		year_index=gregorian.year_index,
		century_days=gregorian.century_days,
		four_year_days=gregorian.four_year_days,
	):
	# The year offset is kept within the cycle of the original year so that
	# the original year is only touched once, at the end.
	ey = oey = y % 400

	# Carry: floor; the remainder is in [0, cycle).
	cycles, cd = divmod(cd, cycle)
	ey += cycles * 400

	# Field: toward zero; a deficit stays negative.
	cycles, d = divmod(d, cycle)
	if cycles < 0 and d:
		cycles += 1
		d -= cycle
	ey += cycles * 400

	d += cd
	if d > 0:
		if d > cycle:
			ey += 400
			d -= cycle
	elif d > -365:
		# Stepping back into the previous year is common.
		ey -= 1
		d += days_in_year(ey, m)
	else:
		ey -= 400
		d += cycle

	if d > 365:
		yi = year_index(ey, m)

		n = century_days[yi]
		while d > n:
			d -= n
			ey += 100
			yi = (yi + 100) % 400
			n = century_days[yi]

		n = four_year_days[yi]
		while d > n:
			d -= n
			ey += 4
			yi = (yi + 4) % 400
			n = four_year_days[yi]

		n = days_in_year(ey, m)
		while d > n:
			d -= n
			ey += 1
			n = days_in_year(ey, m)

	if d > 28:
		n = days_in_month(ey, m)
		while d > n:
			d -= n
			m += 1
			if m > 12:
				ey += 1
				m = 1
			n = days_in_month(ey, m)

	return (y + (ey - oey), m, d, hh, mm, ss)

def _months(y, m, d, cd, hh, mm, ss):
	years, m = divmod(m - 1, 12)
	return _days(y + years, m + 1, d, cd, hh, mm, ss)

def _hours(y, m, d, cd, hh, mm, ss):
	days, hh = divmod(hh, 24)
	return _months(y, m, d, cd + days, hh, mm, ss)

def _minutes(y, m, d, hh, ch, mm, ss):
	hours, mm = divmod(mm, 60)
	ch += hours
	return _hours(y, m, d, hh // 24 + ch // 24, hh % 24 + ch % 24, mm, ss)

def normalize(y, m=1, d=1, hh=0, mm=0, ss=0):
	"""
	# Resolve the given fields into canonical fields.

	# Any field may be negative or beyond its nominal range; the excess is carried
	# into the next coarser field:

	#!python
		assert normalize(2016, 2, 30) == (2016, 3, 1, 0, 0, 0)
		assert normalize(1970, 1, 1, -1) == (1969, 12, 31, 23, 0, 0)
	"""
	if 0 <= ss < 60:
		if 0 <= mm < 60:
			if 0 <= hh < 24:
				if 1 <= d <= 28 and 1 <= m <= 12:
					return (y, m, d, hh, mm, ss)
				return _months(y, m, d, 0, hh, mm, ss)
			return _hours(y, m, d, 0, hh, mm, ss)
		return _minutes(y, m, d, hh, 0, mm, ss)

	minutes, ss = divmod(ss, 60)
	return _minutes(y, m, d, hh, mm // 60 + minutes // 60, mm % 60 + minutes % 60, ss)

##
# Steps. Each re-enters the cascade at its own unit.

def step_second(fields, n):
	y, m, d, hh, mm, ss = fields
	return normalize(y, m, d, hh, mm + n // 60, ss + n % 60)

def step_minute(fields, n):
	y, m, d, hh, mm, ss = fields
	return _minutes(y, m, d, hh + n // 60, 0, mm + n % 60, ss)

def step_hour(fields, n):
	y, m, d, hh, mm, ss = fields
	return _hours(y, m, d + n // 24, 0, hh + n % 24, mm, ss)

def step_day(fields, n):
	y, m, d, hh, mm, ss = fields
	return _days(y, m, d, n, hh, mm, ss)

def step_month(fields, n):
	y, m, d, hh, mm, ss = fields
	return _months(y + n // 12, m + n % 12, d, 0, hh, mm, ss)

def step_year(fields, n):
	y, m, d, hh, mm, ss = fields
	return (y + n, m, d, hh, mm, ss)

steppers = {
	'second': step_second,
	'minute': step_minute,
	'hour': step_hour,
	'day': step_day,
	'month': step_month,
	'year': step_year,
}

def step(unit, fields, n):
	"""
	# Advance the normalized &fields by &n of the &unit; negative &n retreats.
	"""
	identify(unit)
	return steppers[unit](fields, n)

##
# Alignment.

# Fields of the first instant of any year; fills the fields finer than a unit.
_origin = (None, 1, 1, 0, 0, 0)

def align(unit, fields):
	"""
	# Replace the fields finer than &unit with the first instant of the unit.

	#!python
		assert align('month', (2016, 3, 17, 4, 5, 6)) == (2016, 3, 1, 0, 0, 0)
	"""
	n = len(units) - identify(unit)
	return tuple(fields[:n]) + _origin[n:]

##
# Differences.

def scale_add(v, f, a):
	"""
	# Calculate `v * f + a` without forming `v * f` when &v is adjacent to a
	# representation limit; only the combined result needs to be representable.
	"""
	if v < 0:
		return ((v + 1) * f + a) - f
	else:
		return ((v - 1) * f + a) + f

def difference_year(a, b):
	return a[0] - b[0]

def difference_month(a, b):
	return scale_add(difference_year(a, b), 12, a[1] - b[1])

def difference_day(a, b):
	return gregorian.day_difference(a[0], a[1], a[2], b[0], b[1], b[2])

def difference_hour(a, b):
	return scale_add(difference_day(a, b), 24, a[3] - b[3])

def difference_minute(a, b):
	return scale_add(difference_hour(a, b), 60, a[4] - b[4])

def difference_second(a, b):
	return scale_add(difference_minute(a, b), 60, a[5] - b[5])

differences = {
	'second': difference_second,
	'minute': difference_minute,
	'hour': difference_hour,
	'day': difference_day,
	'month': difference_month,
	'year': difference_year,
}

def difference(unit, a, b):
	"""
	# The signed number of &unit that &b must be advanced by in order to reach &a.

	# Both field sets must be normalized and aligned to &unit for the following to hold:

	#!python
		assert step(unit, b, difference(unit, a, b)) == a
	"""
	identify(unit)
	return differences[unit](a, b)
