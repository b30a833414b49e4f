"""
# Canonical text of civil times.

# Each unit has a single canonical form; the year is signed and unpadded, and
# the remaining fields are two digits:

# - `year`: `2016`
# - `month`: `2016-03`
# - `day`: `2016-03-01`
# - `hour`: `2016-03-01T04`
# - `minute`: `2016-03-01T04:05`
# - `second`: `2016-03-01T04:05:06`

# Parsing accepts one or two digits for the fields after the year. The parsed
# fields must already be canonical; `2016-02-30` is rejected with
# &core.StructureError rather than normalized.
"""
import functools
from . import core

models = {
	'year': "{0}",
	'month': "{0}-{1:02}",
	'day': "{0}-{1:02}-{2:02}",
	'hour': "{0}-{1:02}-{2:02}T{3:02}",
	'minute': "{0}-{1:02}-{2:02}T{3:02}:{4:02}",
	'second': "{0}-{1:02}-{2:02}T{3:02}:{4:02}:{5:02}",
}

#: The unit identified by the number of fields present in a canonical text.
field_count_units = {
	len(core.units) - i: u for i, u in enumerate(core.units)
}

# Month, day, hour, minute and second of the first instant of a year.
_defaults = (1, 1, 0, 0, 0)

def formatter(unit):
	"""
	# Given a unit identifier, return the function that renders the fields of
	# that unit.

	#!python
		assert formatter('day')((2016, 3, 1, 0, 0, 0)) == '2016-03-01'
	"""
	core.identify(unit)
	fmt = models[unit].format
	def format_fields(fields, fmt=fmt):
		return fmt(*fields)
	return format_fields

def _digits(field, limit=None):
	if not field.isdigit() or not field.isascii():
		raise ValueError("not a decimal field: " + repr(field))
	if limit is not None and len(field) > limit:
		raise ValueError("too many digits: " + repr(field))
	return int(field)

def split(text):
	"""
	# Split the canonical &text into the six fields and identify its unit.
	# The fields absent from the text are at their first instant.

	# Returns a pair, `(unit, fields)`. The fields are not checked for range.
	"""
	sign = 1
	if text.startswith('-'):
		sign = -1
		text = text[1:]

	date, t, time = text.partition('T')
	date = date.split('-')
	if len(date) > 3:
		raise ValueError("too many date fields")

	time = time.split(':') if t else []
	if t and len(date) < 3:
		raise ValueError("time given without day")
	if len(time) > 3:
		raise ValueError("too many time fields")

	year = sign * _digits(date[0])
	parts = [_digits(x, 2) for x in date[1:] + time]
	unit = field_count_units[1 + len(parts)]
	fields = (year,) + tuple(parts) + _defaults[len(parts):]
	return unit, fields

def parse(text, format=None):
	"""
	# Parse the canonical &text of any unit, or of the &format unit when given.

	# Returns a pair, `(unit, fields)`, where the fields are normalized.

	# [ Exceptions ]
	# /&core.ParseError/
		# The text is not in the canonical form.
	# /&core.StructureError/
		# The fields are out of range.
	"""
	if not isinstance(text, str):
		raise core.ParseError(text, format=format)

	try:
		unit, fields = split(text)
	except ValueError as err:
		raise core.ParseError(text, format=format) from err

	if format is not None and unit != format:
		raise core.ParseError(text, format=format)

	if core.normalize(*fields) != fields:
		raise core.StructureError(text, format=format)

	return unit, fields

@functools.lru_cache(8)
def parser(unit):
	"""
	# Given a unit identifier, return the function that parses the canonical text
	# of that unit into normalized fields.
	"""
	core.identify(unit)
	def parse_fields(text, unit=unit):
		return parse(text, format=unit)[1]
	return parse_fields
