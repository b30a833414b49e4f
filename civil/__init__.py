"""
# [ About ]

# civil is a time zone naive calendar and clock package for the proleptic
# Gregorian calendar. Points are six integer fields, year through second,
# aligned to one of six units. Years are &int, and the arithmetic is exact for
# any year; the normalization and differencing factor out whole 400-year cycles
# so the work performed never grows with the magnitude of a field or a step.

# Time zones, UTC offsets, and leap seconds are not represented.

# &.library will be referred to as `libcivil` throughout the examples in this documentation.

#!python
	from civil import library as libcivil

# [ Construction ]

# Fields that are out of range overflow onto the coarser fields:

#!python
	assert libcivil.Day(2016, 2, 30) == libcivil.Day(2016, 3, 1)
	assert libcivil.Day(1, 13, 1) == libcivil.Day(2, 1, 1)
	assert libcivil.Hour(1970, 1, 1, -1) == libcivil.Hour(1969, 12, 31, 23)

# Fields finer than the unit of the type are dropped:

#!python
	assert libcivil.Month(2016, 3, 17).day == 1

# [ Arithmetic ]

# Integers step in the unit of the type:

#!python
	m = libcivil.Month(2016, 11)
	assert m + 3 == libcivil.Month(2017, 2)
	assert libcivil.Month(2017, 2) - m == 3

# The difference of two types of different units is ambiguous and raises
# &TypeError. Convert one of the operands first; &types.Civil.of widens and
# &types.Civil.truncate narrows:

#!python
	s = libcivil.Second(2016, 3, 1, 12, 30)
	d = libcivil.Day(2016, 3, 1)
	assert s - libcivil.Second.of(d) == 45000
	assert s.truncate('day') - d == 0

# [ Weekdays ]

#!python
	assert libcivil.weekday(libcivil.Day(1970, 1, 1)) == 'thursday'
	assert libcivil.next_weekday(libcivil.Day(1970, 1, 1), 'thu') == libcivil.Day(1970, 1, 8)
"""
