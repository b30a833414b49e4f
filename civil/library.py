"""
# Primary public module.

# Provides access to the civil types, &Year, &Month, &Day, &Hour, &Minute, and
# &Second, the distinguished values of &.constants, and the derived queries.

#!python
	from civil import library as libcivil

	d = libcivil.Day(2016, 2, 29)
	assert libcivil.weekday(d) == 'monday'
	assert libcivil.yearday(d) == 60
	assert libcivil.next_weekday(d, 'monday') == libcivil.Day(2016, 3, 7)
"""
from . import gregorian
from . import week
from . import format

__shortname__ = 'libcivil'

from .types import *
from .constants import *

def weekday(pit:Civil) -> str:
	"""
	# The name of the weekday of &pit.
	"""
	return week.weekday_from_date(pit[0], pit[1], pit[2])

def yearday(pit:Civil) -> int:
	"""
	# The one-based day of the year of &pit.
	"""
	return gregorian.day_of_year(pit[0], pit[1], pit[2])

def next_weekday(pit:Civil, target:str) -> Day:
	"""
	# The first &Day after &pit that falls on the &target weekday.

	# When &pit is already on the &target weekday, the day a week later is returned.
	# &pit is converted with &Day.of; finer units must be truncated first.
	"""
	d = Day.of(pit)
	return d.elapse(week.forward(weekday(d), target))

def previous_weekday(pit:Civil, target:str) -> Day:
	"""
	# The last &Day before &pit that falls on the &target weekday.

	# When &pit is already on the &target weekday, the day a week earlier is returned.
	# &pit is converted with &Day.of; finer units must be truncated first.
	"""
	d = Day.of(pit)
	return d.rollback(week.backward(weekday(d), target))

def ordinal(pit:Civil) -> int:
	"""
	# The number of days from 1970-01-01 to the day of &pit.
	"""
	return gregorian.day_difference(pit[0], pit[1], pit[2], *gregorian.unix_epoch_date)

def from_ordinal(days:int) -> Day:
	"""
	# The &Day that is &days after 1970-01-01.
	"""
	return Day.from_fields(gregorian.date_from_days(days) + (0, 0, 0))

def parse(text:str) -> Civil:
	"""
	# Construct an instance of the type whose canonical form is used by &text.

	#!python
		assert libcivil.parse('2016-03') == libcivil.Month(2016, 3)
		assert libcivil.parse('2016-03-01T04') == libcivil.Hour(2016, 3, 1, 4)
	"""
	unit, fields = format.parse(text)
	return select(unit).from_fields(fields)

def range(start:Civil, stop:Civil, step:int=1):
	"""
	# Construct an iterator producing the instances from &start, inclusive, to
	# &stop, exclusive, advancing by &step units of &start.

	# When &step is negative, the iterator moves backwards and stops when the
	# position is no longer after &stop.

	#!python
		days = list(libcivil.range(libcivil.Day(2016, 2, 28), libcivil.Day(2016, 3, 2)))
		assert len(days) == 3
	"""
	if step == 0:
		raise ValueError("range step must not be zero")

	pos = start
	if step > 0:
		while pos < stop:
			yield pos
			pos = pos.elapse(step)
	else:
		while pos > stop:
			yield pos
			pos = pos.elapse(step)
