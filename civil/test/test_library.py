from .. import core
from .. import gregorian
from .. import library as module

def test_types_available(test):
	for name in ('Year', 'Month', 'Day', 'Hour', 'Minute', 'Second', 'Civil', 'select'):
		test/hasattr(module, name) == True
	test/module.unix_epoch == module.Second(1970)
	test/module.never > module.genesis

def test_weekday(test):
	test/module.weekday(module.Day(1970, 1, 1)) == 'thursday'
	test/module.weekday(module.Second(1970, 1, 1, 23, 59, 59)) == 'thursday'
	test/module.weekday(module.Month(2016, 2)) == 'monday'
	test/module.weekday(module.Day(2016, 2, 29)) == 'monday'
	test/module.weekday(module.Year(2000)) == 'saturday'

def test_yearday(test):
	test/module.yearday(module.Day(2016, 1, 1)) == 1
	test/module.yearday(module.Day(2016, 2, 29)) == 60
	test/module.yearday(module.Day(2016, 12, 31)) == 366
	test/module.yearday(module.Second(2015, 12, 31, 12)) == 365
	test/module.yearday(module.Year(2015)) == 1

def test_next_previous_weekday(test):
	thu = module.Day(1970, 1, 1)
	test/module.next_weekday(thu, 'thu') == module.Day(1970, 1, 8)
	test/module.next_weekday(thu, 'friday') == module.Day(1970, 1, 2)
	test/module.next_weekday(thu, 'wednesday') == module.Day(1970, 1, 7)
	test/module.previous_weekday(thu, 'thursday') == module.Day(1969, 12, 25)
	test/module.previous_weekday(thu, 'wed') == module.Day(1969, 12, 31)
	test/module.previous_weekday(thu, 'friday') == module.Day(1969, 12, 26)

	# Coarser units are widened.
	test/module.next_weekday(module.Month(2016, 3), 'monday') == module.Day(2016, 3, 7)
	test.isinstance(module.next_weekday(module.Year(2016), 'monday'), module.Day)

def test_weekday_search_range(test):
	"""
	# The result is within a week of the base and on the target weekday.
	"""
	for base in module.range(module.Day(2015, 12, 20), module.Day(2016, 1, 10)):
		for target in ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday'):
			n = module.next_weekday(base, target)
			p = module.previous_weekday(base, target)
			test/module.weekday(n) == target
			test/module.weekday(p) == target
			test/(1 <= (n - base) <= 7) == True
			test/(1 <= (base - p) <= 7) == True

def test_weekday_search_types(test):
	s = module.Second(2016, 3, 1, 12)
	test/TypeError ^ (lambda: module.next_weekday(s, 'monday'))
	test/TypeError ^ (lambda: module.previous_weekday(module.Hour(2016), 'monday'))
	test/ValueError ^ (lambda: module.next_weekday(module.Day(2016), 'someday'))

	# Explicitly truncated.
	test/module.next_weekday(s.truncate('day'), 'monday') == module.Day(2016, 3, 7)

def test_ordinal(test):
	test/module.ordinal(module.Day(1970, 1, 1)) == 0
	test/module.ordinal(module.Day(1969, 12, 31)) == -1
	test/module.ordinal(module.Day(2000, 1, 1)) == 10957
	test/module.ordinal(module.Second(2000, 1, 1, 23, 59, 59)) == 10957
	test/module.ordinal(module.Month(2000, 3)) == 11017

	test/module.from_ordinal(0) == module.Day(1970, 1, 1)
	test/module.from_ordinal(10957) == module.Day(2000, 1, 1)
	test/module.from_ordinal(-1) == module.Day(1969, 12, 31)
	test.isinstance(module.from_ordinal(0), module.Day)

	for d in (module.Day.minimum(), module.Day.maximum(), module.Day(-1, 2, 29), module.Day(2**70, 3, 1)):
		test/module.from_ordinal(module.ordinal(d)) == d
		test/module.ordinal(d) == d - module.Day(1970, 1, 1)

def test_parse(test):
	test/module.parse('2016') == module.Year(2016)
	test.isinstance(module.parse('2016'), module.Year)
	test/module.parse('2016-03') == module.Month(2016, 3)
	test.isinstance(module.parse('2016-03'), module.Month)
	test.isinstance(module.parse('2016-03-01'), module.Day)
	test/module.parse('2016-03-01T04') == module.Hour(2016, 3, 1, 4)
	test.isinstance(module.parse('2016-03-01T04'), module.Hour)
	test.isinstance(module.parse('2016-03-01T04:05'), module.Minute)
	test.isinstance(module.parse('2016-03-01T04:05:06'), module.Second)

	test/core.ParseError ^ (lambda: module.parse('yesterday'))
	test/core.StructureError ^ (lambda: module.parse('2016-02-30'))

def test_range(test):
	days = list(module.range(module.Day(2016, 2, 28), module.Day(2016, 3, 2)))
	test/days == [module.Day(2016, 2, 28), module.Day(2016, 2, 29), module.Day(2016, 3, 1)]

	months = list(module.range(module.Month(2016, 11), module.Month(2017, 5), 2))
	test/months == [module.Month(2016, 11), module.Month(2017, 1), module.Month(2017, 3)]

	back = list(module.range(module.Day(2016, 3, 2), module.Day(2016, 2, 28), -1))
	test/back == [module.Day(2016, 3, 2), module.Day(2016, 3, 1), module.Day(2016, 2, 29)]

	test/list(module.range(module.Day(2016), module.Day(2016))) == []
	test/list(module.range(module.Day(2016), module.Day(2015))) == []
	test/list(module.range(module.Day(2015), module.Day(2016), -1)) == []

	hours = list(module.range(module.Hour(2016, 3, 1), module.Hour(2016, 3, 2)))
	test/len(hours) == 24
	test/hours[-1] == module.Hour(2016, 3, 1, 23)

def test_range_zero_step(test):
	r = module.range(module.Day(2016), module.Day(2017), 0)
	test/ValueError ^ (lambda: next(r))
