"""
# Proleptic Gregorian calendar data and closed-form day counts.

# The functions here work with plain integer fields and never loop in
# proportion to the magnitude of their arguments. Day counts are relative
# to the &unix_epoch_date, 1970-01-01.

# [ Elements ]

# /century_days/
	# The number of days in the hundred years starting at each year index of the
	# cycle. See &year_index.
# /four_year_days/
	# The number of days in the four years starting at each year index of the cycle.
"""
import itertools

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a gregorian cycle; the leap pattern repeats exactly.
years_in_cycle = years_in_century * centuries_in_cycle

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Days preceding the first of each month in a common year.
month_offsets = tuple(itertools.accumulate((0,) + calendar_year[:-1]))

#: Days in a common year.
days_in_common_year = sum(calendar_year)

#: Total number of days in a Gregorian cycle.
days_in_cycle = (days_in_common_year * years_in_cycle) + (years_in_cycle // 4) - 3

#: Days from 0000-03-01, the start of the zero era, to 1970-01-01.
unix_epoch_offset = 719468
unix_epoch_date = (1970, 1, 1)

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)

def days_in_month(y, m, _table=calendar_year):
	"""
	# The number of days in the month &m, `1-12`, of the year &y.
	"""
	return _table[m-1] + (m == 2 and year_is_leap(y))

def days_in_year(y, m=1):
	"""
	# The number of days from the first of month &m in year &y to the first of
	# the same month in the following year.

	# After February, the leap day that matters is the following year's.
	"""
	return 366 if year_is_leap(y + (m > 2)) else 365

def year_index(y, m):
	"""
	# The position, `0-399`, of the year in the Gregorian cycle with respect to
	# the leap day that follows the month &m.
	"""
	return (y + (m > 2)) % years_in_cycle

century_days = tuple(
	36524 + (yi == 0 or yi > 300)
	for yi in range(years_in_cycle)
)

four_year_days = tuple(
	1460 + (yi == 0 or yi > 300 or (yi - 1) % 100 < 96)
	for yi in range(years_in_cycle)
)

def day_of_year(y, m, d, _offsets=month_offsets):
	"""
	# The one-based day of the year of the normalized date.
	"""
	return _offsets[m-1] + (m > 2 and year_is_leap(y)) + d

def days_from_date(y, m, d):
	"""
	# Convert a normalized Gregorian date to the number of days since 1970-01-01.

	# The year is shifted so that it begins on March first placing the leap day
	# at its end. The shifted year is then split into its era, a Gregorian cycle,
	# and the year of the era.
	"""
	ey = y - 1 if m <= 2 else y
	era = ey // years_in_cycle
	yoe = ey - era * years_in_cycle # [0, 399]
	doy = (153 * (m + (-3 if m > 2 else 9)) + 2) // 5 + d - 1 # [0, 365]
	doe = yoe * 365 + yoe // 4 - yoe // 100 + doy # [0, 146096]
	return era * days_in_cycle + doe - unix_epoch_offset

def date_from_days(days):
	"""
	# Convert the number of days since 1970-01-01 into a Gregorian date in the
	# common form: `(year, month, day)`.
	"""
	days += unix_epoch_offset
	era = days // days_in_cycle
	doe = days - era * days_in_cycle
	yoe = (doe - doe // 1460 + doe // 36524 - doe // (days_in_cycle - 1)) // 365
	doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
	mp = (5 * doy + 2) // 153
	d = doy - (153 * mp + 2) // 5 + 1
	m = mp + 3 if mp < 10 else mp - 9
	return (yoe + era * years_in_cycle + (m <= 2), m, d)

def day_difference(y1, m1, d1, y2, m2, d2):
	"""
	# The number of days from the date `y2-m2-d2` to the date `y1-m1-d1`.

	# The years are reduced into the first cycle before the dates are converted,
	# and the removed cycles are counted separately so that the magnitude passed
	# to &days_from_date stays small regardless of the years given.
	"""
	a_offset = y1 % years_in_cycle
	b_offset = y2 % years_in_cycle
	cycle_years = (y1 - a_offset) - (y2 - b_offset)
	delta = days_from_date(a_offset, m1, d1) - days_from_date(b_offset, m2, d2)

	# Agree on a sign before combining.
	if cycle_years > 0 and delta < 0:
		delta += 2 * days_in_cycle
		cycle_years -= 2 * years_in_cycle
	elif cycle_years < 0 and delta > 0:
		delta -= 2 * days_in_cycle
		cycle_years += 2 * years_in_cycle

	return (cycle_years // years_in_cycle * days_in_cycle) + delta
