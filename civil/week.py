"""
# Week based derivations: days of seven.

# Weekdays are identified by their lowercase english names; abbreviations are
# accepted wherever a weekday is given.
"""
#: English names of the days of the week.
weekday_names = (
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
	'sunday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = (
	'mon', 'tue', 'wed', 'thu', 'fri', 'sat', 'sun',
)

#: Map of weekday names and abbreviations to a zero-based, monday first, index.
weekday_name_to_number = {
	weekday_names[i]: i
	for i in range(len(weekday_names))
}
weekday_name_to_number.update(zip(weekday_abbreviations, range(days_in_week)))

# Anchored so that an index of six is sunday; thirteen entries in order to
# support the `+ 6` applied to the congruence.
rotation = weekday_names + weekday_names[:6]

# Per-month terms of the congruence, January first.
month_terms = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

# Doubled so that a scan starting in the first week never wraps.
forwards = weekday_names * 2
backwards = tuple(reversed(weekday_names)) * 2

def weekday_from_date(y, m, d):
	"""
	# The name of the weekday of the normalized date.

	#!python
		assert weekday_from_date(1970, 1, 1) == 'thursday'
	"""
	# The base keeps the reduced year positive after January and February
	# are counted with the previous year.
	wd = 2400 + (y % 400) - (m < 3)
	wd += wd // 4 - wd // 100 + wd // 400
	wd += month_terms[m-1] + d
	return rotation[wd % 7 + 6]

def weekday(name):
	"""
	# Return the canonical name of the weekday identified by &name.

	# [ Exceptions ]
	# /&ValueError/
		# The &name is not a weekday name or abbreviation.
	"""
	try:
		return weekday_names[weekday_name_to_number[name.lower()]]
	except (KeyError, AttributeError):
		raise ValueError("invalid day of week: " + repr(name)) from None

def forward(base, target):
	"""
	# The number of days, `1-7`, from the weekday &base to the next &target.
	"""
	target = weekday(target)
	i = forwards.index(weekday(base))
	for j in range(i + 1, i + days_in_week + 1):
		if forwards[j] == target:
			return j - i

def backward(base, target):
	"""
	# The number of days, `1-7`, from the weekday &base back to the previous &target.
	"""
	target = weekday(target)
	i = backwards.index(weekday(base))
	for j in range(i + 1, i + days_in_week + 1):
		if backwards[j] == target:
			return j - i
