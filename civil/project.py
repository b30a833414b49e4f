identity = 'http://fault.io/project/python/civil'
name = 'civil'
abstract = 'Time zone naive calendar and clock fields with exact Gregorian arithmetic.'
icon = '📅'
study = 'horology'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
