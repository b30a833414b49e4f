"""
# Print the canonical form, weekday and year day of the civil times given as arguments.

# The arguments may be in the canonical form of any unit. An argument that
# cannot be parsed is reported on standard error and the command exits with `1`.
"""
import sys
from .. import core
from .. import library

def describe(text):
	pit = library.parse(text)
	return "%s %s %d\n" %(pit, library.weekday(pit), library.yearday(pit))

def main(args=None):
	if args is None:
		args = sys.argv[1:]

	for text in args:
		try:
			line = describe(text)
		except core.FormatError as err:
			sys.stderr.write("describe: %s\n" %(err,))
			sys.exit(1)
		sys.stdout.write(line)

if __name__ == '__main__':
	main()
