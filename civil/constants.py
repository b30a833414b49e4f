"""
# Distinguished civil times.

# [ Elements ]

# /unix_epoch/
	# &types.Second instance referring to 1970-01-01T00:00:00.
# /genesis/
	# The earliest &types.Second with a 64-bit year.
# /never/
	# The latest &types.Second with a 64-bit year.
"""
from . import types

unix_epoch = types.Second(1970)
genesis = types.Second.minimum()
never = types.Second.maximum()
