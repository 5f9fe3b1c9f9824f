##
# copyright 2026, Gregory Siems
# https://github.com/gsiems/orapass
##
"""
orapass system functions.

Debug output of a lookup is delivered to `tracehook` when the query asks for
it. The default hook writes each message to standard error; assign a different
callable to `orapass.sys.tracehook` to capture the trace elsewhere.
"""
import sys
import os

def _tracehook__(msg):
	"""
	Built-in trace hook. DON'T TOUCH!
	"""
	if sys.stderr and not sys.stderr.closed:
		sys.stderr.write(msg + os.linesep)

def tracehook(msg):
	"""
	Trace hook pointing to _tracehook__.

	Overload if you like. Debug messages of a resolution come here to be
	printed to stderr.
	"""
	return _tracehook__(msg)

def reset_tracehook(with_func = tracehook):
	'restore the original tracehook function'
	global tracehook
	tracehook = with_func

def trace(msg):
	'deliver `msg` to the current `tracehook`'
	return tracehook(msg)
