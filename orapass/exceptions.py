##
# copyright 2026, Gregory Siems
# https://github.com/gsiems/orapass
##
"""
orapass exceptions.

All failures of a password lookup are raised as subclasses of `Error`. Each
class carries a short `code` so that callers who prefer tagging over
``isinstance`` checks can dispatch on it::

	>>> import orapass.exceptions as ora_exc
	>>> ora_exc.ErrorLookup('permissions')
	<class 'orapass.exceptions.PermissionPolicyError'>

This module is executable via -m; it prints the exception mapped to each code
given on the command line::

	$ python -m orapass.exceptions no_entry
	orapass.exceptions.NoEntryFoundError [no_entry]
"""
import sys
from os import linesep

class Exception(Exception):
	'Base orapass exception class'
	pass

def msgstr(ob):
	'Create a string for display in a traceback or on standard error'
	message = ob.message
	details = ob.details
	if not details:
		return str(message)
	return str(message) + linesep + linesep.join([
		'%s: %s' %(k.upper(), v) for k, v in sorted(details.items())
	])

class Error(Exception):
	"""Error(msg[, details])

	A failed password lookup. `message` is the one line description and
	`details` is a dictionary of supporting values, like the file involved.
	"""
	code = 'error'
	details = None
	message = None

	def __init__(self, msg, details = None):
		Exception.__init__(self, msg)
		if details is not None:
			self.details = details
		self.message = msg

	__str__ = msgstr
	def __repr__(self):
		return '%s.%s(%r%s%r)' %(
			type(self).__module__,
			type(self).__name__,
			self.message,
			self.details and ', ' or '',
			self.details or '',
		)

class FileAccessError(Error):
	"""
	A candidate or resolved file could not be examined for a reason other than
	its absence.
	"""
	code = 'file_access'

class PermissionPolicyError(Error):
	"""
	The resolved orapass file is readable by someone other than its owner.

	`expected` and `actual` hold the permission bits as integers.
	"""
	code = 'permissions'

	def __init__(self, msg, details = None, expected = None, actual = None):
		super().__init__(msg, details = details)
		self.expected = expected
		self.actual = actual

class NoEntryFoundError(Error):
	"No orapass file was found, or no line in it matched the query."
	code = 'no_entry'

class ReadError(Error):
	"The orapass file could not be read while scanning it."
	code = 'read'

CodeClass = {
	e.code : e for e in (
		FileAccessError,
		PermissionPolicyError,
		NoEntryFoundError,
		ReadError,
	)
}

def ErrorLookup(c):
	"""
	Given an error code, return the exception class associated with it.
	"""
	return CodeClass.get(c) or Error

if __name__ == '__main__':
	for x in sys.argv[1:]:
		e = ErrorLookup(x)
		sys.stdout.write('orapass.exceptions.%s [%s]%s' %(
			e.__name__, e.code, linesep
		))
