##
# copyright 2026, Gregory Siems
# https://github.com/gsiems/orapass
##
"""
Parse orapass files and subsequently lookup a password.

An orapass file has one entry per line::

	host:port:database:username:password

Each of the first four fields is either a case-insensitive literal or ``*``,
which matches anything. The line is split into at most five fields, so the
password may itself contain colons. Blank lines, lines with fewer than five
fields, and lines whose first non-blank character is ``#`` are ignored.
"""
import re

from . import exceptions as ora_exc

wildcard = '*'
field_count = 5
comment_re = re.compile(r'^\s*#')

#: the record fields that are compared with a query, in file order
match_fields = ('host', 'port', 'database', 'username')

def split(line):
	"""
	Split a line into its five fields. Returns None for comments and lines
	that do not have enough fields.
	"""
	line = line.rstrip('\r\n')
	if comment_re.match(line):
		return None
	fields = line.split(':', field_count - 1)
	if len(fields) < field_count:
		return None
	return fields

def match(query_value, file_value):
	"""
	Whether `file_value` accepts `query_value`.

	Literal values compare case-insensitively; a file value of ``*`` accepts
	any query value, including an empty one.
	"""
	if file_value == wildcard:
		return True
	return query_value.upper() == file_value.upper()

def pick(query_value, file_value):
	'the file value, unless it is a wildcard or empty'
	if file_value != wildcard and file_value != '':
		return file_value
	return query_value

def lookup_password(data, query, trace = None):
	"""
	lookup_password(file, query) -> (host, port, database, username, password)

	Scan the lines of `data` for the first entry matching the `host`, `port`,
	`database` and `username` attributes of `query`. Returns a five-tuple, or
	None when no line matches.
	"""
	for lineno, line in enumerate(data, 1):
		fields = split(line)
		if fields is None:
			continue
		trace and trace('    Parsing line %d' %(lineno,))

		matched = True
		for k, file_value in zip(match_fields, fields):
			if not match(getattr(query, k), file_value):
				trace and trace('        %s does not match' %(k,))
				matched = False
		if not matched:
			continue

		trace and trace('        Match detected')
		host, port, database, username, password = fields
		return (
			pick(query.host, host),
			pick(query.port, port),
			pick(query.database, database),
			username,
			password,
		)
	return None

def lookup_file(path, query, trace = None):
	"""
	Like lookup_password, but takes a file path.

	Raises `FileAccessError` when the file cannot be opened, `ReadError` when
	reading its lines fails, and `NoEntryFoundError` when nothing in it
	matches.
	"""
	trace and trace('Searching %r for %s/%s' %(path, query.username, query.database))
	try:
		f = open(path)
	except OSError as err:
		raise ora_exc.FileAccessError(
			"could not open orapass file",
			details = {'file': path, 'error': str(err)},
		) from err

	with f:
		try:
			r = lookup_password(f, query, trace = trace)
		except (OSError, UnicodeDecodeError) as err:
			raise ora_exc.ReadError(
				"could not read orapass file",
				details = {'file': path, 'error': str(err)},
			) from err

	if r is None:
		raise ora_exc.NoEntryFoundError(
			"could not find a suitable password entry",
			details = {'file': path},
		)
	return r
