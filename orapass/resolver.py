##
# copyright 2026, Gregory Siems
# https://github.com/gsiems/orapass
##
"""
Resolve an Oracle password from an orapass file.

Resolution is linear and stops at the first success:

 1. Fill the empty fields of the query from the environment
    (ORACLE_HOST, ORACLE_PORT, ORACLE_SID, ORACLE_USER) and then from the
    hard defaults (``localhost``, ``1521``, the OS user).
 2. Locate the orapass file: the query's explicit path, ORAPASSFILE, then the
    platform profile's default paths. The first regular file wins.
 3. When the profile enforces permissions, require the file's mode to be
    exactly 0600.
 4. Scan the file for the first matching entry.

Usage::

	>>> from orapass.resolver import Query, resolve
	>>> resolve(Query(host = 'localhost', database = 'emp', username = 'scott'))
	orapass.resolver.Record(('localhost', '1521', 'emp', 'scott', 'tiger'))
"""
import os
import stat
import getpass
from operator import itemgetter

from . import environ as ora_environ
from . import platform as ora_platform
from . import orapassfile as ora_pass
from . import exceptions as ora_exc
from . import sys as ora_sys

default_host = 'localhost'
default_port = '1521'

class Query(tuple):
	"""
	Query(host, port, database, username, orapassfile = None, debug = False)

	The search criteria of a lookup. Empty fields are unspecified and are
	filled in by `Resolver.defaults`.
	"""
	__slots__ = ()
	_fields = ('host', 'port', 'database', 'username', 'orapassfile', 'debug')

	def __new__(subtype,
		host = '',
		port = '',
		database = '',
		username = '',
		orapassfile = None,
		debug = False,
	):
		return tuple.__new__(subtype, (
			'' if host is None else str(host),
			'' if port is None else str(port),
			'' if database is None else str(database),
			'' if username is None else str(username),
			orapassfile or None,
			bool(debug),
		))

	host = property(itemgetter(0))
	port = property(itemgetter(1))
	database = property(itemgetter(2))
	username = property(itemgetter(3))
	orapassfile = property(itemgetter(4))
	debug = property(itemgetter(5))

	def replace(self, **kw):
		'a new Query with the given fields replaced'
		d = dict(zip(self._fields, self))
		d.update(kw)
		return type(self)(**d)

	def __repr__(self):
		return '%s.%s(%s)' %(
			type(self).__module__,
			type(self).__name__,
			', '.join(['%s = %r' %(k, v) for k, v in zip(self._fields, self)]),
		)

class Record(tuple):
	"""
	Record(host, port, database, username, password)

	A resolved orapass entry. The fields are always literal strings.
	"""
	__slots__ = ()
	_fields = ('host', 'port', 'database', 'username', 'password')

	def __new__(subtype, host, port, database, username, password):
		return tuple.__new__(subtype, (host, port, database, username, password))

	host = property(itemgetter(0))
	port = property(itemgetter(1))
	database = property(itemgetter(2))
	username = property(itemgetter(3))
	password = property(itemgetter(4))

	def __repr__(self):
		return '%s.%s(%s)' %(
			type(self).__module__,
			type(self).__name__,
			tuple.__repr__(self),
		)

def os_user(getuser = getpass.getuser):
	'the OS reported user name, or an empty string when it cannot be determined'
	try:
		return getuser() or ''
	except (KeyError, OSError):
		return ''

def coalesce(*args):
	'pick the first non-empty string'
	for x in args:
		if x:
			return x
	return ''

def find_orapassfile(candidates, trace = None):
	"""
	Return the first path in `candidates` that is a regular file, or None.

	Paths that do not exist are passed over; any other failure to stat a path
	raises `FileAccessError`.
	"""
	for path in candidates:
		trace and trace('Looking for file %r' %(path,))
		try:
			st = os.stat(path)
		except (FileNotFoundError, NotADirectoryError):
			continue
		except OSError as err:
			raise ora_exc.FileAccessError(
				"could not access orapass file candidate",
				details = {'file': path, 'error': str(err)},
			) from err

		if not stat.S_ISREG(st.st_mode):
			trace and trace('%r is not a regular file' %(path,))
			continue
		trace and trace('Found %r' %(path,))
		return path
	trace and trace('No orapass file found')
	return None

def check_permissions(path, required_mode = ora_platform.required_mode):
	"""
	Raise `PermissionPolicyError` unless the permission bits of `path` are
	exactly `required_mode`.
	"""
	try:
		st = os.stat(path)
	except OSError as err:
		raise ora_exc.FileAccessError(
			"could not access orapass file",
			details = {'file': path, 'error': str(err)},
		) from err

	mode = stat.S_IMODE(st.st_mode)
	if mode != required_mode:
		raise ora_exc.PermissionPolicyError(
			"permissions on orapass file are incorrect; should be %o, got %o" %(
				required_mode, mode
			),
			details = {
				'file': path,
				'expected': '%04o' %(required_mode,),
				'actual': '%04o' %(mode,),
			},
			expected = required_mode,
			actual = mode,
		)

class Resolver(object):
	"""
	Password resolution bound to an environment and a platform profile.

	`environ` is consulted for the ORACLE_* overrides and for the profile's
	directory; it is never modified. `getuser` provides the fallback username.
	`trace`, when given, receives every debug message regardless of the
	query's debug flag.
	"""
	def __init__(self,
		environ = os.environ,
		profile = None,
		getuser = None,
		trace = None,
	):
		self.environ = environ
		self.profile = profile or ora_platform.default_profile
		self.getuser = getuser or getpass.getuser
		self.trace = trace

	def tracer(self, query):
		'the trace callable for a resolution of `query`, if any'
		if self.trace is not None:
			return self.trace
		if query.debug:
			return ora_sys.trace
		return None

	def defaults(self, query):
		'a Query with the unspecified fields substituted'
		env = ora_environ.convert_environ(self.environ)
		return query.replace(
			host = coalesce(query.host, env.get('host'), default_host),
			port = coalesce(query.port, env.get('port'), default_port),
			database = coalesce(query.database, env.get('database')),
			username = coalesce(
				query.username, env.get('username'), os_user(self.getuser)
			),
		)

	def candidates(self, query, trace = None):
		'the orapass file paths to check, in priority order'
		env = ora_environ.convert_environ(self.environ)
		l = []
		for path in [
			query.orapassfile, env.get('orapassfile')
		] + self.profile.default_paths(environ = self.environ):
			if path:
				trace and trace('Adding %r to search list' %(path,))
				l.append(path)
		return l

	def resolve(self, query):
		"""
		Resolve the `query` into a `Record`.

		Raises `FileAccessError`, `PermissionPolicyError`,
		`NoEntryFoundError`, or `ReadError`.
		"""
		trace = self.tracer(query)
		query = self.defaults(query)
		path = find_orapassfile(self.candidates(query, trace = trace), trace = trace)
		if path is None:
			raise ora_exc.NoEntryFoundError(
				"could not find a suitable password entry; no orapass file found",
			)

		if self.profile.enforce_permissions:
			check_permissions(path)

		return Record(*ora_pass.lookup_file(path, query, trace = trace))

def resolve(query = None,
	environ = os.environ,
	profile = None,
	getuser = None,
	trace = None,
	**kw
):
	"""
	Resolve a password using a `Resolver` built from the given context.

	If `query` is None, it is built from the remaining keywords.
	"""
	if query is None:
		query = Query(**kw)
	return Resolver(
		environ = environ,
		profile = profile,
		getuser = getuser,
		trace = trace,
	).resolve(query)
