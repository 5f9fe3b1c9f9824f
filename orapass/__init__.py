##
# copyright 2026, Gregory Siems
# https://github.com/gsiems/orapass
##
"""
orapass retrieves Oracle passwords from a PostgreSQL .pgpass inspired file so
that they do not need to be hard-coded in scripts, applications, or
configuration files.

The orapass file is a colon separated file with one entry per line::

	host:port:database(SID):username:password

Each of the first four fields can be a case-insensitive literal value or
``*``, which acts as a match-anything wildcard. Blank and commented out lines
are ignored.
"""
__all__ = [
	'__author__',
	'__date__',
	'__project__',
	'__project_id__',
	'__docformat__',
	'__version__',
	'version',
	'version_info',
	'lookup',
]

from . import project

__author__ = project.author
__date__ = project.date
__docformat__ = 'reStructuredText'

__project__ = project.name
__project_id__ = project.identity

#: The orapass version tuple.
version_info = project.version_info

#: The orapass version string.
version = __version__ = project.version

# Avoid importing these until requested.
_ora_resolver = None
def lookup(**kw):
	"""
	Lookup the password for the given query keywords and return the resolved
	`orapass.resolver.Record`::

		>>> import orapass
		>>> r = orapass.lookup(host = 'dbhost', database = 'emp', username = 'scott')
		>>> r.password
		'tiger'

	Query keywords are ``host``, ``port``, ``database``, ``username``,
	``orapassfile``, and ``debug``. The ``environ``, ``profile``, ``getuser``,
	and ``trace`` keywords are given to the `orapass.resolver.Resolver`.

	Failures raise subclasses of `orapass.exceptions.Error`.
	"""
	global _ora_resolver
	if _ora_resolver is None:
		from . import resolver as _ora_resolver
	return _ora_resolver.resolve(**kw)
