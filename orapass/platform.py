##
# copyright 2026, Gregory Siems
# https://github.com/gsiems/orapass
##
"""
Platform profiles.

A profile states where the orapass file is looked for by default and whether
its permissions are enforced. `default_profile` is selected once, at import,
from `sys.platform`; pass another profile to the resolver to emulate a
different platform.
"""
import sys
import os

orapass_dotfile = '.orapass'
orapass_file = 'orapass'

# win32
appdata_envvar = 'APPDATA'
appdata_directory = 'oracle'

# posix
home_envvar = 'HOME'

#: owner read-write
required_mode = 0o600

class Profile(object):
	"""
	Platform capabilities relevant to locating and trusting an orapass file.

	`directory_envvar` names the environment variable holding the per-user
	directory; `subdirectory`, when given, is joined to it. When
	`enforce_permissions` is true, the file's mode must be exactly
	`required_mode`.
	"""
	def __init__(self,
		name,
		directory_envvar,
		subdirectory = None,
		enforce_permissions = True,
		filenames = (orapass_dotfile, orapass_file),
		fallback_directory = None,
	):
		self.name = name
		self.directory_envvar = directory_envvar
		self.subdirectory = subdirectory
		self.enforce_permissions = enforce_permissions
		self.filenames = tuple(filenames)
		self.fallback_directory = fallback_directory

	def __repr__(self):
		return '<%s.%s %r>' %(
			type(self).__module__,
			type(self).__name__,
			self.name,
		)

	def directory(self, environ = os.environ):
		'the per-user directory holding the default orapass files, or None'
		d = environ.get(self.directory_envvar)
		if not d and self.fallback_directory is not None:
			d = self.fallback_directory()
		if not d:
			return None
		if self.subdirectory:
			d = os.path.join(d, self.subdirectory)
		return d

	def default_paths(self, environ = os.environ):
		"""
		Produce the default orapass file paths in priority order: the dotfile
		first, then the plain name.
		"""
		d = self.directory(environ = environ)
		if d is None:
			return []
		return [os.path.join(d, x) for x in self.filenames]

def _expanduser():
	d = os.path.expanduser('~')
	# expanduser gives '~' back when it cannot resolve a home directory
	return None if d == '~' else d

posix = Profile('posix', home_envvar,
	enforce_permissions = True,
	fallback_directory = _expanduser,
)
win32 = Profile('win32', appdata_envvar,
	subdirectory = appdata_directory,
	enforce_permissions = False,
)

profiles = {
	posix.name : posix,
	win32.name : win32,
}

def select(name):
	'Get the profile named `name`; raises KeyError for unknown names'
	return profiles[name]

default_profile = posix
if sys.platform == 'win32':
	default_profile = win32
