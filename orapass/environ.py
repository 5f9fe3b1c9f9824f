##
# copyright 2026, Gregory Siems
# https://github.com/gsiems/orapass
##
"""
Oracle client environment variable extraction.

This module translates an environment mapping into the generic terms used by
a query:

	ORACLE_HOST -> host
	ORACLE_PORT -> port
	ORACLE_SID -> database
	ORACLE_USER -> username
	ORAPASSFILE -> orapassfile

These are a finite map with zero manipulation of the values. Empty values are
treated as absent.

The environment is always given as an argument so that a lookup never has to
consult, or a test mutate, `os.environ`.
"""
import os

# Environment variables that require no transformation.
exact_map = {
	'ORACLE_HOST' : 'host',
	'ORACLE_PORT' : 'port',
	'ORACLE_SID' : 'database',
	'ORACLE_USER' : 'username',
	'ORAPASSFILE' : 'orapassfile',
}

def convert_environ(env = os.environ, envmap = exact_map):
	'given an environment, make a query parameter dictionary'
	return {
		v : env[k] for k, v in envmap.items() if env.get(k)
	}

def envvar(key, envmap = exact_map):
	"""
	Return the environment variable name for the given query key.

	>>> envvar('database')
	'ORACLE_SID'
	"""
	for k, v in envmap.items():
		if v == key:
			return k
	raise KeyError(key)
