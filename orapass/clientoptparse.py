##
# copyright 2026, Gregory Siems
# https://github.com/gsiems/orapass
##
"""
orapass command-line client optparse options.

The query options are collected, in the order given, on the parser values'
`query_parameters` list as (key, value) pairs. `query_keywords` turns that
list into keywords for `orapass.resolver.Query`.
"""
import optparse
from functools import partial

def append_query_parameters(option, opt_str, value, parser):
	# for options without arguments, None is passed in.
	value = True if value is None else value
	parser.values.query_parameters.append(
		(option.dest, value)
	)

make_option = partial(optparse.make_option,
	action = 'callback',
	callback = append_query_parameters
)

username = make_option('-u', '--username',
	dest = 'username',
	type = 'str',
	help = 'user to obtain a password for; overrides ORACLE_USER, defaults to the OS user',
)
host = make_option('-h', '--host',
	dest = 'host',
	type = 'str',
	help = 'database server host; overrides ORACLE_HOST, defaults to localhost',
)
port = make_option('-p', '--port',
	dest = 'port',
	type = 'str',
	help = 'database server port; overrides ORACLE_PORT, defaults to 1521',
)
database = make_option('-d', '--database',
	dest = 'database',
	type = 'str',
	help = "database's name; overrides ORACLE_SID",
)
orapassfile = make_option('-f', '--file',
	dest = 'orapassfile',
	type = 'str',
	help = 'orapass file to search for first',
)
debug = make_option('--debug',
	dest = 'debug',
	help = 'print the progress of the lookup to standard error',
)

quiet = optparse.make_option('-q', '--quiet',
	dest = 'quiet',
	action = 'store_true',
	default = False,
	help = 'do not print any error messages',
)

# Query Options
standard = [username, host, port, database, orapassfile, debug]

class StandardParser(optparse.OptionParser):
	"""
	Option parser for the query options.
	This parser subclass is necessary for two reasons:

	 1. _add_help_option override to not conflict with -h
	 2. Initialize the query_parameters on the parser's values.
	"""
	standard_option_list = standard

	def get_default_values(self, *args, **kw):
		v = super().get_default_values(*args, **kw)
		v.query_parameters = []
		return v

	def _add_help_option(self):
		# Only allow long --help so that it will not conflict with -h(host)
		self.add_option("--help",
			action = "help",
			help = "show this help message and exit",
		)

# Extended Options
default = standard + [
	quiet,
]

class DefaultParser(StandardParser):
	'Parser that includes the --quiet option of the orapass command'
	standard_option_list = default

def query_keywords(co):
	'later options override earlier ones'
	return dict(getattr(co, 'query_parameters', ()))

if __name__ == '__main__':
	import pprint
	p = DefaultParser()
	(co, ca) = p.parse_args()
	print("Parameters(co.query_parameters):")
	pprint.pprint(co.query_parameters)
	print("Remainder(ca):")
	pprint.pprint(ca)
