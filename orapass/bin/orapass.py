##
# copyright 2026, Gregory Siems
# https://github.com/gsiems/orapass
##
"""
Retrieve a database password for an Oracle user.

The database may be given by the ORACLE_SID environment variable or -d. The
host by ORACLE_HOST or -h, defaulting to localhost. The port by ORACLE_PORT or
-p, defaulting to 1521. The username by ORACLE_USER or -u, defaulting to the
logged in user.

On success, the password is printed to standard output.
"""
import os
import sys

from .. import clientoptparse
from .. import resolver as ora_resolver
from .. import exceptions as ora_exc

def command(args = sys.argv, environ = os.environ, stdout = None, stderr = None):
	stdout = stdout or sys.stdout
	stderr = stderr or sys.stderr
	p = clientoptparse.DefaultParser(
		"%prog [-u username] [-h host] [-p port] [-d database] [-f file]",
		description = __doc__.strip().split('\n\n')[0],
	)
	co, ca = p.parse_args(args[1:])
	if ca:
		p.error("unexpected arguments: " + ' '.join(ca))

	query = ora_resolver.Query(**clientoptparse.query_keywords(co))
	try:
		r = ora_resolver.resolve(query, environ = environ)
	except ora_exc.Error as err:
		if not co.quiet:
			stderr.write(str(err) + os.linesep)
		return 1

	stdout.write(r.password + os.linesep)
	return 0

if __name__ == '__main__':
	sys.exit(command(sys.argv))
