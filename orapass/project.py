'project information'

#: project name
name = 'orapass'

#: IRI based project identity
identity = 'https://github.com/gsiems/orapass'

author = 'Gregory Siems'
description = 'Lookup Oracle passwords in a .pgpass-like orapass file'

# Set this to the target date when approaching a release.
date = 'Sun Oct 18 12:00:00 2026'
tags = set(('features',))
version_info = (1, 0, 0)
version = '.'.join(map(str, version_info)) + (date is None and 'dev' or '')
