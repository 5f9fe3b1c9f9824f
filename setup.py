#!/usr/bin/env python
##
# setup.py - .release.setuptools
##
import sys
import os

if sys.version_info[:2] < (3,6):
	sys.stderr.write(
		"ERROR: orapass is for Python 3.6 and greater." + os.linesep
	)
	sys.stderr.write(
		"HINT: setup.py was ran using Python " + \
		'.'.join([str(x) for x in sys.version_info[:3]]) +
		': ' + sys.executable + os.linesep
	)
	sys.exit(1)

# project data is kept in `orapass.project`
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

sys.dont_write_bytecode = True
import orapass.project as project
sys.dont_write_bytecode = False

LONG_DESCRIPTION = """
orapass retrieves Oracle passwords from a .pgpass-like file so that they do
not need to be hard-coded in scripts, applications, or configuration files.

Entries take the form ``host:port:database:username:password`` where each of
the first four fields is a case-insensitive literal or ``*``.
"""

CLASSIFIERS = [
	'Development Status :: 5 - Production/Stable',
	'Intended Audience :: Developers',
	'Intended Audience :: System Administrators',
	'License :: OSI Approved :: MIT License',
	'Natural Language :: English',
	'Operating System :: OS Independent',
	'Programming Language :: Python',
	'Programming Language :: Python :: 3',
	'Topic :: Database',
]

def standard_setup_keywords():
	return {
		'name' : project.name,
		'version' : project.version,
		'description' : project.description,
		'long_description' : LONG_DESCRIPTION,
		'author' : project.author,
		'url' : project.identity,
		'classifiers' : CLASSIFIERS,
		'packages' : [
			'orapass',
			'orapass.bin',
			'orapass.test',
		],
		'python_requires' : '>=3.6',
		'entry_points' : {
			'console_scripts' : [
				'orapass = orapass.bin.orapass:command',
			],
		},
		'test_suite' : 'orapass.test.testall',
	}

if __name__ == '__main__':
	from setuptools import setup
	setup(**standard_setup_keywords())
