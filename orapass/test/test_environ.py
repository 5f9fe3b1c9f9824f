##
# .test.test_environ
##
import unittest
from .. import environ as client_environ

env_samples = [
	(
		{
			'ORACLE_USER' : 'the_user',
			'ORACLE_HOST' : 'the_host',
		},
		{
			'username' : 'the_user',
			'host' : 'the_host',
		}
	),
	(
		{
			'ORACLE_SID' : 'emp',
			'ORACLE_PORT' : '1522',
			'ORAPASSFILE' : '/path/to/orapass',
		},
		{
			'database' : 'emp',
			'port' : '1522',
			'orapassfile' : '/path/to/orapass',
		}
	),
	(
		{
			'ORACLE_HOST' : '',
			'ORACLE_HOME' : '/opt/oracle',
			'PGHOST' : 'unseen',
		},
		{}
	),
]

class environ(unittest.TestCase):
	def runTest(self):
		for env, dst in env_samples:
			z = client_environ.convert_environ(env)
			self.assertEqual(dst, z,
				"environment conversion incongruity %r -> %r != %r" %(
					env, z, dst
				)
			)

class envvar(unittest.TestCase):
	def runTest(self):
		self.assertEqual(client_environ.envvar('database'), 'ORACLE_SID')
		self.assertEqual(client_environ.envvar('orapassfile'), 'ORAPASSFILE')
		self.assertRaises(KeyError, client_environ.envvar, 'password')

if __name__ == '__main__':
	unittest.main()
