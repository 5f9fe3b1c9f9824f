##
# .test.test_orapassfile
##
import unittest
from io import StringIO
from .. import orapassfile as client_orapass
from ..resolver import Query

passfile_sample = """
localhost:1521:emp:scott:tiger
localhost:1521:*:scott:lion
localhost:1522:emp:scott:bear
localhost:*:emp:scott:cat
otherhost:*:emp:scott:elephant
otherhost:1521:newemp:eve:seal
*:1521:oldemp:alice:wolf
"""

passfile_sample_map = {
	('localhost', '1521', 'emp', 'scott') : 'tiger',
	('LOCALHOST', '1521', 'EMP', 'Scott') : 'tiger',
	('localhost', '1521', 'nosuchdb', 'scott') : 'lion',
	('localhost', '1522', 'emp', 'scott') : 'bear',
	('localhost', '1234', 'emp', 'scott') : 'cat',
	('otherhost', '1523', 'emp', 'scott') : 'elephant',
	('otherhost', '1521', 'newemp', 'eve') : 'seal',
	('somehost', '1521', 'oldemp', 'alice') : 'wolf',
	('localhost', '1521', 'emp', 'walter') : None,
	('otherhost', '1521', 'anydb', 'scott') : None,
	('otherhost', '1523', '', 'scott') : None,
	('newhost', '1521', 'oldemp', 'scott') : None,
}

difficult_passfile_sample = """
# localhost:1521:emp:scott:commented
   # localhost:1521:emp:scott:indented
\t# localhost:1521:emp:scott:tabbed

localhost:1521:emp
localhost:1521:emp:scott
localhost:1521:emp:scott:pa:ss:word
localhost:1521:emp:scott:second
"""

def query(host, port, database, username):
	return Query(host = host, port = port, database = database, username = username)

class test_orapass(unittest.TestCase):
	def test_sample(self):
		for k, pw in passfile_sample_map.items():
			r = client_orapass.lookup_password(StringIO(passfile_sample), query(*k))
			lpw = r and r[-1]
			self.assertEqual(lpw, pw,
				"password lookup incongruity, expecting %r got %r with %r"
				" in \n%s" %(
					pw, lpw, k, passfile_sample
				)
			)

	def test_first_match_wins(self):
		r = client_orapass.lookup_password(
			StringIO(passfile_sample),
			query('localhost', '1521', 'emp', 'scott'),
		)
		self.assertEqual(r, ('localhost', '1521', 'emp', 'scott', 'tiger'))

	def test_comments_and_short_lines(self):
		r = client_orapass.lookup_password(
			StringIO(difficult_passfile_sample),
			query('localhost', '1521', 'emp', 'scott'),
		)
		self.assertEqual(r[-1], 'pa:ss:word')

	def test_only_comments(self):
		data = "# localhost:1521:emp:scott:tiger\n\n   #*:*:*:*:x\n\n"
		self.assertEqual(
			client_orapass.lookup_password(StringIO(data), query('a', 'b', 'c', 'd')),
			None
		)

	def test_wildcard_resolution(self):
		r = client_orapass.lookup_password(
			StringIO("localhost:1521:*:scott:lion\n"),
			query('localhost', '1521', 'nosuchdb', 'scott'),
		)
		self.assertEqual(r, ('localhost', '1521', 'nosuchdb', 'scott', 'lion'))

	def test_literal_case_is_kept(self):
		r = client_orapass.lookup_password(
			StringIO("LOCALHOST:1521:EMP:Scott:tiger\n"),
			query('localhost', '1521', 'emp', 'scott'),
		)
		self.assertEqual(r, ('LOCALHOST', '1521', 'EMP', 'Scott', 'tiger'))

	def test_wildcard_username_is_kept(self):
		r = client_orapass.lookup_password(
			StringIO("*:*:*:*:anything\n"),
			query('h', 'p', 'd', 'u'),
		)
		self.assertEqual(r, ('h', 'p', 'd', '*', 'anything'))

	def test_line_terminators(self):
		r = client_orapass.lookup_password(
			StringIO("localhost:1521:emp:scott: tiger \r\n"),
			query('localhost', '1521', 'emp', 'scott'),
		)
		self.assertEqual(r[-1], ' tiger ')

	def test_trace(self):
		msgs = []
		client_orapass.lookup_password(
			StringIO(passfile_sample),
			query('localhost', '1522', 'emp', 'scott'),
			trace = msgs.append,
		)
		self.assertEqual(msgs[-1].strip(), 'Match detected')
		self.assertTrue('        port does not match' in msgs)

class test_match(unittest.TestCase):
	def test_literal(self):
		self.assertTrue(client_orapass.match('localhost', 'LOCALHOST'))
		self.assertTrue(client_orapass.match('Emp', 'eMP'))
		self.assertFalse(client_orapass.match('emp', 'emp2'))
		self.assertFalse(client_orapass.match('', 'emp'))

	def test_wildcard(self):
		self.assertTrue(client_orapass.match('anything', '*'))
		self.assertTrue(client_orapass.match('', '*'))
		# only the file side is a wildcard
		self.assertFalse(client_orapass.match('*', 'emp'))

	def test_pick(self):
		self.assertEqual(client_orapass.pick('query', 'file'), 'file')
		self.assertEqual(client_orapass.pick('query', '*'), 'query')
		self.assertEqual(client_orapass.pick('query', ''), 'query')

	def test_split(self):
		self.assertEqual(client_orapass.split('a:b:c:d:e:f\n'), ['a', 'b', 'c', 'd', 'e:f'])
		self.assertEqual(client_orapass.split('a:b:c:d'), None)
		self.assertEqual(client_orapass.split(''), None)
		self.assertEqual(client_orapass.split('  #a:b:c:d:e'), None)
		self.assertEqual(client_orapass.split('a:b:c:d:'), ['a', 'b', 'c', 'd', ''])

if __name__ == '__main__':
	unittest.main()
