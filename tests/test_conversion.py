import unittest

from contour import diagnostics
from contour.conversion import to_sequence, to_alternatives, intersect_all, union_to_intersection, combine
from contour.predicates import is_same
from contour.shapes import (
	NUMBER, STRING, BOOLEAN, WILDCARD, OPAQUE, BOTTOM, EMPTY, Sequence,
	literal, record, host, tuple_of, array_of, alternatives,
)

class UnionSequenceTests(unittest.TestCase):

	def test_to_sequence(self):
		it = to_sequence(alternatives(NUMBER, STRING, BOOLEAN))
		self.assertIsInstance(it, Sequence)
		self.assertTrue(it.fixed)
		# The order is not to be relied upon; only the contents.
		self.assertEqual({NUMBER, STRING, BOOLEAN}, set(it.elements))

	def test_to_sequence_edge_cases(self):
		self.assertEqual(tuple_of(), to_sequence(BOTTOM))
		self.assertEqual(tuple_of(NUMBER), to_sequence(NUMBER))
		self.assertEqual(tuple_of(WILDCARD), to_sequence(WILDCARD))

	def test_there_and_back(self):
		for s in (BOTTOM, NUMBER, record(a=NUMBER), alternatives(NUMBER, STRING, record(a=NUMBER))):
			with self.subTest(s=s):
				self.assertTrue(is_same(s, to_alternatives(to_sequence(s))))

	def test_to_alternatives(self):
		self.assertEqual(alternatives(NUMBER, STRING), to_alternatives(tuple_of(STRING, NUMBER, STRING)))
		self.assertIs(BOTTOM, to_alternatives(tuple_of()))
		self.assertEqual(NUMBER, to_alternatives(array_of(NUMBER)))
		self.assertIs(WILDCARD, to_alternatives(WILDCARD))

	def test_to_alternatives_wants_a_sequence(self):
		report = diagnostics.Report()
		self.assertIs(BOTTOM, to_alternatives(NUMBER, report))
		self.assertEqual("to_alternatives", report.issues[0].operation)

class IntersectionTests(unittest.TestCase):

	def test_keys_from_every_member(self):
		shape = tuple_of(record(a=NUMBER), record(b=STRING), record(a=literal(1)))
		self.assertEqual(record(a=literal(1), b=STRING), intersect_all(shape))

	def test_absent_keys_are_not_failures(self):
		shape = tuple_of(record(a=NUMBER, b=STRING), record(a=NUMBER))
		self.assertEqual(record(a=NUMBER, b=STRING), intersect_all(shape))

	def test_conflicting_values(self):
		report = diagnostics.Report()
		shape = tuple_of(record(a=NUMBER), record(a=STRING))
		self.assertEqual(record(a=BOTTOM), intersect_all(shape, report))
		self.assertEqual(1, len(report.issues))

	def test_host_members(self):
		shape = tuple_of(record(a=NUMBER), host(b=STRING))
		self.assertEqual(host(a=NUMBER, b=STRING), intersect_all(shape))

	def test_sentinel_members(self):
		self.assertIs(BOTTOM, intersect_all(tuple_of(record(a=NUMBER), BOTTOM)))
		self.assertIs(WILDCARD, intersect_all(tuple_of(record(a=NUMBER), WILDCARD)))
		self.assertEqual(record(a=NUMBER), intersect_all(tuple_of(OPAQUE, record(a=NUMBER))))
		self.assertIs(OPAQUE, intersect_all(tuple_of()))

	def test_malformed(self):
		report = diagnostics.Report()
		self.assertIs(BOTTOM, intersect_all(tuple_of(record(a=NUMBER), NUMBER), report))
		self.assertIs(BOTTOM, intersect_all(array_of(record(a=NUMBER)), report))
		self.assertEqual(2, len(report.issues))

	def test_union_to_intersection(self):
		shape = alternatives(record(a=NUMBER), record(b=STRING))
		self.assertEqual(record(a=NUMBER, b=STRING), union_to_intersection(shape))

class CombineTests(unittest.TestCase):

	def test_mapping_is_its_own_closure(self):
		shape = record(a=NUMBER, b=record(c=STRING))
		self.assertEqual(shape, combine(shape))

	def test_distributes_over_alternatives(self):
		shape = alternatives(record(a=NUMBER), tuple_of(record(b=STRING), record(c=BOOLEAN)))
		expect = alternatives(record(a=NUMBER), record(b=STRING, c=BOOLEAN))
		self.assertEqual(expect, combine(shape))

	def test_opaque_combines_to_nothing(self):
		self.assertEqual(EMPTY, combine(OPAQUE))
		self.assertEqual(alternatives(EMPTY, record(a=NUMBER)), combine(alternatives(OPAQUE, record(a=NUMBER))))

	def test_other_shapes_are_left_alone(self):
		for s in (NUMBER, WILDCARD, BOTTOM, tuple_of(), tuple_of(NUMBER), array_of(record(a=NUMBER))):
			with self.subTest(s=s):
				self.assertEqual(s, combine(s))

if __name__ == '__main__':
	unittest.main()
