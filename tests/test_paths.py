import unittest

from contour import diagnostics
from contour.paths import paths
from contour.predicates import is_same
from contour.shapes import (
	NUMBER, STRING, WILDCARD, OPAQUE, BOTTOM, EMPTY, Knot, Mapping, SymbolKey,
	literal, record, host, tuple_of, array_of, fn, alternatives,
)

class PathTests(unittest.TestCase):

	def setUp(self) -> None:
		self.report = diagnostics.Report()

	def test_deep_path(self):
		self.assertEqual(Mapping({"a.b.c": BOTTOM}), paths(record(a=record(b=record(c=BOTTOM)))))

	def test_several_leaves(self):
		shape = record(a=record(b=NUMBER, c=record(d=STRING)), e=literal(1))
		expect = Mapping({"a.b": NUMBER, "a.c.d": STRING, "e": literal(1)})
		self.assertEqual(expect, paths(shape))

	def test_flat_mapping_comes_back_as_is(self):
		shape = record(a=NUMBER, b=tuple_of(STRING), c=fn(), d=array_of(record(x=NUMBER)), e=WILDCARD)
		self.assertTrue(is_same(shape, paths(shape)))

	def test_terminal_cases(self):
		for s in (WILDCARD, OPAQUE, BOTTOM, EMPTY):
			with self.subTest(s=s):
				self.assertIs(s, paths(s))

	def test_non_mappings_have_no_paths(self):
		for s in (NUMBER, tuple_of(NUMBER), fn()):
			with self.subTest(s=s):
				self.assertIs(BOTTOM, paths(s, report=self.report))
		self.assertEqual(3, len(self.report.issues))
		self.assertEqual("paths", self.report.issues[0].operation)

	def test_host_types_need_lenient_mode(self):
		self.assertIs(BOTTOM, paths(host(a=NUMBER)))
		self.assertEqual(Mapping({"a": NUMBER}), paths(host(a=NUMBER), strict=False))

	def test_nested_host_types(self):
		shape = record(a=host(b=NUMBER))
		self.assertEqual(Mapping({"a": host(b=NUMBER)}), paths(shape))
		self.assertEqual(Mapping({"a.b": NUMBER}), paths(shape, strict=False))

	def test_distributes_over_alternatives(self):
		shape = alternatives(record(a=record(b=NUMBER)), record(c=STRING))
		expect = alternatives(Mapping({"a.b": NUMBER}), record(c=STRING))
		self.assertEqual(expect, paths(shape))

	def test_symbol_keys_are_left_out(self):
		shape = Mapping({SymbolKey("s"): NUMBER, "a": record(b=STRING)})
		self.assertEqual(Mapping({"a.b": STRING}), paths(shape))

	def test_numeric_keys(self):
		shape = Mapping({1: record(x=NUMBER)})
		self.assertEqual(Mapping({"1.x": NUMBER}), paths(shape))

	def test_colliding_paths_meet(self):
		shape = Mapping({"a.b": literal(1), "a": record(b=NUMBER)})
		self.assertEqual(Mapping({"a.b": literal(1)}), paths(shape))

	def test_cycles_end_in_opaque(self):
		k = Knot("node")
		node = record(value=NUMBER, next=k)
		k.tie(node)
		self.assertEqual(Mapping({"value": NUMBER, "next": OPAQUE}), paths(node))

	def test_deeper_cycles(self):
		k = Knot("tree")
		k.tie(record(label=STRING, child=record(up=k)))
		self.assertEqual(Mapping({"label": STRING, "child.up": OPAQUE}), paths(k))

if __name__ == '__main__':
	unittest.main()
