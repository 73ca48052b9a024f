import unittest

from contour import logic
from contour.logic import MAYBE

VERDICTS = (True, False, MAYBE)

class KleeneTests(unittest.TestCase):

	def test_maybe_has_no_truth_value(self):
		with self.assertRaises(TypeError):
			if MAYBE: pass

	def test_negate(self):
		self.assertIs(False, logic.negate(True))
		self.assertIs(True, logic.negate(False))
		self.assertIs(MAYBE, logic.negate(MAYBE))

	def test_conjoin_table(self):
		for a in VERDICTS:
			for b in VERDICTS:
				with self.subTest(a=a, b=b):
					it = logic.conjoin(a, b)
					if a is False or b is False: self.assertIs(False, it)
					elif a is True and b is True: self.assertIs(True, it)
					else: self.assertIs(MAYBE, it)

	def test_disjoin_table(self):
		for a in VERDICTS:
			for b in VERDICTS:
				with self.subTest(a=a, b=b):
					it = logic.disjoin(a, b)
					if a is True or b is True: self.assertIs(True, it)
					elif a is False and b is False: self.assertIs(False, it)
					else: self.assertIs(MAYBE, it)

	def test_quantifiers(self):
		self.assertIs(True, logic.all_of([]))
		self.assertIs(False, logic.any_of([]))
		self.assertIs(MAYBE, logic.all_of([True, MAYBE]))
		self.assertIs(False, logic.all_of([MAYBE, False]))
		self.assertIs(True, logic.any_of([MAYBE, True]))
		self.assertIs(MAYBE, logic.any_of([False, MAYBE]))

	def test_quantifiers_short_circuit(self):
		def explode():
			yield False
			raise AssertionError("Should have stopped already.")
		self.assertIs(False, logic.all_of(explode()))

	def test_consensus(self):
		self.assertIs(True, logic.consensus([]))
		self.assertIs(True, logic.consensus([True, True]))
		self.assertIs(False, logic.consensus([False]))
		self.assertIs(MAYBE, logic.consensus([True, False]))
		self.assertIs(MAYBE, logic.consensus([MAYBE, MAYBE]))

	def test_resolve(self):
		self.assertIs(True, logic.resolve(MAYBE, True))
		self.assertIs(False, logic.resolve(MAYBE, False))
		self.assertIs(False, logic.resolve(False, True))
		self.assertTrue(all(logic.is_verdict(v) for v in VERDICTS))
		self.assertFalse(logic.is_verdict(None))

if __name__ == '__main__':
	unittest.main()
