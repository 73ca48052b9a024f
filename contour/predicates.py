"""
Questions about shapes which have (mostly) yes-or-no answers.

	is_same: Are these exactly the same shape?
	subtype: Does every value of the first shape also fit the second? (Also known as "extends".)
	equals: Is each a subtype of the other?
	is_in, is_each: Does a shape fit some (or every) candidate in a set?
	is_empty: Does a shape have no enumerable keys?

The subtype relation does not distribute over alternatives on its own account.
A set of alternatives on the left is one composite shape: it fits only if every member fits.
A set of alternatives on the right accepts anything that fits at least one member.
The membership tests are where distribution over a target's alternatives happens, on purpose.

Asking whether the wildcard fits some particular shape answers MAYBE.
See the logic module for what to do about that.
"""
from typing import NamedTuple, Optional
from boozetools.support.foundation import Visitor
from .logic import VERDICT, MAYBE, conjoin, all_of, any_of, consensus
from .classifier import resolve, is_universal
from .shapes import (
	Shape, Scalar, Sequence, Mapping, FunctionShape, Alternatives,
	WILDCARD, OPAQUE, BOTTOM, members_of, alternatives,
)

class Identity(Visitor):
	"""
	Exact structural identity. Numbers settle most questions straight away;
	the structural walk is only needed when knots are involved,
	because a knot is a different shape from what it is tied to.
	"""
	def __init__(self):
		self._path = set()

	def do(self, a: Shape, b: Shape) -> bool:
		a, b = resolve(a), resolve(b)
		if a.number == b.number: return True
		if type(a) is not type(b): return False
		pair = a.number, b.number
		if pair in self._path:
			# Come back around: both sides read as OPAQUE, which is the same as itself.
			return True
		self._path.add(pair)
		try: return self.visit(a, b)
		finally: self._path.discard(pair)

	def _parallel(self, these, those) -> bool:
		return len(these) == len(those) and all(self.do(x, y) for x, y in zip(these, those))

	@staticmethod
	def visit_Scalar(_a: Scalar, _b: Scalar):
		return False  # Scalars never contain knots, so differing numbers settle it.

	def visit_Sequence(self, a: Sequence, b: Sequence):
		return a.fixed == b.fixed and self._parallel(a.elements, b.elements)

	def visit_Mapping(self, a: Mapping, b: Mapping):
		if a.strict != b.strict or a.entries.keys() != b.entries.keys(): return False
		return all(self.do(a[k], b[k]) for k in a.entries)

	def visit_FunctionShape(self, a: FunctionShape, b: FunctionShape):
		return self.do(a.params, b.params) and self.do(a.result, b.result)

	def visit_Alternatives(self, a: Alternatives, b: Alternatives):
		# Equal as sets, which means each side covers the other.
		def covered(these, those): return all(any(self.do(x, y) for y in those) for x in these)
		return covered(a.members, b.members) and covered(b.members, a.members)


class Subsumption(Visitor):
	"""
	The structural subtype relation. The order of the tests in `do` matters,
	because several of the sentinel cases overlap.

	Function shapes compare their parameter lists the same way round as their results.
	That is not the textbook (contravariant) rule, and it is deliberate.
	"""
	def __init__(self):
		self._path = set()

	def do(self, a: Shape, b: Shape) -> VERDICT:
		a, b = resolve(a), resolve(b)
		if a.number == b.number: return True
		if a is BOTTOM: return True
		if b is BOTTOM: return False
		if b is WILDCARD or b is OPAQUE: return True
		if isinstance(a, Alternatives): return all_of(self.do(m, b) for m in a.members)
		if isinstance(b, Alternatives): return any_of(self.do(a, m) for m in b.members)
		if a is WILDCARD: return MAYBE
		if a is OPAQUE: return False
		if type(a) is not type(b): return False
		pair = a.number, b.number
		if pair in self._path:
			return True  # A revisit reads as OPAQUE, and OPAQUE fits OPAQUE.
		self._path.add(pair)
		try: return self.visit(a, b)
		finally: self._path.discard(pair)

	@staticmethod
	def visit_Scalar(a: Scalar, b: Scalar):
		# Same-numbered scalars were dealt with already. What remains is literal-versus-kind.
		return a.kind == b.kind and not b.is_literal()

	def visit_Sequence(self, a: Sequence, b: Sequence):
		if b.fixed:
			if not a.fixed or len(a) != len(b): return False
			return all_of(self.do(x, y) for x, y in zip(a.elements, b.elements))
		else:
			return all_of(self.do(x, b.element) for x in a.elements)

	def visit_Mapping(self, a: Mapping, b: Mapping):
		return all_of(
			self.do(a[k], v) if k in a else False
			for k, v in b.entries.items()
		)

	def visit_FunctionShape(self, a: FunctionShape, b: FunctionShape):
		return conjoin(self.do(a.params, b.params), self.do(a.result, b.result))


def is_same(a: Shape, b: Shape) -> bool:
	return Identity().do(a, b)

def subtype(a: Shape, b: Shape) -> VERDICT:
	return Subsumption().do(a, b)

extends = subtype

def equals(a: Shape, b: Shape) -> VERDICT:
	return conjoin(subtype(a, b), subtype(b, a))

def _membership(target: Shape, candidates: Shape, strict: bool, quantifier) -> VERDICT:
	options = members_of(resolve(candidates))
	def test(t):
		if strict: return quantifier(is_same(t, c) for c in options)
		else: return quantifier(subtype(t, c) for c in options)
	return consensus(test(t) for t in members_of(resolve(target)))

def is_in(target: Shape, candidates: Shape, strict: bool = False) -> VERDICT:
	"""
	Does the target fit at least one of the candidates?
	Distributes over alternatives in the target: if its members disagree, the answer is MAYBE.
	With strict=True, "fit" means "is exactly".
	"""
	return _membership(target, candidates, strict, any_of)

def is_each(target: Shape, candidates: Shape, strict: bool = False) -> VERDICT:
	""" Like is_in, but the target must fit every candidate. """
	return _membership(target, candidates, strict, all_of)


class Conventions(NamedTuple):
	"""
	What is_empty says of the sentinels. Several reasonable conventions exist;
	the defaults treat the wildcard as undecided and the other two as not applicable.
	"""
	wildcard: object = MAYBE
	opaque: object = BOTTOM
	bottom: object = BOTTOM

DEFAULT_CONVENTIONS = Conventions()

def keys(shape: Shape) -> Optional[frozenset]:
	"""
	The keys of a shape, or None to mean "any key at all".
	Does not distribute: the keys of some alternatives are the keys they all share.
	"""
	shape = resolve(shape)
	if shape is WILDCARD or shape is BOTTOM: return None
	if isinstance(shape, Mapping): return frozenset(shape.entries)
	if isinstance(shape, Sequence): return frozenset(range(len(shape))) if shape.fixed else None
	if isinstance(shape, Alternatives):
		common = None
		for m in shape.members:
			these = keys(m)
			if these is not None:
				common = these if common is None else common & these
		return common
	return frozenset()

def _value_at(shape: Shape, key) -> Shape:
	shape = resolve(shape)
	if shape is WILDCARD: return WILDCARD
	if isinstance(shape, Mapping): return shape.entries.get(key, BOTTOM)
	if isinstance(shape, Sequence):
		if not shape.fixed: return shape.element
		if isinstance(key, int) and 0 <= key < len(shape): return shape.elements[key]
	return BOTTOM

def values(shape: Shape) -> Shape:
	""" The alternatives found under the keys of a shape. Does not distribute. """
	shape = resolve(shape)
	if shape is WILDCARD: return WILDCARD
	if isinstance(shape, Sequence) and not shape.fixed: return shape.element
	common = keys(shape)
	if common is None and isinstance(shape, Alternatives):
		# Every member takes any key at all, so each one says for itself what lies under them.
		return alternatives(*(values(m) for m in shape.members))
	if not common: return BOTTOM
	return alternatives(*(_value_at(m, k) for k in common for m in members_of(shape)))

def is_empty(shape: Shape, conventions: Conventions = DEFAULT_CONVENTIONS):
	"""
	True or False for shapes with enumerable keys;
	BOTTOM for shapes where the question does not apply, such as scalars.
	"""
	shape = resolve(shape)
	if shape is WILDCARD: return conventions.wildcard
	if shape is OPAQUE: return conventions.opaque
	if shape is BOTTOM: return conventions.bottom
	if isinstance(shape, Mapping): return not shape.entries
	if isinstance(shape, Sequence): return shape.fixed and not shape.elements
	if isinstance(shape, FunctionShape): return True
	if isinstance(shape, Alternatives):
		if any(is_empty(m, conventions) is BOTTOM for m in shape.members): return BOTTOM
		common = keys(shape)
		return common is not None and not common
	return BOTTOM
