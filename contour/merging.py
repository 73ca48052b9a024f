"""
Deep-combine two shapes.

The reading of merge(source, target) is: "Does a value of the source shape
satisfy a consumer that expects the target shape, and if so,
what is the most specific shape that captures both constraints?"
A BOTTOM anywhere in the answer marks a place where the source fails the consumer.

The rules go in strict priority order, sentinels first, because the sentinel cases overlap.
Merge does not distribute over alternatives. A set of alternatives on either side
is one composite shape, and it takes the same subtype path as any other mismatch in kind.

Also here are `merge_all`, which folds a whole list of shapes together,
and `meet`, the symmetric combination that the intersection combinators use.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from .classifier import resolve
from .diagnostics import Report
from .predicates import is_same, subtype
from .shapes import (
	Shape, Sequence, Mapping, FunctionShape,
	WILDCARD, OPAQUE, BOTTOM, array_of,
)

_STRUCTURES = (Sequence, Mapping, FunctionShape)

class Merger(Visitor):
	"""
	A tolerant merger keeps the target's value for a key the source lacks, instead of failing it.
	That is how merge_all lets each shape in a list fill in what the others leave out.
	"""
	def __init__(self, report:Optional[Report]=None, tolerant:bool=False):
		self._report = report if report is not None else Report()
		self._tolerant = tolerant
		self._path = set()

	def do(self, source: Shape, target: Shape) -> Shape:
		source, target = resolve(source), resolve(target)
		if is_same(source, target): return source
		if target is OPAQUE: return source
		if source is BOTTOM or target is BOTTOM: return BOTTOM
		if source is WILDCARD: return WILDCARD
		if target is WILDCARD: return source
		if source is OPAQUE: return source
		if type(source) is not type(target) or not isinstance(source, _STRUCTURES):
			return self._fits(source, target)
		pair = source.number, target.number
		if pair in self._path:
			self._report.broke_cycle("merge", source)
			return OPAQUE
		self._path.add(pair)
		try: return self.visit(source, target)
		finally: self._path.discard(pair)

	def _fits(self, source: Shape, target: Shape) -> Shape:
		""" Shapes of different kinds (or scalars, or alternatives) either fit outright or not at all. """
		if subtype(source, target) is True: return source
		self._report.kind_mismatch(source, target)
		return BOTTOM

	def visit_Sequence(self, source: Sequence, target: Sequence):
		if source.fixed != target.fixed:
			return self._fits(source, target)
		if not source.fixed:
			return array_of(self.do(source.element, target.element))
		if len(source) < len(target):
			# A shorter provider may ignore the consumer's extra positions.
			return source
		merged = [self.do(s, t) for s, t in zip(source.elements, target.elements)]
		# The consumer cannot take the extra elements: each one becomes a failure.
		merged.extend(BOTTOM for _ in source.elements[len(target):])
		return Sequence(merged)

	def visit_FunctionShape(self, source: FunctionShape, target: FunctionShape):
		params = self.do(source.params, target.params)
		if params is BOTTOM or not isinstance(params, Sequence):
			return BOTTOM
		return FunctionShape(params, self.do(source.result, target.result))

	def visit_Mapping(self, source: Mapping, target: Mapping):
		entries = {}
		for key, value in source.entries.items():
			entries[key] = self.do(value, target[key]) if key in target else value
		for key, value in target.entries.items():
			if key not in source:
				# The provider did not supply something the consumer may require.
				entries[key] = value if self._tolerant else BOTTOM
		return Mapping(entries, strict=source.strict and target.strict)


class Meeting:
	"""
	The symmetric combination of two shapes: what a value must look like to have both.
	Mappings combine key-by-key, keeping keys found on either side.
	Otherwise, the more specific shape wins if one fits inside the other, and if not, BOTTOM.
	"""
	def __init__(self, report:Optional[Report]=None):
		self._report = report if report is not None else Report()
		self._path = set()

	def do(self, a: Shape, b: Shape) -> Shape:
		a, b = resolve(a), resolve(b)
		if is_same(a, b): return a
		if a is BOTTOM or b is BOTTOM: return BOTTOM
		if a is WILDCARD or b is WILDCARD: return WILDCARD
		if a is OPAQUE: return b
		if b is OPAQUE: return a
		if isinstance(a, Mapping) and isinstance(b, Mapping):
			pair = a.number, b.number
			if pair in self._path:
				self._report.broke_cycle("meet", a)
				return OPAQUE
			self._path.add(pair)
			try: return self._meet_mappings(a, b)
			finally: self._path.discard(pair)
		if subtype(a, b) is True: return a
		if subtype(b, a) is True: return b
		self._report.kind_mismatch(a, b, "meet")
		return BOTTOM

	def _meet_mappings(self, a: Mapping, b: Mapping) -> Mapping:
		entries = dict(a.entries)
		for key, value in b.entries.items():
			entries[key] = self.do(entries[key], value) if key in entries else value
		return Mapping(entries, strict=a.strict and b.strict)


def merge(source: Shape, target: Shape, report:Optional[Report]=None) -> Shape:
	return Merger(report).do(source, target)

def meet(a: Shape, b: Shape, report:Optional[Report]=None) -> Shape:
	return Meeting(report).do(a, b)

def merge_all(shapes: Shape, report:Optional[Report]=None) -> Shape:
	"""
	Fold a fixed sequence of shapes together from the right: merge(merge_all(tail), head).
	Later shapes are the providers and earlier ones the consumers,
	and a key that only one side has is kept as it is.
	With nothing to merge, the answer is BOTTOM.
	"""
	shapes = resolve(shapes)
	if shapes is WILDCARD or shapes is BOTTOM: return shapes
	if not (isinstance(shapes, Sequence) and shapes.fixed):
		if report is not None: report.malformed("merge_all", shapes, "a fixed sequence of shapes")
		return BOTTOM
	if not shapes.elements: return BOTTOM
	merger = Merger(report, tolerant=True)
	result = shapes.elements[-1]
	for head in reversed(shapes.elements[:-1]):
		result = merger.do(result, head)
	return resolve(result)
