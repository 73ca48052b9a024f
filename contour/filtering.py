"""
Select the entries of a mapping, or the elements of a sequence,
whose shapes fit some target shape (or, with keep=False, those that do not).

A value is selected only when it definitely fits: a MAYBE does not count.
That way keep=True and keep=False always split a mapping cleanly in two.

Alternatives in the filtered shape are filtered one by one, and the results collected.
Every entry or element is tested against the whole target, and a value that is
itself a set of alternatives is never broken apart: it fits or not as one composite shape.

When the target is a set of alternatives, a fixed sequence comes back as one run per
member of the target, in turn. Each surviving element goes in the run of the first member
it fits, and elements which fit only the union as a whole come last.
No element ever appears twice.
"""
from typing import Optional
from .classifier import resolve
from .diagnostics import Report
from .predicates import subtype
from .shapes import (
	Shape, Sequence, Mapping, Alternatives,
	WILDCARD, BOTTOM, array_of, alternatives,
)

class Sieve:
	def __init__(self, target: Shape, keep:bool=True, report:Optional[Report]=None):
		self._target = resolve(target)
		self._keep = keep
		self._report = report if report is not None else Report()
		if isinstance(self._target, Alternatives):
			self._options = self._target.members
		else:
			self._options = (self._target,)

	@staticmethod
	def _fits(value: Shape, target: Shape) -> bool:
		return subtype(value, target) is True

	def sift(self, shape: Shape) -> Shape:
		shape = resolve(shape)
		if isinstance(shape, Alternatives):
			return alternatives(*(self.sift(m) for m in shape.members))
		if shape is WILDCARD or shape is BOTTOM: return shape
		if isinstance(shape, Mapping): return self._sift_mapping(shape)
		if isinstance(shape, Sequence): return self._sift_sequence(shape)
		self._report.malformed("filter", shape, "a mapping or a sequence")
		return BOTTOM

	def _sift_mapping(self, mapping: Mapping) -> Mapping:
		chosen = [
			(key, value) for key, value in mapping.entries.items()
			if self._fits(value, self._target) == self._keep
		]
		return Mapping(chosen, strict=mapping.strict)

	def _sift_sequence(self, sequence: Sequence) -> Sequence:
		if not sequence.fixed:
			if self._fits(sequence.element, self._target) == self._keep: return sequence
			else: return array_of(BOTTOM)
		if not self._keep:
			return Sequence(e for e in sequence.elements if not self._fits(e, self._target))
		runs = [[] for _ in self._options]
		composites = []
		for e in sequence.elements:
			if not self._fits(e, self._target): continue
			for run, option in zip(runs, self._options):
				if self._fits(e, option):
					run.append(e)
					break
			else:
				composites.append(e)
		return Sequence([e for run in runs for e in run] + composites)

def filter_by(shape: Shape, target: Shape, keep:bool=True, report:Optional[Report]=None) -> Shape:
	return Sieve(target, keep, report).sift(shape)
