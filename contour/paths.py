"""
Deep-flatten a mapping into dotted key-paths.

	{a: {b: {c: number}}}  =>  {'a.b.c': number}

Only mappings get flattened. Sequences, functions, and scalars are leaves
when found inside a mapping, and they yield BOTTOM if handed in at the top.
In strict mode, host types (class instances and interfaces, which may hide keys)
do not count as mappings either; in lenient mode they do.

Keys that are not strings or numbers (symbol-like keys) cannot be part of a dotted path,
so they are left out.

The flattener distributes over alternatives at the top level.
"""
from typing import Iterator, Optional
from .classifier import resolve, is_universal
from .diagnostics import Report
from .merging import Meeting
from .predicates import is_same
from .shapes import Shape, Mapping, Alternatives, OPAQUE, BOTTOM, EMPTY, alternatives

class Flattener:
	def __init__(self, strict:bool=True, report:Optional[Report]=None):
		self._strict = strict
		self._report = report if report is not None else Report()
		self._path = set()

	def qualifies(self, shape: Shape) -> bool:
		return isinstance(shape, Mapping) and (shape.strict or not self._strict)

	def flatten(self, shape: Shape) -> Shape:
		shape = resolve(shape)
		if is_universal(shape) or is_same(shape, EMPTY): return shape
		if isinstance(shape, Alternatives):
			return alternatives(*(self.flatten(m) for m in shape.members))
		if not self.qualifies(shape):
			self._report.malformed("paths", shape, "a plain mapping" if self._strict else "a mapping")
			return BOTTOM
		found = {}
		meeting = Meeting(self._report)
		self._path.add(shape.number)
		for dotted, leaf in self._leaves(shape):
			found[dotted] = meeting.do(found[dotted], leaf) if dotted in found else leaf
		self._path.discard(shape.number)
		return Mapping(found)

	def _leaves(self, mapping: Mapping) -> Iterator[tuple[str, Shape]]:
		for key, value in mapping.entries.items():
			if not isinstance(key, (str, int)): continue
			value = resolve(value)
			if is_universal(value):
				yield str(key), value
			elif self.qualifies(value):
				if value.number in self._path:
					self._report.broke_cycle("paths", value)
					yield str(key), OPAQUE
					continue
				self._path.add(value.number)
				for sub_path, leaf in self._leaves(value):
					yield "%s.%s" % (key, sub_path), leaf
				self._path.discard(value.number)
			else:
				yield str(key), value

def paths(shape: Shape, strict:bool=True, report:Optional[Report]=None) -> Shape:
	return Flattener(strict, report).flatten(shape)
