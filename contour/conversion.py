"""
Conversions between a set of alternatives (a logical union)
and an ordered sequence (a tuple), and the combinators
that fold several mapping shapes into one.

Alternatives have no order. So when they are laid out as a sequence,
the order is whatever it happens to be, and no caller should depend on it.
"""
from typing import Optional
from .classifier import resolve
from .diagnostics import Report
from .merging import Meeting
from .shapes import (
	Shape, Sequence, Mapping, Alternatives,
	WILDCARD, OPAQUE, BOTTOM, EMPTY, tuple_of, alternatives, members_of,
)

def to_sequence(shape: Shape) -> Sequence:
	""" Enumerate alternatives into a fixed sequence. BOTTOM has no alternatives at all. """
	return tuple_of(*members_of(resolve(shape)))

def to_alternatives(shape: Shape, report:Optional[Report]=None) -> Shape:
	""" The order-erasing inverse of to_sequence. """
	shape = resolve(shape)
	if shape is WILDCARD or shape is BOTTOM: return shape
	if isinstance(shape, Sequence):
		return alternatives(*shape.elements) if shape.fixed else shape.element
	if report is not None: report.malformed("to_alternatives", shape, "a sequence")
	return BOTTOM

def intersect_all(shape: Shape, report:Optional[Report]=None) -> Shape:
	"""
	Fold a sequence of mappings into one mapping.

	Every key found in any member appears in the result, and where several members
	define the same key, their values meet. A key missing from some member is
	simply missing there. (Compare merge, which reads a missing key as a failure.)

	A BOTTOM member makes the whole thing BOTTOM and a WILDCARD member makes it WILDCARD.
	OPAQUE members contribute nothing. With no members at all, nothing is known: OPAQUE.
	"""
	shape = resolve(shape)
	if shape is WILDCARD or shape is BOTTOM: return shape
	if not (isinstance(shape, Sequence) and shape.fixed):
		if report is not None: report.malformed("intersect_all", shape, "a fixed sequence of mappings")
		return BOTTOM
	meeting = Meeting(report)
	result = OPAQUE
	for member in shape.elements:
		member = resolve(member)
		if member is BOTTOM: return BOTTOM
		if member is WILDCARD: return WILDCARD
		if member is OPAQUE: continue
		if not isinstance(member, Mapping):
			if report is not None: report.malformed("intersect_all", member, "a mapping")
			return BOTTOM
		result = meeting.do(result, member)
	return result

def union_to_intersection(shape: Shape, report:Optional[Report]=None) -> Shape:
	return intersect_all(to_sequence(shape), report)

def combine(shape: Shape, report:Optional[Report]=None) -> Shape:
	"""
	Flatten each alternative into a single mapping over all its keys.

	A mapping is already its own key-closure, so it comes back as a fresh mapping with the same entries.
	A fixed sequence of mappings is read as their intersection and reduced with intersect_all.
	OPAQUE has no keys, so it combines to the empty mapping. Anything else stays as it is.
	"""
	shape = resolve(shape)
	if isinstance(shape, Alternatives):
		if report is not None: report.info("combine: distributing over", len(shape), "alternatives")
		return alternatives(*(combine(m, report) for m in shape.members))
	if shape is OPAQUE: return EMPTY
	if isinstance(shape, Mapping):
		return Mapping(shape.entries, strict=shape.strict)
	if isinstance(shape, Sequence) and shape.fixed and shape.elements:
		if all(isinstance(resolve(e), Mapping) for e in shape.elements):
			return intersect_all(shape, report)
	return shape
