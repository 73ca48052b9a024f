"""
Sort every shape into one of a handful of kinds.

All the engines branch on these kinds, and they branch in a particular order,
because several of the sentinel cases overlap. Knots are never a kind of their own:
they classify as whatever they are tied to.
"""
from .shapes import (
	Shape, Scalar, Sequence, Mapping, FunctionShape, Alternatives, Knot,
	WILDCARD, OPAQUE, BOTTOM,
)

KIND_WILDCARD = "wildcard"
KIND_OPAQUE = "opaque"
KIND_BOTTOM = "bottom"
KIND_SCALAR = "scalar"
KIND_SEQUENCE = "sequence"
KIND_MAPPING = "mapping"
KIND_FUNCTION = "function"
KIND_ALTERNATIVES = "alternatives"

UNIVERSAL_KINDS = frozenset([KIND_WILDCARD, KIND_OPAQUE, KIND_BOTTOM])

_KIND_OF_CLASS = {
	Scalar: KIND_SCALAR,
	Sequence: KIND_SEQUENCE,
	Mapping: KIND_MAPPING,
	FunctionShape: KIND_FUNCTION,
	Alternatives: KIND_ALTERNATIVES,
}

def resolve(shape:Shape) -> Shape:
	"""
	Chase knots to the shape they stand for.
	An untied knot, or a ring of knots tied only to each other, means nothing is known: OPAQUE.
	"""
	seen = set()
	while isinstance(shape, Knot):
		if shape.target is None or shape.number in seen:
			return OPAQUE
		seen.add(shape.number)
		shape = shape.target
	return shape

def classify(shape:Shape) -> str:
	shape = resolve(shape)
	if shape is WILDCARD: return KIND_WILDCARD
	if shape is OPAQUE: return KIND_OPAQUE
	if shape is BOTTOM: return KIND_BOTTOM
	return _KIND_OF_CLASS[type(shape)]

def is_universal(shape:Shape) -> bool:
	"""
	Does not distribute: a set of alternatives is never universal itself,
	even when every one of its members is.
	"""
	return classify(shape) in UNIVERSAL_KINDS

def is_plain_mapping(shape:Shape) -> bool:
	""" A closed-world mapping, as opposed to some host type with hidden keys. """
	shape = resolve(shape)
	return isinstance(shape, Mapping) and shape.strict
