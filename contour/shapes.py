"""
The data over which all the engines operate.

A shape describes what some value could look like: a scalar, an ordered sequence,
a mapping of named entries, a function signature, or a set of alternatives among those.
Three sentinel shapes stand at the edges of the whole space:

	WILDCARD: anything at all, and it absorbs everything it is merged with.
	OPAQUE: something exists, but nothing is known about its structure.
	BOTTOM: nothing; no value could possibly have this shape.

Shapes are value objects. Two shapes built the same way are equal and hash alike,
and each distinct structure gets a number from the shape-numbering subsystem.
Composite shapes keep their children as exemplars, so equality at any level
is just a comparison of child numbers. That makes identity checks fast
and keeps the value-object property honest all the way down.

The one exception is the Knot, which has identity so that self-referential
shapes can be tied together without ever mutating a finished shape.
"""
from typing import Iterable, Optional, Union
from boozetools.support.foundation import EquivalenceClassifier

_shape_numbering_subsystem = EquivalenceClassifier()

class Shape:
	"""Value objects so they can play well with the classifier"""
	number: int

	def visit(self, visitor:"ShapeVisitor"): raise NotImplementedError(type(self))

	def __init__(self, *key):
		self._key = key
		self._hash = hash(key)
		self.number = _shape_numbering_subsystem.classify(self)
	def __hash__(self): return self._hash
	def __eq__(self, other): return type(self) is type(other) and self._key == other._key
	def exemplar(self) -> "Shape": return _shape_numbering_subsystem.exemplars[self.number]
	def __repr__(self) -> str:
		it = self.visit(Render())
		assert isinstance(it, str), (it, type(self))
		return it

def _exemplars(shapes: Iterable[Shape]) -> tuple[Shape, ...]:
	them = tuple(shapes)
	for s in them: assert isinstance(s, Shape), s
	return tuple(s.exemplar() for s in them)

###################
# The sentinels

class _Wildcard(Shape):
	"""
	Total uncertainty in the accepting direction.
	It fits anywhere a consumer cares to look, and merging with it yields itself.
	"""
	def visit(self, visitor:"ShapeVisitor"): return visitor.on_wildcard()

class _Opaque(Shape):
	""" Some value exists, but nothing is known about it. The top of the subtype lattice. """
	def visit(self, visitor:"ShapeVisitor"): return visitor.on_opaque()

class _Bottom(Shape):
	""" The shape with no inhabitants. Subtype of everything; equal only to itself. """
	def visit(self, visitor:"ShapeVisitor"): return visitor.on_bottom()

WILDCARD = _Wildcard(None)
OPAQUE = _Opaque(None)
BOTTOM = _Bottom(None)

###################
# Ordinary shapes

SCALAR_KINDS = ("number", "string", "boolean", "bigint", "symbol", "null", "undefined", "void")

class _NoLiteral:
	def __repr__(self): return "<no literal>"

NO_LITERAL = _NoLiteral()

class Scalar(Shape):
	"""
	Either a primitive kind, such as "number", or a single literal of that kind.
	The literal 1 is a Scalar("number", 1), and it is a subtype of Scalar("number").
	"""
	def __init__(self, kind:str, literal=NO_LITERAL):
		if kind not in SCALAR_KINDS:
			raise ValueError("Unknown scalar kind %r. Try one of %s." % (kind, ", ".join(SCALAR_KINDS)))
		self.kind = kind
		self.literal = literal
		super().__init__(kind, literal is not NO_LITERAL, literal)
	def visit(self, visitor:"ShapeVisitor"): return visitor.on_scalar(self)
	def is_literal(self) -> bool: return self.literal is not NO_LITERAL

NUMBER = Scalar("number")
STRING = Scalar("string")
BOOLEAN = Scalar("boolean")
BIGINT = Scalar("bigint")
SYMBOL = Scalar("symbol")
NULL = Scalar("null")
UNDEFINED = Scalar("undefined")
VOID = Scalar("void")

def literal(value) -> Scalar:
	""" The singleton shape of one Python value. None is the null-like marker. """
	if value is None: return NULL
	if isinstance(value, bool): return Scalar("boolean", value)
	if isinstance(value, (int, float)): return Scalar("number", value)
	if isinstance(value, str): return Scalar("string", value)
	raise TypeError("No scalar kind for %r" % type(value))

class Sequence(Shape):
	"""
	A fixed sequence (a "tuple") has one shape per position.
	An open sequence (an "array") has exactly one element shape, shared by every position.
	"""
	def __init__(self, elements:Iterable[Shape], fixed:bool=True):
		self.elements = _exemplars(elements)
		self.fixed = bool(fixed)
		if not self.fixed and len(self.elements) != 1:
			raise ValueError("An open sequence has exactly one element shape, not %d." % len(self.elements))
		super().__init__(self.fixed, *(e.number for e in self.elements))
	def visit(self, visitor:"ShapeVisitor"): return visitor.on_sequence(self)
	def __len__(self): return len(self.elements)
	@property
	def element(self) -> Shape:
		assert not self.fixed
		return self.elements[0]

def tuple_of(*elements:Shape) -> Sequence:
	return Sequence(elements, fixed=True)

def array_of(element:Shape) -> Sequence:
	return Sequence((element,), fixed=False)

class SymbolKey:
	"""
	A symbol-like mapping key. Symbols have identity:
	two of them with the same description are still different keys.
	They never take part in dotted paths.
	"""
	def __init__(self, description:str=""):
		self.description = description
	def __repr__(self): return "[Symbol(%s)]" % self.description

KEY = Union[str, int, SymbolKey]

def _check_key(key):
	if isinstance(key, bool) or not isinstance(key, (str, int, SymbolKey)):
		raise TypeError("Mapping keys are strings, integers, or SymbolKey; not %r" % (key,))
	return key

class Mapping(Shape):
	"""
	A collection of named entries.

	A strict mapping is closed-world: the keys you see are all there is.
	A non-strict mapping stands for a host type, such as a class instance
	or an interface, which may carry keys nobody can enumerate.

	The entries dict preserves insertion order for display only. Treat it as read-only.
	"""
	def __init__(self, entries=(), strict:bool=True):
		pairs = entries.items() if isinstance(entries, dict) else entries
		self.entries: dict[KEY, Shape] = {}
		for key, shape in pairs:
			assert isinstance(shape, Shape), (key, shape)
			self.entries[_check_key(key)] = shape.exemplar()
		self.strict = bool(strict)
		super().__init__(self.strict, frozenset((k, v.number) for k, v in self.entries.items()))
	def visit(self, visitor:"ShapeVisitor"): return visitor.on_mapping(self)
	def __len__(self): return len(self.entries)
	def __contains__(self, key): return key in self.entries
	def __getitem__(self, key) -> Shape: return self.entries[key]

def record(entries=(), /, **more:Shape) -> Mapping:
	""" A strict mapping. Keyword arguments are a convenience for identifier-like keys. """
	pairs = list(entries.items() if isinstance(entries, dict) else entries)
	pairs.extend(more.items())
	return Mapping(pairs, strict=True)

def host(entries=(), /, **more:Shape) -> Mapping:
	""" A non-strict mapping: the shape of a class instance or interface. """
	pairs = list(entries.items() if isinstance(entries, dict) else entries)
	pairs.extend(more.items())
	return Mapping(pairs, strict=False)

EMPTY = Mapping(())

class FunctionShape(Shape):
	def __init__(self, params:Sequence, result:Shape):
		assert isinstance(params, Sequence), params
		self.params, self.result = params.exemplar(), result.exemplar()
		super().__init__(self.params.number, self.result.number)
	def visit(self, visitor:"ShapeVisitor"): return visitor.on_function(self)
	def arity(self) -> int:
		return len(self.params) if self.params.fixed else -1

def fn(*params:Shape, result:Shape=WILDCARD) -> FunctionShape:
	return FunctionShape(tuple_of(*params), result)

ANY_FUNCTION = FunctionShape(array_of(WILDCARD), WILDCARD)

class Alternatives(Shape):
	"""
	A logical union: the actual shape is one of these.
	Build these with `alternatives(...)`, which keeps the invariants:
	never nested, never empty, never a single member, no duplicates.
	"""
	def __init__(self, members:Iterable[Shape]):
		self.members = _exemplars(members)
		assert len(self.members) > 1
		super().__init__(frozenset(m.number for m in self.members))
	def visit(self, visitor:"ShapeVisitor"): return visitor.on_alternatives(self)
	def __len__(self): return len(self.members)
	def __iter__(self): return iter(self.members)

def alternatives(*shapes:Shape) -> Shape:
	members, seen = [], set()
	def collect(s:Shape):
		if isinstance(s, Alternatives):
			for m in s.members: collect(m)
		elif s is BOTTOM:
			pass  # Nothing is not an alternative.
		elif s.number not in seen:
			seen.add(s.number)
			members.append(s)
	for shape in shapes:
		assert isinstance(shape, Shape), shape
		collect(shape)
	if not members: return BOTTOM
	if len(members) == 1: return members[0].exemplar()
	return Alternatives(members)

def members_of(shape:Shape) -> tuple[Shape, ...]:
	""" The alternatives in a shape: one for an ordinary shape; none for BOTTOM. """
	if isinstance(shape, Alternatives): return shape.members
	if shape is BOTTOM: return ()
	return (shape,)

class Knot(Shape):
	"""
	Did I say value-object? Not for knots! These have identity.

	A knot is a forward reference which gets tied exactly once.
	Tie a knot to a shape that mentions the knot, and you have a self-referential shape
	without ever mutating a shape after construction.
	"""
	target: Optional[Shape]
	def __init__(self, label:str="self"):
		self.label = label
		self.target = None
		super().__init__(len(_shape_numbering_subsystem.catalog))
	def visit(self, visitor:"ShapeVisitor"): return visitor.on_knot(self)
	def tie(self, shape:Shape) -> "Knot":
		if self.target is not None:
			raise ValueError("Knot %r is already tied." % self.label)
		assert isinstance(shape, Shape), shape
		self.target = shape.exemplar()
		return self

###################
#

class ShapeVisitor:
	def on_wildcard(self): raise NotImplementedError(type(self))
	def on_opaque(self): raise NotImplementedError(type(self))
	def on_bottom(self): raise NotImplementedError(type(self))
	def on_scalar(self, s:Scalar): raise NotImplementedError(type(self))
	def on_sequence(self, s:Sequence): raise NotImplementedError(type(self))
	def on_mapping(self, m:Mapping): raise NotImplementedError(type(self))
	def on_function(self, f:FunctionShape): raise NotImplementedError(type(self))
	def on_alternatives(self, a:Alternatives): raise NotImplementedError(type(self))
	def on_knot(self, k:Knot): raise NotImplementedError(type(self))

class Render(ShapeVisitor):
	""" Return a string representation of the shape, in a TypeScript-ish notation. """
	def on_wildcard(self): return "any"
	def on_opaque(self): return "unknown"
	def on_bottom(self): return "never"
	def on_scalar(self, s: Scalar):
		if not s.is_literal(): return s.kind
		if s.kind == "boolean": return "true" if s.literal else "false"
		if s.kind == "string": return "'%s'" % s.literal
		return str(s.literal)
	def on_sequence(self, s: Sequence):
		if s.fixed:
			return "[%s]" % ", ".join(e.visit(self) for e in s.elements)
		text = s.element.visit(self)
		if isinstance(s.element, (Alternatives, FunctionShape)):
			text = "(%s)" % text
		return text + "[]"
	def on_mapping(self, m: Mapping):
		body = "{%s}" % ", ".join("%s: %s" % (_render_key(k), v.visit(self)) for k, v in m.entries.items())
		return body if m.strict else "interface " + body
	def on_function(self, f: FunctionShape):
		if f.params.fixed:
			params = ", ".join(p.visit(self) for p in f.params.elements)
		else:
			params = "..." + f.params.visit(self)
		return "(%s) => %s" % (params, f.result.visit(self))
	def on_alternatives(self, a: Alternatives):
		return " | ".join(m.visit(self) for m in a.members)
	def on_knot(self, k: Knot):
		return "<%s>" % k.label

def _render_key(key) -> str:
	if isinstance(key, str) and not key.isidentifier():
		return "'%s'" % key
	return str(key)
