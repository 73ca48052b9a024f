"""
Three-valued verdicts.

Most questions about shapes have a plain yes-or-no answer,
but a few do not: asking whether the wildcard fits some particular shape
has no definite answer, because the wildcard could be anything at all.
Those questions answer MAYBE, and the connectives here follow Kleene's
strong three-valued logic so that MAYBE propagates sensibly.

MAYBE refuses to be used as a Python truth-value.
That is on purpose: a caller who needs a definite answer must say which way to lean.
"""
from typing import Iterable, Union

class _Maybe:
	def __repr__(self): return "MAYBE"
	def __bool__(self):
		raise TypeError("MAYBE has no definite truth-value. Use logic.resolve(verdict, default).")

MAYBE = _Maybe()

VERDICT = Union[bool, _Maybe]

def is_verdict(it) -> bool:
	return it is True or it is False or it is MAYBE

def negate(a:VERDICT) -> VERDICT:
	if a is MAYBE: return MAYBE
	return not a

def conjoin(a:VERDICT, b:VERDICT) -> VERDICT:
	if a is False or b is False: return False
	if a is True and b is True: return True
	return MAYBE

def disjoin(a:VERDICT, b:VERDICT) -> VERDICT:
	if a is True or b is True: return True
	if a is False and b is False: return False
	return MAYBE

def all_of(verdicts:Iterable[VERDICT]) -> VERDICT:
	""" Short-circuits on the first False. """
	result = True
	for v in verdicts:
		if v is False: return False
		result = conjoin(result, v)
	return result

def any_of(verdicts:Iterable[VERDICT]) -> VERDICT:
	""" Short-circuits on the first True. """
	result = False
	for v in verdicts:
		if v is True: return True
		result = disjoin(result, v)
	return result

def consensus(verdicts:Iterable[VERDICT]) -> VERDICT:
	"""
	Fold the verdicts of a distributed question back together.
	If every alternative agrees, that is the answer. Otherwise, it depends.
	An empty collection of verdicts has nothing to disagree about, so it is True.
	"""
	seen = set()
	for v in verdicts:
		seen.add(MAYBE if v is MAYBE else bool(v))
	if len(seen) > 1: return MAYBE
	return seen.pop() if seen else True

def resolve(verdict:VERDICT, default:bool) -> bool:
	if verdict is MAYBE: return default
	return bool(verdict)
