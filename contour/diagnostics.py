"""
Every engine operation is total: hand it a shape it cannot work with,
and it answers BOTTOM rather than raise. That keeps the algebra tidy,
but it leaves the caller wondering *why* the answer came out BOTTOM.

So the engines can tell a Report about what went wrong along the way.
Nobody is obliged to look; a report nobody passed in simply goes unread.
"""
import sys, random
from typing import Any, NamedTuple, Optional

from .shapes import Shape

class TooManyIssues(Exception):
	pass

class ShapeAssertionError(AssertionError):
	pass

def assert_shape(condition, message:Optional[str]=None):
	"""
	Fail loudly if a condition does not hold.
	Only a definite True passes: a MAYBE verdict is not good enough.
	"""
	if condition is not True:
		raise ShapeAssertionError("Shape assertion failed" + (": " + message if message else ""))

def _outburst():
	particle = ["Oh, ", "Well, ", "Hm, ", "", ""]
	exclamations = [
		'Blast', 'Botheration', 'Drat', 'Fiddlesticks', 'Gadzooks', 'Heavens',
		'Jiminy', 'Nuts', 'Phooey', 'Rats', 'Shucks', 'Zounds',
	]
	resignations = [
		'Those shapes do not fit.',
		'Something is the wrong shape.',
		'That did not go to plan.',
		'I cannot make sense of this shape.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, exclamations, resignations)))

class Issue(NamedTuple):
	operation: str
	description: str
	shapes: tuple[Shape, ...] = ()
	def as_text(self):
		lines = ["In %s: %s" % (self.operation, self.description)]
		lines.extend("    %r" % (s,) for s in self.shapes)
		return '\n'.join(lines)

class Report:
	""" Collects the issues the engines run into. """
	_issues : list[Issue]

	def __init__(self, *, verbose:int=0, max_issues:Optional[int]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> list[Issue]: return list(self._issues)

	def issue(self, it:Issue):
		self._issues.append(it)
		if self._max_issues is not None and len(self._issues) >= self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args:Any):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print(_outburst(), file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(), file=sys.stderr)
		sys.stderr.flush()

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the engines are likely to call:

	def malformed(self, operation:str, shape:Shape, expectation:str):
		self.issue(Issue(operation, "Expected %s; got a shape of another kind." % expectation, (shape,)))

	def kind_mismatch(self, source:Shape, target:Shape, operation:str="merge"):
		intro = "These shapes cannot be reconciled: the first does not fit the second."
		self.issue(Issue(operation, intro, (source, target)))

	def broke_cycle(self, operation:str, shape:Shape):
		self.info("%s: came back around to %r; reading it as unknown." % (operation, shape))
