"""
Collect the failures out of a list of validation results.

Client code runs its checks however it likes, and each check yields either some value
or an error shape: a mapping with a `message`, and perhaps a `cause` and some `help`.
If none of them failed, the original value comes back untouched.
Otherwise the answer is a one-entry mapping from the error key to the errors, in order.
"""
from typing import Iterable, Optional, Union
from .classifier import resolve
from .diagnostics import Report
from .filtering import filter_by
from .shapes import Shape, Sequence, Mapping, WILDCARD, BOTTOM, literal, tuple_of

ERROR_KEY = "typelevel_error"

# Every error shape fits this one.
CHECK_ERROR = Mapping({"message": WILDCARD})

def check_error(message:Union[str, Shape], cause:Optional[Shape]=None, help:Optional[Shape]=None) -> Mapping:
	entries = {"message": literal(message) if isinstance(message, str) else message}
	if cause is not None: entries["cause"] = cause
	if help is not None: entries["help"] = help
	return Mapping(entries)

def check_result(value:Shape, results:Union[Sequence, Iterable[Shape]], key:str=ERROR_KEY, report:Optional[Report]=None) -> Shape:
	if isinstance(results, Shape):
		results = resolve(results)
		if not (isinstance(results, Sequence) and results.fixed):
			if report is not None: report.malformed("check_result", results, "a fixed sequence of results")
			return BOTTOM
	else:
		results = tuple_of(*results)
	errors = filter_by(results, CHECK_ERROR, report=report)
	if not errors.elements: return value
	return Mapping({key: errors})
