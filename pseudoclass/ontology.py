"""
The most-fundamental classes: the record base-class, the descriptor every
record carries, and the two shared dispatchers that find an operation
through that descriptor.

A C programmer gets this effect by embedding a descriptor as the first
field of every struct and recording, by hand, the offset of each
function-pointer. Here the "offset" is the name of the slot where the
operation lives, and the wiring happens when the class is defined.
"""
import sys
from abc import ABC, abstractmethod
from typing import Callable, NamedTuple, Optional, TextIO

OPERATIONS = ("describe", "summarize")

class ContractViolation(TypeError):
	""" Something presented itself as a record, but isn't a proper one. """

class MissingOperation(ContractViolation):
	def __init__(self, cls:type, missing:tuple[str, ...]):
		self.cls, self.missing = cls, missing
		plural = '' if len(missing) == 1 else 's'
		super().__init__("%s does not supply operation%s: %s" % (cls.__name__, plural, ', '.join(missing)))

class UnregisteredType(ContractViolation):
	def __init__(self, cls:type):
		self.cls = cls
		super().__init__("%s is abstract; it has no descriptor and cannot be instantiated." % cls.__name__)

class Destroyed(RuntimeError):
	""" Use of a record after its destroy() method was called. """

class FormattingFailure(RuntimeError):
	""" An operation could not produce its text. """

class DanglingReference(RuntimeError):
	""" A borrowed record was used after its referent went away. """

class Descriptor(NamedTuple):
	"""
	Where a record keeps its two operations, and the shared lookups that find
	them there. The printing dispatchers go through the lookups named here.
	"""
	describe_slot: str
	describe_dispatcher: Callable
	summarize_slot: str
	summarize_dispatcher: Callable

class Record(ABC):
	"""
	Root for every concrete record. Subclasses supply `describe` and
	`summarize`, or else the class statement itself fails.
	Pass `abstract=True` in the class statement for an intermediate base.
	"""
	_descriptor: Descriptor
	
	def __init_subclass__(cls, abstract=False, **kwargs):
		super().__init_subclass__(**kwargs)
		if abstract:
			cls.__descriptor = None
			return
		missing = tuple(op for op in OPERATIONS if not _supplies(cls, op))
		if missing: raise MissingOperation(cls, missing)
		cls.__descriptor = Descriptor("describe", describe, "summarize", summarize)
	
	def __new__(cls, *args, **kwargs):
		descriptor = cls.__dict__.get("_Record__descriptor")
		if descriptor is None: raise UnregisteredType(cls)
		self = super().__new__(cls)
		self._descriptor = descriptor
		self._destroyed = False
		return self
	
	@abstractmethod
	def describe(self) -> str:
		""" Debug-style text, suitable for a programmer. """
	
	@abstractmethod
	def summarize(self) -> str:
		""" Plain text, suitable for anybody. """
	
	@property
	def alive(self) -> bool: return not self._destroyed
	
	def destroy(self):
		"""
		Release this record. Anything it refers to is someone else's business.
		Releasing twice is an error, just as freeing twice would be.
		"""
		if self._destroyed: raise Destroyed("%s was already destroyed." % type(self).__name__)
		self._destroyed = True
	
	def __repr__(self):
		try: return self.describe()
		except (DanglingReference, Destroyed): return "<%s (dangling)>" % type(self).__name__
	def __str__(self): return self.summarize()

def _supplies(cls:type, op:str) -> bool:
	fn = getattr(cls, op, None)
	return callable(fn) and not getattr(fn, "__isabstractmethod__", False)

def _descriptor_of(record) -> Descriptor:
	if not isinstance(record, Record):
		raise ContractViolation("Cannot dispatch on %s; it is not a record." % type(record).__name__)
	if record._destroyed:
		raise Destroyed("%s was used after it was destroyed." % type(record).__name__)
	return record._descriptor

def _invoke(record, slot:str) -> str:
	operation = getattr(record, slot)
	try: text = operation()
	except MemoryError as ex:
		raise FormattingFailure("Ran out of memory in %s.%s" % (type(record).__name__, slot)) from ex
	if not isinstance(text, str):
		pattern = "%s.%s produced %s instead of text."
		raise FormattingFailure(pattern % (type(record).__name__, slot, type(text).__name__))
	return text

def describe(record:Record) -> str:
	return _invoke(record, _descriptor_of(record).describe_slot)

def summarize(record:Record) -> str:
	return _invoke(record, _descriptor_of(record).summarize_slot)

def print_describe(record:Record, file:Optional[TextIO]=None):
	print(_descriptor_of(record).describe_dispatcher(record), file=file or sys.stdout)

def print_summarize(record:Record, file:Optional[TextIO]=None):
	print(_descriptor_of(record).summarize_dispatcher(record), file=file or sys.stdout)
