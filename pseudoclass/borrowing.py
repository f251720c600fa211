"""
A record may refer to another record without owning it.
The referent must outlive the reference; when it does not,
the next use of the reference says so rather than reading garbage.
"""
import weakref
from typing import Generic, TypeVar
from .ontology import Record, DanglingReference

R = TypeVar("R", bound=Record)

class AbsentReference(ValueError):
	pass

class Borrowed(Generic[R]):
	""" Non-owning handle on a record. """
	def __init__(self, referent:R):
		if referent is None: raise AbsentReference("A borrowed reference needs something to refer to.")
		if not isinstance(referent, Record): raise TypeError("Can only borrow a record, not %r" % (referent,))
		self._kind = type(referent).__name__
		self._ref = weakref.ref(referent)
	
	def get(self) -> R:
		referent = self._ref()
		if referent is None:
			raise DanglingReference("The referenced %s no longer exists." % self._kind)
		if not referent.alive:
			raise DanglingReference("The referenced %s was destroyed." % self._kind)
		return referent
	
	@property
	def alive(self) -> bool:
		referent = self._ref()
		return referent is not None and referent.alive
	
	def __repr__(self): return "<Borrowed %s%s>" % (self._kind, '' if self.alive else " (dangling)")
