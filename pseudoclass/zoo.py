"""
The two concrete records from the worked example: a person, and a bird that
belongs to one. Neither writes any wiring; defining the class is enough.
"""
from .ontology import Record
from .borrowing import Borrowed

def _text(what:str, value) -> str:
	if not isinstance(value, str): raise TypeError("%s must be text, not %r" % (what, value))
	return value

class Person(Record):
	def __init__(self, first_name:str, last_name:str):
		self._first_name = _text("first_name", first_name)
		self._last_name = _text("last_name", last_name)
	
	@property
	def first_name(self): return self._first_name
	@property
	def last_name(self): return self._last_name
	
	def describe(self) -> str:
		return "<Person: first_name='%s' last_name='%s'>" % (self._first_name, self._last_name)
	
	def summarize(self) -> str:
		return "%s %s" % (self._first_name, self._last_name)

class Bird(Record):
	""" The owner is borrowed, not owned: destroying a bird leaves its owner alone. """
	def __init__(self, name:str, owner:Person):
		self._name = _text("name", name)
		if owner is not None and not isinstance(owner, Person):
			raise TypeError("A bird's owner must be a Person, not %s" % type(owner).__name__)
		self._owner = Borrowed(owner)
	
	@property
	def name(self): return self._name
	@property
	def owner(self) -> Person: return self._owner.get()
	
	def describe(self) -> str:
		# Straight to the owner's own operation; no second trip through the dispatcher.
		return "<Bird: name='%s' owner=%s>" % (self._name, self._owner.get().describe())
	
	def summarize(self) -> str:
		return self._name
