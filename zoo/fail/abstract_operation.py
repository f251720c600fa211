from abc import abstractmethod
from pseudoclass import Record

class Ghost(Record):
	@abstractmethod
	def describe(self):
		pass
	def summarize(self):
		return "boo"
