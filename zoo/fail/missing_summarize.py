from pseudoclass import Record

class Fish(Record):
	def describe(self):
		return "<Fish>"

nemo = Fish()
