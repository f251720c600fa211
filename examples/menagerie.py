"""
A record type of your own needs nothing more than the two methods.
"""
from pseudoclass import Record, Person, Bird

class Cat(Record):
	def __init__(self, name, lives=9):
		self.name, self.lives = name, lives
	def describe(self):
		return "<Cat: name='%s' lives=%d>" % (self.name, self.lives)
	def summarize(self):
		return self.name

jane = Person("Jane", "Doe")
tweety = Bird("Tweety", jane)
sylvester = Cat("Sylvester", lives=3)
