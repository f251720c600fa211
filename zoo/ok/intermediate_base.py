from pseudoclass import Record

class Shape(Record, abstract=True):
	def summarize(self):
		return type(self).__name__.lower()

class Square(Shape):
	def __init__(self, side):
		self.side = side
	def describe(self):
		return "<Square: side=%r>" % self.side

square = Square(2)
