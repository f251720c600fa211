from pseudoclass import Record

class Counter(Record):
	def describe(self):
		return 42
	def summarize(self):
		return "forty-two"

answer = Counter()
