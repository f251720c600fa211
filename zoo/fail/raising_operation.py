from pseudoclass import Record

class Divider(Record):
	def describe(self):
		return "<Divider: %d>" % (1 // 0)
	def summarize(self):
		return "divider"

divider = Divider()
