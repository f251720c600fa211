from pseudoclass import Record

class Rock(Record):
	weight = 12
