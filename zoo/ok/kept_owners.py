from pseudoclass import Person, Bird

owners = [Person("John", "Smith")]
_jane = Person("Jane", "Doe")

cuckoo = Bird("Cuckoo", owners[0])
tweety = Bird("Tweety", _jane)
