from pseudoclass import Person, Bird

cuckoo = Bird("Cuckoo", Person("John", "Smith"))
