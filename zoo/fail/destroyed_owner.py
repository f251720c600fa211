from pseudoclass import Person, Bird

john = Person("John", "Smith")
cuckoo = Bird("Cuckoo", john)
john.destroy()
