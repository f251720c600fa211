from pseudoclass import Person

john = Person("John", "Smith"
