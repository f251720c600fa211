"""
The worked example: a man and his cuckoo.

    pseudoclass examples/pets.py
    pseudoclass -s examples/pets.py
"""
from pseudoclass.zoo import Person, Bird

john = Person("John", "Smith")
cuckoo = Bird("Cuckoo", john)
