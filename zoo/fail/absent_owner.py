from pseudoclass import Bird

stray = Bird("Stray", None)
