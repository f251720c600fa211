import gc, io
import unittest
from unittest import mock
from unittest.mock import patch

from pseudoclass import (
	Record, Person, Bird, Borrowed, describe, summarize, print_describe, print_summarize,
	ContractViolation, MissingOperation, UnregisteredType, Destroyed, FormattingFailure,
	AbsentReference, DanglingReference,
)

NAMES = [("John", "Smith"), ("Ada", "Lovelace"), ("", ""), ("Zoë", "Ñúñez"), ("Mary Ann", "O'Brien")]

def _printed(dispatcher, record) -> str:
	sink = io.StringIO()
	dispatcher(record, file=sink)
	return sink.getvalue()

class PersonTests(unittest.TestCase):
	def test_formats(self):
		for first, last in NAMES:
			with self.subTest(first=first, last=last):
				person = Person(first, last)
				self.assertEqual("<Person: first_name='%s' last_name='%s'>" % (first, last), person.describe())
				self.assertEqual(first + " " + last, person.summarize())
	
	def test_repr_and_str_follow_the_operations(self):
		john = Person("John", "Smith")
		self.assertEqual(john.describe(), repr(john))
		self.assertEqual("John Smith", str(john))
	
	def test_fields_are_read_only(self):
		john = Person("John", "Smith")
		with self.assertRaises(AttributeError):
			john.first_name = "Jack"
	
	def test_names_must_be_text(self):
		with self.assertRaises(TypeError): Person("John", 7)

class BirdTests(unittest.TestCase):
	def setUp(self):
		self.john = Person("John", "Smith")
		self.cuckoo = Bird("Cuckoo", self.john)
	
	def test_formats(self):
		expect = "<Bird: name='Cuckoo' owner=<Person: first_name='John' last_name='Smith'>>"
		self.assertEqual(expect, self.cuckoo.describe())
		self.assertEqual("Cuckoo", self.cuckoo.summarize())
	
	def test_describe_composes_the_owner(self):
		for first, last in NAMES:
			with self.subTest(first=first, last=last):
				owner = Person(first, last)
				bird = Bird("Polly", owner)
				self.assertEqual("<Bird: name='Polly' owner=" + owner.describe() + ">", bird.describe())
	
	def test_owner_is_shared_not_copied(self):
		self.assertIs(self.john, self.cuckoo.owner)
	
	def test_destroying_the_bird_leaves_the_owner_alone(self):
		self.cuckoo.destroy()
		self.assertFalse(self.cuckoo.alive)
		self.assertTrue(self.john.alive)
		self.assertEqual("John Smith", summarize(self.john))
	
	def test_destroyed_owner_is_loud(self):
		self.john.destroy()
		with self.assertRaises(DanglingReference): self.cuckoo.describe()
		# The bird's own name needs nothing from the owner.
		self.assertEqual("Cuckoo", summarize(self.cuckoo))
	
	def test_collected_owner_is_loud(self):
		orphan = Bird("Cuckoo", Person("John", "Smith"))
		gc.collect()
		with self.assertRaises(DanglingReference): describe(orphan)
	
	def test_repr_survives_a_missing_owner(self):
		orphan = Bird("Cuckoo", Person("John", "Smith"))
		gc.collect()
		self.assertEqual("<Bird (dangling)>", repr(orphan))
		self.assertEqual("Cuckoo", str(orphan))
	
	def test_absent_owner(self):
		with self.assertRaises(AbsentReference): Bird("Stray", None)
	
	def test_owner_must_be_a_person(self):
		with self.assertRaises(TypeError): Bird("Cuckoo", Bird("Other", self.john))

class DispatchTests(unittest.TestCase):
	def test_end_to_end(self):
		john = Person("John", "Smith")
		cuckoo = Bird("Cuckoo", john)
		self.assertEqual("<Bird: name='Cuckoo' owner=<Person: first_name='John' last_name='Smith'>>\n", _printed(print_describe, cuckoo))
		self.assertEqual("Cuckoo\n", _printed(print_summarize, cuckoo))
	
	def test_dispatch_matches_direct_calls(self):
		john = Person("John", "Smith")
		for record in [john, Bird("Cuckoo", john), Bird("Robin", john)]:
			with self.subTest(record=record.summarize()):
				self.assertEqual(record.describe(), describe(record))
				self.assertEqual(record.summarize(), summarize(record))
				self.assertEqual(record.describe()+"\n", _printed(print_describe, record))
				self.assertEqual(record.summarize()+"\n", _printed(print_summarize, record))
	
	@patch("sys.stdout", new_callable=io.StringIO)
	def test_default_is_standard_output(self, stdout):
		print_summarize(Person("John", "Smith"))
		self.assertEqual("John Smith\n", stdout.getvalue())
	
	def test_descriptor_is_shared_and_fixed(self):
		a, b = Person("A", "B"), Person("C", "D")
		self.assertIs(a._descriptor, b._descriptor)
		self.assertEqual("describe", a._descriptor.describe_slot)
		self.assertIs(summarize, a._descriptor.summarize_dispatcher)
		with self.assertRaises(AttributeError):
			a._descriptor.describe_slot = "summarize"
	
	def test_printing_goes_through_the_descriptor(self):
		john = Person("John", "Smith")
		lookup = mock.Mock(return_value="looked up")
		john._descriptor = john._descriptor._replace(describe_dispatcher=lookup)
		self.assertEqual("looked up\n", _printed(print_describe, john))
		lookup.assert_called_once_with(john)
	
	def test_not_a_record(self):
		with self.assertRaises(ContractViolation): describe("John Smith")
	
	def test_destroyed_record(self):
		john = Person("John", "Smith")
		john.destroy()
		with self.assertRaises(Destroyed): print_describe(john, file=io.StringIO())
		with self.assertRaises(Destroyed): john.destroy()

class ContractTests(unittest.TestCase):
	def test_missing_operation_fails_at_definition(self):
		with self.assertRaises(MissingOperation) as cm:
			class Fish(Record):
				def describe(self): return "<Fish>"
		self.assertEqual(("summarize",), cm.exception.missing)
		self.assertIn("Fish", str(cm.exception))
	
	def test_missing_both(self):
		with self.assertRaises(MissingOperation) as cm:
			class Rock(Record): pass
		self.assertEqual(("describe", "summarize"), cm.exception.missing)
	
	def test_abstract_override_does_not_count(self):
		from abc import abstractmethod
		with self.assertRaises(MissingOperation):
			class Ghost(Record):
				@abstractmethod
				def describe(self): pass
				def summarize(self): return "boo"
	
	def test_intermediate_base(self):
		class Shape(Record, abstract=True):
			def summarize(self): return type(self).__name__.lower()
		class Square(Shape):
			def describe(self): return "<Square>"
		with self.assertRaises(UnregisteredType): Shape()
		self.assertEqual("square", summarize(Square()))
	
	def test_record_itself_cannot_be_made(self):
		with self.assertRaises(UnregisteredType): Record()
	
	def test_subclass_of_concrete_type(self):
		class Parrot(Bird):
			def summarize(self): return "Pretty " + self.name
		john = Person("John", "Smith")
		parrot = Parrot("Polly", john)
		self.assertEqual("Pretty Polly", summarize(parrot))
		self.assertTrue(describe(parrot).startswith("<Bird: name='Polly'"))

class FormattingFailureTests(unittest.TestCase):
	def test_not_text(self):
		class Counter(Record):
			def describe(self): return 42
			def summarize(self): return "forty-two"
		with self.assertRaises(FormattingFailure): describe(Counter())
		self.assertEqual("forty-two", summarize(Counter()))
	
	def test_out_of_memory_is_surfaced(self):
		class Hungry(Record):
			def describe(self): raise MemoryError
			def summarize(self): return "hungry"
		with self.assertRaises(FormattingFailure) as cm:
			print_describe(Hungry(), file=io.StringIO())
		self.assertIsInstance(cm.exception.__cause__, MemoryError)

class BorrowedTests(unittest.TestCase):
	def test_life_and_death(self):
		john = Person("John", "Smith")
		handle = Borrowed(john)
		self.assertTrue(handle.alive)
		self.assertIs(john, handle.get())
		john.destroy()
		self.assertFalse(handle.alive)
		self.assertIn("dangling", repr(handle))
		with self.assertRaises(DanglingReference): handle.get()
	
	def test_only_records(self):
		with self.assertRaises(TypeError): Borrowed("John")
		with self.assertRaises(AbsentReference): Borrowed(None)


if __name__ == '__main__':
	unittest.main()
