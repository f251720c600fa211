"""
Single-dispatch over a closed pair of operations, in the manner of a C
programmer who embeds a descriptor at the head of every struct.
"""
from .ontology import (
	Record, Descriptor, describe, summarize, print_describe, print_summarize,
	ContractViolation, MissingOperation, UnregisteredType, Destroyed, FormattingFailure,
)
from .borrowing import Borrowed, AbsentReference, DanglingReference
from .zoo import Person, Bird
