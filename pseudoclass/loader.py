"""
A specimen is an ordinary Python file that defines record types and binds
some records at module level. Loading one is the moment the contract check
fires for any types it defines, so the loader's job is mostly to turn the
resulting exceptions into a report that points at the guilty line.
"""
import io, re
import importlib.util
from pathlib import Path
from traceback import TracebackException, extract_tb
from types import ModuleType
from typing import NamedTuple, Optional

from .ontology import Record, ContractViolation, print_describe, print_summarize
from .diagnostics import Report

class Yuck(Exception):
	""" Loading gave up. The first argument names the phase that failed. """

class Specimen(NamedTuple):
	path: Path
	records: dict[str, Record]  # In order of definition.
	module: ModuleType  # Owns whatever the records borrow.

def load_specimen(path, report:Report) -> Specimen:
	path = Path(path)
	if not path.is_file():
		report.no_such_file(path)
		raise Yuck("missing")
	report.info("Loading", path)
	module_name = "specimen_" + re.sub(r"\W", "_", path.stem)
	spec = importlib.util.spec_from_file_location(module_name, path)
	module = importlib.util.module_from_spec(spec)
	try: spec.loader.exec_module(module)
	except ContractViolation as ex:
		report.contract_violation(path, _blame(path, ex), ex)
		raise Yuck("contract")
	except Exception as ex:
		report.broken_file(path, _blame(path, ex), TracebackException.from_exception(ex))
		raise Yuck("broken")
	records = {
		name: value for name, value in vars(module).items()
		if isinstance(value, Record) and value.alive and not name.startswith("_")
	}
	report.info("Found %d record(s) in %s" % (len(records), path.name))
	return Specimen(path, records, module)

def check_records(specimen:Specimen, report:Report):
	""" Render every record through both dispatchers, into the void. """
	scratch = io.StringIO()
	for name, record in specimen.records.items():
		for operation, dispatcher in (("describe", print_describe), ("summarize", print_summarize)):
			try: dispatcher(record, file=scratch)
			except Exception as ex:
				line = _blame(specimen.path, ex) or _line_defining(specimen.path, name)
				report.bad_render(specimen.path, line, name, operation, ex)
			else: report.info("  %s: %s ok" % (name, operation))

def _same_file(path:Path, filename:Optional[str]) -> bool:
	return filename is not None and Path(filename).resolve() == path.resolve()

def _blame(path:Path, ex:BaseException) -> Optional[int]:
	""" The line within the specimen closest to where the exception came from. """
	if isinstance(ex, SyntaxError) and _same_file(path, ex.filename):
		return ex.lineno
	line = None
	for frame in extract_tb(ex.__traceback__):
		if _same_file(path, frame.filename): line = frame.lineno
	return line

def _line_defining(path:Path, name:str) -> Optional[int]:
	text = path.read_text(encoding="utf-8")
	match = re.search(r"^%s\s*(:[^=\n]*)?=(?!=)" % re.escape(name), text, re.MULTILINE)
	if match: return text.count("\n", 0, match.start()) + 1
