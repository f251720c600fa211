import sys, random
from functools import lru_cache
from pathlib import Path
from traceback import TracebackException
from typing import Any, Optional, Sequence
from boozetools.support.failureprone import SourceText, illustration

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	
	minced_oaths = [
		'Ack', 'Blargh', 'Bother', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Feathers', 'Fiddlesticks', 'Good Grief', 'Great Scott', 'Heavens',
		'Jeepers', 'Nuts', 'Rats', 'Segfault Averted', 'Woe is me',
	]
	
	resignations = [
		'I am undone.',
		'I cannot continue.',
		'Somebody forgot to fill in a slot.',
		'I need to ask for help.',
	]
	
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects whatever goes wrong while loading and checking a specimen. """
	_issues : list["Pic"]
	
	def __init__(self, *, verbose:int, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self) -> Sequence["Pic"]: return tuple(self._issues)
	
	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)
	
	def reset(self):
		self._issues.clear()
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)
	
	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
	
	# Methods the loader invokes:
	
	def no_such_file(self, path:Path):
		self.issue(Pic("I see no file called "+str(path), []))
	
	def contract_violation(self, path:Path, line:Optional[int], ex:Exception):
		intro = "This record type breaks the contract."
		problem = [Annotation(path, line, "defined here")] if line else []
		footer = [str(ex), "Every record needs both a describe() and a summarize() method."]
		self.issue(Pic(intro, problem, footer))
	
	def broken_file(self, path:Path, line:Optional[int], tbx:TracebackException):
		intro = "Something went pear-shaped while loading "+str(path)
		problem = [Annotation(path, line, "from here")] if line else []
		self.issue(Pic(intro, problem, [''.join(tbx.format_exception_only()).rstrip()]))
	
	# Methods the record-checker invokes:
	
	def bad_render(self, path:Path, line:Optional[int], name:str, operation:str, ex:Exception):
		intro = "The record '%s' cannot %s itself." % (name, operation)
		problem = [Annotation(path, line, type(ex).__name__)] if line else []
		self.issue(Pic(intro, problem, ["%s: %s" % (type(ex).__name__, ex)]))

class Annotation:
	""" Points at one line of a source file, with an optional caption. """
	def __init__(self, path:Path, line:int, caption:str=""):
		self.path = path
		self.line = line
		self.caption = caption
	def illustrate(self):
		text = _fetch(self.path)
		lines = text.splitlines(keepends=True)
		if not 0 < self.line <= len(lines): return '% 6d | (past the end of the file)' % self.line
		start = sum(map(len, lines[:self.line-1]))
		body = lines[self.line-1].rstrip()
		indent = len(body) - len(body.lstrip())
		source = SourceText(text, filename=str(self.path))
		row, col = source.find_row_col(start+indent)
		single_line = source.line_of_text(row)
		width = max(1, len(body) - indent)
		return illustration(single_line, col, width, prefix='% 6d |' % self.line, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self.intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self.intro, ""]
		path = None
		for ann in self._anns:
			if ann.path != path:
				path = ann.path
				lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

@lru_cache(5)
def _fetch(path) -> str:
	with open(path, "r", encoding="utf-8") as fh:
		return fh.read()

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
