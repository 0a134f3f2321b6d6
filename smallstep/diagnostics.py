"""
Everything to do with things going wrong, and with telling the
human about it: the taxonomy of reduction failures, plus the Report
that carries progress chatter and complaints to the console.
"""
import sys, random
from typing import Iterable, Iterator
from .ontology import Term

class ReductionError(Exception):
	"""
	Base for every way a single reduction step can fail.
	The Machine fills in `trace` with whatever it managed to record.
	"""
	trace: tuple = ()

class UnboundVariable(ReductionError, LookupError):
	def __init__(self, name:str):
		super().__init__("Variable %r is not bound in this environment."%name)
		self.name = name

class DomainError(ReductionError, TypeError):
	def __init__(self, glyph:str, *operands:Term):
		described = ", ".join("%r (%s)"%(o, type(o).__name__) for o in operands)
		super().__init__("Operator %r is not defined for %s."%(glyph, described))
		self.glyph, self.operands = glyph, operands

class DivisionByZero(ReductionError, ZeroDivisionError):
	def __init__(self, dividend:Term):
		super().__init__("Cannot divide %r by zero."%dividend)
		self.dividend = dividend

class NotABoolean(ReductionError, TypeError):
	def __init__(self, condition:Term):
		super().__init__("The condition reduced to %r, which is not a boolean."%condition)
		self.condition = condition

class PreconditionViolation(ReductionError):
	""" The caller asked for something the engine never does to well-formed input. """
	pass

###############################################################################

def render_record(record) -> str:
	""" Expression traces hold bare terms; statement traces hold (term, environment) pairs. """
	if isinstance(record, Term):
		return repr(record)
	term, environment = record
	return "%s, %s"%(term, environment)

def render_trace(trace:Iterable) -> Iterator[str]:
	return map(render_record, trace)

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = ['Ack', 'Blargh', 'Confound it', 'Crud', 'Drat', 'Good Grief', 'Nuts', 'Rats']
	resignations = ['I am undone.', 'I cannot continue.', 'The reduction stops here.']
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	"""
	The one channel through which the engine talks to a human.
	Traces and final states go to `out`; everything else goes to stderr.
	"""
	def __init__(self, *, verbose:int=0, out=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._out = out

	@property
	def out(self): return self._out or sys.stdout

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def step(self, number:int, record):
		if self._verbose > 1:
			print("%5d: %s"%(number, render_record(record)), file=sys.stderr)

	def show_trace(self, trace:Iterable):
		for line in render_trace(trace):
			print(line, file=self.out)

	def show_final(self, final):
		print(repr(final) if isinstance(final, Term) else final, file=self.out)

	def complain_to_console(self, error:ReductionError):
		""" Emit a failure, together with however much trace got recorded before it. """
		print(_outburst(), file=sys.stderr)
		print("%s: %s"%(type(error).__name__, error), file=sys.stderr)
		if error.trace:
			print(" - The reduction got this far:", file=sys.stderr)
			for line in render_trace(error.trace):
				print("     "+line, file=sys.stderr)

	def budget_exhausted(self, run):
		print("Gave up after %d step(s) without reaching a normal form."%(len(run.trace) - 1), file=sys.stderr)
