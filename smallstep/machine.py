"""
The Machine drives a term to normal form one reduction at a time,
keeping every intermediate state in an append-only trace.

A machine built around an expression keeps bare terms in its trace,
since expressions never change the environment.
A machine built around a statement keeps (statement, environment) pairs.

There is no step limit unless you ask for one: a program that loops forever
keeps the machine running forever, which is what the semantics says.
Pass a Budget to get a BUDGET_EXCEEDED outcome instead.
"""
import enum, time
from typing import NamedTuple, Optional, Union
from .ontology import Term, Expression, Statement
from .environment import Environment, EMPTY
from .diagnostics import Report, ReductionError, PreconditionViolation
from .reduction import reduce_expression, reduce_statement

class Outcome(enum.Enum):
	NORMAL_FORM = "normal form"
	BUDGET_EXCEEDED = "budget exceeded"

class Budget(NamedTuple):
	max_steps: Optional[int] = None
	max_seconds: Optional[float] = None

	def exhausted(self, steps:int, started:float) -> bool:
		if self.max_steps is not None and steps >= self.max_steps: return True
		if self.max_seconds is not None and time.monotonic() - started >= self.max_seconds: return True
		return False

UNLIMITED = Budget()

class Run(NamedTuple):
	outcome: Outcome
	trace: tuple
	final: Union[Environment, Term]

	def finished(self) -> bool: return self.outcome is Outcome.NORMAL_FORM

class Machine:
	"""
	Construct with a term and (optionally) an environment, then call run().
	Any ReductionError propagates out of run() with the partial trace attached.
	"""
	_result: Optional[Run] = None

	def __init__(self, term:Term, environment:Environment=EMPTY, *, budget:Budget=UNLIMITED, report:Report=None):
		if isinstance(term, Statement): self._expression_mode = False
		elif isinstance(term, Expression): self._expression_mode = True
		else: raise PreconditionViolation("A Machine drives SIMPLE terms, not %r"%(term,))
		if environment is None: environment = EMPTY
		elif not isinstance(environment, Environment):
			environment = Environment.of(environment)
		self._environment = environment
		self._budget = budget or UNLIMITED
		self._report = report or Report()
		self._trace = [term if self._expression_mode else (term, environment)]

	@property
	def trace(self) -> tuple: return tuple(self._trace)

	@property
	def steps(self) -> int: return len(self._trace) - 1

	@property
	def term(self) -> Term:
		return self._term_of(self._trace[-1])

	@property
	def environment(self) -> Environment:
		last = self._trace[-1]
		return self._environment if self._expression_mode else last[1]

	def _term_of(self, record) -> Term:
		return record if self._expression_mode else record[0]

	def _advance(self, record):
		if self._expression_mode:
			return reduce_expression(record, self._environment)
		return reduce_statement(*record)

	def run(self) -> Run:
		if self._result is not None: return self._result
		report = self._report
		report.info("Reducing", repr(self.term), "under", self.environment)
		started = time.monotonic()
		while self.term.reducible():
			if self._budget.exhausted(self.steps, started):
				report.info("Budget ran out after", self.steps, "step(s).")
				return self._finish(Outcome.BUDGET_EXCEEDED)
			try: record = self._advance(self._trace[-1])
			except ReductionError as ex:
				ex.trace = self.trace
				raise
			self._trace.append(record)
			report.step(self.steps, record)
		report.info("Normal form after", self.steps, "step(s).")
		return self._finish(Outcome.NORMAL_FORM)

	def _finish(self, outcome:Outcome) -> Run:
		final = self.term if self._expression_mode else self.environment
		self._result = Run(outcome, self.trace, final)
		return self._result

def evaluate(term:Term, environment:Environment=EMPTY, **kwargs) -> Run:
	return Machine(term, environment, **kwargs).run()
