import io
import unittest
from unittest.mock import patch

from smallstep.syntax import (
	Number, Boolean, Variable, DoNothing, Sequence, Assign, If, While,
	Add, Subtract, Multiply, Divide, LessThan,
)
from smallstep.environment import Environment, EMPTY
from smallstep.machine import Machine, Budget, Outcome, evaluate
from smallstep.reduction import reduce_expression, reduce_statement
from smallstep.diagnostics import Report, DivisionByZero, UnboundVariable, PreconditionViolation
from smallstep import catalog

def _counting_loop():
	return Sequence(
		Assign("x", Number(1)),
		While(LessThan(Variable("x"), Number(5)), Assign("x", Add(Variable("x"), Number(1)))),
	)

class ExpressionMachineTests(unittest.TestCase):

	def test_arithmetic_trace(self):
		expr = Multiply(Add(Number(1), Number(2)), Subtract(Number(3), Number(1)))
		run = Machine(expr, EMPTY).run()
		self.assertIs(Outcome.NORMAL_FORM, run.outcome)
		self.assertEqual((
			expr,
			Multiply(Number(3), Subtract(Number(3), Number(1))),
			Multiply(Number(3), Number(2)),
			Number(6),
		), run.trace)
		self.assertEqual(Number(6), run.final)

	def test_variables(self):
		run = Machine(Add(Variable("x"), Variable("y")), Environment.of(x=Number(3), y=Number(4))).run()
		self.assertEqual(Number(7), run.final)

	def test_plain_mapping_for_environment(self):
		self.assertEqual(Number(2), evaluate(Variable("x"), {"x": Number(2)}).final)

	def test_already_a_value(self):
		run = Machine(Boolean(True)).run()
		self.assertEqual((Boolean(True),), run.trace)
		self.assertTrue(run.finished())

	def test_steps_bounded_by_size(self):
		expr = Add(Multiply(Number(2), Number(3)), Subtract(Number(9), Divide(Number(8), Number(4))))
		run = Machine(expr).run()
		self.assertEqual(Number(13), run.final)
		self.assertLessEqual(len(run.trace) - 1, 4)

	def test_division_by_zero_aborts(self):
		expr = Divide(Number(4), Number(0))
		machine = Machine(expr)
		with self.assertRaises(DivisionByZero) as cm:
			machine.run()
		self.assertEqual((expr,), machine.trace)
		self.assertEqual((expr,), cm.exception.trace)

	def test_unbound_variable(self):
		with self.assertRaises(UnboundVariable):
			Machine(Variable("y"), Environment.of(x=Number(1))).run()

	def test_not_a_term(self):
		with self.assertRaises(PreconditionViolation):
			Machine(42)

class StatementMachineTests(unittest.TestCase):

	def test_counting_loop(self):
		run = Machine(_counting_loop(), EMPTY).run()
		self.assertIs(Outcome.NORMAL_FORM, run.outcome)
		self.assertEqual(Environment.of(x=Number(5)), run.final)
		self.assertEqual(DoNothing(), run.trace[-1][0])

	def test_if_true(self):
		program = If(Boolean(True), Assign("x", Number(1)), Assign("x", Number(2)))
		self.assertEqual(Environment.of(x=Number(1)), evaluate(program).final)

	def test_factorial(self):
		term, env = catalog.factorial()
		self.assertEqual(Number(120), evaluate(term, env).final.lookup("result"))

	def test_trace_fidelity(self):
		program = _counting_loop()
		run = Machine(program, EMPTY).run()
		self.assertEqual((program, EMPTY), run.trace[0])
		self.assertFalse(run.trace[-1][0].reducible())
		for before, after in zip(run.trace, run.trace[1:]):
			self.assertEqual(after, reduce_statement(*before))

	def test_history_is_not_rewritten(self):
		run = Machine(_counting_loop(), EMPTY).run()
		seen = [env.as_dict().get("x") for _, env in run.trace]
		self.assertIsNone(seen[0])
		values = [v.value for v in seen if v is not None]
		self.assertEqual(sorted(values), values)
		self.assertEqual([1, 2, 3, 4, 5], sorted(set(values)))

	def test_failure_keeps_partial_trace(self):
		term, env = catalog.divide_by_zero()
		machine = Machine(term, env)
		with self.assertRaises(DivisionByZero) as cm:
			machine.run()
		self.assertEqual(2, len(cm.exception.trace))
		self.assertEqual(machine.trace, cm.exception.trace)
		self.assertEqual(Assign("x", Divide(Number(4), Number(0))), machine.term)

	def test_run_is_idempotent(self):
		machine = Machine(_counting_loop())
		first = machine.run()
		self.assertIs(first, machine.run())
		self.assertEqual(len(first.trace) - 1, machine.steps)

class BudgetTests(unittest.TestCase):

	def test_step_budget(self):
		term, env = catalog.forever()
		run = Machine(term, env, budget=Budget(max_steps=10)).run()
		self.assertIs(Outcome.BUDGET_EXCEEDED, run.outcome)
		self.assertFalse(run.finished())
		self.assertEqual(11, len(run.trace))
		self.assertEqual(run.trace[-1][1], run.final)

	def test_time_budget(self):
		term, env = catalog.forever()
		run = Machine(term, env, budget=Budget(max_seconds=0)).run()
		self.assertIs(Outcome.BUDGET_EXCEEDED, run.outcome)
		self.assertEqual(1, len(run.trace))

	def test_budget_is_irrelevant_when_ample(self):
		run = Machine(_counting_loop(), budget=Budget(max_steps=1000)).run()
		self.assertIs(Outcome.NORMAL_FORM, run.outcome)

	def test_expression_budget_leaves_last_term(self):
		expr = Add(Add(Number(1), Number(2)), Number(3))
		run = Machine(expr, budget=Budget(max_steps=1)).run()
		self.assertEqual(Add(Number(3), Number(3)), run.final)

class ReportTests(unittest.TestCase):

	def test_verbose_logs_every_step(self):
		expr = Multiply(Add(Number(1), Number(2)), Subtract(Number(3), Number(1)))
		with patch("sys.stderr", new_callable=io.StringIO) as err:
			Machine(expr, report=Report(verbose=2)).run()
		log = err.getvalue()
		self.assertIn("    1: «(3 * (3 - 1))»", log)
		self.assertIn("Normal form after 3 step(s).", log)

	def test_quiet_by_default(self):
		with patch("sys.stderr", new_callable=io.StringIO) as err:
			Machine(_counting_loop()).run()
		self.assertEqual("", err.getvalue())

	def test_show_trace(self):
		out = io.StringIO()
		run = Machine(Assign("x", Add(Number(1), Number(1)))).run()
		Report(out=out).show_trace(run.trace)
		self.assertEqual([
			"x := (1 + 1), {}",
			"x := 2, {}",
			"do-nothing, {x: «2»}",
		], out.getvalue().splitlines())


if __name__ == '__main__':
	unittest.main()
