"""
The small-step reduction relation.

One call reduces a term by exactly one rule. Evaluation order is fixed:
leftmost-innermost for expressions, and the first branch of a sequence before
the second. Nothing here mutates anything; every step builds new terms and,
where an assignment commits, a new environment.

The expression language is handled once, by ExpressionReducer.
StatementReducer extends it with the statement forms and threads the environment.
"""
from boozetools.support.foundation import Visitor
from .ontology import Term, Expression, Statement, Boolean
from .environment import Environment
from .diagnostics import NotABoolean, PreconditionViolation
from .syntax import Variable, BinaryOp, UnaryOp, DoNothing, Sequence, Assign, If, While
from . import primitive

class ExpressionReducer(Visitor):
	""" reduce(expr, env) -> expr' """

	def reduce_expression(self, expr:Expression, env:Environment) -> Expression:
		if not expr.reducible():
			raise PreconditionViolation("%r is already a value."%expr)
		return self.visit(expr, env)

	def visit_Variable(self, expr:Variable, env:Environment):
		return env.lookup(expr.name)

	def visit_BinaryOp(self, expr:BinaryOp, env:Environment):
		if expr.left.reducible():
			return BinaryOp(expr.glyph, self.visit(expr.left, env), expr.right)
		elif expr.right.reducible():
			return BinaryOp(expr.glyph, expr.left, self.visit(expr.right, env))
		else:
			return primitive.apply_binary(expr.glyph, expr.left, expr.right)

	def visit_UnaryOp(self, expr:UnaryOp, env:Environment):
		if expr.operand.reducible():
			return UnaryOp(expr.glyph, self.visit(expr.operand, env))
		else:
			return primitive.apply_unary(expr.glyph, expr.operand)

class StatementReducer(ExpressionReducer):
	""" reduce(stmt, env) -> (stmt', env') """

	def reduce_statement(self, stmt:Statement, env:Environment) -> tuple[Statement, Environment]:
		if not stmt.reducible():
			raise PreconditionViolation("%r is already finished."%stmt)
		return self.visit(stmt, env)

	def visit_Sequence(self, stmt:Sequence, env:Environment):
		if stmt.first == DoNothing():
			return stmt.second, env
		first, env = self.visit(stmt.first, env)
		return Sequence(first, stmt.second), env

	def visit_Assign(self, stmt:Assign, env:Environment):
		if stmt.expression.reducible():
			return Assign(stmt.name, self.visit(stmt.expression, env)), env
		return DoNothing(), env.extend(stmt.name, stmt.expression)

	def visit_If(self, stmt:If, env:Environment):
		condition = stmt.condition
		if condition.reducible():
			return If(self.visit(condition, env), stmt.consequence, stmt.alternative), env
		if condition == Boolean(True): return stmt.consequence, env
		if condition == Boolean(False): return stmt.alternative, env
		raise NotABoolean(condition)

	def visit_While(self, stmt:While, env:Environment):
		return If(stmt.condition, Sequence(stmt.body, stmt), DoNothing()), env

_REDUCER = StatementReducer()

def reduce_expression(expr:Expression, env:Environment) -> Expression:
	return _REDUCER.reduce_expression(expr, env)

def reduce_statement(stmt:Statement, env:Environment) -> tuple[Statement, Environment]:
	return _REDUCER.reduce_statement(stmt, env)

def reduce(term:Term, env:Environment) -> tuple[Term, Environment]:
	""" One step of either language, always as a (term, environment) pair. """
	if isinstance(term, Statement):
		return reduce_statement(term, env)
	if isinstance(term, Expression):
		return reduce_expression(term, env), env
	raise PreconditionViolation("Not a SIMPLE term: %r"%(term,))
