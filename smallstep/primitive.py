"""
The primitive operators of SIMPLE, in one static table.
Each glyph knows what kind of operand it takes and what kind of value it yields,
so nothing about an operator is left to run-time method lookup on the host objects.
"""
import operator
from typing import Callable, NamedTuple
from .ontology import Value, Number, Boolean
from .diagnostics import DomainError, DivisionByZero

class Operator(NamedTuple):
	glyph: str
	function: Callable
	operand_kind: type
	result_kind: type

def _logical_and(a, b): return a and b
def _logical_or(a, b): return a or b

BINARY = {op.glyph: op for op in [
	Operator("+", operator.add, Number, Number),
	Operator("-", operator.sub, Number, Number),
	Operator("*", operator.mul, Number, Number),
	Operator("/", operator.floordiv, Number, Number),
	Operator("<", operator.lt, Number, Boolean),
	Operator(">", operator.gt, Number, Boolean),
	Operator("&&", _logical_and, Boolean, Boolean),
	Operator("||", _logical_or, Boolean, Boolean),
]}

UNARY = {op.glyph: op for op in [
	Operator("!", operator.not_, Boolean, Boolean),
]}

def apply_binary(glyph:str, left:Value, right:Value) -> Value:
	op = BINARY[glyph]
	if not (isinstance(left, op.operand_kind) and isinstance(right, op.operand_kind)):
		raise DomainError(glyph, left, right)
	if glyph == "/" and right.value == 0:
		raise DivisionByZero(left)
	return op.result_kind(op.function(left.value, right.value))

def apply_unary(glyph:str, operand:Value) -> Value:
	op = UNARY[glyph]
	if not isinstance(operand, op.operand_kind):
		raise DomainError(glyph, operand)
	return op.result_kind(op.function(operand.value))
