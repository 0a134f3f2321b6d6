"""
The set of term-nodes in simple form.
There is no parser: callers build programs by calling these constructors directly.
Each node keeps its fields in the key tuple of its Term base class,
which is what makes structural equality and hashing come for free.
"""
from .ontology import Term, Expression, Statement, Value, Number, Boolean
from . import primitive

__all__ = [
	"Term", "Expression", "Statement", "Value", "Number", "Boolean",
	"Variable", "BinaryOp", "UnaryOp",
	"DoNothing", "Sequence", "Assign", "If", "While",
	"Add", "Subtract", "Multiply", "Divide", "LessThan", "GreaterThan", "And", "Or", "Not",
]

def _check(item, kind:type, role:str):
	if not isinstance(item, kind):
		raise TypeError("%s must be a %s, not %r"%(role, kind.__name__, item))
	return item

class Variable(Expression):
	__slots__ = ()
	def __init__(self, name:str):
		super().__init__(_check(name, str, "A variable name"))
	@property
	def name(self) -> str: return self._key[0]
	def __str__(self): return self.name

class BinaryOp(Expression):
	__slots__ = ()
	def __init__(self, glyph:str, left:Expression, right:Expression):
		if glyph not in primitive.BINARY: raise ValueError("Unknown binary operator %r"%glyph)
		super().__init__(glyph, _check(left, Expression, "A left operand"), _check(right, Expression, "A right operand"))
	glyph = property(lambda self: self._key[0])
	left = property(lambda self: self._key[1])
	right = property(lambda self: self._key[2])
	def result_kind(self) -> type: return primitive.BINARY[self.glyph].result_kind
	def __str__(self): return "(%s %s %s)"%(self.left, self.glyph, self.right)

class UnaryOp(Expression):
	__slots__ = ()
	def __init__(self, glyph:str, operand:Expression):
		if glyph not in primitive.UNARY: raise ValueError("Unknown unary operator %r"%glyph)
		super().__init__(glyph, _check(operand, Expression, "An operand"))
	glyph = property(lambda self: self._key[0])
	operand = property(lambda self: self._key[1])
	def result_kind(self) -> type: return primitive.UNARY[self.glyph].result_kind
	def __str__(self): return "(%s %s)"%(self.glyph, self.operand)

###############################################################################

class DoNothing(Statement):
	""" The sole normal form for statements. Every instance is as good as any other. """
	__slots__ = ()
	def __init__(self): super().__init__()
	def reducible(self): return False
	def __str__(self): return "do-nothing"

class Sequence(Statement):
	__slots__ = ()
	def __init__(self, first:Statement, second:Statement):
		super().__init__(_check(first, Statement, "A first statement"), _check(second, Statement, "A second statement"))
	first = property(lambda self: self._key[0])
	second = property(lambda self: self._key[1])
	def __str__(self): return "%s; %s"%(self.first, self.second)

class Assign(Statement):
	__slots__ = ()
	def __init__(self, name:str, expression:Expression):
		super().__init__(_check(name, str, "An assignment target"), _check(expression, Expression, "An assigned expression"))
	name = property(lambda self: self._key[0])
	expression = property(lambda self: self._key[1])
	def __str__(self): return "%s := %s"%(self.name, self.expression)

class If(Statement):
	__slots__ = ()
	def __init__(self, condition:Expression, consequence:Statement, alternative:Statement):
		super().__init__(
			_check(condition, Expression, "A condition"),
			_check(consequence, Statement, "A consequence"),
			_check(alternative, Statement, "An alternative"),
		)
	condition = property(lambda self: self._key[0])
	consequence = property(lambda self: self._key[1])
	alternative = property(lambda self: self._key[2])
	def __str__(self): return "if (%s) { %s } else { %s }"%(self.condition, self.consequence, self.alternative)

class While(Statement):
	__slots__ = ()
	def __init__(self, condition:Expression, body:Statement):
		super().__init__(_check(condition, Expression, "A condition"), _check(body, Statement, "A loop body"))
	condition = property(lambda self: self._key[0])
	body = property(lambda self: self._key[1])
	def __str__(self): return "while (%s) { %s }"%(self.condition, self.body)

###############################################################################

# The traditional spellings, one per operator.

def Add(left, right): return BinaryOp("+", left, right)
def Subtract(left, right): return BinaryOp("-", left, right)
def Multiply(left, right): return BinaryOp("*", left, right)
def Divide(left, right): return BinaryOp("/", left, right)
def LessThan(left, right): return BinaryOp("<", left, right)
def GreaterThan(left, right): return BinaryOp(">", left, right)
def And(left, right): return BinaryOp("&&", left, right)
def Or(left, right): return BinaryOp("||", left, right)
def Not(operand): return UnaryOp("!", operand)
