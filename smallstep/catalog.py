"""
A handful of programs from chapter two of Understanding Computation,
built straight out of constructors since there is no parser.
Each entry makes a fresh (term, environment) pair.
"""
from .syntax import (
	Number, Boolean, Variable, Assign, Sequence, If, While, DoNothing,
	Add, Subtract, Multiply, Divide, LessThan, GreaterThan,
)
from .environment import Environment, EMPTY

def arithmetic():
	return Multiply(Add(Number(1), Number(2)), Subtract(Number(3), Number(1))), EMPTY

def variables():
	return Add(Variable("x"), Variable("y")), Environment.of(x=Number(3), y=Number(4))

def assignment():
	return Assign("x", Add(Variable("x"), Number(1))), Environment.of(x=Number(2))

def conditional():
	program = If(Variable("x"), Assign("y", Number(1)), Assign("y", Number(2)))
	return program, Environment.of(x=Boolean(True))

def sequence():
	program = Sequence(
		Assign("x", Add(Number(1), Number(1))),
		Assign("y", Add(Variable("x"), Number(3))),
	)
	return program, EMPTY

def loop():
	program = Sequence(
		Assign("x", Number(1)),
		While(LessThan(Variable("x"), Number(5)), Assign("x", Add(Variable("x"), Number(1)))),
	)
	return program, EMPTY

def factorial():
	body = Sequence(
		Assign("result", Multiply(Variable("result"), Variable("n"))),
		Assign("n", Subtract(Variable("n"), Number(1))),
	)
	program = Sequence(Assign("result", Number(1)), While(GreaterThan(Variable("n"), Number(1)), body))
	return program, Environment.of(n=Number(5))

def forever():
	program = While(Boolean(True), Assign("x", Add(Variable("x"), Number(1))))
	return program, Environment.of(x=Number(0))

def divide_by_zero():
	return If(Boolean(True), Assign("x", Divide(Number(4), Number(0))), DoNothing()), EMPTY

def unbound():
	return Assign("x", Variable("y")), EMPTY

PROGRAMS = {
	"arithmetic": arithmetic,
	"variables": variables,
	"assignment": assignment,
	"conditional": conditional,
	"sequence": sequence,
	"loop": loop,
	"factorial": factorial,
	"forever": forever,
	"divide-by-zero": divide_by_zero,
	"unbound": unbound,
}
