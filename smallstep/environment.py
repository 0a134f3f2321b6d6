"""
Simplest possible environment concept.

This is the canonical list-structured search: each extension is one
more link in front of the environment it extends, so nobody ever
mutates a binding and every older environment stays exactly as it was.
A trace can therefore hold on to all of them at once.
"""
from typing import Mapping, Iterator
from .ontology import Value
from .diagnostics import UnboundVariable, PreconditionViolation

class Environment:
	""" Immutable mapping from variable name to Value. """
	__slots__ = ()

	@staticmethod
	def of(mapping:Mapping[str, Value]=(), **bindings:Value) -> "Environment":
		env = EMPTY
		for name, value in dict(mapping, **bindings).items():
			env = env.extend(name, value)
		return env

	def lookup(self, name:str) -> Value:
		link = self
		while isinstance(link, _Binding):
			if link.name == name: return link.value
			link = link.outer
		raise UnboundVariable(name)

	def extend(self, name:str, value:Value) -> "Environment":
		if not isinstance(value, Value):
			raise PreconditionViolation("Environments bind only values, not %r"%(value,))
		return _Binding(name, value, self)

	def _links(self) -> Iterator["_Binding"]:
		link = self
		while isinstance(link, _Binding):
			yield link
			link = link.outer

	def as_dict(self) -> dict[str, Value]:
		""" Flatten, keeping each name where it was first bound. """
		links = list(self._links())
		flat = {}
		for link in reversed(links):
			flat[link.name] = link.value
		return flat

	def __contains__(self, name:str): return any(link.name == name for link in self._links())
	def __eq__(self, other): return isinstance(other, Environment) and self.as_dict() == other.as_dict()
	def __hash__(self): return hash(frozenset(self.as_dict().items()))
	def __str__(self):
		return "{%s}"%", ".join("%s: %r"%pair for pair in self.as_dict().items())
	def __repr__(self): return "<Environment %s>"%self

class _Empty(Environment):
	__slots__ = ()

class _Binding(Environment):
	__slots__ = ("name", "value", "outer")
	def __init__(self, name:str, value:Value, outer:Environment):
		self.name, self.value, self.outer = name, value, outer

EMPTY = _Empty()
