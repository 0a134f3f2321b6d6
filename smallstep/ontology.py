"""
These most-fundamental classes in the term hierarchy are separate
from the rest to avoid various circular-import scenarios.
The environment needs to know what a Value is, and the concrete
syntax needs the environment, so the Value model lives down here.

Every term is an immutable value object. Equality and hashing go by
the concrete class together with a key tuple, which is how old steps
in a trace can be compared with new ones without ever worrying about
aliasing.
"""

class Term:
	""" Anything that can appear in a SIMPLE abstract syntax tree """
	__slots__ = ("_key", "_hash")

	def __init__(self, *key):
		self._key = key
		self._hash = hash((type(self).__name__, key))
	def __hash__(self): return self._hash
	def __eq__(self, other): return type(self) is type(other) and self._key == other._key
	def __ne__(self, other): return not self == other
	def __setattr__(self, name, value):
		if hasattr(self, "_hash"): raise AttributeError("Terms are immutable: %s"%name)
		object.__setattr__(self, name, value)
	def __repr__(self): return "«%s»"%self
	def __str__(self): raise NotImplementedError(type(self))

	def reducible(self) -> bool:
		""" True unless this term is a normal form """
		return True

class Expression(Term):
	__slots__ = ()

class Statement(Term):
	__slots__ = ()

#######################################################################

class Value(Expression):
	""" Irreducible terminal expression wrapping a Python primitive. """
	__slots__ = ()
	primitive: type

	def __init__(self, value):
		if type(value) is not self.primitive:
			raise TypeError("%s wants a %s, not %r"%(type(self).__name__, self.primitive.__name__, value))
		super().__init__(value)

	@property
	def value(self): return self._key[0]
	def reducible(self): return False
	def __str__(self): return str(self.value)

class Number(Value):
	__slots__ = ()
	primitive = int

class Boolean(Value):
	__slots__ = ()
	primitive = bool
	def __str__(self): return "true" if self.value else "false"

