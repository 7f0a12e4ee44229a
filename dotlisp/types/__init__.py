from dotlisp.types.sexp import Atom, Pair, SExp, T, NIL
from dotlisp.types.environment import Environment
from dotlisp.types.function_def import UserFunction
from dotlisp.types.definitions import DefinitionsTable

__all__ = ["Atom", "Pair", "SExp", "T", "NIL", "Environment", "UserFunction", "DefinitionsTable"]
