from enum import Enum

from .frozen import FrozenDict, immutable

# Longest symbol in the catalog ("<->")
MAX_OPERATOR_LENGTH = 3


class Associativity(Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class Operator:
    """
    A logical connective

    Higher precedence binds tighter. Arity is 1 for prefix operators and 2 for
    infix operators. Instances are immutable and there is exactly one per symbol
    """

    __setattr__ = immutable
    __delattr__ = immutable

    def __init__(
        self,
        name: str,
        symbol: str,
        precedence: int,
        associativity: Associativity,
        arity: int,
        function,
    ):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "symbol", symbol)
        object.__setattr__(self, "precedence", precedence)
        object.__setattr__(self, "associativity", associativity)
        object.__setattr__(self, "arity", arity)
        object.__setattr__(self, "function", function)

    @property
    def is_unary(self):
        return self.arity == 1

    def evaluate(self, args):
        if len(args) != self.arity:
            raise ValueError(
                f"Incorrect number of arguments for operator {self.symbol!r}: expected {self.arity}, got {len(args)}"
            )
        return bool(self.function(*args))

    def __repr__(self):
        return f"<Operator {self.name} {self.symbol!r}>"


# Unary
NOT = Operator("NOT", "!", 5, Associativity.RIGHT, 1, lambda a: not a)

# Binary, tightest first
AND = Operator("AND", "&", 4, Associativity.LEFT, 2, lambda a, b: a and b)
# Sheffer stroke
NAND = Operator("NAND", "/", 4, Associativity.LEFT, 2, lambda a, b: not (a and b))

OR = Operator("OR", "|", 3, Associativity.LEFT, 2, lambda a, b: a or b)
XOR = Operator("XOR", "^", 3, Associativity.LEFT, 2, lambda a, b: a != b)
# Peirce's arrow
NOR = Operator("NOR", "\\", 3, Associativity.LEFT, 2, lambda a, b: not (a or b))

IMPLIES = Operator("IMPLIES", "->", 2, Associativity.RIGHT, 2, lambda a, b: not a or b)
EQUIV = Operator("EQUIV", "<->", 1, Associativity.LEFT, 2, lambda a, b: a == b)

CATALOG = (NOT, AND, NAND, OR, XOR, NOR, IMPLIES, EQUIV)

_BY_SYMBOL = FrozenDict((op.symbol, op) for op in CATALOG)


def lookup_by_symbol(symbol):
    return _BY_SYMBOL.get(symbol)


def is_operator_symbol(symbol):
    return symbol in _BY_SYMBOL


def longest_operator_prefix(text: str):
    """
    Returns the longest operator symbol that ``text`` starts with, or None

    Candidates are tried from MAX_OPERATOR_LENGTH down so that "<->" is never
    read as "<" followed by "->"
    """
    for length in range(MAX_OPERATOR_LENGTH, 0, -1):
        if len(text) >= length and is_operator_symbol(text[:length]):
            return text[:length]
    return None
