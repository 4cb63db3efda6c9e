import sys

from .errors import (
    InsufficientOperands,
    MalformedResult,
    UnexpectedToken,
    UnknownVariable,
)
from .frozen import FrozenDict
from .operators import Associativity
from .tokens import OperatorToken, Variable

# Bare variables never need parentheses
ATOMIC_PRECEDENCE = sys.maxsize


def parenthesize(text):
    return f"({text})"


def needs_parentheses(operand, op):
    if operand.precedence < op.precedence:
        return True
    if op.is_unary:
        return False
    return (
        operand.precedence == op.precedence
        and op.associativity == Associativity.RIGHT
    )


def render(op, operands):
    """
    Rebuilds the text of ``op`` applied to ``operands`` with only the
    parentheses precedence requires

    Same precedence operands of a right associative operator are always wrapped,
    so "A -> B -> C" comes back as "A -> (B -> C)"
    """
    texts = [
        parenthesize(operand.text) if needs_parentheses(operand, op) else operand.text
        for operand in operands
    ]
    if op.is_unary:
        return op.symbol + texts[0]
    return f" {op.symbol} ".join(texts)


class ValuedExpression:
    """
    One step of a derivation: an expression text with its truth value
    """

    text = None
    value = None
    precedence = None

    def __eq__(self, other):
        return (
            isinstance(other, ValuedExpression)
            and self.text == other.text
            and self.value == other.value
            and self.precedence == other.precedence
        )

    def __hash__(self):
        return hash((self.text, self.value, self.precedence))

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.text!r}={self.value}>"


class Atomic(ValuedExpression):
    precedence = ATOMIC_PRECEDENCE

    def __init__(self, name, value):
        self.text = name
        self.value = bool(value)


class Derived(ValuedExpression):
    def __init__(self, op, operands):
        self.op = op
        self.operands = operands
        self.precedence = op.precedence
        self.value = op.evaluate([operand.value for operand in operands])
        self.text = render(op, operands)


def evaluate(program, assignment):
    """
    Evaluates a postfix program for one assignment of its variables

    Returns the derivation trace: one Atomic per assignment entry in the order
    given, then one Derived per operator application in completion order. The
    last element is the overall result
    """
    inputs = FrozenDict((name, Atomic(name, value)) for name, value in assignment.items())
    trace = list(inputs.values())
    stack = []

    for token in program:
        if isinstance(token, Variable):
            if token.value not in inputs:
                raise UnknownVariable(
                    f"Unknown variable during evaluation: {token.value}", token
                )
            stack.append(inputs[token.value])
        elif isinstance(token, OperatorToken) and token.operator is not None:
            op = token.operator
            if len(stack) < op.arity:
                raise InsufficientOperands(
                    f"Insufficient operands for operator: {op.symbol}", token
                )
            # First popped is the rightmost operand
            operands = [stack.pop() for _ in range(op.arity)][::-1]
            result = Derived(op, operands)
            trace.append(result)
            stack.append(result)
        else:
            raise UnexpectedToken(f"Unexpected token in postfix program: {token!r}")

    if len(stack) != 1:
        raise MalformedResult(
            f"Evaluation did not end with a single result. Stack size: {len(stack)}"
        )

    return trace
