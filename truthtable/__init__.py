from .errors import (
    EvaluationError,
    ExpressionError,
    InsufficientOperands,
    InvalidCharacter,
    MalformedResult,
    MismatchedParentheses,
    ParseError,
    TooManyVariables,
    UnexpectedToken,
    UnknownToken,
    UnknownVariable,
)
from .evaluator import Atomic, Derived, ValuedExpression, evaluate
from .parser import Parser, PostfixProgram, parse, tokenize
from .table import TruthTable, generate_truth_table, print_truth_table
