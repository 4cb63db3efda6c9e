import itertools

import pytest

from truthtable.errors import (
    InsufficientOperands,
    MalformedResult,
    UnexpectedToken,
    UnknownVariable,
)
from truthtable.evaluator import ATOMIC_PRECEDENCE, Atomic, Derived, evaluate
from truthtable.operators import AND, NOT
from truthtable.parser import PostfixProgram, parse, tokenize
from truthtable.tokens import OpenParenthesis, Variable


def final_text(expression):
    program, variables = parse(expression)
    return evaluate(program, {v: False for v in variables})[-1].text


#####################################
# Independent recursive descent model
#####################################

BINARY = {
    "<->": (1, "left", lambda a, b: a == b),
    "->": (2, "right", lambda a, b: not a or b),
    "|": (3, "left", lambda a, b: a or b),
    "^": (3, "left", lambda a, b: a != b),
    "\\": (3, "left", lambda a, b: not (a or b)),
    "&": (4, "left", lambda a, b: a and b),
    "/": (4, "left", lambda a, b: not (a and b)),
}


def direct_evaluate(expression, assignment):
    symbols = [token.value for token in tokenize(expression)]
    pos = 0

    def peek():
        return symbols[pos] if pos < len(symbols) else None

    def take():
        nonlocal pos
        pos += 1
        return symbols[pos - 1]

    def unary():
        symbol = take()
        if symbol == "!":
            return not unary()
        if symbol == "(":
            value = binary(0)
            assert take() == ")"
            return value
        return assignment[symbol]

    def binary(min_precedence):
        lhs = unary()
        while peek() in BINARY and BINARY[peek()][0] >= min_precedence:
            precedence, associativity, fn = BINARY[take()]
            rhs = binary(precedence + 1 if associativity == "left" else precedence)
            lhs = fn(lhs, rhs)
        return lhs

    result = binary(0)
    assert pos == len(symbols)
    return result


EXPRESSIONS = [
    "A",
    "!A",
    "A & B",
    "A / B",
    "A \\ B",
    "A ^ B ^ C",
    "A | B & C",
    "(A | B) & C",
    "A -> B -> C",
    "(A -> B) -> C",
    "A <-> B <-> C",
    "A <-> (B <-> C)",
    "!(A & B) | C",
    "!A & !B -> !(A | B)",
    "A / B / C",
    "(A \\ B) ^ (C -> A)",
    "A -> B <-> !B -> !A",
    "!(!A)",
    "!!!A & B",
    "(A -> B) & (!B | A)",
]


def all_assignments(variables):
    for values in itertools.product([False, True], repeat=len(variables)):
        yield dict(zip(variables, values))


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_matches_direct_evaluation(expression):
    program, variables = parse(expression)
    for assignment in all_assignments(variables):
        trace = evaluate(program, assignment)
        assert trace[-1].value == direct_evaluate(expression, assignment)


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_reconstructed_text_evaluates_the_same(expression):
    program, variables = parse(expression)
    for assignment in all_assignments(variables):
        result = evaluate(program, assignment)[-1]
        reparsed, _ = parse(result.text)
        assert evaluate(reparsed, assignment)[-1].value == result.value


#########################
# Minimal parenthesizing
#########################


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("A -> B -> C", "A -> (B -> C)"),
        ("A -> B -> C -> D", "A -> (B -> (C -> D))"),
        ("(A -> B) -> C", "(A -> B) -> C"),
        ("A & B & C", "A & B & C"),
        ("(A & B) & C", "A & B & C"),
        ("A | B & C", "A | B & C"),
        ("(A | B) & C", "(A | B) & C"),
        ("A & (B | C)", "A & (B | C)"),
        ("!(A & B)", "!(A & B)"),
        ("!(!A)", "!!A"),
        ("!A & B", "!A & B"),
        ("((A))", "A"),
        ("A <-> B -> C", "A <-> B -> C"),
        ("(A <-> B) -> C", "(A <-> B) -> C"),
    ],
)
def test_reconstruction(expression, expected):
    assert final_text(expression) == expected


def test_full_scenario():
    program, variables = parse("(A -> B) & (!B | A)")
    assert variables == ["A", "B"]
    results = {}
    for a, b in itertools.product([False, True], repeat=2):
        trace = evaluate(program, {"A": a, "B": b})
        results[(int(a), int(b))] = int(trace[-1].value)
    assert results == {(0, 0): 1, (0, 1): 0, (1, 0): 0, (1, 1): 1}


def test_trace_order():
    program, _ = parse("(A -> B) & (!B | A)")
    trace = evaluate(program, {"A": True, "B": False})
    assert [step.text for step in trace] == [
        "A",
        "B",
        "A -> B",
        "!B",
        "!B | A",
        "(A -> B) & (!B | A)",
    ]
    assert [step.value for step in trace] == [True, False, False, True, True, False]
    assert isinstance(trace[0], Atomic) and trace[0].precedence == ATOMIC_PRECEDENCE
    assert all(isinstance(step, Derived) for step in trace[2:])


def test_trace_follows_assignment_order():
    program, _ = parse("A & B")
    trace = evaluate(program, {"B": True, "A": True})
    assert [step.text for step in trace[:2]] == ["B", "A"]


def test_evaluations_do_not_share_state():
    program, _ = parse("A & B")
    first = evaluate(program, {"A": True, "B": True})
    second = evaluate(program, {"A": False, "B": True})
    assert first[-1].value is True
    assert second[-1].value is False
    assert len(first) == len(second) == 3


def test_derived_records_operator():
    step = Derived(AND, [Atomic("A", True), Derived(NOT, [Atomic("B", False)])])
    assert step.text == "A & !B"
    assert step.value is True
    assert step.precedence == AND.precedence


##########
# Errors #
##########


def test_missing_operand():
    program, variables = parse("A &")
    with pytest.raises(InsufficientOperands):
        evaluate(program, {v: True for v in variables})


def test_unknown_variable():
    program, _ = parse("A & C")
    with pytest.raises(UnknownVariable) as exc_info:
        evaluate(program, {"A": True, "B": True})
    assert exc_info.value.token == Variable("C")
    assert exc_info.value.kind == "UnknownVariable"


def test_leftover_operands():
    program, variables = parse("A B")
    with pytest.raises(MalformedResult):
        evaluate(program, {v: True for v in variables})


def test_empty_program():
    with pytest.raises(MalformedResult):
        evaluate(PostfixProgram([]), {})


def test_parenthesis_in_program():
    with pytest.raises(UnexpectedToken):
        evaluate(PostfixProgram([Variable("A"), OpenParenthesis("(")]), {"A": True})


def test_same_precedence_right_operand_is_not_wrapped():
    # Under a left associative operator an equal precedence right operand keeps
    # no parentheses, even when that changes the grouping on a re-parse
    program, _ = parse("A / (B & C)")
    assignment = {"A": False, "B": False, "C": False}
    result = evaluate(program, assignment)[-1]
    assert result.text == "A / B & C"
    assert result.value is True

    reparsed, _ = parse(result.text)
    assert evaluate(reparsed, assignment)[-1].value is False
