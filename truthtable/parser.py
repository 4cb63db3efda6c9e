import re

from .errors import (
    InvalidCharacter,
    MismatchedParentheses,
    UnexpectedToken,
    UnknownToken,
)
from .frozen import FrozenList
from .operators import Associativity
from .tokens import (
    DEFAULT_TOKENS,
    CloseParenthesis,
    IToken,
    OpenParenthesis,
    OperatorToken,
    Variable,
)

# Shunting yard over the logical operator catalog
# Tokenizing happens once per expression and produces a postfix program that
# can be evaluated for any number of assignments


class PostfixProgram(FrozenList):
    pass


def normalize(expression: str):
    """
    Strips whitespace and removes "!!" pairs in a single left to right pass
    """
    return re.sub(r"\s+", "", expression).replace("!!", "")


def extract_variables(tokens):
    return sorted({token.value for token in tokens if isinstance(token, Variable)})


class Parser:
    def __init__(self, tokens=None):
        tokens = tokens or DEFAULT_TOKENS
        for token in tokens:
            if not issubclass(token, IToken):
                raise TypeError(f"{token!r} is not a token")
        self.tokens = tokens

    @staticmethod
    def should_pop_op(stack, op):
        if not stack:
            return False

        top = stack[-1]

        if not isinstance(top, OperatorToken):
            return False

        top_op = top.operator
        if top_op.precedence > op.precedence:
            return True
        return (
            top_op.precedence == op.precedence
            and top_op.associativity == Associativity.LEFT
        )

    def tokenize(self, expression):
        string = normalize(expression)
        pointer = 0
        while string:
            for token in self.tokens:
                if m := token.match(string):
                    v, l = m
                    yield token(v, pointer, pointer + l)
                    pointer += l
                    string = string[l:]
                    break
            else:
                if string[0].isalpha():
                    raise InvalidCharacter(
                        f"Invalid character: {string[0]!r}. Variables must be uppercase letters",
                        pointer,
                        pointer + 1,
                    )
                raise UnknownToken(
                    f"Unknown token starting with {string[0]!r}", pointer, pointer + 1
                )

    def parse_to_rpn(self, tokens):
        output = []
        operator_stack = []

        for token in tokens:
            if isinstance(token, Variable):
                output.append(token)
            elif isinstance(token, OperatorToken):
                op = token.operator
                if op is None:
                    raise UnexpectedToken(
                        f"Unknown operator {token.value!r}", token.start, token.end
                    )
                while self.should_pop_op(operator_stack, op):
                    output.append(operator_stack.pop())
                operator_stack.append(token)
            elif isinstance(token, OpenParenthesis):
                operator_stack.append(token)
            elif isinstance(token, CloseParenthesis):
                while operator_stack and not isinstance(
                    operator_stack[-1], OpenParenthesis
                ):
                    output.append(operator_stack.pop())
                if not operator_stack:
                    raise MismatchedParentheses(
                        "No matching '(' found", token.start, token.end
                    )
                # Pop the open parenthesis
                operator_stack.pop()
            else:
                raise UnexpectedToken(
                    f"{token!r} cannot be processed",
                    getattr(token, "start", None),
                    getattr(token, "end", None),
                )

        while operator_stack:
            top = operator_stack.pop()
            if isinstance(top, OpenParenthesis):
                raise MismatchedParentheses("'(' was not closed", top.start, top.end)
            output.append(top)

        return PostfixProgram(output)

    def parse(self, expression):
        """
        Returns the postfix program and the sorted variable names of ``expression``
        """
        tokens = list(self.tokenize(expression))
        return self.parse_to_rpn(tokens), extract_variables(tokens)


parser = Parser()


def tokenize(expression):
    return list(parser.tokenize(expression))


def parse(expression):
    return parser.parse(expression)
