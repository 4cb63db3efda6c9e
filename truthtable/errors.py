class ExpressionError(Exception):
    @property
    def kind(self):
        return self.__class__.__name__


##################
# Parsing errors #
##################


class ParseError(ExpressionError):
    def __init__(self, err, start=None, end=None):
        super().__init__(err, start, end)
        self.err = err
        self.start = start
        self.end = end

    def __str__(self):
        if self.start is None:
            return str(self.err)
        return f"@[{self.start}, {self.end}]: {self.err}"


class InvalidCharacter(ParseError):
    pass


class UnknownToken(ParseError):
    pass


class UnexpectedToken(ParseError):
    pass


class MismatchedParentheses(ParseError):
    pass


#####################
# Evaluation errors #
#####################


class EvaluationError(ExpressionError):
    def __init__(self, err, token=None):
        super().__init__(err, token)
        self.err = err
        self.token = token

    def __str__(self):
        return str(self.err)


class UnknownVariable(EvaluationError):
    pass


# The next two mean the postfix program was not produced by the parser


class InsufficientOperands(EvaluationError):
    pass


class MalformedResult(EvaluationError):
    pass


class TooManyVariables(ExpressionError):
    def __init__(self, variables, limit):
        super().__init__(variables, limit)
        self.variables = variables
        self.limit = limit

    def __str__(self):
        return f"Expression uses {len(self.variables)} variables, the limit is {self.limit}"
