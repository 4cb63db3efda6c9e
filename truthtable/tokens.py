from .operators import longest_operator_prefix, lookup_by_symbol

# Utils


def str_match(string: str, m: str):
    if string and string.startswith(m):
        return m, len(m)
    return None


class IToken:
    """
    Base token

    Tokens are value objects, two tokens are equal when they have the same class
    and value. start and end only serve error messages
    """

    m_str = None

    def __init__(self, value, start=None, end=None):
        self.value = value
        self.start = start
        self.end = end

    @classmethod
    def match(cls, string):
        """
        A match function returns (value, length) or None
        """
        if cls.m_str:
            return str_match(string, cls.m_str)
        raise NotImplementedError()

    def __eq__(self, other):
        return self.__class__ is other.__class__ and self.value == other.value

    def __hash__(self):
        return hash((self.__class__, self.value))

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.value.__repr__()}>"


class Variable(IToken):
    @classmethod
    def match(cls, string):
        if string and string[0].isalpha() and string[0].isupper():
            return string[0], 1
        return None


class OperatorToken(IToken):
    @classmethod
    def match(cls, string):
        if symbol := longest_operator_prefix(string):
            return symbol, len(symbol)
        return None

    @property
    def operator(self):
        return lookup_by_symbol(self.value)


class OpenParenthesis(IToken):
    m_str = "("


class CloseParenthesis(IToken):
    m_str = ")"


# Order matters, letters are claimed before operator symbols
DEFAULT_TOKENS = [Variable, OpenParenthesis, CloseParenthesis, OperatorToken]
