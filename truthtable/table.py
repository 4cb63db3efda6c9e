import itertools
import logging

import pandas as pd

from .config import Settings
from .errors import TooManyVariables
from .evaluator import evaluate
from .parser import parse

logger = logging.getLogger(__name__)


def boolean_permutation(length):
    """
    Counter order, most significant variable first: the first row is all False
    """
    return itertools.product([False, True], repeat=length)


def assignments(variables):
    for perm in boolean_permutation(len(variables)):
        yield dict(zip(variables, perm))


def format_value(value, style="digits"):
    if style == "words":
        return str(value)
    return "1" if value else "0"


class TruthTable:
    def __init__(self, expression, settings: Settings = None):
        self.settings = settings or Settings()
        self.expression = expression
        self.program, self.variables = parse(expression)
        logger.debug(
            "parsed %r: postfix=%s variables=%s",
            expression,
            [token.value for token in self.program],
            self.variables,
        )
        if len(self.variables) > self.settings.max_variables:
            raise TooManyVariables(self.variables, self.settings.max_variables)
        self._traces = None

    def traces(self):
        if self._traces is None:
            self._traces = [
                evaluate(self.program, assignment)
                for assignment in assignments(self.variables)
            ]
            logger.debug("evaluated %d rows for %r", len(self._traces), self.expression)
        return self._traces

    @property
    def headers(self):
        return [step.text for step in self.traces()[0]]

    @property
    def rows(self):
        return [[step.value for step in trace] for trace in self.traces()]

    def _columns(self):
        headers, rows = self.headers, self.rows
        width = len(self.variables)
        if not self.settings.show_steps and len(headers) > width:
            headers = [*headers[:width], headers[-1]]
            rows = [[*row[:width], row[-1]] for row in rows]
        return headers, rows

    def to_dataframe(self):
        """
        Returns pandas dataframe, one column per derivation step

        Headers can repeat when a sub-expression occurs more than once
        """
        headers, rows = self._columns()
        return pd.DataFrame(rows, columns=headers)

    def to_string(self):
        style = self.settings.boolean_style
        headers, rows = self._columns()
        cells = [[format_value(v, style) for v in row] for row in rows]
        return pd.DataFrame(cells, columns=headers).to_string(index=False)


def generate_truth_table(expression, settings: Settings = None):
    return TruthTable(expression, settings).to_dataframe()


def print_truth_table(expression, settings: Settings = None):
    print(TruthTable(expression, settings).to_string())
