import argparse
import logging
import sys

from pydantic import ValidationError

from .config import LOG_LEVELS, get_settings
from .errors import ExpressionError
from .table import TruthTable

logger = logging.getLogger(__name__)

INSTRUCTIONS = """\
Enter a logical expression (variables are single uppercase letters):
Operators: ! & | / \\ ^ -> <-> ( )
  ! (NOT), & (AND), | (OR), ^ (XOR)
  / (NAND), \\ (NOR)
  -> (Implies), <-> (Equivalent)
Expression: """


def build_arg_parser():
    p = argparse.ArgumentParser(
        prog="truthtable",
        description="Print the truth table of a propositional logic expression",
    )
    p.add_argument("expression", nargs="?", help="expression, read from stdin when omitted")
    p.add_argument("--words", action="store_true", help="print True/False instead of 1/0")
    p.add_argument(
        "--final-only", action="store_true", help="only print variables and the final result"
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="overrides TRUTHTABLE_LOG_LEVEL",
    )
    return p


def _read_expression(args):
    if args.expression is not None:
        return args.expression
    print(INSTRUCTIONS, end="", flush=True)
    return sys.stdin.readline()


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    overrides = {}
    if args.words:
        overrides["boolean_style"] = "words"
    if args.final_only:
        overrides["show_steps"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        settings = get_settings(**overrides)
    except ValidationError as e:
        print(f"Error: invalid configuration\n{e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    expression = _read_expression(args)
    if not expression.strip():
        print("No expression entered.")
        return 0

    try:
        table = TruthTable(expression.strip(), settings)
        print(table.to_string())
    except ExpressionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("unexpected failure for %r", expression)
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        return 1
    return 0
