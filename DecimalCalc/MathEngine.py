# MathEngine.py
"""""
Core calculation engine for the Decimal Text Calculator.

Pipeline
--------
1) Scanner: trims trailing '=' / whitespace and drops chained history up to
   the last '=' (e.g. '1+1=2+3=5+5=' only keeps '5+5').
2) Parser (AST): Grammar.parse builds the node tree with pyparsing.
3) Recovery: when the text does not parse, skip one word and try the rest
   again until a formula is found or the text runs out.
4) Evaluator: Node.result computes the exact Decimal value; the result is
   rendered with ScientificEngine.to_string.
"""""

import re
import traceback
from decimal import getcontext, DivisionByZero, InvalidOperation, Overflow

from . import config_manager as config_manager
from . import Grammar
from . import ScientificEngine
from . import error as E

# Debug toggle for optional prints in this module
debug = config_manager.load_setting_value("debug")

# same spaces as Grammar.WHITESPACE
TRAILING_EQUALS = re.compile(r"[=\s\ufeff]+$")
NON_WORD = re.compile(r"\W", re.ASCII)
LEADING_SPACE = re.compile(r"[\s\ufeff]*")


class CalculateResult:
    """Outcome of a successful calculate() call."""
    def __init__(self, skip, ast, decimal, result):
        self.skip = skip          # characters dropped in front of the formula
        self.ast = ast
        self.decimal = decimal
        self.result = result

    def __repr__(self):
        return f"CalculateResult(skip={self.skip}, result={self.result!r})"


# -----------------------------
# Scanner helpers
# -----------------------------

def skip_equal(text):
    """Number of characters up to and including the last '='."""
    return text.rfind("=") + 1


def skip_word(text):
    """Length of the leading word, its first separator and any space after it.

    Without a non-word character the whole text counts as one word.
    """
    match = NON_WORD.search(text)
    if match is None:
        return len(text)
    end = match.end()
    return LEADING_SPACE.match(text, end).end()


def highlight_skips(text, skipped_records):
    """Line of '^' under every position where a retry started."""
    return "".join("^" if index in skipped_records else " " for index in range(len(text)))


def error_code(err):
    """Map an evaluation failure onto the ERROR_MESSAGES codes."""
    if isinstance(err, E.SyntaxError):
        return "3100"
    if isinstance(err, E.MathError):
        return err.code
    if isinstance(err, (DivisionByZero, ZeroDivisionError)):
        return "3003"
    if isinstance(err, (Overflow, OverflowError)):
        return "3026"
    if isinstance(err, (InvalidOperation, ValueError)):
        return "3027"
    if isinstance(err, TypeError):
        return "3028"
    return "9999"


def calculation_error(problem, skipped_records, err):
    trace = "".join(traceback.format_exception(type(err), err, err.__traceback__))
    message = "\n".join(["CalculateError:", problem, highlight_skips(problem, skipped_records), trace])
    return E.CalculationError(message, code=error_code(err), equation=problem)


# -----------------------------
# Recovery scanner
# -----------------------------

def scan(text, skipped, problem):
    """Find and evaluate the first parseable suffix of text.

    `skipped` is the offset of text inside `problem` (the untouched input),
    used for the returned skip count and the caret line of failures.
    """
    skipped_records = []
    while True:
        try:
            ast = Grammar.parse(text)
            decimal = ast.result
            return CalculateResult(skipped, ast, decimal, ScientificEngine.to_string(decimal))

        except E.SyntaxError as e:
            if not text:
                raise calculation_error(problem, skipped_records, e) from e
            step = skip_word(text)
            if debug == True:
                print(f"Skipping {text[:step]!r} at {skipped}")
            skipped += step
            text = text[step:]
            skipped_records.append(skipped)

        except Exception as e:
            raise calculation_error(problem, skipped_records, e) from e


# -----------------------------
# Public entry point
# -----------------------------

def calculate(problem):
    """Main API: trim → drop '=' history → scan/parse → evaluate → render."""
    # decimal contexts are per thread, so set precision on every call
    getcontext().prec = config_manager.load_setting_value("precision")

    text = TRAILING_EQUALS.sub("", problem)
    skip = skip_equal(text)
    result = scan(text[skip:], skip, problem)

    if debug == True:
        print("Final AST:")
        print("\n".join(result.ast.get_print_tree()))

    return result


def test_main():
    """Simple REPL-like runner for manual testing of the engine."""
    print("Enter the problem: ")
    problem = input()
    try:
        result = calculate(problem)
    except E.MathError as e:
        print(f"Error {e.code}: {E.ERROR_MESSAGES.get(e.code, '')}")
        print(e.message)
        return
    print("\n".join(result.ast.get_print_tree()))
    print(f"skip: {result.skip}")
    print(f"= {result.result}")


if __name__ == "__main__":
    # Allow running this module directly for quick CLI tests:
    #   python -m DecimalCalc.MathEngine
    test_main()
