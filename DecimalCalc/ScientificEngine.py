# ScientificEngine
"""""
Named constants and functions available to the calculator.

Everything takes and returns Decimal. Operations the decimal module has
natively (arithmetic, rounding, sqrt, exp, ln, log10) stay exact or
correctly rounded; derived logarithms and roots are computed with guard
digits and rounded back to the current precision. Trigonometric and
hyperbolic functions go through math on floats, so their results carry
about 16 significant digits whatever the configured precision is.
"""""
import math
import random as _random
from functools import wraps
from decimal import Decimal, getcontext, localcontext, ROUND_CEILING, ROUND_FLOOR, ROUND_DOWN, ROUND_HALF_UP


GUARD_DIGITS = 10


# -----------------------------
# Conversion helpers
# -----------------------------

def from_float(value):
    """Convert a float to Decimal through its shortest repr (no binary tail)."""
    return +Decimal(repr(value))


def to_string(value):
    """Canonical string form of a Decimal.

    Trailing zeros are dropped. Plain notation is used while the adjusted
    exponent lies between -7 and 21, scientific notation ('1.2e+52') outside.
    """
    if not value.is_finite():
        return str(value)
    value = value.normalize()
    exponent = value.adjusted()
    if exponent >= 21 or exponent <= -7:
        return "{:e}".format(value)
    return "{:f}".format(value)


def float_function(function):
    """Wrap a math function so it accepts and returns Decimal.

    The result is only as precise as the float: about 16 significant digits.
    """
    @wraps(function)
    def wrapper(*args):
        return from_float(function(*(float(a) for a in args)))
    return wrapper


def extra_precision(function):
    """Evaluate with guard digits, then round to the caller's precision."""
    @wraps(function)
    def wrapper(*args):
        with localcontext() as ctx:
            ctx.prec += GUARD_DIGITS
            value = function(*args)
        return +value
    return wrapper


# -----------------------------
# Constants
# -----------------------------

CONSTANTS = {
    "E": from_float(math.e),
    "LN2": from_float(math.log(2)),
    "LN10": from_float(math.log(10)),
    "LOG2E": from_float(1 / math.log(2)),
    "LOG10E": from_float(math.log10(math.e)),
    "PI": from_float(math.pi),
    "SQRT1_2": from_float(math.sqrt(0.5)),
    "SQRT2": from_float(math.sqrt(2)),
}


# -----------------------------
# Functions
# -----------------------------

def add(x, y):
    return x + y


def sub(x, y):
    return x - y


def mul(x, y):
    return x * y


def div(x, y):
    return x / y


def mod(x, y):
    return x % y


def power(x, y):
    return x ** y


def absolute(x):
    return abs(x)


def ceil(x):
    return x.to_integral_value(rounding=ROUND_CEILING)


def floor(x):
    return x.to_integral_value(rounding=ROUND_FLOOR)


def trunc(x):
    return x.to_integral_value(rounding=ROUND_DOWN)


def round_half_up(x):
    # 2.5 -> 3 and -2.5 -> -3
    return x.to_integral_value(rounding=ROUND_HALF_UP)


def sign(x):
    if not x:
        return Decimal(0)
    return Decimal(1).copy_sign(x)


def maximum(*args):
    return max(args)


def minimum(*args):
    return min(args)


def sqrt(x):
    return x.sqrt()


@extra_precision
def cbrt(x):
    if not x:
        return x
    root = abs(x) ** (Decimal(1) / 3)
    return root.copy_sign(x)


@extra_precision
def hypot(*args):
    return sum((a * a for a in args), Decimal(0)).sqrt()


def exp(x):
    return x.exp()


def ln(x):
    return x.ln()


def log10(x):
    return x.log10()


@extra_precision
def log(x, base=Decimal(10)):
    """Logarithm of x to the given base (10 when omitted)."""
    if base == 10:
        return x.log10()
    return x.ln() / base.ln()


def log2(x):
    return log(x, Decimal(2))


def random(significant_digits=None):
    """Uniform random Decimal in [0, 1) with the given number of digits."""
    if significant_digits is None:
        digits = getcontext().prec
    else:
        digits = int(significant_digits)
    return Decimal(_random.randrange(10 ** digits)).scaleb(-digits)


FUNCTIONS = {
    "abs": absolute,
    "acos": float_function(math.acos),
    "acosh": float_function(math.acosh),
    "add": add,
    "asin": float_function(math.asin),
    "asinh": float_function(math.asinh),
    "atan": float_function(math.atan),
    "atanh": float_function(math.atanh),
    "atan2": float_function(math.atan2),
    "cbrt": cbrt,
    "ceil": ceil,
    "cos": float_function(math.cos),
    "cosh": float_function(math.cosh),
    "div": div,
    "exp": exp,
    "floor": floor,
    "hypot": hypot,
    "ln": ln,
    "log": log,
    "log2": log2,
    "log10": log10,
    "max": maximum,
    "min": minimum,
    "mod": mod,
    "mul": mul,
    "pow": power,
    "random": random,
    "round": round_half_up,
    "sign": sign,
    "sin": float_function(math.sin),
    "sinh": float_function(math.sinh),
    "sqrt": sqrt,
    "sub": sub,
    "tan": float_function(math.tan),
    "tanh": float_function(math.tanh),
    "trunc": trunc,
}
