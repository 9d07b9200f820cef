# tests/test_scientific_engine.py
from decimal import Decimal, InvalidOperation, localcontext

import pytest

from DecimalCalc import ScientificEngine as SE


@pytest.mark.parametrize("value, expected", [
    (Decimal("1.2E+5"), "120000"),
    (Decimal("0.000012"), "0.000012"),
    (Decimal("10.50"), "10.5"),
    (Decimal("0.0"), "0"),
    (Decimal("1E+20"), "100000000000000000000"),
    (Decimal("1.122E+52"), "1.122e+52"),
    (Decimal("1E-7"), "1e-7"),
    (Decimal("-0.1"), "-0.1"),
])
def test_to_string(value, expected):
    assert SE.to_string(value) == expected


def test_constants_match_float_values():
    assert str(SE.CONSTANTS["PI"]) == "3.141592653589793"
    assert str(SE.CONSTANTS["E"]) == "2.718281828459045"
    assert str(SE.CONSTANTS["SQRT2"]) == "1.4142135623730951"
    assert str(SE.CONSTANTS["LN2"]) == "0.6931471805599453"


@pytest.mark.parametrize("name, args, expected", [
    ("abs", ["-2.5"], "2.5"),
    ("ceil", ["1.2"], "2"),
    ("floor", ["-1.5"], "-2"),
    ("trunc", ["-1.5"], "-1"),
    ("round", ["2.5"], "3"),
    ("round", ["-2.5"], "-3"),
    ("sign", ["-3"], "-1"),
    ("sign", ["0"], "0"),
    ("mod", ["7", "4"], "3"),
    ("pow", ["2", "10"], "1024"),
    ("div", ["1", "4"], "0.25"),
    ("sub", ["0.3", "0.1"], "0.2"),
    ("mul", ["0.1", "0.1"], "0.01"),
    ("hypot", ["3", "4"], "5"),
    ("sqrt", ["2.25"], "1.5"),
    ("cbrt", ["-8"], "-2"),
    ("exp", ["0"], "1"),
    ("ln", ["1"], "0"),
    ("log", ["100"], "2"),
    ("log2", ["1024"], "10"),
    ("sin", ["0"], "0"),
    ("cos", ["0"], "1"),
    ("atan2", ["0", "1"], "0"),
])
def test_functions(name, args, expected):
    with localcontext() as ctx:
        ctx.prec = 50
        value = SE.FUNCTIONS[name](*(Decimal(arg) for arg in args))
        assert SE.to_string(value) == expected


def test_random_has_requested_digits():
    value = SE.FUNCTIONS["random"](Decimal(3))
    assert Decimal(0) <= value < Decimal(1)
    assert value.as_tuple().exponent == -3


def test_wrong_argument_count_raises_type_error():
    with pytest.raises(TypeError):
        SE.FUNCTIONS["sqrt"](Decimal(1), Decimal(2))


def test_domain_errors_come_from_decimal():
    with pytest.raises(InvalidOperation):
        SE.FUNCTIONS["sqrt"](Decimal(-1))


def test_trigonometry_has_float_precision():
    with localcontext() as ctx:
        ctx.prec = 50
        value = SE.FUNCTIONS["sin"](Decimal(1))
    assert SE.to_string(value) == "0.8414709848078965"
