# tests/test_nodes.py
from decimal import Decimal

import pytest

from DecimalCalc import Nodes
from DecimalCalc import error as E


def D(text):
    return Nodes.DecimalAtomic(text)


class CountingNode(Nodes.Node):
    """Leaf that counts how often it is evaluated."""
    def __init__(self):
        self.evaluations = 0

    @property
    def raw(self):
        return "n"

    @property
    def result(self):
        self.evaluations += 1
        return Decimal(1)


def test_decimal_atomic_from_literal():
    assert D("1_000.5").result == Decimal("1000.5")
    assert D("30%").result == Decimal("0.3")
    assert D("1.30%").result == Decimal("0.013")
    assert D("1.2e-5").result == Decimal("0.000012")
    # the percent sign scales the whole literal, exponent included
    assert D("1%e2").result == Decimal(1)


def test_decimal_atomic_from_value():
    node = Nodes.DecimalAtomic(Decimal("1.5E+3"))
    assert node.result == Decimal("1500")
    assert node.raw == "1500"


def test_constant_allow_list():
    assert Nodes.ConstantAtomic("PI").raw == "PI"
    with pytest.raises(E.SymbolError) as excinfo:
        Nodes.ConstantAtomic("TAU")
    assert excinfo.value.code == "3012"


def test_function_allow_list():
    node = Nodes.FuncCall("max", [D("1"), D("3"), D("2")])
    assert node.result == Decimal(3)
    assert node.raw == "max(1,3,2)"
    with pytest.raises(E.SymbolError) as excinfo:
        Nodes.FuncCall("eval", [D("1")])
    assert excinfo.value.code == "3013"


@pytest.mark.parametrize("operators, expected", [
    (["-"], Decimal(-2)),
    (["-", "-"], Decimal(2)),
    (["+", "-", "+"], Decimal(-2)),
    (["+", "+"], Decimal(2)),
])
def test_unary_sign_folding(operators, expected):
    node = Nodes.Unary(operators, D("2"))
    assert node.result == expected
    assert node.raw == "".join(operators) + "2"


def test_unary_never_yields_negative_zero():
    assert str(Nodes.Unary(["-"], D("0")).result) == "0"


def test_parentheses_pass_through():
    node = Nodes.Parentheses(Nodes.Unary(["-"], D("2")))
    assert node.raw == "(-2)"
    assert node.result == Decimal(-2)


def test_result_is_not_cached():
    leaf = CountingNode()
    node = Nodes.Parentheses(leaf)
    node.result
    node.result
    assert leaf.evaluations == 2


@pytest.mark.parametrize("first, rest, expected", [
    ("2", [("*", "3"), ("+", "4")], Decimal(10)),
    ("2", [("+", "3"), ("*", "4")], Decimal(14)),
    ("2", [("**", "3"), ("**", "2")], Decimal(512)),
    ("8", [("-", "3"), ("-", "2")], Decimal(3)),
    ("8", [("/", "4"), ("/", "2")], Decimal(1)),
    ("7", [("%", "4"), ("*", "2")], Decimal(6)),
    ("1", [("+", "2"), ("**", "2"), ("*", "3"), ("-", "4")], Decimal(9)),
])
def test_precedence_resolver(first, rest, expected):
    node = Nodes.BinaryExpr(D(first), [(operator, D(text)) for operator, text in rest])
    assert node.result == expected


def test_power_of_signed_base():
    signed = Nodes.BinaryExpr(Nodes.Unary(["-"], D("2")), [("**", D("2"))])
    assert signed.result == Decimal(-4)
    wrapped = Nodes.BinaryExpr(Nodes.Parentheses(Nodes.Unary(["-"], D("2"))), [("**", D("2"))])
    assert wrapped.result == Decimal(4)


def test_binary_children_keep_order():
    node = Nodes.BinaryExpr(D("1"), [("+", D("2")), ("*", D("3"))])
    assert [child if isinstance(child, str) else child.raw for child in node.children] == ["1", "+", "2", "*", "3"]


def test_print_tree():
    node = Nodes.BinaryExpr(D("1"), [("+", Nodes.Unary(["-"], D("2")))])
    assert node.get_print_tree() == [
        "BinaryExpr -> 1+-2 => -1.00000",
        "  DecimalAtomic -> 1 => 1.00000",
        "  Operator -> +",
        "  Unary -> -2 => -2.00000",
        "    Operator -> -",
        "    DecimalAtomic -> 2 => 2.00000",
    ]


def test_print_tree_without_values():
    node = Nodes.FuncCall("add", [D("1"), D("2")])
    assert node.get_print_tree(print_result=False) == [
        "FuncCall -> add(1,2)",
        "  DecimalAtomic -> 1",
        "  DecimalAtomic -> 2",
    ]
    assert node.get_print_tree(print_raw=False, print_result=False) == [
        "FuncCall",
        "  DecimalAtomic",
        "  DecimalAtomic",
    ]
