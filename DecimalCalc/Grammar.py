# Grammar.py
"""""
pyparsing grammar that turns formula text into Nodes.

    expr      -> unaryExpr (binaryOpt unaryExpr)*
    unaryExpr -> unaryOpt* ( '(' expr ')' | funcCall | constant | decimal )
    funcCall  -> funcName '(' [expr (',' expr)*] ')'
    main      -> expr ['=']

Whitespace is allowed between any two tokens. Every character matched by
WHITESPACE (tabs, line breaks, form feeds, NBSP and the other Unicode
spaces) is read as a plain space, the same set the scanner in MathEngine
trims and skips over. Binary chains come out flat (see Nodes.BinaryExpr);
the grammar does not group by precedence.
"""""

import re

from pyparsing import Forward, Group, Literal, Optional, ParseBaseException, Regex, ZeroOrMore, one_of

from . import Nodes
from . import error as E


LPAREN = Literal("(").suppress()
RPAREN = Literal(")").suppress()
COMMA = Literal(",").suppress()
EQUAL = Literal("=").suppress()

DECIMAL_PATTERN = r"([0-9][0-9_]*(\.[0-9][0-9_]*)?|\.[0-9][0-9_]*)%?([eE][-+]?[0-9][0-9_]*)?"

# Python's \s plus the BOM, which JavaScript also counts as a space
WHITESPACE = re.compile(r"[\s\ufeff]")


def _fold_unary(tokens):
    operators, node = list(tokens[0]), tokens[1]
    if operators:
        return Nodes.Unary(operators, node)
    return node


def _flatten_binary(tokens):
    items = list(tokens)
    first, rest = items[0], items[1:]
    if not rest:
        return first
    return Nodes.BinaryExpr(first, zip(rest[0::2], rest[1::2]))


expr = Forward().set_name("expression")

# decimal -> 11_111.11e11
decimal_atomic = Regex(DECIMAL_PATTERN).set_name("decimal")
decimal_atomic.set_parse_action(lambda tokens: Nodes.DecimalAtomic(tokens[0]))

# constant -> PI
constant_atomic = one_of(Nodes.CONSTANT_NAMES).set_name("constant")
constant_atomic.set_parse_action(lambda tokens: Nodes.ConstantAtomic(tokens[0]))

# funcCall -> sin(expr, ...)
function_name = one_of(Nodes.FUNCTION_NAMES).set_name("functionName")
function_call = (function_name + LPAREN + Group(Optional(expr + ZeroOrMore(COMMA + expr))) + RPAREN).set_name("functionCall")
function_call.set_parse_action(lambda tokens: Nodes.FuncCall(tokens[0], list(tokens[1])))

parentheses = (LPAREN + expr + RPAREN).set_name("parentheses")
parentheses.set_parse_action(lambda tokens: Nodes.Parentheses(tokens[0]))

unary_operator = one_of(Nodes.UNARY_OPERATORS).set_name("unaryOperator")
unary_expr = (Group(ZeroOrMore(unary_operator)) + (parentheses | function_call | constant_atomic | decimal_atomic)).set_name("unaryExpression")
unary_expr.set_parse_action(_fold_unary)

binary_operator = one_of(Nodes.BINARY_OPERATORS).set_name("binaryOperator")
binary_expr = (unary_expr + ZeroOrMore(binary_operator + unary_expr)).set_name("binaryExpression")
binary_expr.set_parse_action(_flatten_binary)
expr <<= binary_expr

main = (expr + Optional(EQUAL)).set_name("main")


def parse(text):
    """Parse the whole text into a root Node.

    Raises E.SyntaxError when the grammar cannot match all of it. Unknown
    symbols raise E.SymbolError from the node constructors.
    """
    try:
        # one character for one, so parse positions stay valid for the input
        return main.parse_string(WHITESPACE.sub(" ", text), parse_all=True)[0]
    except ParseBaseException as e:
        raise E.SyntaxError(str(e), code="3011", equation=text) from e
