# Nodes.py
"""""
AST node types for the calculator.

Every node can rebuild its source text (`raw`) and compute its exact
Decimal value (`result`). Values are computed on every access, so
evaluating a node twice walks its subtree twice.

Binary chains are stored flat, exactly as the grammar read them; operator
precedence is only resolved when a BinaryExpr is evaluated.
"""""

from decimal import Decimal

from . import ScientificEngine
from . import error as E


# Operator tiers, highest precedence first
EXPONENT_OPERATORS = ("**",)
MULTIPLICATIVE_OPERATORS = ("%", "*", "/")
ADDITIVE_OPERATORS = ("+", "-")
BINARY_OPERATORS = EXPONENT_OPERATORS + MULTIPLICATIVE_OPERATORS + ADDITIVE_OPERATORS

UNARY_OPERATORS = ("+", "-")

CONSTANT_NAMES = tuple(ScientificEngine.CONSTANTS)
FUNCTION_NAMES = tuple(ScientificEngine.FUNCTIONS)


class Node:
    """Base class of all AST nodes."""
    children = None

    @property
    def type(self):
        return type(self).__name__

    @property
    def raw(self):
        raise NotImplementedError

    @property
    def result(self):
        raise NotImplementedError

    def _print_line(self, indent, type_name, raw=None, result=None):
        line = f"{indent}{type_name}"
        if raw is not None:
            line += f" -> {raw}"
        if result is not None:
            line += f" => {result:.5f}"
        return line

    def get_print_tree(self, indent="", print_raw=True, print_result=True):
        """Render this subtree as indented lines (debugging aid only)."""
        lines = [self._print_line(
            indent,
            self.type,
            self.raw if print_raw else None,
            self.result if print_result else None,
        )]
        for child in self.children or ():
            if isinstance(child, str):
                lines.append(self._print_line(indent + "  ", "Operator", child if print_raw else None))
            else:
                lines.extend(child.get_print_tree(indent + "  ", print_raw, print_result))
        return lines

    def __repr__(self):
        return f"{self.type}({self.raw!r})"


class DecimalAtomic(Node):
    """Numeric literal, or a value computed while resolving a BinaryExpr."""
    def __init__(self, source):
        self.source = source

    @property
    def raw(self):
        if isinstance(self.source, Decimal):
            return ScientificEngine.to_string(self.source)
        return self.source

    @property
    def result(self):
        if isinstance(self.source, Decimal):
            return self.source
        # '_' only groups digits; '%' means hundredths
        literal = self.source.replace("_", "")
        if "%" in literal:
            return Decimal(literal.replace("%", "")) / 100
        return Decimal(literal)


class ConstantAtomic(Node):
    def __init__(self, raw):
        if raw not in CONSTANT_NAMES:
            raise E.SymbolError(f"Constant {raw} not exists", code="3012")
        self.constant = raw

    @property
    def raw(self):
        return self.constant

    @property
    def result(self):
        return ScientificEngine.CONSTANTS[self.constant]


class FuncCall(Node):
    def __init__(self, function_name, args):
        if function_name not in FUNCTION_NAMES:
            raise E.SymbolError(f"Function {function_name} not exists", code="3013")
        self.function_name = function_name
        self.args = list(args)
        self.children = self.args

    @property
    def raw(self):
        return f"{self.function_name}({','.join(arg.raw for arg in self.args)})"

    @property
    def result(self):
        function = ScientificEngine.FUNCTIONS[self.function_name]
        return function(*(arg.result for arg in self.args))


class Unary(Node):
    """Operand with one or more leading '+'/'-' signs."""
    def __init__(self, operators, node):
        self.operators = list(operators)
        self.node = node
        self.children = ["".join(self.operators), node]

    @property
    def raw(self):
        return "".join(self.operators) + self.node.raw

    @property
    def negative(self):
        return self.operators.count("-") % 2 == 1

    @property
    def result(self):
        if self.negative:
            # 0 - x rather than -x, so that -0 never shows up
            return Decimal(0) - self.node.result
        return self.node.result


class Parentheses(Node):
    def __init__(self, node):
        self.node = node
        self.children = [node]

    @property
    def raw(self):
        return f"({self.node.raw})"

    @property
    def result(self):
        return self.node.result


class BinaryExpr(Node):
    """A flat chain: first (operator operand)*, kept in source order."""
    def __init__(self, first, rest):
        self.first = first
        self.rest = [(operator, node) for operator, node in rest]
        self.children = [first]
        for operator, node in self.rest:
            self.children.extend((operator, node))

    @property
    def raw(self):
        text = self.first.raw
        for operator, node in self.rest:
            text += operator + node.raw
        return text

    def calculate(self, left, operator, right):
        """Apply one binary operator and wrap the value as a node."""
        if operator == "+":
            value = left.result + right.result
        elif operator == "-":
            value = left.result - right.result
        elif operator == "*":
            value = left.result * right.result
        elif operator == "/":
            value = left.result / right.result
        elif operator == "%":
            value = left.result % right.result
        elif operator == "**":
            if isinstance(left, Unary):
                # -2 ** 2 is -(2 ** 2): the power binds tighter than the sign
                value = Unary(left.operators, DecimalAtomic(left.node.result ** right.result)).result
            else:
                value = left.result ** right.result
        else:
            raise E.CalculationError(f"Unknown operator: {operator}", code="3011")
        return DecimalAtomic(value)

    @property
    def result(self):
        node_stack = [self.first]
        operator_stack = []

        def pop_exponent_calc():
            # Right to left, so a ** b ** c becomes a ** (b ** c)
            while operator_stack and operator_stack[-1] in EXPONENT_OPERATORS:
                operator = operator_stack.pop()
                right = node_stack.pop()
                left = node_stack.pop()
                node_stack.append(self.calculate(left, operator, right))

        def pop_arithmetic_calc(operators):
            # Take the run of same-tier operators on top, then fold it left to right
            run_nodes = []
            run_operators = []
            while operator_stack and operator_stack[-1] in operators:
                if not run_nodes:
                    run_nodes.append(node_stack.pop())
                run_operators.append(operator_stack.pop())
                run_nodes.append(node_stack.pop())
            if run_nodes:
                left = run_nodes.pop()
                while run_operators:
                    left = self.calculate(left, run_operators.pop(), run_nodes.pop())
                node_stack.append(left)

        for operator, node in self.rest:
            if operator in MULTIPLICATIVE_OPERATORS:
                pop_exponent_calc()
            elif operator in ADDITIVE_OPERATORS:
                pop_exponent_calc()
                pop_arithmetic_calc(MULTIPLICATIVE_OPERATORS)
            operator_stack.append(operator)
            node_stack.append(node)

        pop_exponent_calc()
        pop_arithmetic_calc(MULTIPLICATIVE_OPERATORS)
        pop_arithmetic_calc(ADDITIVE_OPERATORS)
        return node_stack.pop().result
