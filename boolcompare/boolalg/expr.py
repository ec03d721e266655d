# expression tree, built once from RPN (see rpn.rpn_to_ast) and used for display
#
# conventions:
# trees are never mutated after construction, there is no sharing between trees
# evaluation of the hot path goes through rpn.eval_rpn(), not through .evaluate()
#
# rendering:
#   str()     input language with minimal parentheses, re-parses to the same function
#   __py__()  python syntax
#   latex.to_latex() typeset markup

from .tokens import Operator
from .errors import UndefinedVariableError

LEAF_PRECEDENCE = 5

class BoolExpr(object):
    precedence = LEAF_PRECEDENCE

    def __init__(self):
        self.children = []

    def varnames(self):
        result = set()
        for c in self.children:
            result = result.union(c.varnames())
        return result

    def all_nodes(self):
        return sum([c.all_nodes() for c in self.children], [self])

    def is_leaf(self):
        return not self.children

    def evaluate(self, values):
        pass

    # wrap in parens if this node binds looser than its surroundings
    def str_in(self, parent_prec):
        s = str(self)
        return f'({s})' if self.precedence < parent_prec else s

class Var(BoolExpr):
    def __init__(self, name):
        super().__init__()
        assert type(name) == str
        self.name = name

    def varnames(self):
        return {self.name}

    def evaluate(self, values):
        if not self.name in values:
            raise UndefinedVariableError(self.name)
        return bool(values[self.name])

    def __eq__(self, other):
        return type(other) == Var and self.name == other.name

    def __repr__(self):
        return f'Var("{self.name}")'

    def __py__(self):
        return self.name

    def __str__(self):
        return self.name

class Val(BoolExpr):
    def __init__(self, value):
        super().__init__()
        assert type(value) == bool
        self.value = value

    def varnames(self):
        return set()

    def evaluate(self, values):
        return self.value

    def __eq__(self, other):
        return type(other) == Val and self.value == other.value

    def __repr__(self):
        return f'Val({self.value})'

    def __py__(self):
        return str(self.value)

    def __str__(self):
        return {True:'1', False:'0'}[self.value]

class Not(BoolExpr):
    precedence = Operator.NOT.precedence

    def __init__(self, child):
        super().__init__()
        assert isinstance(child, BoolExpr)
        self.children = [child]

    @property
    def child(self):
        return self.children[0]

    def evaluate(self, values):
        return not self.child.evaluate(values)

    def __eq__(self, other):
        return type(other) == Not and self.child == other.child

    def __repr__(self):
        return 'Not(' + repr(self.child) + ')'

    def __py__(self):
        return f'not {self.child.__py__()}' if self.child.is_leaf() else f'not ({self.child.__py__()})'

    # postfix form: A' and (A+B)', stacked as A''
    def __str__(self):
        if self.child.is_leaf() or isinstance(self.child, Not):
            return f"{self.child}'"
        return f"({self.child})'"

class BinaryOp(BoolExpr):
    kind = None
    symbol = None
    py_symbol = None

    def __init__(self, left, right):
        super().__init__()
        assert isinstance(left, BoolExpr) and isinstance(right, BoolExpr)
        self.children = [left, right]
        self.precedence = self.kind.precedence

    @property
    def left(self):
        return self.children[0]

    @property
    def right(self):
        return self.children[1]

    def evaluate(self, values):
        return self.apply(self.left.evaluate(values), self.right.evaluate(values))

    def __eq__(self, other):
        return type(other) == type(self) and self.children == other.children

    def __repr__(self):
        return f'{type(self).__name__}({self.left!r},{self.right!r})'

    def __py__(self):
        operands = [c.__py__() if c.is_leaf() else f'({c.__py__()})' for c in self.children]
        return f' {self.py_symbol} '.join(operands)

    def __str__(self):
        return self.left.str_in(self.precedence) + self.symbol + self.right.str_in(self.precedence)

class And(BinaryOp):
    kind = Operator.AND
    symbol = '*'
    py_symbol = 'and'

    @staticmethod
    def apply(a, b):
        return a and b

class Or(BinaryOp):
    kind = Operator.OR
    symbol = '+'
    py_symbol = 'or'

    @staticmethod
    def apply(a, b):
        return a or b

class Xor(BinaryOp):
    kind = Operator.XOR
    symbol = '^'
    py_symbol = '^'

    @staticmethod
    def apply(a, b):
        return a != b

BINARY_NODES = {cls.kind: cls for cls in [And, Or, Xor]}
