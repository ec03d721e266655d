import dataclasses
import logging
import random
import re

from .errors import ExprError, TooManyVariablesError
from .lexer import tokenize
from .parser import to_rpn
from .rpn import eval_rpn, rpn_to_ast, rpn_varnames
from .latex import to_latex
from .config import Settings
from .expr import *

logger = logging.getLogger(__name__)

#------------------------------------------------------------------------------
# string -> compiled expression
#------------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class Compiled:
    # the tree and the dicts inside are unhashable
    __hash__ = None

    text: str
    rpn: tuple
    varnames: tuple
    ast: BoolExpr

    def evaluate(self, values):
        return eval_rpn(self.rpn, values)

# eg: ['A10', 'a', 'A2', 'B'] -> ['A2', 'A10', 'a', 'B']
# text runs compare case-insensitively first, then case-sensitively, digit runs
# compare as numbers, the name itself breaks remaining ties (A01 vs A1)
def natural_key(name):
    parts = re.split(r'(\d+)', name)
    key = tuple(int(p) if i%2 else (p.casefold(), p) for (i, p) in enumerate(parts))
    return (key, name)

def sort_varnames(names):
    return sorted(set(names), key=natural_key)

def compile_expr(text):
    tokens = tokenize(text)
    rpn = to_rpn(tokens)
    ast = rpn_to_ast(rpn)
    varnames = sort_varnames(rpn_varnames(rpn))
    logger.debug('compiled %r: %d tokens, %d rpn, vars=%s', text, len(tokens), len(rpn), varnames)
    return Compiled(text, tuple(rpn), tuple(varnames), ast)

#------------------------------------------------------------------------------
# enumerate assignments
#------------------------------------------------------------------------------

# eg: ['A', 'B'] ->
#   {A:False, B:False}
#   {A:False, B:True}
#   {A:True, B:False}
#   {A:True, B:True}
#
# the first variable is the most significant bit of the row index
# no variables still yields one (empty) assignment
def all_assignments(varnames):
    n = len(varnames)
    for i in range(2**n):
        yield {name: bool(i & (1<<(n-pos-1))) for (pos, name) in enumerate(varnames)}

# eg: A/B + /AB over [A, B] -> [1,2]
def to_truth_indices(compiled, varnames=None):
    if varnames == None:
        varnames = compiled.varnames

    result = []
    for (i, values) in enumerate(all_assignments(varnames)):
        if compiled.evaluate(values):
            result.append(i)

    return result

#------------------------------------------------------------------------------
# compare two expressions
#------------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class Row:
    __hash__ = None

    assignment: dict
    result1: bool
    result2: bool

    @property
    def same(self):
        return self.result1 == self.result2

def union_varnames(*compileds):
    return sort_varnames(name for c in compileds for name in c.varnames)

def compare(c1, c2, max_vars=Settings.max_vars):
    varnames = union_varnames(c1, c2)
    if len(varnames) > max_vars:
        raise TooManyVariablesError(len(varnames), max_vars)

    rows = []
    for values in all_assignments(varnames):
        rows.append(Row(values, c1.evaluate(values), c2.evaluate(values)))

    logger.debug('compared over %d variables: %d rows, %d differ',
        len(varnames), len(rows), sum(not r.same for r in rows))
    return rows

def only_differences(rows):
    return [r for r in rows if not r.same]

def render(ast, markup='latex'):
    match markup:
        case 'latex':
            return to_latex(ast)
        case 'text':
            return str(ast)
        case 'python':
            return ast.__py__()
        case _:
            raise ValueError(f'unknown markup: {markup}')

# a front end gets '' rather than an exception, eg: RecursionError on A'''...'
def render_safe(ast, markup='latex'):
    try:
        return render(ast, markup)
    except Exception as e:
        logger.warning('%s rendering failed: %s', markup, type(e).__name__)
        return ''

# everything a front end needs for one pair of inputs
@dataclasses.dataclass(frozen=True)
class Report:
    __hash__ = None

    rows: list
    varnames: list
    error: str = None
    markup1: str = ''
    markup2: str = ''
    only_diff: bool = False

    @property
    def display_rows(self):
        return only_differences(self.rows) if self.only_diff else self.rows

    @property
    def equivalent(self):
        return self.error == None and all(r.same for r in self.rows)

# never raises ExprError: a broken expression gives a message and an empty table
def compare_texts(text1, text2, settings=None):
    if settings == None:
        settings = Settings()

    try:
        c1 = compile_expr(text1)
        c2 = compile_expr(text2)
        rows = compare(c1, c2, settings.max_vars)
    except ExprError as e:
        logger.debug('comparison of %r and %r failed: %s', text1, text2, e)
        return Report([], [], error=str(e), only_diff=settings.only_diff)

    return Report(rows, union_varnames(c1, c2),
        markup1 = render_safe(c1.ast, settings.markup),
        markup2 = render_safe(c2.ast, settings.markup),
        only_diff = settings.only_diff)

#------------------------------------------------------------------------------
# misc
#------------------------------------------------------------------------------

def format_table(rows, varnames):
    lines = []
    varnames = list(varnames)
    lines.append(' '.join(varnames + ['expr1', 'expr2']))
    widths = [len(v) for v in varnames] + [5, 5]
    for r in rows:
        bits = [r.assignment[v] for v in varnames] + [r.result1, r.result2]
        cells = [('1' if b else '0').ljust(w) for (b, w) in zip(bits, widths)]
        lines.append(' '.join(cells) + ' ' + ('ok' if r.same else 'DIFF'))
    return lines

# random expression over varnames with about n_nodes nodes
def generate(n_nodes, varnames, rng=random):
    def leaf():
        if rng.randint(0, 9) == 0:
            return Val(bool(rng.randint(0,1)))
        return Var(rng.choice(varnames))

    expr = leaf()
    n = 1
    while n < n_nodes:
        match rng.choice(['not', 'and', 'or', 'xor']):
            case 'not':
                expr = Not(expr)
                n += 1
            case kind:
                other = generate(rng.randint(1, max(1, (n_nodes-n)//2)), varnames, rng)
                # random side so both left and right nesting get covered
                operands = [expr, other] if rng.randint(0,1) else [other, expr]
                cls = {'and':And, 'or':Or, 'xor':Xor}[kind]
                expr = cls(*operands)
                n += len(other.all_nodes()) + 1

    return expr
