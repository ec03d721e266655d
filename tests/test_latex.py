import random

from boolcompare.boolalg.latex import to_latex
from boolcompare.boolalg.tools import compile_expr, render_safe, generate, sort_varnames, all_assignments, to_truth_indices
from boolcompare.boolalg.expr import *


def latex(text):
    return to_latex(compile_expr(text).ast)


# read the markup back into the input language
def delatex(s):
    s = s.replace(r'\left(', '(').replace(r'\right)', ')')
    s = s.replace(r'\overline{', '!(').replace('}', ')')
    return s.replace(r'\cdot', '*').replace(r'\oplus', '^')


def test_leaves():
    assert latex('A_1') == 'A_1'
    assert latex('1') == '1'
    assert latex('0') == '0'


def test_symbols():
    assert latex('A*B') == r'A \cdot B'
    assert latex('A+B') == 'A + B'
    assert latex('A^B') == r'A \oplus B'
    assert latex('!A') == r'\overline{A}'
    assert latex("A''") == r'\overline{\overline{A}}'


def test_minimal_parentheses():
    assert latex('A+B*C') == r'A + B \cdot C'
    assert latex('(A+B)*C') == r'\left(A + B\right) \cdot C'
    assert latex('(A*B)+C') == r'A \cdot B + C'
    assert latex('(A+B)^C') == r'\left(A + B\right) \oplus C'
    assert latex('(A^B)C') == r'\left(A \oplus B\right) \cdot C'
    assert latex("(A+B')'") == r'\overline{A + \overline{B}}'
    assert latex('(A+B)(C+D)') == r'\left(A + B\right) \cdot \left(C + D\right)'


def test_parent_precedence_argument():
    ast = compile_expr('A+B').ast
    assert to_latex(ast, 1) == 'A + B'
    assert to_latex(ast, 2) == r'\left(A + B\right)'


def test_safe_rendering():
    assert render_safe(compile_expr('A B').ast) == r'A \cdot B'
    assert render_safe(Not(object.__new__(Var))) == ''
    assert render_safe('A') == ''
    assert render_safe(compile_expr('A').ast, 'mathml') == ''


def test_markup_keeps_the_function():
    rng = random.Random(42)
    for _ in range(300):
        expr = generate(rng.randint(1, 25), list('ABCD'), rng)
        varnames = sort_varnames(expr.varnames())
        c = compile_expr(delatex(to_latex(expr)))
        expected = [i for (i, values) in enumerate(all_assignments(varnames)) if expr.evaluate(values)]
        assert to_truth_indices(c, varnames) == expected
