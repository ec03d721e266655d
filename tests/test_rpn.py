import pytest

from boolcompare.boolalg.lexer import tokenize
from boolcompare.boolalg.parser import to_rpn
from boolcompare.boolalg.rpn import eval_rpn, rpn_to_ast, rpn_varnames
from boolcompare.boolalg.tokens import *
from boolcompare.boolalg.expr import *
from boolcompare.boolalg.errors import MalformedExpressionError, UndefinedVariableError


def rpn(text):
    return to_rpn(tokenize(text))


def test_operators():
    for (a, b) in [(False, False), (False, True), (True, False), (True, True)]:
        values = {'A': a, 'B': b}
        assert eval_rpn(rpn('A*B'), values) == (a and b)
        assert eval_rpn(rpn('A+B'), values) == (a or b)
        assert eval_rpn(rpn('A^B'), values) == (a != b)
        assert eval_rpn(rpn("A'"), values) == (not a)


def test_constants():
    assert eval_rpn(rpn('1'), {}) == True
    assert eval_rpn(rpn('0'), {}) == False
    assert eval_rpn(rpn("1'+0"), {}) == False
    assert eval_rpn(rpn('10'), {}) == False


def test_stacked_negation():
    for a in [False, True]:
        assert eval_rpn(rpn("A''"), {'A': a}) == a
        assert eval_rpn(rpn("A'''"), {'A': a}) == (not a)
        assert eval_rpn(rpn("!A'"), {'A': a}) == a


def test_undefined_variable():
    with pytest.raises(UndefinedVariableError) as info:
        eval_rpn(rpn('A+B'), {'A': True})
    assert info.value.name == 'B'
    assert str(info.value) == "Variable 'B' is undefined"


@pytest.mark.parametrize('text,message', [
    ('A+', 'OR missing operand'),
    ('*A', 'AND missing operand'),
    ('^', 'XOR missing operand'),
    ('!', 'NOT missing operand'),
    ("A'B", 'Invalid expression'),
    ('', 'Invalid expression'),
    ('   ', 'Invalid expression'),
])
def test_malformed(text, message):
    values = {'A': True, 'B': False}
    with pytest.raises(MalformedExpressionError) as info:
        eval_rpn(rpn(text), values)
    assert str(info.value) == message
    with pytest.raises(MalformedExpressionError) as info:
        rpn_to_ast(rpn(text))
    assert str(info.value) == message


def test_structural_tokens_rejected():
    with pytest.raises(MalformedExpressionError):
        eval_rpn([VarToken('A'), PostfixNot()], {'A': True})
    with pytest.raises(MalformedExpressionError):
        rpn_to_ast([LParen(), VarToken('A'), RParen()])


def test_rpn_to_ast():
    assert rpn_to_ast(rpn('A+B*C')) == Or(Var('A'), And(Var('B'), Var('C')))
    assert rpn_to_ast(rpn('(A+B)*C')) == And(Or(Var('A'), Var('B')), Var('C'))
    assert rpn_to_ast(rpn("A'''")) == Not(Not(Not(Var('A'))))
    assert rpn_to_ast(rpn('A^1')) == Xor(Var('A'), Val(True))
    # second popped is the left operand
    ast = rpn_to_ast(rpn('A+B'))
    assert ast.left == Var('A') and ast.right == Var('B')
    assert rpn_to_ast(rpn('B+A')) != ast
    # constants equal constants only
    assert Val(True) != True and Val(False) != 0
    assert rpn_to_ast(rpn('1')) == Val(True) != Val(False)


def test_tree_and_stack_agree():
    for text in ["(A+B')'", "A'*B", 'A^B^C', '!(A+B C)^C', "A B+A'*C+B C"]:
        r = rpn(text)
        ast = rpn_to_ast(r)
        for i in range(8):
            values = {'A': bool(i&4), 'B': bool(i&2), 'C': bool(i&1)}
            assert ast.evaluate(values) == eval_rpn(r, values)


def test_rpn_varnames():
    assert rpn_varnames(rpn('A B+A1+a')) == {'A', 'B', 'A1', 'a'}
    assert rpn_varnames(rpn('1+0')) == set()
