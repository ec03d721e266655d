# expression tree -> LaTeX markup for an external math renderer (eg: KaTeX)
#
# eg:
#   (A+B')'  ->  \overline{A + \overline{B}}
#   A+B*C    ->  A + B \cdot C
#   (A+B)C   ->  \left(A + B\right) \cdot C

from .expr import *

LATEX_SYMBOLS = {
    And: r'\cdot',
    Or: '+',
    Xor: r'\oplus'
}

def to_latex(node, parent_prec=0):
    match node:
        case Var():
            return node.name
        case Val():
            return '1' if node.value else '0'
        # the bar groups its operand, so the inside starts from precedence 0
        case Not():
            inner = to_latex(node.child, 0)
            return r'\overline{' + inner + '}'
        case BinaryOp():
            p = node.precedence
            left = to_latex(node.left, p)
            right = to_latex(node.right, p)
            result = f'{left} {LATEX_SYMBOLS[type(node)]} {right}'
            if p < parent_prec:
                result = r'\left(' + result + r'\right)'
            return result
        case _:
            raise TypeError(f'cannot render {node!r}')
