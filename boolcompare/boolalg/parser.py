# infix token stream -> postfix (RPN) token sequence
#
# shunting-yard with two stacks:
#   output: operands and operators in evaluation order
#   ops: pending operators and '(' barriers
#
# precedence (see tokens.PRECEDENCE): NOT > AND > XOR > OR
# AND, XOR, OR are left associative, NOT is not (so !!A stacks instead of popping)
#
# every NOT lands in the output as a plain OpToken(NOT), whether it came from
# prefix '!'/'~' or from a postfix apostrophe

from .tokens import *
from .errors import MismatchedParenthesesError

NOT = OpToken(Operator.NOT)

def should_pop(top, incoming):
    if not isinstance(top, OpToken):
        return False
    if incoming.op.left_assoc:
        return top.op.precedence >= incoming.op.precedence
    return top.op.precedence > incoming.op.precedence

def emit(output, tok):
    output.append(OpToken(tok.op))

def to_rpn(tokens):
    output = []
    ops = []

    for tok in tokens:
        match tok:
            case VarToken() | ConstToken():
                output.append(tok)
            # postfix marker applies to the value just shunted, no reordering needed
            case PostfixNot():
                output.append(NOT)
            case OpToken():
                while ops and should_pop(ops[-1], tok):
                    emit(output, ops.pop())
                ops.append(tok)
            case LParen():
                ops.append(tok)
            case RParen():
                while ops and not isinstance(ops[-1], LParen):
                    emit(output, ops.pop())
                if not ops:
                    raise MismatchedParenthesesError()
                ops.pop()

    while ops:
        top = ops.pop()
        if not isinstance(top, OpToken):
            raise MismatchedParenthesesError()
        emit(output, top)

    return output
