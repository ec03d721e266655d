# consumers of the postfix sequence produced by parser.to_rpn()
#
# eval_rpn() runs once per assignment (2^n times per comparison) so it works
# straight off the token list with a bool stack, no tree
#
# rpn_to_ast() runs once per compile and builds the display tree

from .tokens import *
from .expr import Var, Val, Not, BINARY_NODES
from .errors import MalformedExpressionError, UndefinedVariableError

def rpn_varnames(rpn):
    return {tok.name for tok in rpn if isinstance(tok, VarToken)}

def eval_rpn(rpn, values):
    stack = []

    for tok in rpn:
        match tok:
            case ConstToken(value=value):
                stack.append(value)
            case VarToken(name=name):
                if not name in values:
                    raise UndefinedVariableError(name)
                stack.append(bool(values[name]))
            case OpToken(op=Operator.NOT):
                if len(stack) < 1:
                    raise MalformedExpressionError('NOT missing operand')
                stack.append(not stack.pop())
            case OpToken(op=op):
                if len(stack) < 2:
                    raise MalformedExpressionError(f'{op.value} missing operand')
                b = stack.pop()
                a = stack.pop()
                match op:
                    case Operator.AND: stack.append(a and b)
                    case Operator.OR: stack.append(a or b)
                    case Operator.XOR: stack.append(a != b)
            case LParen() | RParen() | PostfixNot():
                raise MalformedExpressionError(f'Unexpected {type(tok).__name__} in postfix sequence')

    if len(stack) != 1:
        raise MalformedExpressionError('Invalid expression')

    return stack[0]

def rpn_to_ast(rpn):
    stack = []

    for tok in rpn:
        match tok:
            case ConstToken(value=value):
                stack.append(Val(value))
            case VarToken(name=name):
                stack.append(Var(name))
            case OpToken(op=Operator.NOT):
                if len(stack) < 1:
                    raise MalformedExpressionError('NOT missing operand')
                stack.append(Not(stack.pop()))
            case OpToken(op=op):
                if len(stack) < 2:
                    raise MalformedExpressionError(f'{op.value} missing operand')
                # second popped is the left operand
                right = stack.pop()
                left = stack.pop()
                stack.append(BINARY_NODES[op](left, right))
            case LParen() | RParen() | PostfixNot():
                raise MalformedExpressionError(f'Unexpected {type(tok).__name__} in postfix sequence')

    if len(stack) != 1:
        raise MalformedExpressionError('Invalid expression')

    return stack[0]
