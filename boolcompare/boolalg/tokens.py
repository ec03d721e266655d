# token types produced by the lexer and consumed by the parser/evaluator
#
# the set is closed: every consumer matches on exactly these classes

import dataclasses
import enum

class Operator(enum.Enum):
    AND = 'AND'
    OR = 'OR'
    XOR = 'XOR'
    NOT = 'NOT'

    # higher binds tighter
    @property
    def precedence(self):
        return PRECEDENCE[self]

    @property
    def left_assoc(self):
        return self != Operator.NOT

PRECEDENCE = {
    Operator.NOT: 4,
    Operator.AND: 3,
    Operator.XOR: 2,
    Operator.OR: 1
}

@dataclasses.dataclass(frozen=True)
class VarToken:
    name: str

@dataclasses.dataclass(frozen=True)
class ConstToken:
    value: bool

@dataclasses.dataclass(frozen=True)
class LParen:
    pass

@dataclasses.dataclass(frozen=True)
class RParen:
    pass

@dataclasses.dataclass(frozen=True)
class OpToken:
    op: Operator
    prefix: bool = False

# the apostrophe marker, rewritten to OpToken(NOT) by the parser
@dataclasses.dataclass(frozen=True)
class PostfixNot:
    pass

Token = VarToken | ConstToken | LParen | RParen | OpToken | PostfixNot

def is_value_ending(tok):
    return isinstance(tok, (VarToken, ConstToken, RParen))

def is_value_starting(tok):
    match tok:
        case VarToken() | ConstToken() | LParen():
            return True
        case OpToken(op=Operator.NOT, prefix=True):
            return True
        case _:
            return False
