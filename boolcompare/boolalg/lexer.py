# text -> token stream
#
# normalize() folds unicode apostrophes and whitespace
# scan() does the left to right character scan
# insert_implicit_ands() turns adjacency like AB, (A)(B), A!B into explicit AND

import re

from .tokens import *
from .errors import ExprSyntaxError

UNICODE_APOSTROPHES = re.compile('[\u2018\u2019\u02bc]')
WHITESPACE = re.compile(r'\s+')

SINGLE_CHAR_TOKENS = {
    '(': LParen(),
    ')': RParen(),
    '+': OpToken(Operator.OR),
    '|': OpToken(Operator.OR),
    '*': OpToken(Operator.AND),
    '\u00b7': OpToken(Operator.AND), # middle dot
    '.': OpToken(Operator.AND),
    '^': OpToken(Operator.XOR),
    '!': OpToken(Operator.NOT, prefix=True),
    '~': OpToken(Operator.NOT, prefix=True),
    "'": PostfixNot(),
    '1': ConstToken(True),
    '0': ConstToken(False)
}

def normalize(text):
    text = UNICODE_APOSTROPHES.sub("'", text)
    text = WHITESPACE.sub(' ', text)
    return text.strip()

def is_letter(c):
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z')

def is_varchar(c):
    return is_letter(c) or ('0' <= c <= '9') or c == '_'

def scan(src):
    tokens = []

    i = 0
    while i < len(src):
        c = src[i]

        if c == ' ':
            i += 1
        elif c in SINGLE_CHAR_TOKENS:
            tokens.append(SINGLE_CHAR_TOKENS[c])
            i += 1
        elif is_letter(c):
            j = i + 1
            while j < len(src) and is_varchar(src[j]):
                j += 1
            tokens.append(VarToken(src[i:j]))
            i = j
        else:
            raise ExprSyntaxError(i+1, c)

    return tokens

def insert_implicit_ands(tokens):
    result = []
    for (i, tok) in enumerate(tokens):
        result.append(tok)
        if i+1 < len(tokens) and is_value_ending(tok) and is_value_starting(tokens[i+1]):
            result.append(OpToken(Operator.AND))
    return result

def tokenize(text):
    return insert_implicit_ands(scan(normalize(text)))
