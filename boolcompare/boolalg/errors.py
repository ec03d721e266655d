# every failure of the compile-and-compare pipeline is an ExprError
#
# str(e) is the message shown to the user verbatim

class ExprError(ValueError):
    pass

class ExprSyntaxError(ExprError):
    def __init__(self, position:int, char:str):
        self.position = position
        self.char = char
        super().__init__(f"Unexpected character '{char}' at position {position}")

class MismatchedParenthesesError(ExprError):
    def __init__(self):
        super().__init__('Mismatched parentheses')

class MalformedExpressionError(ExprError):
    pass

class UndefinedVariableError(ExprError):
    def __init__(self, name:str):
        self.name = name
        super().__init__(f"Variable '{name}' is undefined")

class TooManyVariablesError(ExprError):
    def __init__(self, count:int, limit:int):
        self.count = count
        self.limit = limit
        super().__init__(f'Too many variables: {count} (limit is {limit}, table would have {2**count} rows)')
