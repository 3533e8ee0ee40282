class AmbiguityError(RuntimeError):
    """Raised when a call matches several candidates of the same specificity and priority"""

    def __init__(self, candidates, types):
        self.candidates = list(candidates)
        self.types = types
        names = ', '.join(str(c) for c in self.candidates)
        super().__init__(f'cannot choose between {names} for arguments of types {_type_names(types)}')


class NoCandidateError(TypeError):
    """Raised when a call matches no candidate, or every matching candidate returned NotImplemented"""

    def __init__(self, args):
        self.types = tuple(type(a) for a in args)
        super().__init__(f'no candidate accepts arguments of types {_type_names(self.types)}')


def _type_names(types):
    return '(' + ', '.join(t.__name__ for t in types) + ')'


class NaturalRangeError(ValueError):
    """An error indicating that a machine integer has no natural number counterpart"""

    def __init__(self, value):
        super().__init__(f'natural numbers start at 1, got {value}')
        self.value = value


class PredecessorError(ArithmeticError):
    """An error indicating that a subtraction walked past the base of a natural number"""

    def __init__(self):
        super().__init__('predecessor of Base does not exist')


class DivisionByZeroError(ZeroDivisionError):
    pass


class NegativeOperandError(ValueError):
    pass
