class ConicError(Exception):
    pass


class SingularSystemError(ConicError, ArithmeticError):
    """ the quadratic form is singular, there is no unique center """
    pass


class ConicTypeError(ConicError):
    """ a feature was requested for a kind of conic it is not defined for """

    def __init__(self, kind: str, feature: str):
        super().__init__(f"{feature} is undefined for conic of kind '{kind}'")
        self.kind = kind
        self.feature = feature


class NotCanonicalizedError(ConicError):
    pass


class InvalidConicError(ConicError, ValueError):
    """ a, b, c are all zero """
    pass
