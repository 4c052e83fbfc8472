"""Exceptions raised while building or evaluating curves.

Construction problems are always reported before a curve exists; the only
error a finished curve can raise is OutOfDomainError, and only when it was
wrapped with the 'error' extrapolation strategy."""

class CurveError(Exception):
    pass

class ConstructionError(CurveError, ValueError):
    """Base class for everything that prevents a curve from being built."""
    pass

class LengthMismatchError(ConstructionError):
    pass

class TooFewPointsError(ConstructionError):
    def __init__(self, name, found, expected):
        self.name = name
        self.found = found
        self.expected = expected
        super().__init__(f'Too few elements given for creation of {name}: {found} given, '
            f'but at least {expected} are necessary.')

class DegreeTooHighError(ConstructionError):
    def __init__(self, degree, num_points):
        self.degree = degree
        self.num_points = num_points
        super().__init__(f'A curve of degree {degree} needs at least {degree+1} control points, '
            f'but only {num_points} were given.')

class KnotVectorError(ConstructionError):
    pass

class KnotLengthError(KnotVectorError, LengthMismatchError):
    def __init__(self, found, expected):
        self.found = found
        self.expected = expected
        super().__init__(f'The number of knots is not correct: {found} knots given, but {expected} necessary.')

class KnotOrderError(KnotVectorError):
    def __init__(self, index):
        self.index = index
        super().__init__(f'Knots must be non-decreasing, but knot {index} is smaller than knot {index-1}.')

class KnotMultiplicityError(KnotVectorError):
    def __init__(self, value, multiplicity, degree):
        self.value = value
        self.multiplicity = multiplicity
        self.degree = degree
        super().__init__(f'Knot {value} is repeated {multiplicity} times, but a curve of degree {degree} '
            f'allows at most {degree+1}.')

class DegenerateWeightError(ConstructionError):
    def __init__(self, index, weight):
        self.index = index
        self.weight = weight
        super().__init__(f'Weight {index} is {weight}: weights of rational curves must be positive.')

class OutOfDomainError(CurveError, ValueError):
    def __init__(self, t, domain):
        self.t = t
        self.domain = domain
        super().__init__(f'Parameter {t} lies outside of the curve domain [{domain[0]}, {domain[1]}].')
