"""Exception types raised by the transform engine."""


class QuadwarpError(Exception):
    """Base class for all quadwarp errors."""


class InvalidInputError(QuadwarpError, ValueError):
    """Caller supplied bad input: wrong point count, non-finite coordinates, empty set."""


class SingularSystemError(QuadwarpError, ArithmeticError):
    """The 8x8 correspondence system has no unique solution.

    Raised by the elimination routine and recovered inside the solver,
    which substitutes the identity matrix.
    """


class MalformedMatrixError(QuadwarpError, ValueError):
    """A matrix handed to the projector is not a numeric 4x4 array."""
