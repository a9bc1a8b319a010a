"""Exceptions raised while parsing quantities and loading pacing grids.

Everything derives from ``PacingError`` (a ``ValueError``) so callers can
catch the whole family in one place.
"""


class PacingError(ValueError):
    """Base class for every racegrid failure."""


class ParseError(PacingError):
    """A distance, duration, pace or unit string could not be understood."""

    def __init__(self, message: str, raw: object = None):
        super().__init__(message)
        self.raw = raw


class DistanceParseError(ParseError):
    pass


class DurationParseError(ParseError):
    pass


class PaceParseError(ParseError):
    pass


class UnknownUnitError(ParseError):
    pass


class AmbiguousSegmentError(PacingError):
    """A course segment does not carry exactly one valid combination of inputs."""

    def __init__(self, message: str, pace: object = None, distance: object = None, duration: object = None):
        super().__init__(message)
        self.pace = pace
        self.distance = distance
        self.duration = duration


class GridConsistencyError(PacingError):
    """A race adds up to (or past) the course totals."""


class DegenerateArithmeticError(PacingError, ArithmeticError):
    """A pace would be zero, infinite or NaN."""


class GridDocumentError(PacingError):
    """The grid document is not valid JSON or has the wrong shape."""
