"""Errors raised while building a forecast from a provider payload."""


class ForecastBuildError(Exception):
    """Raised when the provider payload cannot be normalized.

    The build is all-or-nothing: no partial day or forecast is returned.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TypeMismatch(ForecastBuildError):
    """An integer was expected where a real (or non-number) was found."""


class ShapeError(ForecastBuildError):
    """An array or object has the wrong arity or is missing a field."""


class AlignmentError(ForecastBuildError):
    """Paired series disagree on their timestamps."""


class EmptySeriesError(ForecastBuildError):
    """A series that needs at least one element is empty."""


class TimestampError(ForecastBuildError):
    """An epoch timestamp cannot be resolved to a local wall clock."""


class DayNotFoundError(ForecastBuildError):
    """The requested day index is not part of the forecast."""
