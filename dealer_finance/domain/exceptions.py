"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Calculation arguments are outside the documented domain"""

    pass


class FxRateAPIError(DomainException):
    """FX quote API returned an error or is unavailable"""

    pass
