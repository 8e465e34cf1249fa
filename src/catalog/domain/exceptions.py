"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The backing file could not be read or written."""


class AlreadyExistsError(ValidationError):
    """A code value is already used by another product."""


class InvalidDateFormatError(ValidationError):
    """An expiration is not a valid DD/MM/YYYY date."""


class DateOutOfRangeError(ValidationError):
    """An expiration falls before the minimum allowed date."""


class PriceOutOfRangeError(ValidationError):
    """A price is outside its allowed range."""


class QuantityOutOfRangeError(ValidationError):
    """A quantity is outside its allowed range."""


class KeyMismatchError(ValidationError):
    """An update key matches neither the stored nor the requested code value."""


class NotPublishedError(ValidationError):
    """A product that is not published was requested for sale."""


class UnavailableQuantityError(ValidationError):
    """More units of a product were requested than it has in stock."""
