class BatteryDataBaseError(Exception):
    """Base class for every error raised by the store."""


class ValidationError(BatteryDataBaseError, ValueError):
    """
    Raised on create/update when the supplied fields can not be accepted.

    Either a foreign key does not resolve to an existing record, or a value can not be
    coerced into the type of its field.
    """


class NotFoundError(BatteryDataBaseError, LookupError):
    """Raised when an operation targets an id which is not in the table."""


class ConflictError(BatteryDataBaseError):
    """Raised when a record can not be deleted because another table still references it."""
