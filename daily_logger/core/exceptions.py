"""Exception hierarchy for Daily Logger."""


class DailyLoggerError(Exception):
    """Base exception for all application errors."""


class EntityNotFoundError(DailyLoggerError):
    """A user, day or template does not exist."""


class ValidationError(DailyLoggerError):
    """Input was rejected before touching the store."""


class StorageError(DailyLoggerError):
    """The database or file system failed."""


class ExportError(DailyLoggerError):
    """Rendering, printing or writing a report failed."""
