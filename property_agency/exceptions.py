"""Custom exception hierarchy for property-agency."""


class AgencyError(Exception):
    """Base exception for all property-agency errors."""


class ValidationError(AgencyError, ValueError):
    """Raised when a model field violates its constraints."""


class MissingFieldError(ValidationError):
    """Raised when a required field is missing (``None``)."""


class InvalidFieldError(ValidationError):
    """Raised when a field is out of range or malformed."""


class IngestionError(AgencyError):
    """Raised when a data file cannot be turned into records."""


class ConfigurationError(AgencyError):
    """Raised when configuration is invalid or missing."""


class SinkError(AgencyError):
    """Raised when a sink operation fails."""
