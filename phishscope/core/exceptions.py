"""Exceptions raised outside the scoring engine."""


class PhishScopeError(Exception):
    """Base class for PhishScope errors."""
    pass


class InvalidPayloadError(PhishScopeError):
    """Raised when a raw payload cannot be read as email data."""
    pass


class ConfigurationError(PhishScopeError):
    """Configuration validation error."""
    pass
