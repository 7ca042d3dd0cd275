"""Custom exception types for clearer error handling."""

class HipsterStackError(Exception):
    """Base exception for the app."""

class ConfigurationError(HipsterStackError):
    """Raised when a settings value is not one we know how to use."""

class DataValidationError(HipsterStackError):
    """Raised when expected data is missing or malformed."""

class MissingFieldError(DataValidationError, KeyError):
    """Raised when a response lacks a field a derived accessor reads."""

    def __init__(self, field: str):
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"Response is missing field '{self.field}'"

class UpstreamStatusError(HipsterStackError):
    """Raised by callers that opt in to treating a non-2xx status as an error."""

    def __init__(self, response):
        super().__init__(f"Upstream returned HTTP {response.status_code} for {response.url}")
        self.response = response
