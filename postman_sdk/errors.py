import requests

# Connection-level failures are raised by requests itself and never wrapped.
TransportError = requests.exceptions.RequestException


class InvalidArgument(ValueError):
    """Raised before any network call when an argument is missing or malformed."""


class ApiError(RuntimeError):
    """Raised for any response whose status falls outside 200-299."""

    def __init__(self, message: str, status_code: int, data=None, response=None):
        super().__init__(message)
        self.status_code = status_code
        self.data = data
        self.response = response
