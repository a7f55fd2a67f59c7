"""
Exception taxonomy for the customer service.

Each exception maps to exactly one HTTP status; the mapping lives in
``main.create_app`` where the handlers are registered.
"""


class CustomerServiceError(Exception):
    """Base class for all errors raised by the service layer."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CustomerServiceError):
    """Submitted fields failed a syntax rule.  Raised before any storage access."""

    status_code = 400


class NotFoundError(CustomerServiceError):
    """No customer row matched the requested id."""

    status_code = 404

    def __init__(self, message: str = "Customer not found") -> None:
        super().__init__(message)


class StoreError(CustomerServiceError):
    """The SQLite engine rejected a statement.  Carries the engine message."""

    status_code = 500
