"""
Error taxonomy for the daily record backend

ValidationError and its ConflictError subclass cover bad input, NotFoundError
covers operations on missing ids and StoreError wraps persistence failures.
The FastAPI exception handlers in app.py map each one to an HTTP status.
"""


class DailyRecordError(Exception):
    """Base exception for daily record errors"""

    status_code = 500


class ValidationError(DailyRecordError, ValueError):
    """Raised when input (dates, times, names, files) is invalid

    Subclasses ValueError so pydantic validators report it as a field error.
    """

    status_code = 400


class ConflictError(ValidationError):
    """Raised when a unique value already exists"""

    status_code = 409


class NotFoundError(DailyRecordError):
    """Raised when an event id does not exist"""

    status_code = 404

    def __init__(self, resource: str, resource_id):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} '{resource_id}' not found")


class StoreError(DailyRecordError):
    """Raised when the underlying database operation fails"""

    status_code = 500
