# app/core/errors.py
from typing import List


class CustomerServiceError(Exception):
    """
    Base for errors that map to a client-facing response.
    """
    status_code: int = 400
    message: str = "Bad request."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InputReadError(CustomerServiceError):
    message = "Error reading request body."


class MalformedInput(CustomerServiceError):
    message = "Invalid JSON format in request body."


class EmptyInput(CustomerServiceError):
    message = "No customers provided in the request body."


class ValidationFailed(CustomerServiceError):
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(", ".join(self.errors))


class PersistenceError(Exception):
    """Snapshot could not be written. Logged by the registry, never returned to clients."""
