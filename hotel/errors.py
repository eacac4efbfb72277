"""
File: errors.py
Purpose: Error taxonomy raised by services and mapped to HTTP responses by the app.
"""


class ApiError(Exception):
    """Base class for errors that are reported to the client as JSON."""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"success": False, "message": self.message}


class BadRequestError(ApiError):
    status_code = 400


class ValidationError(BadRequestError):
    """
    One or more body fields failed validation.
    `errors` is a list of per-field dicts: type, value, msg, path, location.
    """

    def __init__(self, errors):
        super().__init__("Validation failed")
        self.errors = errors

    def to_dict(self):
        return {"errors": self.errors}


class MissingLookupKeyError(BadRequestError):
    pass


class ConflictError(ApiError):
    status_code = 409


class NotFoundError(ApiError):
    status_code = 404


class StoreError(ApiError):
    """The database failed; the message is generic, details stay in the logs."""
    status_code = 500


class DuplicateEntryError(Exception):
    """Raised by DAOs when an insert violates a unique key."""
