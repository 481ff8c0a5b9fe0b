# errors.py


class KinobiError(Exception):
    """Base error; carries the HTTP status the API answers with."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(KinobiError):
    """Missing or malformed input. Raised before anything is mutated."""

    status_code = 400


class NotFound(KinobiError):
    """An id did not resolve inside the instance's catalogs or log."""

    status_code = 404


class StoreError(KinobiError):
    """The persistence layer failed. Not retried."""

    status_code = 500
