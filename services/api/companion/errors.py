"""Error kinds raised by the companion core. The transport maps each to an envelope."""


class CompanionError(Exception):
    """Base for errors the core surfaces to callers."""

    code = "COMPANION_ERROR"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(CompanionError):
    """An update targeted an id with no matching record."""

    code = "NOT_FOUND"
    status_code = 404


class ConstraintViolation(CompanionError):
    """The store rejected a write: duplicate unique field or unknown FK target."""

    code = "CONSTRAINT_VIOLATION"
    status_code = 409
