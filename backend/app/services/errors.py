"""
Biography engine errors. All are expected, recoverable conditions: raised by services,
mapped to HTTP status codes by the API layer, never retried.
"""


class BiographyError(Exception):
    """Base for biography engine failures; status_code is what the API returns."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidLevel(BiographyError):
    """Detail level is not one of the known levels."""

    def __init__(self, level):
        super().__init__(f"Unknown detail level: {level}")
        self.level = level


class InvalidSubject(BiographyError):
    pass


class InvalidResponse(BiographyError):
    pass


class NoResponses(BiographyError):
    pass


class InvalidIndex(BiographyError):
    pass


class NotFound(BiographyError):
    status_code = 404


class DraftNotFound(NotFound):
    pass
