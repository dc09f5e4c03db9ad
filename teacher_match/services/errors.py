"""Error taxonomy for the teacher matching pipeline."""

from __future__ import annotations


class MatchError(Exception):
    """Aborts a match request; carries the HTTP status the caller should see."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(MatchError):
    """Bad client input. The message is shown to the caller verbatim."""

    status_code = 400


class TypeMismatch(ValidationError):
    pass


class TooShort(ValidationError):
    pass


class TooLong(ValidationError):
    pass


class InvalidCharacters(ValidationError):
    pass


class DataStoreError(MatchError):
    """A read against skills, teachers or profiles failed."""

    status_code = 500


class EnrichmentError(Exception):
    """One description could not be generated. Always recovered with fallback text."""
