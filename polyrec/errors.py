"""Typed failures raised by the recognition pipeline."""


class RecognitionError(RuntimeError):
    """Base class for recognition failures."""


class TransportError(RecognitionError):
    """One language attempt could not complete its HTTP exchange."""


class DecodeError(RecognitionError):
    """A response body was not valid JSON or did not match the wire schema."""


class NoResultError(RecognitionError):
    """No language attempt produced a usable hypothesis before the deadline."""


class UnknownLanguageError(ValueError):
    """A wire code does not name a supported language."""
