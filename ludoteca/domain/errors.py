"""Typed failures raised by the lending library core.

Every domain failure derives from :class:`LibraryError`, which itself is a
``ValueError`` so callers that only care about "bad request" semantics can keep
catching ``ValueError``. Storage failures are deliberately outside that
hierarchy: they are not caused by the request and are surfaced unchanged.
"""

from __future__ import annotations


class LibraryError(ValueError):
    """Base class for non-retryable domain failures."""


class InvalidArgumentError(LibraryError):
    """A malformed identifier or argument was supplied by the caller."""


class ValidationError(LibraryError):
    """A well-formed input violates a business rule."""


class NotFoundError(LibraryError):
    """A referenced entity does not exist."""


class ConflictError(LibraryError):
    """The request is valid but the current state forbids it."""


class StorageError(RuntimeError):
    """The persistence layer failed while executing an operation."""


__all__ = [
    "ConflictError",
    "InvalidArgumentError",
    "LibraryError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
]
