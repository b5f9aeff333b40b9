"""Custom exceptions for the model layer and its collaborators."""

from __future__ import annotations


class PrismicModelError(RuntimeError):
    """Base class for model layer errors."""


class DocumentNotAttachedError(PrismicModelError):
    """Raised when a model is read before a document was attached."""


class MissingAttributeError(PrismicModelError, KeyError):
    """Raised when a metadata key is absent from the attached document."""


class MissingFieldError(PrismicModelError, KeyError):
    """Raised when a content field is absent from the attached document."""


class UnknownResolverError(PrismicModelError, LookupError):
    """Raised when a resolver name has no registered resolver method."""


class UnknownTypeError(PrismicModelError, LookupError):
    """Raised when no model class is registered for a content type."""


class TypeNameCollisionError(PrismicModelError):
    """Raised when two model classes derive the same type name."""


class ConfigurationError(PrismicModelError):
    """Raised when the content API connection is not configured."""


class ContentApiError(PrismicModelError):
    """Raised when the content API request fails."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "ConfigurationError",
    "ContentApiError",
    "DocumentNotAttachedError",
    "MissingAttributeError",
    "MissingFieldError",
    "PrismicModelError",
    "TypeNameCollisionError",
    "UnknownResolverError",
    "UnknownTypeError",
]
