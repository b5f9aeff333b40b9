"""Typed, attribute-accessible models over headless CMS documents."""

from .client import ContentApiClient, SearchResponse, configure, get_client, reset_client
from .collection import ModelCollection
from .config import ContentApiSettings
from .domain import Document, FieldNaming
from .exceptions import (
    ConfigurationError,
    ContentApiError,
    DocumentNotAttachedError,
    MissingAttributeError,
    MissingFieldError,
    PrismicModelError,
    TypeNameCollisionError,
    UnknownResolverError,
    UnknownTypeError,
)
from .model import Model, field_accessor, resolver
from .query import QueryBuilder
from .registry import TypeRegistry, registry
from .resolver import DocumentResolver

__all__ = [
    "ConfigurationError",
    "ContentApiClient",
    "ContentApiError",
    "ContentApiSettings",
    "Document",
    "DocumentNotAttachedError",
    "DocumentResolver",
    "FieldNaming",
    "MissingAttributeError",
    "MissingFieldError",
    "Model",
    "ModelCollection",
    "PrismicModelError",
    "QueryBuilder",
    "SearchResponse",
    "TypeNameCollisionError",
    "TypeRegistry",
    "UnknownResolverError",
    "UnknownTypeError",
    "configure",
    "field_accessor",
    "get_client",
    "registry",
    "reset_client",
    "resolver",
]
