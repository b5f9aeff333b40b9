"""Base class exposing content documents as attribute-accessible models."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any, ClassVar, Self, TypeVar

from .collection import ModelCollection
from .domain import Document, FieldNaming, JsonMapping
from .exceptions import (
    DocumentNotAttachedError,
    MissingAttributeError,
    MissingFieldError,
    UnknownResolverError,
)
from .query import QueryBuilder
from .registry import registry
from .resolver import DocumentResolver
from .utils import snake_case

F = TypeVar("F", bound=Callable[..., Any])

_FIELD_ACCESSOR_MARK = "__prismic_field_accessor__"
_RESOLVER_MARK = "__prismic_resolver__"
_RESOLVER_SUFFIX = "_resolver"


def field_accessor(name: str) -> Callable[[F], F]:
    """Register a method that post-processes the raw value of field ``name``.

    The method receives the raw field value and its return value replaces it
    during generic property access::

        class Article(Model):
            @field_accessor("author")
            def cast_author(self, raw):
                return Author(raw)
    """

    def decorator(fn: F) -> F:
        setattr(fn, _FIELD_ACCESSOR_MARK, name)
        return fn

    return decorator


def resolver(name: str | Callable[..., Any] | None = None) -> Any:
    """Register a zero-argument method as a named relationship resolver.

    Used bare, the resolver is named after the method with any trailing
    ``_resolver`` removed. Names are normalized with the model's
    ``field_naming`` like field names, so ``"relatedPosts"`` and
    ``"related_posts"`` refer to the same resolver. Resolvers run through
    :meth:`Model.resolve_documents` in the order they were passed to
    :meth:`Model.with_`.
    """

    def decorator(fn: F, resolver_name: str | None = None) -> F:
        if resolver_name is None:
            resolver_name = fn.__name__.removesuffix(_RESOLVER_SUFFIX)
        setattr(fn, _RESOLVER_MARK, resolver_name)
        return fn

    if callable(name):
        return decorator(name)
    return functools.partial(decorator, resolver_name=name)


class _QueryMethod:
    """Forward a query builder method from a model class or instance.

    On an instance the call goes to ``instance.new_query()``; on the class a
    fresh unattached instance is created first.
    """

    def __init__(self) -> None:
        self._name = ""

    def __set_name__(self, owner: type[Model], name: str) -> None:
        self._name = name

    def __get__(self, instance: Model | None, owner: type[Model]) -> Callable[..., Any]:
        target = getattr(QueryBuilder, self._name)

        @functools.wraps(target)
        def forward(*args: Any, **kwargs: Any) -> Any:
            model = instance if instance is not None else owner()
            return getattr(model.new_query(), self._name)(*args, **kwargs)

        return forward


class Model:
    """Wraps a single content document.

    Subclasses are registered under their type name (the snake-cased class
    name) unless declared with ``abstract=True``. Document metadata and
    fields are readable as plain attributes; fields may be post-processed by
    methods registered with :func:`field_accessor`. Document keys that clash
    with members of this class are only reachable through :meth:`attribute`
    and :meth:`field`.
    """

    field_naming: ClassVar[FieldNaming] = FieldNaming.SNAKE_CASE
    type_name: ClassVar[str | None] = None

    _field_accessor_names: ClassVar[Mapping[str, str]] = MappingProxyType({})
    _field_accessors: ClassVar[Mapping[str, str]] = MappingProxyType({})
    _resolver_names: ClassVar[Mapping[str, str]] = MappingProxyType({})
    _resolver_methods: ClassVar[Mapping[str, str]] = MappingProxyType({})

    where = _QueryMethod()
    where_in = _QueryMethod()
    where_tag = _QueryMethod()
    order_by = _QueryMethod()
    language = _QueryMethod()
    page_size = _QueryMethod()
    find = _QueryMethod()
    find_by_id = _QueryMethod()
    first = _QueryMethod()
    get = _QueryMethod()

    def __init_subclass__(cls, *, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        accessor_names = dict(cls._field_accessor_names)
        resolver_names = dict(cls._resolver_names)
        for attr, value in vars(cls).items():
            accessor_field = getattr(value, _FIELD_ACCESSOR_MARK, None)
            if accessor_field is not None:
                accessor_names[accessor_field] = attr
            resolver_name = getattr(value, _RESOLVER_MARK, None)
            if resolver_name is not None:
                resolver_names[resolver_name] = attr

        cls._field_accessor_names = MappingProxyType(accessor_names)
        cls._field_accessors = MappingProxyType(
            {cls.field_key(field_name): attr for field_name, attr in accessor_names.items()}
        )
        cls._resolver_names = MappingProxyType(resolver_names)
        cls._resolver_methods = MappingProxyType(
            {cls.field_key(resolver_name): attr for resolver_name, attr in resolver_names.items()}
        )

        if not abstract:
            registry.register(cls)

    def __init__(self, document: Document | JsonMapping | None = None) -> None:
        self._document: Document | None = None
        self._resolvers: tuple[str, ...] = ()
        self._relations: dict[str, Any] = {}
        if document:
            self.attach_document(document)

    @property
    def document(self) -> Document | None:
        return self._document

    @property
    def resolvers(self) -> tuple[str, ...]:
        return self._resolvers

    @property
    def relations(self) -> Mapping[str, Any]:
        return MappingProxyType(self._relations)

    @classmethod
    def field_key(cls, name: str) -> str:
        if cls.field_naming is FieldNaming.SNAKE_CASE:
            return snake_case(name)
        return name

    def _require_document(self) -> Document:
        if self._document is None:
            msg = f"{type(self).__name__} has no document attached"
            raise DocumentNotAttachedError(msg)
        return self._document

    def attribute(self, name: str) -> Any:
        """Return the top-level metadata value stored under ``name``."""

        key = self.field_key(name)
        try:
            return self._require_document().metadata[key]
        except KeyError as exc:
            msg = f"{type(self).__name__} document has no attribute {key!r}"
            raise MissingAttributeError(msg) from exc

    def has_attribute(self, name: str) -> bool:
        return self.field_key(name) in self._require_document().metadata

    def field(self, name: str) -> Any:
        """Return the raw content field stored under ``name``."""

        key = self.field_key(name)
        try:
            return self._require_document().data[key]
        except KeyError as exc:
            msg = f"{type(self).__name__} document has no field {key!r}"
            raise MissingFieldError(msg) from exc

    def has_field(self, name: str) -> bool:
        return self.field_key(name) in self._require_document().data

    def has_relation(self, name: str) -> bool:
        return self.field_key(name) in self._relations

    def set_relation(self, name: str, value: Any) -> Self:
        """Store hydrated related models; they shadow the raw link field."""

        self._relations[self.field_key(name)] = value
        return self

    def attach_document(self, document: Document | JsonMapping) -> Self:
        if not isinstance(document, Document):
            document = Document.from_api(document)
        self._document = document
        self._relations = {}
        return self

    def new_query(self) -> QueryBuilder:
        return QueryBuilder(self).where_type(type(self).get_type_name())

    def get_document_resolver(self) -> DocumentResolver:
        return DocumentResolver()

    def resolve_documents(self) -> Self:
        """Run the resolvers registered through :meth:`with_`, in order."""

        for name in self._resolvers:
            getattr(self, type(self)._resolver_method(name))()
        return self

    def replicate(self, document: Document | JsonMapping) -> Self:
        """Return a new model of the same class and resolvers for ``document``."""

        model = type(self)(document)
        model._resolvers = self._resolvers
        return model

    @classmethod
    def _resolver_method(cls, name: str) -> str:
        try:
            return cls._resolver_methods[cls.field_key(name)]
        except KeyError as exc:
            msg = f"{cls.__name__} has no resolver named {name!r}"
            raise UnknownResolverError(msg) from exc

    @classmethod
    def get_type_name(cls) -> str:
        declared = cls.__dict__.get("type_name")
        if declared:
            return declared
        return snake_case(cls.__name__)

    @classmethod
    def with_(cls, *resolvers: str) -> Self:
        """Return an unattached model that will run ``resolvers`` once fetched."""

        for name in resolvers:
            cls._resolver_method(name)
        model = cls()
        model._resolvers = tuple(cls.field_key(name) for name in resolvers)
        return model

    @classmethod
    def new_instance(cls, document: Document | JsonMapping) -> Self:
        return cls(document)

    @classmethod
    def new_collection(cls, models: Iterable[Model]) -> ModelCollection[Any]:
        return ModelCollection(models)

    def __copy__(self) -> Self:
        model = type(self).__new__(type(self))
        model.__dict__.update(self.__dict__)
        model._relations = dict(self._relations)
        return model

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        document = self.__dict__.get("_document")
        if document is None:
            return None
        if self.has_attribute(name):
            return self.attribute(name)
        key = self.field_key(name)
        relations = self.__dict__.get("_relations", {})
        if key in relations:
            return relations[key]
        if self.has_field(name):
            value = self.field(name)
            accessor = type(self)._field_accessors.get(key)
            if accessor is not None:
                return getattr(self, accessor)(value)
            return value
        return None

    def __repr__(self) -> str:
        if self._document is None:
            return f"{type(self).__name__}(unattached)"
        return f"{type(self).__name__}(id={self._document.id!r}, type={self._document.type!r})"


__all__ = ["Model", "field_accessor", "resolver"]
