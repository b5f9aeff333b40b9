"""Fluent query builder bound to a model type."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Self

from .client import ContentApiClient, get_client
from .collection import ModelCollection
from .domain import Document

if TYPE_CHECKING:
    from .model import Model

logger = logging.getLogger(__name__)

_PASSTHROUGH_PREFIXES = ("document.", "my.")


def _literal(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def predicate(operator: str, path: str, value: Any) -> str:
    """Format a single content API predicate, e.g. ``[at(document.type,"post")]``."""

    return f"[{operator}({path},{_literal(value)})]"


class QueryBuilder:
    """Collects predicates and options, then hydrates results into models.

    Every executed document is wrapped with ``model.replicate`` so models
    returned from a query carry the resolvers registered through
    ``Model.with_`` and have them executed before being returned.
    """

    def __init__(self, model: Model, client: ContentApiClient | None = None) -> None:
        self._model = model
        self._client = client
        self._predicates: list[str] = []
        self._orderings: list[str] = []
        self._type_filter: str | None = None
        self._lang: str | None = None
        self._page_size: int | None = None

    @property
    def model(self) -> Model:
        return self._model

    @property
    def type_filter(self) -> str | None:
        return self._type_filter

    @property
    def predicates(self) -> tuple[str, ...]:
        return tuple(self._predicates)

    def options(self) -> dict[str, Any]:
        """Return the non-predicate search options that will be sent."""

        options: dict[str, Any] = {}
        if self._page_size is not None:
            options["page_size"] = self._page_size
        if self._lang is not None:
            options["lang"] = self._lang
        if self._orderings:
            options["orderings"] = f"[{','.join(self._orderings)}]"
        return options

    def field_path(self, path: str) -> str:
        """Map a model field name onto its ``my.<type>.<field>`` path."""

        if path.startswith(_PASSTHROUGH_PREFIXES):
            return path
        type_name = self._type_filter or type(self._model).get_type_name()
        key = type(self._model).field_key
        return ".".join(["my", type_name, *(key(part) for part in path.split("."))])

    def where_type(self, name: str) -> Self:
        self._type_filter = name
        self._predicates.append(predicate("at", "document.type", name))
        return self

    def where(self, path: str, value: Any) -> Self:
        self._predicates.append(predicate("at", self.field_path(path), value))
        return self

    def where_in(self, path: str, values: Iterable[Any]) -> Self:
        self._predicates.append(predicate("in", self.field_path(path), list(values)))
        return self

    def where_tag(self, *tags: str) -> Self:
        self._predicates.append(predicate("at", "document.tags", list(tags)))
        return self

    def order_by(self, path: str, descending: bool = False) -> Self:
        ordering = self.field_path(path)
        if descending:
            ordering = f"{ordering} desc"
        self._orderings.append(ordering)
        return self

    def language(self, lang: str) -> Self:
        self._lang = lang
        return self

    def page_size(self, size: int) -> Self:
        self._page_size = max(1, int(size))
        return self

    def get(self) -> ModelCollection[Any]:
        documents = self._search(self.options())
        return type(self._model).new_collection(self._hydrate(doc) for doc in documents)

    def first(self) -> Model | None:
        options = self.options()
        options["page_size"] = 1
        documents = self._search(options)
        if not documents:
            return None
        return self._hydrate(documents[0])

    def find(self, uid: str) -> Model | None:
        return self.where("uid", uid).first()

    def find_by_id(self, document_id: str) -> Model | None:
        self._predicates.append(predicate("at", "document.id", document_id))
        return self.first()

    def _search(self, options: dict[str, Any]) -> tuple[Document, ...]:
        client = self._client or get_client()
        logger.debug(
            "Querying %s with predicates %s and options %s",
            type(self._model).__name__,
            self._predicates,
            options,
        )
        response = client.search(self._predicates, **options)
        return response.results

    def _hydrate(self, document: Document) -> Model:
        return self._model.replicate(document).resolve_documents()


__all__ = ["QueryBuilder", "predicate"]
