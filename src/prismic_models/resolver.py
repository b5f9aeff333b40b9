"""Hydrates relationship fields into related models."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .client import ContentApiClient, get_client
from .domain import Document
from .registry import registry

if TYPE_CHECKING:
    from .model import Model

logger = logging.getLogger(__name__)

_DOCUMENT_LINK = "Document"


class DocumentResolver:
    """Fetches the documents behind link fields and stores them as relations.

    A link field may hold a single link, a list of links, or a group whose
    items carry the link under ``key``. Linked documents are fetched in a
    single request and wrapped in ``related``; when ``related`` is omitted
    the model class is looked up from the document's type.
    """

    def __init__(self, client: ContentApiClient | None = None) -> None:
        self._client = client

    @property
    def client(self) -> ContentApiClient:
        if self._client is None:
            self._client = get_client()
        return self._client

    def resolve(
        self,
        model: Model,
        field: str,
        related: type[Model] | None = None,
        *,
        key: str | None = None,
        name: str | None = None,
    ) -> Any:
        raw = model.field(field) if model.has_field(field) else None
        many = isinstance(raw, list)
        links = self._links(raw, key, field)

        documents: tuple[Document, ...] = ()
        if links:
            documents = self.client.get_by_ids(link["id"] for link in links)
        by_id = {document.id: document for document in documents}
        models = [
            self._wrap(by_id[link["id"]], related) for link in links if link["id"] in by_id
        ]

        value: Any
        if many:
            value = model.new_collection(models)
        else:
            value = models[0] if models else None
        model.set_relation(name or field, value)
        return value

    def _links(self, raw: Any, key: str | None, field: str) -> list[Mapping[str, Any]]:
        if raw is None:
            return []
        items = raw if isinstance(raw, list) else [raw]
        links: list[Mapping[str, Any]] = []
        for item in items:
            link = item.get(key) if key and isinstance(item, Mapping) else item
            if not isinstance(link, Mapping) or not link.get("id"):
                continue
            if link.get("link_type", _DOCUMENT_LINK) != _DOCUMENT_LINK:
                continue
            if link.get("isBroken"):
                logger.warning("Skipping broken link %s in field %r", link["id"], field)
                continue
            links.append(link)
        return links

    def _wrap(self, document: Document, related: type[Model] | None) -> Model:
        model_cls = related or registry.require(document.type)
        return model_cls.new_instance(document)


__all__ = ["DocumentResolver"]
