from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import pytest

from prismic_models import (
    Document,
    DocumentResolver,
    Model,
    ModelCollection,
    UnknownTypeError,
    configure,
    resolver,
)


class FakeClient:
    def __init__(self, *documents: Document) -> None:
        self.documents = {document.id: document for document in documents}
        self.requested: list[list[str]] = []

    def get_by_ids(self, ids: Iterable[str]) -> tuple[Document, ...]:
        wanted = list(ids)
        self.requested.append(wanted)
        return tuple(self.documents[i] for i in wanted if i in self.documents)

    def close(self) -> None:
        pass


class Author(Model):
    pass


class Category(Model):
    pass


class Article(Model):
    @resolver
    def author_resolver(self) -> None:
        self.get_document_resolver().resolve(self, "author", Author)

    @resolver("categories")
    def resolve_categories(self) -> None:
        self.get_document_resolver().resolve(self, "categories", key="category")


def link(document_id: str, type_name: str, **extra: Any) -> dict[str, Any]:
    return {"id": document_id, "type": type_name, "link_type": "Document", **extra}


def author(document_id: str, name: str) -> Document:
    return Document(metadata={"id": document_id, "type": "author"}, data={"name": name})


def category(document_id: str, label: str) -> Document:
    return Document(metadata={"id": document_id, "type": "category"}, data={"label": label})


def article(**data: Any) -> Article:
    return Article(Document(metadata={"id": "A1", "type": "article"}, data=data))


def test_resolves_single_link_into_model() -> None:
    client = FakeClient(author("P1", "Ada"))
    post = article(author=link("P1", "author"))

    resolved = DocumentResolver(client).resolve(post, "author", Author)  # type: ignore[arg-type]

    assert isinstance(resolved, Author)
    assert post.author is resolved
    assert post.author.name == "Ada"
    assert client.requested == [["P1"]]


def test_resolves_group_links_in_field_order() -> None:
    client = FakeClient(category("C1", "News"), category("C2", "Tech"))
    post = article(
        categories=[
            {"category": link("C2", "category")},
            {"category": link("C1", "category")},
        ]
    )

    resolved = DocumentResolver(client).resolve(post, "categories", key="category")  # type: ignore[arg-type]

    assert isinstance(resolved, ModelCollection)
    assert [item.label for item in resolved] == ["Tech", "News"]
    assert all(isinstance(item, Category) for item in resolved)


def test_repeated_links_resolve_once_per_link() -> None:
    client = FakeClient(author("P1", "Ada"), author("P2", "Grace"))
    post = article(
        authors=[link("P1", "author"), link("P2", "author"), link("P1", "author")]
    )

    resolved = DocumentResolver(client).resolve(post, "authors", Author)  # type: ignore[arg-type]

    assert [item.name for item in resolved] == ["Ada", "Grace", "Ada"]
    assert resolved[0] is not resolved[2]


def test_broken_and_web_links_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    client = FakeClient(author("P1", "Ada"), author("P2", "Grace"))
    post = article(
        authors=[
            link("P1", "author"),
            link("P2", "author", isBroken=True),
            {"link_type": "Web", "url": "https://example.com"},
        ]
    )

    with caplog.at_level(logging.WARNING):
        resolved = DocumentResolver(client).resolve(post, "authors", Author)  # type: ignore[arg-type]

    assert [item.name for item in resolved] == ["Ada"]
    assert "P2" in caplog.text


def test_missing_field_resolves_to_none() -> None:
    client = FakeClient()
    post = article()

    assert DocumentResolver(client).resolve(post, "author", Author) is None  # type: ignore[arg-type]
    assert post.has_relation("author")
    assert client.requested == []


def test_relation_name_can_differ_from_field() -> None:
    client = FakeClient(author("P1", "Ada"))
    post = article(author=link("P1", "author"))

    DocumentResolver(client).resolve(post, "author", Author, name="writer")  # type: ignore[arg-type]

    assert post.writer.name == "Ada"
    assert post.author == link("P1", "author")


def test_unregistered_type_is_an_error() -> None:
    unknown = Document(metadata={"id": "X1", "type": "unknown_thing"})
    client = FakeClient(unknown)
    post = article(related=link("X1", "unknown_thing"))

    with pytest.raises(UnknownTypeError):
        DocumentResolver(client).resolve(post, "related")  # type: ignore[arg-type]


def test_resolvers_use_default_client() -> None:
    configure(client=FakeClient(author("P1", "Ada"), category("C1", "News")))  # type: ignore[arg-type]
    post = Article.with_("author", "categories").replicate(
        Document(
            metadata={"id": "A1", "type": "article"},
            data={"author": link("P1", "author"), "categories": [{"category": link("C1", "category")}]},
        )
    )

    post.resolve_documents()

    assert post.author.name == "Ada"
    assert post.categories.pluck("label") == ["News"]
