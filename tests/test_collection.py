from __future__ import annotations

from typing import Any

from prismic_models import Document, Model, ModelCollection, resolver


class Snippet(Model):
    def __init__(self, document: Any = None) -> None:
        super().__init__(document)
        self.hits = 0

    @resolver
    def counter(self) -> None:
        self.hits += 1


def snippet(uid: str, lang: str) -> Snippet:
    return Snippet(Document(metadata={"id": uid, "type": "snippet", "lang": lang}, data={"code": uid}))


def test_collection_behaves_like_a_sequence() -> None:
    items = [snippet("a", "en"), snippet("b", "fr"), snippet("c", "en")]
    collection = ModelCollection(items)

    assert len(collection) == 3
    assert collection[1] is items[1]
    assert isinstance(collection[1:], ModelCollection)
    assert list(collection[1:]) == items[1:]
    assert collection.first() is items[0]
    assert ModelCollection().first() is None


def test_pluck_map_and_filter() -> None:
    collection = ModelCollection([snippet("a", "en"), snippet("b", "fr"), snippet("c", "en")])

    assert collection.pluck("code") == ["a", "b", "c"]
    assert collection.map(lambda item: item.lang) == ["en", "fr", "en"]
    assert collection.filter(lambda item: item.lang == "en").pluck("id") == ["a", "c"]


def test_resolve_documents_on_every_item() -> None:
    items = [Snippet.with_("counter").replicate(snippet(uid, "en").document) for uid in "ab"]
    collection = ModelCollection(items)

    assert collection.resolve_documents() is collection
    assert [item.hits for item in collection] == [1, 1]
