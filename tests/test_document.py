from __future__ import annotations

import pytest
from pydantic import ValidationError

from prismic_models import Document


def test_from_api_splits_metadata_and_data() -> None:
    document = Document.from_api(
        {
            "id": "XyZ1",
            "uid": "hello-world",
            "type": "blog_post",
            "tags": ["news"],
            "data": {"title": "Hello"},
        }
    )

    assert document.metadata == {
        "id": "XyZ1",
        "uid": "hello-world",
        "type": "blog_post",
        "tags": ["news"],
    }
    assert document.data == {"title": "Hello"}
    assert document.id == "XyZ1"
    assert document.uid == "hello-world"
    assert document.type == "blog_post"


def test_from_api_without_data() -> None:
    document = Document.from_api({"id": "1", "type": "page", "data": None})
    assert document.data == {}


def test_document_requires_type() -> None:
    with pytest.raises(ValidationError):
        Document(metadata={"id": "1"}, data={})


def test_document_is_frozen() -> None:
    document = Document(metadata={"type": "page"})
    with pytest.raises(ValidationError):
        document.data = {"title": "changed"}  # type: ignore[misc]
