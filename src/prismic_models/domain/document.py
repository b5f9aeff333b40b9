"""Content document envelope returned by the content API."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from .base import DomainModel
from .types import DocumentId, JsonMapping, TypeName


class Document(DomainModel):
    """A metadata envelope plus the content-model fields of one document."""

    metadata: dict[str, Any]
    data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("metadata")
    @classmethod
    def ensure_type(cls, value: dict[str, Any]) -> dict[str, Any]:
        if not value.get("type"):
            msg = "Document metadata must include a 'type'"
            raise ValueError(msg)
        return value

    @classmethod
    def from_api(cls, payload: JsonMapping) -> Document:
        """Split a raw search result into metadata and content fields."""

        metadata = {key: value for key, value in payload.items() if key != "data"}
        return cls(metadata=metadata, data=dict(payload.get("data") or {}))

    @property
    def id(self) -> DocumentId | None:
        value = self.metadata.get("id")
        return DocumentId(value) if value is not None else None

    @property
    def uid(self) -> str | None:
        return self.metadata.get("uid")

    @property
    def type(self) -> TypeName:
        return TypeName(self.metadata["type"])


__all__ = ["Document"]
