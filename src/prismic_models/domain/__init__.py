"""Domain value objects."""

from .base import DomainModel
from .document import Document
from .enums import FieldNaming
from .types import DocumentId, JsonMapping, TypeName

__all__ = ["DocumentId", "Document", "DomainModel", "FieldNaming", "JsonMapping", "TypeName"]
