"""Shared type aliases for the domain layer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NewType

DocumentId = NewType("DocumentId", str)
TypeName = NewType("TypeName", str)
JsonMapping = Mapping[str, Any]

__all__ = ["DocumentId", "JsonMapping", "TypeName"]
