"""Enumerations used across the model layer."""

from __future__ import annotations

from enum import StrEnum


class FieldNaming(StrEnum):
    """How accessor names are mapped onto document keys."""

    SNAKE_CASE = "snake_case"
    AS_IS = "as_is"
