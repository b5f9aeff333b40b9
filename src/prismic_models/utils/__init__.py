"""Utility helpers."""

from .text import snake_case

__all__ = ["snake_case"]
