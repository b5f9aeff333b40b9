"""Ordered, immutable collection of models."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

if TYPE_CHECKING:
    from .model import Model

M = TypeVar("M", bound="Model")
T = TypeVar("T")


class ModelCollection(Sequence[M], Generic[M]):
    """Wraps query results and resolved relations in their original order."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[M] = ()) -> None:
        self._items: tuple[M, ...] = tuple(items)

    @overload
    def __getitem__(self, index: int) -> M: ...

    @overload
    def __getitem__(self, index: slice) -> ModelCollection[M]: ...

    def __getitem__(self, index: int | slice) -> M | ModelCollection[M]:
        if isinstance(index, slice):
            return ModelCollection(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[M]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModelCollection):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ModelCollection({list(self._items)!r})"

    def first(self) -> M | None:
        return self._items[0] if self._items else None

    def pluck(self, name: str) -> list[Any]:
        """Read ``name`` from every model through generic property access."""

        return [getattr(item, name) for item in self._items]

    def map(self, fn: Callable[[M], T]) -> list[T]:
        return [fn(item) for item in self._items]

    def filter(self, fn: Callable[[M], bool]) -> ModelCollection[M]:
        return ModelCollection(item for item in self._items if fn(item))

    def resolve_documents(self) -> ModelCollection[M]:
        for item in self._items:
            item.resolve_documents()
        return self


__all__ = ["ModelCollection"]
