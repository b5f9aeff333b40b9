"""Registry mapping content type names to model classes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .exceptions import TypeNameCollisionError, UnknownTypeError

if TYPE_CHECKING:
    from .model import Model


def _identity(model_cls: type[Model]) -> tuple[str, str]:
    return (model_cls.__module__, model_cls.__qualname__)


@dataclass(slots=True)
class TypeRegistry:
    """Runtime registry of concrete model classes keyed by type name."""

    _models: dict[str, type[Model]] = field(default_factory=dict)

    def register(self, model_cls: type[Model], *, override: bool = False) -> None:
        type_name = model_cls.get_type_name()
        existing = self._models.get(type_name)
        if existing is not None and not override and _identity(existing) != _identity(model_cls):
            msg = (
                f"Type name {type_name!r} of {model_cls.__qualname__} is already "
                f"used by {existing.__module__}.{existing.__qualname__}"
            )
            raise TypeNameCollisionError(msg)
        self._models[type_name] = model_cls

    def unregister(self, model_cls: type[Model]) -> None:
        type_name = model_cls.get_type_name()
        if self._models.get(type_name) is model_cls:
            del self._models[type_name]

    def get(self, type_name: str) -> type[Model] | None:
        return self._models.get(type_name)

    def require(self, type_name: str) -> type[Model]:
        try:
            return self._models[type_name]
        except KeyError as exc:
            msg = f"No model registered for type {type_name!r}"
            raise UnknownTypeError(msg) from exc

    def type_names(self) -> Iterable[str]:
        return tuple(self._models.keys())


registry = TypeRegistry()


__all__ = ["TypeRegistry", "registry"]
