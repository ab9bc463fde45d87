# wirebox/decorators.py
from __future__ import annotations

import inspect
from enum import Enum
from typing import Any, Mapping

from .constants import COMPONENTS_ATTR, WIREBOX_DEPENDENCIES, WIREBOX_KIND, WIREBOX_NAME


class FactoryKind(Enum):
    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    VALUE = "value"


def depends_on(*names: str):
    """
    Declare the ordered dependency names of a factory explicitly.

    Introspection is skipped for factories carrying this list; the names are
    supplied positionally in the given order.
    """
    def dec(obj):
        setattr(obj, WIREBOX_DEPENDENCIES, tuple(names))
        return obj
    return dec


def named(name: str):
    """Register the factory's result under `name` instead of the factory's own `__name__`."""
    def dec(obj):
        setattr(obj, WIREBOX_NAME, name)
        return obj
    return dec


def factory_kind(kind: FactoryKind):
    def dec(obj):
        setattr(obj, WIREBOX_KIND, FactoryKind(kind))
        return obj
    return dec


def constructor(cls):
    return factory_kind(FactoryKind.CONSTRUCTOR)(cls)


def kind_of(obj: Any) -> FactoryKind:
    """Explicit kind tag if present, else classes are constructors and other callables functions."""
    tagged = getattr(obj, WIREBOX_KIND, None)
    if isinstance(tagged, FactoryKind):
        return tagged
    if inspect.isclass(obj):
        return FactoryKind.CONSTRUCTOR
    if callable(obj):
        return FactoryKind.FUNCTION
    return FactoryKind.VALUE


def declared_name(obj: Any) -> str | None:
    name = getattr(obj, WIREBOX_NAME, None)
    return name if isinstance(name, str) and name else None


def components_of(obj: Any) -> Mapping[str, Any] | None:
    comps = getattr(obj, COMPONENTS_ATTR, None)
    return comps if isinstance(comps, Mapping) else None


class ComponentBundle:
    """A value exposing several named sub-values, each registered on its own.

        def users(db):
            repo = UserRepository(db)
            return ComponentBundle(user_repository=repo, user_service=UserService(repo))
    """

    __slots__ = ("__components__",)

    def __init__(self, components: Mapping[str, Any] | None = None, **kwargs: Any):
        self.__components__ = {**(components or {}), **kwargs}

    def __getitem__(self, name: str) -> Any:
        return self.__components__[name]

    def __repr__(self) -> str:
        return f"ComponentBundle({', '.join(self.__components__)})"


__all__ = [
    "FactoryKind", "ComponentBundle",
    "depends_on", "named", "factory_kind", "constructor",
    "kind_of", "declared_name", "components_of",
]
