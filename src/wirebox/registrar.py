"""Registration of factory results into a container.

The :class:`Registrar` runs a factory through the :class:`~wirebox.injector.Injector`,
classifies what comes back (:class:`ResultKind`) and writes the resulting
name(s) into the container. An awaitable result turns the whole registration
into an awaitable that settles to the container; its failures are logged and
swallowed.
"""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Mapping, Optional, Union

from .constants import LOGGER
from .decorators import FactoryKind, components_of, declared_name, kind_of
from .injector import Injector, report
from .proxy import unwrap

if TYPE_CHECKING:
    from .container import Container

Dependencies = Optional[Union[Mapping[str, Any], str]]


class ResultKind(Enum):
    DIRECT = "direct"
    PENDING = "pending"
    BUNDLE = "bundle"


@dataclass(frozen=True)
class FactoryResult:
    kind: ResultKind
    value: Any
    components: Optional[Mapping[str, Any]] = None


def classify(value: Any) -> FactoryResult:
    if inspect.isawaitable(value):
        return FactoryResult(ResultKind.PENDING, value)
    comps = components_of(value)
    if comps is not None:
        return FactoryResult(ResultKind.BUNDLE, value, comps)
    return FactoryResult(ResultKind.DIRECT, value)


def _intrinsic_name(factory: Any) -> Optional[str]:
    name = getattr(unwrap(factory), "__name__", None)
    if not isinstance(name, str) or name == "<lambda>":
        return None
    return name


class Registrar:
    def __init__(self, container: "Container", injector: Optional[Injector] = None) -> None:
        self._container = container
        self._injector = injector or Injector(container)

    def resolve_name(self, factory: Any, name: Optional[str]) -> Optional[str]:
        return name or declared_name(factory) or _intrinsic_name(factory)

    def add(self, name: Optional[str], value: Any, directly: bool) -> None:
        """Store a settled value: bundles entry by entry, anything else under `name`."""
        result = classify(value)
        if result.kind is ResultKind.BUNDLE:
            for key, sub in result.components.items():
                self._container.add_ref(key, sub, directly)
            return
        if name:
            self._container.add_ref(name, value, directly)
        else:
            LOGGER.debug("Dropping unnamed registration of %r", value)

    def register(
        self,
        factory: Any,
        dependencies: Dependencies = None,
        name: Optional[str] = None,
        directly: bool = False,
    ) -> Union["Container", Awaitable["Container"]]:
        container = self._container

        if isinstance(dependencies, str):
            name = dependencies
            dependencies = None

        if factory is None:
            return container

        if kind_of(unwrap(factory)) is FactoryKind.VALUE:
            resolved = name or declared_name(factory)
            if resolved or components_of(factory) is not None:
                self.add(resolved, factory, directly)
            return container

        ref = self._injector.inject(factory, dependencies)
        result = classify(ref)
        resolved = self.resolve_name(factory, name)

        if result.kind is ResultKind.PENDING:
            label = resolved or repr(factory)
            return container.track(self._settle(result.value, resolved, label, directly))
        if ref is None:
            return container
        if result.kind is ResultKind.BUNDLE:
            self.add(None, ref, directly)
        else:
            self.add(resolved, ref, directly)
        return container

    async def _settle(self, pending: Awaitable[Any], name: Optional[str], label: str, directly: bool) -> "Container":
        container = self._container
        try:
            instance = await pending
        except Exception as e:
            report(container, "error", f"Can't inject {label}: {e}")
            return container
        if instance is None:
            report(container, "error", f"Can't inject {label}")
            return container
        self.add(name, instance, directly)
        return container
