# src/wirebox/container.py
import asyncio
from typing import Any, Awaitable, Callable, Dict, Iterator, Mapping, Optional, Set, Union

from .constants import LOGGER
from .injector import Injector
from .proxy import SwappableRef, unwrap
from .registrar import Dependencies, Registrar

_MISSING = object()


class Container:
    """Named-entry registry with read-through delegation to a parent.

    Entries are either *direct* (the value itself) or *swappable* (a
    :class:`~wirebox.proxy.SwappableRef` that later :meth:`add_ref` calls
    retarget in place, so holders of the old reference see the new value).
    Lookups check this container's own entries first, then walk the parent
    chain; writes only ever touch this container.

        container = create_container()
        container.add_ref("ref1", Settings()).register(service1)
        container.service1.run()
    """

    def __init__(self, parent: Optional["Container"] = None) -> None:
        self._refs: Dict[str, Any] = {}
        self._parent = parent
        self._swappable: Set[str] = set()
        self._pending: Set["asyncio.Task[Container]"] = set()
        self._injector = Injector(self)
        self._registrar = Registrar(self, self._injector)

    @property
    def parent(self) -> Optional["Container"]:
        return self._parent

    def clone(self, overrides: Optional[Mapping[str, Any]] = None) -> "Container":
        """Create a child container reading through to this one.

        Every key of `overrides` becomes a direct entry on the child, shadowing
        the parent's entry of the same name for the child and its descendants.
        """
        child = Container(parent=self)
        for name, value in (overrides or {}).items():
            child.add_directly(name, value)
        LOGGER.debug("Cloned container with overrides: %s", sorted(overrides or ()))
        return child

    def add_ref(self, name: str, ref: Any, directly: bool = False) -> "Container":
        if name not in self._refs:
            if directly or callable(unwrap(ref)):
                self._store_direct(name, ref)
            else:
                self._refs[name] = SwappableRef(unwrap(ref))
                self._swappable.add(name)
            return self

        # Only boxes this container created are retargeted; a direct entry
        # may hold a box shared with a parent or another entry.
        if name in self._swappable:
            self._refs[name].retarget(unwrap(ref))
            LOGGER.debug("Retargeted swappable entry '%s'", name)
            return self

        self._store_direct(name, ref)
        return self

    def _store_direct(self, name: str, ref: Any) -> None:
        self._refs[name] = ref
        self._swappable.discard(name)

    def add_directly(self, name: str, ref: Any) -> "Container":
        return self.add_ref(name, ref, True)

    def inject(self, factory: Optional[Callable[..., Any]], dependencies: Optional[Mapping[str, Any]] = None) -> Any:
        return self._injector.inject(factory, dependencies)

    def register(
        self,
        factory: Any,
        dependencies: Dependencies = None,
        name: Optional[str] = None,
        directly: bool = False,
    ) -> Union["Container", Awaitable["Container"]]:
        """Run `factory` with injected dependencies and store what it returns.

        Returns the container, or an awaitable settling to it when the factory
        result is itself awaitable. Passing a string as `dependencies` is the
        same as passing it as `name`.
        """
        return self._registrar.register(factory, dependencies, name, directly)

    def register_directly(
        self,
        factory: Any,
        dependencies: Dependencies = None,
        name: Optional[str] = None,
    ) -> Union["Container", Awaitable["Container"]]:
        return self.register(factory, dependencies, name, True)

    def track(self, pending: Awaitable["Container"]) -> Awaitable["Container"]:
        """Start a pending registration on the running loop, if there is one.

        Without a running loop the coroutine is handed back untouched and runs
        when the caller awaits it.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return pending
        task = loop.create_task(pending)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def settled(self) -> "Container":
        """Wait until every registration still pending on this container has settled."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
        return self

    def get(self, name: str, default: Any = None) -> Any:
        node: Optional[Container] = self
        while node is not None:
            value = node._refs.get(name, _MISSING)
            if value is not _MISSING:
                return value
            node = node._parent
        return default

    def has(self, name: str) -> bool:
        return self.get(name, _MISSING) is not _MISSING

    def own_names(self) -> Iterator[str]:
        return iter(list(self._refs))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __getitem__(self, name: str) -> Any:
        value = self.get(name, _MISSING)
        if value is _MISSING:
            raise KeyError(name)
        return value

    def __setitem__(self, name: str, value: Any) -> None:
        self._store_direct(name, value)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        value = self.get(name, _MISSING)
        if value is _MISSING:
            raise AttributeError(f"{type(self).__name__!s} has no entry '{name}'")
        return value

    def __repr__(self) -> str:
        depth = 0
        node = self._parent
        while node is not None:
            depth += 1
            node = node._parent
        return f"<Container entries={sorted(self._refs)} depth={depth}>"
