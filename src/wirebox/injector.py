"""Argument resolution and factory invocation.

:class:`Injector` turns a factory's declared dependency names into concrete
arguments taken from explicit overrides or from a container, then calls the
factory. Neither step raises: a missing dependency is reported on the
container's logging collaborator and resolved to ``None``, and a factory that
blows up is reported and yields ``None``.
"""

from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .analysis import DependencyRequest, analyze_callable_dependencies
from .constants import CONTAINER_REF, LOGGER, LOGGER_REF
from .proxy import unwrap

if TYPE_CHECKING:
    from .container import Container

_MISSING = object()


def report(container: "Container", level: str, message: str) -> None:
    """Send `message` to the container's logging collaborator, or to the package logger.

    `level` is ``"warning"`` or ``"error"``. Collaborators exposing only
    ``warn`` are accepted for the warning channel.
    """
    sink = container.get(LOGGER_REF)
    if sink is not None:
        names = ("warning", "warn") if level == "warning" else (level,)
        for attr in names:
            channel = getattr(sink, attr, None)
            if callable(channel):
                channel(message)
                return
    getattr(LOGGER, level)(message)


class Injector:
    def __init__(self, container: "Container") -> None:
        self._container = container

    def resolve_one(self, request: DependencyRequest, dependencies: Optional[Mapping[str, Any]] = None) -> Any:
        name = request.parameter_name
        if dependencies is not None and name in dependencies:
            return dependencies[name]
        if name == CONTAINER_REF:
            return self._container
        value = self._container.get(name, _MISSING)
        if value is not _MISSING:
            return value
        if request.has_default:
            return request.default
        report(self._container, "warning", f"Can't inject dependency: {name}")
        return None

    def resolve(
        self,
        requests: Iterable[DependencyRequest],
        dependencies: Optional[Mapping[str, Any]] = None,
    ) -> Tuple[List[Any], Dict[str, Any]]:
        """Resolve requests in order into positional and keyword-only arguments."""
        args: List[Any] = []
        kwargs: Dict[str, Any] = {}
        for req in requests:
            value = self.resolve_one(req, dependencies)
            if req.keyword_only:
                kwargs[req.parameter_name] = value
            else:
                args.append(value)
        return args, kwargs

    def inject(self, factory: Optional[Callable[..., Any]], dependencies: Optional[Mapping[str, Any]] = None) -> Any:
        if factory is None or not callable(unwrap(factory)):
            return None
        args, kwargs = self.resolve(analyze_callable_dependencies(unwrap(factory)), dependencies)
        try:
            return factory(*args, **kwargs)
        except Exception as e:
            label = getattr(factory, "__name__", repr(factory))
            report(self._container, "error", f"Can't inject {label}: {e}")
            return None
