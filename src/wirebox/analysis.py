import ast
import inspect
import textwrap
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from .constants import LOGGER, WIREBOX_DEPENDENCIES
from .decorators import FactoryKind, kind_of

NO_DEFAULT: Any = inspect.Parameter.empty


@dataclass(frozen=True)
class DependencyRequest:
    parameter_name: str
    default: Any = NO_DEFAULT
    keyword_only: bool = False

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


def _signature_target(factory: Callable[..., Any]) -> Tuple[Any, bool]:
    if kind_of(factory) is FactoryKind.CONSTRUCTOR and inspect.isclass(factory):
        return factory.__init__, True
    return factory, False


def _from_signature(target: Any, drop_first: bool) -> Optional[Tuple[DependencyRequest, ...]]:
    try:
        sig = inspect.signature(target)
    except (ValueError, TypeError):
        return None

    params = list(sig.parameters.values())
    if drop_first and params and params[0].kind is not inspect.Parameter.VAR_POSITIONAL:
        params = params[1:]

    plan: List[DependencyRequest] = []
    for param in params:
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        plan.append(
            DependencyRequest(
                parameter_name=param.name,
                default=param.default,
                keyword_only=param.kind is inspect.Parameter.KEYWORD_ONLY,
            )
        )
    return tuple(plan)


def _from_source(target: Any, drop_first: bool) -> Tuple[DependencyRequest, ...]:
    """Parse the parameter list out of the callable's source text.

    Comments, whitespace and default expressions never reach the result; only
    the parameter names do. Defaults are not evaluated, so requests built here
    carry none.
    """
    try:
        src = textwrap.dedent(inspect.getsource(target))
    except (OSError, TypeError):
        return ()
    try:
        tree = ast.parse(src)
    except SyntaxError:
        return ()

    node = next(
        (n for n in ast.walk(tree) if isinstance(n, (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda))),
        None,
    )
    if node is None:
        return ()

    args = node.args
    positional = [a.arg for a in args.posonlyargs + args.args]
    if drop_first and positional:
        positional = positional[1:]
    plan = [DependencyRequest(parameter_name=n) for n in positional]
    plan.extend(DependencyRequest(parameter_name=a.arg, keyword_only=True) for a in args.kwonlyargs)
    return tuple(plan)


def analyze_callable_dependencies(factory: Callable[..., Any]) -> Tuple[DependencyRequest, ...]:
    explicit = getattr(factory, WIREBOX_DEPENDENCIES, None)
    if explicit is not None:
        return tuple(DependencyRequest(parameter_name=str(n)) for n in explicit)

    if not callable(factory):
        return ()

    target, drop_first = _signature_target(factory)
    plan = _from_signature(target, drop_first)
    if plan is not None:
        return plan

    plan = _from_source(target, drop_first)
    if not plan:
        LOGGER.debug("No parameter list found for %r; assuming no dependencies", factory)
    return plan


def dependency_names(factory: Callable[..., Any]) -> Tuple[str, ...]:
    return tuple(r.parameter_name for r in analyze_callable_dependencies(factory))
