# wirebox/__init__.py
from ._version import __version__

from .api import create_container
from .analysis import DependencyRequest, analyze_callable_dependencies, dependency_names
from .config_sources import DictSource, JsonTreeSource, TreeSource, YamlTreeSource, load_refs
from .constants import CONTAINER_REF, LOGGER_REF
from .container import Container
from .decorators import (
    ComponentBundle, FactoryKind,
    constructor, depends_on, factory_kind, kind_of, named,
)
from .exceptions import ConfigurationError, SerializationError, WireboxError
from .injector import Injector
from .proxy import SwappableRef, unwrap
from .registrar import FactoryResult, Registrar, ResultKind, classify

__all__ = [
    "__version__",
    "create_container",
    "Container",
    "Injector",
    "Registrar",
    "SwappableRef",
    "unwrap",
    "ComponentBundle",
    "FactoryKind",
    "FactoryResult",
    "ResultKind",
    "classify",
    "DependencyRequest",
    "analyze_callable_dependencies",
    "dependency_names",
    "constructor",
    "depends_on",
    "factory_kind",
    "kind_of",
    "named",
    "TreeSource",
    "DictSource",
    "JsonTreeSource",
    "YamlTreeSource",
    "load_refs",
    "CONTAINER_REF",
    "LOGGER_REF",
    "WireboxError",
    "ConfigurationError",
    "SerializationError",
]
