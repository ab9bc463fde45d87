"""Tree-based configuration sources.

A source yields a mapping of entry name to value; :func:`load_refs` adds each
top-level key to a container. Provides :class:`TreeSource` and its concrete
implementations :class:`DictSource`, :class:`JsonTreeSource` and
:class:`YamlTreeSource`.
"""

import json
from typing import TYPE_CHECKING, Any, Mapping

from .constants import LOGGER
from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .container import Container


class TreeSource:
    """Base class for tree-structured configuration sources.

    Subclasses must implement :meth:`get_tree` to return a mapping whose
    top-level keys are entry names.
    """

    def get_tree(self) -> Mapping[str, Any]:
        raise NotImplementedError


class DictSource(TreeSource):
    """Tree source backed by an in-memory dictionary.

    Example:
        >>> src = DictSource({"db": {"host": "localhost", "port": 5432}})
        >>> src.get_tree()["db"]["host"]
        'localhost'
    """

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    def get_tree(self) -> Mapping[str, Any]:
        return self._data


class JsonTreeSource(TreeSource):
    """Tree source that reads a JSON object from a file.

    Raises:
        ConfigurationError: If the file cannot be read, parsed, or does not
            hold an object at the top level.
    """

    def __init__(self, path: str):
        self._path = path

    def get_tree(self) -> Mapping[str, Any]:
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load JSON config: {e}") from e
        return _require_mapping(data, self._path)


class YamlTreeSource(TreeSource):
    """Tree source that reads a YAML mapping from a file.

    Requires ``PyYAML`` (``pip install wirebox[yaml]``).

    Raises:
        ConfigurationError: If PyYAML is not installed, or if the file
            cannot be read, parsed, or does not hold a mapping.
    """

    def __init__(self, path: str):
        self._path = path

    def get_tree(self) -> Mapping[str, Any]:
        try:
            import yaml
        except ImportError as e:
            raise ConfigurationError("PyYAML not installed") from e
        try:
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load YAML config: {e}") from e
        return _require_mapping(data, self._path)


def _require_mapping(data: Any, origin: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Config root in {origin} must be a mapping, got {type(data).__name__}")
    return data


def load_refs(container: "Container", source: TreeSource, *, directly: bool = False) -> "Container":
    """Add every top-level key of `source` to `container` through ``add_ref``.

    The tree is read in full before the first entry is written, so a source
    that fails to load leaves the container untouched.
    """
    tree = dict(source.get_tree())
    for name, value in tree.items():
        container.add_ref(str(name), value, directly)
    LOGGER.debug("Loaded %d entries from %s", len(tree), type(source).__name__)
    return container
