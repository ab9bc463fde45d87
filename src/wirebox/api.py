import logging
from typing import Any, Mapping, Optional

from .config_sources import TreeSource, load_refs
from .constants import LOGGER_REF
from .container import Container


def create_container(
    refs: Optional[Mapping[str, Any]] = None,
    *,
    logger: Optional[logging.Logger] = None,
    config: Optional[TreeSource] = None,
) -> Container:
    """Create a root container.

    `config` entries are loaded first, then `refs` (so explicit refs retarget
    config values of the same name). `logger` becomes the logging collaborator,
    stored directly under ``"logger"``; any object with ``warning``/``warn``
    and ``error`` methods works.
    """
    container = Container()
    if logger is not None:
        container.add_directly(LOGGER_REF, logger)
    if config is not None:
        load_refs(container, config)
    for name, ref in (refs or {}).items():
        container.add_ref(name, ref)
    return container
