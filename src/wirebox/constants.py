"""Constants used throughout wirebox.

This module defines the reserved entry names, the attribute names stamped onto
factories by the metadata decorators, and the package logger.
"""

import logging

LOGGER_NAME: str = "wirebox"
"""Default logger name for wirebox internal diagnostics."""

LOGGER: logging.Logger = logging.getLogger(LOGGER_NAME)
"""Package logger, used when a container carries no logging collaborator."""

CONTAINER_REF: str = "container"
"""Reserved dependency name: a parameter with this name receives the container itself."""

LOGGER_REF: str = "logger"
"""Reserved entry name under which the logging collaborator is looked up."""

WIREBOX_DEPENDENCIES: str = "_wirebox_dependencies"
"""Attribute name storing an explicit, ordered dependency-name list."""

WIREBOX_NAME: str = "_wirebox_name"
"""Attribute name storing an explicit registration name."""

WIREBOX_KIND: str = "_wirebox_kind"
"""Attribute name storing the explicit factory kind (see :class:`~wirebox.decorators.FactoryKind`)."""

COMPONENTS_ATTR: str = "__components__"
"""Attribute name of a component bundle's sub-name to sub-value mapping."""
