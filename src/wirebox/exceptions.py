"""Exception hierarchy for wirebox.

The resolution and registration core never raises: missing dependencies,
invalid factories and failing factories are logged and skipped. The classes
below cover the few places that do fail loudly (configuration loading and
pickling of swappable references). All of them inherit from
:class:`WireboxError`.
"""


class WireboxError(Exception):
    """Base exception for all wirebox errors."""

    pass


class ConfigurationError(WireboxError):
    """Raised when a configuration source cannot be loaded or parsed."""

    def __init__(self, msg: str):
        super().__init__(msg)


class SerializationError(WireboxError):
    """Raised when the target of a swappable reference cannot be pickled."""

    def __init__(self, msg: str):
        super().__init__(msg)
