"""Swappable references.

A :class:`SwappableRef` is a one-field mutable box placed in a container in
front of a value. Everything done to the box is forwarded to its current
target, so code that captured the box keeps working after
:meth:`SwappableRef.retarget` swaps the value underneath it.
"""

import operator
from typing import Any

from .exceptions import SerializationError

_TARGET = "_wirebox_target"


class SwappableRef:
    __slots__ = (_TARGET, "__weakref__")

    def __init__(self, target: Any) -> None:
        object.__setattr__(self, _TARGET, target)

    def _get_real_object(self) -> Any:
        return object.__getattribute__(self, _TARGET)

    def retarget(self, target: Any) -> None:
        object.__setattr__(self, _TARGET, target)

    @property
    def __class__(self):
        return type(self._get_real_object())

    def __getattr__(self, name):
        return getattr(self._get_real_object(), name)

    def __setattr__(self, name, value):
        setattr(self._get_real_object(), name, value)

    def __delattr__(self, name):
        delattr(self._get_real_object(), name)

    def __str__(self):
        return str(self._get_real_object())

    def __repr__(self):
        return f"<SwappableRef {self._get_real_object()!r}>"

    def __format__(self, spec):
        return format(self._get_real_object(), spec)

    def __dir__(self):
        return dir(self._get_real_object())

    def __len__(self):
        return len(self._get_real_object())

    def __getitem__(self, key):
        return self._get_real_object()[key]

    def __setitem__(self, key, value):
        self._get_real_object()[key] = value

    def __delitem__(self, key):
        del self._get_real_object()[key]

    def __iter__(self):
        return iter(self._get_real_object())

    def __contains__(self, item):
        return item in self._get_real_object()

    def __call__(self, *args, **kwargs):
        return self._get_real_object()(*args, **kwargs)

    def __bool__(self):
        return bool(self._get_real_object())

    def __hash__(self):
        return hash(self._get_real_object())

    def __index__(self):
        return operator.index(self._get_real_object())

    def __int__(self):
        return int(self._get_real_object())

    def __float__(self):
        return float(self._get_real_object())

    def __enter__(self):
        return self._get_real_object().__enter__()

    def __exit__(self, exc_type, exc_val, exc_tb):
        return self._get_real_object().__exit__(exc_type, exc_val, exc_tb)

    def __reduce_ex__(self, protocol):
        o = self._get_real_object()
        try:
            return o.__reduce_ex__(protocol)
        except Exception as e:
            raise SerializationError(f"Swappable reference target is not serializable: {e}") from e


def _forward(op):
    def method(self, *args):
        return op(self._get_real_object(), *args)
    return method


def _reflect(op):
    def method(self, other):
        return op(other, self._get_real_object())
    return method


_BINARY = {
    "add": operator.add, "sub": operator.sub, "mul": operator.mul, "matmul": operator.matmul,
    "truediv": operator.truediv, "floordiv": operator.floordiv, "mod": operator.mod,
    "divmod": divmod, "pow": pow, "lshift": operator.lshift, "rshift": operator.rshift,
    "and": operator.and_, "xor": operator.xor, "or": operator.or_,
}

for _name, _op in _BINARY.items():
    setattr(SwappableRef, f"__{_name}__", _forward(_op))
    setattr(SwappableRef, f"__r{_name}__", _reflect(_op))

for _name, _op in {
    "eq": operator.eq, "ne": operator.ne, "lt": operator.lt,
    "le": operator.le, "gt": operator.gt, "ge": operator.ge,
    "neg": operator.neg, "pos": operator.pos, "abs": operator.abs, "invert": operator.invert,
}.items():
    setattr(SwappableRef, f"__{_name}__", _forward(_op))


def is_swappable(obj: Any) -> bool:
    # isinstance() is fooled by the __class__ property
    return type(obj) is SwappableRef


def unwrap(obj: Any) -> Any:
    """Return the current target of a swappable reference, or `obj` unchanged."""
    while is_swappable(obj):
        obj = obj._get_real_object()
    return obj
