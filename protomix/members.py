"""Member descriptors.

A :class:`Member` describes one capability supplied to a target type: either a
data member holding a ``value`` or an accessor member built from a ``get``
and/or ``set`` callable.  Visibility and mutability flags travel with it as
plain data and are applied unchanged when the member is defined on a target.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping

from .errors import ProtocolConfigError


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class Member:
    value: Any = UNSET
    get: Callable[[Any], Any] | None = None
    set: Callable[[Any, Any], None] | None = None
    enumerable: bool = False
    writable: bool | None = None
    configurable: bool = False

    def __post_init__(self) -> None:
        if self.is_accessor:
            if self.value is not UNSET:
                raise ProtocolConfigError(
                    "member cannot combine a value with accessor functions"
                )
            # writable does not apply to accessors
            object.__setattr__(self, "writable", None)
        else:
            if self.value is UNSET:
                object.__setattr__(self, "value", None)
            if self.writable is None:
                object.__setattr__(self, "writable", True)

    @property
    def is_accessor(self) -> bool:
        return self.get is not None or self.set is not None

    @property
    def getter_only(self) -> bool:
        return self.get is not None and self.set is None

    @property
    def setter_only(self) -> bool:
        return self.get is None and self.set is not None

    @classmethod
    def coerce(cls, obj: Any) -> "Member":
        """Describe *obj* the way a literal property would be described."""
        if isinstance(obj, Member):
            return obj
        if isinstance(obj, property):
            return cls(get=obj.fget, set=obj.fset, enumerable=True, configurable=True)
        if isinstance(obj, (staticmethod, classmethod)):
            obj = obj.__func__
        return cls(value=obj, enumerable=True, writable=True, configurable=True)


def members_of(source: Mapping[Any, Any] | type) -> Dict[Any, Member]:
    """Return a ``Member`` for every entry of a mapping or class body.

    Dunder attributes of a class (``__module__``, ``__dict__``, ...) are
    skipped; mappings are taken as-is.
    """
    if isinstance(source, type):
        items = {
            name: value
            for name, value in vars(source).items()
            if not (name.startswith("__") and name.endswith("__"))
        }
    else:
        items = dict(source)
    return {key: Member.coerce(value) for key, value in items.items()}


__all__ = ["Member", "UNSET", "members_of"]
