"""Target type abstraction.

Protocols never touch a class directly.  They go through a :class:`TargetType`
which answers "does this type already define member X" at the instance and at
the type level, and which accepts new member definitions.

:class:`ClassTarget` adapts ordinary Python classes.  Token-keyed members are
kept in member tables stored on each class (one for instance members, one for
type members) and in class bodies tagged with :func:`defines`.  Literal keys
name ordinary class attributes.  Every lookup follows ``klass.__mro__``, so
members inherited from base classes count as defined.
"""

from __future__ import annotations

import abc
import inspect
import logging
import types
from typing import Any, Callable, Dict, Iterator, List, Mapping, Tuple

from .capabilities import Key, Token
from .config import get_config
from .errors import MemberDefinitionError
from .members import Member

logger = logging.getLogger(__name__)

CONSTRUCTOR_NAME = "__init__"
INSTANCE_NAMESPACE_NAME = "__dict__"

_INSTANCE_TABLE = "__protomix_instance_members__"
_TYPE_TABLE = "__protomix_type_members__"
_OVERRIDES = "__protomix_overrides__"
_TAG = "__protomix_defines__"


class TargetType(abc.ABC):
    """Capability lookup and member injection for one target type."""

    @property
    @abc.abstractmethod
    def subject(self) -> Any:
        """The object handed back to callers of ``implement``."""

    @abc.abstractmethod
    def is_constructible(self) -> bool: ...

    @abc.abstractmethod
    def has_instance_member(self, key: Key) -> bool: ...

    @abc.abstractmethod
    def has_type_member(self, key: Key) -> bool: ...

    @abc.abstractmethod
    def define_instance_members(self, members: Mapping[Key, Member]) -> None: ...

    @abc.abstractmethod
    def define_type_members(self, members: Mapping[Key, Member]) -> None: ...


def defines(key: Key, *, static: bool = False) -> Callable[[Any], Any]:
    """Mark a function or property in a class body as defining *key*.

    ``static=True`` declares a type-level member; type-level functions are
    bound to the class when looked up.
    """

    def decorator(obj: Any) -> Any:
        func = (obj.fget or obj.fset) if isinstance(obj, property) else obj
        if isinstance(func, (staticmethod, classmethod)):
            func = func.__func__
        tags: List[Tuple[Key, bool]] = list(getattr(func, _TAG, ()))
        tags.append((key, static))
        setattr(func, _TAG, tags)
        return obj

    return decorator


def _tags(obj: Any) -> Iterator[Tuple[Key, bool]]:
    func = obj
    if isinstance(obj, property):
        func = obj.fget or obj.fset
    elif isinstance(obj, (staticmethod, classmethod)):
        func = obj.__func__
    return iter(getattr(func, _TAG, ()))


def _describe_attribute(obj: Any) -> Member:
    if isinstance(obj, property):
        return Member(get=obj.fget, set=obj.fset, configurable=True)
    return Member(value=obj, writable=True, configurable=True)


def _matches_level(obj: Any, static: bool) -> bool:
    if isinstance(obj, (staticmethod, classmethod)):
        return static
    if not static:
        return True
    # plain data attributes and nested classes are reachable from the class itself
    return not (
        inspect.isfunction(obj)
        or inspect.isdatadescriptor(obj)
        or inspect.ismethoddescriptor(obj)
    )


def _own_table(klass: type, name: str, create: bool = False) -> Dict[Key, Member] | None:
    table = vars(klass).get(name)
    if table is None and create:
        table = {}
        setattr(klass, name, table)
    return table


def _own_member(klass: type, key: Key, static: bool) -> Member | None:
    table = _own_table(klass, _TYPE_TABLE if static else _INSTANCE_TABLE)
    if table is not None and key in table:
        return table[key]
    namespace = vars(klass)
    if isinstance(key, Token):
        for attr in namespace.values():
            for tagged, tagged_static in _tags(attr):
                if tagged is key and tagged_static == static:
                    return _describe_attribute(attr)
        return None
    if not isinstance(key, str) or key not in namespace:
        return None
    attr = namespace[key]
    if not _matches_level(attr, static):
        return None
    return _describe_attribute(attr)


class ClassTarget(TargetType):
    """Adapter exposing a Python class as a protocol target."""

    def __init__(self, klass: Any, inherit_static: bool | None = None) -> None:
        self._klass = klass
        if inherit_static is None:
            inherit_static = get_config().inherit_static
        self.inherit_static = inherit_static

    def __repr__(self) -> str:
        return f"ClassTarget({self._klass!r})"

    @property
    def subject(self) -> Any:
        return self._klass

    def is_constructible(self) -> bool:
        return isinstance(self._klass, type)

    def _lineage(self, static: bool) -> Tuple[type, ...]:
        if static and not self.inherit_static:
            return (self._klass,)
        return self._klass.__mro__

    def find_member(self, key: Key, static: bool = False) -> Tuple[type, Member] | None:
        for klass in self._lineage(static):
            member = _own_member(klass, key, static)
            if member is not None:
                return klass, member
        return None

    def has_instance_member(self, key: Key) -> bool:
        return self.find_member(key) is not None

    def has_type_member(self, key: Key) -> bool:
        return self.find_member(key, static=True) is not None

    def _define(self, members: Mapping[Key, Member], static: bool) -> None:
        if not members:
            return
        table = _own_table(self._klass, _TYPE_TABLE if static else _INSTANCE_TABLE, create=True)
        for key, member in members.items():
            current = _own_member(self._klass, key, static)
            if current is not None and not current.configurable:
                raise MemberDefinitionError(
                    f"cannot redefine non-configurable member {key} on {self._klass!r}"
                )
            table[key] = member
        logger.debug(
            "defined %d %s member(s) on %r",
            len(members),
            "type" if static else "instance",
            self._klass,
        )

    def define_instance_members(self, members: Mapping[Key, Member]) -> None:
        self._define(members, static=False)

    def define_type_members(self, members: Mapping[Key, Member]) -> None:
        self._define(members, static=True)


def as_target(obj: Any) -> TargetType:
    """Wrap *obj* in a :class:`ClassTarget` unless it already is a target."""
    if isinstance(obj, TargetType):
        return obj
    return ClassTarget(obj)


def _bind(value: Any, receiver: Any) -> Any:
    if isinstance(value, staticmethod):
        return value.__func__
    if isinstance(value, classmethod):
        owner = receiver if isinstance(receiver, type) else type(receiver)
        return types.MethodType(value.__func__, owner)
    if inspect.isfunction(value):
        return types.MethodType(value, receiver)
    return value


def _resolve(receiver: Any, target: ClassTarget, key: Key, static: bool) -> Any:
    found = target.find_member(key, static=static)
    if found is None:
        raise AttributeError(f"{target.subject!r} has no member {key}")
    if not isinstance(key, Token):
        return getattr(receiver, key)
    _, member = found
    if member.is_accessor:
        if member.get is None:
            raise AttributeError(f"member {key} of {target.subject!r} has no getter")
        return member.get(receiver)
    return _bind(member.value, receiver)


def get_member(obj: Any, key: Key) -> Any:
    """Look up the instance-level member *key* on *obj*."""
    overrides = getattr(obj, "__dict__", {}).get(_OVERRIDES)
    if overrides is not None and key in overrides:
        return overrides[key]
    return _resolve(obj, ClassTarget(type(obj)), key, static=False)


def get_static_member(klass: type, key: Key) -> Any:
    """Look up the type-level member *key* on *klass*."""
    return _resolve(klass, ClassTarget(klass), key, static=True)


def set_member(obj: Any, key: Key, value: Any) -> None:
    """Assign *value* to the instance-level member *key* of *obj*."""
    found = ClassTarget(type(obj)).find_member(key)
    if found is not None:
        _, member = found
        if member.is_accessor:
            if member.set is None:
                raise MemberDefinitionError(f"member {key} has no setter")
            member.set(obj, value)
            return
        if not member.writable:
            raise MemberDefinitionError(f"member {key} is read-only")
    try:
        namespace = vars(obj)
    except TypeError:
        raise MemberDefinitionError(
            f"{type(obj).__name__} instances cannot hold member overrides"
        ) from None
    namespace.setdefault(_OVERRIDES, {})[key] = value


def describe_member(klass: type, key: Key) -> Member | None:
    """Return the own instance-level ``Member`` of *klass* for *key*."""
    return _own_member(klass, key, static=False)


def describe_static_member(klass: type, key: Key) -> Member | None:
    """Return the own type-level ``Member`` of *klass* for *key*."""
    return _own_member(klass, key, static=True)


def member_keys(klass: type, static: bool = False) -> List[Key]:
    """Own enumerable token keys defined on *klass* through protocols."""
    table = _own_table(klass, _TYPE_TABLE if static else _INSTANCE_TABLE) or {}
    return [key for key, member in table.items() if member.enumerable]


__all__ = [
    "CONSTRUCTOR_NAME",
    "INSTANCE_NAMESPACE_NAME",
    "TargetType",
    "ClassTarget",
    "as_target",
    "defines",
    "get_member",
    "get_static_member",
    "set_member",
    "describe_member",
    "describe_static_member",
    "member_keys",
]
