"""Protocol definitions.

A :class:`Protocol` bundles four categories of capabilities:

* ``requires`` / ``static_requires``: keys a target must already define at
  the instance / type level.
* ``provides`` / ``static_provides``: default members the protocol defines on
  the target when applied.

Every entry is addressed by a capability token.  Tokens are created once per
protocol and exposed as attributes (``P.name``) and by subscription
(``P["name"]`` or ``P[token]``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, Mapping, Sequence

from . import applier
from .capabilities import Key, Token
from .errors import ConflictingEntryError, ReservedNameError
from .members import Member
from .target import CONSTRUCTOR_NAME, INSTANCE_NAMESPACE_NAME

logger = logging.getLogger(__name__)


def _has_duplicates(keys: Sequence[Key]) -> bool:
    return len(set(keys)) != len(keys)


class Protocol:
    """Named bundle of required and provided capabilities."""

    __slots__ = (
        "_name",
        "_extends",
        "_requires",
        "_static_requires",
        "_provides",
        "_static_provides",
        "_tokens",
        "__dict__",
    )

    def __init__(
        self,
        name: Any = None,
        extends: Iterable["Protocol"] = (),
        requires: Mapping[Key, Any] | None = None,
        static_requires: Mapping[Key, Any] | None = None,
        provides: Mapping[Key, Any] | None = None,
        static_provides: Mapping[Key, Any] | None = None,
    ) -> None:
        requires = dict(requires or {})
        static_requires = dict(static_requires or {})
        provides = {k: Member.coerce(v) for k, v in (provides or {}).items()}
        static_provides = {k: Member.coerce(v) for k, v in (static_provides or {}).items()}

        if _has_duplicates([*requires, *static_requires, *provides, *static_provides]):
            raise ConflictingEntryError("conflicting protocol entry names")
        if CONSTRUCTOR_NAME in provides:
            raise ReservedNameError(
                f'illegal reserved member name "{CONSTRUCTOR_NAME}" in provides'
            )
        if INSTANCE_NAMESPACE_NAME in static_provides:
            raise ReservedNameError(
                f'illegal reserved member name "{INSTANCE_NAMESPACE_NAME}" in static_provides'
            )

        self._name = None if name is None else str(name)
        self._extends = tuple(extends)
        self._requires = {
            key: self._create_token(key) if value is None else value
            for key, value in requires.items()
        }
        self._static_requires = {
            key: self._create_token(key) if value is None else value
            for key, value in static_requires.items()
        }
        self._provides = provides
        self._static_provides = static_provides

        self._tokens: Dict[Key, Key] = {}
        self._tokens.update(self._requires)
        self._tokens.update(self._static_requires)
        for key, member in (*provides.items(), *static_provides.items()):
            self._tokens[key] = self._create_token(key, member)
        # string keys double as attributes; tokens are reachable via self[token]
        for key, token in self._tokens.items():
            if isinstance(key, str):
                self.__dict__[key] = token

        logger.debug(
            "created protocol %s with %d entries extending %d protocol(s)",
            self._name or "<anonymous>",
            len(self._tokens),
            len(self._extends),
        )

    def _create_token(self, key: Key, member: Member | None = None) -> Token:
        if isinstance(key, Token):
            return key
        label = str(key) if self._name is None else f"{self._name}.{key}"
        if member is not None and member.getter_only:
            label = f"get {label}"
        elif member is not None and member.setter_only:
            label = f"set {label}"
        return Token(label)

    def __getitem__(self, key: Key) -> Key:
        return self._tokens[key]

    def __contains__(self, key: object) -> bool:
        return key in self._tokens

    def __iter__(self) -> Iterator[Key]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        if self._name is None:
            return f"<Protocol at {id(self):#x}>"
        return f"<Protocol {self._name}>"

    @staticmethod
    def implement(target: Any, *protocols: "Protocol") -> Any:
        """Apply *protocols* to *target* in order and return *target*."""
        return applier.implement(target, *protocols)


__all__ = ["Protocol"]
