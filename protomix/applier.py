"""Mixing protocols into target types."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from .capabilities import Key
from .errors import NotConstructibleError, UnsatisfiedProtocolError
from .members import Member
from .resolver import collect, unimplemented
from .target import TargetType, as_target

logger = logging.getLogger(__name__)


def _fold(entries: List[Tuple[Key, Member]]) -> Dict[Key, Member]:
    # right to left, so protocols nearer the root overwrite their ancestors
    folded: Dict[Key, Member] = {}
    for key, member in reversed(entries):
        folded[key] = member
    return folded


def _mixin(target: TargetType, protocol: Any) -> None:
    missing = unimplemented(target, protocol)
    if missing:
        logger.debug("%r does not satisfy %r: %s", target.subject, protocol, missing)
        raise UnsatisfiedProtocolError(missing, target.subject)

    instance_members = collect(
        protocol,
        lambda p: [
            (p._tokens[key], member)
            for key, member in p._provides.items()
            if not target.has_instance_member(p._tokens[key])
        ],
    )
    target.define_instance_members(_fold(instance_members))

    type_members = collect(
        protocol,
        lambda p: [
            (p._tokens[key], member)
            for key, member in p._static_provides.items()
            if not target.has_type_member(p._tokens[key])
        ],
    )
    target.define_type_members(_fold(type_members))
    logger.debug("applied %r to %r", protocol, target.subject)


def implement(target: Any, *protocols: Any) -> Any:
    """Apply each protocol to *target* in order.

    *target* is a class or a :class:`~protomix.target.TargetType`; the value
    passed in is returned so calls can be chained.  A protocol that is not
    satisfied raises :class:`UnsatisfiedProtocolError`; protocols applied
    before it in the same call stay applied.
    """
    adapter = as_target(target)
    if not adapter.is_constructible():
        raise NotConstructibleError("first parameter must be a constructible type")
    for protocol in protocols:
        _mixin(adapter, protocol)
    return target


__all__ = ["implement"]
