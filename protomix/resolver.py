"""Extends-graph traversal and satisfiability checks."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List

from .capabilities import Key
from .target import TargetType


def collect(protocol: Any, selector: Callable[[Any], Iterable[Any]]) -> List[Any]:
    """Apply *selector* to *protocol* and then to its ancestors, depth first.

    Parents are visited in declaration order.  A protocol reachable along two
    paths of a diamond contributes twice.
    """
    result = list(selector(protocol))
    for parent in protocol._extends:
        result.extend(collect(parent, selector))
    return result


def provided_tokens(protocol: Any, static: bool = False) -> List[Key]:
    """Tokens of the defaults *protocol* itself declares at one level."""
    provides = protocol._static_provides if static else protocol._provides
    return [protocol._tokens[key] for key in provides]


def unimplemented(target: TargetType, protocol: Any) -> List[Key]:
    """Return the required keys of *protocol*'s graph that *target* lacks.

    A requirement counts as met when the target already defines it, or when
    any protocol in the graph provides it at the same level.
    """
    provided = set(collect(protocol, provided_tokens))
    static_provided = set(collect(protocol, lambda p: provided_tokens(p, static=True)))

    def missing(node: Any) -> List[Key]:
        result = [
            key
            for key in node._requires.values()
            if not target.has_instance_member(key) and key not in provided
        ]
        result.extend(
            key
            for key in node._static_requires.values()
            if not target.has_type_member(key) and key not in static_provided
        )
        return result

    return collect(protocol, missing)


__all__ = ["collect", "provided_tokens", "unimplemented"]
