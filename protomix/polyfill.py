"""Process-wide registration of the protocol engine.

The engine is published on :mod:`builtins` under the configured global name
(``Protocol`` by default) so code that never imports :mod:`protomix` can still
reach it.
"""

from __future__ import annotations

import builtins
import logging
from typing import Any

from .config import get_config
from .protocol import Protocol

logger = logging.getLogger(__name__)


def _is_compatible(candidate: Any) -> bool:
    return isinstance(candidate, type) and callable(getattr(candidate, "implement", None))


def get_default_implementation() -> Any:
    """Return the engine already published globally, else :class:`Protocol`."""
    candidate = getattr(builtins, get_config().global_name, None)
    return candidate if _is_compatible(candidate) else Protocol


def install_globally() -> Any:
    """Publish the default implementation on :mod:`builtins` once."""
    name = get_config().global_name
    impl = get_default_implementation()
    if getattr(builtins, name, None) is not impl:
        setattr(builtins, name, impl)
        logger.debug("installed %r as builtins.%s", impl, name)
    return impl


__all__ = ["get_default_implementation", "install_globally"]
