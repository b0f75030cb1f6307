"""protomix package init.

Protocols describe what a class must already define and what defaults they
add to it; :meth:`Protocol.implement` checks the former and mixes in the
latter without touching the class hierarchy.
"""

from .applier import implement  # noqa: F401
from .capabilities import Key, Token  # noqa: F401
from .config import EngineConfig, get_config, load_config, set_config  # noqa: F401
from .errors import (
    ConfigError,
    ConflictingEntryError,
    MemberDefinitionError,
    NotConstructibleError,
    ProtocolConfigError,
    ProtocolError,
    ReservedNameError,
    UnsatisfiedProtocolError,
)
from .logging import configure_logging, setup_structured_logging  # noqa: F401
from .members import UNSET, Member, members_of  # noqa: F401
from .polyfill import get_default_implementation, install_globally  # noqa: F401
from .protocol import Protocol
from .target import (  # noqa: F401
    ClassTarget,
    TargetType,
    defines,
    describe_member,
    describe_static_member,
    get_member,
    get_static_member,
    member_keys,
    set_member,
)

implementation = Protocol

__all__ = [
    "Protocol",
    "implement",
    "implementation",
    "Token",
    "Key",
    "Member",
    "UNSET",
    "members_of",
    "TargetType",
    "ClassTarget",
    "defines",
    "get_member",
    "get_static_member",
    "set_member",
    "describe_member",
    "describe_static_member",
    "member_keys",
    "get_default_implementation",
    "install_globally",
    "EngineConfig",
    "get_config",
    "set_config",
    "load_config",
    "ProtocolError",
    "ProtocolConfigError",
    "ConflictingEntryError",
    "ReservedNameError",
    "NotConstructibleError",
    "UnsatisfiedProtocolError",
    "MemberDefinitionError",
    "ConfigError",
    "setup_structured_logging",
    "configure_logging",
]
