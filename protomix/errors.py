"""Exception hierarchy for protomix."""

import builtins as _builtins


class ProtocolError(Exception):
    """Base class for all protocol composition errors."""


class ProtocolConfigError(ProtocolError, _builtins.ValueError):
    """Raised when a protocol is declared with an invalid configuration."""


class ConflictingEntryError(ProtocolConfigError):
    """Raised when a member name appears in more than one protocol category."""


class ReservedNameError(ProtocolConfigError):
    """Raised when a provided member uses a reserved name."""


class NotConstructibleError(ProtocolError, _builtins.TypeError):
    """Raised when a protocol is applied to something that is not a type."""


class UnsatisfiedProtocolError(ProtocolError):
    """Raised when a target does not supply every required capability."""

    def __init__(self, missing, target) -> None:
        self.missing = list(missing)
        self.target = target
        labels = ", ".join(str(key) for key in self.missing)
        super().__init__(f"{labels} not implemented by {target!r}")


class MemberDefinitionError(ProtocolError, _builtins.TypeError):
    """Raised when a member cannot be defined or assigned."""


class ConfigError(ProtocolError, _builtins.ValueError):
    """Raised when the engine configuration is malformed."""
