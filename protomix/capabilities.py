"""Capability tokens used as protocol member keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Union


@dataclass(frozen=True, eq=False)
class Token:
    """Opaque capability identity carrying an optional display label.

    Tokens compare and hash by identity, so two tokens sharing a label are
    still distinct capabilities.
    """

    label: str | None = None

    @property
    def description(self) -> str | None:
        return self.label

    def __str__(self) -> str:
        return f"Token({'' if self.label is None else self.label})"

    def __repr__(self) -> str:
        return f"<{self}>"


# A member key is a token or a literal attribute name.
Key = Union[Token, Hashable]

__all__ = ["Token", "Key"]
