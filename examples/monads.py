"""Minimal implementation pattern with a small Maybe type."""

import protomix as pm
from protomix import Protocol, defines, get_member

Functor = Protocol(name="Functor", requires={"map": None})
Monad = Protocol(
    name="Monad",
    extends=[Functor],
    requires={"unit": None, "bind": None, "join": None},
)
MonadViaBind = Protocol(
    extends=[Monad],
    provides={
        Monad.join: lambda self: get_member(self, Monad.bind)(lambda inner: inner),
    },
)


class Maybe:
    def __init__(self, value=None):
        self.value = value

    def __repr__(self):
        return f"Maybe({self.value!r})"

    @defines(Functor.map)
    def map(self, fn):
        return self if self.value is None else Maybe(fn(self.value))

    @defines(Monad.unit)
    def unit(self, value):
        return Maybe(value)

    @defines(Monad.bind)
    def bind(self, fn):
        return self if self.value is None else fn(self.value)


pm.setup_structured_logging()
Protocol.implement(Maybe, MonadViaBind)

nested = Maybe(Maybe(3))
print("Joined:", get_member(nested, Monad.join)())
