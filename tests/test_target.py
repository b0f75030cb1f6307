import pytest

from protomix import (
    ClassTarget,
    EngineConfig,
    Member,
    MemberDefinitionError,
    Protocol,
    TargetType,
    UnsatisfiedProtocolError,
    defines,
    get_member,
    get_static_member,
    member_keys,
    members_of,
    set_config,
    set_member,
)


def test_static_inheritance_is_configurable():
    P = Protocol(static_requires={"s": None})

    class Base:
        @defines(P.s, static=True)
        def s(cls):
            return cls.__name__

    class Sub(Base):
        pass

    assert ClassTarget(Sub).has_type_member(P.s)
    assert not ClassTarget(Sub, inherit_static=False).has_type_member(P.s)

    target = ClassTarget(Sub, inherit_static=False)
    with pytest.raises(UnsatisfiedProtocolError):
        Protocol.implement(target, P)
    assert Protocol.implement(ClassTarget(Sub), P) is not Sub


def test_static_inheritance_follows_engine_config():
    set_config(EngineConfig(inherit_static=False))
    assert ClassTarget(object).inherit_static is False
    set_config(EngineConfig())
    assert ClassTarget(object).inherit_static is True


def test_implement_returns_the_adapter_it_was_given():
    class C:
        pass

    target = ClassTarget(C)
    assert Protocol.implement(target, Protocol()) is target
    assert target.subject is C


def test_type_level_functions_bind_to_the_class():
    P = Protocol(static_provides=members_of({"make": lambda cls: cls.__name__}))

    class Base:
        pass

    class Sub(Base):
        pass

    Protocol.implement(Base, P)
    assert get_static_member(Base, P.make)() == "Base"
    assert get_static_member(Sub, P.make)() == "Sub"


def test_tagged_static_and_class_methods():
    P = Protocol(static_requires={"a": None, "b": None})

    class C:
        @defines(P.a, static=True)
        @staticmethod
        def a():
            return "static"

        @defines(P.b, static=True)
        @classmethod
        def b(cls):
            return cls

    Protocol.implement(C, P)
    assert get_static_member(C, P.a)() == "static"
    assert get_static_member(C, P.b)() is C


def test_tagged_property_is_an_accessor():
    P = Protocol(requires={"size": None})

    class C:
        @defines(P.size)
        @property
        def size(self):
            return 3

    Protocol.implement(C, P)
    assert get_member(C(), P.size) == 3


def test_accessor_members():
    store = {}
    P = Protocol(
        provides={
            "value": Member(
                get=lambda self: store.get(id(self), 0),
                set=lambda self, v: store.__setitem__(id(self), v),
            ),
            "readonly": Member(get=lambda self: "ro"),
            "writeonly": Member(set=lambda self, v: None),
        }
    )

    class C:
        pass

    Protocol.implement(C, P)
    obj = C()
    assert get_member(obj, P.value) == 0
    set_member(obj, P.value, 5)
    assert get_member(obj, P.value) == 5
    with pytest.raises(MemberDefinitionError):
        set_member(obj, P.readonly, 1)
    with pytest.raises(AttributeError):
        get_member(obj, P.writeonly)


def test_writable_flag_is_honoured():
    P = Protocol(
        provides={
            "fixed": Member(value=1, writable=False),
            "free": Member(value=1),
        }
    )

    class C:
        pass

    Protocol.implement(C, P)
    obj = C()
    with pytest.raises(MemberDefinitionError, match="read-only"):
        set_member(obj, P.fixed, 2)
    set_member(obj, P.free, 2)
    assert get_member(obj, P.free) == 2
    assert get_member(C(), P.free) == 1


def test_non_configurable_members_cannot_be_redefined():
    P = Protocol(provides={"a": Member(value=1)})

    class C:
        pass

    Protocol.implement(C, P)
    with pytest.raises(MemberDefinitionError):
        ClassTarget(C).define_instance_members({P.a: Member(value=2)})

    Q = Protocol(provides={"b": Member(value=1, configurable=True)})
    Protocol.implement(C, Q)
    ClassTarget(C).define_instance_members({Q.b: Member(value=2)})
    assert get_member(C(), Q.b) == 2


def test_member_keys_lists_enumerable_members():
    P = Protocol(
        provides={"shown": Member(value=1, enumerable=True), "hidden": Member(value=2)},
        static_provides={"cls_shown": Member(value=3, enumerable=True)},
    )

    class C:
        pass

    Protocol.implement(C, P)
    assert member_keys(C) == [P.shown]
    assert member_keys(C, static=True) == [P.cls_shown]


def test_missing_member_lookup_raises_attribute_error():
    class C:
        pass

    with pytest.raises(AttributeError):
        get_member(C(), Protocol(requires={"a": None}).a)


def test_custom_target_types_are_supported():
    class Registry(TargetType):
        def __init__(self):
            self.instance = {}
            self.static = {}

        @property
        def subject(self):
            return self

        def is_constructible(self):
            return True

        def has_instance_member(self, key):
            return key in self.instance

        def has_type_member(self, key):
            return key in self.static

        def define_instance_members(self, members):
            self.instance.update(members)

        def define_type_members(self, members):
            self.static.update(members)

    P = Protocol(requires={"a": None}, provides={"b": 1}, static_provides={"c": 2})
    registry = Registry()
    registry.instance[P.a] = Member(value=0)
    assert Protocol.implement(registry, P) is registry
    assert registry.instance[P.b].value == 1
    assert registry.static[P.c].value == 2
