"""Tests for the Buildable mixin."""

import gc
import weakref
from dataclasses import dataclass

import pytest

from variantkit import (
    NO_MATCH,
    Buildable,
    DecisionPolicy,
    InvalidDecisionError,
    Match,
    RegistrySealedError,
    ResolverConfig,
    get_registry,
)


@dataclass
class User:
    name: str
    is_admin: bool = False


def test_subclass_gets_registry_at_definition():
    class Box(Buildable):
        pass

    assert get_registry().is_registered(Box)
    assert Box.builders() == ()
    assert Box.resolve_variant(User("ann")) is Box


def test_build_decorator_registers_and_returns_function():
    class Box(Buildable):
        pass

    class AdminBox(Box):
        pass

    @Box.build
    def admins(user, **options):
        return Match(AdminBox) if user.is_admin else NO_MATCH

    assert Box.builders() == (admins,)
    assert admins(User("root", is_admin=True)) == Match(AdminBox)


def test_resolve_variant_ors_deciders_in_order():
    class UserInfoBox(Buildable):
        pass

    class AuthorizedUserBox(UserInfoBox):
        pass

    class AdminUserBox(UserInfoBox):
        pass

    @UserInfoBox.build
    def signed_in(user, **options):
        return AuthorizedUserBox if options.get("is_signed_in") else None

    @UserInfoBox.build
    def admins(user, **options):
        return AdminUserBox if user.is_admin else None

    admin = User("root", is_admin=True)

    assert UserInfoBox.resolve_variant(admin, is_signed_in=True) is AuthorizedUserBox
    assert UserInfoBox.resolve_variant(admin) is AdminUserBox
    assert UserInfoBox.resolve_variant(User("guest")) is UserInfoBox


def test_subclasses_do_not_inherit_deciders():
    class Box(Buildable):
        pass

    class AdminBox(Box):
        pass

    class RedBox(Box):
        pass

    Box.build(lambda user: AdminBox)

    assert len(Box.builders()) == 1
    assert RedBox.builders() == ()
    assert RedBox.resolve_variant(User("ann")) is RedBox


def test_inherit_deciders_copies_parent_deciders():
    class Box(Buildable):
        pass

    class AdminBox(Box):
        pass

    def admins(user):
        return AdminBox if user.is_admin else None

    Box.build(admins)

    class StaffBox(Box, inherit_deciders=True):
        pass

    assert StaffBox.builders() == (admins,)
    assert StaffBox.resolve_variant(User("root", is_admin=True)) is AdminBox

    # Copy, not shared: later parent registration is not seen by the child
    Box.build(lambda user: None)
    assert len(Box.builders()) == 2
    assert StaffBox.builders() == (admins,)


def test_child_registration_does_not_touch_parent():
    class Box(Buildable):
        pass

    class Child(Box):
        pass

    Child.build(lambda user: None)

    assert Box.builders() == ()


def test_seal_deciders():
    class Box(Buildable):
        pass

    Box.seal_deciders()

    with pytest.raises(RegistrySealedError):
        Box.build(lambda user: None)


def test_resolver_config_class_attribute():
    class Box(Buildable):
        resolver_config = ResolverConfig(decision_policy=DecisionPolicy.LENIENT)

    class StrictBox(Buildable):
        pass

    Box.build(lambda user: "nope")
    StrictBox.build(lambda user: "nope")

    with pytest.warns(UserWarning):
        assert Box.resolve_variant(User("ann")) is Box
    with pytest.raises(InvalidDecisionError):
        StrictBox.resolve_variant(User("ann"))


def test_decider_error_propagates_from_resolve_variant():
    class Box(Buildable):
        pass

    @Box.build
    def broken(user):
        raise KeyError("missing")

    with pytest.raises(KeyError, match="missing"):
        Box.resolve_variant(User("ann"))


def test_explain_variant():
    class Box(Buildable):
        pass

    class AdminBox(Box):
        pass

    @Box.build
    def admins(user):
        return AdminBox if user.is_admin else None

    trace = Box.explain_variant(User("root", is_admin=True))

    assert trace.resolved is AdminBox
    assert trace.matched_index == 0
    assert trace.matched_decider is not None and trace.matched_decider.endswith("admins")


def test_resolve_variant_warning_points_at_caller():
    class Box(Buildable):
        resolver_config = ResolverConfig(decision_policy=DecisionPolicy.LENIENT)

    Box.build(lambda user: 42)

    with pytest.warns(UserWarning) as record:
        Box.resolve_variant(User("ann"))
        Box.explain_variant(User("ann"))

    assert [w.filename for w in record] == [__file__, __file__]


def _make_box_family():
    class Box(Buildable):
        pass

    class AdminBox(Box):
        pass

    @Box.build
    def admins(user):
        return AdminBox if user.is_admin else None

    Box.resolve_variant(User("root", is_admin=True))
    return weakref.ref(Box), weakref.ref(AdminBox)


def test_classes_are_collected_with_their_registry():
    """The global type registry does not keep Buildable classes alive.

    Why: classes built in factories, functions and tests must be freed; the
    registry belongs to its class.
    """
    box_ref, admin_ref = _make_box_family()
    gc.collect()

    assert box_ref() is None
    assert admin_ref() is None


def test_empty_subclass_is_collected():
    def make():
        class Temp(Buildable):
            pass

        return weakref.ref(Temp)

    temp_ref = make()
    gc.collect()

    assert temp_ref() is None
