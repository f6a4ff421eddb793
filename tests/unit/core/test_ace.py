from dataclasses import FrozenInstanceError

import pytest

from aclx.core.ace import Ace
from aclx.core.errors import AclError, InvalidStrategyError
from aclx.core.model import UNSET
from aclx.core.sameness import DEFAULT_SAMENESS_TESTER
from aclx.core.strategy import DENY, PERMIT, CallbackStrategy


class OnlyPermits:
    def permits(self, access, data=None):
        return True


class NotCallable:
    permits = True
    denies = False


@pytest.mark.parametrize("strategy", [None, object(), OnlyPermits(), NotCallable(), "PERMIT"])
def test_invalid_strategy_fails_construction(strategy):
    with pytest.raises(InvalidStrategyError) as ei:
        Ace.of(strategy)
    assert isinstance(ei.value, AclError)
    assert isinstance(ei.value, TypeError)
    assert "invalid strategy" in str(ei.value)


def test_invalid_strategy_reports_missing_capabilities():
    with pytest.raises(InvalidStrategyError) as ei:
        Ace.of(OnlyPermits())
    assert ei.value.missing == ("denies",)


def test_factories_and_defaults():
    a = Ace.permitting(principal="p", securable="s", action="read")
    assert a.strategy is PERMIT
    assert (a.principal, a.securable, a.action) == ("p", "s", "read")
    assert a.sameness_tester is DEFAULT_SAMENESS_TESTER

    d = Ace.denying()
    assert d.strategy is DENY
    assert d.principal is UNSET and d.securable is UNSET and d.action is UNSET


def test_entry_is_frozen():
    a = Ace.permitting(principal="p")
    with pytest.raises(FrozenInstanceError):
        a.principal = "q"  # type: ignore


def test_unset_fields_are_wildcards():
    a = Ace.permitting()
    assert a.applies_to(principal="anyone", securable="anything", action="any-action")
    assert a.applies_to_principal(None)
    assert a.applies_to_action(0)
    assert a.applies_to_securable("")


def test_each_dimension_independently():
    a = Ace.permitting(principal="p", securable="s", action="read")
    assert a.applies_to(principal="p", securable="s", action="read")
    assert not a.applies_to(principal="q", securable="s", action="read")
    assert not a.applies_to(principal="p", securable="t", action="read")
    assert not a.applies_to(principal="p", securable="s", action="write")

    only_action = Ace.permitting(action="read")
    assert only_action.applies_to(principal="anyone", securable="anything", action="read")
    assert not only_action.applies_to(principal="anyone", securable="anything", action="write")


def test_falsy_identifiers_are_not_wildcards():
    a = Ace.permitting(principal=0, action="")
    assert a.applies_to_principal(0)
    assert not a.applies_to_principal(1)
    assert a.applies_to_action("")
    assert not a.applies_to_action("read")


def test_missing_query_field_does_not_apply_to_specific_entry():
    a = Ace.permitting(principal="p", securable="s", action="read")
    assert not a.applies_to(principal="p", action="read")
    assert not a.permits(principal="p", action="read")
    assert not a.denies(principal="p", action="read")


def test_applies_to_strategy_uses_sameness():
    a = Ace.permitting()
    assert a.applies_to_strategy(PERMIT)
    assert not a.applies_to_strategy(DENY)


def test_static_decisions():
    p = Ace.permitting(principal="p", action="read")
    d = Ace.denying(principal="p", action="read")
    assert p.permits("p", "read", "s") is True
    assert p.denies("p", "read", "s") is False
    assert d.permits("p", "read", "s") is False
    assert d.denies("p", "read", "s") is True
    # not applicable
    assert p.permits("q", "read", "s") is False
    assert d.denies("p", "write", "s") is False


def test_custom_strategy_denial_vetoes_entry_permission():
    both = CallbackStrategy(permits=lambda a, d: True, denies=lambda a, d: d == "veto")
    a = Ace.of(both)
    assert a.permits("p", "read", "s") is True
    assert a.permits("p", "read", "s", data="veto") is False
    assert a.denies("p", "read", "s", data="veto") is True


def test_strategy_receives_tuple_and_data():
    calls = []

    def record(access, data):
        calls.append((access.principal, access.action, access.securable, data))
        return False

    a = Ace.of(CallbackStrategy(permits=record, denies=record))
    a.permits("p", "read", "s", {"k": 1})
    assert calls == [("p", "read", "s", {"k": 1}), ("p", "read", "s", {"k": 1})]


def test_strategy_not_consulted_when_entry_does_not_apply():
    def boom(access, data):
        raise AssertionError("should not be called")

    a = Ace.of(CallbackStrategy(permits=boom, denies=boom), principal="p")
    assert a.permits("q", "read", "s") is False
    assert a.denies("q", "read", "s") is False


def test_custom_sameness_tester():
    def case_insensitive(a, b):
        return str(a).lower() == str(b).lower()

    a = Ace.permitting(principal="Alice", sameness_tester=case_insensitive)
    assert a.applies_to_principal("ALICE")
    assert a.permits("alice", "read", "s")
    assert not Ace.permitting(principal="Alice").applies_to_principal("ALICE")


def test_applies_to_takes_keywords_only():
    a = Ace.permitting(principal="p", securable="s", action="read")
    with pytest.raises(TypeError):
        a.applies_to("p", "s", "read")  # type: ignore[misc]
