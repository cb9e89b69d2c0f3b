"""Tests for the hook registry."""

import pytest

from coresitemaps.hooks import HookRegistry


@pytest.fixture
def hooks():
    return HookRegistry()


def test_apply_filters_without_callbacks(hooks):
    assert hooks.apply_filters("anything", 42, "extra") == 42
    assert not hooks.has_filter("anything")


def test_apply_filters_chains_value(hooks):
    hooks.add_filter("number", lambda value: value + 1)
    hooks.add_filter("number", lambda value: value * 10)

    assert hooks.apply_filters("number", 1) == 20
    assert hooks.has_filter("number")


def test_apply_filters_passes_extra_args(hooks):
    hooks.add_filter("max", lambda value, object_type: 50 if object_type == "post" else value)

    assert hooks.apply_filters("max", 2000, "post") == 50
    assert hooks.apply_filters("max", 2000, "user") == 2000


def test_priority_order(hooks):
    """Lower priority runs first; ties keep registration order."""
    calls = []
    hooks.add_filter("seq", lambda v: calls.append("late") or v, priority=20)
    hooks.add_filter("seq", lambda v: calls.append("first") or v)
    hooks.add_filter("seq", lambda v: calls.append("early") or v, priority=5)
    hooks.add_filter("seq", lambda v: calls.append("second") or v)

    hooks.apply_filters("seq", None)
    assert calls == ["early", "first", "second", "late"]


def test_remove_filter(hooks):
    def double(value):
        return value * 2

    hooks.add_filter("number", double)
    assert hooks.remove_filter("number", double)
    assert not hooks.has_filter("number")
    assert hooks.apply_filters("number", 3) == 3

    assert not hooks.remove_filter("number", double)
    assert not hooks.remove_filter("number", double, priority=99)


def test_first_result_returns_first_non_none(hooks):
    hooks.add_filter("pre", lambda *args: None)
    hooks.add_filter("pre", lambda subtype, page: [{"loc": f"{subtype}-{page}"}])
    hooks.add_filter("pre", lambda *args: ["never"])

    assert hooks.first_result("pre", "post", 1) == [{"loc": "post-1"}]


def test_first_result_keeps_falsy_values(hooks):
    """An empty list or zero still counts as a result."""
    hooks.add_filter("pre", lambda *args: [])
    assert hooks.first_result("pre") == []

    hooks.add_filter("zero", lambda *args: 0)
    assert hooks.first_result("zero") == 0


def test_first_result_without_callbacks(hooks):
    assert hooks.first_result("pre", "post", 1) is None


def test_do_action(hooks):
    seen = []
    hooks.add_action("init", lambda server: seen.append(server))
    hooks.add_action("init", lambda server: seen.append("again"))

    assert hooks.do_action("init", "server") is None
    assert seen == ["server", "again"]


def test_callback_errors_propagate(hooks):
    def broken(value):
        raise RuntimeError("boom")

    hooks.add_filter("broken", broken)
    with pytest.raises(RuntimeError):
        hooks.apply_filters("broken", 1)
