"""Tests Scope / ScopeProvider / ScopeStack — fusion, masquage, mémoïsation."""
import pytest
from page_binding.core.scope import Scope, EMPTY_SCOPE, ScopeProvider, ScopeStack, create_child_scope


# ── create_child_scope ───────────────────────────────────────────────────────

@pytest.mark.parametrize("parent, local", [
    ({}, {}),
    ({"a": 1}, {}),
    ({}, {"a": 1}),
    ({"a": 1, "b": 2}, {"b": 3, "c": 4}),
    ({"item": {"x": 1}, "index": 0}, {"item": {"x": 2}, "index": 5}),
])
def test_local_wins_else_parent(parent, local):
    child = create_child_scope(parent, local)
    for k in set(parent) | set(local):
        expected = local[k] if k in local else parent[k]
        assert child[k] == expected


def test_parent_bindings_stay_visible():
    child = create_child_scope({"user": "Ana", "site": "ACME"}, {"product": "Lamp"})
    assert child.lookup("user") == "Ana"
    assert child.lookup("product") == "Lamp"


def test_lookup_unknown_is_none():
    assert Scope({"a": 1}).lookup("zzz") is None
    assert EMPTY_SCOPE.lookup("a") is None


def test_none_parent_and_local():
    assert dict(create_child_scope(None, None)) == {}


def test_inputs_not_mutated():
    parent, local = {"a": 1}, {"b": 2}
    create_child_scope(parent, local)
    assert parent == {"a": 1}
    assert local == {"b": 2}


def test_nested_three_levels_shadowing():
    outer = Scope({"item": "outer", "index": 0, "total": 2})
    middle = outer.child({"row": "r1"})
    inner = middle.child({"item": "inner", "index": 4})
    assert inner["item"] == "inner"
    assert inner["index"] == 4
    assert inner["total"] == 2
    assert inner["row"] == "r1"
    # Le scope extérieur n'est pas modifié
    assert outer["item"] == "outer"
    assert outer["index"] == 0
    assert inner.depth == 2
    assert inner.parent is middle
    assert inner.local == {"item": "inner", "index": 4}


def test_scope_is_a_mapping():
    scope = Scope({"a": 1, "b": 2})
    assert len(scope) == 2
    assert set(scope) == {"a", "b"}
    assert scope.get("c", "dflt") == "dflt"
    assert scope.to_dict() == {"a": 1, "b": 2}
    with pytest.raises(KeyError):
        scope["c"]


# ── ScopeProvider ────────────────────────────────────────────────────────────

def test_provider_reuses_scope_when_unchanged():
    parent = Scope({"site": "ACME"})
    items = [{"id": 1}]
    slot = ScopeProvider()
    s1 = slot.provide(parent, {"products": items, "index": 0})
    s2 = slot.provide(parent, {"products": items, "index": 0})
    assert s1 is s2


def test_provider_rebuilds_when_parent_changes():
    slot = ScopeProvider()
    s1 = slot.provide(Scope({"site": "A"}), {"x": 1})
    s2 = slot.provide(Scope({"site": "B"}), {"x": 1})
    assert s1 is not s2
    assert s2["site"] == "B"


def test_provider_rebuilds_when_scalar_changes():
    parent = Scope({})
    slot = ScopeProvider()
    s1 = slot.provide(parent, {"index": 0})
    s2 = slot.provide(parent, {"index": 1})
    assert s1 is not s2
    assert s2["index"] == 1


def test_provider_rebuilds_when_array_reference_changes():
    parent = Scope({})
    slot = ScopeProvider()
    s1 = slot.provide(parent, {"products": [1, 2]})
    s2 = slot.provide(parent, {"products": [1, 2, 3]})
    assert s1 is not s2
    assert s2["products"] == [1, 2, 3]


def test_provider_distinguishes_bool_and_int():
    parent = Scope({})
    slot = ScopeProvider()
    s1 = slot.provide(parent, {"flag": 1})
    s2 = slot.provide(parent, {"flag": True})
    assert s1 is not s2
    assert s2["flag"] is True


def test_provider_rebuilds_when_keys_change():
    parent = Scope({})
    slot = ScopeProvider()
    s1 = slot.provide(parent, {"a": 1})
    s2 = slot.provide(parent, {"a": 1, "b": 2})
    assert s1 is not s2


def test_provider_reset():
    parent = Scope({})
    slot = ScopeProvider()
    s1 = slot.provide(parent, {"a": 1})
    slot.reset()
    assert slot.provide(parent, {"a": 1}) is not s1


# ── ScopeStack ───────────────────────────────────────────────────────────────

def test_stack_push_pop():
    stack = ScopeStack({"site": "ACME"})
    assert stack.depth == 0
    stack.push({"product": "Lamp"})
    assert stack.depth == 1
    assert stack.lookup("site") == "ACME"
    assert stack.lookup("product") == "Lamp"
    stack.pop()
    assert stack.lookup("product") is None


def test_stack_frame_restores_on_exit():
    stack = ScopeStack({"item": "outer"})
    with stack.frame({"item": "inner"}) as scope:
        assert scope["item"] == "inner"
        assert stack.lookup("item") == "inner"
    assert stack.lookup("item") == "outer"
    assert stack.depth == 0


def test_stack_frame_restores_on_error():
    stack = ScopeStack()
    with pytest.raises(RuntimeError):
        with stack.frame({"x": 1}):
            raise RuntimeError("boom")
    assert stack.depth == 0


def test_stack_enter_prebuilt_scope():
    stack = ScopeStack({"a": 1})
    built = stack.current.child({"b": 2})
    with stack.enter(built) as scope:
        assert scope is built
        assert stack.current is built
    assert stack.lookup("b") is None


def test_stack_cannot_pop_root():
    with pytest.raises(IndexError):
        ScopeStack().pop()
