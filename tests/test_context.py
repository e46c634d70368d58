import pytest

from webnav.navigation.context import NODES, NEGATE, NavigationContext


def test_clone_is_shallow():
    ctx = NavigationContext()
    nodes = ("a", "b")
    ctx.set_persistent(NODES, nodes)
    ctx.set_ephemeral_marker(NEGATE)

    clone = ctx.clone()
    assert clone is not ctx
    assert clone.get_persistent(NODES) is nodes
    assert clone.has_ephemeral(NEGATE)


def test_clone_has_independent_maps():
    ctx = NavigationContext()
    ctx.set_persistent("key", 1)
    clone = ctx.clone()

    clone.set_persistent("key", 2)
    clone.set_persistent("other", 3)
    clone.clear_ephemeral()
    ctx.set_ephemeral("flag", "x")

    assert ctx.get_persistent("key") == 1
    assert ctx.get_persistent("other") is None
    assert not clone.has_ephemeral("flag")


def test_lists_are_stored_as_tuples():
    ctx = NavigationContext()
    nodes = [1, 2, 3]
    ctx.set_persistent(NODES, nodes)
    nodes.append(4)
    assert ctx.get_persistent(NODES) == (1, 2, 3)


def test_views_are_read_only():
    ctx = NavigationContext()
    ctx.set_persistent("key", 1)
    with pytest.raises(TypeError):
        ctx.persistent["key"] = 2
    with pytest.raises(TypeError):
        ctx.ephemeral["key"] = 2
    assert dict(ctx.persistent) == {"key": 1}


def test_ephemeral_markers():
    ctx = NavigationContext()
    assert not ctx.has_ephemeral(NEGATE)
    ctx.set_ephemeral_marker(NEGATE)
    assert ctx.has_ephemeral(NEGATE)
    ctx.set_ephemeral("value", None)
    assert not ctx.has_ephemeral("value")
    assert ctx.get_ephemeral("missing", "default") == "default"

    ctx.clear_ephemeral()
    assert not ctx.has_ephemeral(NEGATE)
    assert dict(ctx.ephemeral) == {}
