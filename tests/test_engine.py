"""
Tests for the autograd engine: topological order, gradient seeding,
accumulation, caching and deep graphs.
"""

import pytest

from scalar_autograd import MLP, Node, forward, zero_grad


def _assert_topological(order):
    position = {id(v): i for i, v in enumerate(order)}
    for v in order:
        for child in v.operands:
            assert position[id(child)] < position[id(v)]


# ============================================================================
# TOPOLOGICAL ORDER
# ============================================================================

def test_order_is_operand_first_post_order():
    a, b = Node(2.0), Node(3.0)
    c = a * b
    d = c + a
    assert forward(d) == [a, b, c, d]


def test_order_is_topological_for_mlp_loss():
    model = MLP(3, [4, 4, 2], seed=7)
    scores = model.eval([Node(0.2), Node(-0.4), Node(1.1)])
    loss = sum(((1 + (-1.0 * s)).relu() for s in scores), Node(0.0))
    order = forward(loss)
    _assert_topological(order)
    assert order[-1] is loss
    # every parameter feeds the loss exactly once in the order
    ids = [id(v) for v in order]
    assert len(ids) == len(set(ids))
    for p in model.parameters():
        assert id(p) in ids


def test_nodes_deduplicated_by_identity_not_value():
    x, y = Node(2.0), Node(2.0)
    z = x + y
    assert forward(z) == [x, y, z]

    w = x + x
    assert forward(w) == [x, w]


def test_forward_is_idempotent():
    a, b = Node(1.0), Node(-2.0)
    out = (a * b + b).relu()
    assert forward(out) == forward(out)


# ============================================================================
# BACKWARD
# ============================================================================

def test_backward_seeds_root_with_one():
    x = Node(4.0)
    y = x * 3
    y.backward()
    assert y.grad == 1


def test_gradient_accumulates_over_paths():
    x = Node(3.0)
    y = x * x + x * 2
    y.backward()
    assert x.grad == 2 * 3 + 2


def test_reused_operand_in_same_op():
    x = Node(5.0)
    y = x + x
    y.backward()
    assert x.grad == 2


def test_repeated_backward_accumulates_and_zero_grad_resets():
    a, b = Node(2.0), Node(-3.0)
    f = a * b
    f.backward()
    assert a.grad == -3.0

    f.backward()
    assert a.grad == -6.0

    zero_grad(f)
    assert all(v.grad == 0 for v in forward(f))

    f.backward()
    assert a.grad == -3.0
    assert b.grad == 2.0


def test_backward_caches_order_and_force_rebuild_recomputes():
    a = Node(1.0)
    f = a * 2
    f.backward()
    cached = f._topo
    assert cached is not None

    f.zero_grad()
    f.backward()
    assert f._topo is cached

    f.zero_grad()
    f.backward(force_rebuild=True)
    assert f._topo is not cached
    assert f._topo == cached
    assert a.grad == 2


def test_deep_chain_does_not_recurse():
    x = Node(1.0)
    s = x
    for _ in range(5000):
        s = s + x
    s.backward()
    assert s.value == 5001
    assert x.grad == 5001


def test_unrelated_leaf_keeps_zero_grad():
    a = Node(-4.0)
    b = Node(2.0)
    c = (1 + 5 * a).relu()
    c.backward()
    assert c.value == 0
    assert a.grad == 0
    assert b.grad == 0


def test_matches_finite_differences():
    def f(a, b):
        return (a * b + a ** 2) / b - a

    a0, b0, eps = 1.5, -2.0, 1e-6
    a, b = Node(a0), Node(b0)
    out = f(a, b)
    out.backward()

    da = (f(Node(a0 + eps), Node(b0)).value - f(Node(a0 - eps), Node(b0)).value) / (2 * eps)
    db = (f(Node(a0), Node(b0 + eps)).value - f(Node(a0), Node(b0 - eps)).value) / (2 * eps)
    assert a.grad == pytest.approx(da, rel=1e-5)
    assert b.grad == pytest.approx(db, rel=1e-5)
