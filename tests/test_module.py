"""
Tests for the module hierarchy: Neuron, Layer, MLP.
"""

import numpy as np
import pytest

from scalar_autograd import MLP, Layer, Neuron, Node, ShapeMismatch, argmax_label


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def model():
    return MLP(2, [4, 4, 3], seed=0)


@pytest.fixture
def inputs():
    return [Node(0.5), Node(-1.25)]


# ============================================================================
# PARAMETERS
# ============================================================================

def test_parameter_count(model):
    assert len(model.parameters()) == (2 * 4 + 4) + (4 * 4 + 4) + (4 * 3 + 3) == 55


def test_parameters_order_is_stable(model):
    first = model.parameters()
    second = model.parameters()
    assert [id(p) for p in first] == [id(p) for p in second]

    neuron = model.layers[0].neurons[0]
    assert first[:3] == neuron.weights + [neuron.bias]
    last = model.layers[-1].neurons[-1]
    assert first[-1] is last.bias


def test_parameters_are_distinct_leaves(model):
    params = model.parameters()
    assert len({id(p) for p in params}) == len(params)
    assert all(p.is_leaf for p in params)


def test_initialization_ranges():
    neuron = Neuron(50, rng=np.random.default_rng(1))
    assert all(-1.0 <= w.value <= 1.0 for w in neuron.weights)
    assert neuron.bias.value == 0
    assert len({float(w.value) for w in neuron.weights}) == 50


def test_seed_makes_initialization_reproducible():
    a = MLP(3, [5, 2], seed=42)
    b = MLP(3, [5, 2], seed=42)
    c = MLP(3, [5, 2], seed=43)
    values = lambda m: [float(p.value) for p in m.parameters()]
    assert values(a) == values(b)
    assert values(a) != values(c)


def test_injected_generator_is_used():
    a = Layer(2, 3, rng=np.random.default_rng(9))
    b = Layer(2, 3, rng=np.random.default_rng(9))
    assert [float(p.value) for p in a.parameters()] == [float(p.value) for p in b.parameters()]


# ============================================================================
# EVALUATION
# ============================================================================

def test_neuron_computes_affine_sum_then_relu():
    n = Neuron(2)
    n.weights[0].value = 2.0
    n.weights[1].value = -1.0
    n.bias.value = 0.5
    assert n.eval([Node(3.0), Node(1.0)]).value == 5.5
    assert n.eval([Node(-3.0), Node(1.0)]).value == 0

    linear = Neuron(2, nonlinear=False)
    linear.weights[0].value = 2.0
    linear.weights[1].value = -1.0
    assert linear.eval([-3.0, 1.0]).value == -7.0


def test_neuron_rejects_wrong_input_length():
    n = Neuron(3)
    with pytest.raises(ShapeMismatch):
        n.eval([Node(1.0), Node(2.0)])
    with pytest.raises(ValueError):
        n.eval([Node(1.0)] * 4)
    assert all(p.grad == 0 for p in n.parameters())


def test_only_last_layer_is_linear(model):
    flags = [layer.neurons[0].nonlinear for layer in model.layers]
    assert flags == [True, True, False]


def test_mlp_output_shape_and_chaining(model, inputs):
    scores = model.eval(inputs)
    assert len(scores) == 3
    assert all(isinstance(s, Node) for s in scores)

    manual = inputs
    for layer in model.layers:
        manual = layer.eval(manual)
    assert [s.value for s in scores] == [m.value for m in manual]
    assert [s.value for s in model(inputs)] == [s.value for s in scores]


def test_mlp_accepts_raw_numbers(model):
    from_nodes = model.eval([Node(0.5), Node(-1.25)])
    from_floats = model.eval([0.5, -1.25])
    assert [s.value for s in from_nodes] == [s.value for s in from_floats]


def test_mlp_requires_layers():
    with pytest.raises(ValueError):
        MLP(2, [])


# ============================================================================
# GRADIENTS
# ============================================================================

def test_zero_grad_idempotence(model, inputs):
    for _ in range(2):
        scores = model.eval(inputs)
        loss = sum(((s - 1) ** 2 for s in scores), Node(0.0))
        loss.backward()
    assert any(p.grad != 0 for p in model.parameters())

    model.zero_grad()
    assert all(p.grad == 0 for p in model.parameters())
    model.zero_grad()
    assert all(p.grad == 0 for p in model.parameters())


def test_bias_gradient_of_linear_output():
    m = MLP(1, [1], seed=0)
    (score,) = m.eval([Node(2.0)])
    score.backward()
    weight, bias = m.parameters()
    assert bias.grad == 1
    assert weight.grad == 2.0


# ============================================================================
# DESCRIPTIONS / PREDICTION
# ============================================================================

def test_reprs():
    assert repr(Neuron(3)) == "ReLUNeuron(3)"
    assert repr(Neuron(2, nonlinear=False)) == "LinearNeuron(2)"
    assert repr(Layer(2, 2)) == "Layer of [ReLUNeuron(2), ReLUNeuron(2)]"
    assert repr(MLP(1, [2, 1])) == "MLP of [Layer of [ReLUNeuron(1), ReLUNeuron(1)], Layer of [LinearNeuron(2)]]"


def test_argmax_label_is_one_based():
    assert argmax_label([Node(0.1), Node(3.0), Node(-1.0)]) == 2
    assert argmax_label([-3.0, -1.0, -2.0]) == 2
    assert argmax_label([5.0, 5.0]) == 1
    with pytest.raises(ValueError):
        argmax_label([])
