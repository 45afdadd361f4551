import random

import pytest

from scalargrad.engine import Value
from scalargrad.nn import MLP, Layer, Neuron


def test_neuron_parameters_are_weights_then_bias():
    neuron = Neuron(3, rng=random.Random(1))
    params = neuron.parameters()
    assert len(params) == len(neuron.w) + 1
    assert params[:-1] == neuron.w
    assert params[-1] is neuron.b


def test_neuron_initial_values():
    neuron = Neuron(50, rng=random.Random(7))
    assert all(-1.0 <= w.data <= 1.0 for w in neuron.w)
    assert neuron.b.data == 0.0


def test_linear_neuron_output():
    neuron = Neuron(1, non_linear=False, rng=random.Random(0))
    neuron.b.data = 0.25
    out = neuron([1.0])
    assert out.data == pytest.approx(neuron.w[0].data + neuron.b.data)


def test_non_linear_neuron_clips_negative():
    neuron = Neuron(1, non_linear=True, rng=random.Random(0))
    neuron.w[0].data = -1.0
    assert neuron([1.0]).data == 0.0


def test_neuron_rejects_too_many_inputs():
    neuron = Neuron(2, rng=random.Random(0))
    with pytest.raises(ValueError):
        neuron([1.0, 2.0, 3.0])


def test_neuron_rejects_negative_size():
    with pytest.raises(ValueError):
        Neuron(-1)


def test_layer_output_size_and_parameters():
    layer = Layer(3, 5, rng=random.Random(2))
    out = layer([Value(0.1), Value(0.2), Value(0.3)])
    assert len(out) == len(layer.neurons)
    assert len(layer.parameters()) == sum(len(n.parameters()) for n in layer.neurons)


def test_mlp_shapes():
    model = MLP(3, [4, 2], rng=random.Random(3))
    assert [len(layer.neurons) for layer in model.layers] == [4, 2]
    assert len(model.layers[1].neurons[0].w) == len(model.layers[0].neurons)
    assert len(model.parameters()) == sum(len(layer.parameters()) for layer in model.layers)
    assert len(model([0.5, -0.5, 1.0])) == len(model.layers[-1].neurons)


def test_mlp_activation_pattern():
    model = MLP(2, [3, 3, 1], rng=random.Random(4))
    flags = [layer.neurons[0].non_linear for layer in model.layers]
    assert flags == [True, True, False]


def test_mlp_last_layer_is_linear():
    model = MLP(1, [1, 1], rng=random.Random(5))
    model.layers[0].neurons[0].w[0].data = 1.0
    model.layers[1].neurons[0].w[0].data = -1.0
    assert model([1.0])[0].data < 0


def test_single_layer_mlp_is_non_linear():
    model = MLP(1, [1], rng=random.Random(5))
    model.layers[0].neurons[0].w[0].data = -1.0
    assert model([1.0])[0].data == 0.0


def test_seeded_models_are_reproducible():
    first = MLP(2, [4, 1], rng=random.Random(42))
    second = MLP(2, [4, 1], rng=random.Random(42))
    assert [p.data for p in first.parameters()] == [p.data for p in second.parameters()]


def test_zero_grad_resets_all_gradients():
    model = MLP(2, [4, 1], rng=random.Random(6))
    for layer in model.layers:
        for neuron in layer.neurons:
            neuron.b.data = 1.0
    model([0.3, 0.7])[0].backward()
    assert any(p.grad != 0.0 for p in model.parameters())
    model.zero_grad()
    assert all(p.grad == 0.0 for p in model.parameters())