"""Neurons, layers and multi-layer perceptrons built from scalar values."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Sequence, Union

from scalargrad.engine import Value

Input = Union[Value, float, int]


class Module(ABC):
    """Anything that owns trainable parameters."""

    def zero_grad(self) -> None:
        """Reset every parameter's gradient to zero."""
        for param in self.parameters():
            param.grad = 0.0

    @abstractmethod
    def parameters(self) -> list[Value]:
        """Return the trainable parameters."""


class Neuron(Module):
    """A weighted sum of inputs plus a bias, optionally passed through ReLU."""

    def __init__(
        self,
        in_features: int,
        non_linear: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        if in_features < 0:
            raise ValueError("in_features must not be negative")
        rng = rng if rng is not None else random.Random()
        self.w = [Value(rng.uniform(-1.0, 1.0)) for _ in range(in_features)]
        self.b = Value(0.0)
        self.non_linear = non_linear

    def __call__(self, x: Sequence[Input]) -> Value:
        if len(x) > len(self.w):
            raise ValueError(f"expected at most {len(self.w)} inputs, got {len(x)}")
        out = Value(0.0)
        for weight, xi in zip(self.w, x):
            out = out + weight * xi
        out = out + self.b
        return out.relu() if self.non_linear else out

    def parameters(self) -> list[Value]:
        return [*self.w, self.b]


class Layer(Module):
    """A row of neurons that all see the same inputs."""

    def __init__(
        self,
        in_features: int,
        out_features: int,
        non_linear: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        if out_features < 0:
            raise ValueError("out_features must not be negative")
        rng = rng if rng is not None else random.Random()
        self.neurons = [Neuron(in_features, non_linear, rng) for _ in range(out_features)]

    def __call__(self, x: Sequence[Input]) -> list[Value]:
        return [neuron(x) for neuron in self.neurons]

    def parameters(self) -> list[Value]:
        return [p for neuron in self.neurons for p in neuron.parameters()]


class MLP(Module):
    """Stacked layers; every layer but the last applies ReLU, and a lone layer does too."""

    def __init__(
        self,
        in_features: int,
        out_features: Sequence[int],
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        sizes = [in_features, *out_features]
        last = len(out_features) - 1
        self.layers = [
            Layer(n_in, n_out, non_linear=(index == 0 or index != last), rng=rng)
            for index, (n_in, n_out) in enumerate(zip(sizes, sizes[1:]))
        ]

    def __call__(self, x: Sequence[Input]) -> list:
        out = list(x)
        for layer in self.layers:
            out = layer(out)
        return out

    def parameters(self) -> list[Value]:
        return [p for layer in self.layers for p in layer.parameters()]