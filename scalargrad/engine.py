"""Scalar values that record the operations applied to them and back-propagate gradients."""

from __future__ import annotations

import math
from typing import Callable, Iterable, Union

Operand = Union["Value", float, int]


def _as_value(operand: Operand) -> "Value":
    return operand if isinstance(operand, Value) else Value(operand)


class Value:
    """A scalar node in a computation graph, holding its data and its gradient."""

    __slots__ = ("data", "grad", "prev", "_backward")

    def __init__(self, data: float, prev: Iterable["Value"] = ()) -> None:
        self.data = float(data)
        self.grad = 0.0
        self.prev: tuple[Value, ...] = tuple(prev)
        self._backward: Callable[[], None] | None = None

    def __repr__(self) -> str:
        return f"Value(data={self.data}, grad={self.grad})"

    def __add__(self, other: Operand) -> "Value":
        other = _as_value(other)
        out = Value(self.data + other.data, (self, other))

        def _backward() -> None:
            self.grad += out.grad
            other.grad += out.grad

        out._backward = _backward
        return out

    def __radd__(self, other: Operand) -> "Value":
        return _as_value(other) + self

    def __sub__(self, other: Operand) -> "Value":
        other = _as_value(other)
        out = Value(self.data - other.data, (self, other))

        def _backward() -> None:
            self.grad += out.grad
            other.grad -= out.grad

        out._backward = _backward
        return out

    def __rsub__(self, other: Operand) -> "Value":
        return _as_value(other) - self

    def __mul__(self, other: Operand) -> "Value":
        other = _as_value(other)
        out = Value(self.data * other.data, (self, other))

        def _backward() -> None:
            self.grad += other.data * out.grad
            other.grad += self.data * out.grad

        out._backward = _backward
        return out

    def __rmul__(self, other: Operand) -> "Value":
        return _as_value(other) * self

    def __truediv__(self, other: Operand) -> "Value":
        other = _as_value(other)
        out = Value(self.data / other.data, (self, other))

        def _backward() -> None:
            self.grad += out.grad / other.data
            other.grad -= self.data * out.grad / (other.data * other.data)

        out._backward = _backward
        return out

    def __rtruediv__(self, other: Operand) -> "Value":
        return _as_value(other) / self

    def __neg__(self) -> "Value":
        out = Value(-self.data, (self,))

        def _backward() -> None:
            self.grad -= out.grad

        out._backward = _backward
        return out

    def pow(self, exp: float) -> "Value":
        """Raise to a constant exponent."""
        out = Value(math.pow(self.data, exp), (self,))

        def _backward() -> None:
            self.grad += exp * math.pow(self.data, exp - 1) * out.grad

        out._backward = _backward
        return out

    def __pow__(self, exp: float) -> "Value":
        return self.pow(exp)

    def relu(self) -> "Value":
        """Rectified linear unit: max(0, data)."""
        out = Value(max(0.0, self.data), (self,))

        def _backward() -> None:
            self.grad += float(self.data > 0) * out.grad

        out._backward = _backward
        return out

    def _topological_order(self) -> list["Value"]:
        order: list[Value] = []
        visited: set[Value] = set()
        stack = [(self, iter(self.prev))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if child not in visited:
                    stack.append((child, iter(child.prev)))
                    break
            else:
                stack.pop()
                if node not in visited:
                    visited.add(node)
                    order.append(node)
        return order

    def backward(self) -> None:
        """Set this value's gradient to one and propagate gradients to every ancestor."""
        self.grad = 1.0
        for node in reversed(self._topological_order()):
            if node._backward is not None:
                node._backward()