"""Train a small network with hinge loss on two-feature labelled points."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence

from scalargrad.engine import Value
from scalargrad.nn import MLP

Sample = tuple[tuple[float, float], float]


@dataclass(frozen=True)
class StepResult:
    """Loss and accuracy (in percent) measured at one training step."""

    step: int
    loss: float
    accuracy: float


def load_data(path: str) -> list[Sample]:
    """Read whitespace-separated ``x1 x2 y`` triples, stopping at the first unreadable number."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    numbers: list[float] = []
    for token in tokens:
        try:
            numbers.append(float(token))
        except ValueError:
            break
    return [
        ((numbers[i], numbers[i + 1]), numbers[i + 2])
        for i in range(0, len(numbers) - 2, 3)
    ]


def train(
    model,
    data: Sequence[tuple[Sequence[float], float]],
    steps: int = 100,
    learning_rate: float = 0.01,
) -> Iterator[StepResult]:
    """Run gradient descent on the mean hinge loss, yielding a result per step."""
    samples = [([Value(v) for v in x], Value(y)) for x, y in data]
    if not samples:
        raise ValueError("training data is empty")
    for step in range(steps):
        loss = Value(0.0)
        correct = 0
        for x, y in samples:
            pred = model(x)[0]
            loss = loss + (Value(1.0) - y * pred).relu()
            if pred.data * y.data > 0:
                correct += 1
        accuracy = correct / len(samples) * 100.0
        loss = loss / Value(float(len(samples)))
        loss.backward()
        for param in model.parameters():
            param.data -= learning_rate * param.grad
        yield StepResult(step, loss.data, accuracy)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("data", nargs="?", default="data.txt", help="file of x1 x2 y triples")
    parser.add_argument("--steps", type=int, default=100)
    parser.add_argument("--learning-rate", type=float, default=0.01)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        data = load_data(args.data)
    except OSError:
        print("Failed to open file", file=sys.stderr)
        return 1

    model = MLP(2, [16, 16, 1], rng=random.Random(args.seed))
    print(f"num of parameters: {len(model.parameters())}")
    for result in train(model, data, args.steps, args.learning_rate):
        print(f"step {result.step} loss: {result.loss:g}, accuracy: {result.accuracy:g}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())