# scalargrad

A tiny automatic differentiation engine that works on scalar values. It comes
with a minimal neural network library built on top of it and a command that
trains a small network on two-feature labelled points.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The engine

`scalargrad.engine.Value` wraps a single float. Arithmetic on values builds a
computation graph. `backward()` sets the result's gradient to 1 and then fills
in the gradient of every value that took part in computing it.

```python
from scalargrad.engine import Value

a = Value(2.0)
b = Value(-3.0)
c = (a * b + a.pow(2)).relu()
c.backward()

print(c.data)   # 0.0  (relu of -2.0)
print(a.grad, b.grad)
```

Supported operations:

- `+`, `-`, `*` and `/`, between two values or between a value and a plain
  number, on either side (`2 * v`, `1 - v`).
- Unary `-`.
- `pow(exp)` or `v ** exp`, for a constant exponent.
- `relu()`, which gives `max(0, data)`.

Gradients accumulate. Calling `backward()` again, or on another result that
shares values, adds to the gradients already there. Reset them first when
that is not what you want.

## Neural networks

`scalargrad.nn` provides `Neuron`, `Layer` and `MLP`. All three derive from
`Module`, which offers `parameters()` and `zero_grad()`.

- `Neuron(in_features, non_linear=True, rng=None)` has weights drawn
  uniformly from [-1, 1] and a bias of 0. Calling it on a sequence of inputs
  gives the weighted sum plus the bias, passed through ReLU when `non_linear`
  is true. The inputs may be values or plain numbers.
- `Layer(in_features, out_features, non_linear=True, rng=None)` holds
  `out_features` neurons. Calling it returns a list with one output per
  neuron.
- `MLP(in_features, out_features, rng=None)` stacks one layer for each entry
  of `out_features`. Every layer except the last applies ReLU and the last is
  linear. An MLP with a single layer applies ReLU in that layer.

Pass a `random.Random` as `rng` to make weight initialisation reproducible.

```python
import random
from scalargrad.engine import Value
from scalargrad.nn import MLP

model = MLP(2, [16, 16, 1], random.Random(0))
print(len(model.parameters()))  # 337

out = model([Value(0.5), Value(-1.0)])
out[0].backward()
model.zero_grad()
```

## Training

`scalargrad.cli` holds the training loop:

- `load_data(path)` reads whitespace-separated numbers as `x1 x2 y` triples.
  It stops at the first token that is not a number and drops a trailing
  incomplete triple.
- `train(model, data, steps=100, learning_rate=0.01)` is a generator. At each
  step it computes the hinge loss `max(0, 1 - y * pred)` averaged over the
  data, back-propagates it and takes one plain gradient-descent step. It
  then yields a `StepResult` with `step`, `loss` and `accuracy`, where
  accuracy is the percentage of points with `pred * y > 0`. It does not
  reset gradients between steps, so they accumulate from step to step. It
  raises `ValueError` when the data is empty.

## Command line

```
scalargrad data.txt
```

The data file holds whitespace-separated triples `x1 x2 y`, with labels `y`
of `-1` or `1`. The command builds a 2-16-16-1 network, prints the number of
parameters and trains it. For each step it prints a line of the form
`step N loss: L, accuracy: A%`.

| Option | Default | Meaning |
| --- | --- | --- |
| `data` (positional) | `data.txt` | file of `x1 x2 y` triples |
| `--steps` | `100` | number of training steps |
| `--learning-rate` | `0.01` | gradient-descent step size |
| `--seed` | none | seed for weight initialisation |

If the file cannot be opened, the command prints `Failed to open file` to
standard error and exits with status 1.

## What it does not do

The command's network shape and loss are fixed. Trained weights are not
saved anywhere, and there is no way to run a trained model on new points
from the command line.