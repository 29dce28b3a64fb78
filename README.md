# tinynet

A small feed-forward neural network in pure Python with no dependencies.
Each neuron uses a sigmoid activation. The network learns by gradient
descent, and it gets the gradients from forward finite differences. The
package is meant to show how such a network works inside. It is not
built for speed.

## Installation

```
pip install .
```

## Command line

### `tinynet-train`

This command trains a `2-2-1` network on a truth table. It prints the
cost before and after training. Then it prints the trained network's
output for each of the four input pairs.

```
tinynet-train [--table {or,xor}] [--iterations N] [--eps EPS] [--rate RATE] [--seed SEED]
```

| Option | Default | Meaning |
| --- | --- | --- |
| `--table` | `xor` | The truth table to learn. |
| `--iterations` | `50000` | The number of training steps. |
| `--eps` | `0.1` | The step used for the finite differences. |
| `--rate` | `0.1` | The learning rate. |
| `--seed` | random | The seed for the weight initialisation. |

### `tinynet-xor`

This command trains the fixed, hand-wired two-layer XOR model
(`tinynet.xor.XorModel`). It prints the final cost and the learned
truth table.

```
tinynet-xor [--iterations N] [--eps EPS] [--rate RATE] [--seed SEED]
```

This command takes the same options as `tinynet-train` except
`--table`. Its `--iterations` option defaults to `100000`.

## Library use

```python
import random

from tinynet.network import NeuralNetwork
from tinynet.train import split_table, train, truth_table

inputs, outputs = split_table(truth_table("xor"))

rng = random.Random(0)
net = NeuralNetwork([2, 2, 1])
net.randomize(0.0, 1.0, rng)

print("before:", net.cost(inputs, outputs))
train(net, inputs, outputs, 50_000, 0.1, 0.1)
print("after:", net.cost(inputs, outputs))

for a in (0, 1):
    for b in (0, 1):
        net.input[0, 0] = a
        net.input[0, 1] = b
        net.forward()
        print(f"{a} ^ {b} = {net.output[0, 0]:f}")
```

The modules:

- `tinynet.matrix`
  - `Matrix` is a row-major matrix that can be a view into a shared flat
    buffer. It supports row views (`row`), `copy_from`, `dot`,
    element-wise `add`, in-place `apply_sigmoid`, `append_col` and
    `append_row`. It can `fill` itself or `randomize` itself.
  - `Matrix.format(name, padding)` renders a matrix as text.
  - The module also holds the helpers `sigmoid` and `rand_float`.
- `tinynet.network`
  - `NeuralNetwork(arch)` builds a network from a list of layer sizes.
  - Its members are `input`, `output`, `forward`, `cost`,
    `finite_diff`, `learn`, `randomize`, and `format(name)`.
- `tinynet.train`
  - `truth_table("xor" | "or")` returns a truth table.
  - `split_table` splits a table into its input columns and its output
    column.
  - `train` runs the training loop and returns the final cost.
- `tinynet.xor`
  - `XorModel` is the hand-wired 2-2-1 XOR model.
  - `training_table()` returns its data.

Shape mismatches raise `ValueError`. Out-of-range indices raise
`IndexError`.

## What it does not do

- Gradients come only from finite differences. There is no
  backpropagation.
- Every neuron uses the sigmoid activation. No other activation is
  available.
- Trained weights cannot be saved or loaded. They last only as long as
  the process that trained them.

## Running the tests

```
pip install .[test]
pytest
```