"""Training a :class:`NeuralNetwork` on small truth tables."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from itertools import product

from .matrix import Matrix
from .network import NeuralNetwork

_TABLES = {
    "xor": (
        (0, 0, 0),
        (0, 1, 1),
        (1, 0, 1),
        (1, 1, 0),
    ),
    "or": (
        (0, 0, 0),
        (0, 1, 1),
        (1, 0, 1),
        (1, 1, 1),
    ),
}


def truth_table(name: str) -> Matrix:
    """Return the named truth table ("xor" or "or") as a 4 x 3 matrix."""
    try:
        rows = _TABLES[name]
    except KeyError:
        raise ValueError(f"unknown truth table {name!r}") from None
    return Matrix.from_rows(rows)


def split_table(table: Matrix) -> tuple[Matrix, Matrix]:
    """Split a table into input columns and its last (output) column.

    Both results are views into one shared buffer holding the table.
    """
    if table.cols < 2:
        raise ValueError("a training table needs at least two columns")
    data = [x for row in table for x in row]
    stride = table.cols
    inputs = Matrix(table.rows, stride - 1, data, stride, 0)
    outputs = Matrix(table.rows, 1, data, stride, stride - 1)
    return inputs, outputs


def train(
    network: NeuralNetwork,
    inputs: Matrix,
    outputs: Matrix,
    iterations: int = 50_000,
    eps: float = 1e-1,
    rate: float = 1e-1,
) -> float:
    """Run gradient descent by finite differences and return the final cost."""
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    grad = NeuralNetwork(network.arch)
    for _ in range(iterations):
        network.finite_diff(grad, eps, inputs, outputs)
        network.learn(grad, rate)
    return network.cost(inputs, outputs)


def main(argv: Sequence[str] | None = None) -> int:
    """Train a 2-2-1 network on a truth table and print the results."""
    parser = argparse.ArgumentParser(description="Train a tiny neural network.")
    parser.add_argument("--table", choices=sorted(_TABLES), default="xor")
    parser.add_argument("--iterations", type=int, default=50_000)
    parser.add_argument("--eps", type=float, default=1e-1)
    parser.add_argument("--rate", type=float, default=1e-1)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.iterations < 0:
        parser.error("--iterations must not be negative")

    rng = random.Random(args.seed)
    inputs, outputs = split_table(truth_table(args.table))

    network = NeuralNetwork((2, 2, 1))
    network.randomize(0.0, 1.0, rng)

    print(f"pre-training cost = {network.cost(inputs, outputs):f} ")
    final = train(network, inputs, outputs, args.iterations, args.eps, args.rate)
    print(f"post training cost = {final:f} ")

    print("-----------------")
    for i, j in product(range(2), repeat=2):
        network.input[0, 0] = i
        network.input[0, 1] = j
        network.forward()
        y = network.output[0, 0]
        print(f"{i} ^ {j} = {y:f} ")
    return 0