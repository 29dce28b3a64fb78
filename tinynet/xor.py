"""A hand-wired two-layer network that learns the XOR function."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator, Sequence
from itertools import product

from .matrix import Matrix
from .train import split_table

_XOR_ROWS = (
    (0, 0, 0),
    (0, 1, 1),
    (1, 0, 1),
    (1, 1, 0),
)


def training_table() -> Matrix:
    """Return the XOR truth table as a 4 x 3 matrix (two inputs, one output)."""
    return Matrix.from_rows(_XOR_ROWS)


class XorModel:
    """Two inputs, a hidden layer of two sigmoid neurons and one sigmoid output."""

    def __init__(self) -> None:
        self.a0 = Matrix(1, 2)
        self.w1 = Matrix(2, 2)
        self.b1 = Matrix(1, 2)
        self.a1 = Matrix(1, 2)
        self.w2 = Matrix(2, 1)
        self.b2 = Matrix(1, 1)
        self.a2 = Matrix(1, 1)

    def _parameters(self) -> Iterator[Matrix]:
        yield self.w1
        yield self.b1
        yield self.w2
        yield self.b2

    def randomize(
        self, low: float = 0.0, high: float = 1.0, rng: random.Random | None = None
    ) -> None:
        """Set all weights and biases to uniform random values in [low, high)."""
        for param in self._parameters():
            param.randomize(low, high, rng)

    def forward(self) -> float:
        """Propagate ``a0`` through both layers and return the output value."""
        self.a1.dot(self.a0, self.w1)
        self.a1.add(self.b1)
        self.a1.apply_sigmoid()

        self.a2.dot(self.a1, self.w2)
        self.a2.add(self.b2)
        self.a2.apply_sigmoid()
        return self.a2[0, 0]

    def cost(self, inputs: Matrix, outputs: Matrix) -> float:
        """Mean over samples of the summed squared output error."""
        if inputs.rows != outputs.rows:
            raise ValueError("inputs and outputs have different sample counts")
        if outputs.cols != self.a2.cols:
            raise ValueError("outputs do not match the model's output width")
        if inputs.rows == 0:
            raise ValueError("cost needs at least one sample")
        total = 0.0
        for i in range(inputs.rows):
            self.a0.copy_from(inputs.row(i))
            self.forward()
            (predicted,) = self.a2.tolist()
            (expected,) = outputs.row(i).tolist()
            total += sum((p - e) ** 2 for p, e in zip(predicted, expected))
        return total / inputs.rows

    def finite_diff(
        self, grad: XorModel, eps: float, inputs: Matrix, outputs: Matrix
    ) -> None:
        """Store a forward-difference estimate of the cost gradient in ``grad``."""
        base = self.cost(inputs, outputs)
        for param, slope in zip(self._parameters(), grad._parameters()):
            for position in product(range(param.rows), range(param.cols)):
                saved = param[position]
                param[position] = saved + eps
                slope[position] = (self.cost(inputs, outputs) - base) / eps
                param[position] = saved

    def learn(self, grad: XorModel, rate: float) -> None:
        """Take one gradient-descent step of size ``rate`` along ``grad``."""
        for param, slope in zip(self._parameters(), grad._parameters()):
            for position in product(range(param.rows), range(param.cols)):
                param[position] -= rate * slope[position]


def main(argv: Sequence[str] | None = None) -> int:
    """Train the XOR model and print its cost and truth table."""
    parser = argparse.ArgumentParser(description="Train a tiny XOR network.")
    parser.add_argument("--iterations", type=int, default=100_000)
    parser.add_argument("--eps", type=float, default=1e-1)
    parser.add_argument("--rate", type=float, default=1e-1)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.iterations < 0:
        parser.error("--iterations must not be negative")

    rng = random.Random(args.seed)
    inputs, outputs = split_table(training_table())

    model = XorModel()
    grad = XorModel()
    model.randomize(0.0, 1.0, rng)

    for _ in range(args.iterations):
        model.finite_diff(grad, args.eps, inputs, outputs)
        model.learn(grad, args.rate)

    print(f"cost: {model.cost(inputs, outputs):f} ")
    print("------------------")
    for i, j in product(range(2), repeat=2):
        model.a0[0, 0] = i
        model.a0[0, 1] = j
        y = model.forward()
        print(f"{i} ^ {j} = {y:f}")
    return 0