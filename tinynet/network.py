"""A fully connected feed-forward network trained by finite differences."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from itertools import product

from .matrix import Matrix


class NeuralNetwork:
    """Layers of sigmoid neurons described by ``arch`` (neurons per layer)."""

    def __init__(self, arch: Iterable[int]) -> None:
        arch = tuple(arch)
        if not arch:
            raise ValueError("architecture needs at least one layer")
        self.arch = arch
        self.weights = [Matrix(rows, cols) for rows, cols in zip(arch, arch[1:])]
        self.biases = [Matrix(1, cols) for cols in arch[1:]]
        self.activations = [Matrix(1, size) for size in arch]

    @property
    def count(self) -> int:
        """Number of weight layers."""
        return len(self.weights)

    @property
    def input(self) -> Matrix:
        """The input activation row."""
        return self.activations[0]

    @property
    def output(self) -> Matrix:
        """The output activation row."""
        return self.activations[-1]

    def _parameters(self) -> Iterator[Matrix]:
        for weights, biases in zip(self.weights, self.biases):
            yield weights
            yield biases

    def _check_compatible(self, other: NeuralNetwork) -> None:
        if other.arch != self.arch:
            raise ValueError(f"architecture mismatch: {self.arch} vs {other.arch}")

    def randomize(
        self, low: float = 0.0, high: float = 1.0, rng: random.Random | None = None
    ) -> None:
        """Set all weights and biases to uniform random values in [low, high)."""
        for param in self._parameters():
            param.randomize(low, high, rng)

    def forward(self) -> None:
        """Propagate the current input through every layer."""
        layers = zip(self.weights, self.biases, self.activations, self.activations[1:])
        for weights, biases, current, following in layers:
            ones = Matrix(current.rows, 1)
            ones.fill(1.0)
            augmented_input = Matrix(current.rows, current.cols + 1)
            augmented_input.append_col(current, ones)
            augmented_weights = Matrix(weights.rows + 1, weights.cols)
            augmented_weights.append_row(weights, biases)
            following.dot(augmented_input, augmented_weights)
            following.apply_sigmoid()

    def cost(self, inputs: Matrix, outputs: Matrix) -> float:
        """Mean over samples of the summed squared output error."""
        if inputs.rows != outputs.rows:
            raise ValueError("inputs and outputs have different sample counts")
        if outputs.cols != self.output.cols:
            raise ValueError("outputs do not match the network's output width")
        if inputs.rows == 0:
            raise ValueError("cost needs at least one sample")
        total = 0.0
        for i in range(inputs.rows):
            self.input.copy_from(inputs.row(i))
            self.forward()
            (predicted,) = self.output.tolist()
            (expected,) = outputs.row(i).tolist()
            total += sum((p - e) ** 2 for p, e in zip(predicted, expected))
        return total / inputs.rows

    def finite_diff(
        self, grad: NeuralNetwork, eps: float, inputs: Matrix, outputs: Matrix
    ) -> None:
        """Store a forward-difference estimate of the cost gradient in ``grad``."""
        self._check_compatible(grad)
        base = self.cost(inputs, outputs)
        for param, slope in zip(self._parameters(), grad._parameters()):
            for position in product(range(param.rows), range(param.cols)):
                saved = param[position]
                param[position] = saved + eps
                slope[position] = (self.cost(inputs, outputs) - base) / eps
                param[position] = saved

    def learn(self, grad: NeuralNetwork, rate: float) -> None:
        """Take one gradient-descent step of size ``rate`` along ``grad``."""
        self._check_compatible(grad)
        for param, slope in zip(self._parameters(), grad._parameters()):
            for position in product(range(param.rows), range(param.cols)):
                param[position] -= rate * slope[position]

    def format(self, name: str) -> str:
        """Render all weights and biases as text."""
        parts = [f"{name} = [\n"]
        for index, (weights, biases) in enumerate(zip(self.weights, self.biases)):
            parts.append(weights.format(f"ws{index}", 4))
            parts.append(biases.format(f"bs{index}", 4))
        parts.append("]\n")
        return "".join(parts)