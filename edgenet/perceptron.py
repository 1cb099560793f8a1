"""Single-layer perceptron over a 3x3 binary neighbourhood, with training."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike

from .imaging import BinaryImage

INPUT_SIZE = 10
EPOCHS = 100
LEARNING_RATE = 0.01
WEIGHTS_FILE = "weights.net"
_RAND_LIMIT = 2**31


@dataclass
class Perceptron:
    """Weights for a bias input followed by nine neighbourhood inputs."""

    weights: list[float] = field(default_factory=lambda: [0.0] * INPUT_SIZE)
    learning_rate: float = LEARNING_RATE

    def __post_init__(self) -> None:
        self.weights = [float(w) for w in self.weights]
        if len(self.weights) != INPUT_SIZE:
            raise ValueError(f"expected {INPUT_SIZE} weights, got {len(self.weights)}")

    def activate(self, inputs: Sequence[int]) -> int:
        """Return 1 when the weighted sum is positive, else 0."""
        total = sum(x * w for x, w in zip(inputs, self.weights, strict=True))
        return 1 if total > 0.0 else 0

    def adjust(self, inputs: Sequence[int], goal: int, output: int) -> None:
        """Apply the perceptron learning rule for one sample."""
        delta = self.learning_rate * (goal - output)
        self.weights = [w + delta * x for w, x in zip(self.weights, inputs, strict=True)]


@dataclass(frozen=True)
class TrainingResult:
    """Outcome of a training run."""

    perceptron: Perceptron
    epochs: int
    converged: bool


def random_perceptron(rng: random.Random | None = None) -> Perceptron:
    """Perceptron with small non-negative random weights (multiples of 0.04)."""
    rng = rng or random.Random()
    weights = [(rng.randrange(_RAND_LIMIT) // 100_000_000) * 4 / 100 for _ in range(INPUT_SIZE)]
    return Perceptron(weights)


def neighbourhood_inputs(image: BinaryImage, index: int, level: int = 127) -> tuple[int, ...]:
    """Bias followed by the thresholded 3x3 neighbourhood around index."""
    w = image.width
    offsets = (-w - 1, -w, -w + 1, -1, 0, 1, w - 1, w, w + 1)
    return (-1, *(1 if image.get(index + off) > level else 0 for off in offsets))


def processed_indices(width: int, height: int):
    """Flat indices visited by the neighbourhood scans."""
    for y in range(height - 1):
        for x in range(width - 1):
            yield y * (width - 1) + x


def train(
    image_in: BinaryImage,
    image_out: BinaryImage,
    level: int = 127,
    perceptron: Perceptron | None = None,
    epochs: int = EPOCHS,
) -> TrainingResult:
    """Train until an epoch passes without error or the epoch limit is reached."""
    if (image_in.width, image_in.height) != (image_out.width, image_out.height):
        raise ValueError("Images not corresponding")
    net = Perceptron(list(perceptron.weights), perceptron.learning_rate) if perceptron else Perceptron()
    samples = [
        (neighbourhood_inputs(image_in, i, level), 1 if image_out.get(i) > level else 0)
        for i in processed_indices(image_in.width, image_in.height)
    ]
    for epoch in range(epochs):
        error = False
        for inputs, goal in samples:
            output = net.activate(inputs)
            if output != goal:
                error = True
                net.adjust(inputs, goal, output)
        if not error:
            return TrainingResult(net, epoch, True)
    return TrainingResult(net, epochs, False)


def load_weights(path: str | PathLike[str] = WEIGHTS_FILE) -> Perceptron:
    """Read ten weights, one per line."""
    with open(path, encoding="ascii") as fh:
        lines = [line.strip() for line in fh if line.strip()]
    if len(lines) < INPUT_SIZE:
        raise ValueError(f"{path}: expected {INPUT_SIZE} weights, found {len(lines)}")
    return Perceptron([float(line) for line in lines[:INPUT_SIZE]])


def save_weights(perceptron: Perceptron, path: str | PathLike[str] = WEIGHTS_FILE) -> None:
    """Write the weights one per line with four decimals."""
    with open(path, "w", encoding="ascii") as fh:
        fh.writelines(f"{w:.4f}\n" for w in perceptron.weights)