"""Fixed 9/10/1 feed-forward network that classifies a 3x3 pixel neighbourhood."""

from __future__ import annotations

import math
from collections.abc import Sequence

INPUTS = 9
HIDDEN = 10

# Each row: one hidden neuron, INPUTS weights followed by its bias.
_INPUT_HIDDEN_WEIGHTS: tuple[tuple[float, ...], ...] = (
    (1.46306, -0.48353, 0.556802, 0.696731, -3.54228, 0.580612, -1.29206, 2.21547, -0.218727, 0.30247),
    (0.12464, -0.363792, -0.00912601, -0.208304, 1.57896, -0.759195, 0.448252, -0.246646, -0.347245, -0.128616),
    (1.36362, -2.34813, 0.198959, -1.62104, 3.97698, 4.22806e-005, -1.18597, -0.227945, 0.0399828, -0.338878),
    (0.391645, -0.321871, 0.721798, -0.257518, 1.97014, -0.427979, -0.39448, 0.592101, -0.633118, 0.149267),
    (0.473705, 0.669365, 0.679692, 0.557485, -2.159, 0.399681, 0.00418039, 0.82986, 0.637189, 0.035582),
    (0.804048, 1.72548, 1.35932, -0.0380864, -2.99959, 0.576475, 0.904021, 1.08142, 0.991563, 0.25353),
    (0.33809, -0.319366, 0.451423, -0.977038, -2.31819, -0.223899, -0.826951, 0.0597971, 0.0875238, -0.515679),
    (-0.20823, 0.640548, 0.349454, 1.45503, -2.91341, 0.269586, 0.793465, 0.326139, 0.357733, 0.13929),
    (1.64543, -0.776498, 1.18467, 0.695131, -3.7529, 0.287333, -1.59288, 2.46328, -0.76261, 0.421524),
    (-0.178771, 0.779554, 0.395544, 1.52267, -3.41258, 0.351137, 0.67866, 0.489285, 0.376394, 0.408207),
)

# HIDDEN weights followed by the output bias.
_HIDDEN_OUTPUT_WEIGHTS: tuple[float, ...] = (
    4.45606, -2.40843, -5.90517, -3.18314, 2.35856, 4.03491, 3.45828, 3.09768, 5.04998, 3.6273, -2.01805,
)

# Raw and scaled ranges of the inputs and of the output.
_INPUT_RAW = (0.0, 1.0)
_INPUT_SCALED = (-1.0, 1.0)
_OUTPUT_RAW = (0.0, 1.0)
_OUTPUT_SCALED = (0.0, 1.0)


def _sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def _scale(value: float, raw: tuple[float, float], scaled: tuple[float, float]) -> float:
    factor = (scaled[1] - scaled[0]) / (raw[1] - raw[0])
    return factor * value + scaled[0] - factor * raw[0]


def eval_net(inputs: Sequence[float]) -> float:
    """Return the network's response to nine neighbourhood values."""
    if len(inputs) != INPUTS:
        raise ValueError(f"expected {INPUTS} inputs, got {len(inputs)}")
    scaled = [_scale(float(v), _INPUT_RAW, _INPUT_SCALED) for v in inputs]
    hidden = [
        _sigmoid(sum(x * w for x, w in zip(scaled, row[:INPUTS])) + row[INPUTS])
        for row in _INPUT_HIDDEN_WEIGHTS
    ]
    total = sum(h * w for h, w in zip(hidden, _HIDDEN_OUTPUT_WEIGHTS[:HIDDEN]))
    output = _sigmoid(total + _HIDDEN_OUTPUT_WEIGHTS[HIDDEN])
    return _scale(output, _OUTPUT_SCALED, _OUTPUT_RAW)