"""Command-line entry points: edge detection and perceptron training."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Sequence

from .detectors import Algorithm, detect
from .imaging import BinaryImage, load_binary_image, save_image
from .perceptron import EPOCHS, WEIGHTS_FILE, Perceptron, load_weights, save_weights, train

DEFAULT_LEVEL = 127

_TRAIN_USAGE = (
    "BACKPROPAGATION TRAINING                 \n"
    "usage:                                   \n"
    "./train in.ext output.ext level          \n"
    "  - in.ext: imput image. ex: image.jpg   \n"
    "  - out.ext: output image: ex: output.jpg\n"
    "  - level: num 0..255 (use same level to \n"
    "    create output image used to traininng"
)


def _parse_level(text: str, default: int = DEFAULT_LEVEL) -> int:
    """Read a leading integer the way a %d scan does; keep the default otherwise."""
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else default


def _load(path: str, level: int, message: str) -> BinaryImage | None:
    try:
        return load_binary_image(path, level)
    except OSError:
        print(message.format(path))
        return None


def edge_main(argv: Sequence[str] | None = None) -> int:
    """Run one edge detector: ALGORITHM INPUT OUTPUT [LEVEL]."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 3 <= len(args) <= 4:
        print("Parametros Incorretos")
        print("imagem_entrada imagem_saida <nivel>")
        return 0
    algorithm_name, input_path, output_path = args[:3]
    level = _parse_level(args[3]) if len(args) == 4 else DEFAULT_LEVEL

    image = _load(input_path, level, "Error to load image {}")
    if image is None:
        print("Could not create image surface...")
        return 1

    try:
        perceptron: Perceptron = load_weights(WEIGHTS_FILE)
    except FileNotFoundError:
        print("You need training perceptron first to create weights.net file.")
        return 0
    except ValueError as exc:
        print(f"Invalid weights file: {exc}")
        return 1
    print()

    begin = time.process_time()
    try:
        algorithm = Algorithm(algorithm_name)
    except ValueError:
        print(f"Algorithm {algorithm_name} invalid...")
        return 0
    result = detect(algorithm, image, perceptron, level)
    run_time = time.process_time() - begin

    print(f"Algorithm {algorithm_name} at level {level}")
    print(f"Runtime: {run_time:f} seconds.")
    try:
        save_image(output_path, result)
    except (OSError, ValueError) as exc:
        print(f"Save image failed: {exc}")
    return 0


def train_main(argv: Sequence[str] | None = None) -> int:
    """Train the perceptron: INPUT EXPECTED_OUTPUT [LEVEL]; writes weights.net."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 2 <= len(args) <= 3:
        print(_TRAIN_USAGE)
    if len(args) < 2:
        print("Error loading image (missing)")
        return 1
    level = _parse_level(args[2]) if len(args) >= 3 else DEFAULT_LEVEL

    image_in = _load(args[0], level, "Error loading image {}")
    if image_in is None:
        return 1
    image_out = _load(args[1], level, "Error loading image {}")
    if image_out is None:
        return 1
    if (image_in.width, image_in.height) != (image_out.width, image_out.height):
        print("Images not corresponding")
        return 1

    begin = time.process_time()
    result = train(image_in, image_out, level, Perceptron(), EPOCHS)
    dots = result.epochs + 1 if result.converged else result.epochs
    print("." * dots)
    run_time = time.process_time() - begin
    print(f"Trainning: {run_time:0.2f} seconds / {result.epochs} epochs.", end="")

    print("Saving weights.net")
    try:
        save_weights(result.perceptron, WEIGHTS_FILE)
    except OSError:
        print("Error to open weights.net.")
        return 1
    return 0