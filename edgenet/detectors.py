"""Edge detectors over binary images."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable

from .imaging import BinaryImage
from .network import eval_net
from .perceptron import Perceptron, neighbourhood_inputs, processed_indices

EDGE = 0
NO_EDGE = 255


class Algorithm(enum.Enum):
    """Names of the available detectors."""

    IF = "if"
    DOUBLE_IF = "doubleif"
    ROBERTS = "roberts"
    ROBERTS2 = "roberts2"
    SOBEL = "sobel"
    SOBEL2 = "sobel2"
    PREWITT = "prewitt"
    PERCEPTRON = "perceptron"
    NET = "net"


def _scan(image: BinaryImage, pixel: Callable[[Callable[[int], int], int], int]) -> BinaryImage:
    out = bytearray(image.width * image.height)
    for i in processed_indices(image.width, image.height):
        out[i] = pixel(image.get, i)
    return BinaryImage(image.width, image.height, bytes(out))


def _magnitude(gx: int, gy: int, variant: bool) -> int:
    return abs(gx) + abs(gy) if variant else int(math.sqrt(gx * gx + gy * gy))


def edge_if(image: BinaryImage) -> BinaryImage:
    """Edge where a pixel differs from its lower-right neighbour."""
    w = image.width

    def pixel(a, i):
        return EDGE if a(i) != a(i + w + 1) else NO_EDGE

    return _scan(image, pixel)


def edge_double_if(image: BinaryImage) -> BinaryImage:
    """Edge where either diagonal pair of a 2x2 block differs."""
    w = image.width

    def pixel(a, i):
        return EDGE if a(i) != a(i + w + 1) or a(i + 1) != a(i + w) else NO_EDGE

    return _scan(image, pixel)


def edge_roberts(image: BinaryImage, variant: bool = False) -> BinaryImage:
    """Roberts cross; the variant uses |gx|+|gy| for the magnitude."""
    w = image.width

    def pixel(a, i):
        gx = a(i) - a(i + w + 1)
        gy = a(i + 1) - a(i + w)
        return NO_EDGE if _magnitude(gx, gy, variant) == 0 else EDGE

    return _scan(image, pixel)


def edge_sobel(image: BinaryImage, variant: bool = False) -> BinaryImage:
    """Sobel operator; the variant uses |gx|+|gy| for the magnitude."""
    w = image.width

    def pixel(a, i):
        gx = (
            -a(i - w - 1) - 2 * a(i - 1) - a(i + w - 1)
            + a(i - w + 1) + 2 * a(i + 1) + a(i + w + 1)
        )
        gy = (
            -a(i - w - 1) - 2 * a(i - w) - a(i - w + 1)
            + a(i + w - 1) + 2 * a(i + w) + a(i + w + 1)
        )
        return NO_EDGE if _magnitude(gx, gy, variant) == 0 else EDGE

    return _scan(image, pixel)


def edge_prewitt(image: BinaryImage) -> BinaryImage:
    """Prewitt operator."""
    w = image.width

    def pixel(a, i):
        gx = (
            a(i - w - 1) + a(i - 1) + a(i + w - 1)
            - a(i - w + 1) - a(i + 1) - a(i + w + 1)
        )
        gy = (
            a(i - w - 1) + a(i - w) + a(i - w + 1)
            - a(i + w - 1) - a(i + w) - a(i + w + 1)
        )
        return NO_EDGE if _magnitude(gx, gy, False) == 0 else EDGE

    return _scan(image, pixel)


def edge_perceptron(image: BinaryImage, perceptron: Perceptron, level: int = 127) -> BinaryImage:
    """Edge wherever the trained perceptron fires."""

    def pixel(_a, i):
        return EDGE if perceptron.activate(neighbourhood_inputs(image, i, level)) else NO_EDGE

    return _scan(image, pixel)


def edge_backpropagation(image: BinaryImage) -> BinaryImage:
    """Neighbourhoods the fixed network scores above 0.5 become 255."""
    w = image.width
    offsets = (-w - 1, -w, -w + 1, -1, 0, 1, w - 1, w, w + 1)

    def pixel(a, i):
        out = eval_net([a(i + off) for off in offsets])
        return 255 if out > 0.5 else 0

    return _scan(image, pixel)


def detect(
    algorithm: Algorithm | str,
    image: BinaryImage,
    perceptron: Perceptron | None = None,
    level: int = 127,
) -> BinaryImage:
    """Run the named detector; unknown names raise ValueError."""
    algo = Algorithm(algorithm)
    if algo is Algorithm.PERCEPTRON:
        if perceptron is None:
            raise ValueError("the perceptron detector needs trained weights")
        return edge_perceptron(image, perceptron, level)
    dispatch: dict[Algorithm, Callable[[BinaryImage], BinaryImage]] = {
        Algorithm.IF: edge_if,
        Algorithm.DOUBLE_IF: edge_double_if,
        Algorithm.ROBERTS: lambda img: edge_roberts(img, False),
        Algorithm.ROBERTS2: lambda img: edge_roberts(img, True),
        Algorithm.SOBEL: lambda img: edge_sobel(img, False),
        Algorithm.SOBEL2: lambda img: edge_sobel(img, True),
        Algorithm.PREWITT: edge_prewitt,
        Algorithm.NET: edge_backpropagation,
    }
    return dispatch[algo](image)