"""Binary images: loading with a grey threshold, and saving as BMP."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

from PIL import Image

BACKGROUND = 0
FOREGROUND = 255


@dataclass(frozen=True)
class BinaryImage:
    """A row-major image of one byte per pixel."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        object.__setattr__(self, "pixels", bytes(self.pixels))
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    def get(self, index: int) -> int:
        """Return the pixel at a flat index; indices outside the image read as 0."""
        if 0 <= index < len(self.pixels):
            return self.pixels[index]
        return BACKGROUND

    def __len__(self) -> int:
        return len(self.pixels)


def rgb_to_gray(red: int, green: int, blue: int) -> int:
    """Luma of an RGB colour, truncated to an integer."""
    return int(0.299 * red + 0.587 * green + 0.114 * blue)


def binarize(gray: int, level: int) -> int:
    """Dark pixels (below level) become 255, the rest 0."""
    return FOREGROUND if gray < level else BACKGROUND


def load_binary_image(path: str | PathLike[str], level: int = 127) -> BinaryImage:
    """Load an image file and threshold its grey values at level."""
    with Image.open(path) as img:
        rgb = img.convert("RGB")
        width, height = rgb.size
        data = rgb.tobytes()
    pixels = bytes(
        binarize(rgb_to_gray(r, g, b), level)
        for r, g, b in zip(data[0::3], data[1::3], data[2::3])
    )
    return BinaryImage(width, height, pixels)


def save_image(path: str | PathLike[str], image: BinaryImage) -> None:
    """Write the image as a grey RGB bitmap."""
    gray = Image.frombytes("L", (image.width, image.height), image.pixels)
    gray.convert("RGB").save(path, format="BMP")