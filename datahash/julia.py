"""Rendering of an escape-time fractal image into a binary PPM file."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from collections.abc import Sequence

WIDTH = 1024
HEIGHT = 1024
MAX_ITERATIONS = 1000
LOWER_LEFT = complex(-2.1, -2.1)
UPPER_RIGHT = complex(2.1, 2.1)


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __bytes__(self) -> bytes:
        return bytes((self.r, self.g, self.b))


PALETTE = (
    Color(66, 30, 15),
    Color(25, 7, 26),
    Color(9, 1, 47),
    Color(4, 4, 73),
    Color(0, 7, 100),
    Color(12, 44, 138),
    Color(24, 82, 177),
    Color(57, 125, 209),
    Color(134, 181, 229),
    Color(211, 236, 248),
    Color(241, 233, 191),
    Color(248, 201, 95),
    Color(255, 170, 0),
    Color(204, 128, 0),
    Color(153, 87, 0),
    Color(106, 52, 3),
)

BLACK = Color()


def set_color(iterations: int, max_iterations: int = MAX_ITERATIONS) -> Color:
    """Return the palette colour for an iteration count, black if it never escaped."""
    if iterations < max_iterations:
        return PALETTE[iterations % len(PALETTE)]
    return BLACK


def escape_iterations(c: complex, max_iterations: int = MAX_ITERATIONS) -> int:
    """Count iterations of z*z + c from zero until |z| reaches 2 or the limit."""
    z = 0j
    iterations = 0
    while iterations < max_iterations and abs(z) < 2.0:
        z = z * z + c
        iterations += 1
    return iterations


def render(
    width: int = WIDTH, height: int = HEIGHT, max_iterations: int = MAX_ITERATIONS
) -> list[Color]:
    """Return the image's pixels row by row, top row first in memory order."""
    if width < 1 or height < 1:
        raise ValueError("image dimensions must be positive")
    domain = UPPER_RIGHT - LOWER_LEFT
    center = 0.5 * domain
    dx = domain.real / width
    dy = domain.imag / height
    return [
        set_color(escape_iterations(complex(x * dx, y * dy) - center, max_iterations), max_iterations)
        for y in range(height)
        for x in range(width)
    ]


def write_ppm(pixels: Sequence[Color], width: int, height: int, path: str | Path) -> None:
    """Write pixels as a binary (P6) PPM image."""
    if len(pixels) != width * height:
        raise ValueError(
            f"expected {width * height} pixels for {width}x{height}, got {len(pixels)}"
        )
    with open(path, "wb") as ppm:
        ppm.write(f"P6 {width} {height} 255\n".encode("ascii"))
        ppm.write(b"".join(bytes(pixel) for pixel in pixels))


def main(argv: list[str] | None = None) -> int:
    """Render the fractal and save it as a PPM image."""
    parser = argparse.ArgumentParser(
        prog="datahash-julia", description="Render an escape-time fractal to a PPM file."
    )
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--max-iterations", type=int, default=MAX_ITERATIONS)
    parser.add_argument("-o", "--output", type=Path, default=Path("julia.ppm"))
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1:
        parser.error("image dimensions must be positive")
    pixels = render(args.width, args.height, args.max_iterations)
    write_ppm(pixels, args.width, args.height, args.output)
    return 0