"""Learn a small digit image as a function of pixel coordinates and upscale it."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from os import PathLike
from pathlib import Path

from PIL import Image

from zerozen.activations import Activation, ActivationKind, leaky_relu
from zerozen.layer import LayerConfig
from zerozen.loss import LossKind
from zerozen.matrix import Matrix
from zerozen.network import Network

TRAINING_WIDTH = 28
TRAINING_HEIGHT = 28
UPSCALE_RESOLUTION = 256

# Runs of non-zero brightness in the training digit: (row, first column, values).
_DIGIT_RUNS: tuple[tuple[int, int, tuple[int, ...]], ...] = (
    (4, 22, (189, 190)),
    (5, 21, (143, 247, 153)),
    (6, 20, (136, 247, 242, 86)),
    (7, 20, (192, 252, 187)),
    (8, 12, (62, 185, 18)),
    (8, 19, (89, 236, 217, 47)),
    (9, 12, (216, 253, 60)),
    (9, 19, (212, 255, 81)),
    (10, 12, (206, 252, 68)),
    (10, 18, (48, 242, 253, 89)),
    (11, 11, (131, 251, 212, 21)),
    (11, 17, (11, 167, 252, 197, 5)),
    (12, 10, (29, 232, 247, 63)),
    (12, 17, (153, 252, 226)),
    (13, 9, (45, 219, 252, 143)),
    (13, 16, (116, 249, 252, 103)),
    (14, 7, (4, 96, 253, 255, 253, 200, 122, 7, 25, 201, 250, 158)),
    (15, 7, (92, 252, 252, 253, 217, 252, 252, 200, 227, 252, 231)),
    (16, 6, (87, 251, 247, 231, 65, 48, 189, 252, 252, 253, 252, 251, 227, 35)),
    (17, 6, (190, 221, 98)),
    (17, 12, (42, 196, 252, 253, 252, 252, 162)),
    (18, 6, (111, 29)),
    (18, 12, (62, 239, 252, 86, 42, 42, 14)),
    (19, 11, (15, 148, 253, 218)),
    (20, 11, (121, 252, 231, 28)),
    (21, 10, (31, 221, 251, 129)),
    (22, 10, (218, 252, 160)),
    (23, 10, (122, 252, 82)),
)


def _rasterise(
    runs: Iterable[tuple[int, int, Sequence[int]]], width: int, height: int
) -> tuple[int, ...]:
    pixels = [0] * (width * height)
    for row, col, values in runs:
        start = row * width + col
        pixels[start : start + len(values)] = values
    return tuple(pixels)


DIGIT = _rasterise(_DIGIT_RUNS, TRAINING_WIDTH, TRAINING_HEIGHT)


def build_network() -> Network:
    """The coordinate-to-brightness network used for upscaling."""
    return (
        Network.builder()
        .layer(LayerConfig(7, leaky_relu(0.01)))
        .layer(LayerConfig(5, leaky_relu(0.01)))
        .layer(LayerConfig(2, leaky_relu(0.01)))
        .layer(LayerConfig(1, Activation(ActivationKind.SIGMOID)))
        .loss(LossKind.MEAN_SQUARED_ERROR)
        .batch_size(200)
        .epochs(10_000 * 15)
        .with_logging(True, 100)
        .learning_rate(0.4)
        .build(2)
    )


def _normalise(index: int, size: int) -> float:
    return index / (size - 1) if size > 1 else math.nan


def _coordinates(width: int, height: int) -> list[float]:
    return [
        value
        for y in range(height)
        for x in range(width)
        for value in (_normalise(x, width), _normalise(y, height))
    ]


def training_samples(
    pixels: Sequence[int], width: int, height: int
) -> tuple[Matrix, Matrix]:
    """Normalised (x, y) coordinates and brightness targets for every pixel."""
    count = width * height
    if len(pixels) < count:
        raise ValueError(f"Expected at least {count} pixels, got {len(pixels)}")
    inputs = Matrix(count, 2, _coordinates(width, height))
    targets = Matrix(count, 1, (p / 255.0 for p in pixels[:count]))
    return inputs, targets


def upscale_grid(resolution: int) -> Matrix:
    """Normalised coordinates of a square grid of ``resolution`` pixels a side."""
    return Matrix(resolution * resolution, 2, _coordinates(resolution, resolution))


def _to_brightness(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value * 255.0, 0.0), 255.0))


def save_grayscale(
    pixels: Sequence[int], width: int, height: int, path: str | PathLike[str]
) -> None:
    """Write row-major 8-bit brightness values as a grayscale image."""
    count = width * height
    if len(pixels) < count:
        raise ValueError(f"Expected at least {count} pixels, got {len(pixels)}")
    values = list(pixels[:count])
    if any(not 0 <= p <= 255 for p in values):
        raise ValueError("Pixel values must lie between 0 and 255")
    image = Image.new("L", (width, height))
    image.putdata(values)
    image.save(path)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Train a network on a digit image and render it at a higher resolution."
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="directory for the written images",
    )
    args = parser.parse_args(argv)

    network = build_network()

    print("Training image")
    save_grayscale(DIGIT, TRAINING_WIDTH, TRAINING_HEIGHT, args.output_dir / "og_image.png")
    print("Built training image")

    inputs, targets = training_samples(DIGIT, TRAINING_WIDTH, TRAINING_HEIGHT)

    print("training started")
    network.train_sgd(inputs, targets)
    print("training completed")

    print("Upscaling to 512x512...")
    predictions = network.forward(upscale_grid(UPSCALE_RESOLUTION))
    print(
        "Upscaling complete. You can now reconstruct the image from the predictions matrix."
    )

    print("Making image")
    save_grayscale(
        [_to_brightness(p) for p in predictions.data],
        UPSCALE_RESOLUTION,
        UPSCALE_RESOLUTION,
        args.output_dir / "upscaled_image.png",
    )
    print("Saved upscaled image as upscaled_image.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())