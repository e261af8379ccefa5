"""Command line entry point for the segmentation tools."""

from __future__ import annotations

import argparse
import random
import sys

import numpy as np
from PIL import Image

from graphseg.felzenszwalb import scale_labels, segment_color, segment_grayscale
from graphseg.ift import color_labels, ift_segmentation, make_seeds


def parse_point(text: str) -> tuple[int, int]:
    """Parse ``"x,y"`` into a pair of integers."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"expected a point as x,y, got {text!r}")
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        raise ValueError(f"expected integer coordinates, got {text!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="graphseg", description="Segment images.")
    commands = parser.add_subparsers(dest="command", required=True)

    graph = commands.add_parser("graph", help="graph-based segmentation")
    graph.add_argument("input")
    graph.add_argument("output")
    graph.add_argument("--color", action="store_true", help="segment each RGB channel")
    graph.add_argument("--sigma", type=float, default=0.8)
    graph.add_argument("-k", type=float, default=300.0)
    graph.add_argument("--min-size", type=int, default=50)

    ift = commands.add_parser("ift", help="seeded image foresting transform")
    ift.add_argument("input")
    ift.add_argument("output")
    ift.add_argument("--color", action="store_true", help="use RGB distances")
    ift.add_argument(
        "--seed", dest="seeds", type=parse_point, action="append", default=[],
        metavar="X,Y", help="seed pixel; repeat for more regions",
    )
    ift.add_argument("--random-seed", type=int, default=12345)
    return parser


def _load(path: str, color: bool) -> np.ndarray:
    with Image.open(path) as image:
        return np.asarray(image.convert("RGB" if color else "L"))


def _run_graph(args: argparse.Namespace) -> np.ndarray:
    image = _load(args.input, args.color)
    if args.color:
        return segment_color(image, args.sigma, args.k, args.min_size)
    return scale_labels(segment_grayscale(image, args.sigma, args.k, args.min_size))


def _run_ift(args: argparse.Namespace) -> np.ndarray:
    image = _load(args.input, args.color)
    seeds = make_seeds(args.seeds)
    for seed in seeds:
        print(f"Seed added: ({seed.x}, {seed.y}) label={seed.label}")
    labels = ift_segmentation(image, seeds)
    if args.color:
        return color_labels(labels, random.Random(args.random_seed))
    return (labels % 256).astype(np.uint8)


def main(argv=None) -> int:
    """Run the command line tool; returns the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        result = _run_graph(args) if args.command == "graph" else _run_ift(args)
    except OSError as error:
        print(f"error loading image: {error}", file=sys.stderr)
        return 1
    except (IndexError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    try:
        Image.fromarray(result).save(args.output)
    except OSError as error:
        print(f"error writing image: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())