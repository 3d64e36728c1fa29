"""Demo driver for reactgpu.

Usage:
    python -m reactgpu [--size N] [--factor F] [--increment K]
                       [--threads-per-block T] [--precision P]
                       [--reaction KIND:VALUE ...] [--log-level LEVEL]

Prints the device in use and the buffer, applies Scale then Offset directly,
resets the buffer, then drives a heterogeneous list of reactions through the
uniform handle, printing the buffer after every step.

Examples:
    # Default run: 32 elements, Scale(0.1) then Offset(2)
    python -m reactgpu

    # Run without a GPU
    NUMBA_ENABLE_CUDASIM=1 python -m reactgpu --size 8

    # Custom heterogeneous list
    python -m reactgpu --reaction scale:3 --reaction offset:-1 --reaction scale:0.5

Exit codes:
    0: every reaction succeeded
    1: a reaction failed on the accelerator or rejected the buffer
    2: configuration, queue or reaction construction error
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from reactgpu.errors import (
    ConstructionError,
    InvalidReactionParams,
    ReactionConstructionFailed,
    UnknownReactionKind,
)
from reactgpu.factory import parse_reaction_spec
from reactgpu.models.numerical import Precision
from reactgpu.reaction import Reaction
from reactgpu.reactions import OffsetReaction, ScaleReaction
from reactgpu.result import Failure, Success
from reactgpu.runtime import ExecutionQueue, build_dispatch_config, default_queue
from reactgpu.validation import summarize_errors

logger = logging.getLogger("reactgpu")


def format_buffer(buffer: NDArray[np.floating]) -> str:
    """Space-separated elements in shortest general notation."""
    return " ".join(format(float(x), "g") for x in buffer)


def describe_construction_error(error: ConstructionError) -> str:
    match error:
        case InvalidReactionParams(reaction=name, error=exc):
            return f"{name}: {summarize_errors(exc)}"
        case ReactionConstructionFailed(reaction=name, message=message):
            return f"{name}: {message}"
        case UnknownReactionKind(name=name, known=known):
            return f"unknown reaction kind {name!r} (known: {', '.join(known)})"


def _apply(reaction: Reaction, queue: ExecutionQueue, buffer: NDArray[np.floating]) -> bool:
    match reaction.react(queue, buffer):
        case Success(_):
            print(format_buffer(buffer))
            return True
        case Failure(error):
            print(f"Error: {reaction!r} failed: {error}", file=sys.stderr)
            return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reactgpu",
        description="Apply per-element reactions to a buffer on a CUDA queue",
    )
    parser.add_argument("--size", type=int, default=32, help="Buffer length")
    parser.add_argument("--factor", type=float, default=0.1, help="Scale factor")
    parser.add_argument("--increment", type=int, default=2, help="Offset increment")
    parser.add_argument("--threads-per-block", type=int, default=256)
    parser.add_argument(
        "--precision", choices=[p.value for p in Precision], default=Precision.float64.value
    )
    parser.add_argument(
        "--reaction",
        action="append",
        metavar="KIND:VALUE",
        help="Reaction for the heterogeneous pass (repeatable, default: scale then offset)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level)

    if args.size < 0:
        print("Error: --size must be non-negative", file=sys.stderr)
        return 2

    match build_dispatch_config(
        threads_per_block=args.threads_per_block, precision=args.precision
    ):
        case Failure(config_error):
            detail = summarize_errors(config_error.error)
            print(f"Error: invalid dispatch configuration: {detail}", file=sys.stderr)
            return 2
        case Success(config):
            pass

    match default_queue(config):
        case Failure(queue_error):
            print(f"Error: no execution queue: {queue_error.reason}", file=sys.stderr)
            return 2
        case Success(queue):
            pass

    tokens = args.reaction or [f"scale:{args.factor}", f"offset:{args.increment}"]
    reactions: list[Reaction] = []
    for token in tokens:
        match parse_reaction_spec(token):
            case Failure(construction_error):
                detail = describe_construction_error(construction_error)
                print(f"Error: cannot build {token!r}: {detail}", file=sys.stderr)
                return 2
            case Success(reaction):
                reactions.append(reaction)

    try:
        direct: list[Reaction] = [ScaleReaction(args.factor), OffsetReaction(args.increment)]
    except ValueError as exc:
        print(f"Error: invalid --factor/--increment: {exc}", file=sys.stderr)
        return 2

    print(f"Using {queue.device_name}")
    dtype = config.precision.to_numpy()
    buffer = np.arange(args.size, dtype=dtype)
    print(format_buffer(buffer))

    for reaction in direct:
        if not _apply(reaction, queue, buffer):
            return 1

    buffer[:] = np.arange(args.size, dtype=dtype)
    for reaction in reactions:
        if not _apply(reaction, queue, buffer):
            return 1

    logger.info("Applied %d reactions", 2 + len(reactions))
    return 0


if __name__ == "__main__":
    sys.exit(main())
