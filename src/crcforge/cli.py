#!/usr/bin/env python3
"""
Calculate the CRC of a file.

The file is read in chunks; the CRC of each chunk is used as the seed of the
next one.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from crcforge.engine import stage as engine_stage
from crcforge.engine.params import Params, check_register_value

logger = logging.getLogger(__name__)

DEFAULT_POLYNOMIAL = 0x1021
DEFAULT_SEED = 0
DEFAULT_CHUNK_SIZE = 4096


def _int_literal(s: str) -> int:
    try:
        return int(s, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {s!r}") from None


def _positive_int(s: str) -> int:
    v = _int_literal(s)
    if v <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {s!r}")
    return v


def _get_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Generic CRC calculator")
    parser.add_argument("file", help="file to compute the CRC of")
    parser.add_argument(
        "-p", "--poly", default=DEFAULT_POLYNOMIAL, type=_int_literal,
        help="polynomial in MSB-first notation (default: 0x%(default)04X)")
    parser.add_argument(
        "-s", "--seed", default=DEFAULT_SEED, type=_int_literal,
        help="initial register value (default: %(default)d)")
    parser.add_argument(
        "-w", "--width", default=16, type=int, choices=(8, 16, 32, 64),
        help="register width in bits (default: %(default)d)")
    parser.add_argument(
        "-d", "--direction", default="right", choices=("left", "right"),
        help="shift direction (default: %(default)s)")
    parser.add_argument(
        "-e", "--engine", default="direct",
        choices=engine_stage.available_modules(),
        help="CRC engine (default: %(default)s)")
    parser.add_argument(
        "--chunk-size", default=DEFAULT_CHUNK_SIZE, type=_positive_int,
        help="read size in bytes (default: %(default)d)")
    parser.add_argument(
        "--table", default=False, action="store_true",
        help="also print the byte lookup table")
    parser.add_argument(
        "-v", "--verbose", default=False, action="store_true",
        help="enable debug logging")

    args = parser.parse_args(argv)
    try:
        params = Params(width=args.width, direction=args.direction, polynomial=args.poly)
        check_register_value(args.seed, params.width, "seed")
    except (TypeError, ValueError) as e:
        parser.error(str(e))
    return args, params


def _read_chunks(f, chunk_size: int):
    while True:
        chunk = f.read(chunk_size)
        if not chunk:
            break
        yield chunk


def _format_table(table, digits: int) -> List[str]:
    lines = []
    for row in range(0, len(table), 8):
        lines.append(", ".join(f"0x{int(v):0{digits}X}" for v in table[row:row + 8]))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args, params = _get_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    cfg = engine_stage.Config(module=args.engine, module_cfg=params)
    engine = engine_stage.make_engine(cfg)

    try:
        with open(args.file, "rb") as f:
            crc = engine.compute_chunks(_read_chunks(f, args.chunk_size), seed=args.seed)
    except OSError as e:
        logger.debug("reading %s failed: %s", args.file, e)
        print(f"Error opening file {args.file}", file=sys.stderr)
        return 1

    digits = params.width // 4
    print(f"File      : {args.file}")
    print(f"Algorithm : CRC{params.width}")
    print(f"Polynomial: {params.polynomial:0{digits}X}")
    print(f"Seed      : {args.seed:0{digits}X}")
    print(f"CRC       : {crc:0{digits}X}")

    if args.table:
        table_engine = engine_stage.make_engine(
            engine_stage.Config(module="table", module_cfg=params)
        )
        print("Table     :")
        for line in _format_table(table_engine.lookup_table(), digits):
            print(f"  {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
