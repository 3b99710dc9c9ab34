"""Command line interface: ``floatq8 encode|decode|info|stats``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from floatq8.api import (
    compress_file,
    decompress_file,
    get_compression_info,
    load_samples,
)
from floatq8.config import Settings, load_settings
from floatq8.core.errors import InvalidInputError
from floatq8.eval.roundtrip import roundtrip_error_stats

logger = logging.getLogger("floatq8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floatq8",
        description="Fixed-ratio 8-bit quantization of float32 samples",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to floatq8.toml (defaults to FLOATQ8_CONFIG or ./floatq8.toml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (e.g. DEBUG, INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="Encode a .npy or raw float32 file")
    p_encode.add_argument("src", type=Path)
    p_encode.add_argument("-o", "--output", type=Path, default=None)
    p_encode.add_argument(
        "--verify",
        action="store_true",
        help="Check the round-trip error bound before writing",
    )

    p_decode = sub.add_parser("decode", help="Decode an encoded file")
    p_decode.add_argument("src", type=Path)
    p_decode.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output path; .npy or raw float32 by suffix (default: SRC.npy)",
    )

    p_info = sub.add_parser("info", help="Print the header of an encoded file")
    p_info.add_argument("src", type=Path)

    p_stats = sub.add_parser("stats", help="Print round-trip error statistics")
    p_stats.add_argument("src", type=Path)
    p_stats.add_argument("--cycles", type=int, default=1)

    return parser


def _print_table(values: dict[str, object]) -> None:
    width = max(len(key) for key in values)
    for key, value in values.items():
        if isinstance(value, float):
            print(f"{key:<{width}}  {value:.6g}")
        else:
            print(f"{key:<{width}}  {value}")


def _run(args: argparse.Namespace, settings: Settings) -> None:
    if args.command == "encode":
        out = compress_file(
            args.src,
            args.output,
            verify=args.verify or settings.verify,
            suffix=settings.encoded_suffix,
        )
        print(out)
    elif args.command == "decode":
        print(decompress_file(args.src, args.output))
    elif args.command == "info":
        _print_table(get_compression_info(args.src.read_bytes()))
    elif args.command == "stats":
        _print_table(roundtrip_error_stats(load_samples(args.src), cycles=args.cycles))


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
        logger.error("%s", e)
        return 1

    level = (args.log_level or settings.log_level).upper()

    try:
        logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
        _run(args, settings)
    except (InvalidInputError, FileNotFoundError, ValueError, RuntimeError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
