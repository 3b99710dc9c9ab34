#!/usr/bin/env python3
"""Quickstart example using the high-level compress/decompress API.

This example demonstrates the simplest way to use the codec:
- Generate a float32 signal (or load one from a .npy file)
- Compress it with compress()
- Decompress it back with decompress()
- Report compression ratio and round-trip error
"""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from floatq8.api import (
    compress,
    decompress,
    get_compression_info,
    get_compression_ratio,
)
from floatq8.eval.roundtrip import roundtrip_error_stats


def main() -> None:
    parser = argparse.ArgumentParser(description="Quickstart API example")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Input .npy file (defaults to a generated sine wave)",
    )
    parser.add_argument("--count", type=int, default=4096, help="Generated samples")
    args = parser.parse_args()

    if args.input is not None:
        samples = np.load(args.input).astype(np.float32)
    else:
        t = np.linspace(0.0, 8.0 * np.pi, args.count, dtype=np.float32)
        samples = (np.sin(t) * 100.0).astype(np.float32)

    data = compress(samples)
    recon = decompress(data)

    info = get_compression_info(data)
    print(f"Samples: {info['count']}  range: [{info['min']:g}, {info['max']:g}]")
    print(f"Size: {samples.nbytes} -> {len(data)} bytes "
          f"(ratio {get_compression_ratio(samples, data):.2f}x)")

    stats = roundtrip_error_stats(samples)
    print(f"Max error: {stats['max_abs_error']:.6g} (bound {stats['bound']:.6g})")
    print(f"PSNR: {stats['psnr']:.2f} dB")
    print(f"First samples: {samples[:4]} -> {recon.samples[:4]}")


if __name__ == "__main__":
    main()
