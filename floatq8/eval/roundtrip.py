"""Round-trip error statistics for the 8-bit codec.

Uses scikit-image metrics so the numbers line up with the image-quality
figures reported elsewhere (MSE, PSNR over the sample range).
"""

from __future__ import annotations

from typing import Any

import numpy as np
from skimage.metrics import mean_squared_error, peak_signal_noise_ratio

from floatq8.core.codec import HEADER_SIZE, decode, encode


def roundtrip(samples: Any, cycles: int = 1) -> np.ndarray:
    """Apply encode -> decode ``cycles`` times and return the final samples."""
    if cycles < 1:
        raise ValueError(f"cycles must be >= 1, got {cycles}")
    current = samples
    for _ in range(cycles):
        _, _, current = decode(encode(current))
    return current


def roundtrip_error_stats(samples: Any, cycles: int = 1) -> dict[str, Any]:
    """Measure how far reconstructed samples drift from the originals.

    Args:
        samples: Array-like of finite real numbers (non-empty)
        cycles: Number of encode/decode passes to apply

    Returns:
        Dictionary with keys: count, min, max, extent, step, bound,
        max_abs_error, mse, psnr, within_bound, encoded_bytes, raw_bytes,
        compression_ratio
    """
    original = np.asarray(samples, dtype=np.float32).ravel()
    recon = roundtrip(original, cycles=cycles)

    min_val = float(original.min())
    max_val = float(original.max())
    extent = max_val - min_val
    bound = extent / 510.0

    # Compare in float64 so the float32 error is not rounded away
    original_64 = original.astype(np.float64)
    recon_64 = recon.astype(np.float64)
    abs_err = np.abs(recon_64 - original_64)
    max_abs_error = float(abs_err.max())
    mse = float(mean_squared_error(original_64, recon_64))

    if mse == 0.0 or extent == 0.0:
        psnr = float("inf")
    else:
        psnr = float(peak_signal_noise_ratio(original_64, recon_64, data_range=extent))

    # Allow float32 rounding of the reconstruction on top of the half step
    slack = float(np.finfo(np.float32).eps) * max(abs(min_val), abs(max_val))
    within_bound = bool(max_abs_error <= cycles * bound + slack)

    encoded_bytes = HEADER_SIZE + original.size
    raw_bytes = int(original.nbytes)

    return {
        "count": int(original.size),
        "min": min_val,
        "max": max_val,
        "extent": extent,
        "step": extent / 255.0,
        "bound": bound,
        "max_abs_error": max_abs_error,
        "mse": mse,
        "psnr": psnr,
        "within_bound": within_bound,
        "encoded_bytes": encoded_bytes,
        "raw_bytes": raw_bytes,
        "compression_ratio": raw_bytes / encoded_bytes,
    }
