"""High-level API for compressing float samples to bytes and files.

Provides compress()/decompress() over in-memory buffers plus helpers that read
and write sample files (.npy, or raw little-endian float32 otherwise).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import numpy as np

from floatq8.components.header import QuantHeader, Reconstruction
from floatq8.core.codec import HEADER_SIZE, decode, encode, read_header, sample_count

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]

DEFAULT_SUFFIX = ".q8"


def compress(samples: Any) -> bytes:
    """Compress float samples to bytes.

    Args:
        samples: Array-like of finite real numbers; flattened in C order

    Returns:
        Encoded buffer (8-byte header + one byte per sample)

    Raises:
        EmptyInputError: If there are no samples
        NonFiniteInputError: If any sample is NaN or infinite

    Example:
        >>> import numpy as np
        >>> from floatq8 import compress, decompress
        >>> data = compress(np.linspace(0.0, 1.0, 100, dtype=np.float32))
        >>> len(data)
        108
        >>> decompress(data).samples.shape
        (100,)
    """
    data = encode(samples)
    logger.debug("Encoded %d samples into %d bytes", len(data) - HEADER_SIZE, len(data))
    return data


def decompress(data: bytes) -> Reconstruction:
    """Decompress bytes to a Reconstruction (header + float32 samples).

    Raises:
        TruncatedBufferError: If data is shorter than the header
        InvalidHeaderError: If the header bounds are invalid
    """
    min_val, max_val, samples = decode(data)
    logger.debug("Decoded %d samples in [%g, %g]", samples.size, min_val, max_val)
    header = QuantHeader(min_val=min_val, max_val=max_val)
    return Reconstruction(header=header, samples=samples)


def get_compression_info(data: bytes) -> dict[str, Any]:
    """Get header information about an encoded buffer without decoding it.

    Returns:
        Dictionary with keys: min, max, count, extent, step, encoded_bytes
    """
    header = read_header(data)
    return {
        "min": header.min_val,
        "max": header.max_val,
        "count": sample_count(data),
        "extent": header.extent,
        "step": header.step,
        "encoded_bytes": len(data),
    }


def get_compression_ratio(samples: Any, compressed_data: bytes) -> float:
    """Calculate compression ratio (raw float32 size / encoded size)."""
    original_bytes = np.asarray(samples, dtype=np.float32).nbytes
    compressed_bytes = len(compressed_data)
    return original_bytes / compressed_bytes if compressed_bytes > 0 else float("inf")


def load_samples(path: PathLike) -> np.ndarray:
    """Read samples from a .npy file or a raw little-endian float32 file."""
    path = Path(path)
    if path.suffix == ".npy":
        return np.asarray(np.load(path, allow_pickle=False), dtype=np.float32)
    raw = path.read_bytes()
    if len(raw) % 4 != 0:
        raise ValueError(
            f"Raw float32 file size must be a multiple of 4 bytes, got {len(raw)}"
        )
    return np.frombuffer(raw, dtype="<f4").astype(np.float32)


def save_samples(path: PathLike, samples: np.ndarray) -> None:
    """Write samples as .npy or raw little-endian float32, by suffix."""
    path = Path(path)
    data = np.asarray(samples, dtype=np.float32)
    if path.suffix == ".npy":
        np.save(path, data, allow_pickle=False)
    else:
        path.write_bytes(data.astype("<f4").tobytes())


def _check_destination(src: Path, out: Path) -> None:
    if out.resolve() == src.resolve():
        raise ValueError(f"Output path {out} would overwrite the input file")


def _verify_buffer(samples: np.ndarray, data: bytes, src: Path) -> None:
    recon = decompress(data)
    original = samples.ravel().astype(np.float64)
    max_abs_error = float(np.abs(recon.samples.astype(np.float64) - original).max())
    # Allow float32 rounding of the reconstruction on top of the half step
    slack = float(np.finfo(np.float32).eps) * max(abs(recon.min_val), abs(recon.max_val))
    if max_abs_error > recon.header.max_error + slack:
        raise RuntimeError(
            f"Round-trip error {max_abs_error:g} exceeds bound "
            f"{recon.header.max_error:g} for {src}"
        )
    logger.debug("Verified %s: max error %g", src, max_abs_error)


def compress_file(
    src: PathLike,
    dst: PathLike | None = None,
    verify: bool = False,
    suffix: str = DEFAULT_SUFFIX,
) -> Path:
    """Compress a sample file to an encoded file.

    Args:
        src: Sample file (.npy or raw float32)
        dst: Output path (defaults to src with ``suffix``)
        verify: Decode the result and check the round-trip error bound
        suffix: Suffix used when dst is not given

    Returns:
        Path of the written file

    Raises:
        ValueError: If the output path is the input file
        RuntimeError: If verify is set and the bound is violated
    """
    src = Path(src)
    out = Path(dst) if dst is not None else src.with_suffix(suffix)
    _check_destination(src, out)
    samples = load_samples(src)
    data = compress(samples)

    if verify:
        _verify_buffer(samples, data, src)

    out.write_bytes(data)
    logger.info(
        "Wrote %s (%d samples, %d -> %d bytes)",
        out,
        samples.size,
        samples.nbytes,
        len(data),
    )
    return out


def decompress_file(src: PathLike, dst: PathLike | None = None) -> Path:
    """Decompress an encoded file to a sample file (.npy by default)."""
    src = Path(src)
    out = Path(dst) if dst is not None else src.with_suffix(".npy")
    _check_destination(src, out)
    recon = decompress(src.read_bytes())
    save_samples(out, recon.samples)
    logger.info("Wrote %s (%d samples)", out, recon.samples.size)
    return out
