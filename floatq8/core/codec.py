"""8-bit min/max quantization codec.

Buffer layout:
  [Header: 8 bytes]
    - min: float32, little-endian
    - max: float32, little-endian
  [Payload: N bytes]
    - UInt8 array, one symbol per sample, in original order

Symbols map uniformly onto [min, max] with 256 levels. Normalized values are
rounded half-to-even (numpy.rint); all intermediate arithmetic is float64.
Constant input (min == max) stores an all-zero payload and decodes to min.
"""

from __future__ import annotations

import struct
from typing import Any

import numpy as np
from pydantic import ValidationError

from floatq8.components.header import HEADER_FORMAT, QuantHeader
from floatq8.core.errors import (
    EmptyInputError,
    InvalidHeaderError,
    NonFiniteInputError,
    TruncatedBufferError,
)

HEADER_SIZE = struct.calcsize(HEADER_FORMAT)  # 8
LEVELS = 255

BufferLike = bytes | bytearray | memoryview


def encoded_size(n: int) -> int:
    """Return the encoded buffer size for ``n`` samples."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return HEADER_SIZE + n


def sample_count(buffer: BufferLike) -> int:
    """Return the number of samples stored in an encoded buffer."""
    size = len(buffer)
    if size < HEADER_SIZE:
        raise TruncatedBufferError(
            f"Buffer too short: need {HEADER_SIZE} bytes, got {size}"
        )
    return size - HEADER_SIZE


def read_header(buffer: BufferLike) -> QuantHeader:
    """Parse and validate the header of an encoded buffer.

    Raises:
        TruncatedBufferError: If the buffer is shorter than HEADER_SIZE
        InvalidHeaderError: If min/max are non-finite or min > max
    """
    sample_count(buffer)
    min_val, max_val = struct.unpack_from(HEADER_FORMAT, buffer, 0)
    try:
        return QuantHeader(min_val=min_val, max_val=max_val)
    except ValidationError as e:
        raise InvalidHeaderError(
            f"Invalid header (min={min_val!r}, max={max_val!r}): {e}"
        ) from e


def _as_samples(samples: Any) -> np.ndarray:
    data = np.asarray(samples, dtype=np.float32).ravel()
    if data.size == 0:
        raise EmptyInputError("Cannot compress empty array")
    if not np.isfinite(data).all():
        bad = int(np.count_nonzero(~np.isfinite(data)))
        raise NonFiniteInputError(
            f"Cannot compress non-finite samples: {bad} NaN/inf value(s)"
        )
    return data


def encode(samples: Any) -> bytes:
    """Quantize float samples to an 8-byte header plus one uint8 per sample.

    Args:
        samples: Array-like of real numbers; converted to float32 and
            flattened in C order

    Returns:
        Encoded buffer of exactly ``8 + N`` bytes

    Raises:
        EmptyInputError: If there are no samples
        NonFiniteInputError: If any sample is NaN or infinite
    """
    data = _as_samples(samples)

    min_val = data.min()
    max_val = data.max()
    header = QuantHeader(min_val=float(min_val), max_val=float(max_val))

    extent = header.extent
    if extent == 0:
        payload = np.zeros(data.size, dtype=np.uint8)
    else:
        normalized = (data.astype(np.float64) - header.min_val) / extent
        payload = np.clip(np.rint(normalized * LEVELS), 0, LEVELS).astype(np.uint8)

    return header.to_bytes() + payload.tobytes()


def decode(buffer: BufferLike) -> tuple[float, float, np.ndarray]:
    """Reconstruct samples from an encoded buffer.

    Args:
        buffer: Encoded bytes (header + payload)

    Returns:
        Tuple of (min, max, samples) where samples is a float32 array of
        length ``len(buffer) - 8``

    Raises:
        TruncatedBufferError: If the buffer is shorter than the header
        InvalidHeaderError: If the header bounds are invalid
    """
    header = read_header(buffer)
    symbols = np.frombuffer(buffer, dtype=np.uint8)[HEADER_SIZE:]

    extent = header.extent
    if extent == 0:
        samples = np.full(symbols.size, header.min_val, dtype=np.float32)
    else:
        scaled = symbols.astype(np.float64) / LEVELS * extent
        samples = (header.min_val + scaled).astype(np.float32)

    return header.min_val, header.max_val, samples
