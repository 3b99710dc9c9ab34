"""8-bit float sample codec.

Compresses float32 samples to a fixed 8-byte header (min, max) followed by one
uint8 symbol per sample, giving a ~4:1 size reduction at the cost of precision.

Quick Start:
    >>> import numpy as np
    >>> from floatq8 import encode, decode
    >>>
    >>> samples = np.array([1.0, 2.0, 3.0, 4.0, 5.0], dtype=np.float32)
    >>> buf = encode(samples)
    >>> len(buf)
    13
    >>> lo, hi, recon = decode(buf)
    >>> lo, hi
    (1.0, 5.0)

For file handling and error statistics:
    >>> from floatq8 import compress_file, roundtrip_error_stats
    >>> stats = roundtrip_error_stats(samples)
    >>> stats["within_bound"]
    True
"""

__version__ = "0.1.0"

from floatq8.api import (
    compress,
    compress_file,
    decompress,
    decompress_file,
    get_compression_info,
    get_compression_ratio,
)
from floatq8.components.header import QuantHeader, Reconstruction
from floatq8.core.codec import (
    HEADER_SIZE,
    decode,
    encode,
    encoded_size,
    read_header,
    sample_count,
)
from floatq8.core.errors import (
    EmptyInputError,
    InvalidHeaderError,
    InvalidInputError,
    NonFiniteInputError,
    TruncatedBufferError,
)
from floatq8.eval.roundtrip import roundtrip, roundtrip_error_stats

__all__ = [
    "__version__",
    "HEADER_SIZE",
    "encode",
    "decode",
    "encoded_size",
    "read_header",
    "sample_count",
    "compress",
    "decompress",
    "compress_file",
    "decompress_file",
    "get_compression_info",
    "get_compression_ratio",
    "QuantHeader",
    "Reconstruction",
    "roundtrip",
    "roundtrip_error_stats",
    "InvalidInputError",
    "EmptyInputError",
    "NonFiniteInputError",
    "TruncatedBufferError",
    "InvalidHeaderError",
]
