"""Header and reconstruction components."""

from __future__ import annotations

import struct

import numpy as np
from pydantic import BaseModel, Field, field_validator, model_validator

HEADER_FORMAT = "<ff"


class Component(BaseModel):
    """Base class for codec data containers.

    Components are validated with Pydantic so that invalid bounds never reach
    the quantizer or leave the decoder.
    """

    model_config = {"arbitrary_types_allowed": True}


class QuantHeader(Component):
    """Value range stored in the first 8 bytes of an encoded buffer.

    Attributes:
        min_val: Smallest encoded sample (float32-representable)
        max_val: Largest encoded sample (float32-representable)
    """

    min_val: float = Field(allow_inf_nan=False)
    max_val: float = Field(allow_inf_nan=False)

    @model_validator(mode="after")
    def _check_order(self) -> QuantHeader:
        if self.min_val > self.max_val:
            raise ValueError(
                f"min_val must not exceed max_val, got {self.min_val} > {self.max_val}"
            )
        return self

    @property
    def extent(self) -> float:
        """Span max - min (float64)."""
        return self.max_val - self.min_val

    @property
    def step(self) -> float:
        """Quantization step size (extent / 255)."""
        return self.extent / 255.0

    @property
    def max_error(self) -> float:
        """Worst-case reconstruction error (half a step)."""
        return self.extent / 510.0

    @property
    def is_degenerate(self) -> bool:
        """True when every encoded sample had the same value."""
        return self.extent == 0

    def to_bytes(self) -> bytes:
        """Pack as two little-endian float32 values (min first)."""
        return struct.pack(HEADER_FORMAT, self.min_val, self.max_val)


class Reconstruction(Component):
    """Decoded samples together with the header they were scaled by.

    Attributes:
        header: Bounds read from the buffer
        samples: Reconstructed float32 samples (1-D)
    """

    header: QuantHeader
    samples: np.ndarray

    @field_validator("samples")
    @classmethod
    def _check_samples(cls, value: np.ndarray) -> np.ndarray:
        if value.ndim != 1:
            raise ValueError(f"samples must be 1-D, got shape {value.shape}")
        if value.dtype != np.float32:
            raise ValueError(f"samples must be float32, got {value.dtype}")
        return value

    @property
    def min_val(self) -> float:
        return self.header.min_val

    @property
    def max_val(self) -> float:
        return self.header.max_val

    def as_tuple(self) -> tuple[float, float, np.ndarray]:
        """Return the (min, max, samples) triple produced by decode()."""
        return self.header.min_val, self.header.max_val, self.samples
