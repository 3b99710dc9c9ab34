from floatq8.eval.roundtrip import roundtrip, roundtrip_error_stats

__all__ = [
    "roundtrip",
    "roundtrip_error_stats",
]
