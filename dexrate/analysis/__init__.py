"""All-pairs analysis helpers."""

from dexrate.analysis.rate_matrix import rate_matrix, rate_records

__all__ = ["rate_matrix", "rate_records"]
