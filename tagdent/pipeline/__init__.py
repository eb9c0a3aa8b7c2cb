"""Fault-tolerant transformation pipeline.

Every plugin hook in tagdent runs through these helpers, so one misbehaving
transform never aborts the surrounding operation.
"""

from .apply import (
    cautiously_apply,
    cautiously_apply_each,
    cautiously_apply_each_with_report,
    cautiously_apply_with_report,
)

__all__ = [
    "cautiously_apply",
    "cautiously_apply_each",
    "cautiously_apply_with_report",
    "cautiously_apply_each_with_report",
]
