"""Typed records for transforms, measurement results and diagnostics."""

from .datatypes import (
    ApplicationReport,
    BoundTransform,
    MeasuredLines,
    PipelineConfig,
    Transform,
    TransformFailure,
)

__all__ = [
    "ApplicationReport",
    "BoundTransform",
    "MeasuredLines",
    "PipelineConfig",
    "Transform",
    "TransformFailure",
]
