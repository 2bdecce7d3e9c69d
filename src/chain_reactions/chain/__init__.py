"""
Chain description: validated dimensions and the matrices they imply.
"""

from .dims import (
    DimensionSequence,
    Matrix,
    ValidationError,
    derive_matrices,
    dims_from_shapes,
    parse_dimensions,
    validate,
)

__all__ = [
    "DimensionSequence",
    "Matrix",
    "ValidationError",
    "derive_matrices",
    "dims_from_shapes",
    "parse_dimensions",
    "validate",
]
