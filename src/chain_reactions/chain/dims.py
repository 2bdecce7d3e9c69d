from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np


class ValidationError(ValueError):
    """
    Raised when a raw dimension sequence cannot describe a matrix chain.

    Attributes:
        reason: human-readable description of the failed condition.
        index: position of the offending element, if any.
        value: the offending raw value, if any.
    """

    def __init__(self, reason: str, *, index: Optional[int] = None, value: Any = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.index = index
        self.value = value


@dataclass(frozen=True)
class Matrix:
    """One link of the chain, derived from two adjacent dimensions."""

    index: int
    rows: int
    cols: int

    @property
    def label(self) -> str:
        return f"A{self.index + 1}"

    @property
    def name(self) -> str:
        return f"M{self.index + 1}"

    @property
    def size(self) -> str:
        return f"{self.rows}×{self.cols}"


@dataclass(frozen=True)
class DimensionSequence:
    """
    Validated chain dimensions: matrix i is ``values[i] x values[i + 1]``.
    """

    values: Tuple[int, ...]

    def __post_init__(self) -> None:
        for idx, value in enumerate(self.values):
            _ensure_positive(idx, value)
        _ensure_length(len(self.values))

    @property
    def num_matrices(self) -> int:
        return len(self.values) - 1

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, idx: int) -> int:
        return self.values[idx]

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)


def _ensure_positive(idx: int, value: int) -> None:
    if value <= 0:
        raise ValidationError(
            f"Dimension at position {idx} must be positive, got {value}.",
            index=idx,
            value=value,
        )


def _ensure_length(count: int) -> None:
    if count < 2:
        raise ValidationError(f"Need at least 2 dimensions (for 1 matrix), got {count}.")


def _not_a_number(idx: int, raw: Any) -> ValidationError:
    return ValidationError(
        f"Dimension at position {idx} is not a number: {raw!r}.", index=idx, value=raw
    )


def _integral(idx: int, raw: Any, number: float) -> int:
    if not float(number).is_integer():
        raise ValidationError(
            f"Dimension at position {idx} is not an integer: {raw!r}.",
            index=idx,
            value=raw,
        )
    return int(number)


def _coerce_dimension(idx: int, raw: Any) -> int:
    if isinstance(raw, (bool, np.bool_)):
        raise _not_a_number(idx, raw)
    if isinstance(raw, Integral):
        return int(raw)
    if isinstance(raw, Real):
        return _integral(idx, raw, raw)
    if isinstance(raw, str):
        token = raw.strip()
        try:
            return int(token)
        except ValueError:
            pass
        try:
            number = float(token)
        except ValueError:
            raise _not_a_number(idx, raw) from None
        return _integral(idx, raw, number)
    raise _not_a_number(idx, raw)


def validate(values: Iterable[Any]) -> DimensionSequence:
    """
    Check raw values and build a :class:`DimensionSequence`.

    Accepts ints, integral floats and numeric strings (``"10"`` or
    ``"10.0"``). Elements are checked in order, each for being a number
    and then for being positive, so :class:`ValidationError` names the first
    offending element. The length condition is checked last.
    """
    if isinstance(values, DimensionSequence):
        return values
    coerced: List[int] = []
    for idx, raw in enumerate(values):
        value = _coerce_dimension(idx, raw)
        _ensure_positive(idx, value)
        coerced.append(value)
    _ensure_length(len(coerced))
    return DimensionSequence(values=tuple(coerced))


def parse_dimensions(text: str) -> DimensionSequence:
    """
    Parse a comma-separated string such as ``"10, 20, 30"``.
    """
    tokens = text.split(",")
    if len(tokens) == 1 and not tokens[0].strip():
        raise ValidationError("Need at least 2 dimensions (for 1 matrix), got 0.")
    return validate(tokens)


def derive_matrices(dims: DimensionSequence) -> List[Matrix]:
    return [
        Matrix(index=i, rows=dims[i], cols=dims[i + 1])
        for i in range(dims.num_matrices)
    ]


def dims_from_shapes(arrays: Sequence[Any]) -> DimensionSequence:
    """
    Derive the dimension sequence of a chain of 2-D arrays (anything with a
    numpy-compatible shape). Adjacent inner dimensions must agree.
    """
    if not arrays:
        raise ValidationError("Need at least one matrix to derive dimensions.")

    shapes = [np.shape(a) for a in arrays]
    for idx, shape in enumerate(shapes):
        if len(shape) != 2:
            raise ValidationError(
                f"Operand {idx} is not 2-D (shape {shape}).", index=idx, value=shape
            )
    for idx in range(1, len(shapes)):
        if shapes[idx - 1][1] != shapes[idx][0]:
            raise ValidationError(
                f"Operand {idx} has {shapes[idx][0]} rows but operand {idx - 1} "
                f"has {shapes[idx - 1][1]} columns.",
                index=idx,
                value=shapes[idx],
            )

    values = [shapes[0][0]] + [shape[1] for shape in shapes]
    return validate(values)
