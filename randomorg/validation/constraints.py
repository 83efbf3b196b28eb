"""Constraint primitives and the single dispatch point that applies them."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Sequence, Union

from randomorg.validation.seq_bound import SequenceBound, same_variant, variant_name
from randomorg.validation.violations import (
    INVALID_BOUND_CLOSED_MAX,
    INVALID_BOUND_CLOSED_MIN,
    INVALID_LENGTH_EXACT,
    INVALID_SAME_VARIANT,
    ValidationOutcome,
    invalid_relation,
    invalid_value,
)


@dataclass(frozen=True, slots=True)
class Bound:
    """Closed range: lo <= value <= hi.

    With ``integral`` set, only ``int`` values are accepted.
    """

    lo: Real
    hi: Real
    integral: bool = False


@dataclass(frozen=True, slots=True)
class Length:
    """A sequence must hold exactly n elements."""

    n: int


@dataclass(frozen=True, slots=True)
class EveryElement:
    """Apply the inner constraint to each element; report only the first failure."""

    inner: "Constraint"


@dataclass(frozen=True, slots=True)
class SameVariant:
    """Relation over two sequence bounds: both Uniform or both Multiform."""


Constraint = Union[Bound, Length, EveryElement, SameVariant]


def validate(value: Any, field: str | tuple[str, str], constraint: Constraint) -> ValidationOutcome[Any]:
    """Check ``value`` named ``field`` against ``constraint``.

    ``SameVariant`` takes a pair of bounds and a pair of field names; every
    other constraint takes a single field name.
    """
    if isinstance(constraint, Bound):
        return _validate_bound(value, _single(field), constraint)
    if isinstance(constraint, Length):
        return _validate_length(value, _single(field), constraint)
    if isinstance(constraint, EveryElement):
        return _validate_every_element(value, _single(field), constraint)
    if isinstance(constraint, SameVariant):
        return _validate_same_variant(value, field)
    raise TypeError(f"unsupported constraint: {constraint!r}")


def _single(field: str | tuple[str, str]) -> str:
    if not isinstance(field, str):
        raise TypeError(f"expected a single field name, got {field!r}")
    return field


def _validate_bound(value: Any, field: str, bound: Bound) -> ValidationOutcome[Any]:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{field} must be a number, got {type(value).__name__}")
    if bound.integral and not isinstance(value, int):
        raise TypeError(f"{field} must be an integer, got {type(value).__name__}")
    # NaN compares false both ways and lands on the lower bound.
    if not value >= bound.lo:
        return ValidationOutcome.failure([invalid_value(INVALID_BOUND_CLOSED_MIN, field, value, bound.lo)])
    if not value <= bound.hi:
        return ValidationOutcome.failure([invalid_value(INVALID_BOUND_CLOSED_MAX, field, value, bound.hi)])
    return ValidationOutcome.success(value)


def _validate_length(value: Sequence[Any], field: str, length: Length) -> ValidationOutcome[Any]:
    actual = len(value)
    if actual != length.n:
        return ValidationOutcome.failure([invalid_value(INVALID_LENGTH_EXACT, field, actual, length.n)])
    return ValidationOutcome.success(value)


def _validate_every_element(value: Sequence[Any], field: str, every: EveryElement) -> ValidationOutcome[Any]:
    for i, element in enumerate(value):
        outcome = validate(element, f"{field}[{i}]", every.inner)
        if not outcome.is_ok:
            return ValidationOutcome.failure(outcome.violations)
    return ValidationOutcome.success(value)


def _validate_same_variant(
    value: tuple[SequenceBound, SequenceBound],
    fields: str | tuple[str, str],
) -> ValidationOutcome[Any]:
    if isinstance(fields, str):
        raise TypeError(f"SameVariant needs a pair of field names, got {fields!r}")
    name1, name2 = fields
    first, second = value
    if same_variant(first, second):
        return ValidationOutcome.success(value)
    return ValidationOutcome.failure(
        [invalid_relation(INVALID_SAME_VARIANT, name1, variant_name(first), name2, variant_name(second))]
    )
