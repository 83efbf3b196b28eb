"""Per-operation validation pipelines.

Each function checks caller parameters against the bounds the service
accepts and returns them in the shape the bindings send. Violations from
independent fields are accumulated; the call raises ``ValidationError``
carrying all of them.
"""

from __future__ import annotations

from typing import Any

from randomorg.utils.exceptions import StructuralMismatchError
from randomorg.validation.constraints import Bound, EveryElement, Length, SameVariant, validate
from randomorg.validation.seq_bound import Multiform, SequenceBound, Uniform
from randomorg.validation.violations import ValidationOutcome, Violation, combine

INTEGERS_N = Bound(1, 1_000, integral=True)
INTEGERS_MIN_MAX = Bound(-1_000_000_000, 1_000_000_000, integral=True)

STRINGS_N = Bound(1, 10_000, integral=True)
STRINGS_LENGTH = Bound(1, 32, integral=True)

GAUSSIANS_N = Bound(1, 10_000, integral=True)
GAUSSIANS_MEAN_STD_DEV = Bound(-1_000_000, 1_000_000)
GAUSSIANS_SIG_DIGITS = Bound(2, 14, integral=True)

UUIDS_N = Bound(1, 1_000, integral=True)

SEQUENCES_N = Bound(1, 1_000, integral=True)
SEQUENCES_LENGTH = Bound(1, 10_000, integral=True)
SEQUENCES_MIN_MAX = Bound(-1_000_000_000, 1_000_000_000, integral=True)


def generate_integers(n: int, min: int, max: int) -> tuple[int, int, int]:
    return combine(
        validate(n, "n", INTEGERS_N),
        validate(min, "min", INTEGERS_MIN_MAX),
        validate(max, "max", INTEGERS_MIN_MAX),
    ).result()


def generate_strings(n: int, length: int) -> tuple[int, int]:
    return validate(n, "n", STRINGS_N).and_(validate(length, "length", STRINGS_LENGTH)).result()


def generate_gaussians(n: int, mean: float, std_dev: float, sig_digits: int) -> tuple[int, float, float, int]:
    return combine(
        validate(n, "n", GAUSSIANS_N),
        validate(mean, "mean", GAUSSIANS_MEAN_STD_DEV),
        validate(std_dev, "std_dev", GAUSSIANS_MEAN_STD_DEV),
        validate(sig_digits, "sig_digits", GAUSSIANS_SIG_DIGITS),
    ).result()


def generate_uuids(n: int) -> int:
    return validate(n, "n", UUIDS_N).result()


def generate_integer_sequences(
    n: int,
    length: SequenceBound,
    min: SequenceBound,
    max: SequenceBound,
) -> tuple[int, SequenceBound, SequenceBound, SequenceBound]:
    """Validate integer-sequence parameters.

    length, min and max must share one shape. A mix of Uniform and Multiform
    raises ``StructuralMismatchError`` before any bound is checked. Multiform
    lists must each hold exactly ``n`` entries, every one inside the same
    bound the Uniform form uses.
    """
    _require_same_variant(length=length, min=min, max=max)

    outcome = combine(
        validate(n, "n", SEQUENCES_N),
        _validate_sequence_bound(length, "length", SEQUENCES_LENGTH, n),
        _validate_sequence_bound(min, "min", SEQUENCES_MIN_MAX, n),
        _validate_sequence_bound(max, "max", SEQUENCES_MIN_MAX, n),
    )
    return outcome.result()


def _require_same_variant(**bounds: SequenceBound) -> None:
    names = list(bounds)
    first = names[0]
    violations: list[Violation] = []
    for other in names[1:]:
        outcome = validate((bounds[first], bounds[other]), (first, other), SameVariant())
        violations.extend(outcome.violations)
    if violations:
        raise StructuralMismatchError(violations)


def _validate_sequence_bound(
    bound: SequenceBound,
    field: str,
    element_bound: Bound,
    n: int,
) -> ValidationOutcome[Any]:
    if isinstance(bound, Uniform):
        return validate(bound.value, field, element_bound).map(Uniform)
    values = list(bound.values)
    length_outcome = validate(values, field, Length(n))
    if not length_outcome.is_ok:
        return length_outcome
    return validate(values, field, EveryElement(element_bound)).map(Multiform)
