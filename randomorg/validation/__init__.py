"""Parameter validation: constraint primitives, outcomes and per-operation pipelines."""

from randomorg.validation.constraints import Bound, Constraint, EveryElement, Length, SameVariant, validate
from randomorg.validation.seq_bound import (
    Multiform,
    SequenceBound,
    Uniform,
    as_sequence_bound,
    same_variant,
    to_wire,
    variant_name,
)
from randomorg.validation.violations import (
    INVALID_BOUND_CLOSED_MAX,
    INVALID_BOUND_CLOSED_MIN,
    INVALID_LENGTH_EXACT,
    INVALID_SAME_VARIANT,
    ValidationOutcome,
    Violation,
    combine,
)

__all__ = [
    "Bound",
    "Constraint",
    "EveryElement",
    "Length",
    "SameVariant",
    "validate",
    "Multiform",
    "SequenceBound",
    "Uniform",
    "as_sequence_bound",
    "same_variant",
    "to_wire",
    "variant_name",
    "INVALID_BOUND_CLOSED_MAX",
    "INVALID_BOUND_CLOSED_MIN",
    "INVALID_LENGTH_EXACT",
    "INVALID_SAME_VARIANT",
    "ValidationOutcome",
    "Violation",
    "combine",
]
