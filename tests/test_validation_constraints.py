import math

import pytest

from randomorg.validation.constraints import Bound, EveryElement, Length, SameVariant, validate
from randomorg.validation.seq_bound import Multiform, Uniform, as_sequence_bound, to_wire, variant_name
from randomorg.validation.violations import (
    INVALID_BOUND_CLOSED_MAX,
    INVALID_BOUND_CLOSED_MIN,
    INVALID_LENGTH_EXACT,
    INVALID_SAME_VARIANT,
    ValidationOutcome,
    Violation,
    combine,
)
from randomorg.utils.exceptions import ValidationError


def test_bound_is_inclusive_on_both_ends() -> None:
    bound = Bound(1, 10)
    assert validate(1, "n", bound).value == 1
    assert validate(10, "n", bound).value == 10
    assert validate(5.5, "mean", bound).is_ok


def test_bound_reports_field_value_and_side() -> None:
    bound = Bound(1, 10)

    low = validate(0, "n", bound)
    assert not low.is_ok
    assert low.violations == (Violation(INVALID_BOUND_CLOSED_MIN, ("n",), (0,), 1),)

    high = validate(11, "n", bound)
    assert high.violations[0].rule_id == INVALID_BOUND_CLOSED_MAX
    assert high.violations[0].field_values == (11,)
    assert high.violations[0].expected == 10


def test_bound_rejects_non_numbers_as_caller_bug() -> None:
    with pytest.raises(TypeError):
        validate("5", "n", Bound(1, 10))
    with pytest.raises(TypeError):
        validate(True, "n", Bound(0, 10))


def test_integral_bound_rejects_floats() -> None:
    bound = Bound(1, 10, integral=True)
    assert validate(5, "n", bound).is_ok
    with pytest.raises(TypeError):
        validate(5.5, "n", bound)
    with pytest.raises(TypeError):
        validate(5.0, "n", bound)


@pytest.mark.parametrize(
    "value, rule_id",
    [
        (math.nan, INVALID_BOUND_CLOSED_MIN),
        (-math.inf, INVALID_BOUND_CLOSED_MIN),
        (math.inf, INVALID_BOUND_CLOSED_MAX),
    ],
)
def test_bound_rejects_non_finite_values(value: float, rule_id: str) -> None:
    out = validate(value, "mean", Bound(-1_000_000, 1_000_000))
    assert not out.is_ok
    assert out.violations[0].rule_id == rule_id
    assert out.violations[0].field_names == ("mean",)


def test_length_exact() -> None:
    assert validate([1, 2, 3], "xs", Length(3)).is_ok
    out = validate([1, 2], "xs", Length(3))
    assert out.violations[0].rule_id == INVALID_LENGTH_EXACT
    assert out.violations[0].field_values == (2,)
    assert out.violations[0].expected == 3


def test_every_element_validate() -> None:
    every = EveryElement(Bound(1, 10))

    assert validate([1, 4, 10], "vs1", every).is_ok

    out = validate([1, 11], "vs2", every)
    assert not out.is_ok
    assert out.violations[0].field_names == ("vs2[1]",)
    assert out.violations[0].field_values == (11,)


def test_every_element_stops_at_first_failure() -> None:
    out = validate([0, 50, 99], "xs", EveryElement(Bound(1, 10)))
    assert len(out.violations) == 1
    assert out.violations[0].field_names == ("xs[0]",)


def test_every_element_on_empty_sequence_succeeds() -> None:
    assert validate([], "xs", EveryElement(Bound(1, 10))).is_ok


def test_same_variant_validate() -> None:
    ok = validate((Uniform(10), Uniform(20)), ("min", "max"), SameVariant())
    assert ok.is_ok
    assert ok.value == (Uniform(10), Uniform(20))

    bad = validate((Uniform(30), Multiform([1, 2, 3])), ("min", "max"), SameVariant())
    assert not bad.is_ok
    (violation,) = bad.violations
    assert violation.rule_id == INVALID_SAME_VARIANT
    assert violation.field_names == ("min", "max")
    assert violation.field_values == ("Uniform", "Multiform")


def test_same_variant_accepts_two_multiforms_of_different_length() -> None:
    assert validate((Multiform([1]), Multiform([1, 2])), ("a", "b"), SameVariant()).is_ok


def test_same_variant_needs_a_field_pair() -> None:
    with pytest.raises(TypeError):
        validate((Uniform(1), Uniform(2)), "min", SameVariant())


def test_unknown_constraint_rejected() -> None:
    with pytest.raises(TypeError):
        validate(1, "n", object())  # type: ignore[arg-type]


def test_outcome_and_accumulates_violations_from_both_sides() -> None:
    a = validate(0, "n", Bound(1, 10))
    b = validate(99, "length", Bound(1, 32))
    both = a.and_(b)
    assert [v.field_names[0] for v in both.violations] == ["n", "length"]

    ok = validate(1, "n", Bound(1, 10)).and_(validate(2, "length", Bound(1, 32)))
    assert ok.value == (1, 2)


def test_outcome_failure_requires_a_violation() -> None:
    with pytest.raises(ValueError):
        ValidationOutcome.failure([])


def test_outcome_result_raises_validation_error() -> None:
    out = combine(validate(0, "n", Bound(1, 10)), validate(5, "m", Bound(1, 10)))
    with pytest.raises(ValidationError) as err:
        out.result()
    assert err.value.field_names == ["n"]
    assert err.value.code == "VALIDATION_ERROR"
    assert err.value.to_dict()["details"]["violations"][0]["rule_id"] == INVALID_BOUND_CLOSED_MIN


def test_outcome_map_skips_failures() -> None:
    failed = validate(0, "n", Bound(1, 10)).map(lambda v: v * 2)
    assert not failed.is_ok
    assert validate(3, "n", Bound(1, 10)).map(lambda v: v * 2).value == 6


def test_sequence_bound_helpers() -> None:
    assert as_sequence_bound(5) == Uniform(5)
    assert as_sequence_bound([1, 2]) == Multiform((1, 2))
    assert as_sequence_bound(Multiform([3])) == Multiform((3,))
    assert variant_name(Uniform(1)) == "Uniform"
    assert variant_name(Multiform([1])) == "Multiform"
    assert to_wire(Uniform(7)) == 7
    assert to_wire(Multiform([7, 8])) == [7, 8]
    with pytest.raises(TypeError):
        as_sequence_bound(True)
    with pytest.raises(TypeError):
        as_sequence_bound("12")
    with pytest.raises(TypeError):
        Multiform([2.5, 3])
    with pytest.raises(TypeError):
        as_sequence_bound([1, True])
