"""Violation records and the success/failure outcome constraints report into."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from randomorg.utils.exceptions import ValidationError

T = TypeVar("T")
U = TypeVar("U")

INVALID_BOUND_CLOSED_MIN = "invalid-bound-closed-min"
INVALID_BOUND_CLOSED_MAX = "invalid-bound-closed-max"
INVALID_LENGTH_EXACT = "invalid-length-exact"
INVALID_SAME_VARIANT = "invalid-same-variant"


@dataclass(frozen=True, slots=True)
class Violation:
    """One failed constraint: a stable rule id plus the offending field(s) and value(s)."""

    rule_id: str
    field_names: tuple[str, ...]
    field_values: tuple[Any, ...]
    expected: Any = None

    @property
    def message(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in zip(self.field_names, self.field_values))
        if self.expected is None:
            return f"{self.rule_id}: {fields}"
        return f"{self.rule_id}: {fields} (expected {self.expected!r})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "field_names": list(self.field_names),
            "field_values": list(self.field_values),
            "expected": self.expected,
        }


def invalid_value(rule_id: str, field_name: str, value: Any, expected: Any = None) -> Violation:
    return Violation(rule_id, (field_name,), (value,), expected)


def invalid_relation(rule_id: str, name1: str, value1: Any, name2: str, value2: Any) -> Violation:
    return Violation(rule_id, (name1, name2), (value1, value2))


class ValidationOutcome(Generic[T]):
    """Either a validated value or a non-empty, ordered list of violations."""

    __slots__ = ("_value", "_violations")

    def __init__(self, value: T | None, violations: Sequence[Violation]):
        self._value = value
        self._violations = tuple(violations)

    @classmethod
    def success(cls, value: T) -> ValidationOutcome[T]:
        return cls(value, ())

    @classmethod
    def failure(cls, violations: Sequence[Violation]) -> ValidationOutcome[T]:
        if not violations:
            raise ValueError("a failed validation must carry at least one violation")
        return cls(None, violations)

    @property
    def is_ok(self) -> bool:
        return not self._violations

    @property
    def violations(self) -> tuple[Violation, ...]:
        return self._violations

    @property
    def value(self) -> T:
        if not self.is_ok:
            raise ValueError("failed validation has no value")
        return self._value  # type: ignore[return-value]

    def and_(self, other: ValidationOutcome[U]) -> ValidationOutcome[tuple[T, U]]:
        """Pair two outcomes; violations from both sides are kept in order."""
        if self.is_ok and other.is_ok:
            return ValidationOutcome.success((self.value, other.value))
        return ValidationOutcome.failure(self._violations + other.violations)

    def map(self, fn: Callable[[T], U]) -> ValidationOutcome[U]:
        if not self.is_ok:
            return ValidationOutcome.failure(self._violations)
        return ValidationOutcome.success(fn(self.value))

    def result(self) -> T:
        """Return the validated value or raise ValidationError with every violation."""
        if not self.is_ok:
            raise ValidationError(list(self._violations))
        return self.value

    def __repr__(self) -> str:
        if self.is_ok:
            return f"ValidationOutcome.success({self._value!r})"
        return f"ValidationOutcome.failure({list(self._violations)!r})"


def combine(*outcomes: ValidationOutcome[Any]) -> ValidationOutcome[tuple[Any, ...]]:
    """Flatten several outcomes into one tuple outcome, accumulating violations."""
    violations: list[Violation] = []
    values: list[Any] = []
    for outcome in outcomes:
        if outcome.is_ok:
            values.append(outcome.value)
        else:
            violations.extend(outcome.violations)
    if violations:
        return ValidationOutcome.failure(violations)
    return ValidationOutcome.success(tuple(values))
