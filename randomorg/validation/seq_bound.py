"""Sequence parameters given once for every sequence or once per sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True, slots=True)
class Uniform:
    """A single value applied to every generated sequence."""

    value: int


@dataclass(frozen=True, slots=True)
class Multiform:
    """One value per generated sequence."""

    values: tuple[int, ...]

    def __post_init__(self) -> None:
        values = tuple(self.values)
        for v in values:
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"Multiform values must be ints, got {type(v).__name__}")
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return len(self.values)


SequenceBound = Union[Uniform, Multiform]


def as_sequence_bound(value: int | Iterable[int] | SequenceBound) -> SequenceBound:
    """Wrap a plain int as Uniform and any iterable of ints as Multiform."""
    if isinstance(value, (Uniform, Multiform)):
        return value
    if isinstance(value, bool):
        raise TypeError("sequence bound must be an int or a list of ints, not bool")
    if isinstance(value, int):
        return Uniform(value)
    if isinstance(value, (str, bytes)):
        raise TypeError(f"sequence bound must be an int or a list of ints, not {type(value).__name__}")
    return Multiform(value)


def same_variant(a: SequenceBound, b: SequenceBound) -> bool:
    return type(a) is type(b)


def variant_name(bound: SequenceBound) -> str:
    """Describe the variant tag of a bound for violation reports."""
    return type(bound).__name__


def to_wire(bound: SequenceBound) -> int | list[int]:
    if isinstance(bound, Uniform):
        return bound.value
    return list(bound.values)
