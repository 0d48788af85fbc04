"""Validated — a value paired with the errors accumulated while validating it."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .exceptions import IncompatibleMergeError, ValidationFailedError
from .result import Err, Ok, Result

T = TypeVar("T")


@dataclass(frozen=True)
class Validated(Generic[T]):
    """Accumulated outcome of running one or more validators.

    ``value`` is the last value accepted by a successful step, even when
    ``errors`` is non-empty.

    Usage::

        validated = Validated(person, ["Name must be John"])
        validated + Validated(person, ["Age must be positive"])
    """

    value: T
    errors: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __bool__(self) -> bool:
        return self.is_valid

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: Validated[T]) -> Validated[T]:
        """Concatenate the errors of *other* after ours.

        Raises :class:`IncompatibleMergeError` when the values differ.
        """
        if self.value != other.value:
            raise IncompatibleMergeError(self.value, other.value)
        return Validated(self.value, tuple(self.errors) + tuple(other.errors))

    def __add__(self, other: Validated[T]) -> Validated[T]:
        return self.merge(other)

    # ── Escalation ───────────────────────────────────────────────

    def throw_if_failed(
        self,
        factory: Callable[[list[str]], BaseException] | None = None,
    ) -> Validated[T]:
        """Return ``self`` if valid, otherwise raise ``factory(errors)``."""
        if self.is_valid:
            return self
        if factory is None:
            raise ValidationFailedError(self.errors)
        raise factory(list(self.errors))

    # ── Conversion ───────────────────────────────────────────────

    @classmethod
    def from_result(
        cls,
        result: Result[Any, T],
        value: T,
        transform: Callable[[Any], str] = str,
    ) -> Validated[T]:
        """Build from a single step's result.

        On failure *value* is kept and each error is passed through
        *transform*; on success the result's value wins.
        """
        if isinstance(result, Err):
            return cls(value, tuple(transform(e) for e in result.errors))
        if isinstance(result, Ok):
            return cls(result.value, ())
        raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def to_validated(
    result: Result[Any, T],
    value: T,
    transform: Callable[[Any], str] = str,
) -> Validated[T]:
    """Function form of :meth:`Validated.from_result`."""
    return Validated.from_result(result, value, transform)
