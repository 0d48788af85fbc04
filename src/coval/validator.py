"""Validator — a wrapped validation function with an optional error joiner."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Generic, Protocol, TypeVar

from .result import Err, Result

E = TypeVar("E")
T = TypeVar("T")
E_co = TypeVar("E_co", covariant=True)

ErrorJoining = Callable[[Sequence[E]], Sequence[E]]
"""Rewrites a failure's error list, e.g. collapsing it into one message."""


class ValidatorFunction(Protocol[E_co, T]):
    """Anything callable as ``(value) -> Ok(value) | Err(errors)``."""

    def __call__(self, value: T, /) -> Result[E_co, T]:
        ...


def _name_of(function: Any) -> str:
    name = getattr(function, "name", None) or getattr(function, "__name__", None)
    return str(name) if name else type(function).__name__


class Validator(Generic[E, T]):
    """Wraps a validation function.

    The joiner, if any, is applied only to failures; successes pass through
    untouched. Validators are never mutated: :meth:`join_errors` and the
    combinator operators all return new instances.

    Usage::

        is_john = Validator(check_name)
        person_validator = is_john >> age_in_range
        city = (is_oslo | is_bergen).join_errors(join_with(" or "))
    """

    def __init__(
        self,
        function: ValidatorFunction[E, T],
        error_joining: ErrorJoining[E] | None = None,
        *,
        name: str | None = None,
    ) -> None:
        self._function = function
        self._error_joining = error_joining
        self.name = name or _name_of(function)

    @property
    def error_joining(self) -> ErrorJoining[E] | None:
        return self._error_joining

    def __call__(self, value: T) -> Result[E, T]:
        result = self._function(value)
        if isinstance(result, Err) and self._error_joining is not None:
            return Err(self._error_joining(list(result.errors)))
        return result

    def join_errors(self, error_joining: ErrorJoining[E]) -> Validator[E, T]:
        """Return a new validator wrapping this one with *error_joining*."""
        return Validator(self, error_joining, name=self.name)

    # ── Composition ──────────────────────────────────────────────

    def then(self, other: Validator[E, T]) -> Validator[E, T]:
        from .combinators import then

        return then(self, other)

    def and_(self, other: Validator[E, T]) -> Validator[E, T]:
        from .combinators import and_

        return and_(self, other)

    def or_(self, other: Validator[E, T]) -> Validator[E, T]:
        from .combinators import or_

        return or_(self, other)

    def __rshift__(self, other: Validator[E, T]) -> Validator[E, T]:
        return self.then(other)

    def __and__(self, other: Validator[E, T]) -> Validator[E, T]:
        return self.and_(other)

    def __or__(self, other: Validator[E, T]) -> Validator[E, T]:
        return self.or_(other)

    def __repr__(self) -> str:
        joined = ", joined" if self._error_joining is not None else ""
        return f"Validator({self.name!r}{joined})"


def to_validator(
    function: ValidatorFunction[E, T],
    error_joining: ErrorJoining[E] | None = None,
    *,
    name: str | None = None,
) -> Validator[E, T]:
    """Lift a plain function into a :class:`Validator`."""
    return Validator(function, error_joining, name=name)
