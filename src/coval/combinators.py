"""Combinators building new validators out of two existing ones.

All operands validate the same type. Evaluation short-circuits
deterministically: no combinator calls a validator it does not need.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .result import Err, Ok, Result
from .validator import ErrorJoining, Validator

E = TypeVar("E")
T = TypeVar("T")


def then(first: Validator[E, T], second: Validator[E, T]) -> Validator[E, T]:
    """Run *second* on the value produced by *first*.

    A failure in *first* is returned as-is and *second* is never invoked.
    This is the only combinator where the second operand may see a
    different value than the original input.
    """

    def _then(value: T) -> Result[E, T]:
        result = first(value)
        if isinstance(result, Err):
            return result
        return second(result.value)

    return Validator(_then, name=f"({first.name} then {second.name})")


def and_(first: Validator[E, T], second: Validator[E, T]) -> Validator[E, T]:
    """Run both validators against the original input.

    *first* is assumed to behave like the identity, so when both succeed
    the transformation made by *second* wins. A failure of *first* is
    returned without calling *second*; a failure of *second* is dropped
    in favour of *first*'s success. Use :func:`then` for transformations
    in *first*.
    """

    def _and(value: T) -> Result[E, T]:
        result = first(value)
        if isinstance(result, Err):
            return result
        other = second(value)
        if isinstance(other, Err):
            return result
        return other

    return Validator(_and, name=f"({first.name} and {second.name})")


def or_(first: Validator[E, T], second: Validator[E, T]) -> Validator[E, T]:
    """Succeed with the first operand that succeeds on the original input.

    When both fail, the errors of *first* are followed by those of
    *second*.
    """

    def _or(value: T) -> Result[E, T]:
        result = first(value)
        if isinstance(result, Ok):
            return result
        other = second(value)
        if isinstance(other, Ok):
            return other
        return Err(tuple(result.errors) + tuple(other.errors))

    return Validator(_or, name=f"({first.name} or {second.name})")


def join_errors(
    validator: Validator[E, T], error_joining: ErrorJoining[E]
) -> Validator[E, T]:
    """Function form of :meth:`Validator.join_errors`."""
    return validator.join_errors(error_joining)


def join_with(separator: str) -> ErrorJoining[str]:
    """Build a joiner collapsing all messages into one, separated by *separator*.

    Usage::

        (is_oslo | is_bergen).join_errors(join_with(" or "))
    """

    def _join(errors: Sequence[str]) -> list[str]:
        return [separator.join(str(e) for e in errors)]

    return _join
