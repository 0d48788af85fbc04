"""Result — the two-variant outcome of a single validation step."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

E = TypeVar("E")
T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful step carrying the (possibly transformed) value.

    Usage::

        Ok(person)
    """

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed step carrying the ordered error messages.

    ``errors`` is stored as a tuple, so ``Err(["a"]) == Err(("a",))``.

    Usage::

        Err(["Name must be John"])
    """

    errors: Sequence[E] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True


Result = Union[Err[E], Ok[T]]
"""A validator outcome, parameterised as ``Result[E, T]``."""
