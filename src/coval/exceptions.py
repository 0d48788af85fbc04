"""Exceptions raised by coval.

Validation failures are data (``Err`` / ``Validated.errors``) and are never
raised. The exceptions below cover programmer errors and explicit escalation.
"""

from __future__ import annotations

from typing import Any


class CovalError(Exception):
    """Root exception for the coval toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class IncompatibleMergeError(CovalError, ValueError):
    """Raised when merging two ``Validated`` objects holding different values."""

    def __init__(self, left: object, right: object) -> None:
        self.left = left
        self.right = right
        super().__init__(
            "Cannot concatenate two Validated objects with different values"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INCOMPATIBLE_MERGE",
            "message": str(self),
            "left": repr(self.left),
            "right": repr(self.right),
        }


class ValidationFailedError(CovalError):
    """Raised by :meth:`Validated.throw_if_failed` when errors were collected.

    Carries the accumulated messages in order.
    """

    def __init__(self, errors: list[str] | tuple[str, ...] | str) -> None:
        if isinstance(errors, str):
            self.errors: tuple[str, ...] = (errors,)
        else:
            self.errors = tuple(errors)
        super().__init__("; ".join(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "errors": list(self.errors),
        }
