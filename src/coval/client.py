"""ValidatorClient — runs a list of validators and accumulates their errors."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from .hooks import HookRegistry, ValidationStep, get_hook_registry
from .result import Err
from .validated import Validated
from .validator import Validator

logger = logging.getLogger("coval.client")

E = TypeVar("E")
T = TypeVar("T")


class ValidatorClient(Generic[E, T]):
    """Applies validators in order, folding into a single :class:`Validated`.

    Unlike the fail-fast combinators, this collects **all** errors across
    all validators. A successful validator's transformation is kept and
    seen by the validators after it; a failing validator's candidate value
    is discarded.

    Usage::

        client = ValidatorClient(validate_name, validate_email)
        validated = client.validate(profile)
    """

    def __init__(
        self,
        *validators: Validator[E, T] | Iterable[Validator[E, T]],
        hooks: HookRegistry | None = None,
    ) -> None:
        self._validators: list[Validator[E, T]] = []
        for item in validators:
            if isinstance(item, Validator):
                self._validators.append(item)
            else:
                self._validators.extend(item)
        self._hooks = hooks

    @property
    def validators(self) -> tuple[Validator[E, T], ...]:
        return tuple(self._validators)

    def add(self, validator: Validator[E, T]) -> None:
        """Append a validator to the chain."""
        self._validators.append(validator)

    def validate(self, value: T) -> Validated[T]:
        """Run every validator and return the accumulated outcome."""
        hooks = self._hooks if self._hooks is not None else get_hook_registry()
        current = value
        errors: list[str] = []
        for index, validator in enumerate(self._validators):
            result = validator(current)
            hooks.notify(ValidationStep(index, validator.name, current, result))
            if isinstance(result, Err):
                logger.debug(
                    "Validator %s failed with %d error(s)",
                    validator.name,
                    len(result.errors),
                )
                errors.extend(str(e) for e in result.errors)
            else:
                current = result.value
        return Validated(current, errors)
