"""Step hooks — pluggable observers for the sequential runner."""

from __future__ import annotations

import fnmatch
import logging
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .result import Err

if TYPE_CHECKING:
    from collections.abc import Callable

    from .result import Result

logger = logging.getLogger("coval.hooks")

_MATCH_CACHE_MAX_SIZE = 2048


@dataclass(frozen=True)
class ValidationStep:
    """One validator invocation made by :class:`~coval.client.ValidatorClient`.

    Attributes:
        index: Position of the validator in the client's list.
        name: The validator's name.
        value: The value passed to the validator.
        result: What the validator returned.
    """

    index: int
    name: str
    value: Any
    result: Result[Any, Any]

    @property
    def failed(self) -> bool:
        return isinstance(self.result, Err)


@runtime_checkable
class StepHook(Protocol):
    """Protocol for step observers (logging, metrics, auditing)."""

    def __call__(self, step: ValidationStep) -> None:
        ...


class HookRegistration:
    """A registered hook with filtering and priority."""

    def __init__(
        self,
        hook: StepHook,
        *,
        priority: int = 0,
        names: list[str] | None = None,
        predicate: Callable[[ValidationStep], bool] | None = None,
        failures_only: bool = False,
        enabled: bool = True,
    ) -> None:
        self.hook = hook
        self.priority = priority
        self.names = names or []
        self.predicate = predicate
        self.failures_only = failures_only
        self.enabled = enabled
        self._match_cache: dict[str, bool] = {}

    def matches(self, step: ValidationStep) -> bool:
        """Check if this registration applies to *step*."""
        if not self.enabled:
            return False
        if self.failures_only and not step.failed:
            return False
        if not self._matches_name(step.name):
            return False
        return self.predicate is None or self.predicate(step)

    def _matches_name(self, name: str) -> bool:
        if not self.names:
            return True
        if name in self._match_cache:
            return self._match_cache[name]
        matched = any(fnmatch.fnmatch(name, pattern) for pattern in self.names)
        if len(self._match_cache) >= _MATCH_CACHE_MAX_SIZE:
            self._match_cache.clear()
        self._match_cache[name] = matched
        return matched

    def clear_cache(self) -> None:
        self._match_cache.clear()


class HookRegistry:
    """Registry of step hooks, notified in ascending priority."""

    def __init__(self) -> None:
        self._registrations: list[HookRegistration] = []

    def __len__(self) -> int:
        return len(self._registrations)

    def register(
        self,
        hook: StepHook,
        *,
        priority: int = 0,
        names: list[str] | None = None,
        predicate: Callable[[ValidationStep], bool] | None = None,
        failures_only: bool = False,
        enabled: bool = True,
    ) -> HookRegistration:
        """Register a hook with optional filtering."""
        registration = HookRegistration(
            hook,
            priority=priority,
            names=names,
            predicate=predicate,
            failures_only=failures_only,
            enabled=enabled,
        )
        self._registrations.append(registration)
        self._registrations.sort(key=lambda r: r.priority)
        return registration

    def notify(self, step: ValidationStep) -> None:
        """Call every matching hook.

        A failing hook is logged and skipped; it never changes the outcome
        of validation.
        """
        for registration in self._registrations:
            if not registration.matches(step):
                continue
            try:
                registration.hook(step)
            except Exception as exc:
                logger.warning(
                    "Step hook %r failed on %s: %s",
                    registration.hook,
                    step.name,
                    exc,
                    exc_info=exc,
                )

    def clear(self) -> None:
        """Remove all registrations and clear caches."""
        for registration in self._registrations:
            registration.clear_cache()
        self._registrations.clear()


_hook_registry_var: ContextVar[HookRegistry | None] = ContextVar(
    "coval_hook_registry", default=None
)


def get_hook_registry() -> HookRegistry:
    """Get the hook registry for the current context.

    A fresh ``HookRegistry`` is created on first access within each context.
    """
    registry = _hook_registry_var.get()
    if registry is None:
        registry = HookRegistry()
        _hook_registry_var.set(registry)
    return registry


def set_hook_registry(registry: HookRegistry) -> None:
    """Set a custom hook registry in the current context."""
    _hook_registry_var.set(registry)
