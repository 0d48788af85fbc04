"""coval — composable validators with error accumulation.

Zero infrastructure dependencies. Optional pydantic adapter for model
validation.
"""

from __future__ import annotations

# ── Runner ───────────────────────────────────────────────────────
from .client import ValidatorClient

# ── Combinators ──────────────────────────────────────────────────
from .combinators import and_, join_errors, join_with, or_, then

# ── Exceptions ───────────────────────────────────────────────────
from .exceptions import CovalError, IncompatibleMergeError, ValidationFailedError

# ── Hooks ────────────────────────────────────────────────────────
from .hooks import (
    HookRegistration,
    HookRegistry,
    StepHook,
    ValidationStep,
    get_hook_registry,
    set_hook_registry,
)

# ── Adapters ─────────────────────────────────────────────────────
from .pydantic import PydanticValidator, from_model

# ── Primitives ──────────────────────────────────────────────────
from .result import Err, Ok, Result
from .validated import Validated, to_validated
from .validator import ErrorJoining, Validator, ValidatorFunction, to_validator

__all__: list[str] = [
    # Results
    "Err",
    "Ok",
    "Result",
    "Validated",
    "to_validated",
    # Validators
    "ErrorJoining",
    "Validator",
    "ValidatorFunction",
    "to_validator",
    "PydanticValidator",
    "from_model",
    # Combinators
    "and_",
    "join_errors",
    "join_with",
    "or_",
    "then",
    # Runner
    "ValidatorClient",
    # Hooks
    "HookRegistration",
    "HookRegistry",
    "StepHook",
    "ValidationStep",
    "get_hook_registry",
    "set_hook_registry",
    # Exceptions
    "CovalError",
    "IncompatibleMergeError",
    "ValidationFailedError",
]
