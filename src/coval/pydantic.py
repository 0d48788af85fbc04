"""PydanticValidator — leverages Pydantic model validation."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .result import Err, Ok, Result
from .validator import Validator

M = TypeVar("M", bound=BaseModel)


class _ModelCheck(Generic[M]):
    def __init__(self, model: type[M]) -> None:
        self.model = model
        self.name = model.__name__

    def __call__(self, value: Any) -> Result[str, Any]:
        data = value.model_dump() if isinstance(value, self.model) else value
        try:
            return Ok(self.model.model_validate(data))
        except PydanticValidationError as exc:
            errors: list[str] = []
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
                msg = error.get("msg", "validation error")
                errors.append(f"{loc}: {msg}")
            return Err(errors)


class PydanticValidator(Validator[str, Any]):
    """Validates mappings or model instances through a Pydantic model.

    Success yields the validated model instance, so raw data is converted
    on the way. Each Pydantic error becomes one ``"<loc>: <msg>"`` message.
    Existing instances are re-validated from ``model_dump()``.
    """

    def __init__(self, model: type[BaseModel], *, name: str | None = None) -> None:
        self.model = model
        super().__init__(_ModelCheck(model), name=name)


def from_model(model: type[BaseModel]) -> PydanticValidator:
    """Function form of :class:`PydanticValidator`."""
    return PydanticValidator(model)
