from __future__ import annotations

from dataclasses import dataclass

import pytest

from coval import (
    CovalError,
    Err,
    IncompatibleMergeError,
    Ok,
    Validated,
    ValidationFailedError,
    to_validated,
)


@dataclass(frozen=True)
class Person:
    name: str
    age: int


# -- merge -------------------------------------------------------------------


def test_merge_concatenates_errors_left_first() -> None:
    validated1 = Validated(1, ["Error 1"])
    validated2 = Validated(1, ["Error 2"])

    assert validated1 + validated2 == Validated(1, ["Error 1", "Error 2"])
    assert validated2.merge(validated1) == Validated(1, ["Error 2", "Error 1"])


def test_merge_rejects_different_values() -> None:
    with pytest.raises(IncompatibleMergeError) as exc_info:
        Validated(1, ["Error 1"]) + Validated(2, ["Error 3"])

    assert (
        str(exc_info.value)
        == "Cannot concatenate two Validated objects with different values"
    )
    assert isinstance(exc_info.value, CovalError)
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.to_dict()["error"] == "INCOMPATIBLE_MERGE"


def test_merge_uses_structural_equality() -> None:
    left = Validated(Person("Bob", 30), ["a"])
    right = Validated(Person("Bob", 30), ["b"])

    assert (left + right).errors == ("a", "b")


def test_merge_does_not_mutate_operands() -> None:
    left = Validated(1, ["a"])
    right = Validated(1, ["b"])

    left + right

    assert left.errors == ("a",)
    assert right.errors == ("b",)


# -- validity ----------------------------------------------------------------


def test_validity_follows_errors() -> None:
    assert Validated(1).is_valid
    assert Validated(1)
    assert not Validated(1, ["e"]).is_valid
    assert not Validated(1, ["e"])


def test_throw_if_failed_returns_self_when_valid() -> None:
    validated = Validated(1, [])

    assert validated.throw_if_failed() is validated


def test_throw_if_failed_default_error() -> None:
    with pytest.raises(ValidationFailedError) as exc_info:
        Validated(1, ["a", "b"]).throw_if_failed()

    assert exc_info.value.errors == ("a", "b")
    assert exc_info.value.to_dict() == {
        "error": "VALIDATION_FAILED",
        "errors": ["a", "b"],
    }


def test_throw_if_failed_custom_factory() -> None:
    with pytest.raises(RuntimeError, match="a, b"):
        Validated(1, ["a", "b"]).throw_if_failed(
            lambda errors: RuntimeError(", ".join(errors))
        )


# -- conversion --------------------------------------------------------------


def test_failure_keeps_fallback_value() -> None:
    person = Person("Alice", 30)

    assert to_validated(Err(["Name must be John"]), person) == Validated(
        person, ["Name must be John"]
    )


def test_success_uses_result_value() -> None:
    assert to_validated(Ok(Person("Bob", 30)), Person("Alice", 30)) == Validated(
        Person("Bob", 30), []
    )


def test_default_transform_stringifies_errors() -> None:
    assert Validated.from_result(Err([404, ValueError("bad")]), 0).errors == (
        "404",
        "bad",
    )


def test_custom_transform() -> None:
    validated = Validated.from_result(Err([1, 2]), 0, lambda e: f"code {e}")

    assert validated.errors == ("code 1", "code 2")


def test_failed_step_converted_with_original_value() -> None:
    person = Person("Alice", 30)
    renamed = Person("Bob", 30)

    assert to_validated(Ok(renamed), person) == Validated(renamed, [])
    assert to_validated(Err(["Name must be John"]), person) == Validated(
        Person("Alice", 30), ["Name must be John"]
    )
