from pytest_archon import archrule


def test_results_are_leaves() -> None:
    """
    Result and Validated are plain data.
    They must not know about validators, combinators or the runner.
    """
    (
        archrule("results_are_leaves")
        .match("coval.result")
        .match("coval.validated")
        .should_not_import("coval.validator")
        .should_not_import("coval.combinators")
        .should_not_import("coval.client")
        .should_not_import("coval.hooks")
        .check("coval")
    )


def test_core_has_no_pydantic() -> None:
    """
    The combinator core is dependency-free.
    Only the adapter module may import pydantic.
    """
    (
        archrule("core_has_no_pydantic")
        .match("coval.result")
        .match("coval.validated")
        .match("coval.validator")
        .match("coval.combinators")
        .match("coval.client")
        .match("coval.hooks")
        .should_not_import("pydantic*")
        .check("coval")
    )


def test_hooks_do_not_depend_on_runner() -> None:
    """
    Hooks are notified by the runner, never the other way around.
    """
    (
        archrule("hooks_independence")
        .match("coval.hooks")
        .should_not_import("coval.client")
        .should_not_import("coval.validator")
        .check("coval")
    )
