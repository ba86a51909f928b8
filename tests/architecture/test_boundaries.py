from pytest_archon import archrule


def test_validators_independent_of_context() -> None:
    """
    Validators are leaf strategies. They must not know about the
    context that runs them or the results it produces.
    """
    (
        archrule("validators_are_leaves")
        .match("fieldcheck.validators*")
        .should_not_import("fieldcheck.context")
        .should_not_import("fieldcheck.result")
        .check("fieldcheck")
    )


def test_result_independent_of_context() -> None:
    """Result types are plain data and must not import the context or validators."""
    (
        archrule("result_is_plain_data")
        .match("fieldcheck.result")
        .should_not_import("fieldcheck.context")
        .should_not_import("fieldcheck.validators*")
        .check("fieldcheck")
    )


def test_ports_isolated() -> None:
    """
    The validator protocol is the lowest level.
    It must not import anything else from the package.
    """
    (
        archrule("ports_isolated")
        .match("fieldcheck.ports")
        .should_not_import("fieldcheck.context")
        .should_not_import("fieldcheck.result")
        .should_not_import("fieldcheck.validators*")
        .should_not_import("fieldcheck.exceptions")
        .check("fieldcheck")
    )


def test_kinds_isolated() -> None:
    """The kind enum must not import anything else from the package."""
    (
        archrule("kinds_isolated")
        .match("fieldcheck.kinds")
        .should_not_import("fieldcheck.context")
        .should_not_import("fieldcheck.result")
        .should_not_import("fieldcheck.validators*")
        .should_not_import("fieldcheck.exceptions")
        .check("fieldcheck")
    )
