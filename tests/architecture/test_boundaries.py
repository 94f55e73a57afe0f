from pytest_archon import archrule


def test_engine_independence() -> None:
    """
    The specification engine must not know about any leaf library or
    concrete domain. Leaves live with the callers that need them.
    """
    (
        archrule("engine_is_independent")
        .match("ocp_specifications*")
        .should_not_import("ocp_attributes*")
        .should_not_import("ocp_catalog*")
        .should_not_import("pydantic*")
        .check("ocp_specifications")
    )


def test_attribute_leaves_are_domain_free() -> None:
    """Attribute leaves work on any object; they know no product model."""
    (
        archrule("attribute_leaves_are_domain_free")
        .match("ocp_attributes*")
        .should_not_import("ocp_catalog*")
        .should_not_import("pydantic*")
        .check("ocp_attributes")
    )


def test_protocol_isolation() -> None:
    """
    The specification protocol is the lowest level.
    It must not import the combinators or the filter engine.
    """
    (
        archrule("protocol_isolation")
        .match("ocp_specifications.specification")
        .should_not_import("ocp_specifications.base")
        .should_not_import("ocp_specifications.filtering")
        .check("ocp_specifications", only_direct_imports=True)
    )


def test_filter_engine_layering() -> None:
    """
    The filter engine works against the protocol only, so that any
    specification, composite or not, can be filtered with.
    """
    (
        archrule("filter_engine_layering")
        .match("ocp_specifications.filtering")
        .should_not_import("ocp_specifications.base")
        .check("ocp_specifications", only_direct_imports=True)
    )
