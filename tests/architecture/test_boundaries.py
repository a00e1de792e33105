from pytest_archon import archrule


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from any other supplier_admin layer.
    """
    (
        archrule("primitives_isolation")
        .match("supplier_admin.primitives*")
        .should_not_import("supplier_admin.domain*")
        .should_not_import("supplier_admin.history*")
        .should_not_import("supplier_admin.ports*")
        .should_not_import("supplier_admin.adapters*")
        .should_not_import("supplier_admin.undo*")
        .should_not_import("supplier_admin.services*")
        .check("supplier_admin")
    )


def test_domain_isolation() -> None:
    """
    Domain layer should be self-contained.
    It must not import from history, ports, adapters, undo or services.
    """
    (
        archrule("domain_isolation")
        .match("supplier_admin.domain*")
        .should_not_import("supplier_admin.history*")
        .should_not_import("supplier_admin.ports*")
        .should_not_import("supplier_admin.adapters*")
        .should_not_import("supplier_admin.undo*")
        .should_not_import("supplier_admin.services*")
        .check("supplier_admin")
    )


def test_history_is_passive() -> None:
    """
    The history store records actions; it never executes them.
    """
    (
        archrule("history_is_passive")
        .match("supplier_admin.history*")
        .should_not_import("supplier_admin.undo*")
        .should_not_import("supplier_admin.services*")
        .should_not_import("supplier_admin.adapters*")
        .should_not_import("supplier_admin.ports*")
        .check("supplier_admin")
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on Adapters (implementations).
    """
    (
        archrule("ports_layering")
        .match("supplier_admin.ports*")
        .should_not_import("supplier_admin.adapters*")
        .should_not_import("supplier_admin.services*")
        .should_not_import("supplier_admin.undo*")
        .check("supplier_admin")
    )


def test_services_use_ports_not_adapters() -> None:
    """
    Services and undo executors talk to storage through ports only.
    """
    (
        archrule("services_adapters_isolation")
        .match("supplier_admin.services*")
        .match("supplier_admin.undo*")
        .should_not_import("supplier_admin.adapters*")
        .check("supplier_admin")
    )
