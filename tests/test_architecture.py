"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters depend on the domain only, never on application services
- The CLI runs searches without the web adapter
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("nearby_departures.domain.models*")
        .should_not_import("nearby_departures.adapters*")
        .should_not_import("nearby_departures.application*")
        .should_not_import("nearby_departures.domain.ports*")
        .may_import("nearby_departures.domain.models*")
        .may_import("nearby_departures.domain.exceptions")
        .check("nearby_departures")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("nearby_departures.domain.ports*")
        .should_not_import("nearby_departures.adapters*")
        .should_not_import("nearby_departures.application*")
        .may_import("nearby_departures.domain.ports*")
        .may_import("nearby_departures.domain.models*")
        .check("nearby_departures")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("nearby_departures.application*")
        .should_not_import("nearby_departures.adapters*")
        .should_not_import("nearby_departures.bootstrap")
        .may_import("nearby_departures.domain*")
        .may_import("nearby_departures.application*")
        .check("nearby_departures")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("nearby_departures.adapters*")
        .should_not_import("nearby_departures.application*")
        .should_not_import("nearby_departures.bootstrap")
        .may_import("nearby_departures.domain*")
        .may_import("nearby_departures.adapters*")
        .check("nearby_departures", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("nearby_departures.domain*")
        .should_not_import("nearby_departures.adapters*")
        .should_not_import("nearby_departures.application*")
        .may_import("nearby_departures.domain*")
        .check("nearby_departures", only_direct_imports=True)
    )


def test_cli_dont_import_web_adapters() -> None:
    """CLI should not import web adapters to allow running searches without the web server."""
    (
        archrule("CLI independence", comment="CLI should not depend on web adapters")
        .match("nearby_departures.cli")
        .should_not_import("nearby_departures.adapters.web*")
        .may_import("nearby_departures.domain*")
        .may_import("nearby_departures.bootstrap")
        .may_import("nearby_departures.adapters.config*")
        .check("nearby_departures", only_direct_imports=True)
    )
