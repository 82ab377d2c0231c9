import logging

import pytest

from specbuilder.core.domain import AUTO_DOMAIN_NOTICE, resolve_custom_domain
from specbuilder.models.resolved import RouteEntry
from specbuilder.models.spec import CustomDomainSpec

ROUTES = [
    RouteEntry(path="/a", service_name="svc", function_name="a"),
    RouteEntry(path="/b", service_name="svc", function_name="b"),
]


@pytest.fixture
def domain_logs(caplog):
    caplog.set_level(logging.WARNING, logger="specbuilder.core.domain")
    return caplog


def _notices(caplog):
    return [r for r in caplog.records if r.getMessage() == AUTO_DOMAIN_NOTICE]


def test_no_routes_no_domain(domain_logs):
    assert resolve_custom_domain(None, []) is None
    assert resolve_custom_domain(CustomDomainSpec(), []) is None
    assert _notices(domain_logs) == []


def test_explicit_auto(domain_logs):
    domain = resolve_custom_domain(CustomDomainSpec(domain_name="auto"), ROUTES)

    assert domain.domain_name == "auto"
    assert domain.auto is True
    assert domain.routes == ROUTES
    assert _notices(domain_logs) == []


def test_named_domain(domain_logs):
    domain = resolve_custom_domain(CustomDomainSpec(domain_name="api.example.com"), ROUTES)

    assert domain.domain_name == "api.example.com"
    assert domain.auto is False
    assert _notices(domain_logs) == []


def test_absent_config_logs_notice_and_falls_back_to_auto(domain_logs):
    domain = resolve_custom_domain(None, ROUTES)

    assert domain.domain_name == "auto"
    assert domain.auto is True
    assert len(_notices(domain_logs)) == 1
    assert _notices(domain_logs)[0].levelno == logging.WARNING
    assert "domainName: auto" in AUTO_DOMAIN_NOTICE


def test_explicit_false_is_silent(domain_logs):
    assert resolve_custom_domain(False, ROUTES) is None
    assert _notices(domain_logs) == []


def test_routes_are_copied():
    routes = list(ROUTES)
    domain = resolve_custom_domain(CustomDomainSpec(), routes)
    routes.append(RouteEntry(path="/c", service_name="svc", function_name="c"))

    assert len(domain.routes) == 2
