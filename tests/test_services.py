"""
Tests for the ServiceProvider capability lookup over the dependency_injector container.
"""

import pytest
from dependency_injector import providers
from starlette.requests import Request

from page_widgets.errors import ServiceNotRegisteredError
from page_widgets.hosting import offline_request
from page_widgets.services import ServiceProvider, WidgetContainer
from page_widgets.urls import RequestUrlHelper, UrlHelper
from page_widgets.view_engine import ViewEngine


class Clock:
    pass


class TestServiceProvider:
    def test_builtin_capabilities_default_to_none(self):
        sp = ServiceProvider()

        assert isinstance(sp.container.url_helper, providers.Singleton)
        assert sp.get_service(ViewEngine) is None
        assert sp.get_service(UrlHelper) is None
        assert ViewEngine in sp

    def test_unregistered_type(self):
        sp = ServiceProvider()

        assert sp.get_service(Clock) is None
        assert Clock not in sp

    def test_missing_required_service_raises(self):
        with pytest.raises(ServiceNotRegisteredError) as exc:
            ServiceProvider().get_required_service(Clock)

        assert exc.value.service_type is Clock
        assert isinstance(exc.value, LookupError)
        assert exc.value.to_dict()["context"] == {"service": "Clock"}

    @pytest.mark.parametrize("strict", [False, True])
    def test_resolve_honours_strictness(self, strict):
        sp = ServiceProvider(strict=strict)
        if strict:
            with pytest.raises(ServiceNotRegisteredError):
                sp.resolve(UrlHelper)
        else:
            assert sp.resolve(UrlHelper) is None

    def test_register_custom_and_builtin(self):
        engine = ViewEngine()
        sp = ServiceProvider()
        sp.register(Clock, providers.Singleton(Clock))
        sp.register(ViewEngine, providers.Object(engine))

        assert sp.get_service(Clock) is sp.get_service(Clock)
        assert sp.get_service(ViewEngine) is engine
        assert Clock in sp

    def test_accepts_existing_container(self):
        container = WidgetContainer()
        sp = ServiceProvider(container, strict=True)

        assert sp.container is container
        assert sp.strict


class TestScopes:
    def test_url_helper_is_per_scope_and_bound_to_request(self):
        root = ServiceProvider()
        request_a, request_b = offline_request("/a"), offline_request("/b")
        scope_a = root.create_scope(request_a)
        scope_b = root.create_scope(request_b)

        helper_a = scope_a.get_service(UrlHelper)

        assert isinstance(helper_a, RequestUrlHelper)
        assert helper_a.request is request_a
        assert scope_a.get_service(UrlHelper) is helper_a
        assert scope_b.get_service(UrlHelper).request is request_b
        assert scope_a.get_service(RequestUrlHelper) is None

    def test_root_without_request_has_no_url_helper(self):
        root = ServiceProvider()
        root.create_scope(offline_request())

        assert root.get_service(UrlHelper) is None

    def test_scope_without_request(self):
        assert ServiceProvider().create_scope().get_service(UrlHelper) is None

    def test_scope_shares_view_engine_and_custom_services(self):
        engine = ViewEngine()
        root = ServiceProvider(strict=True)
        root.register(ViewEngine, providers.Object(engine))
        root.register(Clock, providers.Singleton(Clock))

        scope_a = root.create_scope(offline_request())
        scope_b = root.create_scope(offline_request())

        assert scope_a.strict
        assert scope_a.resolve(ViewEngine) is engine
        assert scope_a.get_service(Clock) is scope_b.get_service(Clock)
        assert scope_a.get_service(Request) is not None

    def test_overridden_url_helper_is_used_by_scopes(self):
        custom = UrlHelper()
        root = ServiceProvider()
        root.register(UrlHelper, providers.Object(custom))

        assert root.create_scope(offline_request()).get_service(UrlHelper) is custom
