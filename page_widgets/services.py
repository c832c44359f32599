# # Service locator: dependency_injector container, looked up by capability type.

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type, TypeVar

from dependency_injector import containers, providers
from starlette.requests import Request

from .errors import ServiceNotRegisteredError
from .urls import RequestUrlHelper, UrlHelper
from .view_engine import ViewEngine

logger = logging.getLogger(__name__)

T = TypeVar("T")


def url_helper_for(request: Optional[Request]) -> Optional[UrlHelper]:
    # # Outside a request scope there is nothing to build URLs against
    if request is None:
        return None
    return RequestUrlHelper(request)


class WidgetContainer(containers.DeclarativeContainer):
    request = providers.Object(None)
    view_engine = providers.Object(None)

    # # Singleton per container instance, i.e. one helper per request scope
    url_helper = providers.Singleton(url_helper_for, request=request)


CAPABILITIES: Dict[type, str] = {
    Request: "request",
    ViewEngine: "view_engine",
    UrlHelper: "url_helper",
}


class ServiceProvider:
    """
    Resolves services by the abstract type they implement.

    Wraps a `WidgetContainer`; other services are added with `register`.
    `strict` decides whether `resolve` raises or returns None for a service
    that is missing or resolves to None.
    """

    def __init__(self, container: Optional[containers.Container] = None, *, strict: bool = False):
        self.container = container if container is not None else WidgetContainer()
        self.strict = strict
        self._names: Dict[type, str] = dict(CAPABILITIES)

    def register(self, service_type: Type[T], provider: providers.Provider) -> "ServiceProvider":
        name = self._names.setdefault(service_type, service_type.__name__)
        existing = self.container.providers.get(name)
        if existing is not None:
            # # Override rather than replace, so providers injected with it keep working
            existing.override(provider)
        else:
            self.container.set_provider(name, provider)
        return self

    def create_scope(self, request: Optional[Request] = None) -> "ServiceProvider":
        # # Request and URL helper are per scope; the view engine and custom registrations are shared
        scoped = WidgetContainer()
        scoped.request.override(providers.Object(request))
        scoped.view_engine.override(self.container.view_engine)
        if self.container.url_helper.overridden:
            scoped.url_helper.override(self.container.url_helper)

        for name, provider in self.container.providers.items():
            if name not in scoped.providers:
                scoped.set_provider(name, provider)

        scope = ServiceProvider(scoped, strict=self.strict)
        scope._names = dict(self._names)
        return scope

    def get_service(self, service_type: Type[T]) -> Optional[T]:
        name = self._names.get(service_type)
        provider = self.container.providers.get(name) if name else None
        if provider is None:
            return None
        instance = provider()
        logger.debug("Resolved %s from provider '%s'", service_type.__name__, name)
        return instance

    def get_required_service(self, service_type: Type[T]) -> T:
        instance = self.get_service(service_type)
        if instance is None:
            raise ServiceNotRegisteredError(service_type)
        return instance

    def resolve(self, service_type: Type[T]) -> Optional[T]:
        if self.strict:
            return self.get_required_service(service_type)
        return self.get_service(service_type)

    def __contains__(self, service_type: object) -> bool:
        name = self._names.get(service_type)
        return name is not None and name in self.container.providers
