# # Starlette hosting: per-request view contexts, page responses and single-widget responses.

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping, Optional

from dependency_injector import providers
from jinja2 import Environment
from starlette.requests import Request
from starlette.responses import HTMLResponse

from .config import WidgetsConfig
from .context import HttpContext, RouteData, ViewContext
from .invoker import WidgetInvoker
from .services import ServiceProvider
from .view_data import ViewDataDictionary
from .view_engine import JinjaViewEngine, ViewEngine, template_variables

logger = logging.getLogger(__name__)


def offline_request(path: str = "/") -> Request:
    """A bare GET request, for rendering outside a server (CLI, tests)."""
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "root_path": "",
            "query_string": b"",
            "headers": [],
        }
    )


class WidgetTemplates:
    """
    Page templates that can host widgets.

    Owns the Jinja view engine and the root service provider. Each request gets
    a service scope holding the request itself, so request-bound services such
    as the URL helper are built once per request.
    """

    def __init__(
        self,
        directory: Optional[str] = None,
        *,
        config: Optional[WidgetsConfig] = None,
        environment: Optional[Environment] = None,
        services: Optional[ServiceProvider] = None,
        invoker: Optional[WidgetInvoker] = None,
    ):
        config = config or WidgetsConfig()
        if directory is not None:
            config = dataclasses.replace(config, template_dirs=[directory])
        self.config = config

        if environment is not None:
            self.view_engine = JinjaViewEngine(
                environment,
                self.config.view_location_formats,
                self.config.default_view_name,
            )
        else:
            self.view_engine = JinjaViewEngine.from_config(self.config)

        self.services = services or ServiceProvider(strict=self.config.strict_services)
        if self.services.get_service(ViewEngine) is None:
            self.services.register(ViewEngine, providers.Object(self.view_engine))

        self.invoker = invoker or WidgetInvoker()

    @property
    def environment(self) -> Environment:
        return self.view_engine.environment

    def view_context(
        self,
        request: Request,
        context: Optional[Mapping[str, Any]] = None,
        model: Any = None,
    ) -> ViewContext:
        scope = self.services.create_scope(request)
        view_data = ViewDataDictionary(model=model)
        view_data.update(context or {})
        return ViewContext(
            http_context=HttpContext(request=request, request_services=scope),
            view_data=view_data,
            route_data=RouteData.from_request(request),
        )

    def render(
        self,
        request: Request,
        name: str,
        context: Optional[Mapping[str, Any]] = None,
        model: Any = None,
    ) -> str:
        vc = self.view_context(request, context, model)
        template = self.environment.get_template(name)
        return template.render(template_variables(vc))

    def render_widget(
        self,
        request: Request,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> str:
        vc = self.view_context(request)
        return str(self.invoker.invoke(vc, name, arguments))

    def TemplateResponse(
        self,
        request: Request,
        name: str,
        context: Optional[Mapping[str, Any]] = None,
        model: Any = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        logger.debug("Rendering page %s for %s", name, request.url.path)
        return HTMLResponse(self.render(request, name, context, model), status_code=status_code)

    def WidgetResponse(
        self,
        request: Request,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        logger.debug("Rendering widget %s for %s", name, request.url.path)
        return HTMLResponse(self.render_widget(request, name, arguments), status_code=status_code)
