# # Widget base class: lazy access to the ambient request/view state, plus result factories.

from __future__ import annotations

from typing import Any, Optional

from starlette.requests import Request

from ..constants import WIDGET_CONTEXT_KEY
from ..context import HttpContext, RouteData, ViewContext, WidgetContext
from ..results import ContentWidgetResult, HtmlContentWidgetResult, ViewWidgetResult
from ..urls import UrlHelper
from ..view_data import DynamicViewData, ModelStateDictionary, ViewDataDictionary
from ..view_engine import ViewEngine


class Widget:
    """
    Base class for widgets.

    Subclasses implement ``invoke(**arguments)`` and return a result built with
    ``content``, ``html`` or ``view`` (a bare ``str`` is treated as content).

    Every accessor degrades to None while no view context is attached; none of
    them raise. The URL helper and view engine are resolved from the request
    services on first use and cached, unless they were passed in or assigned.
    """

    def __init__(
        self,
        *,
        url: Optional[UrlHelper] = None,
        view_engine: Optional[ViewEngine] = None,
        widget_context: Optional[WidgetContext] = None,
    ):
        self._url = url
        self._view_engine = view_engine
        self._widget_context = widget_context
        self._view_bag: Optional[DynamicViewData] = None

    def invoke(self, **arguments: Any) -> Any:
        raise NotImplementedError

    # # Ambient state

    @property
    def widget_context(self) -> WidgetContext:
        if self._widget_context is None:
            self._widget_context = WidgetContext()
        return self._widget_context

    @widget_context.setter
    def widget_context(self, value: Optional[WidgetContext]) -> None:
        self._widget_context = value

    @property
    def view_context(self) -> Optional[ViewContext]:
        return self.widget_context.view_context

    @property
    def http_context(self) -> Optional[HttpContext]:
        vc = self.view_context
        return vc.http_context if vc else None

    @property
    def http_request(self) -> Optional[Request]:
        http = self.http_context
        return http.request if http else None

    @property
    def model_state(self) -> Optional[ModelStateDictionary]:
        vc = self.view_context
        return vc.model_state if vc else None

    @property
    def route_data(self) -> Optional[RouteData]:
        vc = self.view_context
        return vc.route_data if vc else None

    @property
    def view_data(self) -> Optional[ViewDataDictionary]:
        vc = self.view_context
        return vc.view_data if vc else None

    @property
    def user(self) -> Any:
        http = self.http_context
        return http.user if http else None

    @property
    def view_bag(self) -> DynamicViewData:
        if self._view_bag is None:
            self._view_bag = DynamicViewData(lambda: self.view_data)
        return self._view_bag

    # # Services

    def _resolve(self, service_type: type) -> Any:
        http = self.http_context
        services = http.request_services if http else None
        if services is None:
            return None
        return services.resolve(service_type)

    @property
    def url(self) -> Optional[UrlHelper]:
        if self._url is None:
            self._url = self._resolve(UrlHelper)
        return self._url

    @url.setter
    def url(self, value: Optional[UrlHelper]) -> None:
        self._url = value

    @property
    def view_engine(self) -> Optional[ViewEngine]:
        if self._view_engine is None:
            self._view_engine = self._resolve(ViewEngine)
        return self._view_engine

    @view_engine.setter
    def view_engine(self, value: Optional[ViewEngine]) -> None:
        self._view_engine = value

    # # Results

    def content(self, content: str) -> ContentWidgetResult:
        return ContentWidgetResult(content)

    def html(self, content: str) -> HtmlContentWidgetResult:
        return HtmlContentWidgetResult(content)

    def view(self, view_name: Any = None, model: Any = None) -> ViewWidgetResult:
        # # view(model) shorthand: a non-string first argument is the model
        if view_name is not None and not isinstance(view_name, str) and model is None:
            view_name, model = None, view_name

        view_data = ViewDataDictionary(self.view_data, model)

        # # Always overwrite: a nested render must see this widget's context, never an ancestor's
        view_data[WIDGET_CONTEXT_KEY] = self.widget_context

        return ViewWidgetResult(
            view_engine=self.view_engine,
            view_name=view_name,
            view_data=view_data,
        )
