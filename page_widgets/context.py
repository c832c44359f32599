# # Rendering contexts: per-request HTTP state, per-view state, and per-widget-invocation state.

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from starlette.requests import Request

from .constants import WIDGET_CONTEXT_KEY
from .view_data import ModelStateDictionary, ViewDataDictionary

if TYPE_CHECKING:
    from .services import ServiceProvider
    from .widgets.registry import WidgetDescriptor


@dataclasses.dataclass
class RouteData:
    values: Dict[str, Any] = dataclasses.field(default_factory=dict)
    route_name: Optional[str] = None

    @classmethod
    def from_request(cls, request: Request) -> "RouteData":
        # # FastAPI sets scope["route"]; plain starlette only leaves the endpoint
        route = request.scope.get("route") or request.scope.get("endpoint")
        name = getattr(route, "name", None) or getattr(route, "__name__", None)
        return cls(values=dict(request.path_params), route_name=name)


@dataclasses.dataclass
class HttpContext:
    request: Request
    request_services: Optional["ServiceProvider"] = None
    items: Dict[str, Any] = dataclasses.field(default_factory=dict)

    @property
    def user(self) -> Any:
        # # Populated by starlette's AuthenticationMiddleware; absent otherwise
        return self.request.scope.get("user")


@dataclasses.dataclass
class ViewContext:
    http_context: Optional[HttpContext] = None
    view_data: ViewDataDictionary = dataclasses.field(default_factory=ViewDataDictionary)
    route_data: RouteData = dataclasses.field(default_factory=RouteData)

    @property
    def model_state(self) -> ModelStateDictionary:
        return self.view_data.model_state

    @property
    def services(self) -> Optional["ServiceProvider"]:
        return self.http_context.request_services if self.http_context else None

    def derive(self, view_data: ViewDataDictionary) -> "ViewContext":
        return dataclasses.replace(self, view_data=view_data)


@dataclasses.dataclass
class WidgetContext:
    view_context: Optional[ViewContext] = None
    descriptor: Optional["WidgetDescriptor"] = None
    arguments: Dict[str, Any] = dataclasses.field(default_factory=dict)

    @property
    def view_data(self) -> Optional[ViewDataDictionary]:
        return self.view_context.view_data if self.view_context else None

    @property
    def widget_name(self) -> Optional[str]:
        return self.descriptor.name if self.descriptor else None


def current_widget_context(view_data: Optional[Mapping[str, Any]]) -> Optional[WidgetContext]:
    if view_data is None:
        return None
    return view_data.get(WIDGET_CONTEXT_KEY)
