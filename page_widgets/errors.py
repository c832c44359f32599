# # Error hierarchy. Widget accessors never raise; these surface when results are executed.

from __future__ import annotations

from typing import Any, Dict, List, Optional


class WidgetError(Exception):
    """Base error for widget lookup, invocation and rendering failures."""

    error_code = "widget_error"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": str(self),
            "context": self.context,
        }


class UnknownWidgetError(WidgetError, KeyError):
    error_code = "unknown_widget"

    def __init__(self, name: str, available: List[str]):
        super().__init__(
            f"Unknown widget: {name}. Available: {available}",
            context={"name": name, "available": available},
        )
        self.name = name

    # # KeyError.__str__ would repr() the message
    def __str__(self) -> str:
        return Exception.__str__(self)


class ViewNotFoundError(WidgetError):
    error_code = "view_not_found"

    def __init__(self, view_name: str, searched_locations: List[str]):
        locations = "\n".join(f"  {loc}" for loc in searched_locations)
        super().__init__(
            f"The view '{view_name}' was not found. Searched locations:\n{locations}",
            context={"view_name": view_name, "searched_locations": list(searched_locations)},
        )
        self.view_name = view_name
        self.searched_locations = list(searched_locations)


class ServiceNotRegisteredError(WidgetError, LookupError):
    error_code = "service_not_registered"

    def __init__(self, service_type: type):
        name = getattr(service_type, "__name__", repr(service_type))
        super().__init__(
            f"No service registered for {name}",
            context={"service": name},
        )
        self.service_type = service_type


class InvalidWidgetResultError(WidgetError, TypeError):
    error_code = "invalid_widget_result"

    def __init__(self, widget_name: str, value: Any):
        type_name = type(value).__name__
        super().__init__(
            f"Widget '{widget_name}' returned an unsupported result of type {type_name}",
            context={"widget": widget_name, "result_type": type_name},
        )
