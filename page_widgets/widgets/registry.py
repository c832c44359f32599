# # Widget registry: drop in widgets without touching the invoker.

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, Union

from ..errors import UnknownWidgetError

if TYPE_CHECKING:
    from .base import Widget

_WIDGETS: Dict[str, "WidgetDescriptor"] = {}


@dataclasses.dataclass(frozen=True)
class WidgetDescriptor:
    name: str
    widget_type: Type["Widget"]
    method_name: str = "invoke"

    @property
    def type_name(self) -> str:
        return f"{self.widget_type.__module__}.{self.widget_type.__qualname__}"


def widget_name_for(cls: type) -> str:
    name = cls.__name__
    if name.endswith("Widget") and name != "Widget":
        name = name[: -len("Widget")]
    return name


def register_widget(name: Union[str, Type["Widget"], None] = None) -> Any:
    """Use as `@register_widget`, `@register_widget()` or `@register_widget("name")`."""
    def deco(cls: Type["Widget"]) -> Type["Widget"]:
        if not callable(getattr(cls, "invoke", None)):
            raise TypeError(f"{cls.__qualname__} cannot be registered as a widget: it has no invoke() method")
        key = name or widget_name_for(cls)
        _WIDGETS[key] = WidgetDescriptor(name=key, widget_type=cls)
        return cls

    if isinstance(name, type):
        cls, name = name, None
        return deco(cls)
    return deco


def unregister_widget(name: str) -> None:
    _WIDGETS.pop(name, None)


def get_widget(name: str) -> WidgetDescriptor:
    if name not in _WIDGETS:
        raise UnknownWidgetError(name, available_widgets())
    return _WIDGETS[name]


def available_widgets() -> List[str]:
    return sorted(_WIDGETS.keys())
