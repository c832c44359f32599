# # Invoker: activate a registered widget, attach its context, run it, and execute its result.

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from markupsafe import Markup

from .context import ViewContext, WidgetContext
from .errors import InvalidWidgetResultError
from .results import ContentWidgetResult, HtmlContentWidgetResult, WidgetResult
from .widgets.registry import WidgetDescriptor, get_widget

logger = logging.getLogger(__name__)


def coerce_result(descriptor: WidgetDescriptor, value: Any) -> WidgetResult:
    if isinstance(value, WidgetResult):
        return value
    # # Markup is a str subclass, so check it first
    if isinstance(value, Markup):
        return HtmlContentWidgetResult(str(value))
    if isinstance(value, str):
        return ContentWidgetResult(value)
    raise InvalidWidgetResultError(descriptor.name, value)


class WidgetInvoker:
    def activate(self, descriptor: WidgetDescriptor, widget_context: WidgetContext) -> Any:
        widget = descriptor.widget_type()
        widget.widget_context = widget_context
        return widget

    def invoke(
        self,
        view_context: ViewContext,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> Markup:
        descriptor = get_widget(name)
        args = dict(arguments or {})
        widget_context = WidgetContext(view_context=view_context, descriptor=descriptor, arguments=args)

        widget = self.activate(descriptor, widget_context)
        logger.debug("Invoking widget '%s' (%s) with %s", descriptor.name, descriptor.type_name, sorted(args))

        value = getattr(widget, descriptor.method_name)(**args)
        result = coerce_result(descriptor, value)
        return result.execute(widget_context)
