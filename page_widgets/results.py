# # Widget results: inert values a widget returns, executed later by the invoker.

from __future__ import annotations

import dataclasses
from typing import Any, Optional

from markupsafe import Markup, escape

from .context import ViewContext, WidgetContext
from .errors import ViewNotFoundError, WidgetError
from .view_data import ViewDataDictionary
from .view_engine import ViewEngine


class WidgetResult:
    def execute(self, widget_context: WidgetContext) -> Markup:
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class ContentWidgetResult(WidgetResult):
    # # Plain text: escaped when written into the page
    content: str

    def execute(self, widget_context: WidgetContext) -> Markup:
        return escape(self.content)


@dataclasses.dataclass(frozen=True)
class HtmlContentWidgetResult(WidgetResult):
    content: str

    def execute(self, widget_context: WidgetContext) -> Markup:
        return Markup(self.content)


# # eq=False: identity hash, the view data is a mutable mapping
@dataclasses.dataclass(frozen=True, eq=False)
class ViewWidgetResult(WidgetResult):
    view_engine: Optional[ViewEngine]
    view_name: Optional[str]
    view_data: ViewDataDictionary

    @property
    def model(self) -> Any:
        return self.view_data.model

    def execute(self, widget_context: WidgetContext) -> Markup:
        if self.view_engine is None:
            raise WidgetError(
                f"No view engine available to render widget '{widget_context.widget_name}'",
                context={"widget": widget_context.widget_name},
            )

        view = self.view_engine.find_view(self.view_name or "", widget_context.widget_name)
        if not view.success:
            raise ViewNotFoundError(view.view_name, view.searched_locations)

        parent = widget_context.view_context or ViewContext()
        return self.view_engine.render(view, parent.derive(self.view_data))
