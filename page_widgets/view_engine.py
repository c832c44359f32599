# # View engines: locate a widget view by name and render it against a view context.

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, pass_context, select_autoescape
from jinja2.runtime import Context
from markupsafe import Markup

from .constants import DEFAULT_VIEW_LOCATION_FORMATS, DEFAULT_VIEW_NAME, WIDGET_CONTEXT_KEY
from .context import ViewContext, current_widget_context
from .errors import ViewNotFoundError
from .view_data import DynamicViewData

if TYPE_CHECKING:
    from .config import WidgetsConfig

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class ViewEngineResult:
    view_name: str
    template: Optional[Template] = None
    searched_locations: List[str] = dataclasses.field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.template is not None


class ViewEngine:
    default_view_name: str = DEFAULT_VIEW_NAME

    def find_view(self, view_name: str, widget_name: Optional[str] = None) -> ViewEngineResult:
        raise NotImplementedError

    def render(self, view: ViewEngineResult, view_context: ViewContext) -> Markup:
        raise NotImplementedError


def template_variables(view_context: ViewContext) -> Dict[str, Any]:
    """Variables every page and widget template sees."""
    view_data = view_context.view_data
    http = view_context.http_context
    variables: Dict[str, Any] = dict(view_data)
    variables.update(
        model=view_data.model,
        view_data=view_data,
        view_bag=DynamicViewData(lambda: view_data),
        view_context=view_context,
        widget_context=view_data.get(WIDGET_CONTEXT_KEY),
        request=http.request if http else None,
    )
    return variables


class JinjaViewEngine(ViewEngine):
    def __init__(
        self,
        environment: Environment,
        location_formats: Optional[Sequence[str]] = None,
        default_view_name: str = DEFAULT_VIEW_NAME,
    ):
        self.environment = environment
        self.location_formats = list(location_formats or DEFAULT_VIEW_LOCATION_FORMATS)
        self.default_view_name = default_view_name
        self.environment.globals.setdefault("widget", _invoke_widget)
        self.environment.globals.setdefault("current_widget", _current_widget)

    @classmethod
    def from_config(cls, config: "WidgetsConfig") -> "JinjaViewEngine":
        env = Environment(
            loader=FileSystemLoader(config.template_dirs),
            autoescape=select_autoescape(["html", "htm", "xml"]) if config.autoescape else False,
        )
        return cls(env, config.view_location_formats, config.default_view_name)

    def _candidates(self, view_name: str, widget_name: Optional[str]) -> List[str]:
        # # Explicit template paths bypass the location formats
        if "/" in view_name or view_name.endswith(".html"):
            return [view_name]
        return [fmt.format(widget=widget_name or "", view=view_name) for fmt in self.location_formats]

    def find_view(self, view_name: str, widget_name: Optional[str] = None) -> ViewEngineResult:
        name = view_name or self.default_view_name
        searched: List[str] = []
        for candidate in self._candidates(name, widget_name):
            searched.append(candidate)
            try:
                template = self.environment.get_template(candidate)
            except TemplateNotFound:
                continue
            logger.debug("View '%s' for widget '%s' resolved to %s", name, widget_name, candidate)
            return ViewEngineResult(view_name=name, template=template, searched_locations=searched)
        return ViewEngineResult(view_name=name, searched_locations=searched)

    def render(self, view: ViewEngineResult, view_context: ViewContext) -> Markup:
        if view.template is None:
            raise ViewNotFoundError(view.view_name, view.searched_locations)
        return Markup(view.template.render(template_variables(view_context)))


@pass_context
def _invoke_widget(context: Context, name: str, **arguments: Any) -> Markup:
    # # Nested invocation: the enclosing template's view context becomes the child widget's parent
    from .invoker import WidgetInvoker

    view_context = context.get("view_context")
    if view_context is None:
        view_context = ViewContext()
    return WidgetInvoker().invoke(view_context, name, arguments)


@pass_context
def _current_widget(context: Context):
    view_data = context.get("view_data")
    return current_widget_context(view_data)
