# # Well-known keys and defaults shared by widgets, templates and view engines.

from __future__ import annotations

from typing import List

# # Reserved view-data key: templates and nested widgets read the rendering widget's context from here.
WIDGET_CONTEXT_KEY = "WidgetContext"

DEFAULT_VIEW_NAME = "Default"

DEFAULT_VIEW_LOCATION_FORMATS: List[str] = [
    "widgets/{widget}/{view}.html",
    "shared/widgets/{widget}/{view}.html",
]
