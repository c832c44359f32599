# # URL building for widgets and their templates.

from __future__ import annotations

from typing import Any

from starlette.requests import Request


class UrlHelper:
    def action(self, name: str, **path_params: Any) -> str:
        raise NotImplementedError

    def content(self, path: str) -> str:
        raise NotImplementedError


class RequestUrlHelper(UrlHelper):
    def __init__(self, request: Request):
        self.request = request

    def action(self, name: str, **path_params: Any) -> str:
        return str(self.request.url_for(name, **path_params))

    def content(self, path: str) -> str:
        # # "~/x" is relative to the application root, anything else is returned untouched
        if not path.startswith("~/"):
            return path
        root = self.request.scope.get("root_path", "").rstrip("/")
        return f"{root}/{path[2:]}"
