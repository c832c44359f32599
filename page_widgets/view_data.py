# # View data: ordered key/value bag handed to templates, plus model state and the dynamic view bag.

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, MutableMapping, Optional

from .errors import WidgetError


class ModelStateDictionary:
    def __init__(self) -> None:
        self._errors: Dict[str, List[str]] = {}

    def add_model_error(self, key: str, message: str) -> None:
        self._errors.setdefault(key, []).append(message)

    def errors(self, key: str) -> List[str]:
        return list(self._errors.get(key, []))

    def keys(self) -> List[str]:
        return list(self._errors.keys())

    @property
    def is_valid(self) -> bool:
        return not any(self._errors.values())

    def clear(self) -> None:
        self._errors.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._errors

    def __len__(self) -> int:
        return len(self._errors)


class ViewDataDictionary(MutableMapping[str, Any]):
    """
    String-keyed mapping passed to view templates.

    Deriving from a source copies its entries, so writes to the derived
    dictionary never reach the source. Model state is shared with the source.
    """

    def __init__(self, source: Optional["ViewDataDictionary"] = None, model: Any = None):
        self._data: Dict[str, Any] = {}
        if source is not None:
            self._data.update(source._data)
            self.model_state = source.model_state
        else:
            self.model_state = ModelStateDictionary()
        self.model = model

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ViewDataDictionary({self._data!r}, model={self.model!r})"


class DynamicViewData:
    """
    Attribute-style access over view data (``bag.title = "x"``).

    Holds a callable instead of a dictionary so it always talks to whatever
    view data is current when it is used.
    """

    def __init__(self, get_view_data: Callable[[], Optional[MutableMapping[str, Any]]]):
        object.__setattr__(self, "_get_view_data", get_view_data)

    def _view_data(self) -> Optional[MutableMapping[str, Any]]:
        return self._get_view_data()

    def get(self, key: str, default: Any = None) -> Any:
        vd = self._view_data()
        if vd is None:
            return default
        return vd.get(key, default)

    def set(self, key: str, value: Any) -> None:
        vd = self._view_data()
        if vd is None:
            raise WidgetError(f"Cannot set view bag entry '{key}': no view data is available")
        vd[key] = value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        vd = self._view_data()
        if vd is not None:
            vd.pop(name, None)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        vd = self._view_data()
        return vd is not None and key in vd

    def __dir__(self) -> List[str]:
        vd = self._view_data()
        return sorted(vd.keys()) if vd is not None else []
