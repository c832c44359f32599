# # Config loader: JSON -> dataclass

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import List, Optional

from .constants import DEFAULT_VIEW_LOCATION_FORMATS, DEFAULT_VIEW_NAME


@dataclasses.dataclass
class WidgetsConfig:
    # # Views
    template_dirs: List[str] = dataclasses.field(default_factory=lambda: ["templates"])
    view_location_formats: List[str] = dataclasses.field(default_factory=lambda: list(DEFAULT_VIEW_LOCATION_FORMATS))
    default_view_name: str = DEFAULT_VIEW_NAME
    autoescape: bool = True

    # # Services: raise on a missing URL helper / view engine instead of yielding None
    strict_services: bool = False

    # # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    quiet_loggers: List[str] = dataclasses.field(default_factory=lambda: ["httpx", "asyncio"])


def load_config(path: Path) -> WidgetsConfig:
    cfg = WidgetsConfig()
    if not path.exists():
        return cfg

    data = json.loads(path.read_text(encoding="utf-8"))
    for k, v in data.items():
        if hasattr(cfg, k):
            setattr(cfg, k, v)

    # # A single directory is accepted as a plain string
    if isinstance(cfg.template_dirs, str):
        cfg.template_dirs = [cfg.template_dirs]
    return cfg
