"""
Shared fixtures: isolated widget registry, on-disk widget templates, and a
template host wired to them.
"""

from pathlib import Path

import pytest

from page_widgets.hosting import WidgetTemplates, offline_request
from page_widgets.widgets import registry


@pytest.fixture(autouse=True)
def isolated_registry():
    """Widgets registered inside a test disappear afterwards"""
    saved = dict(registry._WIDGETS)
    yield
    registry._WIDGETS.clear()
    registry._WIDGETS.update(saved)


def write_template(root: Path, rel_path: str, text: str) -> Path:
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def template_dir(tmp_path):
    root = tmp_path / "templates"
    write_template(root, "widgets/Greeting/Default.html", "<p>Hello, {{ model }}!</p>")
    write_template(root, "widgets/Greeting/Shout.html", "<p>{{ model | upper }}!</p>")
    write_template(
        root,
        "shared/widgets/Card/Default.html",
        "<div class=\"card\">{{ view_bag.title }}: {{ model.body }}</div>",
    )
    write_template(
        root,
        "widgets/Context/Default.html",
        "{{ current_widget().widget_name }}|{{ widget_context.arguments.tag }}",
    )
    write_template(
        root,
        "widgets/Outer/Default.html",
        "<section>{{ current_widget().widget_name }}:{{ widget('Inner', label=model) }}:{{ current_widget().widget_name }}</section>",
    )
    write_template(
        root,
        "widgets/Inner/Default.html",
        "<span>{{ current_widget().widget_name }}={{ model }}</span>",
    )
    write_template(root, "pages/index.html", "<main>{{ title }} {{ widget('Greeting', who=who) }}</main>")
    return root


@pytest.fixture
def templates(template_dir):
    return WidgetTemplates(str(template_dir))


@pytest.fixture
def view_context(templates):
    return templates.view_context(offline_request(), {"page": "home"})
