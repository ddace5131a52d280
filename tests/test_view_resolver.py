"""Unit tests for conventional view lookup and rendering."""

import re
from types import SimpleNamespace

import pytest

from birdwatch.config import DEFAULT_TEMPLATES_DIR
from birdwatch.errors import TemplateNotFound
from birdwatch.views import ViewResolver


def _items(html: str) -> list[str]:
    return re.findall(r"<li>(.*?)</li>", html)


@pytest.fixture
def resolver() -> ViewResolver:
    return ViewResolver(DEFAULT_TEMPLATES_DIR)


def test_template_name_joins_namespace_and_action() -> None:
    assert ViewResolver.template_name("birds", "index") == "birds/index.html"


def test_birds_index_renders_one_item_per_bird(resolver) -> None:
    birds = [
        SimpleNamespace(name="Robin", species="Turdus migratorius"),
        SimpleNamespace(name="Sparrow", species="Passeridae"),
    ]

    html = resolver.resolve_and_render("birds", "index", {"birds": birds})

    assert "<h1>Birds</h1>" in html
    assert _items(html) == ["Robin - Turdus migratorius", "Sparrow - Passeridae"]


def test_birds_index_empty_list(resolver) -> None:
    html = resolver.resolve_and_render("birds", "index", {"birds": []})

    assert "<h1>Birds</h1>" in html
    assert re.search(r"<ul>\s*</ul>", html)
    assert "<li>" not in html


def test_values_are_html_escaped(resolver) -> None:
    birds = [SimpleNamespace(name="<b>Owl</b>", species="Strix & Tyto")]

    html = resolver.resolve_and_render("birds", "index", {"birds": birds})

    assert _items(html) == ["&lt;b&gt;Owl&lt;/b&gt; - Strix &amp; Tyto"]


def test_missing_template_raises(resolver) -> None:
    with pytest.raises(TemplateNotFound) as exc_info:
        resolver.resolve_and_render("birds", "show", {})
    assert exc_info.value.template_name == "birds/show.html"


def test_renders_from_configured_directory_without_caching(tmp_path) -> None:
    view = tmp_path / "owls" / "index.html"
    view.parent.mkdir()
    view.write_text("Hello {{ name }}")
    resolver = ViewResolver(str(tmp_path))

    assert resolver.resolve_and_render("owls", "index", {"name": "Barn Owl"}) == "Hello Barn Owl"

    view.write_text("Goodbye {{ name }}")
    assert resolver.resolve_and_render("owls", "index", {"name": "Barn Owl"}) == "Goodbye Barn Owl"
