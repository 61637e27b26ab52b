"""Tests for page renderer."""

import json
from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from fparty.assets import get_templates_dir
from fparty.core.negotiation import ResponseMode
from fparty.core.pages import PageId
from fparty.core.renderer import PageRenderer


@pytest.fixture
def renderer() -> PageRenderer:
    return PageRenderer()


class TestPageRenderer:
    """Tests for PageRenderer.render()."""

    def test__default__uses_bundled_templates(self, renderer: PageRenderer) -> None:
        assert renderer.templates_dir == get_templates_dir()

    @pytest.mark.parametrize("page", list(PageId))
    def test__full_mode__renders_document_with_page_body(
        self, renderer: PageRenderer, page: PageId
    ) -> None:
        result = renderer.render(page, ResponseMode.FULL)

        assert result.page is page
        assert result.mode is ResponseMode.FULL
        assert result.content_type == "text/html"
        assert result.body.startswith("<!DOCTYPE html>")
        assert f'<div id="{page.value}">' in result.body
        assert f"<title>{page.page_title}</title>" in result.body

    @pytest.mark.parametrize("page", list(PageId))
    def test__script_mode__renders_content_swap(
        self, renderer: PageRenderer, page: PageId
    ) -> None:
        result = renderer.render(page, ResponseMode.SCRIPT)

        assert result.mode is ResponseMode.SCRIPT
        assert result.content_type == "text/javascript"
        assert result.body.startswith('$("#content").html(')
        assert "<!DOCTYPE html>" not in result.body
        assert f"document.title = {json.dumps(page.page_title)};" in result.body

    def test__full_layout__has_ajax_navigation_links(
        self, renderer: PageRenderer
    ) -> None:
        body = renderer.render(PageId.HOME, ResponseMode.FULL).body

        assert '<li id="about_link"><a href="/about">' in body
        assert '<li id="princess_link"><a href="/princess">' in body
        assert '<li id="book_link"><a href="/book">' in body
        assert '<script src="/javascripts/application.js">' in body

    def test__home__has_animated_container(self, renderer: PageRenderer) -> None:
        body = renderer.render(PageId.HOME, ResponseMode.FULL).body

        assert '<div class="mini_container">' in body

    def test__contact__has_placeholder_inputs(self, renderer: PageRenderer) -> None:
        body = renderer.render(PageId.CONTACT, ResponseMode.FULL).body

        assert 'class="replace_default" value="Your name"' in body

    def test__custom_templates_dir__overrides_bundled(self, tmp_path: Path) -> None:
        (tmp_path / "pages").mkdir()
        (tmp_path / "pages" / "about.html").write_text("<p>Custom about</p>")
        (tmp_path / "layout.html").write_text("<main>{{ body|safe }}</main>")

        renderer = PageRenderer(tmp_path)
        result = renderer.render(PageId.ABOUT, ResponseMode.FULL)

        assert result.body == "<main><p>Custom about</p></main>"

    def test__missing_page_template__raises_template_not_found(
        self, tmp_path: Path
    ) -> None:
        (tmp_path / "layout.html").write_text("{{ body }}")
        renderer = PageRenderer(tmp_path)

        with pytest.raises(TemplateNotFound):
            renderer.render(PageId.BOOK, ResponseMode.FULL)


class TestRenderNotFound:
    """Tests for PageRenderer.render_not_found()."""

    def test__requested_value__is_escaped(self, renderer: PageRenderer) -> None:
        body = renderer.render_not_found("<script>")

        assert "&lt;script&gt;" in body
        assert "<script>" not in body
