"""Tests for the HTML document adapter."""

import pytest
from bs4 import BeautifulSoup

from preplist.document.html import (
    DocumentError,
    add_prep_list,
    extract_method_ingredients,
    render_prep_list,
)


def _prep_list_items(html: str) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    heading = soup.find("h2")
    return [li.get_text() for li in heading.find_next_sibling("ul").find_all("li")]


class TestExtractMethodIngredients:
    """Tests for extract_method_ingredients function."""

    def test_default_selector(self, recipe_html):
        """Test mentions are read from lists inside the article."""
        assert extract_method_ingredients(recipe_html) == [
            "250g of lentils (red or green), washed",
            "1 onion, chopped",
            "1/2 tsp salt",
            "2x onion, sliced",
        ]

    def test_custom_selector(self, recipe_html):
        """Test a caller supplied selector."""
        assert extract_method_ingredients(recipe_html, "footer li") == ["Not an ingredient"]

    def test_selector_from_settings(self, recipe_html, monkeypatch):
        """Test the configured selector is the default."""
        monkeypatch.setenv("PREPLIST_METHOD_LIST_SELECTOR", "footer li")
        assert extract_method_ingredients(recipe_html) == ["Not an ingredient"]

    def test_keeps_inner_markup(self):
        """Test mentions keep their inner HTML."""
        html = "<article><ul><li>2x <em>ripe</em> tomatoes</li></ul></article>"
        assert extract_method_ingredients(html) == ["2x <em>ripe</em> tomatoes"]

    def test_no_matches(self):
        """Test a document without method lists."""
        assert extract_method_ingredients("<article><p>Just text</p></article>") == []


class TestRenderPrepList:
    """Tests for render_prep_list function."""

    def test_appends_heading_and_list(self, recipe_html):
        """Test the list goes at the end of the container, under a heading."""
        html = render_prep_list(recipe_html, ["1x onion", "Salt"])

        soup = BeautifulSoup(html, "html.parser")
        article = soup.find("article")
        heading, prep_list = article.find_all(recursive=False)[-2:]
        assert heading.name == "h2"
        assert heading.get_text() == "Ingredients!"
        assert prep_list.name == "ul"
        assert [li.get_text() for li in prep_list.find_all("li")] == ["1x onion", "Salt"]

    def test_custom_heading_and_container(self, recipe_html):
        """Test caller supplied heading and container."""
        html = render_prep_list(recipe_html, ["Salt"], heading="You will need", container="footer")

        soup = BeautifulSoup(html, "html.parser")
        assert soup.find("article").find("h2") is None
        assert soup.find("footer").find("h2").get_text() == "You will need"

    def test_entries_inserted_as_markup(self):
        """Test entities in entries are not escaped twice."""
        html = render_prep_list("<article></article>", ["1x salt &amp; pepper mix"])
        assert _prep_list_items(html) == ["1x salt & pepper mix"]

    def test_missing_container(self):
        """Test a document without the container is rejected."""
        with pytest.raises(DocumentError) as exc_info:
            render_prep_list("<div></div>", ["Salt"])
        assert exc_info.value.selector == "article"


class TestAddPrepList:
    """Tests for add_prep_list function."""

    def test_builds_and_inserts(self, recipe_html):
        """Test mentions are read, consolidated and written back."""
        html, ingredients = add_prep_list(recipe_html)

        assert ingredients == ["3x onion", "250g lentils (red or green)", "Salt"]
        assert _prep_list_items(html) == ingredients

    def test_spoon_style(self, recipe_html):
        """Test the spoon style reaches the formatter."""
        _, ingredients = add_prep_list(recipe_html, spoon_style="quantity")
        assert ingredients[-1] == "1/2 tsp salt"

    def test_no_mentions_leaves_document(self):
        """Test a document without mentions is returned as is."""
        html = "<article><p>Just text</p></article>"
        assert add_prep_list(html) == (html, [])
