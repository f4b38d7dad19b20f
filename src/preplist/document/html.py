"""Reading method ingredients from, and writing prep lists into, HTML documents."""

from collections.abc import Sequence

from bs4 import BeautifulSoup

from preplist.config import SpoonStyle, get_settings
from preplist.logging_config import get_logger
from preplist.plan.prep_list import consolidate_ingredients

logger = get_logger(__name__)


class DocumentError(Exception):
    """Raised when a document lacks the structure needed to place a prep list."""

    def __init__(self, message: str, selector: str | None = None):
        super().__init__(message)
        self.selector = selector


def extract_method_ingredients(html: str, selector: str | None = None) -> list[str]:
    """
    Collect method ingredient mentions from a document.

    Args:
        html: The document markup.
        selector: CSS selector for the mention elements. Defaults to the
            configured ``method_list_selector``.

    Returns:
        The inner HTML of each matching element, in document order.
    """
    selector = selector or get_settings().method_list_selector
    soup = BeautifulSoup(html, "html.parser")
    mentions = [node.decode_contents() for node in soup.select(selector)]
    logger.debug(f"Found {len(mentions)} mentions for selector {selector!r}")
    return mentions


def render_prep_list(
    html: str,
    ingredients: Sequence[str],
    heading: str | None = None,
    container: str | None = None,
) -> str:
    """
    Append a heading and a list of ingredients to a document.

    Raises:
        DocumentError: If no element matches the container selector.
    """
    settings = get_settings()
    heading = heading or settings.prep_list_heading
    container = container or settings.prep_list_container

    soup = BeautifulSoup(html, "html.parser")
    target = soup.select_one(container)
    if target is None:
        raise DocumentError(f"No element matches container {container!r}", selector=container)

    heading_tag = soup.new_tag("h2")
    heading_tag.string = heading
    target.append(heading_tag)

    list_tag = soup.new_tag("ul")
    for ingredient in ingredients:
        # Entries come from inner HTML, so they are inserted as markup
        item_tag = soup.new_tag("li")
        item_tag.append(BeautifulSoup(ingredient, "html.parser"))
        list_tag.append(item_tag)
    target.append(list_tag)

    return str(soup)


def add_prep_list(
    html: str,
    selector: str | None = None,
    container: str | None = None,
    heading: str | None = None,
    spoon_style: SpoonStyle | None = None,
) -> tuple[str, list[str]]:
    """
    Build the prep list for a document and insert it.

    Returns:
        Tuple of (rewritten document, prep list entries). A document without
        any mentions is returned unchanged with an empty list.
    """
    mentions = extract_method_ingredients(html, selector)
    if not mentions:
        logger.info("No method ingredients found, leaving document unchanged")
        return html, []

    ingredients = consolidate_ingredients(mentions, spoon_style)
    logger.info(f"Built prep list: {len(mentions)} mentions, {len(ingredients)} ingredients")
    return render_prep_list(html, ingredients, heading=heading, container=container), ingredients
