"""Pytest configuration and shared fixtures."""

import pytest

from preplist.config import get_settings

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure every test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Method Ingredient Fixtures
# =============================================================================


@pytest.fixture
def dal_mentions():
    """Mentions from a dal method, in document order."""
    return [
        "250g of lentils (green, red or mix), washed",
        "1 onion, finely chopped",
        "3 cloves of garlic, crushed",
        "A chunk of ginger, grated",
        "2 tsp cumin seeds",
        "1/2 tsp cumin seeds",
        "1.25l stock",
        "2 onions, sliced",
    ]


@pytest.fixture
def recipe_html():
    """A recipe page with method mentions in article lists."""
    return (
        "<html><body>"
        "<article>"
        "<h1>Tarka dal</h1>"
        "<ol>"
        "<li><p>Rinse</p><ul>"
        "<li>250g of lentils (red or green), washed</li>"
        "</ul></li>"
        "<li><p>Fry</p><ul>"
        "<li>1 onion, chopped</li>"
        "<li>1/2 tsp salt</li>"
        "</ul></li>"
        "<li><p>Finish</p><ul>"
        "<li>2x onion, sliced</li>"
        "</ul></li>"
        "</ol>"
        "</article>"
        "<footer><ul><li>Not an ingredient</li></ul></footer>"
        "</body></html>"
    )
