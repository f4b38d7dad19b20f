"""Document adapters that feed mentions in and write prep lists out."""

from preplist.document.fetch import DocumentFetcher, FetchError
from preplist.document.html import (
    DocumentError,
    add_prep_list,
    extract_method_ingredients,
    render_prep_list,
)

__all__ = [
    "DocumentError",
    "DocumentFetcher",
    "FetchError",
    "add_prep_list",
    "extract_method_ingredients",
    "render_prep_list",
]
