"""
Hyperlink builders for catalog responses.

All hrefs are relative to the server root and start with the
configured API prefix.
"""
from typing import Optional
from urllib.parse import urlencode

from app.schemas import Link


def film_link(api_prefix: str, film_id: str) -> Link:
    return Link(href=f"{api_prefix}/films/{film_id}")


def category_link(api_prefix: str, category_id: str) -> Link:
    return Link(href=f"{api_prefix}/categories/{category_id}")


def film_list_link(api_prefix: str, page: int, limit: int, search: Optional[str] = None) -> Link:
    """Link to a page of the film listing, carrying the search term when set."""
    params = {}
    if search:
        params["search"] = search
    params["page"] = page
    params["limit"] = limit
    return Link(href=f"{api_prefix}/films?{urlencode(params)}")
