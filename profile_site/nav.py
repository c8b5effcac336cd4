"""Marks the nav link for the current page with aria-current."""
from __future__ import annotations
import logging
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from profile_site.config import section_for_page

logger = logging.getLogger(__name__)


def page_key(path: str | None) -> str:
    """'/site/education.html?x=1' → 'education'; unknown or empty → 'home'."""
    filename = urlsplit(path or "").path.split("/")[-1] or "index.html"
    return section_for_page(filename)


def set_active_nav(page: BeautifulSoup, path: str | None) -> str:
    key = page_key(path)
    for a in page.select("nav a"):
        # clear stale markers before setting the current one
        if "aria-current" in a.attrs:
            del a["aria-current"]
        if a.get("data-nav") == key:
            a["aria-current"] = "true"
    logger.debug("nav section for %r is %s", path, key)
    return key
