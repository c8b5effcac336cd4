"""
News feed renderer.

Cards are newest-first by date string; undated items sort last. A card only
gets a figure when it has an image and only gets an action row when it has a
non-blank link.
"""
from __future__ import annotations
import logging
from typing import Iterable, List

from bs4 import BeautifulSoup, Tag

from profile_site import config
from profile_site.builder import by_id, el, set_text
from profile_site.cleaner import is_blank
from profile_site.schema_site import NewsItem

logger = logging.getLogger(__name__)


def sort_news(items: Iterable[NewsItem]) -> List[NewsItem]:
    # reverse=True keeps equal dates in input order
    return sorted(items, key=lambda n: n.date, reverse=True)


def news_card(n: NewsItem) -> Tag:
    title = n.title or "Update"
    img = n.image.strip()

    main = [
        el("h4", {"class": "news-title"}, [title]),
        el("p", {"class": "news-text"}, [n.text]),
    ]
    if img:
        main.append(el("div", {"class": "news-figure"}, [
            el("img", {"class": "news-img", "src": img, "alt": n.image_alt or title, "loading": "lazy"}),
        ]))
    if not is_blank(n.link):
        main.append(el("div", {"class": "news-actions"}, [
            el("a", {"class": "taglink", "href": n.link, "target": "_blank", "rel": "noreferrer"}, ["↗ Details"]),
        ]))

    return el("div", {"class": "news-card"}, [
        el("div", {"class": "news-date"}, [n.date]),
        el("div", {"class": "news-main"}, main),
    ])


def render_news(page: BeautifulSoup, news: Iterable[NewsItem]) -> None:
    root = by_id(page, "newsList")
    if root is None:
        return
    items = list(news)
    root.clear()

    if not items:
        set_text(root, config.NEWS_PLACEHOLDER)
        return

    for n in sort_news(items):
        root.append(news_card(n))
    logger.debug("rendered %d news cards", len(items))
