"""
Publication list renderer.

Newest year first; a year that doesn't parse counts as 0 and lands at the
end. Equal years keep their input order.
"""
from __future__ import annotations
import logging
from typing import Iterable, List

from bs4 import BeautifulSoup, Tag

from profile_site import config
from profile_site.builder import by_id, el
from profile_site.schema_site import Person, Publication

logger = logging.getLogger(__name__)


def doi_url(doi: str) -> str:
    return f"{config.DOI_RESOLVER}{doi}" if doi else ""


def sort_publications(pubs: Iterable[Publication]) -> List[Publication]:
    return sorted(pubs, key=lambda p: p.sort_year, reverse=True)


def _taglink(href: str, label: str) -> Tag:
    return el("a", {"class": "taglink", "href": href, "target": "_blank", "rel": "noreferrer"}, [label])


def pub_block(p: Publication) -> Tag:
    links = el("div", {"class": "links"})
    if p.links.pdf:
        links.append(_taglink(p.links.pdf, "📄 PDF"))
    if p.doi:
        links.append(_taglink(doi_url(p.doi), "🔗 DOI"))
    if p.links.code:
        links.append(_taglink(p.links.code, "💻 Code"))

    return el("div", {"class": "pub"}, [
        el("p", {"class": "title"}, [p.title]),
        el("p", {"class": "venue"}, [f"{p.venue} · {p.year_label}"]),
        links,
    ])


def render_publications(page: BeautifulSoup, publications: Iterable[Publication],
                        person: Person | None = None) -> None:
    root = by_id(page, "pubList")
    if root is not None:
        root.clear()
        pubs = sort_publications(publications)
        for p in pubs:
            root.append(pub_block(p))
        logger.debug("rendered %d publications", len(pubs))

    scholar = by_id(page, "scholarLink")
    if scholar is not None:
        scholar["href"] = (person.scholar if person else "") or "#"
