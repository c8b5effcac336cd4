"""
Header / contact renderer.

Fills the name, tagline, intro and avatar slots, rebuilds the contact block
row by row and the topic pill row. Every target is optional in the markup.
"""
from __future__ import annotations
import logging
from typing import List, Tuple

from bs4 import BeautifulSoup

from profile_site import config
from profile_site.builder import by_id, el, set_text
from profile_site.schema_site import Person

logger = logging.getLogger(__name__)


def _contact_rows(person: Person) -> List[Tuple[str, str, str]]:
    """(icon, href, label) per present channel, in display order."""
    rows = [
        ("✉️", f"mailto:{person.email}", person.email),
        ("📞", "", person.phone),
        ("🎓", person.scholar, "Google Scholar" if person.scholar else ""),
        ("💻", person.github, "GitHub" if person.github else ""),
    ]
    return [r for r in rows if r[2]]


def _link(href: str, label: str):
    external = href.startswith("http")
    return el("a", {"href": href, "target": "_blank" if external else None, "rel": "noreferrer"}, [label])


def render_contact(page: BeautifulSoup, person: Person) -> None:
    contact = by_id(page, "contactBlock")
    if contact is None:
        return
    contact.clear()
    for icon, href, label in _contact_rows(person):
        row = el("div", {}, [icon + " "])
        row.append(_link(href, label) if href else label)
        contact.append(row)


def render_pills(page: BeautifulSoup, tags=config.TOPIC_TAGS) -> None:
    pills = by_id(page, "pillRow")
    if pills is None:
        return
    pills.clear()
    for t in tags:
        pills.append(el("span", {"class": "pill"}, [t]))


def render_header(page: BeautifulSoup, person: Person) -> None:
    for slot in ("personName", "personName2"):
        if (node := by_id(page, slot)) is not None:
            set_text(node, person.name)
    for slot in ("personTagline", "personTagline2"):
        if (node := by_id(page, slot)) is not None:
            set_text(node, person.tagline)

    if (intro := by_id(page, "introText")) is not None:
        set_text(intro, person.intro)

    if (avatar := by_id(page, "avatarImg")) is not None:
        avatar["src"] = person.avatar or config.DEFAULT_AVATAR
        avatar["alt"] = f"{person.name} photo".strip()

    render_contact(page, person)
    render_pills(page)

    if (footer := by_id(page, "personNameFooter")) is not None:
        set_text(footer, person.name)
    logger.debug("header rendered for %r", person.name)
