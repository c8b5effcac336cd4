"""
Education and employment timelines. Both keep the authored order; an entry
without details/bullets gets no <ul> at all.
"""
from __future__ import annotations
from typing import Iterable, Sequence

from bs4 import BeautifulSoup, Tag

from profile_site.builder import by_id, el
from profile_site.schema_site import EducationEntry, EmploymentEntry


def _bullet_list(lines: Sequence[str]) -> Tag | None:
    if not lines:
        return None
    return el("ul", {}, [el("li", {}, [x]) for x in lines])


# ───────────────────────────────────────── education ──
def education_item(ed: EducationEntry) -> Tag:
    return el("div", {"class": "edu-item"}, [
        el("div", {"class": "edu-grid"}, [
            el("div", {"class": "edu-when"}, [ed.range]),
            el("div", {"class": "edu-what"}, [
                el("b", {}, [ed.degree]),
                el("div", {"class": "meta"}, [ed.place]),
                _bullet_list(ed.details),
            ]),
        ]),
    ])


def render_education(page: BeautifulSoup, education: Iterable[EducationEntry]) -> None:
    root = by_id(page, "educationList")
    if root is None:
        return
    root.clear()
    for ed in education:
        root.append(education_item(ed))


# ───────────────────────────────────────── employment ──
def employment_item(job: EmploymentEntry) -> Tag:
    return el("div", {"class": "item"}, [
        el("div", {"class": "when"}, [job.range]),
        el("div", {"class": "what"}, [
            el("b", {}, [job.title]),
            el("div", {"class": "meta"}, [job.place]),
            _bullet_list(job.bullets),
        ]),
    ])


def render_employment(page: BeautifulSoup, employment: Iterable[EmploymentEntry]) -> None:
    root = by_id(page, "employmentList")
    if root is None:
        return
    root.clear()
    for job in employment:
        root.append(employment_item(job))
