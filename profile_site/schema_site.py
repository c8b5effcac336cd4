"""
Typed view of data/site.json.

Every field is optional and has a declared default; from_dict() never raises on
missing or mistyped fields. Instances are frozen, so renderers can't mutate
the document they were handed.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from profile_site.cleaner import leading_int, mapping, records, strings, text


@dataclass(frozen=True)
class Person:
    name: str = ""
    tagline: str = ""
    intro: str = ""
    avatar: str = ""
    email: str = ""
    phone: str = ""
    scholar: str = ""
    github: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Person":
        d = mapping(d)
        return cls(
            name=text(d.get("name")),
            tagline=text(d.get("tagline")),
            intro=text(d.get("intro")),
            avatar=text(d.get("avatar")),
            email=text(d.get("email")),
            phone=text(d.get("phone")),
            scholar=text(d.get("scholar")),
            github=text(d.get("github")),
        )


@dataclass(frozen=True)
class NewsItem:
    title: str = ""
    date: str = ""
    text: str = ""
    image: str = ""
    image_alt: str = ""
    link: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "NewsItem":
        return cls(
            title=text(d.get("title")),
            date=text(d.get("date")),
            text=text(d.get("text")),
            image=text(d.get("image")),
            image_alt=text(d.get("image_alt")),
            link=text(d.get("link")),
        )


@dataclass(frozen=True)
class EducationEntry:
    range: str = ""
    degree: str = ""
    place: str = ""
    details: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EducationEntry":
        return cls(
            range=text(d.get("range")),
            degree=text(d.get("degree")),
            place=text(d.get("place")),
            details=strings(d.get("details")),
        )


@dataclass(frozen=True)
class EmploymentEntry:
    range: str = ""
    title: str = ""
    place: str = ""
    bullets: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EmploymentEntry":
        return cls(
            range=text(d.get("range")),
            title=text(d.get("title")),
            place=text(d.get("place")),
            bullets=strings(d.get("bullets")),
        )


@dataclass(frozen=True)
class PublicationLinks:
    pdf: str = ""
    code: str = ""


@dataclass(frozen=True)
class Publication:
    title: str = ""
    venue: str = ""
    year: int | float | str | None = None   # raw value, shown as written
    doi: str = ""
    links: PublicationLinks = field(default_factory=PublicationLinks)

    @property
    def sort_year(self) -> int:
        return leading_int(self.year)

    @property
    def year_label(self) -> str:
        if isinstance(self.year, float) and self.year.is_integer():
            return str(int(self.year))
        return text(self.year)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Publication":
        year = d.get("year")
        links = mapping(d.get("links"))
        return cls(
            title=text(d.get("title")),
            venue=text(d.get("venue")),
            year=year if isinstance(year, (int, float, str)) and not isinstance(year, bool) else None,
            doi=text(d.get("doi")),
            links=PublicationLinks(pdf=text(links.get("pdf")), code=text(links.get("code"))),
        )


@dataclass(frozen=True)
class SiteData:
    person: Person = field(default_factory=Person)
    news: Tuple[NewsItem, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    employment: Tuple[EmploymentEntry, ...] = ()
    publications: Tuple[Publication, ...] = ()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SiteData":
        d = mapping(d)
        return cls(
            person=Person.from_dict(d.get("person")),
            news=tuple(NewsItem.from_dict(x) for x in records(d.get("news"))),
            education=tuple(EducationEntry.from_dict(x) for x in records(d.get("education"))),
            employment=tuple(EmploymentEntry.from_dict(x) for x in records(d.get("employment"))),
            publications=tuple(Publication.from_dict(x) for x in records(d.get("publications"))),
        )
