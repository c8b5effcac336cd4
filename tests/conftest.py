from __future__ import annotations

import json
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from profile_site.schema_site import SiteData
from profile_site.skeleton import parse_page, render_skeleton


SAMPLE_DOC = {
    "person": {
        "name": "Ada Lovelace",
        "tagline": "Analyst",
        "intro": "Notes on the Analytical Engine.",
        "avatar": "img/ada.png",
        "email": "ada@example.org",
        "phone": "+44 20 0000 0000",
        "scholar": "https://scholar.google.com/citations?user=ada",
        "github": "https://github.com/ada",
    },
    "news": [
        {"date": "2024-01-01", "title": "A", "text": "first"},
        {"date": "2024-06-01", "title": "B", "text": "second", "link": "https://example.org/b"},
    ],
    "education": [
        {"range": "1830 – 1835", "degree": "Mathematics", "place": "Home tutoring", "details": ["De Morgan", "Somerville"]},
        {"range": "1828", "degree": "Flight studies", "place": "Ockham", "details": []},
    ],
    "employment": [
        {"range": "1842 – 1843", "title": "Translator", "place": "Taylor's Scientific Memoirs", "bullets": ["Note G"]},
        {"range": "1840", "title": "Correspondent", "place": "London"},
    ],
    "publications": [
        {"title": "Sketch", "venue": "Memoirs", "year": "2019", "doi": "10.1/xyz"},
        {"title": "Notes", "venue": "Memoirs", "year": "2020", "links": {"pdf": "notes.pdf", "code": "https://github.com/ada/g"}},
    ],
}


@pytest.fixture
def sample_doc() -> dict:
    return json.loads(json.dumps(SAMPLE_DOC))


@pytest.fixture
def site_data(sample_doc: dict) -> SiteData:
    return SiteData.from_dict(sample_doc)


@pytest.fixture
def make_page():
    """Parse a skeleton page by name (index.html, education.html, ...)."""
    def _make(name: str = "index.html") -> BeautifulSoup:
        return parse_page(render_skeleton(name))
    return _make


@pytest.fixture
def page(make_page) -> BeautifulSoup:
    return make_page("index.html")


@pytest.fixture
def data_file(tmp_path: Path, sample_doc: dict) -> Path:
    path = tmp_path / "site.json"
    path.write_text(json.dumps(sample_doc), encoding="utf-8")
    return path
