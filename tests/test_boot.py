from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from profile_site import loader
from profile_site.boot import Boot, BootState, boot, show_error
from profile_site.loader import LoadError
from profile_site.schema_site import SiteData


def _error_visible(page: BeautifulSoup) -> bool:
    return "display: block" in page.find(id="errorBox").get("style", "")


def test_full_boot(page: BeautifulSoup, data_file: Path) -> None:
    result = Boot(page, "/index.html", data_file, today=lambda: date(2031, 5, 4)).run()

    assert result.ok
    assert result.state is BootState.DONE
    assert result.section == "home"
    assert result.data.person.name == "Ada Lovelace"
    assert page.find(id="personName").get_text() == "Ada Lovelace"
    assert [h.get_text() for h in page.select("#newsList .news-title")] == ["B", "A"]
    assert page.find(id="year").get_text() == "2031"
    assert page.select_one('nav a[aria-current="true"]')["data-nav"] == "home"
    assert not _error_visible(page)


def test_year_defaults_to_today(page: BeautifulSoup, data_file: Path) -> None:
    boot(page, "index.html", data_file)
    assert page.find(id="year").get_text() == str(date.today().year)


def test_failed_load_shows_error_and_renders_nothing(page: BeautifulSoup, caplog) -> None:
    rendered = []

    def failing_loader(source):
        raise LoadError("data/site.json", "HTTP 500")

    b = Boot(page, "/index.html", loader=failing_loader)
    b._render = lambda data: rendered.append(data)  # type: ignore[method-assign]
    with caplog.at_level(logging.ERROR, logger="profile_site.boot"):
        result = b.run()

    assert result.state is BootState.FAILED
    assert isinstance(result.error, LoadError)
    assert rendered == []
    assert _error_visible(page)
    assert page.find(id="personName").get_text() == ""
    assert page.find(id="newsList").contents == []
    assert page.find(id="year").get_text() == ""
    assert "boot failed" in caplog.text


def test_non_success_fetch_end_to_end(monkeypatch: pytest.MonkeyPatch, page: BeautifulSoup) -> None:
    class _Rsp:
        status_code = 503
        ok = False
        text = ""

    monkeypatch.setattr(loader.requests, "get", lambda *a, **k: _Rsp())
    result = boot(page, "/index.html", "https://example.org/data/site.json")

    assert result.state is BootState.FAILED
    assert _error_visible(page)
    assert page.select("#newsList .news-card") == []


def test_nav_runs_before_load(make_page) -> None:
    page = make_page("education.html")

    def failing_loader(source):
        raise LoadError("x", "down")

    Boot(page, "education.html", loader=failing_loader).run()
    assert page.select_one('nav a[aria-current="true"]')["data-nav"] == "education"


def test_runs_only_once(page: BeautifulSoup) -> None:
    b = Boot(page, "/", loader=lambda source: SiteData())
    assert b.run().ok
    with pytest.raises(RuntimeError):
        b.run()


def test_render_error_also_fails(page: BeautifulSoup) -> None:
    b = Boot(page, "/", loader=lambda source: SiteData(), today=lambda: None)  # type: ignore[arg-type,return-value]
    result = b.run()
    assert result.state is BootState.FAILED
    assert isinstance(result.error, AttributeError)
    assert _error_visible(page)


def test_show_error_keeps_other_declarations() -> None:
    page = BeautifulSoup('<div id="errorBox" style="color: red; display: none"></div>', "html5lib")
    show_error(page)
    style = page.find(id="errorBox")["style"]
    assert "color: red" in style
    assert "display: block" in style
    assert "none" not in style


def test_show_error_without_box() -> None:
    show_error(BeautifulSoup("<p></p>", "html5lib"))
