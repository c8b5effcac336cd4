"""
Boot sequence for one page view.

nav highlight → load data → header, news, education, employment, publications
→ footer year. The first failure aborts the rest, is logged, and turns the
page's #errorBox visible. A Boot runs once; there is no retry.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Callable

import cssutils
from bs4 import BeautifulSoup

from profile_site.builder import by_id, set_text
from profile_site.header import render_header
from profile_site.loader import load_site_data
from profile_site.nav import set_active_nav
from profile_site.news import render_news
from profile_site.publications import render_publications
from profile_site.schema_site import SiteData
from profile_site.timeline import render_education, render_employment

cssutils.log.setLevel(logging.CRITICAL)  # only inline style attributes are parsed here

logger = logging.getLogger(__name__)


class BootState(Enum):
    NOT_STARTED = "not started"
    LOADING = "loading"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


@dataclass
class BootResult:
    state: BootState
    section: str | None = None
    data: SiteData | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.state is BootState.DONE


def show_error(page: BeautifulSoup) -> None:
    """Make #errorBox visible, keeping whatever else its inline style says."""
    box = by_id(page, "errorBox")
    if box is None:
        return
    style = cssutils.parseStyle(box.get("style", ""))
    style.setProperty("display", "block")
    box["style"] = style.getCssText(separator=" ")


def set_year(page: BeautifulSoup, year: int) -> None:
    if (node := by_id(page, "year")) is not None:
        set_text(node, year)


class Boot:
    def __init__(self, page: BeautifulSoup, path: str | None,
                 source: str | Path | None = None,
                 loader: Callable[[str | Path | None], SiteData] = load_site_data,
                 today: Callable[[], date] = date.today):
        self.page = page
        self.path = path
        self.source = source
        self.loader = loader
        self.today = today
        self.state = BootState.NOT_STARTED

    def _render(self, data: SiteData) -> None:
        render_header(self.page, data.person)
        render_news(self.page, data.news)
        render_education(self.page, data.education)
        render_employment(self.page, data.employment)
        render_publications(self.page, data.publications, data.person)

    def run(self) -> BootResult:
        if self.state is not BootState.NOT_STARTED:
            raise RuntimeError(f"boot already ran (state: {self.state.value})")

        result = BootResult(state=self.state)
        try:
            result.section = set_active_nav(self.page, self.path)
            self.state = BootState.LOADING
            result.data = self.loader(self.source)
            self.state = BootState.RENDERING
            self._render(result.data)
            set_year(self.page, self.today().year)
            self.state = BootState.DONE
        except Exception as e:
            logger.exception("boot failed for %s while %s", self.path, self.state.value)
            self.state = BootState.FAILED
            result.error = e
            show_error(self.page)
        result.state = self.state
        return result


def boot(page: BeautifulSoup, path: str | None, source: str | Path | None = None) -> BootResult:
    return Boot(page, path, source).run()
