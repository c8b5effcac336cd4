"""
Static build: every skeleton page is booted against the data document and the
populated HTML is written to the output directory.

A page whose boot failed is still written, with its error box showing, the
same way a visitor would see it.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Iterable

from profile_site import config
from profile_site.boot import Boot, BootResult
from profile_site.skeleton import PAGES, parse_page, render_skeleton, stylesheet

logger = logging.getLogger(__name__)


def build_page(page_name: str, source: str | Path | None = None,
               inline: bool = False) -> tuple[str, BootResult]:
    """Render, boot and serialize one page. Returns (html, result)."""
    page = parse_page(render_skeleton(page_name, inline=inline))
    result = Boot(page, page_name, source).run()
    return str(page), result


def build_site(out_dir: str | Path | None = None, source: str | Path | None = None,
               pages: Iterable[str] = PAGES, inline: bool = False) -> Dict[str, BootResult]:
    out = Path(out_dir or config.OUTPUT_DIR)
    out.mkdir(parents=True, exist_ok=True)

    if not inline:
        css_path = out / config.STYLESHEET_HREF
        css_path.parent.mkdir(parents=True, exist_ok=True)
        css_path.write_text(stylesheet(), encoding="utf-8")

    results: Dict[str, BootResult] = {}
    for name in pages:
        html, result = build_page(name, source, inline=inline)
        (out / name).write_text(html, encoding="utf-8")
        if not result.ok:
            logger.warning("%s written with error box: %s", name, result.error)
        results[name] = result
    logger.info("built %d page(s) into %s", len(results), out)
    return results
