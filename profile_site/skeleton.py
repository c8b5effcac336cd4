from pathlib import Path
from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader

from profile_site.config import PAGE_SECTIONS, STYLESHEET_HREF

PAGES = tuple(PAGE_SECTIONS)

_CSS_PATH = Path(__file__).parent / "static" / "style.css"
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True)

def stylesheet() -> str:
    return _CSS_PATH.read_text(encoding="utf-8")

def render_skeleton(page_name: str, inline: bool = False) -> str:
    """Page skeleton → HTML.  If inline=True, embed CSS in a <style> tag."""
    css_inline = stylesheet() if inline else ""
    return env.get_template(page_name).render(
        page=page_name, inline_css=css_inline, stylesheet_href=STYLESHEET_HREF)

def parse_page(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html5lib")
