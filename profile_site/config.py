"""
Configuration settings for the profile-site renderer.

Paths for the data document and the build output can be overridden from the
environment (or a .env file). Everything else is a fixed presentation constant.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os

# Data document, relative to the site root, or an http(s) URL
DATA_PATH = os.getenv("SITE_DATA_PATH", "data/site.json")

# Where build_site() writes the populated pages
OUTPUT_DIR = os.getenv("SITE_OUTPUT_DIR", "dist")

# Seconds before an http fetch gives up; unset means wait indefinitely
_timeout = os.getenv("SITE_FETCH_TIMEOUT")
FETCH_TIMEOUT = float(_timeout) if _timeout else None

# Link construction
DOI_RESOLVER = "https://doi.org/"
DEFAULT_AVATAR = "assets/img/avatar.jpg"
STYLESHEET_HREF = "assets/css/style.css"

# Customize these tags anytime:
TOPIC_TAGS = ("NLP", "Machine Learning", "Deep Learning", "Data Science")

# Page filename → nav section key
HOME_KEY = "home"
PAGE_SECTIONS = {
    "index.html": "home",
    "education.html": "education",
    "publications.html": "publications",
    "employment.html": "employment",
}

NEWS_PLACEHOLDER = "No updates yet."


def section_for_page(filename: str) -> str:
    """Get the nav section key for a page filename."""
    return PAGE_SECTIONS.get(filename, HOME_KEY)
