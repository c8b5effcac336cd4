"""
Site data loader.

One fetch per call, never cached: http(s) sources are requested with no-cache
headers, paths are re-read from disk. Any failure surfaces as LoadError.
"""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict

import requests

from profile_site import config
from profile_site.schema_site import SiteData

logger = logging.getLogger(__name__)

_NO_CACHE = {"Cache-Control": "no-cache", "Pragma": "no-cache", "Accept": "application/json"}


class LoadError(Exception):
    """The data document could not be fetched or parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to load {source}: {reason}")
        self.source = source
        self.reason = reason


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch_url(url: str) -> Any:
    try:
        rsp = requests.get(url, headers=_NO_CACHE, timeout=config.FETCH_TIMEOUT)
    except requests.RequestException as e:
        raise LoadError(url, str(e)) from e
    if not rsp.ok:
        raise LoadError(url, f"HTTP {rsp.status_code}")
    # JSON is UTF-8 whatever the Content-Type says; -sig drops a leading BOM
    rsp.encoding = "utf-8-sig"
    try:
        return rsp.json()
    except ValueError as e:
        raise LoadError(url, f"invalid JSON ({e})") from e


def _read_file(path: Path) -> Any:
    try:
        body = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(str(path), str(e)) from e
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise LoadError(str(path), f"invalid JSON ({e})") from e


def load_raw(source: str | Path | None = None) -> Dict[str, Any]:
    """Fetch and parse the data document, returning the decoded JSON object."""
    source = str(source or config.DATA_PATH)
    logger.debug("loading site data from %s", source)
    data = _fetch_url(source) if _is_url(source) else _read_file(Path(source))
    if not isinstance(data, dict):
        raise LoadError(source, f"expected a JSON object, got {type(data).__name__}")
    return data


def load_site_data(source: str | Path | None = None) -> SiteData:
    return SiteData.from_dict(load_raw(source))
