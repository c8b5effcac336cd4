"""
profile-site: renders a personal/academic profile site from data/site.json.
"""

from profile_site.boot import Boot, BootResult, BootState, boot
from profile_site.build import build_site
from profile_site.loader import LoadError, load_site_data
from profile_site.schema_site import SiteData

__all__ = [
    "Boot",
    "BootResult",
    "BootState",
    "LoadError",
    "SiteData",
    "boot",
    "build_site",
    "load_site_data",
]
