# site_check/crawler/models.py
"""
Data models for the SiteCheck fetcher.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PageData:
    """Holds the requested URL, response status and decoded body of a page."""

    url: str
    content: str
    status: int = 200
