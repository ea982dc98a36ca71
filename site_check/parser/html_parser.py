"""HTML parsing for SiteCheck.

Turns a fetched body into a queryable document.  The document is a plain
:class:`bs4.BeautifulSoup` tree, so predicates get CSS selectors through
``select_one`` (soupsieve) and element text through ``get_text()``.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from bs4 import BeautifulSoup

from site_check.crawler.models import PageData

__all__: Sequence[str] = ("load_document",)

_PARSER = "html.parser"


def load_document(page: Union[PageData, str]) -> BeautifulSoup:
    """Parse raw HTML or a :class:`~site_check.crawler.models.PageData` body."""
    html = page.content if isinstance(page, PageData) else page
    return BeautifulSoup(html, _PARSER)
