"""site_check.crawler: Загрузка страниц по HTTP(S)."""

from site_check.crawler.fetcher import Fetcher, create_session
from site_check.crawler.models import PageData

__all__ = ["Fetcher", "PageData", "create_session"]
