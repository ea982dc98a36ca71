# site_check/crawler/fetcher.py
"""
Fetcher module: plain HTTP(S) GET of a single page over a shared aiohttp session.

No retries and no caching: each call is one request, and every failure is
reported to the caller as :class:`~site_check.errors.FetchError`.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_check.config import CheckerConfig
from site_check.crawler.models import PageData
from site_check.errors import FetchError
from site_check.logger import logger


def create_session(config: CheckerConfig) -> ClientSession:
    """Build the session shared by all checks of one run."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


class Fetcher:
    """Downloads pages, turning bad statuses and transport failures into FetchError."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData:
        logger.debug("GET %s", url)
        try:
            async with self.session.get(url) as resp:
                if not 200 <= resp.status <= 299:
                    raise FetchError(url, f"status code: {resp.status}", status=resp.status)
                text = await resp.text()
                return PageData(url, text, resp.status)
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "timed out") from exc
        except (ClientError, UnicodeDecodeError) as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc
