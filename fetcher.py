import asyncio
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin

import aiohttp
from bs4 import BeautifulSoup, Tag

from config import HEADERS, TIMEOUT

logger = logging.getLogger("fetcher")


class FetchError(RuntimeError):
    pass


@dataclass
class Page:
    """Parsed HTML document together with the URL it was served from."""

    url: str
    soup: BeautifulSoup

    def abs_url(self, element: Tag, attr: str = "href") -> Optional[str]:
        """Resolve ``element[attr]`` against the page URL, ``None`` if empty."""
        value = (element.get(attr) or "").strip()
        if not value:
            return None
        return urljoin(self.url, value)


async def _fetch_async(url: str) -> tuple:
    timeout = aiohttp.ClientTimeout(total=TIMEOUT)
    async with aiohttp.ClientSession(
            headers=HEADERS,
            timeout=timeout,
    ) as session:
        async with session.get(url) as resp:
            resp.raise_for_status()
            return str(resp.url), await resp.text()


def fetch_html(url: str) -> tuple:
    """
    Blocking GET. Returns (final_url, body).
    """
    try:
        return asyncio.run(_fetch_async(url))
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise FetchError(f"fetch failed: {url} → {e}") from e


def parse_page(url: str, html: str) -> Page:
    return Page(url=url, soup=BeautifulSoup(html, "html.parser"))


def fetch(url: str) -> Page:
    logger.debug(f"GET {url}")
    final_url, html = fetch_html(url)
    return parse_page(final_url, html)
