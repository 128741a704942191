import re
from typing import Callable
from urllib.parse import unquote_plus

from config import SELECTORS, VIMEO_PLAYER_PATTERN
from fetcher import Page, fetch
from scraper.models import Result


class ExtractionError(RuntimeError):
    pass


class EmbedParser:
    """Resolves the Vimeo player URL hidden in a video page's embedly widget."""

    def __init__(self, logger, fetch_page: Callable[[str], Page] = fetch):
        self.logger = logger
        self.fetch_page = fetch_page

    def resolve(self, video_url: str) -> Result:
        try:
            page = self.fetch_page(video_url)
            return Result.success(self.extract_download_url(page))
        except Exception as e:
            self.logger.debug(f"download url not resolved for {video_url}: {e}")
            return Result.failure(str(e) or type(e).__name__)

    @staticmethod
    def extract_download_url(page: Page) -> str:
        embed = page.soup.select_one(SELECTORS["embed"])
        if embed is None:
            raise ExtractionError("embedly-embed не знайдено")

        src = embed.get("src") or ""
        if not src:
            raise ExtractionError("embed без src")

        # src=https://player.vimeo.com/video/417042475?app_id=...&url=https://vimeo.com/417042475&...
        return match_player_url(unquote_plus(src, encoding="utf-8", errors="replace"))


def match_player_url(text: str) -> str:
    match = re.search(VIMEO_PLAYER_PATTERN, text)
    if not match:
        raise ExtractionError("vimeo player url не знайдено")
    return match.group(0)
