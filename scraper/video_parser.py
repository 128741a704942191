from bs4 import Tag

from config import SELECTORS
from fetcher import Page
from scraper.embed_parser import EmbedParser, ExtractionError
from scraper.models import Result, Video
from utils import RetryPolicy, element_text


class VideoParser:
    def __init__(self, logger, embed_parser: EmbedParser, retry: RetryPolicy = None):
        self.logger = logger
        self.embed_parser = embed_parser
        self.retry = retry or RetryPolicy()

    def parse(self, element: Tag, page: Page) -> Result:
        """
        Turns one child of the show's videos container into a Video.
        A missing download url is not a failure, the video is kept with None.
        """
        try:
            link = element.select_one(SELECTORS["video_link"])
            if link is None:
                raise ExtractionError("no video link")

            title_el = link.select_one(SELECTORS["video_title"])
            if title_el is None:
                raise ExtractionError("no video title")

            url = page.abs_url(link)
            if not url:
                raise ExtractionError("video link without href")
        except ExtractionError as e:
            return Result.failure(str(e))

        resolved = self.retry.run(
            lambda: self.embed_parser.resolve(url),
            on_retry=self._on_retry,
        )

        return Result.success(Video(
            title=element_text(title_el),
            url=url,
            download_url=resolved.value if resolved.ok else None,
        ))

    def _on_retry(self, attempt: int, result: Result):
        self.logger.warning(
            f"download url failed ({result.error}), sleeping {self.retry.delay}s before attempt {attempt}"
        )
